"""Seedable RNG wrapper for deterministic territory generation."""

import random
from typing import Sequence, TypeVar

T = TypeVar("T")


class GameRNG:
    """Wrapper around ``random.Random`` so that a seed fully determines a map.

    Everything random in the game (currently only city-center placement)
    goes through this class.
    """

    def __init__(self, seed: int):
        """Initialize RNG with given seed.

        Args:
            seed: Integer seed for deterministic randomness
        """
        self.seed = seed
        self.rng = random.Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return random integer in range [a, b], inclusive."""
        return self.rng.randint(a, b)

    def sample(self, seq: Sequence[T], k: int) -> list[T]:
        """Choose ``k`` distinct elements from ``seq``.

        Args:
            seq: Population to draw from
            k: Number of elements, at most ``len(seq)``

        Returns:
            List of ``k`` elements in selection order
        """
        return self.rng.sample(list(seq), k)
