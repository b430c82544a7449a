"""Region data model."""

from dataclasses import dataclass
from typing import Optional

from ..utils.geometry import Point


@dataclass
class Region:
    """A single cell of the territory.

    Regions are created once with the territory and only mutated afterwards.
    A region with no owner is neutral. The deposit never drops below zero:
    any decrement past zero clamps to zero.
    """

    location: Point
    owner: Optional[str] = None  # Player id or None (neutral)
    deposit: int = 0

    def __post_init__(self):
        """Validate region data after initialization."""
        if self.deposit < 0:
            raise ValueError(f"Invalid deposit: {self.deposit} (must be >= 0)")

    @property
    def is_neutral(self) -> bool:
        return self.owner is None

    def update_deposit(self, amount: int) -> int:
        """Add ``amount`` (possibly negative) to the deposit, clamping at zero.

        Returns:
            The new deposit
        """
        self.deposit = max(0, self.deposit + amount)
        return self.deposit

    def update_owner(self, owner: Optional[str]) -> None:
        self.owner = owner
