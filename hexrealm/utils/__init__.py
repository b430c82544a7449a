"""Utility functions and constants for Hex Realm."""

from .constants import (
    ACTION_FEE,
    DEFAULT_COLS,
    DEFAULT_ROWS,
    RELOCATE_STEP_COST,
    RNG_SEED_DEFAULT,
)
from .expression import ExpressionError, evaluate
from .geometry import Direction, Point, hex_distance, neighbor, neighbors, ray, step
from .rng import GameRNG

__all__ = [
    "ACTION_FEE",
    "DEFAULT_COLS",
    "DEFAULT_ROWS",
    "RELOCATE_STEP_COST",
    "RNG_SEED_DEFAULT",
    "ExpressionError",
    "evaluate",
    "Direction",
    "Point",
    "hex_distance",
    "neighbor",
    "neighbors",
    "ray",
    "step",
    "GameRNG",
]
