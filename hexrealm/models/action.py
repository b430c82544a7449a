"""Action request data model."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..utils.geometry import Direction, Point


class ActionType(Enum):
    MOVE = "move"
    COLLECT = "collect"
    INVEST = "invest"
    ATTACK = "attack"
    RELOCATE = "relocate"
    MOVE_CREW = "crew"  # Zero-cost staging of the crew position
    BIND = "set"  # Store a player identifier


@dataclass
class Action:
    """A single request a host submits to the engine on a player's behalf.

    Actions are built by the command parser (or directly by tests and
    other hosts) and carried out by ``GameEngine.execute``.
    """

    type: ActionType
    direction: Optional[Direction] = None
    amount: int = 0
    target: Optional[Point] = None  # MOVE_CREW only
    name: Optional[str] = None  # BIND only

    def __post_init__(self):
        """Validate that each action type carries the fields it needs."""
        if self.type in (ActionType.MOVE, ActionType.ATTACK) and self.direction is None:
            raise ValueError(f"{self.type.value} requires a direction")
        if self.type == ActionType.MOVE_CREW and self.target is None:
            raise ValueError("crew requires a target point")
        if self.type == ActionType.BIND and not self.name:
            raise ValueError("set requires an identifier name")

    def describe(self) -> str:
        """Short human-readable form, e.g. ``attack up 20``."""
        parts = [self.type.value]
        if self.direction is not None:
            parts.append(self.direction.name.lower())
        if self.type in (ActionType.COLLECT, ActionType.INVEST, ActionType.ATTACK, ActionType.BIND):
            if self.name:
                parts.append(f"{self.name} =")
            parts.append(str(self.amount))
        if self.target is not None:
            parts.append(f"{self.target.col} {self.target.row}")
        return " ".join(parts)
