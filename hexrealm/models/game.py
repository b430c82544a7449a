"""Game state container."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..utils.geometry import Point, in_bounds
from .configuration import Configuration
from .player import Player
from .region import Region


class TurnState(Enum):
    AWAITING_TURN = "awaiting_turn"
    IN_TURN = "in_turn"
    GAME_OVER = "game_over"


@dataclass
class ActionRecord:
    """Record of one attempted metered action.

    Attributes:
        turn: Turn number the action was attempted in
        player_id: Acting player
        action: Short description, e.g. "collect 10"
        outcome: "rejected", "fee_only" or "applied"
        charged: Budget actually deducted
    """

    turn: int
    player_id: str
    action: str
    outcome: str
    charged: int


@dataclass
class Game:
    """Main game state container.

    Holds the territory arena (row-major, index = row * cols + col), both
    players, and the turn state. Only the engine mutates it.
    """

    config: Configuration
    territory: list[Region]
    players: list[Player]
    active_index: int = 0  # Index into players of the player whose turn it is
    turn_state: TurnState = TurnState.AWAITING_TURN
    turn: int = 1  # Current turn number, incremented by every end of turn
    winner: Optional[str] = None  # Player id, "draw", or None
    history: list[ActionRecord] = field(default_factory=list)  # Action log for display

    def __post_init__(self):
        """Validate the territory and players after initialization."""
        expected = self.config.rows * self.config.cols
        if len(self.territory) != expected:
            raise ValueError(
                f"Invalid territory: {len(self.territory)} regions for a "
                f"{self.config.rows}x{self.config.cols} grid (expected {expected})"
            )
        for index, region in enumerate(self.territory):
            if region.location != self.location_of(index):
                raise ValueError(
                    f"Region {index} is at {region.location}, expected {self.location_of(index)}"
                )

        if len(self.players) != 2:
            raise ValueError(f"Invalid players: {len(self.players)} (must be exactly 2)")
        if self.players[0].id == self.players[1].id:
            raise ValueError(f"Duplicate player id: {self.players[0].id}")
        for player in self.players:
            for index in (player.city_center, player.crew):
                if not 0 <= index < expected:
                    raise ValueError(f"Player {player.id} refers to region {index} outside the grid")
            if self.territory[player.city_center].owner != player.id:
                raise ValueError(f"City center of {player.id} must be owned by {player.id}")

        if self.active_index not in (0, 1):
            raise ValueError(f"Invalid active_index: {self.active_index} (must be 0 or 1)")

    # Arena lookups

    def location_of(self, index: int) -> Point:
        return Point(index % self.config.cols, index // self.config.cols)

    def contains(self, point: Point) -> bool:
        return in_bounds(point, self.config.rows, self.config.cols)

    def index_of(self, point: Point) -> int:
        """Territory index of ``point``.

        Raises:
            ValueError: If the point lies outside the grid
        """
        if not self.contains(point):
            raise ValueError(f"Point {point} is outside the {self.config.rows}x{self.config.cols} grid")
        return point.row * self.config.cols + point.col

    def region_at(self, point: Point) -> Region:
        return self.territory[self.index_of(point)]

    # Player lookups

    @property
    def active_player(self) -> Player:
        return self.players[self.active_index]

    @property
    def waiting_player(self) -> Player:
        return self.players[1 - self.active_index]

    def get_player(self, player_id: str) -> Player:
        for player in self.players:
            if player.id == player_id:
                return player
        raise KeyError(f"Unknown player id: {player_id}")

    def opponent_of(self, player_id: str) -> Player:
        return next(p for p in self.players if p.id != self.get_player(player_id).id)

    def owned_regions(self, player_id: str) -> list[Region]:
        return [region for region in self.territory if region.owner == player_id]
