"""Player data model."""

from dataclasses import dataclass, field
from typing import Dict


@dataclass
class Player:
    """Economic actor controlling one crew.

    ``city_center`` and ``crew`` are indices into the game territory rather
    than Region objects; the territory owns the regions and the player only
    points into it.
    """

    id: str  # Unique player id, e.g. "p1"
    name: str  # Display name
    city_center: int  # Territory index of the home region
    crew: int = -1  # Territory index of the crew; defaults to the city center
    budget: int = 0
    identifiers: Dict[str, int] = field(
        default_factory=dict
    )  # Player-defined bindings usable in amount expressions

    def __post_init__(self):
        """Validate player data after initialization."""
        if not self.id:
            raise ValueError("Player id cannot be empty")
        if self.city_center < 0:
            raise ValueError(f"Invalid city_center index: {self.city_center}")
        if self.crew < 0:
            self.crew = self.city_center
        if self.budget < 0:
            raise ValueError(f"Invalid budget: {self.budget} (must be >= 0)")

    def update_budget(self, amount: int) -> int:
        """Add ``amount`` (possibly negative) to the budget, clamping at zero.

        Returns:
            The new budget
        """
        self.budget = max(0, self.budget + amount)
        return self.budget

    def relocate(self, index: int) -> None:
        self.city_center = index

    def identifier(self, name: str) -> int:
        """Look up a player-defined binding.

        Raises:
            KeyError: If the player never bound ``name``
        """
        return self.identifiers[name]

    def bind(self, name: str, value: int) -> None:
        self.identifiers[name] = value
