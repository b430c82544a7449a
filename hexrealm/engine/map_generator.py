"""Territory generation: builds a ready-to-play engine from a configuration."""

import logging

from ..models import Configuration, Player, Region
from ..utils import RNG_SEED_DEFAULT, GameRNG, Point
from .game_engine import GameEngine

logger = logging.getLogger(__name__)

PLAYER_IDS = ("p1", "p2")


def generate_territory(config: Configuration) -> list[Region]:
    """Create rows * cols neutral, empty regions in row-major order."""
    return [
        Region(location=Point(col, row))
        for row in range(config.rows)
        for col in range(config.cols)
    ]


def _place_city_centers(config: Configuration, rng: GameRNG) -> tuple[int, int]:
    """Pick two distinct territory indices for the city centers.

    With at least two columns, player 1 starts in the left half of the
    grid and player 2 in the right half. A single-column grid draws two
    distinct cells from the whole column.

    Raises:
        ValueError: If the grid has fewer than two regions
    """
    if config.region_count < 2:
        raise ValueError(f"A {config.rows}x{config.cols} grid cannot hold two city centers")

    if config.cols < 2:
        first, second = rng.sample(range(config.region_count), 2)
        return first, second

    half = config.cols // 2
    left = Point(rng.randint(0, half - 1), rng.randint(0, config.rows - 1))
    right = Point(rng.randint(config.cols - half, config.cols - 1), rng.randint(0, config.rows - 1))
    return left.row * config.cols + left.col, right.row * config.cols + right.col


def create_game(
    config: Configuration,
    seed: int = RNG_SEED_DEFAULT,
    names: tuple[str, str] = ("Player 1", "Player 2"),
) -> GameEngine:
    """Generate a new match.

    Both players start with ``initial_budget``; each city center is owned
    by its player and holds ``initial_deposit``. Every other region starts
    neutral and empty.

    Args:
        config: Match parameters
        seed: Seed for city-center placement
        names: Display names of player 1 and player 2

    Returns:
        Engine waiting for player 1's first turn
    """
    rng = GameRNG(seed)
    territory = generate_territory(config)
    centers = _place_city_centers(config, rng)

    players = []
    for player_id, name, center in zip(PLAYER_IDS, names, centers):
        region = territory[center]
        region.update_owner(player_id)
        region.update_deposit(config.initial_deposit)
        players.append(
            Player(id=player_id, name=name, city_center=center, budget=config.initial_budget)
        )
        logger.debug("%s city center at %s", player_id, region.location)

    return GameEngine(config, territory, players[0], players[1])
