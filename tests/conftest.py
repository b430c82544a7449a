"""Shared fixtures: the 4x4 reference game.

Player 1 ("p1") has its city center at (0, 1), player 2 ("p2") at (3, 1).
Both start with an empty budget and every region starts empty.
"""

import pytest

from hexrealm.engine import GameEngine
from hexrealm.models import Configuration, Player, Region
from hexrealm.utils import Point


def make_config(**overrides) -> Configuration:
    values = dict(
        rows=4,
        cols=4,
        initial_plan_minutes=10,
        initial_plan_seconds=0,
        initial_budget=0,
        initial_deposit=0,
        revision_plan_minutes=10,
        revision_plan_seconds=0,
        revision_cost=10,
        max_deposit=1000,
        interest_percentage=1,
    )
    values.update(overrides)
    return Configuration(**values)


def make_territory(rows: int = 4, cols: int = 4) -> list[Region]:
    return [Region(location=Point(col, row)) for row in range(rows) for col in range(cols)]


def make_engine(config: Configuration = None, p1_center: int = 4, p2_center: int = 7) -> GameEngine:
    config = config or make_config()
    territory = make_territory(config.rows, config.cols)
    territory[p1_center].update_owner("p1")
    territory[p2_center].update_owner("p2")
    player1 = Player(id="p1", name="Alice", city_center=p1_center)
    player2 = Player(id="p2", name="Bob", city_center=p2_center)
    return GameEngine(config, territory, player1, player2)


@pytest.fixture
def config():
    return make_config()


@pytest.fixture
def engine(config):
    return make_engine(config)


@pytest.fixture
def territory(engine):
    return engine.game.territory


@pytest.fixture
def player1(engine):
    return engine.game.players[0]


@pytest.fixture
def player2(engine):
    return engine.game.players[1]


@pytest.fixture
def engine_factory():
    """Build reference-layout engines with configuration overrides."""

    def factory(**overrides) -> GameEngine:
        return make_engine(make_config(**overrides))

    return factory
