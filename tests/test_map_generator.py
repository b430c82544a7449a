"""Tests for territory generation."""

import pytest

from hexrealm.engine import create_game
from hexrealm.engine.map_generator import generate_territory
from hexrealm.models import Configuration, TurnState
from hexrealm.utils import Point


class TestMapGenerator:
    """Test game creation."""

    def test_territory_row_major(self):
        config = Configuration(rows=3, cols=4)
        territory = generate_territory(config)

        assert len(territory) == 12
        assert territory[0].location == Point(0, 0)
        assert territory[5].location == Point(1, 1)
        assert all(region.is_neutral and region.deposit == 0 for region in territory)

    def test_create_game_initial_state(self):
        config = Configuration(rows=5, cols=6, initial_budget=300, initial_deposit=40)
        engine = create_game(config, seed=42, names=("Alice", "Bob"))
        game = engine.game

        assert engine.turn == 1
        assert engine.turn_state == TurnState.AWAITING_TURN
        assert engine.winner is None
        assert [p.name for p in game.players] == ["Alice", "Bob"]

        for player in game.players:
            center = game.territory[player.city_center]
            assert center.owner == player.id
            assert center.deposit == 40
            assert player.budget == 300
            assert player.crew == player.city_center
            assert engine.owned_regions(player.id) == [center]

    def test_city_centers_in_opposite_halves(self):
        config = Configuration(rows=5, cols=6)
        for seed in range(20):
            game = create_game(config, seed=seed).game
            p1, p2 = (game.location_of(p.city_center) for p in game.players)
            assert p1.col < 3
            assert p2.col >= 3

    def test_deterministic_with_seed(self):
        config = Configuration(rows=7, cols=7)
        first = create_game(config, seed=7).game
        second = create_game(config, seed=7).game

        assert [p.city_center for p in first.players] == [p.city_center for p in second.players]

    def test_single_column_grid(self):
        config = Configuration(rows=4, cols=1)
        game = create_game(config, seed=3).game
        centers = [p.city_center for p in game.players]
        assert centers[0] != centers[1]

    def test_too_small_grid(self):
        with pytest.raises(ValueError, match="cannot hold two city centers"):
            create_game(Configuration(rows=1, cols=1))
