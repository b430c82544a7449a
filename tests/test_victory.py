"""Tests for elimination checking."""

from hexrealm.engine.victory import check_victory


def test_no_winner_while_both_own_regions(engine):
    assert check_victory(engine.game) is False
    assert engine.game.winner is None


def test_p1_wins_when_p2_owns_nothing(engine, territory):
    territory[7].update_owner(None)

    assert check_victory(engine.game) is True
    assert engine.game.winner == "p1"


def test_p2_wins_when_p1_owns_nothing(engine, territory):
    territory[4].update_owner(None)

    assert check_victory(engine.game) is True
    assert engine.game.winner == "p2"


def test_draw_when_both_eliminated(engine, territory):
    territory[4].update_owner(None)
    territory[7].update_owner(None)

    assert check_victory(engine.game) is True
    assert engine.game.winner == "draw"


def test_city_center_loss_alone_is_not_elimination(engine, territory):
    """A player keeping any region stays in the game."""
    territory[7].update_owner(None)
    territory[15].update_owner("p2")

    assert check_victory(engine.game) is False
    assert engine.game.winner is None
