"""Tests for the game orchestrator turn loop."""

from unittest.mock import Mock

from game import GameOrchestrator


def test_orchestrator_alternates_players(engine):
    """Each controller plays only on its own turns until someone is eliminated."""
    calls = []

    def p1_turn(eng):
        calls.append(eng.active_player.id)
        if len(calls) >= 3:
            # Surrender: give up the city center
            eng.game.territory[eng.active_player.city_center].update_owner(None)

    def p2_turn(eng):
        calls.append(eng.active_player.id)

    p1 = Mock()
    p1.play_turn = Mock(side_effect=p1_turn)
    p2 = Mock()
    p2.play_turn = Mock(side_effect=p2_turn)

    result = GameOrchestrator(engine, p1, p2).run()

    assert calls == ["p1", "p2", "p1"]
    assert result.is_game_over()
    assert result.winner == "p2"
    assert p1.play_turn.call_count == 2
    assert p2.play_turn.call_count == 1


def test_orchestrator_announces_winner(engine, capsys):
    p1 = Mock()
    p1.play_turn = Mock(side_effect=lambda eng: eng.game.territory[7].update_owner(None))
    p2 = Mock()

    GameOrchestrator(engine, p1, p2).run()

    captured = capsys.readouterr()
    assert "Alice (p1) wins after 1 turns!" in captured.out
    p2.play_turn.assert_not_called()
