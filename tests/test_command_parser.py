"""Tests for the text command parser."""

import pytest

from hexrealm.interface.command_parser import CommandParseError, CommandParser, ErrorType
from hexrealm.models import ActionType
from hexrealm.utils import Direction, Point


def test_parse_move():
    parser = CommandParser()

    action = parser.parse("move upleft")
    assert action.type == ActionType.MOVE
    assert action.direction == Direction.UP_LEFT


def test_parse_direction_spellings():
    """Underscores, dashes and case are ignored in direction names."""
    parser = CommandParser()

    assert parser.parse("move Down_Right").direction == Direction.DOWN_RIGHT
    assert parser.parse("move down-left").direction == Direction.DOWN_LEFT
    assert parser.parse("MOVE UP").direction == Direction.UP


def test_parse_collect_and_invest():
    parser = CommandParser()

    collect = parser.parse("collect 25")
    assert collect.type == ActionType.COLLECT
    assert collect.amount == 25

    invest = parser.parse("invest 40")
    assert invest.type == ActionType.INVEST
    assert invest.amount == 40


def test_parse_amount_expression_with_bindings():
    parser = CommandParser()

    action = parser.parse("invest budget / 4 + 1", {"budget": 100})
    assert action.amount == 26


def test_parse_attack():
    parser = CommandParser()

    action = parser.parse("attack upright 20")
    assert action.type == ActionType.ATTACK
    assert action.direction == Direction.UP_RIGHT
    assert action.amount == 20


def test_shoot_is_an_alias_for_attack():
    parser = CommandParser()

    action = parser.parse("shoot down 3 * 3")
    assert action.type == ActionType.ATTACK
    assert action.amount == 9


def test_parse_relocate():
    parser = CommandParser()

    assert parser.parse("relocate").type == ActionType.RELOCATE


def test_relocate_rejects_arguments():
    parser = CommandParser()

    with pytest.raises(CommandParseError) as exc_info:
        parser.parse("relocate up")
    assert exc_info.value.error_type == ErrorType.SYNTAX_ERROR


def test_parse_crew():
    parser = CommandParser()

    action = parser.parse("crew 2 3")
    assert action.type == ActionType.MOVE_CREW
    assert action.target == Point(2, 3)


def test_parse_set():
    parser = CommandParser()

    action = parser.parse("set reserve = budget - 50", {"budget": 80})
    assert action.type == ActionType.BIND
    assert action.name == "reserve"
    assert action.amount == 30


def test_set_reserved_name_rejected():
    parser = CommandParser()

    with pytest.raises(CommandParseError) as exc_info:
        parser.parse("set budget = 5")
    assert exc_info.value.error_type == ErrorType.VALIDATION_ERROR


def test_done_returns_none():
    parser = CommandParser()

    assert parser.parse("done") is None
    assert parser.parse("end") is None
    assert parser.parse("pass") is None


@pytest.mark.parametrize("command,signal", [("help", "HELP"), ("status", "STATUS"), ("quit", "QUIT")])
def test_special_commands_signal(command, signal):
    parser = CommandParser()

    with pytest.raises(ValueError, match=signal):
        parser.parse(command)


def test_unknown_command():
    parser = CommandParser()

    with pytest.raises(CommandParseError) as exc_info:
        parser.parse("teleport up")
    assert exc_info.value.error_type == ErrorType.UNKNOWN_COMMAND
    assert "teleport" in exc_info.value.message


def test_invalid_direction():
    parser = CommandParser()

    with pytest.raises(CommandParseError) as exc_info:
        parser.parse("move left")
    assert exc_info.value.error_type == ErrorType.SYNTAX_ERROR
    assert "Invalid direction" in exc_info.value.message


def test_missing_amount():
    parser = CommandParser()

    with pytest.raises(CommandParseError) as exc_info:
        parser.parse("collect")
    assert exc_info.value.error_type == ErrorType.SYNTAX_ERROR
    assert "collect <amount>" in exc_info.value.message


def test_attack_missing_amount():
    parser = CommandParser()

    with pytest.raises(CommandParseError) as exc_info:
        parser.parse("attack up")
    assert exc_info.value.error_type == ErrorType.SYNTAX_ERROR


def test_unbound_name_in_amount():
    parser = CommandParser()

    with pytest.raises(CommandParseError) as exc_info:
        parser.parse("invest savings")
    assert exc_info.value.error_type == ErrorType.VALIDATION_ERROR
    assert "savings" in exc_info.value.message


def test_division_by_zero_in_amount():
    parser = CommandParser()

    with pytest.raises(CommandParseError) as exc_info:
        parser.parse("collect 10 / 0")
    assert exc_info.value.error_type == ErrorType.VALIDATION_ERROR


def test_parse_multiple():
    parser = CommandParser()

    actions = parser.parse_multiple("move up; invest 5;; done; attack down 2")
    assert [a.type for a in actions] == [ActionType.MOVE, ActionType.INVEST, ActionType.ATTACK]


def test_parse_multiple_stops_on_error():
    parser = CommandParser()

    with pytest.raises(CommandParseError):
        parser.parse_multiple("move up; fly away")
