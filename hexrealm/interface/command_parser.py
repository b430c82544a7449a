"""Text command parser for human players.

This module parses commands like "attack upright budget/4" into Action
objects that the game engine can execute. Amounts are arithmetic
expressions evaluated against the bindings supplied by the caller.
"""

import re
from enum import Enum
from typing import Mapping, Optional

from ..models.action import Action, ActionType
from ..utils.expression import ExpressionError, evaluate
from ..utils.geometry import Direction, Point

DIRECTION_NAMES = "up, upright, downright, down, downleft, upleft"

USAGE = {
    "move": "move <direction>",
    "collect": "collect <amount>",
    "invest": "invest <amount>",
    "attack": "attack <direction> <amount>",
    "relocate": "relocate",
    "crew": "crew <col> <row>",
    "set": "set <name> = <amount>",
}

# Names the parser supplies itself; players may not rebind them
RESERVED_NAMES = frozenset(
    {"budget", "deposit", "rows", "cols", "turn", "maxdeposit", "interest"}
)


class ErrorType(Enum):
    """Classification of command input errors."""
    UNKNOWN_COMMAND = "unknown_command"
    SYNTAX_ERROR = "syntax_error"
    VALIDATION_ERROR = "validation_error"


class CommandParseError(Exception):
    """Raised when command parsing fails with classification."""

    def __init__(self, error_type: ErrorType, message: str):
        """Initialize parse error.

        Args:
            error_type: Classification of the error
            message: Human-readable error message
        """
        self.error_type = error_type
        self.message = message
        super().__init__(message)


class CommandParser:
    """Parse text commands into Actions."""

    def parse(self, command: str, bindings: Optional[Mapping[str, int]] = None) -> Optional[Action]:
        """Parse a command string into an Action.

        Supported formats:
        - "move <direction>"
        - "collect <amount>", "invest <amount>"
        - "attack <direction> <amount>" (or "shoot ...")
        - "relocate"
        - "crew <col> <row>"
        - "set <name> = <amount>"

        Special commands (return None):
        - "done" / "end" (end turn)

        Args:
            command: Command string to parse
            bindings: Names usable in amount expressions

        Returns:
            Action if parsed successfully, None for "done"

        Raises:
            ValueError: "HELP", "STATUS" or "QUIT" for those special commands
            CommandParseError: If the command is unknown or malformed
        """
        cmd = command.strip().lower()
        bindings = bindings or {}

        if cmd in ("done", "end", "pass"):
            return None

        if cmd in ("help", "h", "?"):
            raise ValueError("HELP")  # Special signal for help

        if cmd in ("status", "st"):
            raise ValueError("STATUS")  # Special signal for status

        if cmd in ("quit", "exit", "q"):
            raise ValueError("QUIT")  # Special signal for quit

        parts = cmd.split(None, 1)
        if not parts:
            raise CommandParseError(ErrorType.SYNTAX_ERROR, "Empty command")
        verb = parts[0]
        rest = parts[1] if len(parts) > 1 else ""

        if verb == "shoot":
            verb = "attack"

        if verb == "move":
            return Action(ActionType.MOVE, direction=self._parse_direction(rest, verb))
        if verb in ("collect", "invest"):
            amount = self._parse_amount(rest, bindings, verb)
            return Action(ActionType(verb), amount=amount)
        if verb == "attack":
            return self._parse_attack(rest, bindings)
        if verb == "relocate":
            if rest:
                raise CommandParseError(
                    ErrorType.SYNTAX_ERROR,
                    f"Syntax error: relocate takes no arguments\nCorrect format: {USAGE['relocate']}",
                )
            return Action(ActionType.RELOCATE)
        if verb == "crew":
            return self._parse_crew(rest)
        if verb == "set":
            return self._parse_set(rest, bindings)

        raise CommandParseError(ErrorType.UNKNOWN_COMMAND, f"Unknown command: '{verb}'")

    def _parse_direction(self, text: str, verb: str) -> Direction:
        if not text.strip():
            raise CommandParseError(
                ErrorType.SYNTAX_ERROR,
                f"Syntax error: missing direction\nCorrect format: {USAGE[verb]}",
            )
        try:
            return Direction.parse(text)
        except ValueError:
            raise CommandParseError(
                ErrorType.SYNTAX_ERROR,
                f"Invalid direction: '{text.strip()}' (expected one of {DIRECTION_NAMES})",
            )

    def _parse_amount(self, text: str, bindings: Mapping[str, int], verb: str) -> int:
        if not text.strip():
            raise CommandParseError(
                ErrorType.SYNTAX_ERROR,
                f"Syntax error: missing amount\nCorrect format: {USAGE[verb]}",
            )
        try:
            return evaluate(text, bindings)
        except ExpressionError as e:
            raise CommandParseError(ErrorType.VALIDATION_ERROR, f"Invalid amount: {e}") from e

    def _parse_attack(self, rest: str, bindings: Mapping[str, int]) -> Action:
        parts = rest.split(None, 1)
        if len(parts) < 2:
            raise CommandParseError(
                ErrorType.SYNTAX_ERROR,
                f"Syntax error: attack needs a direction and an amount\nCorrect format: {USAGE['attack']}",
            )
        direction = self._parse_direction(parts[0], "attack")
        amount = self._parse_amount(parts[1], bindings, "attack")
        return Action(ActionType.ATTACK, direction=direction, amount=amount)

    def _parse_crew(self, rest: str) -> Action:
        match = re.fullmatch(r"(\d+)\s+(\d+)", rest.strip())
        if not match:
            raise CommandParseError(
                ErrorType.SYNTAX_ERROR,
                f"Syntax error: invalid position\nCorrect format: {USAGE['crew']}",
            )
        return Action(ActionType.MOVE_CREW, target=Point(int(match.group(1)), int(match.group(2))))

    def _parse_set(self, rest: str, bindings: Mapping[str, int]) -> Action:
        match = re.fullmatch(r"([a-z_][a-z0-9_]*)\s*=\s*(.+)", rest.strip())
        if not match:
            raise CommandParseError(
                ErrorType.SYNTAX_ERROR,
                f"Syntax error: invalid assignment\nCorrect format: {USAGE['set']}",
            )
        name = match.group(1)
        if name in RESERVED_NAMES:
            raise CommandParseError(
                ErrorType.VALIDATION_ERROR, f"'{name}' is read-only and cannot be set"
            )
        amount = self._parse_amount(match.group(2), bindings, "set")
        return Action(ActionType.BIND, name=name, amount=amount)

    def parse_multiple(self, command: str, bindings: Optional[Mapping[str, int]] = None) -> list[Action]:
        """Parse several commands separated by semicolons.

        Bindings are fixed for the whole line; amounts are not re-evaluated
        after earlier commands run.

        Raises:
            CommandParseError: If any command is invalid
        """
        actions = []
        for part in command.split(";"):
            part = part.strip()
            if not part:
                continue
            action = self.parse(part, bindings)
            if action is not None:
                actions.append(action)
        return actions
