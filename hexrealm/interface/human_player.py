"""Human player controller for CLI interaction.

This module provides the HumanPlayer class which reads text commands for
one player's turn and submits them to the game engine.
"""

import logging
from typing import Callable

from ..engine import EngineError, GameEngine
from ..models.action import ActionType
from .command_parser import USAGE, CommandParseError, CommandParser, ErrorType
from .renderer import MapRenderer

logger = logging.getLogger(__name__)


def build_bindings(engine: GameEngine) -> dict[str, int]:
    """Names usable in amount expressions for the active player.

    The player's own identifiers come first; the read-only game values
    override any identifier of the same name.
    """
    player = engine.active_player
    bindings = dict(player.identifiers)
    bindings.update(
        budget=player.budget,
        deposit=engine.crew.deposit,
        rows=engine.config.rows,
        cols=engine.config.cols,
        turn=engine.turn,
        maxdeposit=engine.config.max_deposit,
        interest=engine.config.interest_percentage,
    )
    return bindings


class HumanPlayer:
    """Human player controller class.

    Handles CLI interaction for human players: shows the map and status,
    reads commands until the player types 'done', and reports each result.
    """

    def __init__(
        self,
        player_id: str,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        """Initialize human player controller.

        Args:
            player_id: Player ID ("p1" or "p2")
            input_func: Source of command lines
            output: Sink for messages
        """
        self.player_id = player_id
        self.input = input_func
        self.output = output
        self.renderer = MapRenderer()
        self.parser = CommandParser()

    def _format_error_message(self, error_type: ErrorType, message: str) -> str:
        """Format error message with optional help.

        Args:
            error_type: Classification of the error
            message: Error message content

        Returns:
            Formatted error message string
        """
        formatted = f"Error: {message}"

        # Only Unknown Command errors show help hint
        if error_type == ErrorType.UNKNOWN_COMMAND:
            formatted += "\n\nAvailable commands: " + ", ".join(USAGE) + ", done, help, status, quit"
            formatted += "\nExample: attack upright 20"

        return formatted

    def show_status(self, engine: GameEngine) -> None:
        player = engine.game.get_player(self.player_id)
        center = engine.game.location_of(player.city_center)
        crew = engine.game.location_of(player.crew)
        owned = len(engine.owned_regions(self.player_id))

        self.output(f"{player.name} ({player.id}) - turn {engine.turn}")
        self.output(f"Budget: {player.budget}  Regions: {owned}  City center: {center}")
        self.output(f"Crew at {crew}, deposit {engine.game.territory[player.crew].deposit}")
        self.output(self.renderer.render_with_coords(engine.game, self.player_id))

    def play_turn(self, engine: GameEngine) -> None:
        """Read and execute commands until the player ends the turn.

        The caller is responsible for begin_turn/end_turn.

        Args:
            engine: Engine in the IN_TURN state with this player active

        Raises:
            SystemExit: If the player quits
        """
        self.show_status(engine)
        self.output("Enter commands (type 'done' to end your turn, 'help' for commands):")

        while True:
            try:
                command = self.input(f"[Turn {engine.turn}] [{self.player_id}] > ").strip()
            except EOFError:
                self.output("\nExiting game.")
                raise SystemExit(0)

            if not command:
                continue

            try:
                action = self.parser.parse(command, build_bindings(engine))
            except CommandParseError as e:
                self.output(self._format_error_message(e.error_type, e.message))
                continue
            except ValueError as e:
                signal = str(e)
                if signal == "HELP":
                    self._show_help()
                elif signal == "STATUS":
                    self.show_status(engine)
                elif signal == "QUIT":
                    self.output("\nExiting game. Thanks for playing!")
                    raise SystemExit(0)
                else:
                    self.output(self._format_error_message(ErrorType.SYNTAX_ERROR, signal))
                continue

            if action is None:
                break

            try:
                accepted = engine.execute(self.player_id, action)
            except (EngineError, ValueError) as e:
                logger.warning("Command '%s' failed: %s", command, e)
                self.output(self._format_error_message(ErrorType.VALIDATION_ERROR, str(e)))
                continue

            self._show_result(engine, action.type, accepted)

    def _show_result(self, engine: GameEngine, action_type: ActionType, accepted: bool) -> None:
        if action_type == ActionType.BIND:
            self.output("Stored.")
            return
        if action_type == ActionType.MOVE_CREW:
            self.output(f"Crew staged at {engine.crew.location}.")
            return

        record = engine.history[-1]
        if not accepted:
            self.output(f"Rejected: {record.action} (budget {engine.budget})")
        elif record.outcome == "fee_only":
            self.output(f"Fee only: {record.action} charged {record.charged} (budget {engine.budget})")
        else:
            self.output(f"Done: {record.action} charged {record.charged} (budget {engine.budget})")

    def _show_help(self) -> None:
        """Show command help."""
        self.output("\n=== Hex Realm - Command Help ===\n")
        for usage in USAGE.values():
            self.output(f"  {usage}")
        self.output("  done                          - End your turn")
        self.output("  status                        - Show budget and map")
        self.output("  quit                          - Exit the game")
        self.output("")
        self.output("Directions: up, upright, downright, down, downleft, upleft")
        self.output("Amounts are expressions over budget, deposit, rows, cols, turn,")
        self.output("maxdeposit, interest and names you stored with 'set'.")
        self.output("")
