"""Game engine: the turn state machine and the player-facing method surface.

The engine owns the Game (territory, players, turn state) and is the only
thing allowed to mutate it. A host drives it like this:

    engine.begin_turn()
    engine.move(Direction.UP)
    engine.collect(10)
    engine.end_turn()

Metered actions (move, collect, invest, attack, relocate) are legal only
between begin_turn and end_turn; outside that window they raise
TurnStateError. Their boolean result separates "rejected, nothing
changed" (False) from "accepted, fee charged" (True).
"""

import logging
from typing import Iterable, Optional

from ..models.action import Action, ActionType
from ..models.configuration import Configuration
from ..models.game import ActionRecord, Game, TurnState
from ..models.player import Player
from ..models.region import Region
from ..utils.geometry import Direction, Point
from . import actions, queries
from .errors import InactivePlayerError, TurnStateError
from .interest import process_interest
from .metering import MeterResult
from .victory import check_victory

logger = logging.getLogger(__name__)


class GameEngine:
    """Authoritative rules engine for one match.

    Not thread-safe: hosts that share an engine between threads must hold
    their own lock around every call.
    """

    def __init__(
        self,
        config: Configuration,
        territory: Iterable[Region],
        player1: Player,
        player2: Player,
    ):
        """Initialize the engine.

        Args:
            config: Match parameters
            territory: rows * cols regions in row-major order
            player1: Player who moves first; its city center must already be owned by it
            player2: Second player, same requirement

        Raises:
            ValueError: If the territory or players are inconsistent
        """
        self.game = Game(config=config, territory=list(territory), players=[player1, player2])

    # =========================================================================
    # STATE ACCESSORS
    # =========================================================================

    @property
    def config(self) -> Configuration:
        return self.game.config

    @property
    def turn_state(self) -> TurnState:
        return self.game.turn_state

    @property
    def turn(self) -> int:
        return self.game.turn

    @property
    def winner(self) -> Optional[str]:
        return self.game.winner

    @property
    def active_player(self) -> Player:
        return self.game.active_player

    @property
    def crew(self) -> Region:
        """Region the active player's crew stands on."""
        return self.game.territory[self.game.active_player.crew]

    @property
    def budget(self) -> int:
        return self.game.active_player.budget

    @property
    def history(self) -> list[ActionRecord]:
        return self.game.history

    def region_at(self, point: Point) -> Region:
        return self.game.region_at(point)

    def owned_regions(self, player_id: str) -> list[Region]:
        return self.game.owned_regions(player_id)

    def is_game_over(self) -> bool:
        return self.game.turn_state == TurnState.GAME_OVER

    # =========================================================================
    # TURN STATE MACHINE
    # =========================================================================

    def begin_turn(self) -> Player:
        """Start the active player's turn with its crew on its city center.

        Returns:
            The player whose turn it is

        Raises:
            TurnStateError: If a turn is already running or the game is over
        """
        state = self.game.turn_state
        if state != TurnState.AWAITING_TURN:
            raise TurnStateError(f"Cannot begin a turn while {state.value}", state)

        player = self.game.active_player
        player.crew = player.city_center
        self.game.turn_state = TurnState.IN_TURN
        logger.info("Turn %d: %s (budget %d)", self.game.turn, player.id, player.budget)
        return player

    def end_turn(self) -> None:
        """Finish the active turn.

        Applies interest to every region, hands the turn to the other
        player, and ends the game if either player owns no region.

        Raises:
            TurnStateError: If no turn is running
        """
        self._require_turn("end_turn")

        accrued = process_interest(self.game)
        logger.debug("Interest accrued: %d", accrued)

        self.game.turn += 1
        self.game.active_index = 1 - self.game.active_index
        self.game.turn_state = TurnState.AWAITING_TURN

        if check_victory(self.game):
            self.game.turn_state = TurnState.GAME_OVER
            logger.info("Game over after turn %d: winner %s", self.game.turn - 1, self.game.winner)

    def check_game_over(self) -> bool:
        """Run the elimination check now, outside the end-of-turn flow.

        Returns:
            True if the game is over
        """
        if self.is_game_over():
            return True
        if check_victory(self.game):
            self.game.turn_state = TurnState.GAME_OVER
            logger.info("Game over: winner %s", self.game.winner)
            return True
        return False

    def _require_turn(self, operation: str) -> None:
        state = self.game.turn_state
        if state != TurnState.IN_TURN:
            raise TurnStateError(f"{operation} is only legal during a turn (state: {state.value})", state)

    def _record(self, result: MeterResult, description: str) -> bool:
        player = self.game.active_player
        self.game.history.append(
            ActionRecord(
                turn=self.game.turn,
                player_id=player.id,
                action=description,
                outcome=result.outcome.value,
                charged=result.charged,
            )
        )
        logger.debug(
            "%s %s: %s (charged %d, budget %d)",
            player.id,
            description,
            result.outcome.value,
            result.charged,
            player.budget,
        )
        return result.success

    # =========================================================================
    # METERED ACTIONS
    # =========================================================================

    def move(self, direction: Direction) -> bool:
        self._require_turn("move")
        return self._record(actions.move(self.game, direction), f"move {direction.name.lower()}")

    def collect(self, amount: int) -> bool:
        self._require_turn("collect")
        return self._record(actions.collect(self.game, amount), f"collect {amount}")

    def invest(self, amount: int) -> bool:
        self._require_turn("invest")
        return self._record(actions.invest(self.game, amount), f"invest {amount}")

    def attack(self, direction: Direction, amount: int) -> bool:
        self._require_turn("attack")
        return self._record(
            actions.attack(self.game, direction, amount),
            f"attack {direction.name.lower()} {amount}",
        )

    def relocate(self) -> bool:
        self._require_turn("relocate")
        return self._record(actions.relocate(self.game), "relocate")

    def relocation_fee(self) -> int:
        return actions.relocation_fee(self.game)

    # =========================================================================
    # ZERO-COST OPERATIONS AND QUERIES
    # =========================================================================

    def move_crew_to(self, point: Point) -> None:
        """Stage the active crew on ``point`` at no cost.

        Raises:
            ValueError: If the point is outside the grid
        """
        self.game.active_player.crew = self.game.index_of(point)

    def nearby(self, direction: Direction) -> int:
        return queries.nearby(self.game, direction)

    def opponent_signal(self) -> int:
        return queries.opponent_signal(self.game)

    # =========================================================================
    # HOST DISPATCH
    # =========================================================================

    def execute(self, player_id: str, action: Action) -> bool:
        """Carry out an action request on behalf of ``player_id``.

        Args:
            player_id: Player submitting the request
            action: The request

        Returns:
            The action's result; staging and bindings always succeed

        Raises:
            TurnStateError: If no turn is running
            InactivePlayerError: If ``player_id`` is not the active player
        """
        self._require_turn(action.type.value)
        active = self.game.active_player
        if player_id != active.id:
            logger.warning("Rejected %s from inactive player %s", action.describe(), player_id)
            raise InactivePlayerError(player_id, active.id, self.game.turn_state)

        if action.type == ActionType.MOVE:
            return self.move(action.direction)
        elif action.type == ActionType.COLLECT:
            return self.collect(action.amount)
        elif action.type == ActionType.INVEST:
            return self.invest(action.amount)
        elif action.type == ActionType.ATTACK:
            return self.attack(action.direction, action.amount)
        elif action.type == ActionType.RELOCATE:
            return self.relocate()
        elif action.type == ActionType.MOVE_CREW:
            self.move_crew_to(action.target)
            return True
        else:
            active.bind(action.name, action.amount)
            return True
