"""Engine error taxonomy.

Resource shortfalls are not errors: metered actions report them through
their boolean result. These exceptions signal misuse of the engine by its
host, which is a programming error rather than a game event.
"""

from typing import Optional


class EngineError(Exception):
    """Base class for engine failures."""


class TurnStateError(EngineError):
    """Raised when an operation is not legal in the current turn state."""

    def __init__(self, message: str, state: Optional[object] = None):
        """Initialize turn state error.

        Args:
            message: Human-readable error message
            state: TurnState the engine was in
        """
        self.state = state
        self.message = message
        super().__init__(message)


class InactivePlayerError(TurnStateError):
    """Raised when a player submits an action while the opponent is active."""

    def __init__(self, player_id: str, active_id: str, state: Optional[object] = None):
        self.player_id = player_id
        self.active_id = active_id
        super().__init__(f"It is {active_id}'s turn, not {player_id}'s", state)
