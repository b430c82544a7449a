"""Game engine components."""

from .errors import EngineError, InactivePlayerError, TurnStateError
from .game_engine import GameEngine
from .map_generator import create_game
from .metering import MeteredAction, MeterResult, Outcome, meter

__all__ = [
    "EngineError",
    "InactivePlayerError",
    "TurnStateError",
    "GameEngine",
    "create_game",
    "MeteredAction",
    "MeterResult",
    "Outcome",
    "meter",
]
