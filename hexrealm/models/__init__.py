"""Data models for Hex Realm."""

from .action import Action, ActionType
from .configuration import Configuration, ConfigurationError, load_configuration, parse_configuration
from .game import ActionRecord, Game, TurnState
from .player import Player
from .region import Region

__all__ = [
    "Action",
    "ActionType",
    "ActionRecord",
    "Configuration",
    "ConfigurationError",
    "Game",
    "Player",
    "Region",
    "TurnState",
    "load_configuration",
    "parse_configuration",
]
