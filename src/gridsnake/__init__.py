# src/gridsnake/__init__.py
"""Grid snake: simulation core plus a pygame front-end."""

from .config import Config
from .errors import ConfigurationError, DuplicateNameError, GridSnakeError
from .game import Game, GameState, Snapshot
from .geometry import Command, Direction, Point
from .menu import EndBehavior, Menu
from .session import Session

__all__ = [
    "Command",
    "Config",
    "ConfigurationError",
    "Direction",
    "DuplicateNameError",
    "EndBehavior",
    "Game",
    "GameState",
    "GridSnakeError",
    "Menu",
    "Point",
    "Session",
    "Snapshot",
]
