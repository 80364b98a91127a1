"""Brickfall - brick-breaking arcade simulation.

The simulation core (`brickfall.game`) runs without pygame; the session
controller (`brickfall.session`) is the entry point for frontends.
"""

from brickfall.config import GameConfig, ConfigError, load_game_config
from brickfall.events import EventKind, GameEvent
from brickfall.game_state import GamePhase, PaddleIntent
from brickfall.session import GameSession

__version__ = "1.0.0"

__all__ = [
    'GameConfig',
    'ConfigError',
    'load_game_config',
    'EventKind',
    'GameEvent',
    'GamePhase',
    'PaddleIntent',
    'GameSession',
]
