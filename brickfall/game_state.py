"""Session phases for Brickfall.

States:
    READY: Session created, start() not yet called
    PLAYING: Active simulation
    PAUSED: Manual pause, or waiting for input after a lost ball
    LEVEL_TRANSITION: Timed "Level Up" message before the next board
    GAME_OVER: All lives lost (terminal until restart)
    VICTORY: All levels cleared (terminal until restart)
"""
from enum import Enum


class GamePhase(Enum):
    """Top-level session state."""
    READY = "ready"
    PLAYING = "playing"
    PAUSED = "paused"
    LEVEL_TRANSITION = "level_transition"
    GAME_OVER = "game_over"
    VICTORY = "victory"

    @property
    def is_terminal(self) -> bool:
        """True for phases that only restart() can leave."""
        return self in (GamePhase.GAME_OVER, GamePhase.VICTORY)


class PaddleIntent(Enum):
    """Held paddle direction from the input layer."""
    NONE = 0
    LEFT = -1
    RIGHT = 1
