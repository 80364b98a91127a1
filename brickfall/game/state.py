"""Mutable state of one game session.

Everything the engine reads or writes lives here. The session controller
owns one instance and passes it to every engine call.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from brickfall.config import GameConfig
from brickfall.game_state import GamePhase, PaddleIntent

from .board import Board
from .combo import ComboTracker
from .effects import EffectTimer
from .entities.ball import Ball
from .entities.paddle import Paddle
from .entities.particle import Particle
from .entities.power_up import PowerUp


@dataclass
class SessionState:
    """Score, progression, phase and every entity in play."""
    paddle: Paddle
    combo: ComboTracker
    effects: EffectTimer

    score: int = 0
    high_score: int = 0
    lives: int = 3
    level: int = 1
    phase: GamePhase = GamePhase.READY
    message: str = ""
    message_remaining: int = 0       # 0 keeps the message until replaced
    transition_remaining: int = 0
    tick_count: int = 0

    balls: List[Ball] = field(default_factory=list)
    board: Board = field(default_factory=list)
    power_up: Optional[PowerUp] = None
    particles: List[Particle] = field(default_factory=list)
    intent: PaddleIntent = PaddleIntent.NONE

    final_score: Optional[int] = None
    new_high_score: bool = False

    @classmethod
    def create(cls, config: GameConfig, high_score: int = 0) -> 'SessionState':
        """Build an empty state sized for config."""
        paddle = Paddle(
            config.board_width,
            config.paddle_top,
            width=config.paddle_width,
            height=config.paddle_height,
            speed=config.paddle_speed,
        )
        combo = ComboTracker(
            threshold=config.combo_threshold,
            window=config.combo_window,
            bonus_per_combo=config.combo_bonus,
        )
        return cls(
            paddle=paddle,
            combo=combo,
            effects=EffectTimer(config),
            high_score=high_score,
            lives=config.starting_lives,
        )

    def set_message(self, text: str, ticks: int = 0) -> None:
        """Show a message, optionally clearing it after ticks."""
        self.message = text
        self.message_remaining = ticks
