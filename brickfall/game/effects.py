"""Timed power-up effects.

Expand widens the paddle and Slow scales every ball's velocity down. Both
last a fixed number of ticks and are reverted by `tick()` when the count
runs out. Only one timed effect is active at a time: activating another
reverts the running one first, then applies the new one with a fresh
timer. ExtraLife has no timed part and is handled by the engine.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from brickfall.config import GameConfig
from brickfall.logging import get_logger

from .entities.ball import Ball
from .entities.paddle import Paddle
from .entities.power_up import PowerUpKind

log = get_logger('effects')

TIMED_KINDS = (PowerUpKind.EXPAND, PowerUpKind.SLOW)


@dataclass
class ActiveEffect:
    """The timed effect currently in force."""
    kind: PowerUpKind
    remaining: int


class EffectTimer:
    """Applies, counts down and reverts timed power-up effects."""

    def __init__(self, config: GameConfig):
        self._config = config
        self._active: Optional[ActiveEffect] = None

    @property
    def active(self) -> Optional[ActiveEffect]:
        return self._active

    @property
    def slow_active(self) -> bool:
        return self._active is not None and self._active.kind == PowerUpKind.SLOW

    @property
    def speed_scale(self) -> float:
        """Velocity factor for balls spawned while the effect runs."""
        return self._config.slow_factor if self.slow_active else 1.0

    def activate(self, kind: PowerUpKind, paddle: Paddle, balls: Iterable[Ball]) -> None:
        """Start a timed effect, overriding any running one.

        Args:
            kind: EXPAND or SLOW
            paddle: The session paddle
            balls: Balls currently in play

        Raises:
            ValueError: If kind has no timed effect
        """
        if kind not in TIMED_KINDS:
            raise ValueError(f"{kind.value} is not a timed effect")

        balls = list(balls)
        if self._active is not None:
            log.debug("%s overrides active %s", kind.value, self._active.kind.value)
            self.revert(paddle, balls)

        if kind == PowerUpKind.EXPAND:
            paddle.set_width(paddle.base_width * self._config.expand_factor)
            ticks = self._config.expand_ticks
        else:
            for ball in balls:
                ball.scale_velocity(self._config.slow_factor)
                log.trace("Ball slowed to %.2f px/tick", ball.speed)
            ticks = self._config.slow_ticks

        self._active = ActiveEffect(kind=kind, remaining=ticks)
        log.info("Power-up %s active for %d ticks", kind.value, ticks)

    def tick(self, paddle: Paddle, balls: Iterable[Ball]) -> Optional[PowerUpKind]:
        """Count down one tick, reverting the effect when it runs out.

        Returns:
            The kind that expired this tick, or None
        """
        if self._active is None:
            return None

        self._active.remaining -= 1
        if self._active.remaining > 0:
            return None

        kind = self._active.kind
        self.revert(paddle, balls)
        log.info("Power-up %s expired", kind.value)
        return kind

    def revert(self, paddle: Paddle, balls: Iterable[Ball]) -> None:
        """Undo the active effect (no-op if none)."""
        if self._active is None:
            return

        if self._active.kind == PowerUpKind.EXPAND:
            paddle.reset_width()
        else:
            for ball in balls:
                ball.scale_velocity(1 / self._config.slow_factor)

        self._active = None

    def clear(self) -> None:
        """Forget the active effect without reverting (entities are being rebuilt)."""
        self._active = None
