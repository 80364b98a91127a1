"""Ball entity with per-tick velocity.

The ball bounces off walls, bricks and the paddle. The rebound angle off
the paddle depends on where it strikes.
"""

import math


class Ball:
    """A ball in play. Position and velocity are mutated in place."""

    def __init__(
        self,
        x: float,
        y: float,
        dx: float = 0.0,
        dy: float = 0.0,
        radius: float = 8.0,
    ):
        """Initialize ball.

        Args:
            x: Center X position
            y: Center Y position
            dx: X velocity (pixels/tick)
            dy: Y velocity (pixels/tick)
            radius: Ball radius
        """
        self._x = x
        self._y = y
        self._dx = dx
        self._dy = dy
        self._radius = radius

    @property
    def x(self) -> float:
        """Get ball center X."""
        return self._x

    @property
    def y(self) -> float:
        """Get ball center Y."""
        return self._y

    @property
    def dx(self) -> float:
        """Get X velocity."""
        return self._dx

    @property
    def dy(self) -> float:
        """Get Y velocity."""
        return self._dy

    @property
    def radius(self) -> float:
        """Get ball radius."""
        return self._radius

    @property
    def speed(self) -> float:
        """Get current ball speed."""
        return math.hypot(self._dx, self._dy)

    def move(self) -> None:
        """Advance one tick along the current velocity."""
        self._x += self._dx
        self._y += self._dy

    def set_position(self, x: float, y: float) -> None:
        """Place the ball."""
        self._x = x
        self._y = y

    def set_velocity(self, dx: float, dy: float) -> None:
        """Replace the velocity."""
        self._dx = dx
        self._dy = dy

    def bounce_horizontal(self) -> None:
        """Bounce off vertical surface (reverse X velocity)."""
        self._dx = -self._dx

    def bounce_vertical(self) -> None:
        """Bounce off horizontal surface (reverse Y velocity)."""
        self._dy = -self._dy

    def bounce_off_paddle(
        self,
        paddle_center: float,
        paddle_width: float,
        ball_speed: float,
        damping: float = 1.0,
    ) -> float:
        """Rebound upward, steered by where the paddle was struck.

        The vertical velocity is forced upward rather than mirrored. The
        horizontal velocity becomes `ball_speed * offset`, where offset is
        the strike position relative to the paddle center (-1 at the left
        edge, +1 at the right edge).

        Args:
            paddle_center: Paddle center X
            paddle_width: Paddle width
            ball_speed: Level ball speed
            damping: Extra factor on dy (the Slow power-up uses < 1)

        Returns:
            The strike offset used
        """
        offset = (self._x - paddle_center) / (paddle_width / 2)
        offset = max(-1.0, min(1.0, offset))
        self._dy = -abs(self._dy) * damping
        self._dx = ball_speed * offset
        return offset

    def scale_velocity(self, factor: float) -> None:
        """Multiply both velocity components by factor."""
        self._dx *= factor
        self._dy *= factor

    def __repr__(self) -> str:
        return (f"Ball(x={self._x:.1f}, y={self._y:.1f}, "
                f"dx={self._dx:.2f}, dy={self._dy:.2f})")
