"""Paddle entity driven by held direction intents.

The paddle slides a fixed distance per tick while a direction is held and
stays inside the board. Its x is the left edge.
"""

from typing import Tuple


class Paddle:
    """The player's paddle. Exactly one per session."""

    def __init__(
        self,
        board_width: float,
        top: float,
        width: float = 80.0,
        height: float = 10.0,
        speed: float = 7.0,
    ):
        """Initialize paddle, centered on the board.

        Args:
            board_width: Board width in pixels
            top: Y of the paddle's top edge
            width: Base paddle width
            height: Paddle height
            speed: Pixels moved per tick while a direction is held
        """
        self._board_width = board_width
        self._top = top
        self._base_width = width
        self._width = width
        self._height = height
        self._speed = speed
        self._x = (board_width - width) / 2

    @property
    def x(self) -> float:
        """Get paddle left edge X."""
        return self._x

    @property
    def width(self) -> float:
        """Get current paddle width."""
        return self._width

    @property
    def base_width(self) -> float:
        """Get width without power-ups."""
        return self._base_width

    @property
    def height(self) -> float:
        """Get paddle height."""
        return self._height

    @property
    def top(self) -> float:
        """Get paddle top Y."""
        return self._top

    @property
    def left(self) -> float:
        """Get paddle left edge X."""
        return self._x

    @property
    def right(self) -> float:
        """Get paddle right edge X."""
        return self._x + self._width

    @property
    def center_x(self) -> float:
        """Get paddle center X."""
        return self._x + self._width / 2

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get paddle bounding rectangle (x, y, width, height)."""
        return (self._x, self._top, self._width, self._height)

    def _clamp(self) -> None:
        self._x = max(0.0, min(self._board_width - self._width, self._x))

    def move(self, direction: int) -> None:
        """Move one tick's worth in direction (-1 left, 0 none, +1 right)."""
        if direction == 0:
            return
        self._x += direction * self._speed
        self._clamp()

    def set_width(self, width: float) -> None:
        """Change the width, keeping the left edge and staying on the board."""
        self._width = width
        self._clamp()

    def reset_width(self) -> None:
        """Restore the base width."""
        self.set_width(self._base_width)

    def reset(self) -> None:
        """Restore base width and center the paddle."""
        self._width = self._base_width
        self._x = (self._board_width - self._width) / 2
