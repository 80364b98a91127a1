"""Brick entity.

Three kinds: Normal (one hit), Multi (several hits, recolored once
damaged) and Indestructible (absorbs every hit, excluded from the win
condition).
"""

import math
from enum import Enum
from typing import Tuple

Color = Tuple[int, int, int]


class BrickKind(Enum):
    """Brick kinds."""
    NORMAL = "normal"
    MULTI = "multi"
    INDESTRUCTIBLE = "indestructible"


class Brick:
    """A brick in the level grid.

    A brick leaves the alive state exactly once, when its last hit is
    taken. Hits on a dead or indestructible brick change nothing.
    """

    def __init__(
        self,
        col: int,
        row: int,
        x: float,
        y: float,
        width: float,
        height: float,
        kind: BrickKind = BrickKind.NORMAL,
        hits: float = 1,
        color: Color = (230, 126, 34),
    ):
        """Initialize brick.

        Args:
            col: Grid column
            row: Grid row
            x: Left edge X position
            y: Top edge Y position
            width: Brick width
            height: Brick height
            kind: Brick kind
            hits: Hits required to destroy (math.inf for indestructible)
            color: Display color
        """
        self._col = col
        self._row = row
        self._x = x
        self._y = y
        self._width = width
        self._height = height
        self._kind = kind
        self._hits_left = math.inf if kind == BrickKind.INDESTRUCTIBLE else hits
        self._color = color
        self._alive = True

    @property
    def col(self) -> int:
        return self._col

    @property
    def row(self) -> int:
        return self._row

    @property
    def grid_position(self) -> Tuple[int, int]:
        """Get grid position (col, row)."""
        return (self._col, self._row)

    @property
    def x(self) -> float:
        """Get left edge X position."""
        return self._x

    @property
    def y(self) -> float:
        """Get top edge Y position."""
        return self._y

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def center_x(self) -> float:
        return self._x + self._width / 2

    @property
    def center_y(self) -> float:
        return self._y + self._height / 2

    @property
    def kind(self) -> BrickKind:
        return self._kind

    @property
    def hits_left(self) -> float:
        """Remaining hits (math.inf for indestructible bricks)."""
        return self._hits_left

    @property
    def color(self) -> Color:
        return self._color

    @property
    def alive(self) -> bool:
        return self._alive

    @property
    def indestructible(self) -> bool:
        return self._kind == BrickKind.INDESTRUCTIBLE

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get bounding rectangle (x, y, width, height)."""
        return (self._x, self._y, self._width, self._height)

    def hit(self, damaged_color: Color) -> bool:
        """Apply one hit.

        Args:
            damaged_color: Color to show when the brick survives the hit

        Returns:
            True if this hit destroyed the brick
        """
        if not self._alive or self.indestructible:
            return False

        self._hits_left -= 1
        if self._hits_left <= 0:
            self._hits_left = 0
            self._alive = False
            return True

        self._color = damaged_color
        return False

    def __repr__(self) -> str:
        return (f"Brick({self._kind.value}, col={self._col}, row={self._row}, "
                f"hits_left={self._hits_left}, alive={self._alive})")
