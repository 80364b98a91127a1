"""Falling power-up pickup."""

from enum import Enum
from typing import Tuple

Color = Tuple[int, int, int]


class PowerUpKind(Enum):
    """Power-up kinds."""
    EXPAND = "expand"
    SLOW = "slow"
    EXTRA_LIFE = "extra_life"


class PowerUp:
    """A pickup drifting down from a destroyed brick."""

    def __init__(
        self,
        kind: PowerUpKind,
        x: float,
        y: float,
        color: Color,
        radius: float = 12.0,
        speed: float = 3.0,
    ):
        self._kind = kind
        self._x = x
        self._y = y
        self._color = color
        self._radius = radius
        self._speed = speed

    @property
    def kind(self) -> PowerUpKind:
        return self._kind

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def color(self) -> Color:
        return self._color

    @property
    def radius(self) -> float:
        return self._radius

    def fall(self) -> None:
        """Drift down one tick."""
        self._y += self._speed

    def __repr__(self) -> str:
        return f"PowerUp({self._kind.value}, x={self._x:.1f}, y={self._y:.1f})"
