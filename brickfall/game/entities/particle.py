"""Cosmetic particles spawned on brick hits."""

import random
from typing import List, Tuple

Color = Tuple[int, int, int]


class Particle:
    """A fading square drifting in a random direction."""

    __slots__ = ('x', 'y', 'dx', 'dy', 'alpha', 'color')

    def __init__(self, x: float, y: float, dx: float, dy: float, color: Color):
        self.x = x
        self.y = y
        self.dx = dx
        self.dy = dy
        self.alpha = 1.0
        self.color = color

    def update(self, fade: float) -> None:
        self.x += self.dx
        self.y += self.dy
        self.alpha -= fade

    @property
    def faded(self) -> bool:
        return self.alpha <= 0


def burst(
    x: float,
    y: float,
    color: Color,
    count: int,
    rng: random.Random,
) -> List[Particle]:
    """Create count particles at (x, y) with velocities in [-1, 1)."""
    return [
        Particle(x, y, (rng.random() - 0.5) * 2, (rng.random() - 0.5) * 2, color)
        for _ in range(count)
    ]
