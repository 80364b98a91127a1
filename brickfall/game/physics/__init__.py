"""Brickfall collision predicates."""

from .collision import (
    ball_intersects_rect,
    ball_hits_paddle,
    power_up_hits_paddle,
    crosses_side_wall,
    crosses_top_wall,
    exits_bottom,
)

__all__ = [
    'ball_intersects_rect',
    'ball_hits_paddle',
    'power_up_hits_paddle',
    'crosses_side_wall',
    'crosses_top_wall',
    'exits_bottom',
]
