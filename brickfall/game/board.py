"""Board generator for Brickfall.

Builds the brick grid for a level. The grid grows by one row and one
column per level up to `growth_cap` extra, then plateaus. Each cell's kind
comes from an independent weighted draw.
"""

import random
from typing import Iterator, List, Optional, Tuple

from brickfall.config import GameConfig

from .entities.brick import Brick, BrickKind

Board = List[List[Brick]]


def grid_dimensions(level: int, config: GameConfig) -> Tuple[int, int]:
    """Get (rows, cols) for a level."""
    growth = min(max(level - 1, 0), config.growth_cap)
    return config.base_rows + growth, config.base_cols + growth


def draw_kind(rng: random.Random, config: GameConfig) -> BrickKind:
    """Pick a brick kind with a single uniform draw."""
    roll = rng.random()
    if roll < config.indestructible_chance:
        return BrickKind.INDESTRUCTIBLE
    if roll < config.indestructible_chance + config.multi_chance:
        return BrickKind.MULTI
    return BrickKind.NORMAL


def brick_position(col: int, row: int, config: GameConfig) -> Tuple[float, float]:
    """Get the pixel position (left, top) of a grid cell."""
    x = col * (config.brick_width + config.brick_padding) + config.brick_offset_left
    y = row * (config.brick_height + config.brick_padding) + config.brick_offset_top
    return x, y


def make_brick(
    col: int,
    row: int,
    kind: BrickKind,
    level: int,
    config: GameConfig,
) -> Brick:
    """Create a brick of the given kind at a grid cell."""
    x, y = brick_position(col, row, config)

    if kind == BrickKind.MULTI:
        hits, color = config.multi_hits, config.multi_color
    elif kind == BrickKind.INDESTRUCTIBLE:
        hits, color = 0, config.indestructible_color
    else:
        hits = 1
        color = config.palette[(level + row + col) % len(config.palette)]

    return Brick(
        col, row, x, y,
        config.brick_width, config.brick_height,
        kind=kind, hits=hits, color=color,
    )


def generate_board(
    level: int,
    config: GameConfig,
    rng: Optional[random.Random] = None,
) -> Board:
    """Build the brick grid for a level.

    Args:
        level: Level number (1-based)
        config: Game configuration
        rng: Random source for kind draws (default: module random)

    Returns:
        Column-major grid: board[col][row]
    """
    rng = rng or random.Random()
    rows, cols = grid_dimensions(level, config)

    return [
        [make_brick(col, row, draw_kind(rng, config), level, config) for row in range(rows)]
        for col in range(cols)
    ]


def iter_bricks(board: Board) -> Iterator[Brick]:
    """Iterate bricks column-major, then row-major (collision scan order)."""
    for column in board:
        yield from column


def check_win(board: Board) -> bool:
    """True when every brick that can be destroyed has been.

    Indestructible bricks are ignored, so a board with only indestructible
    bricks left is cleared.
    """
    return all(not brick.alive for brick in iter_bricks(board) if not brick.indestructible)


def remaining_bricks(board: Board) -> int:
    """Count alive bricks that still need to be destroyed."""
    return sum(1 for brick in iter_bricks(board) if brick.alive and not brick.indestructible)
