"""Collision predicates for Brickfall.

Pure functions: none of them mutate their arguments. Brick hits use a
center-point test (the ball's center strictly inside the rectangle), not a
circle/rectangle overlap, so a fast ball can clip a brick corner without
registering.
"""

from typing import TYPE_CHECKING, Literal, Optional

if TYPE_CHECKING:
    from ..entities.ball import Ball
    from ..entities.paddle import Paddle
    from ..entities.power_up import PowerUp


def ball_intersects_rect(
    ball: 'Ball',
    rect_x: float,
    rect_y: float,
    width: float,
    height: float,
) -> bool:
    """Check if the ball's center lies strictly inside a rectangle.

    Args:
        ball: Ball to check
        rect_x: Rectangle left edge
        rect_y: Rectangle top edge
        width: Rectangle width
        height: Rectangle height

    Returns:
        True if the center is inside (points on the border don't count)
    """
    return (rect_x < ball.x < rect_x + width and
            rect_y < ball.y < rect_y + height)


def ball_hits_paddle(ball: 'Ball', paddle: 'Paddle') -> bool:
    """Check if the ball has reached the paddle.

    The ball's lower edge must be at or below the paddle's top edge and
    its center strictly between the paddle's left and right edges.
    """
    return (ball.y + ball.radius >= paddle.top and
            paddle.left < ball.x < paddle.right)


def power_up_hits_paddle(power_up: 'PowerUp', paddle: 'Paddle') -> bool:
    """Check if a falling pickup has reached the paddle."""
    return (power_up.y + power_up.radius >= paddle.top and
            paddle.left < power_up.x < paddle.right)


def crosses_side_wall(ball: 'Ball', board_width: float) -> Optional[Literal["left", "right"]]:
    """Return which side wall the ball's edge has crossed, if any."""
    if ball.x - ball.radius < 0:
        return "left"
    if ball.x + ball.radius > board_width:
        return "right"
    return None


def crosses_top_wall(ball: 'Ball') -> bool:
    """Check if the ball's upper edge has crossed the ceiling."""
    return ball.y - ball.radius < 0


def exits_bottom(ball: 'Ball', board_height: float) -> bool:
    """Check if the ball's lower edge has passed the bottom of the board."""
    return ball.y + ball.radius > board_height
