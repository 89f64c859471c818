"""Collision detection for Arkanoid.

Handles ball-wall, ball-paddle, ball-brick and powerup-paddle contact.
Balls are circles; everything else is an axis-aligned rectangle.
"""

from typing import TYPE_CHECKING

from arkanoid.models import Rectangle

if TYPE_CHECKING:
    from ..entities.ball import Ball
    from ..entities.brick import Brick
    from ..entities.paddle import Paddle
    from ..entities.powerup import Powerup


def circle_rect_overlap(cx: float, cy: float, radius: float, rect: Rectangle) -> bool:
    """Check if a circle touches or overlaps a rectangle.

    Clamps the circle center onto the rectangle and compares the
    distance to that closest point against the radius.
    """
    nearest_x = max(rect.left, min(cx, rect.right))
    nearest_y = max(rect.top, min(cy, rect.bottom))
    dx = cx - nearest_x
    dy = cy - nearest_y
    return dx * dx + dy * dy <= radius * radius


def rects_overlap(a: Rectangle, b: Rectangle) -> bool:
    """Check if two rectangles overlap (touching edges do not count)."""
    return (a.left < b.right and a.right > b.left and
            a.top < b.bottom and a.bottom > b.top)


def check_wall_collision(
    ball: 'Ball',
    screen_width: float,
    screen_height: float,
) -> tuple['Ball', bool]:
    """Check and handle ball-wall collisions.

    Side walls flip the horizontal direction, the ceiling flips the
    vertical one. The reflected velocity always points back into the
    playfield, so a slow ball that is still past the edge next frame
    does not flip back out.

    Args:
        ball: Ball to check
        screen_width: Screen width
        screen_height: Screen height

    Returns:
        Tuple of (updated ball, True if ball dropped fully below screen)
    """
    new_ball = ball

    if ball.x - ball.radius <= 0 and ball.vx < 0:
        new_ball = new_ball.bounce_horizontal()
    elif ball.x + ball.radius >= screen_width and ball.vx > 0:
        new_ball = new_ball.bounce_horizontal()

    if ball.y - ball.radius <= 0 and ball.vy < 0:
        new_ball = new_ball.bounce_vertical()

    fell_below = ball.y - ball.radius > screen_height
    return new_ball, fell_below


def check_paddle_collision(ball: 'Ball', paddle: 'Paddle') -> bool:
    """Check if ball touches the paddle rectangle.

    Only counts while the ball is moving down, so a ball still inside
    the paddle after bouncing is not sent back down.
    """
    if ball.vy <= 0:
        return False
    return circle_rect_overlap(ball.x, ball.y, ball.radius, paddle.rect)


def check_brick_collision(ball: 'Ball', brick: 'Brick') -> bool:
    """Check if ball touches an active brick."""
    if not brick.is_active:
        return False
    return circle_rect_overlap(ball.x, ball.y, ball.radius, brick.rect)


def check_powerup_pickup(powerup: 'Powerup', paddle: 'Paddle') -> bool:
    """Check if the paddle catches a falling powerup."""
    if not powerup.is_active:
        return False
    return rects_overlap(powerup.pickup_rect, paddle.rect)
