"""Arkanoid collision detection."""

from .collision import (
    circle_rect_overlap,
    rects_overlap,
    check_wall_collision,
    check_paddle_collision,
    check_brick_collision,
    check_powerup_pickup,
)

__all__ = [
    'circle_rect_overlap',
    'rects_overlap',
    'check_wall_collision',
    'check_paddle_collision',
    'check_brick_collision',
    'check_powerup_pickup',
]
