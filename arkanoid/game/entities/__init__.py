"""Arkanoid game entities."""

from .paddle import Paddle, PaddleConfig
from .ball import Ball, BallConfig
from .brick import Brick, BrickState
from .powerup import Powerup, PowerupType

__all__ = [
    'Paddle', 'PaddleConfig',
    'Ball', 'BallConfig',
    'Brick', 'BrickState',
    'Powerup', 'PowerupType',
]
