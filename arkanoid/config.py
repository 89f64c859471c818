"""Configuration for Arkanoid.

Contains screen dimensions, entity sizes, per-frame speeds, powerup
odds and color definitions. Runtime knobs can be overridden from the
environment or a .env file in the working directory.

Motion is a fixed-timestep model: ball, paddle and powerup speeds are
units per frame at the 60 FPS target. Only the paddle expansion timer
counts real seconds.
"""
import os
from typing import Dict, Optional, Tuple

from dotenv import load_dotenv

load_dotenv()


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_optional_int(key: str) -> Optional[int]:
    """Get integer from environment, None when unset or empty."""
    val = os.getenv(key, '').strip()
    return int(val) if val else None


# Screen dimensions (fixed contract with the renderer)
SCREEN_WIDTH: int = 960
SCREEN_HEIGHT: int = 720

# Runtime
TARGET_FPS: int = _get_int('ARKANOID_TARGET_FPS', 60)
RANDOM_SEED: Optional[int] = _get_optional_int('ARKANOID_SEED')

# Player
PLAYER_MAX_LIFE: int = 3
PADDLE_WIDTH: float = 140.0
PADDLE_EXPANDED_WIDTH: float = 210.0
PADDLE_HEIGHT: float = 22.0
PADDLE_BOTTOM_OFFSET: float = 50.0   # Paddle top sits this far above the bottom
PADDLE_SPEED: float = 8.0            # units/frame
EXPAND_DURATION: float = 10.0        # seconds

# Balls
BALLS_MAX: int = 5
MULTI_BALL_CAP: int = 3
BALL_RADIUS: float = 12.0
BALL_STAGE_GAP: float = 2.0          # Gap between staged ball and paddle top
BALL_LAUNCH_SPEED: float = 7.0       # units/frame on each axis
PADDLE_STEER_FACTOR: float = 6.0     # vx at the paddle edge

# Bricks
LINES_OF_BRICKS: int = 5
BRICKS_PER_LINE: int = 10
BRICK_CELL_HEIGHT: float = 38.0
BRICK_MARGIN_X: float = 7.0
BRICK_MARGIN_Y: float = 70.0
BRICK_PADDING_X: float = 12.0
BRICK_PADDING_Y: float = 10.0
BRICK_POINTS: int = 100

# Powerups
POWERUPS_MAX: int = 10
POWERUP_CHANCE: int = 22             # percent per destroyed brick
POWERUP_FALL_SPEED: float = 2.0      # units/frame
POWERUP_SIZE: float = 28.0           # pickup box edge

# Relative spawn weights, in percent
POWERUP_WEIGHTS: Dict[str, int] = {
    'expand': 40,
    'extra_life': 30,
    'multi_ball': 30,
}

# Colors (RGB)
COLORS: Dict[str, Tuple[int, int, int]] = {
    'yellow': (253, 249, 0),
    'dark_blue': (0, 82, 172),
    'light_gray': (200, 200, 200),
    'gray': (130, 130, 130),
    'dark_gray': (80, 80, 80),
    'maroon': (190, 33, 55),
    'orange': (255, 161, 0),
    'red': (230, 41, 55),
    'dark_green': (0, 117, 44),
    'black': (0, 0, 0),
    'white': (255, 255, 255),
    'ray_white': (245, 245, 245),
    'title': (255, 180, 60),
}

BACKGROUND_TOP: Tuple[int, int, int] = (40, 40, 90)
BACKGROUND_BOTTOM: Tuple[int, int, int] = (130, 130, 220)
