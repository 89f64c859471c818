"""Ball entity with per-frame velocity physics.

The ball bounces off walls, the paddle and bricks. Its rebound angle
off the paddle depends on where it lands. Velocity is in units per
frame, so `step()` takes no delta time.
"""

from dataclasses import dataclass
from typing import Tuple

from arkanoid.config import BALL_LAUNCH_SPEED, BALL_RADIUS, PADDLE_STEER_FACTOR


@dataclass(frozen=True)
class BallConfig:
    """Ball configuration."""

    radius: float = BALL_RADIUS
    launch_speed: float = BALL_LAUNCH_SPEED     # units/frame on each axis
    steer_factor: float = PADDLE_STEER_FACTOR   # vx when hitting a paddle edge


class Ball:
    """Immutable ball occupying one slot of the ball pool.

    An inactive ball has zero velocity and is neither drawn nor collided.
    """

    def __init__(
        self,
        config: BallConfig,
        x: float,
        y: float,
        vx: float = 0.0,
        vy: float = 0.0,
        active: bool = False,
    ):
        """Initialize ball.

        Args:
            config: Ball configuration
            x: Center X position
            y: Center Y position
            vx: X velocity (units/frame)
            vy: Y velocity (units/frame)
            active: Whether ball is in play
        """
        self._config = config
        self._x = x
        self._y = y
        self._vx = vx if active else 0.0
        self._vy = vy if active else 0.0
        self._active = active

    @property
    def config(self) -> BallConfig:
        return self._config

    @property
    def x(self) -> float:
        """Get ball center X."""
        return self._x

    @property
    def y(self) -> float:
        """Get ball center Y."""
        return self._y

    @property
    def vx(self) -> float:
        """Get X velocity."""
        return self._vx

    @property
    def vy(self) -> float:
        """Get Y velocity."""
        return self._vy

    @property
    def radius(self) -> float:
        """Get ball radius."""
        return self._config.radius

    @property
    def is_active(self) -> bool:
        """Check if ball is active (in play)."""
        return self._active

    def _replace(self, **changes) -> 'Ball':
        fields = {
            'x': self._x, 'y': self._y,
            'vx': self._vx, 'vy': self._vy,
            'active': self._active,
        }
        fields.update(changes)
        return Ball(self._config, **fields)

    def launch(self, direction: int) -> 'Ball':
        """Put a staged ball into play, moving up.

        Args:
            direction: -1 to launch leftward, +1 rightward

        Returns:
            New active Ball
        """
        speed = self._config.launch_speed
        return self._replace(
            vx=speed * (1 if direction >= 0 else -1),
            vy=-speed,
            active=True,
        )

    def step(self) -> 'Ball':
        """Advance one frame along the current velocity."""
        if not self._active:
            return self
        return self._replace(x=self._x + self._vx, y=self._y + self._vy)

    def set_position(self, x: float, y: float) -> 'Ball':
        """Move the ball without changing its velocity."""
        return self._replace(x=x, y=y)

    def bounce_horizontal(self) -> 'Ball':
        """Bounce off vertical surface (reverse X velocity)."""
        return self._replace(vx=-self._vx)

    def bounce_vertical(self) -> 'Ball':
        """Bounce off horizontal surface (reverse Y velocity)."""
        return self._replace(vy=-self._vy)

    def bounce_off_paddle(self, paddle_center_x: float, paddle_width: float) -> 'Ball':
        """Bounce off paddle with a steered horizontal speed.

        The vertical velocity flips. The horizontal velocity is replaced
        by the hit offset from the paddle center, normalized to [-1, 1]
        of the half width and scaled by the steer factor: center hits go
        almost straight, edge hits go wide.

        Args:
            paddle_center_x: Paddle center X position
            paddle_width: Current paddle width
        """
        offset = (self._x - paddle_center_x) / (paddle_width / 2)
        offset = max(-1.0, min(1.0, offset))
        return self._replace(vx=self._config.steer_factor * offset, vy=-self._vy)

    def split(self, vertical_sign: int) -> 'Ball':
        """Clone for multi-ball: mirrored X velocity, chosen Y sign."""
        return self._replace(vx=-self._vx, vy=self._vy * (1 if vertical_sign >= 0 else -1))

    def deactivate(self) -> 'Ball':
        """Mark ball as inactive (lost); velocity drops to zero."""
        return self._replace(active=False)

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Get ball bounding box (left, top, right, bottom)."""
        r = self._config.radius
        return (self._x - r, self._y - r, self._x + r, self._y + r)

    def __repr__(self) -> str:
        return (f"Ball(x={self._x:.1f}, y={self._y:.1f}, vx={self._vx:.2f}, "
                f"vy={self._vy:.2f}, active={self._active})")
