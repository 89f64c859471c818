"""Paddle entity steered by the arrow keys.

The paddle moves a fixed distance per frame while a direction key is
held and never leaves the screen. It also carries the player's lives
and the Expand powerup state.
"""

from dataclasses import dataclass

from arkanoid.config import (
    EXPAND_DURATION,
    PADDLE_BOTTOM_OFFSET,
    PADDLE_EXPANDED_WIDTH,
    PADDLE_HEIGHT,
    PADDLE_SPEED,
    PADDLE_WIDTH,
    PLAYER_MAX_LIFE,
)
from arkanoid.models import Point2D, Rectangle


@dataclass(frozen=True)
class PaddleConfig:
    """Paddle configuration."""

    width: float = PADDLE_WIDTH
    expanded_width: float = PADDLE_EXPANDED_WIDTH
    height: float = PADDLE_HEIGHT
    speed: float = PADDLE_SPEED               # units/frame
    bottom_offset: float = PADDLE_BOTTOM_OFFSET
    expand_duration: float = EXPAND_DURATION  # seconds
    lives: int = PLAYER_MAX_LIFE


class Paddle:
    """Player paddle. Position is the top-left corner."""

    def __init__(
        self,
        config: PaddleConfig,
        screen_width: float,
        screen_height: float,
    ):
        """Initialize paddle centered near the bottom of the screen.

        Args:
            config: Paddle configuration
            screen_width: Screen width
            screen_height: Screen height
        """
        if config.lives < 1:
            raise ValueError(f"Paddle needs at least one life, got {config.lives}")

        self._config = config
        self._screen_width = screen_width
        self._screen_height = screen_height
        self.reset()

    def reset(self) -> None:
        """Back to the session start: centered, base width, full lives."""
        self.width = self._config.width
        self.height = self._config.height
        self.x = self._screen_width / 2 - self.width / 2
        self.y = self._screen_height - self._config.bottom_offset
        self.lives = self._config.lives
        self.speed = self._config.speed
        self.expanded = False
        self.expand_timer = 0.0

    @property
    def config(self) -> PaddleConfig:
        return self._config

    @property
    def center_x(self) -> float:
        """Get paddle center X."""
        return self.x + self.width / 2

    @property
    def top(self) -> float:
        return self.y

    @property
    def rect(self) -> Rectangle:
        """Get paddle bounding rectangle."""
        return Rectangle(x=self.x, y=self.y, width=self.width, height=self.height)

    def stage_point(self, ball_radius: float, gap: float) -> Point2D:
        """Where a staged ball rests: centered just above the paddle."""
        return Point2D(x=self.center_x, y=self.y - ball_radius - gap)

    def move(self, direction: int) -> None:
        """Shift by one frame of movement and clamp to the screen.

        Args:
            direction: -1 left, +1 right, 0 stay (still clamps)
        """
        self.x += direction * self.speed
        self.clamp()

    def clamp(self) -> None:
        """Keep the whole paddle inside [0, screen_width]."""
        if self.x < 0:
            self.x = 0.0
        if self.x + self.width > self._screen_width:
            self.x = self._screen_width - self.width

    def expand(self) -> None:
        """Widen the paddle and (re)start the expansion timer."""
        self.expanded = True
        self.expand_timer = self._config.expand_duration
        self.width = self._config.expanded_width
        self.clamp()

    def update(self, dt: float) -> bool:
        """Count down the expansion timer in real seconds.

        Args:
            dt: Elapsed frame time in seconds

        Returns:
            True if the expansion ran out this frame
        """
        if not self.expanded:
            return False

        self.expand_timer -= dt
        if self.expand_timer <= 0.0:
            self.expanded = False
            self.expand_timer = 0.0
            self.width = self._config.width
            return True
        return False

    def add_life(self) -> None:
        self.lives += 1

    def lose_life(self) -> int:
        """Take one life away, returning how many remain."""
        self.lives -= 1
        return self.lives

    def __repr__(self) -> str:
        return (f"Paddle(x={self.x:.1f}, y={self.y:.1f}, width={self.width:.0f}, "
                f"lives={self.lives}, expanded={self.expanded})")
