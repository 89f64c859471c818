"""Falling powerup entity."""

from enum import Enum

from arkanoid.config import POWERUP_FALL_SPEED, POWERUP_SIZE
from arkanoid.models import Rectangle


class PowerupType(Enum):
    """What a collected powerup does."""

    NONE = "none"
    EXPAND = "expand"
    EXTRA_LIFE = "extra_life"
    MULTI_BALL = "multi_ball"


class Powerup:
    """Immutable powerup occupying one slot of the powerup pool.

    Falls straight down from where its brick was until the paddle
    catches it or it leaves the bottom of the screen.
    """

    def __init__(
        self,
        kind: PowerupType = PowerupType.NONE,
        x: float = 0.0,
        y: float = 0.0,
        vy: float = POWERUP_FALL_SPEED,
        active: bool = False,
        size: float = POWERUP_SIZE,
    ):
        self._kind = kind
        self._x = x
        self._y = y
        self._vy = vy
        self._active = active
        self._size = size

    @property
    def kind(self) -> PowerupType:
        return self._kind

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def vy(self) -> float:
        return self._vy

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def pickup_rect(self) -> Rectangle:
        """Square catch box centered on the powerup."""
        half = self._size / 2
        return Rectangle(x=self._x - half, y=self._y - half,
                         width=self._size, height=self._size)

    def fall(self) -> 'Powerup':
        """Drop one frame's worth."""
        if not self._active:
            return self
        return Powerup(self._kind, self._x, self._y + self._vy, self._vy,
                       self._active, self._size)

    def deactivate(self) -> 'Powerup':
        return Powerup(self._kind, self._x, self._y, self._vy, False, self._size)

    def __repr__(self) -> str:
        return (f"Powerup({self._kind.value}, x={self._x:.1f}, y={self._y:.1f}, "
                f"active={self._active})")
