"""Brick entity.

Bricks sit in a fixed grid and die on the first ball contact. A
destroyed brick never comes back within a session.
"""

from enum import Enum
from typing import Tuple

from arkanoid.models import Point2D, Rectangle


class BrickState(Enum):
    """Brick lifecycle states."""

    ACTIVE = "active"        # Can be hit
    DESTROYED = "destroyed"  # Gone for the rest of the session


class Brick:
    """Immutable brick; `hit()` returns the destroyed copy."""

    def __init__(
        self,
        rect: Rectangle,
        grid_position: Tuple[int, int] = (0, 0),
        state: BrickState = BrickState.ACTIVE,
    ):
        """Initialize brick.

        Args:
            rect: Bounding rectangle, fixed for the brick's lifetime
            grid_position: (row, col) position in grid
            state: Lifecycle state
        """
        self._rect = rect
        self._grid_position = grid_position
        self._state = state

    @property
    def rect(self) -> Rectangle:
        return self._rect

    @property
    def center(self) -> Point2D:
        return self._rect.center

    @property
    def grid_position(self) -> Tuple[int, int]:
        """Get grid position (row, col)."""
        return self._grid_position

    @property
    def state(self) -> BrickState:
        return self._state

    @property
    def is_active(self) -> bool:
        """Check if brick is active (can be hit)."""
        return self._state == BrickState.ACTIVE

    def hit(self) -> 'Brick':
        """Destroy the brick. Hitting a destroyed brick changes nothing."""
        if not self.is_active:
            return self
        return Brick(self._rect, self._grid_position, BrickState.DESTROYED)

    def __repr__(self) -> str:
        return f"Brick({self._grid_position}, {self._state.value})"
