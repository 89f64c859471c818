"""
Input Frame - the key state polled at the top of one frame.

Uses Pydantic for validation and immutability.
"""
from enum import Enum
from typing import FrozenSet

from pydantic import BaseModel, ConfigDict


class Key(Enum):
    """Logical keys the game reacts to."""
    LEFT = "left"
    RIGHT = "right"
    SPACE = "space"
    ENTER = "enter"
    PAUSE = "p"


class InputFrame(BaseModel):
    """Immutable snapshot of the keyboard for a single frame.

    Attributes:
        held: Keys currently held down
        pressed: Keys that went down since the previous frame
        quit: Window close (or exit key) was requested

    Examples:
        >>> frame = InputFrame(held=frozenset({Key.LEFT}), pressed=frozenset({Key.SPACE}))
        >>> frame.is_held(Key.LEFT), frame.was_pressed(Key.SPACE)
        (True, True)
    """
    held: FrozenSet[Key] = frozenset()
    pressed: FrozenSet[Key] = frozenset()
    quit: bool = False

    model_config = ConfigDict(frozen=True)

    def is_held(self, key: Key) -> bool:
        """Check if key is currently held."""
        return key in self.held

    def was_pressed(self, key: Key) -> bool:
        """Check if key was pressed this frame."""
        return key in self.pressed

    def any_pressed(self, *keys: Key) -> bool:
        """Check if any of the given keys was pressed this frame."""
        return any(key in self.pressed for key in keys)

    def __str__(self) -> str:
        held = ','.join(sorted(k.value for k in self.held))
        pressed = ','.join(sorted(k.value for k in self.pressed))
        return f"InputFrame(held=[{held}], pressed=[{pressed}], quit={self.quit})"


# Frame with nothing held or pressed
NO_INPUT = InputFrame()
