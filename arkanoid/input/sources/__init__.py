"""Input sources that produce InputFrame snapshots."""

from .base import InputSource
from .keyboard import KeyboardInputSource

__all__ = [
    'InputSource',
    'KeyboardInputSource',
]
