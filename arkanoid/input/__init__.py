"""Keyboard input handling for Arkanoid."""

from .input_frame import InputFrame, Key, NO_INPUT
from .sources import InputSource, KeyboardInputSource

__all__ = [
    'InputFrame',
    'Key',
    'NO_INPUT',
    'InputSource',
    'KeyboardInputSource',
]
