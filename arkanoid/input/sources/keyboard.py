"""
Keyboard input source.

Converts pygame keyboard events into InputFrame snapshots.
"""

from typing import Dict, Set

import pygame

from arkanoid.input.input_frame import InputFrame, Key
from arkanoid.input.sources.base import InputSource


class KeyboardInputSource(InputSource):
    """Keyboard-based input source using pygame events.

    Held state is tracked from KEYDOWN/KEYUP pairs, so the source never
    needs a display to query. QUIT events and the ESC key raise the
    quit flag.

    Examples:
        >>> source = KeyboardInputSource()
        >>> source.update(0.016)  # Drain pygame events
        >>> frame = source.poll()
    """

    KEY_MAP: Dict[int, Key] = {
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_SPACE: Key.SPACE,
        pygame.K_RETURN: Key.ENTER,
        pygame.K_KP_ENTER: Key.ENTER,
        pygame.K_p: Key.PAUSE,
    }

    EXIT_KEY: int = pygame.K_ESCAPE

    def __init__(self):
        """Initialize the keyboard input source."""
        self._held: Set[Key] = set()
        self._pressed: Set[Key] = set()
        self._quit = False

    def process_event(self, event: pygame.event.Event) -> None:
        """Fold one pygame event into the current key state."""
        if event.type == pygame.QUIT:
            self._quit = True
        elif event.type == pygame.KEYDOWN:
            if event.key == self.EXIT_KEY:
                self._quit = True
                return
            key = self.KEY_MAP.get(event.key)
            if key is not None:
                self._held.add(key)
                self._pressed.add(key)
        elif event.type == pygame.KEYUP:
            key = self.KEY_MAP.get(event.key)
            if key is not None:
                self._held.discard(key)

    def update(self, dt: float) -> None:
        """Process pending pygame events.

        Args:
            dt: Delta time in seconds since last update (unused for keyboard input)
        """
        for event in pygame.event.get():
            self.process_event(event)

    def poll(self) -> InputFrame:
        """Snapshot held/pressed keys and clear the pressed set."""
        frame = InputFrame(
            held=frozenset(self._held),
            pressed=frozenset(self._pressed),
            quit=self._quit,
        )
        self._pressed.clear()
        return frame

    def clear(self) -> None:
        """Forget all key state (e.g. after the window loses focus)."""
        self._held.clear()
        self._pressed.clear()
