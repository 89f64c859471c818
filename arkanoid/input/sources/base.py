"""
Abstract base class for input sources.

The game only sees InputFrame snapshots, so any device that can answer
"held" and "pressed this frame" for the game's keys can drive it.
"""

from abc import ABC, abstractmethod

from arkanoid.input.input_frame import InputFrame


class InputSource(ABC):
    """Abstract base class for input sources.

    Subclasses must implement:
        - update(dt): Collect device state for the coming frame
        - poll(): Return the frame snapshot and reset per-frame state
    """

    @abstractmethod
    def update(self, dt: float) -> None:
        """Collect device state (called once at the top of every frame).

        Args:
            dt: Delta time in seconds since last update
        """
        pass

    @abstractmethod
    def poll(self) -> InputFrame:
        """Get the input for this frame.

        Keys reported as pressed are cleared, so each press is seen in
        exactly one frame.

        Returns:
            Immutable InputFrame snapshot
        """
        pass
