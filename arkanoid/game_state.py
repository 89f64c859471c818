"""GameState enum for Arkanoid.

The world tracks one of four screen states (TITLE, PLAYING, GAME_OVER,
WON). The pause flag is separate; PAUSED is only ever reported by the
game's `state` property while the flag is set during play.
"""
from enum import Enum


class GameState(Enum):
    """Game states reported by Arkanoid.

    States:
        TITLE: Title screen, waiting for start input
        PLAYING: Active gameplay in progress
        PAUSED: Gameplay frozen by the pause toggle
        GAME_OVER: Lives exhausted
        WON: Every brick destroyed
    """
    TITLE = "title"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    WON = "won"
