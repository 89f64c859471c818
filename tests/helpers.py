"""Shared builders for Arkanoid tests."""
from arkanoid.game.entities import Ball
from arkanoid.game.world import GameWorld
from arkanoid.input import InputFrame, Key

FRAME_DT = 1 / 60


def press(*keys: Key, held=()) -> InputFrame:
    """Input frame with keys pressed this frame (pressed keys also count as held)."""
    return InputFrame(pressed=frozenset(keys), held=frozenset(keys) | frozenset(held))


def hold(*keys: Key) -> InputFrame:
    """Input frame with keys held but not newly pressed."""
    return InputFrame(held=frozenset(keys))


def active_ball(world: GameWorld, x: float, y: float, vx: float = 0.0, vy: float = 0.0) -> Ball:
    """Build an in-play ball with the world's ball config."""
    return Ball(world.ball_config, x, y, vx, vy, active=True)
