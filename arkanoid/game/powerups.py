"""Powerup spawning and effects.

Each PowerupType maps to one effect function over the world. Spawns
and clones that find no free pool slot are dropped silently.
"""

import random
from typing import Callable, Dict, Optional

from arkanoid.config import MULTI_BALL_CAP, POWERUP_FALL_SPEED, POWERUP_WEIGHTS
from arkanoid.game.entities import Powerup, PowerupType
from arkanoid.game.world import GameWorld
from arkanoid.logging import get_logger
from arkanoid.models import Point2D

log = get_logger('powerups')

# Draw order for the weighted roll
_ROLL_TABLE = (
    (PowerupType.EXPAND, POWERUP_WEIGHTS['expand']),
    (PowerupType.EXTRA_LIFE, POWERUP_WEIGHTS['extra_life']),
    (PowerupType.MULTI_BALL, POWERUP_WEIGHTS['multi_ball']),
)


def roll_powerup_type(rng: random.Random) -> PowerupType:
    """Pick a powerup type by weighted draw (40/30/30 by default)."""
    total = sum(weight for _, weight in _ROLL_TABLE)
    roll = rng.randrange(total)
    for kind, weight in _ROLL_TABLE:
        if roll < weight:
            return kind
        roll -= weight
    return _ROLL_TABLE[-1][0]


def spawn_powerup(world: GameWorld, position: Point2D) -> Optional[int]:
    """Drop a random powerup from a destroyed brick.

    The type is rolled before the slot scan, so a full pool still
    consumes one draw from the random source.

    Args:
        world: World to spawn into
        position: Center of the destroyed brick

    Returns:
        Pool slot used, or None if the pool was full
    """
    kind = roll_powerup_type(world.rng)
    slot = world.free_powerup_slot()
    if slot is None:
        log.debug("Powerup pool full, dropped %s", kind.value)
        return None

    world.powerups[slot] = Powerup(
        kind, position.x, position.y, vy=POWERUP_FALL_SPEED, active=True,
    )
    log.debug("Spawned %s in slot %d at %s", kind.value, slot, position)
    return slot


def _apply_none(world: GameWorld) -> None:
    pass


def _apply_expand(world: GameWorld) -> None:
    # Already expanded: only the timer restarts
    world.paddle.expand()


def _apply_extra_life(world: GameWorld) -> None:
    world.paddle.add_life()


def _apply_multi_ball(world: GameWorld) -> None:
    """Split active balls until the multi-ball cap is reached.

    Walks the pool in slot order, so a clone placed in a later slot can
    itself be split in the same pass.
    """
    for i in range(len(world.balls)):
        if world.active_ball_count() >= MULTI_BALL_CAP:
            break
        ball = world.balls[i]
        if not ball.is_active:
            continue
        slot = world.free_ball_slot()
        if slot is None:
            continue
        sign = 1 if world.rng.randint(0, 1) == 0 else -1
        world.balls[slot] = ball.split(sign)


_EFFECTS: Dict[PowerupType, Callable[[GameWorld], None]] = {
    PowerupType.NONE: _apply_none,
    PowerupType.EXPAND: _apply_expand,
    PowerupType.EXTRA_LIFE: _apply_extra_life,
    PowerupType.MULTI_BALL: _apply_multi_ball,
}


def apply_powerup(kind: PowerupType, world: GameWorld) -> None:
    """Apply a collected powerup's effect to the world."""
    _EFFECTS[kind](world)
    log.debug("Applied %s: lives=%d width=%.0f balls=%d",
              kind.value, world.paddle.lives, world.paddle.width, world.active_ball_count())
