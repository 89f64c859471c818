"""Per-frame gameplay step for the PLAYING screen.

Every function here takes the GameWorld explicitly. `step()` runs them
in frame order:

1. paddle movement and expansion timer
2. launch staging
3. ball movement and collisions
4. life / respawn check
5. powerup falling and pickup
6. win check

Positions advance a fixed distance per frame (60 FPS target). Only the
expansion timer uses the real frame time `dt`.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from arkanoid.config import BRICK_POINTS, POWERUP_CHANCE
from arkanoid.game.entities import PowerupType
from arkanoid.game.physics import (
    check_brick_collision,
    check_paddle_collision,
    check_powerup_pickup,
    check_wall_collision,
)
from arkanoid.game.powerups import apply_powerup, spawn_powerup
from arkanoid.game.world import GameWorld
from arkanoid.game_state import GameState
from arkanoid.input import InputFrame, Key
from arkanoid.logging import get_logger

log = get_logger('simulation')


@dataclass
class FrameEvents:
    """What happened during one step (for logging and skins)."""

    launched: bool = False
    paddle_hits: int = 0
    bricks_destroyed: List[Tuple[int, int]] = field(default_factory=list)
    powerups_spawned: int = 0
    powerups_collected: List[PowerupType] = field(default_factory=list)
    balls_lost: int = 0
    life_lost: bool = False
    expansion_ended: bool = False


def update_paddle(world: GameWorld, frame: InputFrame, dt: float, events: FrameEvents) -> None:
    """Move the paddle from held keys and run down the expansion timer."""
    direction = 0
    if frame.is_held(Key.LEFT):
        direction -= 1
    if frame.is_held(Key.RIGHT):
        direction += 1
    world.paddle.move(direction)

    if world.paddle.update(dt):
        events.expansion_ended = True
        log.debug("Paddle expansion ended")


def update_launch(world: GameWorld, frame: InputFrame, events: FrameEvents) -> None:
    """Keep an inactive primary ball on the paddle; launch it on SPACE."""
    ball = world.primary_ball
    if ball.is_active:
        return

    stage = world.stage_point()
    ball = ball.set_position(stage.x, stage.y)

    if frame.was_pressed(Key.SPACE):
        direction = -1 if world.rng.randint(0, 1) == 0 else 1
        ball = ball.launch(direction)
        world.waiting_for_launch = False
        events.launched = True
        log.debug("Ball launched vx=%.1f vy=%.1f", ball.vx, ball.vy)

    world.balls[0] = ball


def _collide_bricks(world: GameWorld, index: int, events: FrameEvents) -> None:
    """Test one ball against every active brick.

    The whole grid is scanned, so a ball overlapping two bricks in the
    same frame destroys both and flips its vertical velocity twice.
    """
    for row in world.bricks:
        for col, brick in enumerate(row):
            ball = world.balls[index]
            if not check_brick_collision(ball, brick):
                continue

            row[col] = brick.hit()
            world.balls[index] = ball.bounce_vertical()
            world.score += BRICK_POINTS
            events.bricks_destroyed.append(brick.grid_position)

            if world.rng.randint(1, 100) <= POWERUP_CHANCE:
                if spawn_powerup(world, brick.center) is not None:
                    events.powerups_spawned += 1


def update_balls(world: GameWorld, events: FrameEvents) -> None:
    """Move every active ball and resolve its collisions."""
    paddle = world.paddle

    for i in range(len(world.balls)):
        ball = world.balls[i]
        if not ball.is_active:
            continue

        ball = ball.step()
        ball, fell_below = check_wall_collision(
            ball, world.screen_width, world.screen_height,
        )

        if check_paddle_collision(ball, paddle):
            ball = ball.bounce_off_paddle(paddle.center_x, paddle.width)
            events.paddle_hits += 1

        if fell_below:
            world.balls[i] = ball.deactivate()
            events.balls_lost += 1
            continue

        world.balls[i] = ball
        _collide_bricks(world, i, events)


def check_lives(world: GameWorld, events: FrameEvents) -> None:
    """Take a life once every launched ball is gone.

    Ends the game at zero lives, otherwise stages a new ball.
    """
    if world.any_ball_active() or world.waiting_for_launch:
        return

    remaining = world.paddle.lose_life()
    events.life_lost = True
    log.debug("Life lost, %d remaining", remaining)

    if remaining <= 0:
        world.state = GameState.GAME_OVER
    else:
        world.reset_balls(world.stage_point())
        world.waiting_for_launch = True


def update_powerups(world: GameWorld, events: FrameEvents) -> None:
    """Drop falling powerups; apply any the paddle catches."""
    for i in range(len(world.powerups)):
        powerup = world.powerups[i]
        if not powerup.is_active:
            continue

        powerup = powerup.fall()

        if check_powerup_pickup(powerup, world.paddle):
            apply_powerup(powerup.kind, world)
            events.powerups_collected.append(powerup.kind)
            powerup = powerup.deactivate()

        if powerup.y > world.screen_height:
            powerup = powerup.deactivate()

        world.powerups[i] = powerup


def check_win(world: GameWorld) -> None:
    """Switch to WON when no brick is left."""
    if world.bricks_remaining() == 0:
        world.state = GameState.WON


def step(world: GameWorld, frame: InputFrame, dt: float) -> FrameEvents:
    """Advance an unpaused PLAYING world by one frame.

    Args:
        world: World to advance
        frame: Input polled for this frame
        dt: Real elapsed frame time in seconds

    Returns:
        FrameEvents describing what happened
    """
    events = FrameEvents()
    update_paddle(world, frame, dt, events)
    update_launch(world, frame, events)
    update_balls(world, events)
    check_lives(world, events)
    update_powerups(world, events)
    check_win(world)
    return events
