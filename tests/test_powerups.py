"""
Tests for powerup spawning and effects.

Tests cover:
- Weighted type roll
- Spawning into the pool, and dropping when the pool is full
- Expand, Extra-Life and Multi-Ball effects, including the ball cap
"""

import random
from collections import Counter

import pytest

from arkanoid.config import MULTI_BALL_CAP, POWERUPS_MAX
from arkanoid.game.entities import Powerup, PowerupType
from arkanoid.game.powerups import apply_powerup, roll_powerup_type, spawn_powerup
from arkanoid.models import Point2D

from helpers import active_ball


class TestRoll:
    """Test the weighted powerup roll."""

    def test_never_rolls_none(self):
        rng = random.Random(3)
        kinds = {roll_powerup_type(rng) for _ in range(500)}
        assert PowerupType.NONE not in kinds
        assert kinds == {PowerupType.EXPAND, PowerupType.EXTRA_LIFE, PowerupType.MULTI_BALL}

    def test_weights(self):
        """Roughly 40% Expand, 30% Extra-Life, 30% Multi-Ball."""
        rng = random.Random(11)
        trials = 10000
        counts = Counter(roll_powerup_type(rng) for _ in range(trials))
        assert counts[PowerupType.EXPAND] / trials == pytest.approx(0.40, abs=0.03)
        assert counts[PowerupType.EXTRA_LIFE] / trials == pytest.approx(0.30, abs=0.03)
        assert counts[PowerupType.MULTI_BALL] / trials == pytest.approx(0.30, abs=0.03)


class TestSpawn:
    """Test spawning into the fixed-size pool."""

    def test_spawns_in_first_free_slot(self, world):
        world.powerups[0] = Powerup(PowerupType.EXPAND, 10, 10, active=True)

        slot = spawn_powerup(world, Point2D(x=49, y=84))

        assert slot == 1
        powerup = world.powerups[1]
        assert powerup.is_active
        assert (powerup.x, powerup.y) == (49, 84)
        assert powerup.vy == 2
        assert powerup.kind != PowerupType.NONE

    def test_full_pool_drops_spawn(self, world):
        """No slot, no spawn; existing powerups are untouched."""
        world.powerups = [
            Powerup(PowerupType.EXPAND, i, 10, active=True) for i in range(POWERUPS_MAX)
        ]
        before = list(world.powerups)
        state = world.rng.getstate()

        assert spawn_powerup(world, Point2D(x=49, y=84)) is None
        assert world.powerups == before
        # The type roll still consumes randomness
        assert world.rng.getstate() != state


class TestEffects:
    """Test each powerup effect."""

    def test_none_does_nothing(self, playing_world):
        world = playing_world
        apply_powerup(PowerupType.NONE, world)
        assert world.paddle.lives == 3
        assert world.paddle.width == 140
        assert world.active_ball_count() == 0

    def test_expand(self, playing_world):
        apply_powerup(PowerupType.EXPAND, playing_world)
        paddle = playing_world.paddle
        assert paddle.expanded
        assert paddle.width == 210
        assert paddle.expand_timer == 10

    def test_extra_life_is_unbounded(self, playing_world):
        for _ in range(5):
            apply_powerup(PowerupType.EXTRA_LIFE, playing_world)
        assert playing_world.paddle.lives == 8

    def test_multi_ball_from_one_ball(self, playing_world):
        """One active ball becomes three, with mirrored horizontal speeds."""
        world = playing_world
        world.waiting_for_launch = False
        world.balls[0] = active_ball(world, 300, 400, vx=7, vy=-7)

        apply_powerup(PowerupType.MULTI_BALL, world)

        assert world.active_ball_count() == MULTI_BALL_CAP
        assert [b.is_active for b in world.balls] == [True, True, True, False, False]
        assert world.balls[1].vx == -7
        assert world.balls[2].vx == 7
        for ball in world.balls[:3]:
            assert (ball.x, ball.y) == (300, 400)
            assert abs(ball.vy) == 7

    def test_multi_ball_from_two_balls(self, playing_world):
        world = playing_world
        world.waiting_for_launch = False
        world.balls[0] = active_ball(world, 300, 400, vx=7, vy=-7)
        world.balls[1] = active_ball(world, 500, 300, vx=-3, vy=7)

        apply_powerup(PowerupType.MULTI_BALL, world)

        assert world.active_ball_count() == 3
        assert world.balls[2].vx == -7
        assert (world.balls[2].x, world.balls[2].y) == (300, 400)

    def test_multi_ball_at_cap_does_nothing(self, playing_world):
        world = playing_world
        world.waiting_for_launch = False
        for i in range(3):
            world.balls[i] = active_ball(world, 100 + 100 * i, 400, vx=7, vy=-7)
        before = list(world.balls)

        apply_powerup(PowerupType.MULTI_BALL, world)

        assert world.balls == before
        assert world.active_ball_count() == 3

    def test_multi_ball_reuses_primary_slot(self, playing_world):
        """A lost primary ball's slot is the first one refilled."""
        world = playing_world
        world.waiting_for_launch = False
        world.balls[1] = active_ball(world, 500, 300, vx=5, vy=-7)

        apply_powerup(PowerupType.MULTI_BALL, world)

        assert world.primary_ball.is_active
        assert world.primary_ball.vx == -5
        # One pass over the pool: the refilled slot 0 is not split again
        assert world.active_ball_count() == 2

    def test_multi_ball_without_active_balls(self, playing_world):
        """Nothing to split while the ball is still staged."""
        apply_powerup(PowerupType.MULTI_BALL, playing_world)
        assert playing_world.active_ball_count() == 0
