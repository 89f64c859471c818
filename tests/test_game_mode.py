"""
Tests for the Arkanoid game mode (screen state machine).

Tests cover:
- Title / playing / game over / win transitions
- Pause toggling and freezing
- Session reset on every new game
- Long random-input runs keeping world invariants
- Headless rendering of every screen
- Construction errors and skin fallback
"""

import random

import pytest

from arkanoid.config import BALLS_MAX, MULTI_BALL_CAP, POWERUPS_MAX
from arkanoid.game.entities import Powerup, PowerupType
from arkanoid.game_mode import ArkanoidMode
from arkanoid.game_state import GameState
from arkanoid.input import NO_INPUT, InputFrame, Key
from arkanoid.logging import LogSink, register_sink

from helpers import FRAME_DT, active_ball, hold, press


def run_frame(mode, frame=NO_INPUT, dt=FRAME_DT):
    mode.handle_input(frame)
    mode.update(dt)


def assert_initial_session(world):
    """Fresh-session entity configuration."""
    assert world.score == 0
    assert world.paddle.lives == 3
    assert world.paddle.x == 410
    assert world.paddle.width == 140
    assert not world.paddle.expanded
    assert world.bricks_remaining() == 50
    assert world.active_powerups() == []
    assert world.active_ball_count() == 0
    assert (world.primary_ball.x, world.primary_ball.y) == (480, 656)
    assert world.waiting_for_launch
    assert not world.paused


class RecordingSink(LogSink):
    """Keeps emitted records in memory."""

    def __init__(self):
        self.records = []

    def emit(self, module, record):
        self.records.append((module, record))

    def flush(self):
        pass

    def close(self):
        pass


class TestMetadata:
    """Test class-level game metadata."""

    def test_info(self):
        info = ArkanoidMode.get_info()
        assert info['name'] == "Arkanoid"
        names = [arg['name'] for arg in info['arguments']]
        assert names == ['--skin', '--lives', '--seed', '--log-level']


class TestTransitions:
    """Test screen transitions."""

    def test_starts_on_title(self, mode):
        assert mode.state == GameState.TITLE
        assert mode.get_score() == 0

    @pytest.mark.parametrize("key", [Key.SPACE, Key.ENTER])
    def test_start_from_title(self, mode, key):
        run_frame(mode, press(key))
        assert mode.state == GameState.PLAYING
        assert_initial_session(mode.world)

    def test_start_does_not_launch(self, mode):
        """The SPACE that starts a game is not also a launch."""
        run_frame(mode, press(Key.SPACE))
        assert not mode.world.primary_ball.is_active
        assert mode.last_events is None

        run_frame(mode, press(Key.SPACE))
        assert mode.world.primary_ball.is_active
        assert mode.last_events.launched

    def test_title_ignores_other_keys(self, mode):
        run_frame(mode, press(Key.LEFT, Key.PAUSE))
        assert mode.state == GameState.TITLE

    def test_input_is_consumed(self, mode):
        """A frame of input applies to a single update only."""
        mode.handle_input(press(Key.SPACE))
        mode.update(FRAME_DT)
        mode.update(FRAME_DT)
        assert not mode.world.primary_ball.is_active

    def test_game_over_returns_to_title(self, mode):
        run_frame(mode, press(Key.SPACE))
        world = mode.world
        world.paddle.lives = 1
        world.balls[0] = active_ball(world, 300, 730, vy=7)
        world.waiting_for_launch = False

        run_frame(mode)
        assert mode.state == GameState.GAME_OVER

        run_frame(mode, hold(Key.LEFT))
        assert mode.state == GameState.GAME_OVER

        run_frame(mode, press(Key.ENTER))
        assert mode.state == GameState.TITLE

    def test_win_and_replay_restores_session(self, mode):
        """Title -> Playing -> Won -> Title -> Playing starts from scratch."""
        run_frame(mode, press(Key.SPACE))
        world = mode.world
        for row in world.bricks:
            for col, brick in enumerate(row):
                row[col] = brick.hit()
        world.paddle.expand()
        world.paddle.add_life()
        world.powerups[3] = Powerup(PowerupType.EXPAND, 200, 200, active=True)
        world.score = 4900

        run_frame(mode, hold(Key.RIGHT))
        assert mode.state == GameState.WON
        assert mode.get_score() == 4900

        run_frame(mode, press(Key.ENTER))
        assert mode.state == GameState.TITLE
        run_frame(mode, press(Key.SPACE))
        assert mode.state == GameState.PLAYING
        assert_initial_session(mode.world)

    def test_reset(self, mode):
        run_frame(mode, press(Key.SPACE))
        run_frame(mode, hold(Key.RIGHT))
        mode.reset()
        assert mode.state == GameState.TITLE
        assert_initial_session(mode.world)

    def test_transition_emits_session_record(self, mode, logging_config):
        sink = RecordingSink()
        register_sink('session', sink)

        run_frame(mode, press(Key.SPACE))

        assert len(sink.records) == 1
        module, record = sink.records[0]
        assert module == 'session'
        assert record['type'] == 'transition'
        assert record['from'] == 'title'
        assert record['state'] == 'playing'
        assert record['lives'] == 3


class TestPause:
    """Test pause toggling."""

    @pytest.fixture
    def playing(self, mode):
        run_frame(mode, press(Key.SPACE))
        run_frame(mode, press(Key.SPACE))
        return mode

    def test_pause_and_resume(self, playing):
        run_frame(playing, press(Key.PAUSE))
        assert playing.state == GameState.PAUSED
        assert playing.world.state == GameState.PLAYING

        run_frame(playing, press(Key.PAUSE))
        assert playing.state == GameState.PLAYING

    def test_pause_freezes_everything(self, playing):
        world = playing.world
        world.paddle.expand()
        world.powerups[0] = Powerup(PowerupType.EXPAND, 100, 300, active=True)
        run_frame(playing, press(Key.PAUSE))

        ball = world.primary_ball
        paddle_x = world.paddle.x
        timer = world.paddle.expand_timer

        for _ in range(30):
            run_frame(playing, hold(Key.LEFT), dt=1.0)

        assert (world.primary_ball.x, world.primary_ball.y) == (ball.x, ball.y)
        assert world.paddle.x == paddle_x
        assert world.paddle.expand_timer == timer
        assert world.powerups[0].y == 300
        assert playing.last_events is None

    def test_space_does_not_launch_while_paused(self, mode):
        run_frame(mode, press(Key.SPACE))
        run_frame(mode, press(Key.PAUSE))
        run_frame(mode, press(Key.SPACE))
        assert not mode.world.primary_ball.is_active

    def test_new_session_is_unpaused(self, playing):
        run_frame(playing, press(Key.PAUSE))
        playing.reset()
        run_frame(playing, press(Key.SPACE))
        assert playing.state == GameState.PLAYING
        assert not playing.world.paused


class TestRandomPlay:
    """Run long sessions on random input and check world invariants."""

    def random_frame(self, rng):
        held = frozenset(k for k in (Key.LEFT, Key.RIGHT) if rng.random() < 0.4)
        pressed = set()
        if rng.random() < 0.3:
            pressed.add(Key.SPACE)
        if rng.random() < 0.02:
            pressed.add(Key.PAUSE)
        if rng.random() < 0.05:
            pressed.add(Key.ENTER)
        return InputFrame(held=held | frozenset(pressed), pressed=frozenset(pressed))

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_invariants_hold(self, seed):
        rng = random.Random(seed)
        mode = ArkanoidMode(seed=seed)
        valid = {GameState.TITLE, GameState.PLAYING, GameState.GAME_OVER, GameState.WON}

        for _ in range(3000):
            run_frame(mode, self.random_frame(rng))
            world = mode.world

            assert world.state in valid
            assert 0 <= world.paddle.x <= world.screen_width - world.paddle.width
            assert world.paddle.lives >= 0
            assert len(world.balls) == BALLS_MAX
            assert len(world.powerups) == POWERUPS_MAX
            assert world.active_ball_count() <= MULTI_BALL_CAP
            assert world.score == 100 * (50 - world.bricks_remaining())
            for ball in world.balls:
                if not ball.is_active:
                    assert (ball.vx, ball.vy) == (0.0, 0.0)
            if world.state == GameState.PLAYING and world.waiting_for_launch:
                assert not world.primary_ball.is_active


class TestRendering:
    """Smoke-test drawing each screen to an offscreen surface."""

    def test_title(self, mode, screen):
        mode.render(screen)

    def test_playing(self, mode, screen):
        run_frame(mode, press(Key.SPACE))
        world = mode.world
        world.paddle.expand()
        world.balls[1] = active_ball(world, 300, 300, vx=7, vy=-7)
        for i, kind in enumerate([PowerupType.EXPAND, PowerupType.EXTRA_LIFE,
                                  PowerupType.MULTI_BALL]):
            world.powerups[i] = Powerup(kind, 100 + 50 * i, 300, active=True)
        world.bricks[0][0] = world.bricks[0][0].hit()
        mode.render(screen)

    def test_paused(self, mode, screen):
        run_frame(mode, press(Key.SPACE))
        run_frame(mode, press(Key.PAUSE))
        mode.render(screen)

    @pytest.mark.parametrize("state", [GameState.GAME_OVER, GameState.WON])
    def test_end_screens(self, mode, screen, state):
        mode.world.state = state
        mode.world.score = 1200
        mode.render(screen)


class TestConstruction:
    """Test constructor validation."""

    def test_zero_lives_rejected(self):
        with pytest.raises(ValueError):
            ArkanoidMode(lives=0)

    def test_custom_lives(self):
        mode = ArkanoidMode(lives=5, seed=1)
        run_frame(mode, press(Key.SPACE))
        assert mode.world.paddle.lives == 5

    def test_unknown_skin_falls_back(self, capsys):
        mode = ArkanoidMode(skin='neon', seed=1)
        assert mode.state == GameState.TITLE
        assert "Unknown skin 'neon'" in capsys.readouterr().out

    def test_launcher_kwargs_ignored(self):
        ArkanoidMode(seed=1, fps=30, fullscreen=True)
