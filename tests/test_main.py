"""
Tests for the standalone launcher.

Tests cover:
- Parser defaults and game arguments
- Running the main loop headless until a quit event
"""

import pygame
import pytest

from arkanoid import main as main_module
from arkanoid.config import TARGET_FPS
from arkanoid.input import InputFrame


class TestParser:
    """Test command-line parsing."""

    def test_defaults(self):
        args = main_module.build_parser().parse_args([])
        assert args.fps == TARGET_FPS
        assert args.fullscreen is False
        assert args.skin == 'classic'
        assert args.lives == 3
        assert args.seed is None
        assert args.log_level is None

    def test_values(self):
        args = main_module.build_parser().parse_args(
            ['--lives', '5', '--seed', '42', '--fps', '30', '--log-level', 'DEBUG'],
        )
        assert (args.lives, args.seed, args.fps, args.log_level) == (5, 42, 30, 'DEBUG')

    def test_unknown_skin_rejected(self):
        with pytest.raises(SystemExit):
            main_module.build_parser().parse_args(['--skin', 'neon'])


class TestMain:
    """Test the main loop on the dummy video driver."""

    def test_quits_on_quit_frame(self, monkeypatch, logging_config):
        """Two full frames run, the third poll asks to quit."""
        polls = []

        class QuitAfterTwoFrames:
            def update(self, dt):
                pass

            def poll(self):
                polls.append(True)
                return InputFrame(quit=len(polls) > 2)

        monkeypatch.setattr(main_module, "KeyboardInputSource", QuitAfterTwoFrames)

        assert main_module.main(["--seed", "1", "--fps", "1000"]) == 0
        assert len(polls) == 3
        assert not pygame.get_init()

    def test_zero_lives_is_an_error(self, logging_config):
        with pytest.raises(ValueError):
            main_module.main(['--lives', '0'])
