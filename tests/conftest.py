"""Pytest fixtures for Arkanoid tests."""
import copy
import os

# Headless pygame; must be set before pygame initializes a video driver
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pygame
import pytest

from arkanoid import logging as arkanoid_logging
from arkanoid.game.world import GameWorld
from arkanoid.game_mode import ArkanoidMode
from arkanoid.game_state import GameState


@pytest.fixture
def world():
    """Fresh world with a fixed seed."""
    return GameWorld(seed=1234)


@pytest.fixture
def playing_world(world):
    """World already on the PLAYING screen with a staged ball."""
    world.state = GameState.PLAYING
    return world


@pytest.fixture
def mode():
    """Game mode on the title screen with a fixed seed."""
    return ArkanoidMode(seed=1234)


@pytest.fixture
def screen():
    """Offscreen surface matching the playfield, with fonts available."""
    pygame.font.init()
    yield pygame.Surface((960, 720))


@pytest.fixture
def logging_config():
    """Snapshot logging config and sinks; restore after the test."""
    saved = copy.deepcopy(arkanoid_logging._config)
    yield arkanoid_logging._config
    arkanoid_logging.close_all_sinks()
    arkanoid_logging._config.clear()
    arkanoid_logging._config.update(saved)
