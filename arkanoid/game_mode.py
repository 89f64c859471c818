"""Arkanoid - single-screen brick breaker.

Features:
- Title / playing / game over / win screen flow
- Arrow-key paddle with steerable rebounds
- Expand, Extra-Life and Multi-Ball powerups
- Pause toggle that freezes gameplay but keeps rendering
"""

import random
from typing import Optional

import pygame

from arkanoid.base_game import BaseGame
from arkanoid.config import PLAYER_MAX_LIFE, SCREEN_HEIGHT, SCREEN_WIDTH
from arkanoid.game import simulation
from arkanoid.game.simulation import FrameEvents
from arkanoid.game.skins import SKINS, ArkanoidSkin, ClassicSkin
from arkanoid.game.world import GameWorld
from arkanoid.game_state import GameState
from arkanoid.input import NO_INPUT, InputFrame, Key
from arkanoid.logging import emit_record, get_logger

log = get_logger('game_mode')


class ArkanoidMode(BaseGame):
    """Arkanoid game mode.

    Owns one GameWorld and a skin. Input for a frame is handed over with
    `handle_input()` and consumed by the next `update()`.
    """

    NAME = "Arkanoid"
    DESCRIPTION = "Break all 50 bricks with paddle and ball; catch falling powerups."
    VERSION = "1.0.0"
    AUTHOR = "Arkanoid Team"

    ARGUMENTS = [
        {
            'name': '--skin',
            'type': str,
            'default': 'classic',
            'choices': sorted(SKINS),
            'help': 'Visual skin'
        },
        {
            'name': '--lives',
            'type': int,
            'default': PLAYER_MAX_LIFE,
            'help': 'Starting lives'
        },
        {
            'name': '--seed',
            'type': int,
            'default': None,
            'help': 'Random seed for launches and powerups'
        },
    ]

    def __init__(
        self,
        skin: str = 'classic',
        lives: int = PLAYER_MAX_LIFE,
        seed: Optional[int] = None,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        rng: Optional[random.Random] = None,
        **kwargs,
    ):
        """Initialize Arkanoid.

        Args:
            skin: Visual skin to use
            lives: Starting lives per session
            seed: Random seed (None = OS entropy)
            width: Screen width
            height: Screen height
            rng: Random source to share with the world (overrides seed)
            **kwargs: Ignored launcher options
        """
        if lives < 1:
            raise ValueError(f"lives must be at least 1, got {lives}")

        self._world = GameWorld(width, height, lives=lives, seed=seed, rng=rng)

        skin_class = SKINS.get(skin)
        if skin_class is None:
            log.warning("Unknown skin %r, using %s", skin, ClassicSkin.NAME)
            skin_class = ClassicSkin
        self._skin: ArkanoidSkin = skin_class()

        self._frame: InputFrame = NO_INPUT
        self._last_events: Optional[FrameEvents] = None

    @property
    def world(self) -> GameWorld:
        return self._world

    @property
    def last_events(self) -> Optional[FrameEvents]:
        """Events of the most recent gameplay step, if one ran."""
        return self._last_events

    def _get_internal_state(self) -> GameState:
        """Screen state, or PAUSED while play is frozen."""
        if self._world.state == GameState.PLAYING and self._world.paused:
            return GameState.PAUSED
        return self._world.state

    def get_score(self) -> int:
        return self._world.score

    def handle_input(self, frame: InputFrame) -> None:
        """Store the input polled for this frame."""
        self._frame = frame

    def update(self, dt: float) -> None:
        """Run one frame of the screen state machine.

        Args:
            dt: Delta time in seconds
        """
        frame, self._frame = self._frame, NO_INPUT
        self._last_events = None
        world = self._world
        previous = world.state

        if previous == GameState.TITLE:
            if frame.any_pressed(Key.SPACE, Key.ENTER):
                self._start_session()

        elif previous == GameState.PLAYING:
            if frame.was_pressed(Key.PAUSE):
                world.paused = not world.paused
                log.info("Paused" if world.paused else "Resumed")

            if not world.paused:
                self._last_events = simulation.step(world, frame, dt)

        elif frame.any_pressed(Key.ENTER, Key.SPACE):
            world.state = GameState.TITLE

        if world.state != previous:
            self._on_transition(previous)

    def _start_session(self) -> None:
        """Fresh entities, then straight into play."""
        self._world.init_game()
        self._world.state = GameState.PLAYING

    def _on_transition(self, previous: GameState) -> None:
        world = self._world
        log.info("%s -> %s (score=%d, lives=%d)",
                 previous.value, world.state.value, world.score, world.paddle.lives)
        emit_record('session', {
            'type': 'transition',
            'from': previous.value,
            **world.snapshot(),
        })

    def render(self, screen: pygame.Surface) -> None:
        """Render the current screen.

        Args:
            screen: Pygame surface to draw on
        """
        world = self._world
        self._skin.render_background(screen)

        if world.state == GameState.TITLE:
            self._skin.render_title(screen)
        elif world.state == GameState.PLAYING:
            self._skin.render_playfield(world, screen)
        elif world.state == GameState.GAME_OVER:
            self._skin.render_game_over(screen, world.score)
        elif world.state == GameState.WON:
            self._skin.render_win(screen, world.score)

    def reset(self) -> None:
        """Back to the title screen with a fresh session prepared."""
        self._world.init_game()
        self._world.state = GameState.TITLE
        self._frame = NO_INPUT
        self._last_events = None
