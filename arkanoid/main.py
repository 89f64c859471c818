#!/usr/bin/env python3
"""Arkanoid - Standalone Entry Point.

Usage:
    arkanoid
    arkanoid --lives 5
    arkanoid --seed 42 --log-level DEBUG
    python -m arkanoid.main --fullscreen
"""

import argparse
import sys
from typing import Any, Dict, List, Optional

import pygame

from arkanoid.config import RANDOM_SEED, SCREEN_HEIGHT, SCREEN_WIDTH, TARGET_FPS
from arkanoid.game_mode import ArkanoidMode
from arkanoid.input import KeyboardInputSource
from arkanoid.logging import (
    close_all_sinks,
    configure_logging,
    create_sink_for_environment,
    get_logger,
    register_sink,
)

log = get_logger('main')

# Launcher options that are not passed to the game
_LAUNCHER_ARGS = {'fps', 'fullscreen', 'log_level'}


def build_parser() -> argparse.ArgumentParser:
    """Argument parser with launcher options plus the game's ARGUMENTS."""
    parser = argparse.ArgumentParser(description=f"{ArkanoidMode.NAME} - Standalone")
    parser.add_argument('--fps', type=int, default=TARGET_FPS,
                        help='Frame rate cap (gameplay speed is tuned for 60)')
    parser.add_argument('--fullscreen', action='store_true',
                        help='Run fullscreen (playfield stays 960x720)')

    for arg_def in ArkanoidMode.get_arguments():
        kwargs: Dict[str, Any] = {}
        for key in ('type', 'default', 'help', 'choices', 'action'):
            if key in arg_def:
                kwargs[key] = arg_def[key]
        if 'action' in kwargs:
            kwargs.pop('type', None)  # action and type are mutually exclusive
        parser.add_argument(arg_def['name'], **kwargs)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run Arkanoid standalone until the window closes."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)
    register_sink('session', create_sink_for_environment('session'))

    game_kwargs = {
        k: v for k, v in vars(args).items()
        if k not in _LAUNCHER_ARGS
    }
    if game_kwargs.get('seed') is None:
        game_kwargs['seed'] = RANDOM_SEED

    game = ArkanoidMode(width=SCREEN_WIDTH, height=SCREEN_HEIGHT, **game_kwargs)

    pygame.init()
    flags = pygame.FULLSCREEN | pygame.SCALED if args.fullscreen else 0
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), flags)
    pygame.display.set_caption(ArkanoidMode.NAME)

    source = KeyboardInputSource()
    clock = pygame.time.Clock()

    log.info("Started %s %s at %d FPS", ArkanoidMode.NAME, ArkanoidMode.VERSION, args.fps)

    try:
        while True:
            dt = clock.tick(args.fps) / 1000.0

            source.update(dt)
            frame = source.poll()
            if frame.quit:
                break

            game.handle_input(frame)
            game.update(dt)

            game.render(screen)
            pygame.display.flip()
    finally:
        close_all_sinks()
        pygame.quit()

    log.info("Exited with score %d", game.get_score())
    return 0


if __name__ == "__main__":
    sys.exit(main())
