"""Base class for Arkanoid skins.

Skins handle ALL rendering - the game only manages state. They read
the world and issue draw calls; they never change it.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from ..entities.ball import Ball
    from ..entities.brick import Brick
    from ..entities.paddle import Paddle
    from ..entities.powerup import Powerup
    from ..world import GameWorld


class ArkanoidSkin(ABC):
    """Base class for game skins."""

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    @abstractmethod
    def render_background(self, screen: pygame.Surface) -> None:
        """Fill the whole screen (drawn first on every screen)."""
        pass

    @abstractmethod
    def render_paddle(self, paddle: 'Paddle', screen: pygame.Surface) -> None:
        pass

    @abstractmethod
    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        pass

    @abstractmethod
    def render_brick(self, brick: 'Brick', screen: pygame.Surface) -> None:
        pass

    @abstractmethod
    def render_powerup(self, powerup: 'Powerup', screen: pygame.Surface) -> None:
        pass

    @abstractmethod
    def render_title(self, screen: pygame.Surface) -> None:
        pass

    @abstractmethod
    def render_game_over(self, screen: pygame.Surface, score: int) -> None:
        pass

    @abstractmethod
    def render_win(self, screen: pygame.Surface, score: int) -> None:
        pass

    def render_hud(self, screen: pygame.Surface, score: int, lives: int) -> None:
        """Render the heads-up display (score, lives)."""
        pass

    def render_pause(self, screen: pygame.Surface) -> None:
        """Render the pause overlay on top of the frozen playfield."""
        pass

    def render_playfield(self, world: 'GameWorld', screen: pygame.Surface) -> None:
        """Draw the PLAYING screen from the world's entities."""
        self.render_paddle(world.paddle, screen)
        self.render_hud(screen, world.score, world.paddle.lives)

        for ball in world.balls:
            if ball.is_active:
                self.render_ball(ball, screen)

        for brick in world.iter_bricks():
            if brick.is_active:
                self.render_brick(brick, screen)

        for powerup in world.powerups:
            if powerup.is_active:
                self.render_powerup(powerup, screen)

        if world.paused:
            self.render_pause(screen)
