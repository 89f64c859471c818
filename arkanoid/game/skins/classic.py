"""Classic skin - flat-color Arkanoid look on a blue gradient."""

from typing import TYPE_CHECKING, Dict, Optional, Tuple

import pygame

from arkanoid.config import BACKGROUND_BOTTOM, BACKGROUND_TOP, COLORS
from arkanoid.game.entities import PowerupType

from .base import ArkanoidSkin

if TYPE_CHECKING:
    from ..entities.ball import Ball
    from ..entities.brick import Brick
    from ..entities.paddle import Paddle
    from ..entities.powerup import Powerup

Color = Tuple[int, int, int]

INSTRUCTIONS = (
    "Press SPACE or ENTER to start",
    "Move paddle: LEFT / RIGHT arrow keys",
    "Launch ball: SPACE",
    "Pause/Resume: P",
    "Clear all bricks to win!",
    "",
    "Powerups:",
    "   E = Expand Paddle,   + = Extra Life,   Three Balls = Multi-ball",
)

RETURN_PROMPT = "PRESS [ENTER] TO RETURN TO TITLE"


class ClassicSkin(ArkanoidSkin):
    """Renders the game with flat shapes on a gradient backdrop.

    - Paddle: dark blue rectangle, yellow while expanded
    - Balls: maroon circles
    - Bricks: orange/gray checkerboard
    - Powerups: E box, red + circle, triple-ball cluster
    """

    NAME = "classic"
    DESCRIPTION = "Flat colors on a blue gradient"

    STRIPE_HEIGHT = 4
    VERSION_TEXT = "version 1"

    def __init__(self):
        """Initialize classic skin."""
        self._fonts: Dict[int, pygame.font.Font] = {}
        self._background: Optional[pygame.Surface] = None

    # =========================================================================
    # Helpers
    # =========================================================================

    def _font(self, size: int) -> pygame.font.Font:
        """Get (and cache) the default font at a pixel size."""
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _draw_text(
        self,
        screen: pygame.Surface,
        text: str,
        pos: Tuple[float, float],
        size: int,
        color: Color,
    ) -> pygame.Rect:
        """Draw text with its top-left corner at pos."""
        surface = self._font(size).render(text, True, color)
        return screen.blit(surface, (int(pos[0]), int(pos[1])))

    def _draw_centered(
        self,
        screen: pygame.Surface,
        text: str,
        y: float,
        size: int,
        color: Color,
    ) -> pygame.Rect:
        """Draw text horizontally centered with its top at y."""
        surface = self._font(size).render(text, True, color)
        rect = surface.get_rect(midtop=(screen.get_width() // 2, int(y)))
        return screen.blit(surface, rect)

    def _build_background(self, size: Tuple[int, int]) -> pygame.Surface:
        width, height = size
        surface = pygame.Surface(size)
        for y in range(0, height, self.STRIPE_HEIGHT):
            t = y / height
            color = tuple(
                int(top * (1 - t) + bottom * t)
                for top, bottom in zip(BACKGROUND_TOP, BACKGROUND_BOTTOM)
            )
            pygame.draw.rect(surface, color, (0, y, width, self.STRIPE_HEIGHT))
        return surface

    # =========================================================================
    # Entities
    # =========================================================================

    def render_background(self, screen: pygame.Surface) -> None:
        """Vertical gradient in 4-pixel stripes."""
        if self._background is None or self._background.get_size() != screen.get_size():
            self._background = self._build_background(screen.get_size())
        screen.blit(self._background, (0, 0))

    def render_paddle(self, paddle: 'Paddle', screen: pygame.Surface) -> None:
        color = COLORS['yellow'] if paddle.expanded else COLORS['dark_blue']
        pygame.draw.rect(screen, color, paddle.rect.as_tuple())

    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        if not ball.is_active:
            return
        pos = (int(ball.x), int(ball.y))
        pygame.draw.circle(screen, COLORS['maroon'], pos, int(ball.radius))

    def render_brick(self, brick: 'Brick', screen: pygame.Surface) -> None:
        if not brick.is_active:
            return
        row, col = brick.grid_position
        color = COLORS['gray'] if (row + col) % 2 else COLORS['orange']
        pygame.draw.rect(screen, color, brick.rect.as_tuple())

    def render_powerup(self, powerup: 'Powerup', screen: pygame.Surface) -> None:
        if not powerup.is_active:
            return
        x, y = int(powerup.x), int(powerup.y)

        if powerup.kind == PowerupType.EXPAND:
            pygame.draw.rect(screen, COLORS['yellow'], (x - 12, y - 7, 24, 14))
            pygame.draw.rect(screen, COLORS['black'], (x - 12, y - 7, 24, 14), 1)
            self._draw_text(screen, "E", (x - 6, y - 7), 16, COLORS['black'])
        elif powerup.kind == PowerupType.EXTRA_LIFE:
            pygame.draw.circle(screen, COLORS['red'], (x, y), 12)
            self._draw_text(screen, "+", (x - 6, y - 12), 22, COLORS['white'])
        elif powerup.kind == PowerupType.MULTI_BALL:
            for dx in (-7, 7, 0):
                pygame.draw.circle(screen, COLORS['maroon'], (x + dx, y), 7)

    def render_hud(self, screen: pygame.Surface, score: int, lives: int) -> None:
        """Life markers bottom-left, score top-right."""
        height = screen.get_height()
        for i in range(lives):
            pygame.draw.rect(screen, COLORS['light_gray'], (20 + 44 * i, height - 30, 36, 11))

        self._draw_text(
            screen, f"SCORE: {score:04d}",
            (screen.get_width() - 170, 20), 28, COLORS['yellow'],
        )

    def render_pause(self, screen: pygame.Surface) -> None:
        self._draw_centered(
            screen, "GAME PAUSED", screen.get_height() // 2 - 48, 48, COLORS['gray'],
        )

    # =========================================================================
    # Screens
    # =========================================================================

    def render_title(self, screen: pygame.Surface) -> None:
        """Title, version tag and the instruction lines."""
        self._draw_centered(screen, "Arkanoid", 120, 110, COLORS['title'])

        version = self._font(28).render(self.VERSION_TEXT, True, COLORS['light_gray'])
        screen.blit(version, (screen.get_width() - version.get_width() - 24,
                              screen.get_height() - 44))

        for i, line in enumerate(INSTRUCTIONS):
            if line:
                self._draw_centered(screen, line, 290 + i * 32, 26, COLORS['ray_white'])

    def render_game_over(self, screen: pygame.Surface, score: int) -> None:
        mid = screen.get_height() // 2
        self._draw_centered(screen, "GAME OVER", mid - 80, 56, COLORS['red'])
        self._draw_centered(screen, f"FINAL SCORE: {score}", mid, 32, COLORS['maroon'])
        self._draw_centered(screen, RETURN_PROMPT, mid + 72, 26, COLORS['dark_gray'])

    def render_win(self, screen: pygame.Surface, score: int) -> None:
        mid = screen.get_height() // 2
        self._draw_centered(screen, "VICTORY!", mid - 96, 64, COLORS['dark_green'])
        self._draw_centered(screen, f"FINAL SCORE: {score}", mid, 34, COLORS['maroon'])
        self._draw_centered(screen, "YOU CLEARED ALL THE BRICKS!", mid + 48, 28, COLORS['orange'])
        self._draw_centered(screen, RETURN_PROMPT, mid + 96, 26, COLORS['dark_gray'])
