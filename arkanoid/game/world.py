"""GameWorld - every entity and session field of one Arkanoid session.

The world is a plain aggregate handed to the simulation and renderer.
Ball and powerup pools are fixed-size lists; slots are reused by
scanning for the first inactive entry and are never appended to.
"""

import random
from typing import Any, Dict, Iterator, List, Optional, Sequence

from arkanoid.config import (
    BALL_STAGE_GAP,
    BALLS_MAX,
    BRICK_CELL_HEIGHT,
    BRICK_MARGIN_X,
    BRICK_MARGIN_Y,
    BRICK_PADDING_X,
    BRICK_PADDING_Y,
    BRICKS_PER_LINE,
    LINES_OF_BRICKS,
    PLAYER_MAX_LIFE,
    POWERUPS_MAX,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from arkanoid.game.entities import (
    Ball,
    BallConfig,
    Brick,
    Paddle,
    PaddleConfig,
    Powerup,
)
from arkanoid.game_state import GameState
from arkanoid.models import Point2D, Rectangle


def first_free_slot(pool: Sequence[Any]) -> Optional[int]:
    """Index of the first inactive entry in a pool, or None when full."""
    for i, item in enumerate(pool):
        if not item.is_active:
            return i
    return None


class GameWorld:
    """All state of one session.

    Attributes:
        paddle: The player's paddle (also holds lives)
        balls: Ball pool of BALLS_MAX slots; slot 0 is the primary ball
        bricks: LINES_OF_BRICKS rows of BRICKS_PER_LINE bricks
        powerups: Powerup pool of POWERUPS_MAX slots
        state: Screen state (never GameState.PAUSED)
        paused: Gameplay frozen while True
        score: Points this session
        waiting_for_launch: A ball is staged on the paddle
        rng: Random source for launches, splits and powerup rolls
    """

    def __init__(
        self,
        screen_width: int = SCREEN_WIDTH,
        screen_height: int = SCREEN_HEIGHT,
        lives: int = PLAYER_MAX_LIFE,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        """Create a world in the title state with a fresh session set up.

        Args:
            screen_width: Playfield width
            screen_height: Playfield height
            lives: Lives at the start of every session
            seed: Seed for a private random source (ignored if rng given)
            rng: Random source to use directly
        """
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.rng = rng if rng is not None else random.Random(seed)

        self.paddle = Paddle(PaddleConfig(lives=lives), screen_width, screen_height)
        self.ball_config = BallConfig()
        self.brick_cell_width = screen_width / BRICKS_PER_LINE

        self.balls: List[Ball] = []
        self.bricks: List[List[Brick]] = []
        self.powerups: List[Powerup] = []

        self.state = GameState.TITLE
        self.paused = False
        self.score = 0
        self.waiting_for_launch = True

        self.init_game()

    # =========================================================================
    # Session setup
    # =========================================================================

    def init_game(self) -> None:
        """Reset every entity and session field for a new session.

        The screen state is left alone; the caller decides where to go.
        """
        self.paddle.reset()
        self.reset_balls(self.stage_point())
        self.bricks = self._build_bricks()
        self.powerups = [Powerup() for _ in range(POWERUPS_MAX)]
        self.score = 0
        self.paused = False
        self.waiting_for_launch = True

    def _build_bricks(self) -> List[List[Brick]]:
        """Lay out the full brick grid."""
        grid = []
        for row in range(LINES_OF_BRICKS):
            line = []
            for col in range(BRICKS_PER_LINE):
                rect = Rectangle(
                    x=col * self.brick_cell_width + BRICK_MARGIN_X,
                    y=row * BRICK_CELL_HEIGHT + BRICK_MARGIN_Y,
                    width=self.brick_cell_width - BRICK_PADDING_X,
                    height=BRICK_CELL_HEIGHT - BRICK_PADDING_Y,
                )
                line.append(Brick(rect, (row, col)))
            grid.append(line)
        return grid

    def reset_balls(self, position: Point2D) -> None:
        """Clear the ball pool and stage one resting primary ball.

        Args:
            position: Center for the staged ball
        """
        self.balls = [
            Ball(self.ball_config, position.x, position.y)
            for _ in range(BALLS_MAX)
        ]

    def stage_point(self) -> Point2D:
        """Where the primary ball rests before launch."""
        return self.paddle.stage_point(self.ball_config.radius, BALL_STAGE_GAP)

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def primary_ball(self) -> Ball:
        return self.balls[0]

    def free_ball_slot(self) -> Optional[int]:
        return first_free_slot(self.balls)

    def free_powerup_slot(self) -> Optional[int]:
        return first_free_slot(self.powerups)

    def active_ball_count(self) -> int:
        """Count balls in play; losing a ball lowers it, clones raise it."""
        return sum(1 for ball in self.balls if ball.is_active)

    def any_ball_active(self) -> bool:
        return any(ball.is_active for ball in self.balls)

    def iter_bricks(self) -> Iterator[Brick]:
        """All bricks in row-major order."""
        for line in self.bricks:
            yield from line

    def bricks_remaining(self) -> int:
        return sum(1 for brick in self.iter_bricks() if brick.is_active)

    def active_powerups(self) -> List[Powerup]:
        return [p for p in self.powerups if p.is_active]

    def snapshot(self) -> Dict[str, Any]:
        """JSON-friendly summary for logs and structured records."""
        return {
            'state': self.state.value,
            'paused': self.paused,
            'score': self.score,
            'lives': self.paddle.lives,
            'balls_active': self.active_ball_count(),
            'bricks_remaining': self.bricks_remaining(),
            'powerups_active': len(self.active_powerups()),
            'waiting_for_launch': self.waiting_for_launch,
        }
