"""
Snake game model.

Holds the snake, the food and the score, and advances one tick at a time.
Driving the ticks and drawing the grid are left to the caller.
"""

from collections import deque
from enum import Enum
from typing import Deque, NamedTuple, Optional

import numpy as np

from .config import SnakeConfig


class Direction(Enum):
    """Where the snake's head is going."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


class Point(NamedTuple):
    x: int
    y: int


class SnakeGame:
    """
    One game of Snake on a WIDTH x HEIGHT grid.

    The snake starts in the middle, INITIAL_LENGTH long, heading right.
    Eating food scores FOOD_SCORE and grows the snake by one.
    Running into its own body ends the game.
    """

    def __init__(
        self,
        config: Optional[SnakeConfig] = None,
        seed: Optional[int] = None,
        player_name: Optional[str] = None
    ):
        """
        Initialize the game.

        Args:
            config: Snake settings.
            seed: Seed for food placement (None for a random game).
            player_name: Shown with the final score.
        """
        self.config = config or SnakeConfig()
        self.player_name = self.config.DEFAULT_PLAYER_NAME
        self.set_player_name(player_name)
        self.rng = np.random.default_rng(seed)

        self.snake: Deque[Point] = deque()
        self.direction = Direction.RIGHT
        self.food: Optional[Point] = None
        self.score = 0
        self.game_over = False

        self.reset()

    def reset(self):
        """Put the snake back in the middle and start over."""
        mid = Point(self.config.WIDTH // 2, self.config.HEIGHT // 2)
        self.snake = deque(
            Point(mid.x - i, mid.y) for i in range(self.config.INITIAL_LENGTH)
        )
        self.direction = Direction.RIGHT
        self.score = 0
        self.game_over = False
        self.place_food()

    def set_player_name(self, name: Optional[str]):
        """Use this name, unless it is empty."""
        if name:
            self.player_name = name

    def final_score_line(self) -> str:
        return f"Game Over! {self.player_name}'s Score: {self.score}"

    @property
    def head(self) -> Point:
        return self.snake[0]

    def place_food(self):
        """Put food on a random free cell, or None if the snake fills the grid."""
        occupied = np.zeros((self.config.HEIGHT, self.config.WIDTH), dtype=bool)
        for part in self.snake:
            occupied[part.y, part.x] = True

        free_y, free_x = np.nonzero(~occupied)
        if len(free_x) == 0:
            self.food = None
            return

        i = self.rng.integers(len(free_x))
        self.food = Point(int(free_x[i]), int(free_y[i]))

    def change_direction(self, new_direction: Direction) -> bool:
        """
        Steer the snake.

        Returns:
            False if the turn was ignored (turning straight back).
        """
        if new_direction == self.direction.opposite():
            return False
        self.direction = new_direction
        return True

    def handle_key(self, key: str):
        """
        Apply one key press.

        w/a/s/d or the arrow keys steer, q quits. Arrow keys are the full
        ESC [ A/B/C/D sequence, since a bare "A" is the w/a/s/d left key.
        """
        arrows = {
            self.config.ARROW_UP: Direction.UP,
            self.config.ARROW_DOWN: Direction.DOWN,
            self.config.ARROW_LEFT: Direction.LEFT,
            self.config.ARROW_RIGHT: Direction.RIGHT,
        }
        if key in arrows:
            self.change_direction(arrows[key])
            return

        key = key.lower()
        if key == self.config.KEY_UP:
            self.change_direction(Direction.UP)
        elif key == self.config.KEY_DOWN:
            self.change_direction(Direction.DOWN)
        elif key == self.config.KEY_LEFT:
            self.change_direction(Direction.LEFT)
        elif key == self.config.KEY_RIGHT:
            self.change_direction(Direction.RIGHT)
        elif key == self.config.KEY_QUIT:
            self.game_over = True

    def _next_head(self) -> Point:
        dx, dy = self.direction.value
        x, y = self.head.x + dx, self.head.y + dy
        if self.config.WRAP_AROUND:
            x %= self.config.WIDTH
            y %= self.config.HEIGHT
        return Point(x, y)

    def step(self) -> bool:
        """
        Advance the game by one tick.

        Returns:
            True if the game is still running.
        """
        if self.game_over:
            return False

        next_head = self._next_head()

        # Walls only matter when wrap-around is off
        if not (0 <= next_head.x < self.config.WIDTH and 0 <= next_head.y < self.config.HEIGHT):
            self.game_over = True
            return False

        # The tail is still there this tick
        if next_head in self.snake:
            self.game_over = True
            return False

        self.snake.appendleft(next_head)

        if next_head == self.food:
            self.score += self.config.FOOD_SCORE
            self.place_food()
        else:
            self.snake.pop()

        return True

    def grid(self) -> np.ndarray:
        """
        Snapshot of the grid as characters, shape (HEIGHT, WIDTH).

        Index as grid[y, x].
        """
        grid = np.full((self.config.HEIGHT, self.config.WIDTH), self.config.EMPTY_CHAR, dtype="<U1")
        for part in self.snake:
            grid[part.y, part.x] = self.config.SNAKE_CHAR
        if self.food is not None:
            grid[self.food.y, self.food.x] = self.config.FOOD_CHAR
        return grid
