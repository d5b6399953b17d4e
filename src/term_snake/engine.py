"""Tick-based game engine composing grid, snake, and food logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from term_snake.food import FoodSpawner
from term_snake.grid import CellType, Grid
from term_snake.snake import Direction, Snake
from term_snake.snapshot import GameOverReason, GameState, Snapshot

if TYPE_CHECKING:
    from term_snake.config import GameConfig

logger = logging.getLogger(__name__)


class GameEngine:
    """Single-snake, tick-based game engine.

    The engine is the only owner of the grid, snake, food and score.
    Callers steer with :meth:`set_direction`, advance with :meth:`tick`
    and read state through :meth:`snapshot`.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        initial_length: int = 3,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = Grid(width=width, height=height)
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        start_x = width // 2
        start_y = height // 2
        if initial_length > start_x + 1:
            raise ValueError(
                f"Initial snake of length {initial_length} does not fit "
                f"a board {width} cells wide."
            )
        self.snake = Snake(start_x, start_y, Direction.RIGHT, initial_length)

        # Paint initial snake onto the grid.
        for x, y in self.snake.body:
            self.grid.set(x, y, CellType.SNAKE)

        self.food = FoodSpawner(self.grid, rng=self.rng)
        self.food.spawn()

        self.score = 0
        self.ticks = 0
        self.state = GameState.RUNNING
        self.reason: GameOverReason | None = None
        self._pending_direction: Direction | None = None
        logger.info("New %dx%d game started.", width, height)

    @classmethod
    def from_config(cls, config: GameConfig) -> GameEngine:
        """Build an engine from a :class:`GameConfig`."""
        return cls(
            config.width,
            config.height,
            initial_length=config.initial_length,
            seed=config.seed,
        )

    @property
    def is_over(self) -> bool:
        return self.state is GameState.OVER

    def set_direction(self, direction: Direction) -> None:
        """Record the heading for the next tick; the latest call wins.

        Reversals into the snake's own neck are ignored, as is any input
        once the game is over.
        """
        if self.is_over or self.snake.is_reversal(direction):
            return
        self._pending_direction = direction

    def tick(self) -> Snapshot:
        """Advance the game by one step and return the new snapshot."""
        if self.is_over:
            return self.snapshot()

        if self._pending_direction is not None:
            self.snake.direction = self._pending_direction
            self._pending_direction = None

        next_x, next_y = self.snake.next_head()

        # --- boundary check ---
        if not self.grid.in_bounds(next_x, next_y):
            self._end(GameOverReason.WALL)
            return self.snapshot()

        # --- self-collision check (look-ahead) ---
        # The tail moves away this tick unless the snake is about to grow.
        will_grow = self.grid.get(next_x, next_y) == CellType.FOOD
        body = set(self.snake.body)
        if not will_grow:
            body.discard(self.snake.tail)
        if (next_x, next_y) in body:
            self._end(GameOverReason.SELF)
            return self.snapshot()

        # --- move ---
        vacated = self.snake.advance((next_x, next_y), grow=will_grow)
        if vacated is not None:
            self.grid.set(vacated[0], vacated[1], CellType.EMPTY)
        self.grid.set(next_x, next_y, CellType.SNAKE)
        self.ticks += 1

        if will_grow:
            self.score += 1
            logger.debug("Food eaten at %s; score %d.", (next_x, next_y), self.score)
            if self.food.spawn() is None:
                self._end(GameOverReason.BOARD_FULL)

        return self.snapshot()

    def snapshot(self) -> Snapshot:
        """Return an immutable view of the current state."""
        return Snapshot(
            width=self.grid.width,
            height=self.grid.height,
            snake=tuple(self.snake.body),
            food=self.food.position,
            score=self.score,
            state=self.state,
            reason=self.reason,
            tick=self.ticks,
        )

    def _end(self, reason: GameOverReason) -> None:
        """Move to the terminal state."""
        self.state = GameState.OVER
        self.reason = reason
        logger.info(
            "Game over (%s) at tick %d with score %d.",
            reason.value, self.ticks, self.score,
        )
