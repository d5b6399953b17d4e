"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from term_snake.grid import CellType

if TYPE_CHECKING:
    from term_snake.grid import Grid

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places the single piece of food on a free grid cell.

    Uses an injected NumPy generator so a fixed seed yields a fixed
    sequence of food positions.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.position: tuple[int, int] | None = None

    def spawn(self) -> tuple[int, int] | None:
        """Place food on a random empty cell, replacing any current food.

        Returns the new position, or ``None`` when every cell is taken.
        """
        self.consume()
        empty = self.grid.empty_cells()
        if not empty:
            logger.warning("No empty cells available for food.")
            return None

        pos = empty[int(self.rng.integers(len(empty)))]
        self.grid.set(pos[0], pos[1], CellType.FOOD)
        self.position = pos
        return pos

    def consume(self) -> tuple[int, int] | None:
        """Remove the current food from the board and return where it was.

        The cell is only cleared if it still holds food, so a snake head
        already painted there is left alone.
        """
        pos = self.position
        if pos is not None and self.grid.get(pos[0], pos[1]) == CellType.FOOD:
            self.grid.set(pos[0], pos[1], CellType.EMPTY)
        self.position = None
        return pos
