"""Board representation for the snake game."""

from __future__ import annotations

import enum

import numpy as np

MIN_SIZE = 4


class CellType(enum.IntEnum):
    """Integer codes stored in the grid array."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2


class Grid:
    """NumPy-backed board of fixed width and height.

    Positions are ``(x, y)`` pairs; the underlying array is indexed
    ``cells[y, x]`` so each row of the array is one line on screen.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < MIN_SIZE or height < MIN_SIZE:
            raise ValueError(
                f"Grid dimensions must be at least {MIN_SIZE}x{MIN_SIZE}."
            )
        self.width = width
        self.height = height
        self.cells = np.zeros((height, width), dtype=np.int8)

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> CellType:
        """Return the cell type at the given coordinate."""
        return CellType(self.cells[y, x])

    def set(self, x: int, y: int, cell_type: CellType) -> None:
        """Set the cell type at the given coordinate."""
        self.cells[y, x] = cell_type

    def empty_cells(self) -> list[tuple[int, int]]:
        """Return all empty cells as ``(x, y)`` pairs in row-major order."""
        ys, xs = np.where(self.cells == CellType.EMPTY)
        return list(zip(xs.tolist(), ys.tolist(), strict=True))
