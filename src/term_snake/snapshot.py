"""Read-only views of engine state handed to renderers."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class GameState(str, enum.Enum):
    """Lifecycle states for a game."""

    RUNNING = "running"
    OVER = "over"


class GameOverReason(str, enum.Enum):
    """Why a game ended."""

    WALL = "wall"
    SELF = "self"
    BOARD_FULL = "board_full"


@dataclass(frozen=True)
class Snapshot:
    """Immutable point-in-time view of a game.

    ``snake`` is head first. ``food`` is ``None`` only once the snake
    fills the whole board.
    """

    width: int
    height: int
    snake: tuple[tuple[int, int], ...]
    food: tuple[int, int] | None
    score: int
    state: GameState
    reason: GameOverReason | None = None
    tick: int = 0

    @property
    def head(self) -> tuple[int, int]:
        return self.snake[0]

    @property
    def is_over(self) -> bool:
        return self.state is GameState.OVER

    def to_dict(self) -> dict:
        """Serialize to a JSON-friendly dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "snake": [list(seg) for seg in self.snake],
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "state": self.state.value,
            "reason": self.reason.value if self.reason is not None else None,
            "tick": self.tick,
        }
