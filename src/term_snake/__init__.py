"""Term Snake: a terminal snake game built around a tick-based engine."""

from term_snake.config import GameConfig
from term_snake.engine import GameEngine
from term_snake.grid import CellType, Grid
from term_snake.loop import InputSource, Quit, Renderer, run_game
from term_snake.snake import Direction, Snake
from term_snake.snapshot import GameOverReason, GameState, Snapshot

__all__ = [
    "CellType",
    "Direction",
    "GameConfig",
    "GameEngine",
    "GameOverReason",
    "GameState",
    "Grid",
    "InputSource",
    "Quit",
    "Renderer",
    "Snake",
    "Snapshot",
    "run_game",
]
