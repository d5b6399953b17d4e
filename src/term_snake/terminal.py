"""Curses-backed input source and renderer."""

from __future__ import annotations

import curses
import logging
from typing import TYPE_CHECKING

from term_snake.engine import GameEngine
from term_snake.loop import InputEvent, Quit, run_game
from term_snake.snake import Direction
from term_snake.snapshot import GameOverReason

if TYPE_CHECKING:
    from term_snake.config import GameConfig
    from term_snake.snapshot import Snapshot

logger = logging.getLogger(__name__)

HEAD = "#"
BODY = "o"
FOOD = "*"

KEY_BINDINGS: dict[int, InputEvent] = {
    curses.KEY_UP: Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT,
    ord("w"): Direction.UP,
    ord("s"): Direction.DOWN,
    ord("a"): Direction.LEFT,
    ord("d"): Direction.RIGHT,
    ord("q"): Quit.QUIT,
    ord("Q"): Quit.QUIT,
}

_REASON_TEXT: dict[GameOverReason, str] = {
    GameOverReason.WALL: "hit the wall",
    GameOverReason.SELF: "bit itself",
    GameOverReason.BOARD_FULL: "filled the board",
}


class TerminalTooSmallError(ValueError):
    """The terminal cannot fit the configured board."""


def translate_key(key: int) -> InputEvent | None:
    """Map a curses key code to an input event, or ``None`` if unbound."""
    return KEY_BINDINGS.get(key)


def required_size(width: int, height: int) -> tuple[int, int]:
    """Terminal ``(rows, cols)`` needed to draw a board of the given size.

    One status line, two border rows and a spare row so the bottom-right
    border glyph never lands in the last screen cell.
    """
    return height + 4, width + 3


class CursesInput:
    """Non-blocking keyboard input from a curses window."""

    def __init__(self, window) -> None:
        self.window = window
        self.window.nodelay(True)
        self.window.keypad(True)

    def poll(self) -> InputEvent | None:
        """Drain pending keys and return the last bound event.

        Quit stops the drain immediately so it cannot be overridden by a
        later key.
        """
        event: InputEvent | None = None
        while True:
            key = self.window.getch()
            if key == -1:
                break
            mapped = translate_key(key)
            if mapped is None:
                continue
            event = mapped
            if event is Quit.QUIT:
                break
        return event


class CursesRenderer:
    """Redraws the whole board on every snapshot."""

    def __init__(self, window) -> None:
        self.window = window

    def render(self, snapshot: Snapshot) -> None:
        self.window.erase()
        # Writing into the last column would wrap onto the border row.
        cols = self.window.getmaxyx()[1]
        self.window.addstr(0, 0, status_line(snapshot)[: max(cols - 1, 0)])

        border = "+" + "-" * snapshot.width + "+"
        self.window.addstr(1, 0, border)
        for y in range(snapshot.height):
            self.window.addstr(y + 2, 0, "|")
            self.window.addstr(y + 2, snapshot.width + 1, "|")
        self.window.addstr(snapshot.height + 2, 0, border)

        if snapshot.food is not None:
            self._put(snapshot.food, FOOD)
        for seg in snapshot.snake[1:]:
            self._put(seg, BODY)
        self._put(snapshot.head, HEAD)
        self.window.refresh()

    def _put(self, pos: tuple[int, int], glyph: str) -> None:
        x, y = pos
        self.window.addstr(y + 2, x + 1, glyph)


def status_line(snapshot: Snapshot) -> str:
    """Text shown above the board."""
    if snapshot.is_over:
        what = _REASON_TEXT.get(snapshot.reason, "stopped")
        return f"Game over: snake {what}. Score {snapshot.score}"
    return f"Score {snapshot.score}  Tick {snapshot.tick}  (q to quit)"


def _session(stdscr, config: GameConfig) -> Snapshot:
    rows, cols = stdscr.getmaxyx()
    need_rows, need_cols = required_size(config.width, config.height)
    if rows < need_rows or cols < need_cols:
        raise TerminalTooSmallError(
            f"Terminal is {cols}x{rows}; a {config.width}x{config.height} "
            f"board needs at least {need_cols}x{need_rows}."
        )
    try:
        curses.curs_set(0)
    except curses.error:
        logger.debug("Terminal cannot hide the cursor.")

    engine = GameEngine.from_config(config)
    return run_game(
        engine,
        CursesInput(stdscr),
        CursesRenderer(stdscr),
        config.tick_interval,
        game_over_delay=config.game_over_delay,
    )


def play(config: GameConfig) -> Snapshot:
    """Run one game in the terminal and return the final snapshot.

    ``curses.wrapper`` restores the terminal even if the game raises.
    """
    return curses.wrapper(_session, config)
