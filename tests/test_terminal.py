"""Tests for the curses input source and renderer."""

import curses

import pytest

from term_snake.config import GameConfig
from term_snake.loop import Quit
from term_snake.snake import Direction
from term_snake.snapshot import GameOverReason, GameState, Snapshot
from term_snake.terminal import (
    BODY,
    FOOD,
    HEAD,
    CursesInput,
    CursesRenderer,
    TerminalTooSmallError,
    _session,
    required_size,
    status_line,
    translate_key,
)


class FakeWindow:
    """Stands in for a curses window."""

    def __init__(self, keys=(), rows=40, cols=80):
        self.keys = list(keys)
        self.rows = rows
        self.cols = cols
        self.cells = {}
        self.no_delay = False
        self.refreshed = 0

    def nodelay(self, flag):
        self.no_delay = flag

    def keypad(self, flag):
        pass

    def getch(self):
        return self.keys.pop(0) if self.keys else -1

    def getmaxyx(self):
        return self.rows, self.cols

    def erase(self):
        self.cells.clear()

    def addstr(self, y, x, text):
        for i, ch in enumerate(text):
            self.cells[(y, x + i)] = ch

    def refresh(self):
        self.refreshed += 1

    def line(self, y):
        width = max((x for (row, x) in self.cells if row == y), default=-1) + 1
        return "".join(self.cells.get((y, x), " ") for x in range(width))


def _snapshot(**kwargs) -> Snapshot:
    values = {
        "width": 6,
        "height": 4,
        "snake": ((2, 1), (1, 1), (0, 1)),
        "food": (4, 3),
        "score": 2,
        "state": GameState.RUNNING,
        "tick": 7,
    }
    values.update(kwargs)
    return Snapshot(**values)


class TestTranslateKey:
    def test_arrow_keys(self):
        assert translate_key(curses.KEY_UP) is Direction.UP
        assert translate_key(curses.KEY_DOWN) is Direction.DOWN
        assert translate_key(curses.KEY_LEFT) is Direction.LEFT
        assert translate_key(curses.KEY_RIGHT) is Direction.RIGHT

    def test_wasd(self):
        assert translate_key(ord("w")) is Direction.UP
        assert translate_key(ord("d")) is Direction.RIGHT

    def test_quit(self):
        assert translate_key(ord("q")) is Quit.QUIT
        assert translate_key(ord("Q")) is Quit.QUIT

    def test_unbound(self):
        assert translate_key(ord("x")) is None


class TestCursesInput:
    def test_non_blocking(self):
        window = FakeWindow()
        CursesInput(window)
        assert window.no_delay

    def test_no_keys(self):
        assert CursesInput(FakeWindow()).poll() is None

    def test_latest_key_wins(self):
        window = FakeWindow([curses.KEY_UP, curses.KEY_LEFT, ord("x")])
        assert CursesInput(window).poll() is Direction.LEFT
        assert window.keys == []

    def test_quit_stops_drain(self):
        window = FakeWindow([curses.KEY_UP, ord("q"), curses.KEY_DOWN])
        assert CursesInput(window).poll() is Quit.QUIT
        assert window.keys == [curses.KEY_DOWN]


class TestCursesRenderer:
    def test_draws_board(self):
        window = FakeWindow()
        CursesRenderer(window).render(_snapshot())
        assert window.line(1) == "+------+"
        assert window.line(6) == "+------+"
        assert window.line(2) == "|      |"
        assert window.cells[(3, 3)] == HEAD
        assert window.cells[(3, 2)] == BODY
        assert window.cells[(3, 1)] == BODY
        assert window.cells[(5, 5)] == FOOD
        assert window.refreshed == 1

    def test_status_line_running(self):
        window = FakeWindow()
        CursesRenderer(window).render(_snapshot())
        assert window.line(0).startswith("Score 2  Tick 7")

    def test_status_line_fits_narrow_terminal(self):
        window = FakeWindow(cols=33)
        snap = _snapshot(
            width=30, state=GameState.OVER,
            reason=GameOverReason.BOARD_FULL, score=123,
        )
        CursesRenderer(window).render(snap)
        status = [x for (row, x) in window.cells if row == 0]
        assert max(status) == 31
        assert window.line(0) == status_line(snap)[:32]
        assert window.line(1) == "+" + "-" * 30 + "+"

    def test_no_food_when_board_full(self):
        window = FakeWindow()
        CursesRenderer(window).render(_snapshot(food=None))
        assert FOOD not in window.cells.values()


class TestStatusLine:
    @pytest.mark.parametrize(
        ("reason", "text"),
        [
            (GameOverReason.WALL, "hit the wall"),
            (GameOverReason.SELF, "bit itself"),
            (GameOverReason.BOARD_FULL, "filled the board"),
        ],
    )
    def test_game_over(self, reason, text):
        line = status_line(_snapshot(state=GameState.OVER, reason=reason))
        assert text in line
        assert "Score 2" in line


class TestSession:
    def test_required_size(self):
        assert required_size(30, 15) == (19, 33)

    def test_terminal_too_small(self):
        with pytest.raises(TerminalTooSmallError, match="Terminal is 20x10"):
            _session(FakeWindow(rows=10, cols=20), GameConfig())
