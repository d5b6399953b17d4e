"""Fixed-interval run loop wiring an input source and renderer to the engine."""

from __future__ import annotations

import enum
import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

from term_snake.snake import Direction

if TYPE_CHECKING:
    from term_snake.engine import GameEngine
    from term_snake.snapshot import Snapshot

logger = logging.getLogger(__name__)


class Quit(enum.Enum):
    """Signal that the player asked to leave the game."""

    QUIT = "quit"


InputEvent = Direction | Quit


class InputSource(Protocol):
    """Delivers at most one pending event per poll without blocking."""

    def poll(self) -> InputEvent | None: ...


class Renderer(Protocol):
    """Draws a snapshot; called once per tick."""

    def render(self, snapshot: Snapshot) -> None: ...


def run_game(
    engine: GameEngine,
    input_source: InputSource,
    renderer: Renderer,
    interval: float,
    *,
    game_over_delay: float = 0.0,
    sleep: Callable[[float], None] = time.sleep,
) -> Snapshot:
    """Drive *engine* until the game ends or the player quits.

    Returns the last snapshot handed to the renderer.
    """
    snapshot = engine.snapshot()
    renderer.render(snapshot)

    while not snapshot.is_over:
        event = input_source.poll()
        if event is Quit.QUIT:
            logger.info("Player quit at tick %d.", snapshot.tick)
            return snapshot
        if event is not None:
            engine.set_direction(event)

        snapshot = engine.tick()
        renderer.render(snapshot)
        sleep(game_over_delay if snapshot.is_over else interval)

    return snapshot
