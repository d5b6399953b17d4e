"""Game configuration."""

from __future__ import annotations

import json
import logging
import numbers
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from term_snake.grid import MIN_SIZE

logger = logging.getLogger(__name__)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class GameConfig:
    """Board size, pacing and seeding for one game.

    Supports JSON serialization so a setup can be replayed.
    """

    width: int = 30
    height: int = 15
    initial_length: int = 3
    # Seconds between ticks.
    tick_interval: float = 0.15
    # Seconds the final board stays on screen.
    game_over_delay: float = 3.0
    seed: int | None = None

    def __post_init__(self) -> None:
        for name in ("width", "height", "initial_length"):
            if not _is_int(getattr(self, name)):
                raise ValueError(f"{name} must be an integer.")
        if self.seed is not None and not _is_int(self.seed):
            raise ValueError("seed must be an integer or null.")
        for name in ("tick_interval", "game_over_delay"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ValueError(f"{name} must be a number of seconds.")

        if self.width < MIN_SIZE or self.height < MIN_SIZE:
            raise ValueError(
                f"width and height must each be at least {MIN_SIZE}."
            )
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1.")
        if self.initial_length > self.width // 2 + 1:
            raise ValueError(
                "initial_length does not fit the configured board; "
                "increase width or reduce length."
            )
        if self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive.")
        if self.game_over_delay < 0:
            raise ValueError("game_over_delay must not be negative.")

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def replace(self, **overrides) -> GameConfig:
        """Return a copy with *overrides* applied and validated."""
        d = self.to_dict()
        d.update(overrides)
        return GameConfig(**d)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file, ignoring unknown keys."""
        raw = json.loads(Path(path).read_text())
        if not isinstance(raw, dict):
            raise ValueError(f"{path} does not hold a JSON object.")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
        return cls(**{k: v for k, v in raw.items() if k in known})
