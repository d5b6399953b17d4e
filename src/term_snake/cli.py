"""Command-line launcher for Term Snake."""

from __future__ import annotations

import argparse
import logging
import sys

from term_snake.config import GameConfig

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="term-snake",
        description="Play snake in the terminal. Arrow keys or WASD steer, q quits.",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file; other flags override it.",
    )
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument(
        "--length", type=int, default=None,
        help="Initial snake length.",
    )
    parser.add_argument(
        "--tick-ms", type=int, default=None,
        help="Milliseconds between ticks.",
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--save-config", type=str, default=None,
        help="Write the effective config to this path before playing.",
    )
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Write logs here; without it only warnings reach stderr.",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=getattr(logging, args.log_level),
            format=_LOG_FORMAT,
        )
    else:
        logging.basicConfig(level=logging.WARNING, format=_LOG_FORMAT)


def build_config(args: argparse.Namespace) -> GameConfig:
    """Merge a config file (if any) with command-line overrides."""
    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    flag_map = {
        "width": "width",
        "height": "height",
        "length": "initial_length",
        "seed": "seed",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val
    if args.tick_ms is not None:
        overrides["tick_interval"] = args.tick_ms / 1000.0

    return config.replace(**overrides) if overrides else config


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``term-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)

    try:
        config = build_config(args)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    if args.save_config:
        config.save(args.save_config)

    from term_snake.terminal import TerminalTooSmallError, play

    try:
        final = play(config)
    except TerminalTooSmallError as exc:
        parser.error(str(exc))

    print(f"Final score: {final.score}")  # noqa: T201
    return 0


if __name__ == "__main__":
    sys.exit(main())
