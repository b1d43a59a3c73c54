"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import os
import sys

_LOG_LEVEL_ENV = "GRIDCHESS_LOG_LEVEL"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridchess", description="Two-player chess on a clickable board."
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(_LOG_LEVEL_ENV, "WARNING"),
        choices=_LOG_LEVELS,
        type=str.upper,
        help=f"logging verbosity (default: ${_LOG_LEVEL_ENV} or WARNING)",
    )
    parser.add_argument(
        "--theme",
        default="Classic",
        help="board colour theme: Classic, Blue or Green",
    )
    parser.add_argument(
        "--no-animation",
        action="store_true",
        help="apply moves without sliding the piece",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Launch the gridchess application."""
    parser = build_parser()
    args = parser.parse_args(argv)
    # argparse does not check a default taken from the environment.
    if args.log_level not in _LOG_LEVELS:
        parser.error(
            f"${_LOG_LEVEL_ENV} must be one of {', '.join(_LOG_LEVELS)}, "
            f"got {args.log_level!r}"
        )
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from gridchess.ui.bootstrap import run_application
    from gridchess.ui.settings import AppSettings

    try:
        settings = AppSettings(
            board_theme=args.theme, animate_moves=not args.no_animation
        )
    except ValueError as exc:
        sys.exit(f"gridchess: {exc}")

    sys.exit(run_application([sys.argv[0]], settings=settings))


if __name__ == "__main__":
    main()
