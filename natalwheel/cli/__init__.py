"""natalwheel command line interface."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Sequence

from . import render, settings

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_LEVEL_ENV = "NATALWHEEL_LOG_LEVEL"


def _env_log_level() -> str:
    value = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    return value if value in LOG_LEVELS else "WARNING"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="natalwheel", description="natalwheel CLI")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    render.add_subparsers(sub)
    settings.add_subparser(sub)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(
        level=args.log_level or _env_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )
    return args.func(args)


def console_main() -> None:
    """Invoke :func:`main` and terminate with its exit code."""

    raise SystemExit(main())


__all__ = ["LOG_LEVELS", "build_parser", "console_main", "main"]
