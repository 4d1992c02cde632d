"""CLI entry point for the semantics demos.

Usage:
    valref                          # Run every demo
    valref --only point rectangle   # Run selected demos
    valref --headings               # Print section headings
    valref --list                   # List demo names
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import get_args

from valref.config import DemoSettings
from valref.config.settings import LogLevel
from valref.demos import DEMOS, run_demos

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="valref",
        description="Value vs reference semantics, demonstrated",
    )
    parser.add_argument("--only", nargs="+", choices=list(DEMOS), help="Demos to run")
    parser.add_argument(
        "--headings", action="store_true", default=None, help="Print section headings"
    )
    parser.add_argument(
        "--log-level",
        choices=get_args(LogLevel),
        type=str.upper,
        help="Override VALREF_LOG_LEVEL",
    )
    parser.add_argument("--list", action="store_true", help="List demo names and exit")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.list:
        for name in DEMOS:
            print(name)
        return 0

    settings = DemoSettings()
    level = args.log_level or settings.log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("valref").setLevel(level)

    names = args.only or settings.demos
    headings = settings.headings if args.headings is None else args.headings
    logger.info("Running demos: %s", ", ".join(names) if names else "all")
    run_demos(names, headings=headings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
