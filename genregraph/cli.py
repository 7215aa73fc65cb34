"""CLI entrypoint for snapshot-backed genregraph runs."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable

from genregraph.commands import layout, serve, stats
from genregraph.commands.parser import build_parser
from genregraph.logging_utils import configure_logging

logger = logging.getLogger(__name__)

ALIAS_TO_CANONICAL = {
    "build": "layout",
    "serve-api": "serve",
}

COMMANDS: dict[str, Callable[[argparse.Namespace], int]] = {
    "layout": layout.run,
    "stats": stats.run,
    "serve": serve.run,
}


def normalize_command(name: str) -> str:
    return ALIAS_TO_CANONICAL.get(name, name)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    handler = COMMANDS.get(normalize_command(args.command))
    if handler is None:
        parser.print_help()
        return 1
    return handler(args)


if __name__ == "__main__":
    raise SystemExit(main())
