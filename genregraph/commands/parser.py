"""CLI parser construction."""

from __future__ import annotations

import argparse

from genregraph.commands.common import add_common_config_flags, add_input_flags


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="genregraph 3D genre/artist layout engine")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ERROR)")

    sub = parser.add_subparsers(dest="command", required=True)

    layout = sub.add_parser("layout", aliases=["build"], help="Compute a graph layout from a snapshot and write the report bundle")
    add_input_flags(layout)
    layout.add_argument("--output-dir", default="./genregraph-out", help="Output directory")
    layout.add_argument("--seed", type=int, default=None, help="Random seed (overrides layout.seed)")
    add_common_config_flags(layout)

    stats = sub.add_parser("stats", help="Print genre counts and main/bridge classification for a snapshot")
    add_input_flags(stats)
    stats.add_argument("--json", action="store_true", help="Emit machine-readable JSON summary")
    add_common_config_flags(stats)

    serve = sub.add_parser("serve", aliases=["serve-api"], help="Serve the graph payload over a read-only JSON API")
    add_input_flags(serve)
    serve.add_argument("--host", default="127.0.0.1", help="Bind host")
    serve.add_argument("--port", type=int, default=8765, help="Bind port")
    add_common_config_flags(serve)

    return parser
