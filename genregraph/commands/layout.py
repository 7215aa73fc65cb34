"""Snapshot layout command."""

from __future__ import annotations

import argparse
import logging

from genregraph.commands.common import build_engine, load_config, load_snapshot_sources
from genregraph.reporting import write_report_bundle

logger = logging.getLogger(__name__)


def run(args: argparse.Namespace) -> int:
    config = load_config(args)
    sources = load_snapshot_sources(args.input, config)
    engine = build_engine(config)
    layout = engine.build_graph(sources, seed=args.seed)
    write_report_bundle(layout, args.output_dir, top_genres=config.report.top_genres)
    logger.info(
        "Layout complete: nodes=%s connections=%s output=%s",
        len(layout.nodes),
        len(layout.connections),
        args.output_dir,
    )
    return 0
