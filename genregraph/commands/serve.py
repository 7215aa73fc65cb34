"""Serve API command."""

from __future__ import annotations

import argparse
import logging

from genregraph.commands.common import load_config

logger = logging.getLogger(__name__)


def run(args: argparse.Namespace) -> int:
    config = load_config(args)

    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - dependency/runtime
        raise RuntimeError("Missing optional API dependencies. Install with: pip install 'genregraph[ui]'") from exc

    from genregraph.webapp import create_app

    logger.info("Starting API on http://%s:%s (snapshot=%s)", args.host, args.port, args.input)
    app = create_app(config, args.input)
    uvicorn.run(app, host=args.host, port=args.port, reload=False, log_level=args.log_level.lower())
    return 0
