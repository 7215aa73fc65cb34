"""Logging setup for the CLI and API server."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Request-level chatter from the API stack; only shown when debugging.
NOISY_LOGGERS = ("uvicorn.access", "httpx")


def configure_logging(level: str = "INFO", *, noisy_loggers: tuple[str, ...] = NOISY_LOGGERS) -> int:
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("genregraph").setLevel(resolved)

    quiet_level = resolved if resolved <= logging.DEBUG else max(resolved, logging.WARNING)
    for name in noisy_loggers:
        logging.getLogger(name).setLevel(quiet_level)
    return resolved
