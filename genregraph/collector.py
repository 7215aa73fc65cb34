"""Concurrent collection of source artists with per-request degradation."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

from genregraph.aggregation import related_seed_artists
from genregraph.config import SourceConfig
from genregraph.connectors.base import SourceConnector
from genregraph.models import Artist, SourceCollections, TimeRange

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _or_empty(label: str, fetch: Callable[[], list[T]]) -> list[T]:
    try:
        return fetch()
    except Exception as exc:
        logger.warning("Fetch failed for %s; continuing with empty result: %s", label, exc)
        return []


def collect_sources(connector: SourceConnector, config: SourceConfig) -> SourceCollections:
    """Fetch the top-artist windows, then related artists for a bounded seed set.

    Every request runs independently; a failing one contributes an empty list.
    """
    start = time.perf_counter()
    workers = max(1, config.fetch_workers)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        window_futures = {
            time_range: pool.submit(
                _or_empty,
                f"top artists ({time_range.value})",
                lambda tr=time_range: connector.fetch_top_artists(tr, limit=config.top_limit),
            )
            for time_range in config.time_ranges
        }
        top_artists: dict[TimeRange, list[Artist]] = {time_range: future.result() for time_range, future in window_futures.items()}

        seeds = related_seed_artists(top_artists, seed_limit=config.related_seed_limit, time_ranges=config.time_ranges)
        related_futures = [
            (
                seed.id,
                pool.submit(
                    _or_empty,
                    f"related artists ({seed.id})",
                    lambda artist_id=seed.id: connector.fetch_related_artists(artist_id, limit=config.related_limit),
                ),
            )
            for seed in seeds
        ]
        related_artists = {artist_id: future.result()[: config.related_limit] for artist_id, future in related_futures}

    logger.info(
        "Collected sources: windows=%s top=%s seeds=%s related=%s in %.2fs",
        len(top_artists),
        sum(len(items) for items in top_artists.values()),
        len(seeds),
        sum(len(items) for items in related_artists.values()),
        time.perf_counter() - start,
    )
    return SourceCollections(top_artists=top_artists, related_artists=related_artists)
