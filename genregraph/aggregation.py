"""Merge time-window top lists and related-artist expansions into one artist set."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from genregraph.models import Artist, SourceCollections, TimeRange

logger = logging.getLogger(__name__)

DEFAULT_TIME_RANGES = (TimeRange.LONG, TimeRange.MEDIUM, TimeRange.SHORT)


def dedupe_artists(collections: Iterable[Iterable[Artist]]) -> list[Artist]:
    """Flatten collections in order, keeping the first artist seen per id."""
    seen: set[str] = set()
    out: list[Artist] = []
    for collection in collections:
        for artist in collection:
            if artist.id in seen:
                continue
            seen.add(artist.id)
            out.append(artist)
    return out


def related_seed_artists(
    top_artists: dict[TimeRange, list[Artist]],
    *,
    seed_limit: int,
    time_ranges: Iterable[TimeRange] = DEFAULT_TIME_RANGES,
) -> list[Artist]:
    """Artists whose related-artist lists are worth fetching.

    Takes the first ``seed_limit`` artists of every window, in window priority order,
    without repeating an artist that appears in several windows.
    """
    return dedupe_artists(top_artists.get(time_range, [])[:seed_limit] for time_range in time_ranges)


def aggregate_artists(
    sources: SourceCollections,
    time_ranges: Iterable[TimeRange] = DEFAULT_TIME_RANGES,
) -> list[Artist]:
    ordered_ranges = list(time_ranges)
    collections: list[list[Artist]] = [sources.window(time_range) for time_range in ordered_ranges]
    collections.extend(sources.related_artists.values())

    total = sum(len(collection) for collection in collections)
    artists = dedupe_artists(collections)
    logger.debug(
        "Aggregated %s artists from %s entries (windows=%s related_lists=%s)",
        len(artists),
        total,
        ",".join(time_range.value for time_range in ordered_ranges),
        len(sources.related_artists),
    )
    return artists
