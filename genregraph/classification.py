"""Partition genres into main cluster anchors and bridge genres."""

from __future__ import annotations

import logging

from genregraph.config import ClassifierConfig
from genregraph.genre_stats import artists_with_genre
from genregraph.models import Artist, GenreClassification, GenreStatistics

logger = logging.getLogger(__name__)


def select_main_genres(stats: GenreStatistics, config: ClassifierConfig) -> list[str]:
    """Most frequent genres, ties kept in first-encounter order."""
    ranked = sorted(stats.counts.items(), key=lambda item: -item[1])
    eligible = [genre for genre, count in ranked if count >= config.main_min_count]
    return eligible[: config.max_main_genres]


def connecting_artist_count(artists: list[Artist], genre: str, main_genres: set[str]) -> int:
    return len(connecting_artists(artists, genre, main_genres))


def connecting_artists(artists: list[Artist], genre: str, main_genres: set[str]) -> list[Artist]:
    """Artists carrying ``genre`` and at least one main genre."""
    return [artist for artist in artists if genre in artist.genres and any(g in main_genres for g in artist.genres)]


def select_bridge_genres(
    artists: list[Artist],
    stats: GenreStatistics,
    main_genres: list[str],
    config: ClassifierConfig,
) -> tuple[list[str], dict[str, int]]:
    main_set = set(main_genres)
    connecting: dict[str, int] = {}
    candidates: list[str] = []

    for genre, count in stats.counts.items():
        if genre in main_set:
            continue
        links = connecting_artist_count(artists, genre, main_set)
        connecting[genre] = links
        if count >= config.bridge_min_count and links >= config.bridge_min_connecting_artists:
            candidates.append(genre)

    carriers = {genre: len(artists_with_genre(artists, genre)) for genre in candidates}
    ranked = sorted(candidates, key=lambda genre: -carriers[genre])
    return ranked[: config.max_bridge_genres], connecting


def classify_genres(
    artists: list[Artist],
    stats: GenreStatistics,
    config: ClassifierConfig,
) -> GenreClassification:
    main_genres = select_main_genres(stats, config)
    bridge_genres, connecting = select_bridge_genres(artists, stats, main_genres, config)
    logger.debug(
        "Classified %s genres: main=%s bridge=%s",
        len(stats.counts),
        len(main_genres),
        len(bridge_genres),
    )
    if stats.counts and not main_genres:
        logger.warning(
            "No genre reached the main threshold (count >= %s); graph will be empty",
            config.main_min_count,
        )
    return GenreClassification(
        main_genres=main_genres,
        bridge_genres=bridge_genres,
        connecting_artists={genre: connecting[genre] for genre in bridge_genres},
    )
