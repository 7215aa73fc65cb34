"""Genre statistics command."""

from __future__ import annotations

import argparse
import json

from genregraph.aggregation import aggregate_artists
from genregraph.classification import classify_genres
from genregraph.commands.common import load_config, load_snapshot_sources
from genregraph.genre_stats import build_genre_statistics


def run(args: argparse.Namespace) -> int:
    config = load_config(args)
    sources = load_snapshot_sources(args.input, config)
    artists = aggregate_artists(sources, config.sources.time_ranges)
    stats = build_genre_statistics(artists)
    classification = classify_genres(artists, stats, config.classifier)

    top = sorted(stats.counts.items(), key=lambda item: -item[1])[: config.report.top_genres]
    if args.json:
        payload = {
            "artists": len(artists),
            "genres": len(stats.counts),
            "main_genres": classification.main_genres,
            "bridge_genres": classification.bridge_genres,
            "connecting_artists": classification.connecting_artists,
            "top_genres": dict(top),
        }
        print(json.dumps(payload, indent=2))
        return 0

    print(f"Artists: {len(artists)}")
    print(f"Genres: {len(stats.counts)}")
    print("Main genres: " + (", ".join(f"{genre}={stats.count(genre)}" for genre in classification.main_genres) or "none"))
    print("Bridge genres: " + (", ".join(f"{genre}={classification.connecting_artists[genre]}" for genre in classification.bridge_genres) or "none"))
    print("Top genres: " + ", ".join(f"{genre}={count}" for genre, count in top))
    return 0
