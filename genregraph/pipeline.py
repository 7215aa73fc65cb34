"""Main orchestration pipeline for genregraph."""

from __future__ import annotations

import logging
import random
import time
from pathlib import Path

from genregraph.aggregation import aggregate_artists
from genregraph.classification import classify_genres
from genregraph.config import GenreGraphConfig, load_effective_config
from genregraph.genre_stats import build_genre_statistics
from genregraph.hooks import HookManager, HookName
from genregraph.layout import compute_layout
from genregraph.models import GraphLayout, SourceCollections

logger = logging.getLogger(__name__)


class GraphEngine:
    def __init__(
        self,
        config: GenreGraphConfig,
        hooks: HookManager | None = None,
    ) -> None:
        self.config = config
        self.hooks = hooks or HookManager()

    @classmethod
    def from_project(
        cls,
        project_path: str | Path,
        org_defaults: dict | None = None,
        system_defaults: dict | None = None,
        runtime_override: dict | None = None,
        hooks: HookManager | None = None,
    ) -> GraphEngine:
        config = load_effective_config(
            project_path=project_path,
            org_defaults=org_defaults,
            system_defaults=system_defaults,
            runtime_override=runtime_override,
        )
        return cls(config=config, hooks=hooks)

    def build_graph(
        self,
        sources: SourceCollections,
        *,
        seed: int | None = None,
        rng: random.Random | None = None,
    ) -> GraphLayout:
        """Compute nodes and connections for one set of fetched collections.

        ``rng`` wins over ``seed``; ``seed`` falls back to ``layout.seed`` from config.
        """
        effective_seed = seed if seed is not None else self.config.layout.seed
        rng = rng or random.Random(effective_seed)

        build_start = time.perf_counter()
        context = {"seed": effective_seed}

        self.hooks.emit(HookName.BEFORE_AGGREGATE, context, {})
        artists = aggregate_artists(sources, self.config.sources.time_ranges)
        context["artist_count"] = len(artists)
        self.hooks.emit(HookName.AFTER_AGGREGATE, context, {"artists": len(artists)})
        aggregate_elapsed = time.perf_counter() - build_start
        logger.info("Aggregation complete: %s unique artists in %.3fs", len(artists), aggregate_elapsed)

        stats_start = time.perf_counter()
        self.hooks.emit(HookName.BEFORE_STATISTICS, context, {})
        stats = build_genre_statistics(artists)
        self.hooks.emit(HookName.AFTER_STATISTICS, context, {"genres": len(stats.counts)})
        stats_elapsed = time.perf_counter() - stats_start
        logger.info("Genre statistics complete: %s genres in %.3fs", len(stats.counts), stats_elapsed)

        classify_start = time.perf_counter()
        self.hooks.emit(HookName.BEFORE_CLASSIFY, context, {})
        classification = classify_genres(artists, stats, self.config.classifier)
        self.hooks.emit(
            HookName.AFTER_CLASSIFY,
            context,
            {"main": len(classification.main_genres), "bridge": len(classification.bridge_genres)},
        )
        classify_elapsed = time.perf_counter() - classify_start
        logger.info(
            "Classification complete: main=%s bridge=%s in %.3fs",
            len(classification.main_genres),
            len(classification.bridge_genres),
            classify_elapsed,
        )

        layout_start = time.perf_counter()
        self.hooks.emit(HookName.BEFORE_LAYOUT, context, {})
        result = compute_layout(artists, stats, classification, self.config, rng)
        self.hooks.emit(
            HookName.AFTER_LAYOUT,
            context,
            {"nodes": len(result.nodes), "connections": len(result.connections)},
        )
        layout_elapsed = time.perf_counter() - layout_start
        total_elapsed = time.perf_counter() - build_start
        logger.info(
            "Layout complete: genre_nodes=%s artist_nodes=%s connections=%s in %.3fs",
            len(result.cluster_positions),
            len(result.nodes) - len(result.cluster_positions),
            len(result.connections),
            layout_elapsed,
        )
        if result.placement_fallbacks:
            logger.warning(
                "%s main clusters were placed closer than %.1f units: %s",
                result.placement_fallbacks,
                self.config.layout.min_cluster_distance,
                ", ".join(result.fallback_genres),
            )

        profile = {
            "timing_seconds": {
                "aggregate": aggregate_elapsed,
                "statistics": stats_elapsed,
                "classify": classify_elapsed,
                "layout": layout_elapsed,
                "total": total_elapsed,
            },
            "counts": {
                "artists": len(artists),
                "genres": len(stats.counts),
                "main_genres": len(classification.main_genres),
                "bridge_genres": len(classification.bridge_genres),
                "placed_bridge_genres": len(classification.bridge_genres) - result.skipped_bridge_genres,
                "skipped_bridge_genres": result.skipped_bridge_genres,
                "clustered_artists": sum(len(cluster.members) for cluster in result.clusters),
                "dropped_artists": result.dropped_artists,
                "nodes": len(result.nodes),
                "connections": len(result.connections),
                "secondary_connections": result.secondary_connections,
                "placement_attempts": result.placement_attempts,
                "placement_fallbacks": result.placement_fallbacks,
            },
            "placement": {
                "min_cluster_distance": self.config.layout.min_cluster_distance,
                "fallback_genres": list(result.fallback_genres),
            },
        }

        layout = GraphLayout(
            seed=effective_seed,
            nodes=result.nodes,
            connections=result.connections,
            cluster_positions=result.cluster_positions,
            classification=classification,
            statistics=stats,
            profile=profile,
        )
        logger.info(
            "Graph built: nodes=%s connections=%s total_time=%.2fs",
            len(layout.nodes),
            len(layout.connections),
            total_elapsed,
        )
        return layout
