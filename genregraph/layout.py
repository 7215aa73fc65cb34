"""Spatial layout of genre anchors and artists.

Placement order:
- main genres: rejection-sampled points in a box, kept a minimum distance apart
- bridge genres: centroid of the main genres their connecting artists carry, plus jitter
- artists: spiral arms around their primary cluster, pulled toward secondary genres

All randomness comes from the ``random.Random`` passed in, so a seeded generator
gives a reproducible layout.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field

from genregraph.classification import connecting_artists
from genregraph.config import GenreGraphConfig, LayoutConfig
from genregraph.edges import build_artist_connections
from genregraph.geometry import add, centroid, distance, jitter, random_in_box, scale, subtract
from genregraph.models import (
    Artist,
    ArtistNode,
    Cluster,
    ClusterMember,
    ClusterPosition,
    Connection,
    GenreClassification,
    GenreNode,
    GenreRole,
    GenreStatistics,
    Vector3,
    genre_node_id,
)

logger = logging.getLogger(__name__)


class PlacementExhaustedError(RuntimeError):
    def __init__(self, genre: str, attempts: int, best_gap: float) -> None:
        super().__init__(f"Could not place genre cluster {genre!r} after {attempts} attempts (best gap {best_gap:.2f})")
        self.genre = genre
        self.attempts = attempts
        self.best_gap = best_gap


class GenrePositions:
    """Resolved genre positions in placement order, looked up by genre label."""

    def __init__(self) -> None:
        self._entries: dict[str, ClusterPosition] = {}

    def add(self, genre: str, position: Vector3, role: GenreRole) -> None:
        self._entries[genre] = ClusterPosition(genre=genre, position=position, role=role)

    def get(self, genre: str) -> Vector3 | None:
        entry = self._entries.get(genre)
        return entry.position if entry else None

    def __contains__(self, genre: object) -> bool:
        return genre in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def entries(self) -> list[ClusterPosition]:
        return list(self._entries.values())


@dataclass
class LayoutResult:
    nodes: list[GenreNode | ArtistNode] = field(default_factory=list)
    connections: list[Connection] = field(default_factory=list)
    cluster_positions: list[ClusterPosition] = field(default_factory=list)
    clusters: list[Cluster] = field(default_factory=list)
    placement_attempts: int = 0
    # Main genres accepted below min_cluster_distance, in placement order.
    fallback_genres: list[str] = field(default_factory=list)
    skipped_bridge_genres: int = 0
    dropped_artists: int = 0
    secondary_connections: int = 0

    @property
    def placement_fallbacks(self) -> int:
        return len(self.fallback_genres)


def _place_main_cluster(
    genre: str,
    placed: list[Vector3],
    config: LayoutConfig,
    rng: random.Random,
    result: LayoutResult,
) -> Vector3:
    best: Vector3 | None = None
    best_gap = -1.0
    for attempt in range(1, config.max_placement_attempts + 1):
        candidate = random_in_box(rng, config.cluster_half_extents)
        gap = min((distance(candidate, other) for other in placed), default=math.inf)
        if gap >= config.min_cluster_distance:
            result.placement_attempts += attempt
            return candidate
        if gap > best_gap:
            best, best_gap = candidate, gap

    result.placement_attempts += config.max_placement_attempts
    if config.exhaustion_policy == "raise" or best is None:
        raise PlacementExhaustedError(genre, config.max_placement_attempts, best_gap)

    result.fallback_genres.append(genre)
    logger.warning(
        "Placement exhausted for %s after %s attempts; accepting best candidate with gap %.2f < %.2f",
        genre,
        config.max_placement_attempts,
        best_gap,
        config.min_cluster_distance,
    )
    return best


def place_main_clusters(
    main_genres: list[str],
    positions: GenrePositions,
    config: LayoutConfig,
    rng: random.Random,
    result: LayoutResult,
) -> None:
    placed: list[Vector3] = []
    for genre in main_genres:
        position = _place_main_cluster(genre, placed, config, rng, result)
        placed.append(position)
        positions.add(genre, position, GenreRole.MAIN)


def relevant_genres(
    artist: Artist,
    classification: GenreClassification,
    stats: GenreStatistics,
    limit: int,
) -> list[str]:
    """Main and bridge genres of an artist, most common first."""
    anchored = set(classification.main_genres) | set(classification.bridge_genres)
    genres = [genre for genre in artist.genres if genre in anchored]
    genres.sort(key=lambda genre: -stats.count(genre))
    return genres[:limit]


def primary_genre(genres: list[str], main_genres: set[str]) -> str | None:
    for genre in genres:
        if genre in main_genres:
            return genre
    return genres[0] if genres else None


def assign_artists(
    artists: list[Artist],
    classification: GenreClassification,
    stats: GenreStatistics,
    positions: GenrePositions,
    config: GenreGraphConfig,
    result: LayoutResult,
) -> list[Cluster]:
    main_set = set(classification.main_genres)
    clusters: dict[str, Cluster] = {}
    for genre in classification.main_genres:
        position = positions.get(genre)
        if position is not None:
            clusters[genre] = Cluster(genre=genre, position=position)

    for artist in artists:
        genres = relevant_genres(artist, classification, stats, config.classifier.max_relevant_genres)
        primary = primary_genre(genres, main_set)
        cluster = clusters.get(primary) if primary else None
        if cluster is None:
            # Artists whose primary genre has no cluster stay out of the graph.
            result.dropped_artists += 1
            continue
        cluster.members.append(ClusterMember(artist_id=artist.id, genres=genres))

    return list(clusters.values())


def place_bridge_genres(
    artists: list[Artist],
    classification: GenreClassification,
    positions: GenrePositions,
    config: GenreGraphConfig,
    rng: random.Random,
    result: LayoutResult,
) -> None:
    main_set = set(classification.main_genres)
    half = config.layout.bridge_jitter
    for genre in classification.bridge_genres:
        connected = connecting_artists(artists, genre, main_set)
        if len(connected) < config.classifier.bridge_min_connecting_artists:
            result.skipped_bridge_genres += 1
            logger.debug("Skipping bridge genre %s: %s connecting artists", genre, len(connected))
            continue

        anchors = [positions.get(g) for artist in connected for g in artist.genres if g in main_set]
        center = centroid(p for p in anchors if p is not None)
        if center is None:
            result.skipped_bridge_genres += 1
            continue

        position = add(center, (jitter(rng, half[0]), jitter(rng, half[1]), jitter(rng, half[2])))
        positions.add(genre, position, GenreRole.BRIDGE)


def place_artist(
    cluster: Cluster,
    member: ClusterMember,
    index: int,
    total: int,
    positions: GenrePositions,
    config: LayoutConfig,
    rng: random.Random,
) -> Vector3:
    t = index / total
    angle = t * 2.0 * math.pi * config.spiral_turns
    radius = (config.spiral_base_radius + rng.random() * config.spiral_radius_jitter) * (1.0 - t * config.spiral_taper)

    pull = centroid(p for p in (positions.get(g) for g in member.genres if g != cluster.genre) if p is not None)
    displacement = scale(subtract(pull, cluster.position), config.secondary_pull) if pull else (0.0, 0.0, 0.0)

    cx, cy, cz = cluster.position
    x = cx + math.cos(angle) * radius + displacement[0] + jitter(rng, config.artist_jitter)
    y = cy + jitter(rng, radius * config.vertical_spread) + displacement[1] + jitter(rng, config.artist_jitter)
    z = cz + math.sin(angle) * radius + displacement[2] + jitter(rng, config.artist_jitter)
    return (x, y, z)


def compute_layout(
    artists: list[Artist],
    stats: GenreStatistics,
    classification: GenreClassification,
    config: GenreGraphConfig,
    rng: random.Random,
) -> LayoutResult:
    result = LayoutResult()
    positions = GenrePositions()

    place_main_clusters(classification.main_genres, positions, config.layout, rng, result)
    clusters = assign_artists(artists, classification, stats, positions, config, result)
    place_bridge_genres(artists, classification, positions, config, rng, result)

    for entry in positions.entries():
        result.nodes.append(
            GenreNode(
                id=genre_node_id(entry.genre),
                name=entry.genre,
                position=entry.position,
                is_main_genre=entry.role == GenreRole.MAIN,
            )
        )

    by_id = {artist.id: artist for artist in artists}
    for cluster in clusters:
        total = len(cluster.members)
        for index, member in enumerate(cluster.members):
            artist = by_id[member.artist_id]
            position = place_artist(cluster, member, index, total, positions, config.layout, rng)
            result.nodes.append(ArtistNode(id=artist.id, name=artist.name, position=position, image_url=artist.image_url))
            connections = build_artist_connections(position, cluster, member, positions.get, config.edges)
            result.secondary_connections += len(connections) - 1
            result.connections.extend(connections)

    result.cluster_positions = positions.entries()
    result.clusters = clusters
    logger.debug(
        "Layout placed %s genre nodes and %s artist nodes (dropped=%s skipped_bridges=%s fallbacks=%s)",
        len(positions),
        len(result.nodes) - len(positions),
        result.dropped_artists,
        result.skipped_bridge_genres,
        result.placement_fallbacks,
    )
    return result
