"""Artist-to-genre connections with distance-based pruning."""

from __future__ import annotations

from collections.abc import Callable

from genregraph.config import EdgeConfig
from genregraph.geometry import distance
from genregraph.models import Cluster, ClusterMember, Connection, ConnectionType, Vector3


def build_artist_connections(
    artist_position: Vector3,
    cluster: Cluster,
    member: ClusterMember,
    resolve: Callable[[str], Vector3 | None],
    config: EdgeConfig,
) -> list[Connection]:
    """Primary edge always; secondary edges only when the genre node is close enough."""
    connections = [Connection(start=artist_position, end=cluster.position, type=ConnectionType.ARTIST_GENRE)]
    for genre in member.genres:
        if genre == cluster.genre:
            continue
        target = resolve(genre)
        if target is None:
            continue
        if distance(artist_position, target) < config.secondary_max_distance:
            connections.append(Connection(start=artist_position, end=target, type=ConnectionType.ARTIST_GENRE))
    return connections
