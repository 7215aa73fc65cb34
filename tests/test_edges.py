from genregraph.config import EdgeConfig
from genregraph.edges import build_artist_connections
from genregraph.models import Cluster, ClusterMember, ConnectionType


def _resolver(positions: dict[str, tuple[float, float, float]]):
    return positions.get


def test_primary_connection_always_emitted() -> None:
    cluster = Cluster(genre="rock", position=(100.0, 0.0, 0.0))
    member = ClusterMember(artist_id="a", genres=["rock"])

    connections = build_artist_connections((0.0, 0.0, 0.0), cluster, member, _resolver({}), EdgeConfig())

    assert len(connections) == 1
    assert connections[0].start == (0.0, 0.0, 0.0)
    assert connections[0].end == (100.0, 0.0, 0.0)
    assert connections[0].type == ConnectionType.ARTIST_GENRE


def test_secondary_connections_pruned_by_distance() -> None:
    cluster = Cluster(genre="rock", position=(0.0, 0.0, 0.0))
    member = ClusterMember(artist_id="a", genres=["rock", "near", "far", "edge", "unplaced"])
    positions = {
        "rock": (0.0, 0.0, 0.0),
        "near": (10.0, 0.0, 0.0),
        "far": (0.0, 50.0, 0.0),
        "edge": (0.0, 0.0, 35.0),
    }

    connections = build_artist_connections((0.0, 0.0, 0.0), cluster, member, _resolver(positions), EdgeConfig())

    assert [connection.end for connection in connections] == [(0.0, 0.0, 0.0), (10.0, 0.0, 0.0)]


def test_secondary_threshold_is_configurable() -> None:
    cluster = Cluster(genre="rock", position=(0.0, 0.0, 0.0))
    member = ClusterMember(artist_id="a", genres=["rock", "far"])
    positions = {"far": (0.0, 50.0, 0.0)}

    connections = build_artist_connections(
        (0.0, 0.0, 0.0),
        cluster,
        member,
        _resolver(positions),
        EdgeConfig(secondary_max_distance=60.0),
    )

    assert len(connections) == 2
