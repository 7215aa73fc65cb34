import json
from pathlib import Path

import pytest

from genregraph.config import GenreGraphConfig, LayoutConfig


def _write_snapshot(path: Path) -> Path:
    items = [{"id": f"r{i}", "name": f"Rocker {i}", "genres": ["rock"]} for i in range(3)]
    items += [{"id": f"p{i}", "name": f"Popper {i}", "genres": ["pop", "dance"] if i == 0 else ["pop"]} for i in range(3)]
    items.append({"id": "x", "name": "Crossover", "genres": ["rock", "dance"], "images": [{"url": "https://img/x.jpg"}]})
    path.write_text(json.dumps({"top_artists": {"long_term": {"items": items}}}))
    return path


def _client(config: GenreGraphConfig, snapshot: Path):
    pytest.importorskip("fastapi")
    from fastapi.testclient import TestClient

    from genregraph.webapp import create_app

    return TestClient(create_app(config, snapshot))


def test_graph_endpoint_serves_render_payload(tmp_path: Path) -> None:
    client = _client(GenreGraphConfig(), _write_snapshot(tmp_path / "snapshot.json"))

    health = client.get("/api/health")
    assert health.status_code == 200
    assert health.json()["snapshot_exists"] is True

    response = client.get("/api/graph", params={"seed": 5})
    assert response.status_code == 200
    payload = response.json()
    ids = [node["id"] for node in payload["nodes"]]
    assert ids[:2] == ["genre-rock", "genre-pop"]
    assert "genre-dance" in ids
    crossover = next(node for node in payload["nodes"] if node["id"] == "x")
    assert crossover["imageUrl"] == "https://img/x.jpg"
    assert payload == client.get("/api/graph", params={"seed": 5}).json()


def test_genres_endpoint_lists_classification(tmp_path: Path) -> None:
    client = _client(GenreGraphConfig(), _write_snapshot(tmp_path / "snapshot.json"))

    response = client.get("/api/genres")
    assert response.status_code == 200
    payload = response.json()
    assert [row["genre"] for row in payload["main_genres"]] == ["rock", "pop"]
    assert payload["bridge_genres"][0]["genre"] == "dance"
    assert payload["bridge_genres"][0]["placed"] is True


def test_missing_snapshot_returns_404(tmp_path: Path) -> None:
    client = _client(GenreGraphConfig(), tmp_path / "missing.json")

    assert client.get("/api/health").json()["snapshot_exists"] is False
    assert client.get("/api/graph").status_code == 404


def test_placement_exhaustion_returns_422(tmp_path: Path) -> None:
    snapshot = _write_snapshot(tmp_path / "snapshot.json")
    config = GenreGraphConfig(
        layout=LayoutConfig(min_cluster_distance=1000.0, max_placement_attempts=3, exhaustion_policy="raise")
    )
    client = _client(config, snapshot)

    response = client.get("/api/graph", params={"seed": 1})

    assert response.status_code == 422
    assert "pop" in response.json()["detail"]


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"top_artists": {"long_term": [{"name": "no id"}]}}'])
def test_unreadable_snapshot_returns_422(tmp_path: Path, content: str) -> None:
    snapshot = tmp_path / "snapshot.json"
    snapshot.write_text(content)
    client = _client(GenreGraphConfig(), snapshot)

    response = client.get("/api/graph")

    assert response.status_code == 422
    assert "Invalid snapshot" in response.json()["detail"]
    assert client.get("/api/genres").status_code == 422
