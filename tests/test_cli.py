import json
from pathlib import Path

from genregraph import cli


def _write_snapshot(path: Path) -> Path:
    def artist(artist_id: str, genres: list[str]) -> dict:
        return {"id": artist_id, "name": artist_id.upper(), "genres": genres, "images": []}

    snapshot = {
        "top_artists": {
            "long_term": {"items": [artist("a", ["rock", "indie"]), artist("b", ["rock", "indie"]), artist("c", ["rock"])]},
            "medium_term": {"items": [artist("p1", ["pop", "dance"]), artist("a", ["rock", "indie"])]},
            "short_term": {"items": [artist("p2", ["pop"]), artist("p3", ["pop"])]},
        },
        "related_artists": {
            "a": {"artists": [artist("r1", ["indie", "dance", "rock"])]},
        },
    }
    path.write_text(json.dumps(snapshot))
    return path


def test_cli_parser_supports_command_aliases() -> None:
    parser = cli.build_parser()

    parsed = parser.parse_args(["build", "--input", "snap.json"])
    assert cli.normalize_command(parsed.command) == "layout"
    assert parsed.output_dir == "./genregraph-out"
    assert parsed.seed is None

    parsed_serve = parser.parse_args(["serve-api", "--input", "snap.json"])
    assert cli.normalize_command(parsed_serve.command) == "serve"
    assert parsed_serve.port == 8765


def test_layout_command_writes_bundle(tmp_path: Path) -> None:
    snapshot = _write_snapshot(tmp_path / "snapshot.json")
    out_dir = tmp_path / "out"

    exit_code = cli.main(
        [
            "layout",
            "--input",
            str(snapshot),
            "--output-dir",
            str(out_dir),
            "--seed",
            "3",
            "--project-path",
            str(tmp_path),
        ]
    )

    assert exit_code == 0
    graph = json.loads((out_dir / "graph.json").read_text())
    node_ids = [node["id"] for node in graph["nodes"]]
    assert "genre-rock" in node_ids
    assert "genre-pop" in node_ids
    assert "a" in node_ids
    assert "r1" in node_ids
    assert (out_dir / "genre_report.md").read_text().startswith("# Genre Graph Report")
    assert json.loads((out_dir / "layout.json").read_text())["seed"] == 3


def test_layout_command_is_reproducible_with_seed(tmp_path: Path) -> None:
    snapshot = _write_snapshot(tmp_path / "snapshot.json")
    outputs = []
    for name in ("first", "second"):
        out_dir = tmp_path / name
        cli.main(["layout", "--input", str(snapshot), "--output-dir", str(out_dir), "--seed", "11", "--project-path", str(tmp_path)])
        outputs.append(json.loads((out_dir / "graph.json").read_text()))

    assert outputs[0] == outputs[1]


def test_stats_command_json_summary(tmp_path: Path, capsys) -> None:
    snapshot = _write_snapshot(tmp_path / "snapshot.json")
    runtime = tmp_path / "runtime.yaml"
    runtime.write_text("report:\n  top_genres: 2\n")

    exit_code = cli.main(
        [
            "stats",
            "--input",
            str(snapshot),
            "--json",
            "--project-path",
            str(tmp_path),
            "--runtime-override",
            str(runtime),
        ]
    )

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["artists"] == 7
    assert payload["main_genres"] == ["rock", "indie", "pop"]
    assert payload["bridge_genres"] == ["dance"]
    assert payload["connecting_artists"] == {"dance": 2}
    assert payload["top_genres"] == {"rock": 4, "indie": 3}


def test_stats_command_text_summary(tmp_path: Path, capsys) -> None:
    snapshot = _write_snapshot(tmp_path / "snapshot.json")

    exit_code = cli.main(["stats", "--input", str(snapshot), "--project-path", str(tmp_path)])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "Artists: 7" in out
    assert "Main genres: rock=4, indie=3, pop=3" in out
    assert "Bridge genres: dance=2" in out
