"""Report generation and render payloads for computed layouts."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from genregraph.models import ArtistNode, GenreNode, GenreRole, GraphLayout


def _node_payload(node: GenreNode | ArtistNode) -> dict[str, Any]:
    if isinstance(node, GenreNode):
        return {
            "id": node.id,
            "name": node.name,
            "type": "genre",
            "position": list(node.position),
            "isMainGenre": node.is_main_genre,
        }
    return {
        "id": node.id,
        "name": node.name,
        "type": "artist",
        "position": list(node.position),
        "imageUrl": node.image_url,
    }


def render_payload(layout: GraphLayout) -> dict[str, list[dict[str, Any]]]:
    """Nodes and connections in the shape the 3D renderer consumes."""
    return {
        "nodes": [_node_payload(node) for node in layout.nodes],
        "connections": [
            {
                "start": list(connection.start),
                "end": list(connection.end),
                "type": connection.type.value,
            }
            for connection in layout.connections
        ],
    }


def genre_summary(layout: GraphLayout, *, top: int = 25) -> dict[str, Any]:
    counts = layout.statistics.counts
    placed = {entry.genre for entry in layout.cluster_positions}
    ranked = sorted(counts.items(), key=lambda item: -item[1])[:top]
    return {
        "genres": len(counts),
        "main_genres": [{"genre": genre, "count": counts.get(genre, 0)} for genre in layout.classification.main_genres],
        "bridge_genres": [
            {
                "genre": genre,
                "count": counts.get(genre, 0),
                "connecting_artists": layout.classification.connecting_artists.get(genre, 0),
                "placed": genre in placed,
            }
            for genre in layout.classification.bridge_genres
        ],
        "top_genres": [{"genre": genre, "count": count} for genre, count in ranked],
    }


def render_markdown_report(layout: GraphLayout, *, top: int = 25) -> str:
    counts = layout.profile.get("counts", {})
    main_count = sum(1 for entry in layout.cluster_positions if entry.role == GenreRole.MAIN)
    bridge_count = len(layout.cluster_positions) - main_count
    lines: list[str] = []
    lines.append("# Genre Graph Report")
    lines.append("")
    lines.append(f"- Seed: {layout.seed if layout.seed is not None else 'unseeded'}")
    lines.append(f"- Artists: {counts.get('artists', 0)}")
    lines.append(f"- Genres: {len(layout.statistics.counts)}")
    lines.append(f"- Main genres: {main_count}")
    lines.append(f"- Bridge genres: {bridge_count} placed / {len(layout.classification.bridge_genres)} selected")
    lines.append(f"- Artists placed: {len(layout.artist_nodes)} (dropped: {counts.get('dropped_artists', 0)})")
    lines.append(f"- Connections: {len(layout.connections)} (secondary: {counts.get('secondary_connections', 0)})")
    if counts.get("placement_fallbacks"):
        crowded = layout.profile.get("placement", {}).get("fallback_genres", [])
        lines.append(f"- Placement fallbacks: {counts['placement_fallbacks']} ({', '.join(crowded)})")
    lines.append("")

    summary = genre_summary(layout, top=top)
    lines.append("## Main genres")
    lines.append("")
    for row in summary["main_genres"]:
        lines.append(f"- {row['genre']}: count={row['count']}")
    lines.append("")

    if summary["bridge_genres"]:
        lines.append("## Bridge genres")
        lines.append("")
        for row in summary["bridge_genres"]:
            suffix = "" if row["placed"] else " (not placed)"
            lines.append(f"- {row['genre']}: count={row['count']} connecting_artists={row['connecting_artists']}{suffix}")
        lines.append("")

    lines.append("## Top genres")
    lines.append("")
    for row in summary["top_genres"]:
        lines.append(f"- {row['genre']}: {row['count']}")

    return "\n".join(lines)


def write_report_bundle(layout: GraphLayout, output_dir: str | Path, *, top_genres: int = 25) -> None:
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    (out / "graph.json").write_text(json.dumps(render_payload(layout), indent=2))
    (out / "layout.json").write_text(layout.model_dump_json(indent=2))
    (out / "genre_report.md").write_text(render_markdown_report(layout, top=top_genres))
    (out / "layout_profile.json").write_text(json.dumps(layout.profile, indent=2))
