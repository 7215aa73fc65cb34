"""Read-only JSON API serving graph layouts computed from a snapshot."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from fastapi import FastAPI, HTTPException, Query

from genregraph.collector import collect_sources
from genregraph.config import GenreGraphConfig
from genregraph.connectors.snapshot import SnapshotSourceConnector
from genregraph.layout import PlacementExhaustedError
from genregraph.models import GraphLayout, SourceCollections
from genregraph.pipeline import GraphEngine
from genregraph.reporting import genre_summary, render_payload

logger = logging.getLogger(__name__)


def create_app(config: GenreGraphConfig, snapshot_path: str | Path) -> FastAPI:
    app = FastAPI(title="genregraph", version="0.1.0")
    snapshot = Path(snapshot_path)
    engine = GraphEngine(config=config)

    def _sources() -> SourceCollections:
        if not snapshot.exists():
            raise HTTPException(status_code=404, detail=f"Snapshot not found: {snapshot}")
        try:
            connector = SnapshotSourceConnector.from_path(snapshot)
        except ValueError as exc:
            # Covers JSON decode errors and pydantic ValidationError.
            logger.warning("Unreadable snapshot %s: %s", snapshot, exc)
            raise HTTPException(status_code=422, detail=f"Invalid snapshot {snapshot}: {exc}") from exc
        return collect_sources(connector, config.sources)

    @app.get("/api/health")
    def health() -> dict[str, Any]:
        return {"status": "ok", "snapshot": str(snapshot), "snapshot_exists": snapshot.exists()}

    def _layout(seed: int | None) -> GraphLayout:
        # Recomputed per request; layouts are not cached across runs.
        try:
            return engine.build_graph(_sources(), seed=seed)
        except PlacementExhaustedError as exc:
            logger.warning("Graph request failed: %s", exc)
            raise HTTPException(status_code=422, detail=str(exc)) from exc

    @app.get("/api/graph")
    def graph(seed: int | None = Query(default=None)) -> dict[str, Any]:
        return render_payload(_layout(seed))

    @app.get("/api/genres")
    def genres(seed: int | None = Query(default=None)) -> dict[str, Any]:
        layout = _layout(seed)
        return genre_summary(layout, top=config.report.top_genres)

    return app
