"""Source connector over a JSON snapshot of already-fetched Spotify payloads."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from genregraph.connectors.base import SourceConnector, SourceFetchError
from genregraph.models import Artist, ArtistImage, TimeRange

logger = logging.getLogger(__name__)


class SpotifyImage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: str
    height: int | None = None
    width: int | None = None


class SpotifyArtist(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    genres: list[str] = Field(default_factory=list)
    images: list[SpotifyImage] = Field(default_factory=list)

    def to_artist(self) -> Artist:
        return Artist(
            id=self.id,
            name=self.name,
            genres=list(self.genres),
            images=[ArtistImage(url=image.url, height=image.height, width=image.width) for image in self.images],
        )


class SpotifySnapshot(BaseModel):
    model_config = ConfigDict(extra="ignore")

    top_artists: dict[str, list[SpotifyArtist]] = Field(default_factory=dict)
    related_artists: dict[str, list[SpotifyArtist]] = Field(default_factory=dict)


def _unwrap_items(value: Any) -> Any:
    # Raw API responses wrap top artists as {"items": [...]} and related artists as {"artists": [...]}.
    if isinstance(value, dict):
        for key in ("items", "artists"):
            if isinstance(value.get(key), list):
                return value[key]
    return value


def parse_snapshot(raw: Any) -> SpotifySnapshot:
    if not isinstance(raw, dict):
        raise ValueError("Snapshot must be a JSON object with top_artists/related_artists")
    payload = {
        "top_artists": {key: _unwrap_items(value) for key, value in (raw.get("top_artists") or {}).items()},
        "related_artists": {key: _unwrap_items(value) for key, value in (raw.get("related_artists") or {}).items()},
    }
    return SpotifySnapshot.model_validate(payload)


class SnapshotSourceConnector(SourceConnector):
    """Serves top and related artists from a snapshot file.

    A window absent from the snapshot behaves like a failed request; an absent
    related list is served as empty.
    """

    def __init__(self, snapshot: SpotifySnapshot) -> None:
        self._snapshot = snapshot

    @classmethod
    def from_path(cls, path: str | Path) -> SnapshotSourceConnector:
        raw = json.loads(Path(path).read_text())
        snapshot = parse_snapshot(raw)
        logger.debug(
            "Loaded snapshot %s (windows=%s related_lists=%s)",
            path,
            len(snapshot.top_artists),
            len(snapshot.related_artists),
        )
        return cls(snapshot)

    def fetch_top_artists(self, time_range: TimeRange, limit: int = 50) -> list[Artist]:
        items = self._snapshot.top_artists.get(time_range.value)
        if items is None:
            raise SourceFetchError(f"No top artists for {time_range.value} in snapshot")
        return [item.to_artist() for item in items[:limit]]

    def fetch_related_artists(self, artist_id: str, limit: int = 6) -> list[Artist]:
        items = self._snapshot.related_artists.get(artist_id)
        if items is None:
            # Snapshots may omit related lists entirely.
            logger.debug("No related artists for %s in snapshot", artist_id)
            return []
        return [item.to_artist() for item in items[:limit]]
