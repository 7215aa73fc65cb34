"""Connector interfaces for artist sources."""

from __future__ import annotations

from typing import Protocol

from genregraph.models import Artist, TimeRange


class SourceFetchError(RuntimeError):
    """One source request could not be served."""


class SourceConnector(Protocol):
    def fetch_top_artists(self, time_range: TimeRange, limit: int = 50) -> list[Artist]: ...

    def fetch_related_artists(self, artist_id: str, limit: int = 6) -> list[Artist]: ...
