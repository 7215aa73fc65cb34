"""Connector interfaces and implementations."""

from .base import SourceConnector, SourceFetchError
from .snapshot import SnapshotSourceConnector

__all__ = ["SourceConnector", "SourceFetchError", "SnapshotSourceConnector"]
