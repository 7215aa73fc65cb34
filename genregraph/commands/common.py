"""Shared helpers for CLI command modules."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import yaml

from genregraph.collector import collect_sources
from genregraph.config import GenreGraphConfig, load_effective_config
from genregraph.connectors.snapshot import SnapshotSourceConnector
from genregraph.models import SourceCollections
from genregraph.pipeline import GraphEngine

logger = logging.getLogger(__name__)


def load_yaml_dict(path: str | None) -> dict | None:
    if not path:
        return None
    data = yaml.safe_load(Path(path).read_text())
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ValueError(f"YAML at {path} must decode to a mapping")
    return data


def load_config(args: argparse.Namespace) -> GenreGraphConfig:
    return load_effective_config(
        project_path=args.project_path,
        org_defaults=load_yaml_dict(args.org_config),
        system_defaults=load_yaml_dict(args.system_config),
        runtime_override=load_yaml_dict(args.runtime_override),
    )


def load_snapshot_sources(path: str | Path, config: GenreGraphConfig) -> SourceCollections:
    connector = SnapshotSourceConnector.from_path(path)
    return collect_sources(connector, config.sources)


def build_engine(config: GenreGraphConfig) -> GraphEngine:
    return GraphEngine(config=config)


def add_common_config_flags(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("--project-path", default=".", help="Project root holding an optional .genregraph.yaml")
    cmd.add_argument("--org-config", help="Optional org defaults YAML")
    cmd.add_argument("--system-config", help="Optional system defaults YAML")
    cmd.add_argument("--runtime-override", help="Optional runtime override YAML")


def add_input_flags(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("--input", required=True, help="Path to snapshot JSON with top_artists/related_artists")
