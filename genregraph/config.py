"""Configuration models and loading for genregraph."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field

from genregraph.models import TimeRange, Vector3


class SourceConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    time_ranges: list[TimeRange] = Field(default_factory=lambda: [TimeRange.LONG, TimeRange.MEDIUM, TimeRange.SHORT])
    top_limit: int = Field(default=50, ge=1, le=50)
    related_seed_limit: int = Field(default=35, ge=0)
    related_limit: int = Field(default=6, ge=0)
    fetch_workers: int = Field(default=8, ge=1)


class ClassifierConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    main_min_count: int = 3
    max_main_genres: int = 25
    bridge_min_count: int = 2
    bridge_min_connecting_artists: int = 2
    max_bridge_genres: int = 40
    max_relevant_genres: int = 4


class LayoutConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    seed: int | None = None
    cluster_half_extents: Vector3 = (32.5, 20.0, 32.5)
    min_cluster_distance: float = 22.0
    max_placement_attempts: int = Field(default=10_000, ge=1)
    exhaustion_policy: Literal["best", "raise"] = "best"
    bridge_jitter: Vector3 = (7.5, 6.0, 7.5)
    spiral_turns: float = 4.0
    spiral_base_radius: float = 5.0
    spiral_radius_jitter: float = 4.0
    spiral_taper: float = 0.12
    secondary_pull: float = 0.3
    artist_jitter: float = 2.0
    vertical_spread: float = 1.1


class EdgeConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    secondary_max_distance: float = 35.0


class ReportConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    top_genres: int = 25


class GenreGraphConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    sources: SourceConfig = Field(default_factory=SourceConfig)
    classifier: ClassifierConfig = Field(default_factory=ClassifierConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    edges: EdgeConfig = Field(default_factory=EdgeConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    data = yaml.safe_load(path.read_text())
    return data or {}


def load_effective_config(
    project_path: str | Path,
    org_defaults: dict[str, Any] | None = None,
    system_defaults: dict[str, Any] | None = None,
    runtime_override: dict[str, Any] | None = None,
) -> GenreGraphConfig:
    """Load config with precedence runtime > project .genregraph.yaml > org > system."""
    project = Path(project_path)
    project_config = _load_yaml(project / ".genregraph.yaml")

    merged: dict[str, Any] = {}
    if system_defaults:
        merged = _deep_merge(merged, system_defaults)
    if org_defaults:
        merged = _deep_merge(merged, org_defaults)
    if project_config:
        merged = _deep_merge(merged, project_config)
    if runtime_override:
        merged = _deep_merge(merged, runtime_override)

    return GenreGraphConfig.model_validate(merged)
