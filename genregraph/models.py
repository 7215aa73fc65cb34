"""Core Pydantic domain models for genregraph."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

Vector3 = tuple[float, float, float]


class TimeRange(str, Enum):
    LONG = "long_term"
    MEDIUM = "medium_term"
    SHORT = "short_term"


class GenreRole(str, Enum):
    MAIN = "main"
    BRIDGE = "bridge"


class ConnectionType(str, Enum):
    ARTIST_GENRE = "artist-genre"


class ArtistImage(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    url: str
    height: int | None = None
    width: int | None = None


class Artist(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    name: str
    genres: list[str] = Field(default_factory=list)
    images: list[ArtistImage] = Field(default_factory=list)

    @property
    def image_url(self) -> str | None:
        if not self.images:
            return None
        return self.images[0].url


class SourceCollections(BaseModel):
    """Already-fetched artist collections handed to the layout engine."""

    model_config = ConfigDict(extra="forbid")

    top_artists: dict[TimeRange, list[Artist]] = Field(default_factory=dict)
    related_artists: dict[str, list[Artist]] = Field(default_factory=dict)

    def window(self, time_range: TimeRange) -> list[Artist]:
        return self.top_artists.get(time_range, [])


class GenreStatistics(BaseModel):
    model_config = ConfigDict(extra="forbid")

    counts: dict[str, int] = Field(default_factory=dict)
    relations: dict[str, dict[str, int]] = Field(default_factory=dict)

    def count(self, genre: str) -> int:
        return self.counts.get(genre, 0)


class GenreClassification(BaseModel):
    model_config = ConfigDict(extra="forbid")

    main_genres: list[str] = Field(default_factory=list)
    bridge_genres: list[str] = Field(default_factory=list)
    connecting_artists: dict[str, int] = Field(default_factory=dict)

    def role(self, genre: str) -> GenreRole | None:
        if genre in self.main_genres:
            return GenreRole.MAIN
        if genre in self.bridge_genres:
            return GenreRole.BRIDGE
        return None


class ClusterPosition(BaseModel):
    model_config = ConfigDict(extra="forbid")

    genre: str
    position: Vector3
    role: GenreRole


class ClusterMember(BaseModel):
    model_config = ConfigDict(extra="forbid")

    artist_id: str
    genres: list[str]


class Cluster(BaseModel):
    model_config = ConfigDict(extra="forbid")

    genre: str
    position: Vector3
    members: list[ClusterMember] = Field(default_factory=list)


class GenreNode(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["genre"] = "genre"
    id: str
    name: str
    position: Vector3
    is_main_genre: bool


class ArtistNode(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: Literal["artist"] = "artist"
    id: str
    name: str
    position: Vector3
    image_url: str | None = None


Node = Annotated[GenreNode | ArtistNode, Field(discriminator="type")]


class Connection(BaseModel):
    model_config = ConfigDict(extra="forbid")

    start: Vector3
    end: Vector3
    type: ConnectionType = ConnectionType.ARTIST_GENRE


class GraphLayout(BaseModel):
    model_config = ConfigDict(extra="forbid")

    generated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    seed: int | None = None
    nodes: list[Node] = Field(default_factory=list)
    connections: list[Connection] = Field(default_factory=list)
    cluster_positions: list[ClusterPosition] = Field(default_factory=list)
    classification: GenreClassification = Field(default_factory=GenreClassification)
    statistics: GenreStatistics = Field(default_factory=GenreStatistics)
    profile: dict[str, Any] = Field(default_factory=dict)

    @property
    def genre_nodes(self) -> list[GenreNode]:
        return [node for node in self.nodes if isinstance(node, GenreNode)]

    @property
    def artist_nodes(self) -> list[ArtistNode]:
        return [node for node in self.nodes if isinstance(node, ArtistNode)]


def genre_node_id(genre: str) -> str:
    return f"genre-{genre}"
