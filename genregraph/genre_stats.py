"""Per-genre occurrence counts and genre co-occurrence over an artist set."""

from __future__ import annotations

from collections import Counter, defaultdict
from itertools import combinations

from genregraph.models import Artist, GenreStatistics


def build_genre_statistics(artists: list[Artist]) -> GenreStatistics:
    counts: Counter[str] = Counter()
    relations: dict[str, Counter[str]] = defaultdict(Counter)

    for artist in artists:
        counts.update(artist.genres)
        for genre in artist.genres:
            relations.setdefault(genre, Counter())
        for genre_a, genre_b in combinations(artist.genres, 2):
            if genre_a == genre_b:
                continue
            relations[genre_a][genre_b] += 1
            relations[genre_b][genre_a] += 1

    # The relation map is not read by classification or layout; it is kept on the output.
    return GenreStatistics(
        counts=dict(counts),
        relations={genre: dict(related) for genre, related in relations.items()},
    )


def artists_with_genre(artists: list[Artist], genre: str) -> list[Artist]:
    return [artist for artist in artists if genre in artist.genres]
