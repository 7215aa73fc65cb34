from genregraph.genre_stats import artists_with_genre, build_genre_statistics
from genregraph.models import Artist


def _artist(artist_id: str, genres: list[str]) -> Artist:
    return Artist(id=artist_id, name=artist_id, genres=genres)


def test_counts_one_per_artist_per_genre() -> None:
    stats = build_genre_statistics(
        [
            _artist("a", ["rock", "indie"]),
            _artist("b", ["rock"]),
            _artist("c", ["pop", "rock"]),
        ]
    )

    assert stats.counts == {"rock": 3, "indie": 1, "pop": 1}
    assert list(stats.counts) == ["rock", "indie", "pop"]
    assert stats.count("jazz") == 0


def test_relations_are_symmetric_directed_entries() -> None:
    stats = build_genre_statistics(
        [
            _artist("a", ["rock", "indie", "pop"]),
            _artist("b", ["indie", "rock"]),
        ]
    )

    assert stats.relations["rock"]["indie"] == 2
    assert stats.relations["indie"]["rock"] == 2
    assert stats.relations["rock"]["pop"] == 1
    assert stats.relations["pop"]["rock"] == 1
    assert stats.relations["indie"]["pop"] == 1
    for genre, related in stats.relations.items():
        assert genre not in related


def test_single_genre_artists_add_no_relations() -> None:
    stats = build_genre_statistics([_artist("a", ["rock"]), _artist("b", [])])

    assert stats.counts == {"rock": 1}
    assert stats.relations == {"rock": {}}


def test_empty_artist_set() -> None:
    stats = build_genre_statistics([])
    assert stats.counts == {}
    assert stats.relations == {}


def test_artists_with_genre() -> None:
    artists = [_artist("a", ["rock"]), _artist("b", ["pop"]), _artist("c", ["rock", "pop"])]
    assert [artist.id for artist in artists_with_genre(artists, "rock")] == ["a", "c"]
