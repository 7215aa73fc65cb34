"""Small 3D vector helpers used by layout and edge pruning."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable

from genregraph.models import Vector3


def distance(a: Vector3, b: Vector3) -> float:
    return math.dist(a, b)


def centroid(points: Iterable[Vector3]) -> Vector3 | None:
    xs = ys = zs = 0.0
    n = 0
    for x, y, z in points:
        xs += x
        ys += y
        zs += z
        n += 1
    if n == 0:
        return None
    return (xs / n, ys / n, zs / n)


def add(*vectors: Vector3) -> Vector3:
    return (
        sum(v[0] for v in vectors),
        sum(v[1] for v in vectors),
        sum(v[2] for v in vectors),
    )


def scale(v: Vector3, factor: float) -> Vector3:
    return (v[0] * factor, v[1] * factor, v[2] * factor)


def subtract(a: Vector3, b: Vector3) -> Vector3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def jitter(rng: random.Random, half_extent: float) -> float:
    """Uniform draw in [-half_extent, half_extent)."""
    return (rng.random() - 0.5) * 2.0 * half_extent


def random_in_box(rng: random.Random, half_extents: Vector3) -> Vector3:
    return (
        jitter(rng, half_extents[0]),
        jitter(rng, half_extents[1]),
        jitter(rng, half_extents[2]),
    )
