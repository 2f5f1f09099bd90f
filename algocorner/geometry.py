"""Closest pair of points in the plane by divide and conquer."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import combinations
from operator import attrgetter


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float
    y: float


def _distance(a: Point, b: Point) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def _closest(points: Sequence[Point]) -> float:
    if len(points) <= 3:
        return min(_distance(a, b) for a, b in combinations(points, 2))
    mid = len(points) // 2
    mid_x = points[mid].x
    best = min(_closest(points[:mid]), _closest(points[mid:]))
    strip = sorted((p for p in points if abs(p.x - mid_x) <= best), key=attrgetter("y"))
    for index, first in enumerate(strip):
        for second in strip[index + 1:]:
            if second.y - first.y >= best:
                break
            best = min(best, _distance(first, second))
    return best


def closest_pair_distance(points: Iterable[Point]) -> float:
    """Return the smallest distance between any two of the points."""
    ordered = sorted(points, key=attrgetter("x"))
    if len(ordered) < 2:
        raise ValueError("at least two points are needed")
    return _closest(ordered)