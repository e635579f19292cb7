"""Nearest neighbours in point patterns of any spatial dimension.

Each point is a sequence of coordinates, and all points of a pattern have
the same dimension.  Patterns must be sorted by increasing first
coordinate.  When identifiers are supplied for two patterns, points
sharing an identifier are treated as the same point and never counted as
neighbours of each other.
"""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterable, Sequence

from spatnear.nndistance import (
    Dist,
    Gap,
    NearestNeighbours,
    _Candidates,
    _exclusion,
    _identifiers,
    _nearest,
    _search_cross,
    _search_self,
)

__all__ = ["nn_md", "nn_cross_md"]

Point = tuple[float, ...]


def _points(points: Iterable[Sequence[float]]) -> tuple[list[Point], int | None]:
    """Convert points to tuples of floats and check they share a dimension."""
    pts = [tuple(float(c) for c in p) for p in points]
    if not pts:
        return pts, None
    dim = len(pts[0])
    if dim == 0:
        raise ValueError("points must have at least one coordinate")
    if any(len(p) != dim for p in pts):
        raise ValueError("all points must have the same dimension")
    return pts, dim


def _pair(
    points1: Iterable[Sequence[float]], points2: Iterable[Sequence[float]]
) -> tuple[list[Point], list[Point]]:
    """Convert two patterns and check that their dimensions agree."""
    pts1, dim1 = _points(points1)
    pts2, dim2 = _points(points2)
    if dim1 is not None and dim2 is not None and dim1 != dim2:
        raise ValueError("both patterns must have the same dimension")
    return pts1, pts2


def _md_metric(pts1: list[Point], pts2: list[Point]) -> tuple[Gap, Dist]:
    """Euclidean metric for patterns sorted by the first coordinate."""

    def gap2(i: int, j: int) -> float:
        dx0 = pts2[j][0] - pts1[i][0]
        return dx0 * dx0

    def dist2(i: int, j: int, g2: float, bound: float) -> float:
        d2 = g2
        for a, b in zip(pts1[i][1:], pts2[j][1:]):
            if d2 >= bound:
                break
            d = a - b
            d2 += d * d
        return d2

    return gap2, dist2


def _self_md(points: Iterable[Sequence[float]], kmax: int, huge: float) -> list[_Candidates]:
    pts, _ = _points(points)
    return _search_self(len(pts), kmax, huge * huge, *_md_metric(pts, pts))


def _cross_md(
    points1: Iterable[Sequence[float]],
    points2: Iterable[Sequence[float]],
    kmax: int,
    id1: Sequence[Hashable] | None,
    id2: Sequence[Hashable] | None,
    huge: float,
) -> list[_Candidates]:
    pts1, pts2 = _pair(points1, points2)
    ids = _identifiers(id1, id2, len(pts1), len(pts2))
    gap2, dist2 = _md_metric(pts1, pts2)
    return _search_cross(
        len(pts1), len(pts2), kmax, huge * huge, gap2, dist2, _exclusion(ids),
        backward_first=True,
    )


def nn_md(
    points: Iterable[Sequence[float]],
    huge: float = math.inf,
) -> NearestNeighbours:
    """Find the nearest other point of the pattern for each point.

    Points must be sorted by increasing first coordinate.  ``huge`` bounds
    the search distance; it is reported, with index None, when nothing
    closer exists.
    """
    return _nearest(_self_md(points, 1, huge))


def nn_cross_md(
    points1: Iterable[Sequence[float]],
    points2: Iterable[Sequence[float]],
    id1: Sequence[Hashable] | None = None,
    id2: Sequence[Hashable] | None = None,
    huge: float = math.inf,
) -> NearestNeighbours:
    """Find the nearest point of the second pattern for each point of the first.

    Both patterns must be sorted by increasing first coordinate and have
    the same dimension.  ``huge`` bounds the search distance.  Giving
    ``id1`` and ``id2`` excludes pairs with equal identifiers.
    """
    return _nearest(_cross_md(points1, points2, 1, id1, id2, huge))