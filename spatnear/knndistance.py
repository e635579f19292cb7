"""The k nearest neighbours from each point of one planar pattern to another.

Both patterns must be sorted by increasing y coordinate.  When identifiers
are supplied for both patterns, points sharing an identifier are treated as
the same point and never counted as neighbours of each other.
"""

from __future__ import annotations

import math
from collections.abc import Hashable, Sequence
from dataclasses import dataclass

from spatnear.nndistance import (
    _Candidates,
    _coordinates,
    _exclusion,
    _identifiers,
    _planar,
    _search_cross,
)

__all__ = ["KNearestNeighbours", "knn_cross"]


@dataclass(frozen=True)
class KNearestNeighbours:
    """Distances to, and indices of, the 1st to kth nearest neighbours.

    Each point has a list of ``kmax`` entries in increasing order of
    distance; unfilled places hold the search bound and None.
    """

    distances: list[list[float]]
    which: list[list[int | None]]


def _check_kmax(kmax: int) -> None:
    if kmax < 1:
        raise ValueError("kmax must be at least 1")


def _collect(found: list[_Candidates]) -> KNearestNeighbours:
    return KNearestNeighbours([f.distances() for f in found], [f.idx for f in found])


def knn_cross(
    x1: Sequence[float],
    y1: Sequence[float],
    x2: Sequence[float],
    y2: Sequence[float],
    kmax: int = 1,
    id1: Sequence[Hashable] | None = None,
    id2: Sequence[Hashable] | None = None,
    huge: float = math.inf,
) -> KNearestNeighbours:
    """Find the ``kmax`` nearest points of the second pattern for each point
    of the first.

    Both patterns must be sorted by increasing y.  ``huge`` bounds the search
    distance.  Giving ``id1`` and ``id2`` excludes pairs with equal identifiers.
    """
    _check_kmax(kmax)
    xs1, ys1 = _coordinates(x1, y1)
    xs2, ys2 = _coordinates(x2, y2)
    ids = _identifiers(id1, id2, len(xs1), len(xs2))
    gap2, dist2 = _planar(xs1, ys1, xs2, ys2)
    found = _search_cross(
        len(xs1), len(xs2), kmax, huge * huge, gap2, dist2, _exclusion(ids),
        follow=ids is None,
    )
    return _collect(found)