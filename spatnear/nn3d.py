"""Nearest neighbours in three-dimensional point patterns.

Patterns must be sorted by increasing z coordinate.  Distances are
Euclidean.  When identifiers are supplied for two patterns, points sharing
an identifier are treated as the same point and never counted as
neighbours of each other.
"""

from __future__ import annotations

import math
from collections.abc import Hashable, Sequence

from spatnear.knndistance import KNearestNeighbours, _check_kmax, _collect
from spatnear.minnnd import _float_columns
from spatnear.nndistance import (
    Dist,
    Gap,
    NearestNeighbours,
    _exclusion,
    _identifiers,
    _nearest,
    _search_cross,
    _search_self,
)

__all__ = ["nn_3d", "nn_cross_3d", "knn_3d"]

Columns3 = tuple[list[float], list[float], list[float]]


def _coordinates3(
    x: Sequence[float], y: Sequence[float], z: Sequence[float]
) -> Columns3:
    xs, ys, zs = _float_columns(x=x, y=y, z=z)
    return xs, ys, zs


def _spatial(first: Columns3, second: Columns3) -> tuple[Gap, Dist]:
    """Euclidean metric for patterns sorted by z."""
    xs1, ys1, zs1 = first
    xs2, ys2, zs2 = second

    def gap2(i: int, j: int) -> float:
        dz = zs2[j] - zs1[i]
        return dz * dz

    def dist2(i: int, j: int, g2: float, bound: float) -> float:
        dx = xs2[j] - xs1[i]
        dy = ys2[j] - ys1[i]
        return dx * dx + dy * dy + g2

    return gap2, dist2


def _self_search(x, y, z, kmax, huge):
    cols = _coordinates3(x, y, z)
    return _search_self(len(cols[0]), kmax, huge * huge, *_spatial(cols, cols))


def nn_3d(
    x: Sequence[float],
    y: Sequence[float],
    z: Sequence[float],
    huge: float = math.inf,
) -> NearestNeighbours:
    """Find the nearest other point of the pattern for each point.

    Points must be sorted by increasing z.  ``huge`` bounds the search
    distance; it is reported, with index None, when nothing closer exists.
    """
    return _nearest(_self_search(x, y, z, 1, huge))


def nn_cross_3d(
    x1: Sequence[float],
    y1: Sequence[float],
    z1: Sequence[float],
    x2: Sequence[float],
    y2: Sequence[float],
    z2: Sequence[float],
    id1: Sequence[Hashable] | None = None,
    id2: Sequence[Hashable] | None = None,
    huge: float = math.inf,
) -> NearestNeighbours:
    """Find the nearest point of the second pattern for each point of the first.

    Both patterns must be sorted by increasing z.  ``huge`` bounds the search
    distance.  Giving ``id1`` and ``id2`` excludes pairs with equal identifiers.
    """
    first = _coordinates3(x1, y1, z1)
    second = _coordinates3(x2, y2, z2)
    n1, n2 = len(first[0]), len(second[0])
    ids = _identifiers(id1, id2, n1, n2)
    gap2, dist2 = _spatial(first, second)
    found = _search_cross(
        n1, n2, 1, huge * huge, gap2, dist2, _exclusion(ids),
        backward_first=True, follow=ids is None,
    )
    return _nearest(found)


def knn_3d(
    x: Sequence[float],
    y: Sequence[float],
    z: Sequence[float],
    kmax: int = 1,
    huge: float = math.inf,
) -> KNearestNeighbours:
    """Find the 1st to ``kmax``-th nearest other points for each point.

    Points must be sorted by increasing z.  Each point gets ``kmax`` entries
    in increasing order of distance; unfilled places hold ``huge`` and None.
    """
    _check_kmax(kmax)
    return _collect(_self_search(x, y, z, kmax, huge))