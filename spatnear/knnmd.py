"""The k nearest neighbours in point patterns of any spatial dimension.

Each point is a sequence of coordinates, and all points of a pattern have
the same dimension.  Patterns must be sorted by increasing first
coordinate.  When identifiers are supplied for two patterns, points
sharing an identifier are treated as the same point and never counted as
neighbours of each other.
"""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterable, Sequence

from spatnear.knndistance import KNearestNeighbours, _check_kmax, _collect
from spatnear.nnmd import _cross_md, _self_md

__all__ = ["knn_md", "knn_cross_md"]


def knn_md(
    points: Iterable[Sequence[float]],
    kmax: int = 1,
    huge: float = math.inf,
) -> KNearestNeighbours:
    """Find the 1st to ``kmax``-th nearest other points for each point.

    Points must be sorted by increasing first coordinate.  Each point gets
    ``kmax`` entries in increasing order of distance; unfilled places hold
    ``huge`` and None.
    """
    _check_kmax(kmax)
    return _collect(_self_md(points, kmax, huge))


def knn_cross_md(
    points1: Iterable[Sequence[float]],
    points2: Iterable[Sequence[float]],
    kmax: int = 1,
    id1: Sequence[Hashable] | None = None,
    id2: Sequence[Hashable] | None = None,
    huge: float = math.inf,
) -> KNearestNeighbours:
    """Find the ``kmax`` nearest points of the second pattern for each point
    of the first.

    Both patterns must be sorted by increasing first coordinate and have
    the same dimension.  ``huge`` bounds the search distance.  Giving
    ``id1`` and ``id2`` excludes pairs with equal identifiers.
    """
    _check_kmax(kmax)
    return _collect(_cross_md(points1, points2, kmax, id1, id2, huge))