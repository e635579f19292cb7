"""Nearest neighbour from each point of one planar pattern to another.

Both patterns must be sorted by increasing y coordinate.  When identifiers
are supplied for both patterns, points sharing an identifier are treated as
the same point and never counted as neighbours of each other.

The module also holds the sorted-axis search shared by the other
neighbour finders of the package.
"""

from __future__ import annotations

import math
from bisect import bisect_right
from collections.abc import Callable, Hashable, Iterable, Sequence
from dataclasses import dataclass

from spatnear.minnnd import _float_columns

__all__ = ["NearestNeighbours", "nn_cross"]

# gap2(i, j): squared separation of query i and candidate j along the sort axis.
Gap = Callable[[int, int], float]
# dist2(i, j, gap2, bound): squared distance, may stop early once >= bound.
Dist = Callable[[int, int, float, float], float]
Skip = Callable[[int, int], bool]


@dataclass(frozen=True)
class NearestNeighbours:
    """Distance to, and index of, the nearest neighbour of each point.

    An index is None when no neighbour was found within the search bound.
    """

    distances: list[float]
    which: list[int | None]


class _Candidates:
    """The best ``kmax`` squared distances found so far, in increasing order."""

    __slots__ = ("d2s", "idx")

    def __init__(self, kmax: int, hu2: float) -> None:
        self.d2s = [hu2] * kmax
        self.idx: list[int | None] = [None] * kmax

    @property
    def bound(self) -> float:
        return self.d2s[-1]

    def offer(self, d2: float, j: int) -> None:
        """Replace the farthest entry by (d2, j), keeping the lists sorted."""
        self.d2s.pop()
        self.idx.pop()
        pos = bisect_right(self.d2s, d2)
        self.d2s.insert(pos, d2)
        self.idx.insert(pos, j)

    def distances(self) -> list[float]:
        return [math.sqrt(v) for v in self.d2s]


def _coordinates(
    x: Sequence[float], y: Sequence[float]
) -> tuple[list[float], list[float]]:
    xs, ys = _float_columns(x=x, y=y)
    return xs, ys


def _identifiers(
    id1: Sequence[Hashable] | None,
    id2: Sequence[Hashable] | None,
    n1: int,
    n2: int,
) -> tuple[list[Hashable], list[Hashable]] | None:
    """Validate identifier lists; None means no exclusion."""
    if id1 is None and id2 is None:
        return None
    if id1 is None or id2 is None:
        raise ValueError("id1 and id2 must be given together")
    ids1, ids2 = list(id1), list(id2)
    if len(ids1) != n1 or len(ids2) != n2:
        raise ValueError("identifiers must match the lengths of their patterns")
    return ids1, ids2


def _exclusion(ids: tuple[list[Hashable], list[Hashable]] | None) -> Skip | None:
    """Return a test for pairs sharing an identifier, or None."""
    if ids is None:
        return None
    ids1, ids2 = ids

    def skip(i: int, j: int) -> bool:
        return ids2[j] == ids1[i]

    return skip


def _scan(
    i: int,
    order: Iterable[int],
    gap2: Gap,
    dist2: Dist,
    found: _Candidates,
    skip: Skip | None = None,
) -> int | None:
    """Offer candidates in ``order`` until the sort axis alone is too far.

    Returns the index of the last candidate accepted.
    """
    accepted: int | None = None
    for j in order:
        g2 = gap2(i, j)
        if g2 > found.bound:
            break
        if skip is not None and skip(i, j):
            continue
        d2 = dist2(i, j, g2, found.bound)
        if d2 < found.bound:
            found.offer(d2, j)
            accepted = j
    return accepted


def _probe(
    i: int,
    orders: Iterable[Iterable[int]],
    gap2: Gap,
    dist2: Dist,
    kmax: int,
    hu2: float,
    skip: Skip | None = None,
) -> tuple[_Candidates, int | None]:
    """Search in each order in turn; return the candidates and last accepted."""
    found = _Candidates(kmax, hu2)
    latest: int | None = None
    for order in orders:
        accepted = _scan(i, order, gap2, dist2, found, skip)
        if accepted is not None:
            latest = accepted
    return found, latest


def _search_self(
    n: int, kmax: int, hu2: float, gap2: Gap, dist2: Dist
) -> list[_Candidates]:
    """Nearest other points within one sorted pattern."""
    return [
        _probe(i, (range(i - 1, -1, -1), range(i + 1, n)), gap2, dist2, kmax, hu2)[0]
        for i in range(n)
    ]


def _search_cross(
    n_from: int,
    n_to: int,
    kmax: int,
    hu2: float,
    gap2: Gap,
    dist2: Dist,
    skip: Skip | None = None,
    *,
    backward_first: bool = False,
    follow: bool = True,
    keep_on_miss: bool = False,
) -> list[_Candidates]:
    """Nearest points of a sorted target pattern for each query.

    Each search starts from the last neighbour accepted for the previous
    query when ``follow`` is set; after a query with no acceptance the start
    returns to 0 unless ``keep_on_miss`` is set.
    """
    last = 0
    results = []
    for i in range(n_from):
        orders = [range(last, n_to), range(last - 1, -1, -1)]
        if backward_first:
            orders.reverse()
        found, latest = _probe(i, orders, gap2, dist2, kmax, hu2, skip)
        if follow:
            if latest is not None:
                last = latest
            elif not keep_on_miss:
                last = 0
        results.append(found)
    return results


def _nearest(found: list[_Candidates]) -> NearestNeighbours:
    return NearestNeighbours(
        [math.sqrt(f.d2s[0]) for f in found], [f.idx[0] for f in found]
    )


def _planar(
    xs1: list[float], ys1: list[float], xs2: list[float], ys2: list[float]
) -> tuple[Gap, Dist]:
    """Planar metric for patterns sorted by y."""

    def gap2(i: int, j: int) -> float:
        dy = ys2[j] - ys1[i]
        return dy * dy

    def dist2(i: int, j: int, g2: float, bound: float) -> float:
        dx = xs2[j] - xs1[i]
        return dx * dx + g2

    return gap2, dist2


def nn_cross(
    x1: Sequence[float],
    y1: Sequence[float],
    x2: Sequence[float],
    y2: Sequence[float],
    id1: Sequence[Hashable] | None = None,
    id2: Sequence[Hashable] | None = None,
    huge: float = math.inf,
) -> NearestNeighbours:
    """Find the nearest point of the second pattern for each point of the first.

    Both patterns must be sorted by increasing y.  ``huge`` bounds the search
    distance; it is reported as the distance when nothing closer is found.
    Giving ``id1`` and ``id2`` excludes pairs with equal identifiers.
    """
    xs1, ys1 = _coordinates(x1, y1)
    xs2, ys2 = _coordinates(x2, y2)
    ids = _identifiers(id1, id2, len(xs1), len(xs2))
    gap2, dist2 = _planar(xs1, ys1, xs2, ys2)
    found = _search_cross(
        len(xs1), len(xs2), 1, huge * huge, gap2, dist2, _exclusion(ids),
        follow=ids is None,
    )
    return _nearest(found)