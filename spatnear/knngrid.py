"""The k nearest data points to each point of a rectangular pixel grid.

The data points must be sorted by increasing x coordinate.  Grid point
(i, j) lies at x = x0 + j * xstep, y = y0 + i * ystep; results are matrices
indexed ``[i][j]``, each entry a list of ``kmax`` values.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from spatnear.knndistance import _check_kmax
from spatnear.nndistance import _coordinates, _search_cross
from spatnear.nngrid import _axis

__all__ = ["knn_grid"]


def knn_grid(
    nx: int,
    x0: float,
    xstep: float,
    ny: int,
    y0: float,
    ystep: float,
    xp: Sequence[float],
    yp: Sequence[float],
    kmax: int = 1,
    huge: float = math.inf,
) -> tuple[list[list[list[float]]], list[list[list[int | None]]]]:
    """Return the distances to, and indices of, the 1st to ``kmax``-th
    nearest data points for each grid point.

    Both results are ``ny`` by ``nx`` matrices of lists in increasing order
    of distance; unfilled places hold the search bound ``huge`` and None.
    """
    _check_kmax(kmax)
    xcols = list(_axis(x0, xstep, nx))
    yrows = list(_axis(y0, ystep, ny))
    xs, ys = _coordinates(xp, yp)

    # Grid points are visited column by column, as the search order requires.
    gx = [xj for xj in xcols for _ in yrows]
    gy = [yi for _ in xcols for yi in yrows]

    def gap2(q: int, m: int) -> float:
        dx = xs[m] - gx[q]
        return dx * dx

    def dist2(q: int, m: int, g2: float, bound: float) -> float:
        dy = ys[m] - gy[q]
        return dy * dy + g2

    found = _search_cross(
        len(gx), len(xs), kmax, huge * huge, gap2, dist2, keep_on_miss=True
    )
    rows = [found[i::ny] for i in range(ny)]
    distances = [[f.distances() for f in row] for row in rows]
    which = [[f.idx for f in row] for row in rows]
    return distances, which