"""Nearest data point to each point of a rectangular pixel grid.

The data points must be sorted by increasing x coordinate.  Grid point
(i, j) lies at x = x0 + j * xstep, y = y0 + i * ystep; results are matrices
indexed ``[i][j]`` (row by y, column by x).
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from spatnear.nndistance import _coordinates

__all__ = ["nn_grid"]


def _axis(start: float, step: float, count: int) -> list[float]:
    """Grid coordinates along one axis, built by repeated addition."""
    if count < 0:
        raise ValueError("grid dimensions must be non-negative")
    values = []
    value = float(start)
    for _ in range(count):
        values.append(value)
        value += step
    return values


def nn_grid(
    nx: int,
    x0: float,
    xstep: float,
    ny: int,
    y0: float,
    ystep: float,
    xp: Sequence[float],
    yp: Sequence[float],
    huge: float = math.inf,
) -> tuple[list[list[float]], list[list[int | None]]]:
    """Return the distance to, and index of, the nearest data point for each
    grid point.

    Both results are ``ny`` by ``nx`` matrices.  ``huge`` bounds the search;
    it is reported as the distance, with index None, where nothing closer
    is found.
    """
    xcols = _axis(x0, xstep, nx)
    yrows = _axis(y0, ystep, ny)
    xs, ys = _coordinates(xp, yp)
    npoints = len(xs)
    hu2 = huge * huge
    bound = math.sqrt(hu2)

    distances = [[bound] * nx for _ in range(ny)]
    which: list[list[int | None]] = [[None] * nx for _ in range(ny)]
    if npoints == 0:
        return distances, which

    last = 0
    for j, xj in enumerate(xcols):
        for i, yi in enumerate(yrows):
            d2min = hu2
            mwhich: int | None = None

            for m in range(last, npoints):
                dx = xs[m] - xj
                dx2 = dx * dx
                if dx2 > d2min:
                    break
                dy = ys[m] - yi
                d2 = dy * dy + dx2
                if d2 < d2min:
                    d2min, mwhich = d2, m

            for m in range(last - 1, -1, -1):
                dx = xj - xs[m]
                dx2 = dx * dx
                if dx2 > d2min:
                    break
                dy = ys[m] - yi
                d2 = dy * dy + dx2
                if d2 < d2min:
                    d2min, mwhich = d2, m

            last = mwhich if mwhich is not None else 0
            distances[i][j] = math.sqrt(d2min)
            which[i][j] = mwhich

    return distances, which