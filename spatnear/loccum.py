"""Local cumulative sums and products of weights over neighbourhoods.

For each point x_i of a pattern, the function
f_i(t) = combination of v(x_j) over j != i with |x_j - x_i| <= t
is evaluated at ``nr`` equally spaced values of t from 0 to ``rmax``.
Points must be sorted by increasing x coordinate.
"""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Sequence

from spatnear.minnnd import _float_columns

__all__ = ["local_sum", "local_product"]


def _cumulate(
    x: Sequence[float],
    y: Sequence[float],
    v: Sequence[float],
    nr: int,
    rmax: float,
    start: float,
    combine: Callable[[float, float], float],
) -> list[list[float]]:
    xs, ys, vs = _float_columns(x=x, y=y, v=v)
    if nr < 2:
        raise ValueError("nr must be at least 2")
    if rmax <= 0:
        raise ValueError("rmax must be positive")
    n = len(xs)
    rstep = rmax / (nr - 1)
    rmax2 = rmax * rmax

    result = []
    for i, (xi, yi) in enumerate(zip(xs, ys)):
        values = [start] * nr
        for direction in (range(i - 1, -1, -1), range(i + 1, n)):
            for j in direction:
                dx = xs[j] - xi
                dx2 = dx * dx
                if dx2 > rmax2:
                    break
                dy = ys[j] - yi
                d2 = dx2 + dy * dy
                if d2 <= rmax2:
                    kmin = math.ceil(math.sqrt(d2) / rstep)
                    for k in range(kmin, nr):
                        values[k] = combine(values[k], vs[j])
        result.append(values)
    return result


def local_sum(
    x: Sequence[float],
    y: Sequence[float],
    v: Sequence[float],
    nr: int,
    rmax: float,
) -> list[list[float]]:
    """Local cumulative sums of weights, one list of ``nr`` values per point."""
    return _cumulate(x, y, v, nr, rmax, 0.0, operator.add)


def local_product(
    x: Sequence[float],
    y: Sequence[float],
    v: Sequence[float],
    nr: int,
    rmax: float,
) -> list[list[float]]:
    """Local cumulative products of weights, one list of ``nr`` values per point."""
    return _cumulate(x, y, v, nr, rmax, 1.0, operator.mul)