"""Minimum nearest-neighbour distance of a planar point pattern."""

from __future__ import annotations

import math
from collections.abc import Sequence

__all__ = ["min_nn_distance2"]


def _float_columns(**columns: Sequence[float]) -> list[list[float]]:
    """Convert named coordinate sequences to lists of floats of equal length."""
    converted = [[float(v) for v in column] for column in columns.values()]
    if len({len(column) for column in converted}) > 1:
        names = list(columns)
        listed = ", ".join(names[:-1]) + " and " + names[-1]
        raise ValueError(f"{listed} must have the same length")
    return converted


def min_nn_distance2(
    x: Sequence[float],
    y: Sequence[float],
    huge: float = math.inf,
    ignore_zero: bool = False,
) -> float:
    """Return the squared minimum nearest-neighbour distance.

    Points must be sorted by increasing y.  ``huge`` bounds the search; its
    square is returned when no pair is found.  With ``ignore_zero`` set,
    coincident points are not counted.
    """
    xs, ys = _float_columns(x=x, y=y)
    n = len(xs)
    d2min = huge * huge

    for i, (xi, yi) in enumerate(zip(xs, ys)):
        for order in (range(i + 1, n), range(i - 1, -1, -1)):
            for j in order:
                dy = ys[j] - yi
                dy2 = dy * dy
                if dy2 > d2min:
                    break
                dx = xs[j] - xi
                d2 = dx * dx + dy2
                if d2 < d2min and (d2 > 0 or not ignore_zero):
                    d2min = d2
    return d2min