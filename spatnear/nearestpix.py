"""Nearest valid pixel of a logical mask to given query locations.

Query coordinates are in pixel units: pixel centres lie at integer
positions starting from (0, 0), with x indexing columns and y rows.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

__all__ = ["nearest_valid_pixel"]


def nearest_valid_pixel(
    x: Sequence[float],
    y: Sequence[float],
    mask: Sequence[Sequence[object]],
    aspect: float = 1.0,
    nsearch: int | None = None,
) -> list[tuple[int, int] | None]:
    """Return the (row, column) of the nearest true pixel for each query point.

    ``mask[row][col]`` is truthy for valid pixels.  ``aspect`` is the ratio
    of pixel height to width.  The search extends at most ``nsearch`` pixels
    along each axis (the whole mask when None); ``None`` marks a query with
    no valid pixel in reach.
    """
    grid = [[bool(v) for v in row] for row in mask]
    if not grid or not grid[0]:
        raise ValueError("mask must be a non-empty matrix")
    nrow, ncol = len(grid), len(grid[0])
    if any(len(row) != ncol for row in grid):
        raise ValueError("mask rows must all have the same length")
    xs = [float(v) for v in x]
    ys = [float(v) for v in y]
    if len(xs) != len(ys):
        raise ValueError("x and y must have the same length")
    if nsearch is None:
        nsearch = max(nrow, ncol)

    huge = math.sqrt(float(ncol) * ncol + aspect * aspect * float(nrow) * nrow)
    results: list[tuple[int, int] | None] = []
    for xi, yi in zip(xs, ys):
        row = min(max(round(yi), 0), nrow - 1)
        col = min(max(round(xi), 0), ncol - 1)
        if grid[row][col]:
            results.append((row, col))
            continue
        best: tuple[int, int] | None = None
        best_d = huge
        for r in range(max(row - nsearch, 0), min(row + nsearch, nrow - 1) + 1):
            for c in range(max(col - nsearch, 0), min(col + nsearch, ncol - 1) + 1):
                if grid[r][c]:
                    dx = xi - c
                    dy = aspect * (yi - r)
                    d = math.sqrt(dx * dx + dy * dy)
                    if d < best_d:
                        best, best_d = (r, c), d
        results.append(best)
    return results