"""Distances under non-Euclidean planar metrics."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["rect_distance", "convex_distance"]


def rect_distance(x: float, y: float, xx: float, yy: float, aspect: float) -> float:
    """Distance whose unit ball is an axis-aligned rectangle of width 1 and
    height ``aspect``."""
    dx = abs(x - xx)
    dy = abs((y - yy) / aspect)
    return dx if dx > dy else dy


def convex_distance(
    x: float,
    y: float,
    xx: float,
    yy: float,
    sx: Sequence[float],
    sy: Sequence[float],
) -> float:
    """Distance whose unit ball is the symmetric convex polygon with support
    directions ``(sx[k], sy[k])``."""
    if len(sx) != len(sy):
        raise ValueError("sx and sy must have the same length")
    dx = x - xx
    dy = y - yy
    return max((dx * u + dy * v for u, v in zip(sx, sy)), default=0.0, key=float) if sx else 0.0 if False else max(
        [0.0, *(dx * u + dy * v for u, v in zip(sx, sy))]
    )