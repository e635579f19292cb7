"""Detect points that have a neighbour within a given distance.

Patterns must be sorted by increasing x coordinate.  Distances may be
planar or periodic (torus) in two or three dimensions.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

__all__ = ["has_close", "has_close_cross"]


def _fold(d: float, period: float) -> float:
    """Absolute separation folded onto a periodic axis."""
    d = abs(d)
    return period - d if d > period / 2.0 else d


def _coordinates(
    x: Sequence[float], y: Sequence[float], z: Sequence[float] | None
) -> tuple[list[float], list[float], list[float]]:
    xs = [float(v) for v in x]
    ys = [float(v) for v in y]
    if len(xs) != len(ys):
        raise ValueError("x and y must have the same length")
    if z is None:
        zs = [0.0] * len(xs)
    else:
        zs = [float(v) for v in z]
        if len(zs) != len(xs):
            raise ValueError("z must have the same length as x and y")
    return xs, ys, zs


def _check_box(
    box: Sequence[float] | None, three_d: bool
) -> tuple[float, ...] | None:
    if box is None:
        return None
    dims = tuple(float(b) for b in box)
    needed = 3 if three_d else 2
    if len(dims) < needed:
        raise ValueError(f"box must give {needed} side lengths")
    return dims


def _pair_test(
    r: float, box: tuple[float, ...] | None, three_d: bool
) -> Callable[[float, float, float], bool]:
    """Return a predicate deciding whether a displacement is within r."""
    r2 = r * r

    def is_close(dx: float, dy: float, dz: float) -> bool:
        if box is not None:
            dy = _fold(dy, box[1])
        excess = dx * dx + dy * dy - r2
        if three_d and excess <= 0.0:
            if box is not None:
                dz = _fold(dz, box[2])
            excess += dz * dz
        return excess <= 0.0

    return is_close


def has_close(
    x: Sequence[float],
    y: Sequence[float],
    r: float,
    z: Sequence[float] | None = None,
    box: Sequence[float] | None = None,
) -> list[bool]:
    """Flag each point that has another point of the pattern within distance r.

    Points must be sorted by increasing x.  If ``z`` is given the points are
    three-dimensional.  If ``box`` is given, distances are periodic with the
    box side lengths as periods.
    """
    xs, ys, zs = _coordinates(x, y, z)
    three_d = z is not None
    dims = _check_box(box, three_d)
    is_close = _pair_test(r, dims, three_d)
    rplus = r + r / 16.0
    n = len(xs)
    close = [False] * n

    for i in range(1, n):
        xi, yi, zi = xs[i], ys[i], zs[i]
        for j in range(i - 1, -1, -1):
            dx = xi - xs[j]
            if dx > rplus:
                break
            if is_close(dx, ys[j] - yi, zs[j] - zi):
                close[i] = close[j] = True
        if dims is not None:
            for j in range(i):
                dx = dims[0] + xs[j] - xi
                if dx > rplus:
                    break
                if is_close(dx, ys[j] - yi, zs[j] - zi):
                    close[i] = close[j] = True
    return close


def has_close_cross(
    x1: Sequence[float],
    y1: Sequence[float],
    x2: Sequence[float],
    y2: Sequence[float],
    r: float,
    z1: Sequence[float] | None = None,
    z2: Sequence[float] | None = None,
    box: Sequence[float] | None = None,
) -> list[bool]:
    """Flag each point of the first pattern that has a point of the second within r.

    Both patterns must be sorted by increasing x.  Give ``z1`` and ``z2``
    together for three-dimensional points.  ``box`` makes distances periodic.
    """
    if (z1 is None) != (z2 is None):
        raise ValueError("z1 and z2 must be given together")
    xs1, ys1, zs1 = _coordinates(x1, y1, z1)
    xs2, ys2, zs2 = _coordinates(x2, y2, z2)
    three_d = z1 is not None
    dims = _check_box(box, three_d)
    is_close = _pair_test(r, dims, three_d)
    rplus = r + r / 16.0
    n2 = len(xs2)
    result = [False] * len(xs1)
    if not xs1 or n2 == 0:
        return result

    jleft = 0
    for i, (xi, yi, zi) in enumerate(zip(xs1, ys1, zs1)):
        xleft = xi - rplus
        while xs2[jleft] < xleft and jleft + 1 < n2:
            jleft += 1

        found = False
        jright = jleft
        while jright < n2:
            dx = xs2[jright] - xi
            if dx > rplus:
                break
            if is_close(dx, ys2[jright] - yi, zs2[jright] - zi):
                found = True
                break
            jright += 1

        if dims is not None and not found:
            for j in range(jleft):
                dx = _fold(xi - xs2[j], dims[0])
                if dx > rplus:
                    break
                if is_close(dx, ys2[j] - yi, zs2[j] - zi):
                    found = True
                    break
            if not found:
                for j in range(n2 - 1, jright - 1, -1):
                    dx = _fold(xi - xs2[j], dims[0])
                    if dx > rplus:
                        break
                    if is_close(dx, ys2[j] - yi, zs2[j] - zi):
                        found = True
                        break
        result[i] = found
    return result