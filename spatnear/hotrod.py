"""Heat kernel on a one-dimensional rod with insulated or absorbing ends."""

from __future__ import annotations

import math

__all__ = ["hotrod_insulated", "hotrod_absorbing"]

_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)


def _normal_density(value: float, mean: float, sd: float) -> float:
    z = (value - mean) / sd
    return _INV_SQRT_2PI * math.exp(-0.5 * z * z) / sd


def hotrod_insulated(
    a: float, x: float, y: float, sigma: float, nterms: int
) -> float:
    """Heat kernel at ``y`` from a source at ``x`` on a rod of length ``a``
    with insulated ends, summing images for k in ``-nterms..nterms``.

    Returns 0 for non-positive length or bandwidth, and the uniform density
    ``1/a`` when ``sigma`` exceeds ``20 * a``.
    """
    if a <= 0.0 or sigma <= 0.0:
        return 0.0
    if sigma > 20.0 * a:
        return 1.0 / a
    two_a = 2.0 * a
    total = 0.0
    for k in range(-nterms, nterms + 1):
        shift = k * two_a
        total += _normal_density(shift + y, x, sigma)
        total += _normal_density(shift - y, x, sigma)
    return total


def hotrod_absorbing(
    a: float, x: float, y: float, sigma: float, nterms: int
) -> float:
    """Heat kernel at ``y`` from a source at ``x`` on a rod of length ``a``
    with absorbing ends, using ``nterms`` terms of the Fourier series.

    Returns 0 for non-positive length or bandwidth, or when ``sigma``
    exceeds ``20 * a``.
    """
    if a <= 0.0 or sigma <= 0.0 or sigma > 20.0 * a:
        return 0.0
    pi_on_a = math.pi / a
    fac = pi_on_a * pi_on_a * sigma * sigma / 2.0
    px = pi_on_a * x
    py = pi_on_a * y
    total = sum(
        math.exp(-fac * k * k) * math.sin(k * px) * math.sin(k * py)
        for k in range(1, nterms + 1)
    )
    return total * 2.0 / a