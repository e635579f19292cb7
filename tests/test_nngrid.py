import math
import random

import pytest

from spatnear.nngrid import nn_grid


def _sorted_points(seed, n):
    rng = random.Random(seed)
    pts = sorted((rng.uniform(0, 10), rng.uniform(0, 10)) for _ in range(n))
    return [p[0] for p in pts], [p[1] for p in pts]


def test_single_point_on_grid_has_zero_distance():
    dist, which = nn_grid(3, 0.0, 1.0, 3, 0.0, 1.0, [1.0], [1.0])
    assert dist[1][1] == 0.0
    assert which[1][1] == 0
    assert dist[0][0] == pytest.approx(math.sqrt(2.0))


def test_result_shape_is_rows_by_columns():
    dist, which = nn_grid(4, 0.0, 1.0, 2, 0.0, 1.0, [0.5], [0.5])
    assert len(dist) == 2
    assert all(len(row) == 4 for row in dist)
    assert len(which) == 2
    assert all(len(row) == 4 for row in which)


def test_distances_match_reported_neighbour():
    xp, yp = _sorted_points(1, 25)
    nx, ny = 7, 5
    dist, which = nn_grid(nx, 0.0, 1.5, ny, 0.5, 2.0, xp, yp)
    for i in range(ny):
        for j in range(nx):
            gx = 0.0 + j * 1.5
            gy = 0.5 + i * 2.0
            m = which[i][j]
            assert m is not None
            assert dist[i][j] == pytest.approx(math.dist((gx, gy), (xp[m], yp[m])))


def test_reported_neighbour_is_the_nearest():
    xp, yp = _sorted_points(2, 40)
    nx, ny = 6, 6
    dist, _ = nn_grid(nx, 0.0, 2.0, ny, 0.0, 2.0, xp, yp)
    for i in range(ny):
        for j in range(nx):
            g = (j * 2.0, i * 2.0)
            for p in zip(xp, yp):
                assert dist[i][j] <= math.dist(g, p) + 1e-12


def test_empty_pattern_gives_bound():
    dist, which = nn_grid(2, 0.0, 1.0, 2, 0.0, 1.0, [], [], huge=7.0)
    assert dist == [[7.0, 7.0], [7.0, 7.0]]
    assert which == [[None, None], [None, None]]


def test_search_bound_leaves_far_points_unfound():
    dist, which = nn_grid(1, 0.0, 1.0, 1, 0.0, 1.0, [100.0], [100.0], huge=5.0)
    assert dist == [[5.0]]
    assert which == [[None]]


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        nn_grid(2, 0.0, 1.0, 2, 0.0, 1.0, [1.0, 2.0], [1.0])


def test_negative_dimension_raises():
    with pytest.raises(ValueError):
        nn_grid(-1, 0.0, 1.0, 2, 0.0, 1.0, [1.0], [1.0])