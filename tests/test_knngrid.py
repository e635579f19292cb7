import math
import random

import pytest

from spatnear.knngrid import knn_grid
from spatnear.nngrid import nn_grid


def _sorted_points(seed, n):
    rng = random.Random(seed)
    pts = sorted((rng.uniform(0, 10), rng.uniform(0, 10)) for _ in range(n))
    return [p[0] for p in pts], [p[1] for p in pts]


def test_point_on_grid_is_first_neighbour():
    dist, which = knn_grid(3, 0.0, 1.0, 3, 0.0, 1.0, [1.0, 2.0], [1.0, 1.0], kmax=2)
    assert dist[1][1][0] == 0.0
    assert which[1][1] == [0, 1]


def test_k_one_agrees_with_nn_grid():
    xp, yp = _sorted_points(3, 30)
    d1, w1 = nn_grid(5, 0.0, 2.0, 4, 1.0, 2.5, xp, yp)
    dk, wk = knn_grid(5, 0.0, 2.0, 4, 1.0, 2.5, xp, yp, kmax=1)
    for i in range(4):
        for j in range(5):
            assert dk[i][j] == [d1[i][j]]
            assert wk[i][j] == [w1[i][j]]


def test_distances_sorted_and_match_indices():
    xp, yp = _sorted_points(4, 30)
    nx, ny, k = 6, 5, 4
    dist, which = knn_grid(nx, 0.0, 1.7, ny, 0.0, 2.1, xp, yp, kmax=k)
    for i in range(ny):
        for j in range(nx):
            g = (j * 1.7, i * 2.1)
            ds = dist[i][j]
            assert ds == sorted(ds)
            assert len(set(which[i][j])) == k
            for d, m in zip(ds, which[i][j]):
                assert d == pytest.approx(math.dist(g, (xp[m], yp[m])))


def test_kth_distance_is_the_kth_smallest():
    xp, yp = _sorted_points(5, 20)
    k = 3
    dist, _ = knn_grid(4, 0.0, 3.0, 4, 0.0, 3.0, xp, yp, kmax=k)
    for i in range(4):
        for j in range(4):
            g = (j * 3.0, i * 3.0)
            all_d = sorted(math.dist(g, p) for p in zip(xp, yp))
            assert dist[i][j] == pytest.approx(all_d[:k])


def test_kmax_beyond_pattern_size_pads_with_bound():
    dist, which = knn_grid(1, 0.0, 1.0, 1, 0.0, 1.0, [0.0], [0.0], kmax=3, huge=9.0)
    assert dist[0][0] == [0.0, 9.0, 9.0]
    assert which[0][0] == [0, None, None]


def test_empty_pattern_gives_bound():
    dist, which = knn_grid(2, 0.0, 1.0, 1, 0.0, 1.0, [], [], kmax=2, huge=4.0)
    assert dist == [[[4.0, 4.0], [4.0, 4.0]]]
    assert which == [[[None, None], [None, None]]]


def test_invalid_kmax_raises():
    with pytest.raises(ValueError):
        knn_grid(2, 0.0, 1.0, 2, 0.0, 1.0, [1.0], [1.0], kmax=0)


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        knn_grid(2, 0.0, 1.0, 2, 0.0, 1.0, [1.0], [1.0, 2.0], kmax=2)