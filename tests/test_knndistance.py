import math
import random

import pytest

from spatnear.knndistance import KNearestNeighbours, knn_cross
from spatnear.nndistance import nn_cross


def _pattern(seed, n):
    rng = random.Random(seed)
    pts = sorted(((rng.random(), rng.random()) for _ in range(n)), key=lambda p: p[1])
    return [p[0] for p in pts], [p[1] for p in pts]


def test_simple_two_nearest():
    result = knn_cross([0.0], [0.0], [0.0, 0.0, 0.0], [1.0, 2.0, 4.0], kmax=2)
    assert isinstance(result, KNearestNeighbours)
    assert result.distances == [[1.0, 2.0]]
    assert result.which == [[0, 1]]


@pytest.mark.parametrize("seed", [11, 12])
def test_k_one_matches_single_nearest(seed):
    x1, y1 = _pattern(seed, 25)
    x2, y2 = _pattern(seed + 50, 30)
    single = nn_cross(x1, y1, x2, y2)
    multi = knn_cross(x1, y1, x2, y2, kmax=1)
    assert [row[0] for row in multi.distances] == pytest.approx(single.distances)
    assert [row[0] for row in multi.which] == single.which


@pytest.mark.parametrize("seed", [21, 22, 23])
def test_k_nearest_are_the_smallest(seed):
    x1, y1 = _pattern(seed, 20)
    x2, y2 = _pattern(seed + 50, 15)
    k = 4
    result = knn_cross(x1, y1, x2, y2, kmax=k)
    for i, (dists, idx) in enumerate(zip(result.distances, result.which)):
        p = (x1[i], y1[i])
        assert dists == sorted(dists)
        assert len(set(idx)) == k
        for d, j in zip(dists, idx):
            assert d == pytest.approx(math.dist(p, (x2[j], y2[j])))
        expected = sorted(math.dist(p, q) for q in zip(x2, y2))[:k]
        assert dists == pytest.approx(expected)


def test_kmax_exceeds_pattern_size():
    result = knn_cross([0.0], [0.0], [0.0], [3.0], kmax=3, huge=5.0)
    assert result.distances == [[3.0, 5.0, 5.0]]
    assert result.which == [[0, None, None]]


def test_empty_second_pattern():
    result = knn_cross([0.0], [0.0], [], [], kmax=2)
    assert result.which == [[None, None]]
    assert all(math.isinf(d) for d in result.distances[0])


def test_exclusion_skips_same_point():
    x, y = _pattern(31, 18)
    ids = [f"p{i}" for i in range(18)]
    result = knn_cross(x, y, x, y, kmax=3, id1=ids, id2=ids)
    for i, (dists, idx) in enumerate(zip(result.distances, result.which)):
        assert i not in idx
        p = (x[i], y[i])
        expected = sorted(math.dist(p, q) for k, q in enumerate(zip(x, y)) if k != i)[:3]
        assert dists == pytest.approx(expected)


def test_kmax_must_be_positive():
    with pytest.raises(ValueError):
        knn_cross([0.0], [0.0], [1.0], [1.0], kmax=0)


def test_ids_must_come_together():
    with pytest.raises(ValueError):
        knn_cross([0.0], [0.0], [1.0], [1.0], kmax=1, id2=[1])


def test_coordinate_length_checked():
    with pytest.raises(ValueError):
        knn_cross([0.0], [0.0], [1.0, 2.0], [1.0], kmax=1)