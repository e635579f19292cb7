import pytest

from spatnear.hotrod import hotrod_absorbing, hotrod_insulated


def _integral(func, a, x, sigma, nterms, steps=2000):
    h = a / steps
    return sum(func(a, x, (k + 0.5) * h, sigma, nterms) for k in range(steps)) * h


def test_bad_data_gives_zero():
    assert hotrod_insulated(0.0, 0.1, 0.2, 0.1, 5) == 0.0
    assert hotrod_insulated(1.0, 0.1, 0.2, -1.0, 5) == 0.0


def test_large_bandwidth_is_uniform():
    a = 2.0
    assert hotrod_insulated(a, 0.3, 1.1, 100.0, 5) == pytest.approx(1.0 / a)


def test_absorbing_large_bandwidth_and_bad_data():
    assert hotrod_absorbing(2.0, 0.3, 1.1, 100.0, 5) == 0.0
    assert hotrod_absorbing(-1.0, 0.3, 1.1, 0.1, 5) == 0.0


def test_insulated_integrates_to_one():
    assert _integral(hotrod_insulated, 1.0, 0.3, 0.1, 10) == pytest.approx(1.0, abs=1e-3)


def test_absorbing_loses_mass():
    total = _integral(hotrod_absorbing, 1.0, 0.3, 0.1, 50)
    assert 0.0 < total < 1.0


@pytest.mark.parametrize("func", [hotrod_insulated, hotrod_absorbing])
def test_symmetric_in_source_and_query(func):
    assert func(1.5, 0.2, 0.9, 0.3, 20) == pytest.approx(func(1.5, 0.9, 0.2, 0.3, 20))


def test_absorbing_vanishes_at_end():
    assert hotrod_absorbing(1.0, 0.0, 0.4, 0.2, 30) == pytest.approx(0.0, abs=1e-12)


def test_absorbing_not_above_insulated():
    for y in (0.1, 0.3, 0.5, 0.8):
        assert hotrod_absorbing(1.0, 0.4, y, 0.15, 60) <= hotrod_insulated(
            1.0, 0.4, y, 0.15, 10
        ) + 1e-9


def test_more_terms_converge():
    coarse = hotrod_insulated(1.0, 0.3, 0.7, 0.5, 20)
    fine = hotrod_insulated(1.0, 0.3, 0.7, 0.5, 40)
    assert coarse == pytest.approx(fine)