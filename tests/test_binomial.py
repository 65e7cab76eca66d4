import pytest

from warsim.binomial import BinomialDistribution


def test_fair_coin_moments():
    dist = BinomialDistribution(100, 0.5)
    assert dist.mean == pytest.approx(50)
    assert dist.variance == pytest.approx(25)
    assert dist.std() == pytest.approx(5)


def test_std_squared_is_variance():
    dist = BinomialDistribution(37, 0.2)
    assert dist.std() ** 2 == pytest.approx(dist.variance)


def test_interval_centered_on_mean():
    dist = BinomialDistribution(200, 0.4)
    low, high = dist.confidence_interval(0.9)
    assert (low + high) / 2 == pytest.approx(dist.mean)
    assert low < dist.mean < high


def test_width_matches_interval():
    dist = BinomialDistribution(200, 0.4)
    low, high = dist.confidence_interval(0.9)
    assert dist.confidence_interval_width(0.9) == pytest.approx(high - low)


def test_width_grows_with_confidence():
    dist = BinomialDistribution(500, 0.5)
    assert dist.confidence_interval_width(0.99) > dist.confidence_interval_width(0.9)


def test_width_scales_with_std():
    small = BinomialDistribution(100, 0.5)
    large = BinomialDistribution(400, 0.5)
    ratio_small = small.confidence_interval_width(0.95) / small.std()
    ratio_large = large.confidence_interval_width(0.95) / large.std()
    assert ratio_small == pytest.approx(ratio_large)