"""Basic descriptive statistics and normal-distribution helpers."""

from __future__ import annotations

import math
from collections.abc import Sequence


def _require_values(values: Sequence[float]) -> None:
    if not values:
        raise ValueError("at least one value is required")


def average(values: Sequence[float]) -> float:
    """Arithmetic mean of the values."""
    _require_values(values)
    return math.fsum(values) / len(values)


def variance(values: Sequence[float], mean: float) -> float:
    """Population variance of the values around the given mean."""
    _require_values(values)
    return math.fsum((value - mean) ** 2 for value in values) / len(values)


def standard_deviation(values: Sequence[float], mean: float) -> float:
    """Population standard deviation of the values around the given mean."""
    return math.sqrt(variance(values, mean))


def sample_deviation(standard_dev: float, n_samples: int) -> float:
    """Standard deviation of the mean of ``n_samples`` samples."""
    return standard_dev / math.sqrt(n_samples)


def add_standard_deviations(std1: float, std2: float) -> float:
    """Standard deviation of the sum of two independent variables."""
    return math.sqrt(std1 * std1 + std2 * std2)


def update_mean(mean: float, tot_samples: int, new_sample: float) -> float:
    """Mean after adding ``new_sample``; ``tot_samples`` includes the new one."""
    return (mean * (tot_samples - 1) + new_sample) / tot_samples


def update_variance(variance: float, mean: float, tot_samples: int, new_sample: float) -> float:
    """Population variance after adding ``new_sample``; ``tot_samples`` includes it."""
    new_mean = update_mean(mean, tot_samples, new_sample)
    return ((tot_samples - 1) * variance + (new_sample - new_mean) * (new_sample - mean)) / tot_samples


def two_sided_p_value(p_value: float) -> float:
    """Upper quantile of a symmetric interval holding ``p_value`` of the mass."""
    return 1 - (1 - p_value) / 2.0


def normal_cdf(value: float) -> float:
    """Cumulative distribution function of the standard normal distribution."""
    return 0.5 * math.erfc(-value / math.sqrt(2.0))


def find_cdf_quantile(target_quantile: float, precision: float) -> float:
    """Smallest step multiple ``x >= 0`` with ``normal_cdf(x) >= target_quantile``."""
    if target_quantile >= 1.0:
        raise ValueError("target quantile must be below 1")
    x = 0.0
    quantile = 0.5
    if quantile < target_quantile and precision <= 0:
        raise ValueError("precision must be positive")
    while quantile < target_quantile:
        x += precision
        quantile = normal_cdf(x)
    return x


def geometric_series(p: float) -> float:
    """Sum of the geometric series ``1 + p + p**2 + ...``."""
    return 1 / (1 - p)