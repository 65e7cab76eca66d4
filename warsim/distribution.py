"""Running sample distribution using Welford's online algorithm."""

from __future__ import annotations

import math

from warsim.statistics import find_cdf_quantile, two_sided_p_value


class Distribution:
    """Accumulates samples and tracks their mean and spread."""

    def __init__(self) -> None:
        self._n_samples = 0
        self._mean = 0.0
        self._m2 = 0.0
        self._last_sample = 0.0

    def add_sample(self, sample: float) -> None:
        """Add one sample."""
        self._last_sample = sample
        self._n_samples += 1
        delta = sample - self._mean
        self._mean += delta / self._n_samples
        self._m2 += delta * (sample - self._mean)

    def add(self, other: Distribution) -> None:
        """Merge the samples of another distribution into this one."""
        n = self._n_samples + other._n_samples
        if n == 0:
            return
        mean = (self._mean * self._n_samples + other._mean * other._n_samples) / n
        delta = self._mean - other._mean
        m2 = self._m2 + other._m2 + self._n_samples * other._n_samples * delta * delta / n
        self._n_samples = n
        self._mean = mean
        self._m2 = m2

    @property
    def samples(self) -> int:
        return self._n_samples

    @property
    def mean(self) -> float:
        return self._mean

    @property
    def last_sample(self) -> float:
        return self._last_sample

    @property
    def variance(self) -> float:
        if self._n_samples == 0:
            return math.nan
        return self._m2 / self._n_samples

    @property
    def std(self) -> float:
        return math.sqrt(self.variance)

    @property
    def var_of_the_mean(self) -> float:
        if self._n_samples == 0:
            return math.nan
        return self._m2 / (self._n_samples * self._n_samples)

    @property
    def std_of_the_mean(self) -> float:
        if self._n_samples == 0:
            return math.nan
        return math.sqrt(self._m2) / self._n_samples

    def confidence_interval(self, p_value: float) -> tuple[float, float]:
        """Symmetric interval expected to hold ``p_value`` of the samples."""
        val = find_cdf_quantile(two_sided_p_value(p_value), 0.01)
        return self._mean - val * self.std, self._mean + val * self.std

    def confidence_interval_of_the_mean(self, p_value: float) -> tuple[float, float]:
        """Symmetric interval for the mean at confidence ``p_value``."""
        val = find_cdf_quantile(two_sided_p_value(p_value), 0.01)
        spread = self.std_of_the_mean
        return self._mean - val * spread, self._mean + val * spread

    def __str__(self) -> str:
        return f"mean = {self.mean:g}, std_of_the_mean = {self.std_of_the_mean:g}, samples = {self.samples}"