"""Normal approximation of a binomial distribution."""

from __future__ import annotations

import math

from warsim.statistics import find_cdf_quantile, two_sided_p_value


class BinomialDistribution:
    """Binomial distribution described by its mean and variance."""

    def __init__(self, trials: float, success_rate: float) -> None:
        self.mean = trials * success_rate
        self.variance = self.mean * (1 - success_rate)

    def std(self) -> float:
        """Standard deviation."""
        return math.sqrt(self.variance)

    def confidence_interval(self, p_value: float) -> tuple[float, float]:
        """Symmetric interval; accurate only when the success rate is near one half."""
        val = find_cdf_quantile(two_sided_p_value(p_value), 0.01)
        spread = val * self.std()
        return self.mean - spread, self.mean + spread

    def confidence_interval_width(self, p_value: float) -> float:
        """Width of the confidence interval."""
        low, high = self.confidence_interval(p_value)
        return high - low