"""
Poisson distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from scipy.special import gammainc, gammaincc, gammaln, xlogy

from pysatl_quantile.distributions.base import AbstractDiscreteDistribution
from pysatl_quantile.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_quantile.types import INT_MAX


@parametrization(name="rate")
class PoissonParameters(Parametrization):
    """
    Rate parametrization of Poisson distribution.

    Parameters
    ----------
    mean : float
        Expected number of events λ
    """

    mean: float

    @constraint(description="mean > 0")
    def check_mean_positive(self) -> bool:
        return self.mean > 0


class PoissonDistribution(AbstractDiscreteDistribution):
    """
    Poisson distribution.

    Probability mass function:
        P(X = k) = λ^k * exp(-λ) / k!

    The support is truncated at :data:`~pysatl_quantile.types.INT_MAX`.
    """

    def __init__(self, mean: float) -> None:
        self.parameters = PoissonParameters(mean=float(mean))

    def __repr__(self) -> str:
        return f"PoissonDistribution(mean={self.parameters.mean!r})"

    def probability(self, x: int) -> float:
        if x < 0 or x >= INT_MAX:
            return 0.0
        return math.exp(self.log_probability(x))

    def log_probability(self, x: int) -> float:
        if x < 0 or x >= INT_MAX:
            return -math.inf
        lam = self.parameters.mean
        return float(xlogy(x, lam)) - lam - float(gammaln(x + 1))

    def cumulative_probability(self, x: int) -> float:
        if x < 0:
            return 0.0
        if x >= INT_MAX:
            return 1.0
        return float(gammaincc(x + 1.0, self.parameters.mean))

    def survival_probability(self, x: int) -> float:
        if x < 0:
            return 1.0
        if x >= INT_MAX:
            return 0.0
        return float(gammainc(x + 1.0, self.parameters.mean))

    @property
    def mean(self) -> float:
        return self.parameters.mean

    @property
    def variance(self) -> float:
        return self.parameters.mean

    @property
    def support_lower_bound(self) -> int:
        return 0

    @property
    def support_upper_bound(self) -> int:
        return INT_MAX


__all__ = [
    "PoissonDistribution",
    "PoissonParameters",
]
