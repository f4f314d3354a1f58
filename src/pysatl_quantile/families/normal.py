"""
Normal distribution family implementation.

Forward functions are computed with the extended precision primitives so
that the density keeps full accuracy far into the tails.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from scipy.special import erf, erfc, ndtri

from pysatl_quantile.distributions.base import AbstractContinuousDistribution
from pysatl_quantile.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_quantile.numerics.extended_precision import expmhxx, sqrt2xx, xsqrt2pi
from pysatl_quantile.validation import check_probability, check_range

HALF_LOG_TWO_PI = 0.9189385332046727417803297
"""``0.5 * log(2 * pi)``."""

# Beyond this many standard deviations the CDF is 0 or 1 in double precision
_CDF_TAIL_SD = 40


def erf_difference(x0: float, x1: float) -> float:
    """
    Compute ``erf(x1) - erf(x0)`` avoiding cancellation in the tails.

    Parameters
    ----------
    x0, x1 : float
        Arguments.

    Returns
    -------
    float
        The difference, computed from ``erfc`` when both arguments lie on
        the same side of zero.
    """
    if x0 > 0 and x1 > 0:
        return float(erfc(x0) - erfc(x1))
    if x0 < 0 and x1 < 0:
        return float(erfc(-x1) - erfc(-x0))
    return float(erf(x1) - erf(x0))


@parametrization(name="meanStd")
class NormalParameters(Parametrization):
    """
    Standard parametrization of normal distribution.

    Parameters
    ----------
    mu : float
        Mean of the distribution
    sigma : float
        Standard deviation of the distribution
    """

    mu: float
    sigma: float

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        """Check that standard deviation is positive."""
        return self.sigma > 0


class NormalDistribution(AbstractContinuousDistribution):
    """
    Normal (Gaussian) distribution.

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

    Parameters
    ----------
    mu : float, default 0.0
        Mean.
    sigma : float, default 1.0
        Standard deviation.

    Raises
    ------
    DistributionError
        If ``sigma <= 0``.
    """

    def __init__(self, mu: float = 0.0, sigma: float = 1.0) -> None:
        self.parameters = NormalParameters(mu=float(mu), sigma=float(sigma))
        # sigma * sqrt(2) and sigma * sqrt(2 pi) rounded once
        self._sigma_sqrt2 = sqrt2xx(self.parameters.sigma)
        self._sigma_sqrt2pi = xsqrt2pi(self.parameters.sigma)
        self._log_sigma_plus_half_log_2pi = math.log(self.parameters.sigma) + HALF_LOG_TWO_PI

    def __repr__(self) -> str:
        return f"NormalDistribution(mu={self.parameters.mu!r}, sigma={self.parameters.sigma!r})"

    @property
    def sigma(self) -> float:
        return self.parameters.sigma

    def density(self, x: float) -> float:
        z = (x - self.parameters.mu) / self.parameters.sigma
        return expmhxx(z) / self._sigma_sqrt2pi

    def log_density(self, x: float) -> float:
        z = (x - self.parameters.mu) / self.parameters.sigma
        return -0.5 * z * z - self._log_sigma_plus_half_log_2pi

    def cumulative_probability(self, x: float) -> float:
        dev = x - self.parameters.mu
        if abs(dev) > _CDF_TAIL_SD * self.parameters.sigma:
            return 0.0 if dev < 0 else 1.0
        return float(0.5 * erfc(-dev / self._sigma_sqrt2))

    def survival_probability(self, x: float) -> float:
        dev = x - self.parameters.mu
        if abs(dev) > _CDF_TAIL_SD * self.parameters.sigma:
            return 0.0 if dev > 0 else 1.0
        return float(0.5 * erfc(dev / self._sigma_sqrt2))

    def probability(self, x0: float, x1: float) -> float:
        check_range(x0, x1)
        v0 = (x0 - self.parameters.mu) / self._sigma_sqrt2
        v1 = (x1 - self.parameters.mu) / self._sigma_sqrt2
        return 0.5 * erf_difference(v0, v1)

    def inverse_cumulative_probability(self, p: float) -> float:
        p = check_probability(p)
        return self.parameters.mu + self.parameters.sigma * float(ndtri(p))

    def inverse_survival_probability(self, p: float) -> float:
        p = check_probability(p)
        return self.parameters.mu - self.parameters.sigma * float(ndtri(p))

    @property
    def mean(self) -> float:
        return self.parameters.mu

    @property
    def variance(self) -> float:
        return self.parameters.sigma**2

    @property
    def support_lower_bound(self) -> float:
        return -math.inf

    @property
    def support_upper_bound(self) -> float:
        return math.inf


__all__ = [
    "NormalDistribution",
    "NormalParameters",
    "erf_difference",
]
