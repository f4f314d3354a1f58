"""
Folded normal distribution family implementation.

The distribution of ``|X|`` for ``X ~ N(mu, sigma^2)``. The half-normal
case ``mu == 0`` has a closed-form inverse; the general case is inverted
numerically.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from abc import abstractmethod

from scipy.special import erf, erfc, erfcinv, erfinv

from pysatl_quantile.distributions.base import AbstractContinuousDistribution
from pysatl_quantile.families.normal import HALF_LOG_TWO_PI, erf_difference
from pysatl_quantile.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_quantile.numerics.extended_precision import expmhxx, sqrt2xx, xsqrt2pi
from pysatl_quantile.validation import check_probability, check_range

ROOT_TWO_DIV_PI = 0.7978845608028654
"""``sqrt(2 / pi)``."""

_HALF_NORMAL_VARIANCE = 0.363380227632418656924
"""``1 - 2 / pi``."""

LN_2 = 0.6931471805599453094172


@parametrization(name="muSigma")
class FoldedNormalParameters(Parametrization):
    """
    Location and scale of the underlying normal distribution.

    Parameters
    ----------
    mu : float
        Mean of the underlying normal distribution
    sigma : float
        Standard deviation of the underlying normal distribution
    """

    mu: float
    sigma: float

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        return self.sigma > 0


class FoldedNormalDistribution(AbstractContinuousDistribution):
    """
    Folded normal distribution on ``[0, inf)``.

    Use :meth:`of` to create instances.
    """

    def __init__(self, parameters: FoldedNormalParameters) -> None:
        self.parameters = parameters
        sigma = parameters.sigma
        # sqrt(2 * sigma * sigma) and sigma * sqrt(2 pi) without over/underflow
        self._sigma_sqrt2 = sqrt2xx(sigma)
        self._sigma_sqrt2pi = xsqrt2pi(sigma)

    @staticmethod
    def of(mu: float, sigma: float) -> FoldedNormalDistribution:
        """
        Create a folded normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the underlying normal distribution.
        sigma : float
            Standard deviation of the underlying normal distribution.

        Returns
        -------
        FoldedNormalDistribution
            A half-normal distribution when ``mu == 0``.

        Raises
        ------
        DistributionError
            If ``sigma <= 0``.
        """
        parameters = FoldedNormalParameters(mu=float(mu), sigma=float(sigma))
        if parameters.mu == 0:
            return HalfNormalDistribution(parameters)
        return RegularFoldedNormalDistribution(parameters)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mu={self.mu!r}, sigma={self.sigma!r})"

    @property
    def mu(self) -> float:
        return self.parameters.mu

    @property
    def sigma(self) -> float:
        return self.parameters.sigma

    @property
    def support_lower_bound(self) -> float:
        return 0.0

    @property
    def support_upper_bound(self) -> float:
        return math.inf

    @abstractmethod
    def _interval(self, x0: float, x1: float) -> float:
        """``P(x0 < X <= x1)`` for ``0 < x0 <= x1``."""

    def probability(self, x0: float, x1: float) -> float:
        check_range(x0, x1)
        if x0 <= 0:
            return self.cumulative_probability(x1)
        return self._interval(x0, x1)


class RegularFoldedNormalDistribution(FoldedNormalDistribution):
    """Folded normal distribution with ``mu != 0``."""

    def __init__(self, parameters: FoldedNormalParameters) -> None:
        super().__init__(parameters)
        mu = parameters.mu
        sigma = parameters.sigma
        a = mu / self._sigma_sqrt2
        self._mean = sigma * ROOT_TWO_DIV_PI * math.exp(-a * a) + mu * float(erf(a))
        self._variance = mu * mu + sigma * sigma - self._mean * self._mean

    def density(self, x: float) -> float:
        if x < 0:
            return 0.0
        vm = (x - self.mu) / self.sigma
        vp = (x + self.mu) / self.sigma
        return (expmhxx(vm) + expmhxx(vp)) / self._sigma_sqrt2pi

    def cumulative_probability(self, x: float) -> float:
        if x <= 0:
            return 0.0
        return float(
            0.5 * (erf((x - self.mu) / self._sigma_sqrt2) + erf((x + self.mu) / self._sigma_sqrt2))
        )

    def survival_probability(self, x: float) -> float:
        if x <= 0:
            return 1.0
        return float(
            0.5
            * (erfc((x - self.mu) / self._sigma_sqrt2) + erfc((x + self.mu) / self._sigma_sqrt2))
        )

    def _interval(self, x0: float, x1: float) -> float:
        s = self._sigma_sqrt2
        return 0.5 * (
            erf_difference((x0 - self.mu) / s, (x1 - self.mu) / s)
            + erf_difference((x0 + self.mu) / s, (x1 + self.mu) / s)
        )

    @property
    def mean(self) -> float:
        return self._mean

    @property
    def variance(self) -> float:
        return self._variance


class HalfNormalDistribution(FoldedNormalDistribution):
    """Folded normal distribution with ``mu == 0``."""

    def __init__(self, parameters: FoldedNormalParameters) -> None:
        super().__init__(parameters)
        self._log_sigma_plus_half_log_2pi = math.log(parameters.sigma) + HALF_LOG_TWO_PI

    def density(self, x: float) -> float:
        if x < 0:
            return 0.0
        return 2 * expmhxx(x / self.sigma) / self._sigma_sqrt2pi

    def log_density(self, x: float) -> float:
        if x < 0:
            return -math.inf
        z = x / self.sigma
        return LN_2 - 0.5 * z * z - self._log_sigma_plus_half_log_2pi

    def cumulative_probability(self, x: float) -> float:
        if x <= 0:
            return 0.0
        return float(erf(x / self._sigma_sqrt2))

    def survival_probability(self, x: float) -> float:
        if x <= 0:
            return 1.0
        return float(erfc(x / self._sigma_sqrt2))

    def _interval(self, x0: float, x1: float) -> float:
        return erf_difference(x0 / self._sigma_sqrt2, x1 / self._sigma_sqrt2)

    def inverse_cumulative_probability(self, p: float) -> float:
        p = check_probability(p)
        # 0.0 + maps -0.0 to 0.0
        return 0.0 + self._sigma_sqrt2 * float(erfinv(p))

    def inverse_survival_probability(self, p: float) -> float:
        p = check_probability(p)
        return self._sigma_sqrt2 * float(erfcinv(p))

    @property
    def mean(self) -> float:
        return self.sigma * ROOT_TWO_DIV_PI

    @property
    def variance(self) -> float:
        return self.sigma * self.sigma * _HALF_NORMAL_VARIANCE


__all__ = [
    "FoldedNormalDistribution",
    "FoldedNormalParameters",
    "HalfNormalDistribution",
    "RegularFoldedNormalDistribution",
]
