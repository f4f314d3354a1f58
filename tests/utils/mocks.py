from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from pysatl_quantile.distributions import AbstractContinuousDistribution


class PlateauDistribution(AbstractContinuousDistribution):
    """
    Piecewise linear CDF on ``[0, 3]`` with a plateau at 0.5 on ``[1, 2]``.

    Evaluation outside the support raises so that tests detect a solver
    straying outside the declared bounds.
    """

    def __init__(self, connected: bool = True) -> None:
        self.connected = connected
        self.calls: list[float] = []

    def _check(self, x: float) -> None:
        self.calls.append(x)
        if not 0.0 <= x <= 3.0:
            raise AssertionError(f"evaluated outside the support: {x!r}")

    def density(self, x: float) -> float:
        raise AssertionError("density is not used by the inversion")

    def cumulative_probability(self, x: float) -> float:
        self._check(x)
        if x <= 1:
            return 0.5 * x
        if x <= 2:
            return 0.5
        return 0.5 + 0.5 * (x - 2)

    def survival_probability(self, x: float) -> float:
        self._check(x)
        if x <= 1:
            return 1 - 0.5 * x
        if x <= 2:
            return 0.5
        return 0.5 - 0.5 * (x - 2)

    @property
    def mean(self) -> float:
        return 1.5

    @property
    def variance(self) -> float:
        return 0.75

    @property
    def support_lower_bound(self) -> float:
        return 0.0

    @property
    def support_upper_bound(self) -> float:
        return 3.0

    @property
    def is_support_connected(self) -> bool:
        return self.connected


class StepDistribution(AbstractContinuousDistribution):
    """CDF jumping from 0 to 0.3 at ``x = 1`` and from 0.3 to 1 at ``x = 2``."""

    def density(self, x: float) -> float:
        raise AssertionError

    def cumulative_probability(self, x: float) -> float:
        if x < 1:
            return 0.0
        if x < 2:
            return 0.3
        return 1.0

    @property
    def mean(self) -> float:
        return 1.7

    @property
    def variance(self) -> float:
        return 0.21

    @property
    def support_lower_bound(self) -> float:
        return 0.0

    @property
    def support_upper_bound(self) -> float:
        return 3.0

    @property
    def is_support_connected(self) -> bool:
        return False


class DiracDistribution(AbstractContinuousDistribution):
    """
    Mass just above ``x0`` reported with zero variance and an infinite
    upper bound, which invalidates the Chebyshev bracket.
    """

    def __init__(self, x0: float = 10.0) -> None:
        self.x0 = x0

    def density(self, x: float) -> float:
        raise AssertionError

    def cumulative_probability(self, x: float) -> float:
        return 0.0 if x <= self.x0 else 1.0

    @property
    def mean(self) -> float:
        return self.x0

    @property
    def variance(self) -> float:
        return 0.0

    @property
    def support_lower_bound(self) -> float:
        return self.x0

    @property
    def support_upper_bound(self) -> float:
        return math.inf


class TriangleDistribution(AbstractContinuousDistribution):
    """
    Symmetric triangle on ``[-10, 10]`` reported with infinite variance and
    an unbounded support.
    """

    def density(self, x: float) -> float:
        raise AssertionError

    def cumulative_probability(self, x: float) -> float:
        if x > 0:
            return 1 - self.cumulative_probability(-x)
        if x < -10:
            return 0.0
        return (x + 10) ** 2 / 200

    @property
    def mean(self) -> float:
        return 0.0

    @property
    def variance(self) -> float:
        return math.inf

    @property
    def support_lower_bound(self) -> float:
        return -math.inf

    @property
    def support_upper_bound(self) -> float:
        return math.inf


class CentredUniformDistribution(AbstractContinuousDistribution):
    """Uniform distribution described by its centre and width."""

    def __init__(self, centre: float, width: float) -> None:
        self.centre = centre
        self.width = width
        self.height = 1 / width
        self.lo = centre - width / 2
        self.hi = centre + width / 2

    def density(self, x: float) -> float:
        return self.height

    def cumulative_probability(self, x: float) -> float:
        if x <= self.lo:
            return 0.0
        if x >= self.hi:
            return 1.0
        return 0.5 + self.height * (x - self.centre)

    @property
    def mean(self) -> float:
        return self.centre

    @property
    def variance(self) -> float:
        return self.width * self.width / 12

    @property
    def support_lower_bound(self) -> float:
        return self.lo

    @property
    def support_upper_bound(self) -> float:
        return self.hi


class NaNDistribution(AbstractContinuousDistribution):
    """Unit uniform whose CDF returns NaN above ``threshold``."""

    def __init__(self, threshold: float = 0.5) -> None:
        self.threshold = threshold

    def density(self, x: float) -> float:
        return 1.0

    def cumulative_probability(self, x: float) -> float:
        if x > self.threshold:
            return math.nan
        return min(max(x, 0.0), 1.0)

    @property
    def mean(self) -> float:
        return 0.5

    @property
    def variance(self) -> float:
        return 1 / 12

    @property
    def support_lower_bound(self) -> float:
        return 0.0

    @property
    def support_upper_bound(self) -> float:
        return 1.0
