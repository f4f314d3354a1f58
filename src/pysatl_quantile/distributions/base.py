"""
Abstract Distributions
======================

Base classes supplying the generic parts of a distribution model on top of
its forward formulas:

- :class:`AbstractContinuousDistribution` – numeric inverse CDF and inverse
  survival function, interval probabilities, median and sampling.
- :class:`AbstractDiscreteDistribution` – the integer-valued counterpart.

Subclasses only provide the density (or mass) function, the CDF, the
moments and the support. Closed-form inverses, survival functions and log
densities may be overridden for accuracy.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from abc import ABC, abstractmethod
from functools import cached_property
from typing import TYPE_CHECKING, ClassVar

import numpy as np

from pysatl_quantile.distributions.sampling import InverseTransformSampler
from pysatl_quantile.inversion import discrete
from pysatl_quantile.inversion.config import DEFAULT_INVERSION_CONFIG, InversionConfig
from pysatl_quantile.inversion.engine import (
    inverse_cumulative_probability,
    inverse_survival_probability,
)
from pysatl_quantile.types import Kind
from pysatl_quantile.validation import check_range

if TYPE_CHECKING:
    from pysatl_quantile.distributions.sampling import ArraySample


class AbstractContinuousDistribution(ABC):
    """
    Base class for univariate continuous distributions.

    Attributes
    ----------
    kind : Kind
        Always :attr:`Kind.CONTINUOUS`.
    inversion_config : InversionConfig
        Engine settings used by the numeric inverses of this class.
    """

    kind: ClassVar[Kind] = Kind.CONTINUOUS
    inversion_config: ClassVar[InversionConfig] = DEFAULT_INVERSION_CONFIG

    @abstractmethod
    def density(self, x: float) -> float:
        """Probability density at ``x``."""

    @abstractmethod
    def cumulative_probability(self, x: float) -> float:
        """``P(X <= x)``."""

    @property
    @abstractmethod
    def mean(self) -> float:
        """Mean; ``NaN`` if undefined."""

    @property
    @abstractmethod
    def variance(self) -> float:
        """Variance; ``NaN`` if undefined, ``inf`` if infinite."""

    @property
    @abstractmethod
    def support_lower_bound(self) -> float: ...

    @property
    @abstractmethod
    def support_upper_bound(self) -> float: ...

    @property
    def is_support_connected(self) -> bool:
        return True

    def survival_probability(self, x: float) -> float:
        """``P(X > x)``; subclasses should compute it without cancellation."""
        return 1.0 - self.cumulative_probability(x)

    def log_density(self, x: float) -> float:
        """Natural logarithm of the density; ``-inf`` outside the support."""
        d = self.density(x)
        return math.log(d) if d > 0 else -math.inf

    def probability(self, x0: float, x1: float) -> float:
        """
        Compute ``P(x0 < X <= x1)``.

        The difference of survival probabilities is used above the median
        so that upper-tail intervals do not lose precision.

        Raises
        ------
        DistributionError
            If ``x0 > x1``.
        """
        check_range(x0, x1)
        if x0 >= self.median:
            return self.survival_probability(x0) - self.survival_probability(x1)
        return self.cumulative_probability(x1) - self.cumulative_probability(x0)

    def inverse_cumulative_probability(self, p: float) -> float:
        """
        Compute the smallest ``x`` with ``cdf(x) >= p``.

        Raises
        ------
        DistributionError
            If ``p`` is not in ``[0, 1]``.
        """
        return inverse_cumulative_probability(self, p, self.inversion_config)

    def inverse_survival_probability(self, p: float) -> float:
        """
        Compute the smallest ``x`` with ``sf(x) <= p``.

        Raises
        ------
        DistributionError
            If ``p`` is not in ``[0, 1]``.
        """
        return inverse_survival_probability(self, p, self.inversion_config)

    @cached_property
    def median(self) -> float:
        """Median, ``inverse_cumulative_probability(0.5)``."""
        return self.inverse_cumulative_probability(0.5)

    def create_sampler(self, rng: np.random.Generator | None = None) -> InverseTransformSampler:
        """Inverse transform sampler of this distribution."""
        return InverseTransformSampler(self.inverse_cumulative_probability, rng)

    def sample(self, n: int, rng: np.random.Generator | None = None) -> ArraySample:
        """Draw ``n`` values as an ``(n, 1)`` sample."""
        return self.create_sampler(rng).sample(n)


class AbstractDiscreteDistribution(ABC):
    """
    Base class for univariate integer-valued distributions.

    Attributes
    ----------
    kind : Kind
        Always :attr:`Kind.DISCRETE`.
    """

    kind: ClassVar[Kind] = Kind.DISCRETE

    @abstractmethod
    def probability(self, x: int) -> float:
        """``P(X = x)``."""

    @abstractmethod
    def cumulative_probability(self, x: int) -> float:
        """``P(X <= x)``."""

    @property
    @abstractmethod
    def mean(self) -> float: ...

    @property
    @abstractmethod
    def variance(self) -> float: ...

    @property
    @abstractmethod
    def support_lower_bound(self) -> int: ...

    @property
    @abstractmethod
    def support_upper_bound(self) -> int: ...

    def survival_probability(self, x: int) -> float:
        """``P(X > x)``."""
        return 1.0 - self.cumulative_probability(x)

    def log_probability(self, x: int) -> float:
        """Natural logarithm of the mass function."""
        pm = self.probability(x)
        return math.log(pm) if pm > 0 else -math.inf

    def probability_between(self, x0: int, x1: int) -> float:
        """
        Compute ``P(x0 < X <= x1)``.

        Raises
        ------
        DistributionError
            If ``x0 > x1``.
        """
        check_range(x0, x1)
        if x0 + 1 >= x1:
            return 0.0 if x0 == x1 else self.probability(x1)
        if x0 >= self.median:
            return self.survival_probability(x0) - self.survival_probability(x1)
        return self.cumulative_probability(x1) - self.cumulative_probability(x0)

    def inverse_cumulative_probability(self, p: float) -> int:
        """Smallest ``k`` with ``cdf(k) >= p``."""
        return discrete.inverse_cumulative_probability(self, p)

    def inverse_survival_probability(self, p: float) -> int:
        """Smallest ``k`` with ``sf(k) <= p``."""
        return discrete.inverse_survival_probability(self, p)

    @cached_property
    def median(self) -> int:
        return self.inverse_cumulative_probability(0.5)

    def create_sampler(self, rng: np.random.Generator | None = None) -> InverseTransformSampler:
        return InverseTransformSampler(self.inverse_cumulative_probability, rng, dtype=np.int64)

    def sample(self, n: int, rng: np.random.Generator | None = None) -> ArraySample:
        """Draw ``n`` values as an ``(n, 1)`` integer sample."""
        return self.create_sampler(rng).sample(n)


__all__ = [
    "AbstractContinuousDistribution",
    "AbstractDiscreteDistribution",
]
