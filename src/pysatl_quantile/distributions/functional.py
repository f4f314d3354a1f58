"""
Closure bundle distribution
===========================

A continuous distribution assembled from plain callables, for models that
do not warrant a class of their own.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_quantile.inversion.config import DEFAULT_INVERSION_CONFIG, InversionConfig
from pysatl_quantile.inversion.engine import (
    inverse_cumulative_probability,
    inverse_survival_probability,
)

if TYPE_CHECKING:
    from pysatl_quantile.types import ScalarFunc


@dataclass(frozen=True, slots=True)
class FunctionalDistribution:
    """
    Continuous distribution defined by its forward functions.

    Parameters
    ----------
    cdf : Callable[[float], float]
        Non-decreasing cumulative distribution function.
    sf : Callable[[float], float], optional
        Survival function; ``1 - cdf(x)`` when omitted.
    pdf : Callable[[float], float], optional
        Density; :meth:`density` raises ``NotImplementedError`` when omitted.
    support_lower_bound, support_upper_bound : float
        Support bounds, possibly infinite.
    mean, variance : float
        Moments; ``NaN`` when unknown, variance possibly ``inf``.
    is_support_connected : bool, default True
        Whether the support is an interval.
    inversion_config : InversionConfig
        Settings of the numeric inverses.

    Examples
    --------
    >>> uniform = FunctionalDistribution(
    ...     cdf=lambda x: min(max(x, 0.0), 1.0),
    ...     support_lower_bound=0.0,
    ...     support_upper_bound=1.0,
    ...     mean=0.5,
    ...     variance=1 / 12,
    ... )
    >>> uniform.inverse_cumulative_probability(0.25)
    0.25
    """

    cdf: ScalarFunc
    sf: ScalarFunc | None = None
    pdf: ScalarFunc | None = None
    support_lower_bound: float = -math.inf
    support_upper_bound: float = math.inf
    mean: float = math.nan
    variance: float = math.nan
    is_support_connected: bool = True
    inversion_config: InversionConfig = DEFAULT_INVERSION_CONFIG

    def density(self, x: float) -> float:
        if self.pdf is None:
            raise NotImplementedError("Density is not available for this distribution")
        return self.pdf(x)

    def log_density(self, x: float) -> float:
        d = self.density(x)
        return math.log(d) if d > 0 else -math.inf

    def cumulative_probability(self, x: float) -> float:
        return self.cdf(x)

    def survival_probability(self, x: float) -> float:
        if self.sf is None:
            return 1.0 - self.cdf(x)
        return self.sf(x)

    def inverse_cumulative_probability(self, p: float) -> float:
        return inverse_cumulative_probability(self, p, self.inversion_config)

    def inverse_survival_probability(self, p: float) -> float:
        return inverse_survival_probability(self, p, self.inversion_config)


__all__ = [
    "FunctionalDistribution",
]
