"""
Discrete inversion
==================

Inverse CDF and inverse survival function of integer-valued
distributions by bisection over the integers.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from pysatl_quantile.errors import InvalidStateError
from pysatl_quantile.types import INT_MIN
from pysatl_quantile.validation import check_probability, is_finite_strictly_positive

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_quantile.distributions.distribution import DiscreteDistribution


def _checked(value: float, name: str, x: int) -> float:
    value = float(value)
    if math.isnan(value):
        raise InvalidStateError(f"{name}({x!r}) returned NaN")
    return value


def _inverse_probability(
    distribution: DiscreteDistribution, p: float, q: float, survival: bool
) -> int:
    lower = int(distribution.support_lower_bound)
    if p == 0:
        return lower
    upper = int(distribution.support_upper_bound)
    if q == 0:
        return upper

    reached: Callable[[int], bool]
    if survival:

        def reached(x: int) -> bool:
            return _checked(distribution.survival_probability(x), "survival_probability", x) <= q

    else:

        def reached(x: int) -> bool:
            return (
                _checked(distribution.cumulative_probability(x), "cumulative_probability", x) >= p
            )

    if lower <= INT_MIN:
        if reached(lower):
            return lower
    else:
        # cdf(lower - 1) == 0 < p
        lower -= 1

    mu = float(distribution.mean)
    var = float(distribution.variance)
    sigma = math.sqrt(var) if var >= 0 else math.nan
    if math.isfinite(mu) and is_finite_strictly_positive(sigma):
        # Narrowed ends are verified since the moments may be misreported
        candidate = mu - sigma * math.sqrt(q / p)
        if math.isfinite(candidate) and candidate > lower:
            k = math.ceil(candidate) - 1
            if k < upper and not reached(k):
                lower = k
        candidate = mu + sigma * math.sqrt(p / q)
        if math.isfinite(candidate) and candidate < upper:
            k = math.ceil(candidate) - 1
            if k > lower and reached(k):
                upper = k

    return _bisect(reached, lower, upper)


def _bisect(reached: Callable[[int], bool], lower: int, upper: int) -> int:
    while lower + 1 < upper:
        middle = (lower + upper) // 2
        if reached(middle):
            upper = middle
        else:
            lower = middle
    return upper


def inverse_cumulative_probability(distribution: DiscreteDistribution, p: float) -> int:
    """
    Compute the smallest ``k`` with ``cdf(k) >= p``.

    Parameters
    ----------
    distribution : DiscreteDistribution
        Distribution to invert.
    p : float
        Probability in ``[0, 1]``.

    Returns
    -------
    int
        The quantile; the support bounds for ``p == 0`` and ``p == 1``.

    Raises
    ------
    DistributionError
        If ``p`` is not a probability.
    InvalidStateError
        If the CDF returns ``NaN``.
    """
    p = check_probability(p)
    return _inverse_probability(distribution, p, 1 - p, survival=False)


def inverse_survival_probability(distribution: DiscreteDistribution, p: float) -> int:
    """Compute the smallest ``k`` with ``sf(k) <= p``."""
    p = check_probability(p)
    return _inverse_probability(distribution, 1 - p, p, survival=True)


__all__ = [
    "inverse_cumulative_probability",
    "inverse_survival_probability",
]
