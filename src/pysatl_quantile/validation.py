"""
Argument checks used at the public entry points.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from pysatl_quantile.errors import DistributionError


def check_probability(p: float) -> float:
    """
    Check that ``p`` is a probability.

    Parameters
    ----------
    p : float
        Candidate probability.

    Returns
    -------
    float
        ``p`` converted to ``float``.

    Raises
    ------
    DistributionError
        If ``p`` is not in ``[0, 1]`` (``NaN`` included).
    """
    p = float(p)
    if not 0.0 <= p <= 1.0:
        raise DistributionError(DistributionError.INVALID_PROBABILITY, p)
    return p


def check_range(x0: float, x1: float) -> None:
    """Raise if the lower end of a range exceeds the upper end."""
    if x0 > x1:
        raise DistributionError(DistributionError.INVALID_RANGE_LOW_GT_HIGH, x0, x1)


def is_finite_strictly_positive(x: float) -> bool:
    """Return ``True`` for finite values strictly above zero."""
    return math.isfinite(x) and x > 0.0


def check_finite_non_negative(x: float) -> float:
    """Return ``x`` if finite and ``>= 0``, otherwise raise."""
    x = float(x)
    if not (math.isfinite(x) and x >= 0.0):
        raise DistributionError(DistributionError.NOT_FINITE_NON_NEGATIVE, x)
    return x


__all__ = [
    "check_probability",
    "check_range",
    "check_finite_non_negative",
    "is_finite_strictly_positive",
]
