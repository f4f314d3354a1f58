"""
Inversion entry points
======================

Numeric inverse CDF and inverse survival function of any
:class:`~pysatl_quantile.distributions.distribution.ContinuousDistribution`.

Both directions are bracketed and solved independently so that
probabilities close to ``0`` or ``1`` keep their precision in the tail
they describe.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from pysatl_quantile.inversion.bracketing import ChebyshevBracketing
from pysatl_quantile.inversion.config import DEFAULT_INVERSION_CONFIG, InversionConfig
from pysatl_quantile.inversion.problem import InversionProblem
from pysatl_quantile.inversion.solver import BisectionSolver
from pysatl_quantile.validation import check_probability

if TYPE_CHECKING:
    from pysatl_quantile.distributions.distribution import ContinuousDistribution


def solve(problem: InversionProblem, config: InversionConfig | None = None) -> float:
    """Bracket and solve ``problem``."""
    config = config or DEFAULT_INVERSION_CONFIG
    bracket = ChebyshevBracketing(config).bracket(problem)
    return BisectionSolver(config).solve(problem, bracket)


def inverse_cumulative_probability(
    distribution: ContinuousDistribution,
    p: float,
    config: InversionConfig | None = None,
) -> float:
    """
    Compute the smallest ``x`` with ``cdf(x) >= p``.

    Parameters
    ----------
    distribution : ContinuousDistribution
        Distribution to invert.
    p : float
        Probability in ``[0, 1]``.
    config : InversionConfig, optional
        Engine settings.

    Returns
    -------
    float
        The quantile; the support lower bound for ``p == 0`` and the support
        upper bound for ``p == 1`` (possibly infinite).

    Raises
    ------
    DistributionError
        If ``p`` is not a probability.
    InvalidStateError
        If the CDF returns ``NaN`` during the search.
    """
    p = check_probability(p)
    return solve(InversionProblem.for_cumulative(distribution, p), config)


def inverse_survival_probability(
    distribution: ContinuousDistribution,
    p: float,
    config: InversionConfig | None = None,
) -> float:
    """
    Compute the smallest ``x`` with ``sf(x) <= p``.

    The survival function is inverted directly; the result is not derived
    from :func:`inverse_cumulative_probability` at ``1 - p``.

    Parameters
    ----------
    distribution : ContinuousDistribution
        Distribution to invert.
    p : float
        Probability in ``[0, 1]``.
    config : InversionConfig, optional
        Engine settings.

    Returns
    -------
    float
        The quantile; the support upper bound for ``p == 0`` and the support
        lower bound for ``p == 1`` (possibly infinite).

    Raises
    ------
    DistributionError
        If ``p`` is not a probability.
    InvalidStateError
        If the survival function returns ``NaN`` during the search.
    """
    p = check_probability(p)
    return solve(InversionProblem.for_survival(distribution, p), config)


__all__ = [
    "solve",
    "inverse_cumulative_probability",
    "inverse_survival_probability",
]
