"""
Bracketing
==========

Construction of a finite interval containing the solution of an
:class:`~pysatl_quantile.inversion.problem.InversionProblem`.

Infinite support bounds are replaced using the one-sided Chebyshev
(Cantelli) inequality when the distribution reports a finite mean and a
finite positive variance. Every candidate is verified by evaluating the
forward function; candidates that fail, and bounds for which no candidate
exists, are found by geometric expansion from a finite anchor. The
reported moments are therefore used as a hint only and never trusted.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_quantile.inversion.config import DEFAULT_INVERSION_CONFIG, InversionConfig
from pysatl_quantile.types import MAX_VALUE

if TYPE_CHECKING:
    from pysatl_quantile.inversion.problem import InversionProblem

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Bracket:
    """
    Ordered interval ``[lower, upper]``.

    A degenerate bracket (``lower == upper``) carries a resolved answer,
    possibly infinite, and is returned by the solver without evaluation.
    """

    lower: float
    upper: float

    def __post_init__(self) -> None:
        if not self.lower <= self.upper:
            raise ValueError(f"Invalid bracket [{self.lower}, {self.upper}]")

    @property
    def is_degenerate(self) -> bool:
        return self.lower == self.upper


def _clamp(x: float, lower: float, upper: float) -> float:
    return min(max(x, lower), upper)


class ChebyshevBracketing:
    """
    Bracketing strategy seeded by the one-sided Chebyshev inequality.

    Parameters
    ----------
    config : InversionConfig, optional
        Expansion settings; :data:`DEFAULT_INVERSION_CONFIG` by default.

    Notes
    -----
    For a distribution with mean ``mu`` and standard deviation ``sigma``
    the Cantelli inequality gives

    - ``cdf(mu - sigma * sqrt(q / p)) <= p``
    - ``cdf(mu + sigma * sqrt(p / q)) >= p``

    which are the lower and upper candidates for unbounded sides.
    """

    def __init__(self, config: InversionConfig | None = None) -> None:
        self.config = config or DEFAULT_INVERSION_CONFIG

    def bracket(self, problem: InversionProblem) -> Bracket:
        """
        Build a bracket for ``problem``.

        Parameters
        ----------
        problem : InversionProblem
            Problem to bracket.

        Returns
        -------
        Bracket
            Either a degenerate bracket with the final answer (the support
            bound for ``p == 0`` or ``q == 0``, or an infinite bound when the
            solution lies beyond the finite doubles), or a finite interval
            whose lower end is outside the target set when the upper end is
            inside it. An exhausted expansion yields the best interval found.

        Raises
        ------
        InvalidStateError
            If the forward function returns ``NaN``.
        """
        distribution = problem.distribution
        support_lower = float(distribution.support_lower_bound)
        support_upper = float(distribution.support_upper_bound)
        p = problem.p
        q = problem.q

        if p == 0:
            return Bracket(support_lower, support_lower)
        if q == 0:
            return Bracket(support_upper, support_upper)

        lower = support_lower
        upper = support_upper
        if math.isfinite(lower) and math.isfinite(upper):
            return Bracket(lower, upper)

        mu = float(distribution.mean)
        var = float(distribution.variance)
        sigma = math.sqrt(var) if var >= 0 else math.nan
        chebyshev = math.isfinite(mu) and 0 < sigma < math.inf
        finite_lower = max(lower, -MAX_VALUE)
        finite_upper = min(upper, MAX_VALUE)

        if lower == -math.inf:
            lower = math.nan
            if chebyshev:
                candidate = _clamp(mu - sigma * math.sqrt(q / p), -MAX_VALUE, finite_upper)
                if not problem.reached(problem.evaluate(candidate)):
                    lower = candidate
            if math.isnan(lower):
                anchor = self._anchor(mu, finite_lower, finite_upper)
                logger.debug(
                    "Manual bracketing of the lower bound from %r (mean=%r, variance=%r)",
                    anchor,
                    mu,
                    var,
                )
                lower = self._expand_down(problem, anchor)
            if lower == -MAX_VALUE and problem.exceeds(problem.evaluate(lower)):
                logger.debug("Solution is below -MAX_VALUE, returning %r", support_lower)
                return Bracket(support_lower, support_lower)

        if upper == math.inf:
            upper = math.nan
            if chebyshev:
                candidate = _clamp(mu + sigma * math.sqrt(p / q), finite_lower, MAX_VALUE)
                if problem.reached(problem.evaluate(candidate)):
                    upper = candidate
            if math.isnan(upper):
                anchor = self._anchor(mu, max(lower, finite_lower), finite_upper)
                logger.debug(
                    "Manual bracketing of the upper bound from %r (mean=%r, variance=%r)",
                    anchor,
                    mu,
                    var,
                )
                upper = self._expand_up(problem, anchor)
            if upper == MAX_VALUE and not problem.reached(problem.evaluate(upper)):
                logger.debug("Solution is above MAX_VALUE, returning %r", support_upper)
                return Bracket(support_upper, support_upper)

        return Bracket(lower, upper)

    @staticmethod
    def _anchor(mu: float, lower: float, upper: float) -> float:
        anchor = mu if math.isfinite(mu) else 0.0
        return _clamp(anchor, lower, upper)

    def _step(self, anchor: float) -> float:
        return self.config.initial_step * max(1.0, abs(anchor))

    def _expand_down(self, problem: InversionProblem, anchor: float) -> float:
        """Search downwards for a point outside the target set."""
        if not problem.reached(problem.evaluate(anchor)):
            return anchor
        step = self._step(anchor)
        x = anchor
        for _ in range(self.config.max_expansions):
            x = max(anchor - step, -MAX_VALUE)
            if not problem.reached(problem.evaluate(x)) or x == -MAX_VALUE:
                return x
            step *= self.config.expansion_factor
        logger.debug("Lower bracket expansion exhausted at %r", x)
        return x

    def _expand_up(self, problem: InversionProblem, anchor: float) -> float:
        """Search upwards for a point inside the target set."""
        if problem.reached(problem.evaluate(anchor)):
            return anchor
        step = self._step(anchor)
        x = anchor
        for _ in range(self.config.max_expansions):
            x = min(anchor + step, MAX_VALUE)
            if problem.reached(problem.evaluate(x)) or x == MAX_VALUE:
                return x
            step *= self.config.expansion_factor
        logger.debug("Upper bracket expansion exhausted at %r", x)
        return x


__all__ = [
    "Bracket",
    "ChebyshevBracketing",
]
