"""
Inversion problems
==================

Adapter between a distribution and the bracketing/solving machinery.

An :class:`InversionProblem` fixes the direction of the inversion. For the
inverse CDF the target set is ``{x : cdf(x) >= p}``; for the inverse
survival function it is ``{x : sf(x) <= q}``. In both cases the engine
returns the infimum of the target set, and the survival function is
evaluated directly rather than through ``1 - cdf``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_quantile.errors import InvalidStateError

if TYPE_CHECKING:
    from pysatl_quantile.distributions.distribution import ContinuousDistribution


@dataclass(frozen=True, slots=True)
class InversionProblem:
    """
    Target probability bound to the forward function that reaches it.

    Parameters
    ----------
    distribution : ContinuousDistribution
        Distribution providing the forward functions, support and moments.
    p : float
        Lower-tail target probability.
    q : float
        Upper-tail target probability, ``1 - p``.
    survival : bool
        If ``True`` the survival function is inverted for ``q``; otherwise
        the CDF is inverted for ``p``.
    """

    distribution: ContinuousDistribution
    p: float
    q: float
    survival: bool = False

    @classmethod
    def for_cumulative(cls, distribution: ContinuousDistribution, p: float) -> InversionProblem:
        """Problem ``cdf(x) >= p``."""
        return cls(distribution, p, 1 - p, survival=False)

    @classmethod
    def for_survival(cls, distribution: ContinuousDistribution, q: float) -> InversionProblem:
        """Problem ``sf(x) <= q``."""
        return cls(distribution, 1 - q, q, survival=True)

    @property
    def target(self) -> float:
        """Probability compared against the forward function."""
        return self.q if self.survival else self.p

    def evaluate(self, x: float) -> float:
        """
        Evaluate the forward function at ``x``.

        Raises
        ------
        InvalidStateError
            If the forward function returns ``NaN``.
        """
        if self.survival:
            value = float(self.distribution.survival_probability(x))
        else:
            value = float(self.distribution.cumulative_probability(x))
        if math.isnan(value):
            name = "survival_probability" if self.survival else "cumulative_probability"
            raise InvalidStateError(f"{name}({x!r}) returned NaN")
        return value

    def reached(self, value: float) -> bool:
        """``True`` if a forward value lies in the target set."""
        return value <= self.q if self.survival else value >= self.p

    def exceeds(self, value: float) -> bool:
        """``True`` if a forward value lies strictly beyond the target."""
        return value < self.q if self.survival else value > self.p


__all__ = [
    "InversionProblem",
]
