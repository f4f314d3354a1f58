"""
Bisection solver
================

Bisection of a :class:`~pysatl_quantile.inversion.bracketing.Bracket` in
ordered bit space.

The solver keeps the lower end outside the target set and the upper end
inside it, narrowing the upper side whenever the midpoint reaches the
target. It therefore converges to the infimum of the target set: the left
end of a plateau at the target probability, or the point just after a
jump over it. Bisecting the integer representation of the doubles halves
the number of candidate values per step, so any finite bracket converges
in at most 65 evaluations.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import TYPE_CHECKING

from pysatl_quantile.inversion.config import DEFAULT_INVERSION_CONFIG, InversionConfig
from pysatl_quantile.numerics.doubles import bit_midpoint, ulp_distance

if TYPE_CHECKING:
    from pysatl_quantile.inversion.bracketing import Bracket
    from pysatl_quantile.inversion.problem import InversionProblem

logger = logging.getLogger(__name__)


class SolverStatus(StrEnum):
    """Lifecycle of a bisection."""

    SEARCHING = "searching"
    CONVERGED = "converged"


@dataclass(frozen=True, slots=True)
class SolverState:
    """
    Snapshot of a bisection.

    Parameters
    ----------
    lower, upper : float
        Bracket ends; ``lower`` is outside the target set, ``upper`` inside.
    f_lower, f_upper : float
        Forward function values at the ends.
    iterations : int
        Number of midpoint evaluations so far.
    status : SolverStatus
        Current status.
    """

    lower: float
    upper: float
    f_lower: float
    f_upper: float
    iterations: int = 0
    status: SolverStatus = SolverStatus.SEARCHING

    def narrowed(self, mid: float, f_mid: float, reached: bool) -> SolverState:
        """State after evaluating the midpoint."""
        if reached:
            return replace(self, upper=mid, f_upper=f_mid, iterations=self.iterations + 1)
        return replace(self, lower=mid, f_lower=f_mid, iterations=self.iterations + 1)


class BisectionSolver:
    """
    Robust bisection for monotone forward functions.

    Parameters
    ----------
    config : InversionConfig, optional
        Convergence settings; :data:`DEFAULT_INVERSION_CONFIG` by default.
    """

    def __init__(self, config: InversionConfig | None = None) -> None:
        self.config = config or DEFAULT_INVERSION_CONFIG

    def solve(self, problem: InversionProblem, bracket: Bracket) -> float:
        """
        Find the infimum of the target set of ``problem`` inside ``bracket``.

        Parameters
        ----------
        problem : InversionProblem
            Problem to solve.
        bracket : Bracket
            Interval from the bracketing strategy.

        Returns
        -------
        float
            The solution. A degenerate bracket returns its value; a lower
            end already inside the target set returns the lower end; an
            upper end outside the target set returns the upper end.

        Raises
        ------
        InvalidStateError
            If the forward function returns ``NaN``.
        """
        if bracket.is_degenerate:
            return bracket.upper

        f_lower = problem.evaluate(bracket.lower)
        if problem.reached(f_lower):
            return bracket.lower
        f_upper = problem.evaluate(bracket.upper)
        if not problem.reached(f_upper):
            return bracket.upper

        connected = bool(problem.distribution.is_support_connected)
        state = SolverState(bracket.lower, bracket.upper, f_lower, f_upper)
        while True:
            state = self._check(state, connected)
            if state.status is SolverStatus.CONVERGED:
                break
            if state.iterations >= self.config.max_iterations:
                logger.debug(
                    "Bisection stopped after %d iterations at [%r, %r]",
                    state.iterations,
                    state.lower,
                    state.upper,
                )
                break
            mid = bit_midpoint(state.lower, state.upper)
            f_mid = problem.evaluate(mid)
            state = state.narrowed(mid, f_mid, problem.reached(f_mid))
        return state.upper

    def _check(self, state: SolverState, connected: bool) -> SolverState:
        if (
            ulp_distance(state.lower, state.upper) <= 1
            or self.config.x_tolerance.test(state.lower, state.upper)
            or (connected and self.config.function_tolerance.test(state.f_lower, state.f_upper))
        ):
            return replace(state, status=SolverStatus.CONVERGED)
        return state


__all__ = [
    "BisectionSolver",
    "SolverState",
    "SolverStatus",
]
