"""
Inversion subpackage

Generic numeric inversion of forward distribution functions:

- engine configuration (:mod:`.config`);
- inversion problems binding a target probability to a CDF or survival
  function (:mod:`.problem`);
- Chebyshev bracketing with manual expansion fallback (:mod:`.bracketing`);
- bisection in ordered bit space (:mod:`.solver`);
- continuous entry points (:mod:`.engine`) and integer inversion for
  discrete distributions (:mod:`.discrete`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .bracketing import Bracket, ChebyshevBracketing
from .config import DEFAULT_INVERSION_CONFIG, InversionConfig
from .engine import inverse_cumulative_probability, inverse_survival_probability
from .problem import InversionProblem
from .solver import BisectionSolver, SolverState, SolverStatus

__all__ = [
    "Bracket",
    "ChebyshevBracketing",
    "DEFAULT_INVERSION_CONFIG",
    "InversionConfig",
    "inverse_cumulative_probability",
    "inverse_survival_probability",
    "InversionProblem",
    "BisectionSolver",
    "SolverState",
    "SolverStatus",
]
