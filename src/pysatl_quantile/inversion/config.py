"""
Inversion configuration
=======================

Immutable settings of the bracketing search and of the bisection solver.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, field

from pysatl_quantile.numerics.tolerance import DoubleTolerance, exact, ulps


@dataclass(frozen=True, slots=True)
class InversionConfig:
    """
    Settings of the numeric inversion engine.

    Parameters
    ----------
    initial_step : float, default 1.0
        First step of the manual bracket expansion, relative to
        ``max(1, |anchor|)``.
    expansion_factor : float, default 2.0
        Multiplicative growth of the step per expansion.
    max_expansions : int, default 1100
        Maximum number of expansions per bracket side. The default is
        enough to walk from a unit step to ``MAX_VALUE`` by doubling.
    max_iterations : int, default 200
        Guard on the number of bisection steps. Bisection in ordered bit
        space needs at most 65 steps for any finite bracket.
    x_tolerance : DoubleTolerance, default ``ulps(1)``
        Convergence test on the bracket ends.
    function_tolerance : DoubleTolerance, default ``exact()``
        Convergence test on the function values at the bracket ends; only
        applied to distributions with a connected support.

    Raises
    ------
    ValueError
        If a numeric setting is out of range.
    """

    initial_step: float = 1.0
    expansion_factor: float = 2.0
    max_expansions: int = 1100
    max_iterations: int = 200
    x_tolerance: DoubleTolerance = field(default_factory=lambda: ulps(1))
    function_tolerance: DoubleTolerance = field(default_factory=exact)

    def __post_init__(self) -> None:
        if not (math.isfinite(self.initial_step) and self.initial_step > 0):
            raise ValueError(f"initial_step must be finite and positive, got {self.initial_step}")
        if not self.expansion_factor > 1:
            raise ValueError(f"expansion_factor must be > 1, got {self.expansion_factor}")
        if self.max_expansions < 1:
            raise ValueError(f"max_expansions must be >= 1, got {self.max_expansions}")
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {self.max_iterations}")


DEFAULT_INVERSION_CONFIG = InversionConfig()
"""Configuration used when none is supplied."""

__all__ = [
    "InversionConfig",
    "DEFAULT_INVERSION_CONFIG",
]
