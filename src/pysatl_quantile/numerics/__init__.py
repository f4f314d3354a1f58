"""
Numerics subpackage

Floating-point building blocks used by the distribution models and the
inversion engine:

- IEEE-754 bit helpers (:mod:`.doubles`);
- error-free transformations and compensated elementary functions
  (:mod:`.extended_precision`);
- composable equality tolerances (:mod:`.tolerance`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .doubles import bit_midpoint, from_ordered, to_ordered, ulp_distance
from .extended_precision import (
    SQRT2PI,
    DoubleDouble,
    expmhxx,
    fast_two_sum,
    sqrt2xx,
    sum_compensated,
    two_product,
    two_sum,
    xsqrt2pi,
)
from .tolerance import DoubleTolerance, absolute, exact, relative, ulps

__all__ = [
    # doubles
    "bit_midpoint",
    "from_ordered",
    "to_ordered",
    "ulp_distance",
    # extended precision
    "SQRT2PI",
    "DoubleDouble",
    "expmhxx",
    "fast_two_sum",
    "sqrt2xx",
    "sum_compensated",
    "two_product",
    "two_sum",
    "xsqrt2pi",
    # tolerance
    "DoubleTolerance",
    "absolute",
    "exact",
    "relative",
    "ulps",
]
