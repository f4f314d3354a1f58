"""
Core Type Definitions
=====================

Fundamental types and aliases shared by the numerics, inversion and
distribution layers.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import sys
from collections.abc import Callable
from enum import StrEnum
from typing import Any

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution.
    CONTINUOUS : str
        Continuous probability distribution.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

ScalarFunc = Callable[[float], float]
"""Scalar real function such as a CDF or a survival function."""

IntScalarFunc = Callable[[int], float]
"""Scalar function of an integer argument such as a discrete CDF."""

MAX_VALUE: float = sys.float_info.max
"""Largest finite double."""

MIN_NORMAL: float = sys.float_info.min
"""Smallest positive normal double."""

MIN_VALUE: float = 5e-324
"""Smallest positive (subnormal) double."""

INT_MIN: int = -(2**31)
"""Lower sentinel for unbounded discrete supports."""

INT_MAX: int = 2**31 - 1
"""Upper sentinel for unbounded discrete supports."""

__all__ = [
    "Kind",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "ScalarFunc",
    "IntScalarFunc",
    "MAX_VALUE",
    "MIN_NORMAL",
    "MIN_VALUE",
    "INT_MIN",
    "INT_MAX",
]
