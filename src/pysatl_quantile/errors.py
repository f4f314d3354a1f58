"""
Error taxonomy shared by the distribution models and the inversion engine.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any


class DistributionError(ValueError):
    """
    Invalid argument supplied to a distribution or to the inversion engine.

    Raised synchronously at the point of detection: probabilities outside
    ``[0, 1]``, parameters outside their domain, reversed ranges and invalid
    tolerance settings.
    """

    TOO_LARGE = "{} > {}"
    TOO_SMALL = "{} < {}"
    OUT_OF_RANGE = "Number {} is out of range [{}, {}]"
    INVALID_RANGE_LOW_GT_HIGH = "Lower bound {} > upper bound {}"
    INVALID_PROBABILITY = "Not a probability: {} is out of range [0, 1]"
    NEGATIVE = "Number {} is negative"
    NOT_STRICTLY_POSITIVE = "Number {} is not greater than 0"
    NOT_FINITE_NON_NEGATIVE = "Number {} is not finite and non-negative"

    def __init__(self, template: str, *args: Any) -> None:
        super().__init__(template.format(*args))
        self.template = template
        self.arguments = args


class InvalidStateError(RuntimeError):
    """
    A collaborating forward function broke its contract during a computation.

    Typically a CDF or survival function returning ``NaN`` while it is being
    inverted.
    """


__all__ = [
    "DistributionError",
    "InvalidStateError",
]
