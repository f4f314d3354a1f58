"""
Point mass distribution.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from pysatl_quantile.distributions.base import AbstractContinuousDistribution
from pysatl_quantile.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)


@parametrization(name="value")
class ConstantParameters(Parametrization):
    value: float

    @constraint(description="value is finite")
    def check_value_finite(self) -> bool:
        return math.isfinite(self.value)


class ConstantContinuousDistribution(AbstractContinuousDistribution):
    """
    Degenerate distribution with all mass at ``value``.

    The support is the single point ``[value, value]`` and the variance is
    zero; inversion resolves every probability to ``value``.
    """

    def __init__(self, value: float) -> None:
        self.parameters = ConstantParameters(value=float(value))

    def __repr__(self) -> str:
        return f"ConstantContinuousDistribution(value={self.parameters.value!r})"

    def density(self, x: float) -> float:
        return 1.0 if x == self.parameters.value else 0.0

    def cumulative_probability(self, x: float) -> float:
        return 0.0 if x < self.parameters.value else 1.0

    def survival_probability(self, x: float) -> float:
        return 1.0 if x < self.parameters.value else 0.0

    @property
    def mean(self) -> float:
        return self.parameters.value

    @property
    def variance(self) -> float:
        return 0.0

    @property
    def support_lower_bound(self) -> float:
        return self.parameters.value

    @property
    def support_upper_bound(self) -> float:
        return self.parameters.value


__all__ = [
    "ConstantContinuousDistribution",
    "ConstantParameters",
]
