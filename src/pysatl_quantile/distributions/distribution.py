"""
Distribution Interfaces
=======================

This module defines the public capability sets consumed by the inversion
engine and by the samplers:

- :class:`ContinuousDistribution` protocol – forward functions, support and
  moments of a univariate continuous distribution.
- :class:`DiscreteDistribution` protocol – the integer-valued counterpart.

Notes
-----
- Any object providing the members structurally satisfies a protocol; no
  common base class is required.
- ``cumulative_probability`` must be non-decreasing. ``survival_probability``
  equals ``1 - cumulative_probability`` mathematically but is expected to be
  computed independently so that upper-tail values keep their precision.
- ``mean`` may be ``NaN`` and ``variance`` may be ``NaN`` or ``inf`` when the
  moments do not exist.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Protocol, runtime_checkable


@runtime_checkable
class ContinuousDistribution(Protocol):
    """Public continuous distribution interface used by the inversion engine."""

    def density(self, x: float) -> float: ...

    def log_density(self, x: float) -> float: ...

    def cumulative_probability(self, x: float) -> float: ...

    def survival_probability(self, x: float) -> float: ...

    @property
    def support_lower_bound(self) -> float: ...

    @property
    def support_upper_bound(self) -> float: ...

    @property
    def is_support_connected(self) -> bool: ...

    @property
    def mean(self) -> float: ...

    @property
    def variance(self) -> float: ...


@runtime_checkable
class DiscreteDistribution(Protocol):
    """Public discrete distribution interface used by the inversion engine."""

    def probability(self, x: int) -> float: ...

    def log_probability(self, x: int) -> float: ...

    def cumulative_probability(self, x: int) -> float: ...

    def survival_probability(self, x: int) -> float: ...

    @property
    def support_lower_bound(self) -> int: ...

    @property
    def support_upper_bound(self) -> int: ...

    @property
    def mean(self) -> float: ...

    @property
    def variance(self) -> float: ...


__all__ = [
    "ContinuousDistribution",
    "DiscreteDistribution",
]
