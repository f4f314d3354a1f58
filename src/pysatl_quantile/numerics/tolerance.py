"""
Tolerances
==========

Named equality predicates for pairs of doubles.

The closed set of base variants is created by the factories :func:`exact`,
:func:`ulps`, :func:`absolute` and :func:`relative`. Variants combine with
:meth:`DoubleTolerance.and_`, :meth:`DoubleTolerance.or_` and
:meth:`DoubleTolerance.negate` (or the ``&``, ``|`` and ``~`` operators)
into new predicates. Every tolerance carries a human-readable description
rendered by ``str()``.

``NaN`` handling differs by variant: :func:`exact`, :func:`ulps` and
:func:`absolute` consider two ``NaN`` values equal while :func:`relative`
never does. Only :func:`exact` distinguishes ``+0.0`` from ``-0.0``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from pysatl_quantile.errors import DistributionError
from pysatl_quantile.numerics.doubles import equals, equals_including_nan, to_bits
from pysatl_quantile.validation import check_finite_non_negative


class DoubleTolerance(ABC):
    """
    Predicate deciding whether two doubles are equal.

    Subclasses implement :meth:`test` and :attr:`description`; logical
    composition is provided here.
    """

    __slots__ = ()

    @abstractmethod
    def test(self, a: float, b: float) -> bool:
        """Return ``True`` if ``a`` and ``b`` are equal under this tolerance."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the predicate."""

    def __call__(self, a: float, b: float) -> bool:
        return self.test(a, b)

    def __str__(self) -> str:
        return self.description

    def and_(self, other: DoubleTolerance) -> DoubleTolerance:
        """Tolerance satisfied when both ``self`` and ``other`` are."""
        return AndTolerance(self, other)

    def or_(self, other: DoubleTolerance) -> DoubleTolerance:
        """Tolerance satisfied when ``self`` or ``other`` is."""
        return OrTolerance(self, other)

    def negate(self) -> DoubleTolerance:
        """Tolerance satisfied exactly when ``self`` is not."""
        return NotTolerance(self)

    def __and__(self, other: DoubleTolerance) -> DoubleTolerance:
        return self.and_(other)

    def __or__(self, other: DoubleTolerance) -> DoubleTolerance:
        return self.or_(other)

    def __invert__(self) -> DoubleTolerance:
        return self.negate()


@dataclass(frozen=True, slots=True, repr=False)
class ExactTolerance(DoubleTolerance):
    """Bitwise equality; all ``NaN`` values are equal, signed zeros are not."""

    def test(self, a: float, b: float) -> bool:
        if math.isnan(a) or math.isnan(b):
            return math.isnan(a) and math.isnan(b)
        return to_bits(a) == to_bits(b)

    @property
    def description(self) -> str:
        return "exact"


@dataclass(frozen=True, slots=True, repr=False)
class UlpTolerance(DoubleTolerance):
    """At most ``ulps`` representable steps apart."""

    ulps: int

    def test(self, a: float, b: float) -> bool:
        return equals_including_nan(a, b, self.ulps)

    @property
    def description(self) -> str:
        return f"ulp={self.ulps}"


@dataclass(frozen=True, slots=True, repr=False)
class AbsoluteTolerance(DoubleTolerance):
    """Absolute difference at most ``epsilon``."""

    epsilon: float

    def test(self, a: float, b: float) -> bool:
        return equals_including_nan(a, b) or abs(b - a) <= self.epsilon

    @property
    def description(self) -> str:
        return f"abs={self.epsilon}"


@dataclass(frozen=True, slots=True, repr=False)
class RelativeTolerance(DoubleTolerance):
    """Difference relative to the larger magnitude at most ``epsilon``."""

    epsilon: float

    def test(self, a: float, b: float) -> bool:
        if equals(a, b):
            return True
        scale = max(abs(a), abs(b))
        return abs((a - b) / scale) <= self.epsilon

    @property
    def description(self) -> str:
        return f"rel={self.epsilon}"


@dataclass(frozen=True, slots=True, repr=False)
class _BinaryTolerance(DoubleTolerance):
    left: DoubleTolerance
    right: DoubleTolerance

    symbol: ClassVar[str] = ""

    def _operand(self, tolerance: DoubleTolerance) -> str:
        text = tolerance.description
        if isinstance(tolerance, _BinaryTolerance) and tolerance.symbol != self.symbol:
            return f"({text})"
        return text

    @property
    def description(self) -> str:
        return f"{self._operand(self.left)} {self.symbol} {self._operand(self.right)}"


@dataclass(frozen=True, slots=True, repr=False)
class AndTolerance(_BinaryTolerance):
    """Conjunction, evaluated left to right with short-circuit."""

    symbol: ClassVar[str] = "&&"

    def test(self, a: float, b: float) -> bool:
        return self.left.test(a, b) and self.right.test(a, b)


@dataclass(frozen=True, slots=True, repr=False)
class OrTolerance(_BinaryTolerance):
    """Disjunction, evaluated left to right with short-circuit."""

    symbol: ClassVar[str] = "||"

    def test(self, a: float, b: float) -> bool:
        return self.left.test(a, b) or self.right.test(a, b)


@dataclass(frozen=True, slots=True, repr=False)
class NotTolerance(DoubleTolerance):
    """Negation of another tolerance."""

    operand: DoubleTolerance

    def test(self, a: float, b: float) -> bool:
        return not self.operand.test(a, b)

    def negate(self) -> DoubleTolerance:
        return self.operand

    @property
    def description(self) -> str:
        return f"!({self.operand.description})"


_EXACT = ExactTolerance()


def exact() -> DoubleTolerance:
    """Bitwise equality tolerance."""
    return _EXACT


def ulps(n: int) -> DoubleTolerance:
    """
    Tolerance of at most ``n`` units in the last place.

    Parameters
    ----------
    n : int
        Maximum number of representable steps between the values.

    Raises
    ------
    DistributionError
        If ``n`` is negative.
    """
    if n < 0:
        raise DistributionError(DistributionError.NEGATIVE, n)
    return UlpTolerance(int(n))


def absolute(epsilon: float) -> DoubleTolerance:
    """
    Tolerance of at most ``epsilon`` absolute difference.

    Raises
    ------
    DistributionError
        If ``epsilon`` is negative, infinite or ``NaN``.
    """
    return AbsoluteTolerance(check_finite_non_negative(epsilon))


def relative(epsilon: float) -> DoubleTolerance:
    """
    Tolerance of at most ``epsilon`` difference relative to the larger
    magnitude. ``NaN`` is never relatively equal to anything.

    Raises
    ------
    DistributionError
        If ``epsilon`` is negative, infinite or ``NaN``.
    """
    return RelativeTolerance(check_finite_non_negative(epsilon))


__all__ = [
    "DoubleTolerance",
    "ExactTolerance",
    "UlpTolerance",
    "AbsoluteTolerance",
    "RelativeTolerance",
    "AndTolerance",
    "OrTolerance",
    "NotTolerance",
    "exact",
    "ulps",
    "absolute",
    "relative",
]
