"""
Extended precision arithmetic
=============================

Error-free transformations on doubles and the compensated elementary
functions built on them:

- :func:`sqrt2xx` computes ``sqrt(2 * x * x)`` without premature overflow
  or underflow of the square;
- :func:`xsqrt2pi` multiplies by ``sqrt(2 * pi)`` stored as a two-term
  constant;
- :func:`expmhxx` computes ``exp(-0.5 * x * x)`` from the exact square.

Intermediate results are carried as :class:`DoubleDouble` pairs whose
unevaluated sum ``hi + lo`` holds about 106 significant bits. Only the
final rounded double leaves the public functions.

References
----------
Dekker, T. J. (1971). A floating-point technique for extending the
available precision. Numerische Mathematik, 18, 224-242.

Shewchuk, J. R. (1997). Adaptive precision floating-point arithmetic and
fast robust geometric predicates. Discrete & Computational Geometry, 18,
305-363.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True, slots=True)
class DoubleDouble:
    """
    Unevaluated sum of two non-overlapping doubles.

    Parameters
    ----------
    hi : float
        Nearest double to the represented value.
    lo : float
        Rounding remainder, ``|lo| <= ulp(hi) / 2``.
    """

    hi: float
    lo: float

    @property
    def value(self) -> float:
        """Value rounded to a single double."""
        return self.hi + self.lo

    def __float__(self) -> float:
        return self.value


# 2^27 + 1, splits a 53-bit significand into two 26-bit halves
MULTIPLIER = 1.0 + 2.0**27

_BIG = 2.0**500
_SMALL = 2.0**-500
_SCALE_UP = 2.0**600
_SCALE_DOWN = 2.0**-600

# Squares above this make exp(-0.5 * x * x) underflow to zero
_EXP_M_HALF_XX_UNDERFLOW = 1491.0

SQRT2PI = DoubleDouble(2.5066282746310007, -1.83285799804591675079138704e-16)
"""``sqrt(2 * pi)`` to about 106 bits as a high/low pair."""


def high_part(value: float) -> float:
    """
    High half of Dekker's split of ``value``.

    Valid without scaling for ``|value| < 2^996``; larger values overflow
    and produce ``NaN``. ``NaN`` and infinities produce ``NaN``.
    """
    c = MULTIPLIER * value
    return c - (c - value)


def split(value: float) -> DoubleDouble:
    """Split ``value`` into 26-bit halves with ``hi + lo == value`` exactly."""
    hi = high_part(value)
    return DoubleDouble(hi, value - hi)


_SQRT2PI_SPLIT = split(SQRT2PI.hi)


def product_low(hx: float, lx: float, hy: float, ly: float, xy: float) -> float:
    """
    Low part of the exact product of two split numbers.

    Parameters
    ----------
    hx, lx : float
        High and low parts of the first factor.
    hy, ly : float
        High and low parts of the second factor.
    xy : float
        Rounded product ``x * y``.

    Returns
    -------
    float
        ``lx * ly - (((xy - hx * hy) - lx * hy) - hx * ly)``
    """
    return lx * ly - (((xy - hx * hy) - lx * hy) - hx * ly)


def square_low(hx: float, lx: float, xx: float) -> float:
    """Low part of the exact square of a split number given ``xx = x * x``."""
    return lx * lx - ((xx - hx * hx) - 2 * lx * hx)


def two_sum(a: float, b: float) -> DoubleDouble:
    """
    Exact sum ``a + b`` as a rounded sum plus its rounding error.

    No ordering of the magnitudes is required.
    """
    s = a + b
    bb = s - a
    return DoubleDouble(s, (a - (s - bb)) + (b - bb))


def fast_two_sum(a: float, b: float) -> DoubleDouble:
    """Exact sum for ``|a| >= |b|``."""
    s = a + b
    return DoubleDouble(s, b - (s - a))


def two_product(a: float, b: float) -> DoubleDouble:
    """
    Exact product ``a * b`` as a rounded product plus its rounding error.

    Exact for factors below ``2^996`` in magnitude whose product neither
    overflows nor underflows.
    """
    p = a * b
    ha = high_part(a)
    hb = high_part(b)
    return DoubleDouble(p, product_low(ha, a - ha, hb, b - hb, p))


def sum_compensated(values: Iterable[float]) -> float:
    """
    Sum a sequence accumulating the rounding error of every addition.

    The result is as accurate as if computed in twice the working precision
    and then rounded.

    Parameters
    ----------
    values : Iterable[float]
        Terms to add.

    Returns
    -------
    float
        Compensated sum. Non-finite terms propagate as in plain summation.
    """
    s = 0.0
    c = 0.0
    for v in values:
        t = two_sum(s, v)
        s = t.hi
        c += t.lo
    result = s + c
    if math.isfinite(result):
        return result
    # Overflowed or non-finite terms: the error terms are meaningless
    return s


def sqrt2xx(x: float) -> float:
    """
    Compute ``sqrt(2 * x * x)``.

    The square is formed exactly and the root refined with Dekker's
    method, so the result is within about half an ULP. Inputs are scaled
    by ``2^600`` at the extremes of the exponent range; subnormal inputs
    keep their value.

    Parameters
    ----------
    x : float
        Value. A negative value is squared like its absolute value, except
        that a negative value whose square overflows returns ``inf``.

    Returns
    -------
    float
        ``sqrt(2 * x * x)``; ``inf`` when it overflows, ``NaN`` for ``NaN``.
        A negative ``x`` returns ``inf`` as soon as ``x * x`` overflows, so
        ``sqrt2xx(-1e200)`` is ``inf`` while ``sqrt2xx(1e200)`` is finite.
    """
    if x < 0:
        if x * x == math.inf:
            return math.inf
        x = -x
    if x > _BIG:
        if x == math.inf:
            return math.inf
        return _sqrt2aa(x * _SCALE_DOWN) * _SCALE_UP
    if x < _SMALL:
        return _sqrt2aa(x * _SCALE_UP) * _SCALE_DOWN
    return _sqrt2aa(x)


def _sqrt2aa(a: float) -> float:
    ha = high_part(a)
    la = a - ha

    x = 2 * a * a
    xx = product_low(ha, la, 2 * ha, 2 * la, x)

    c = math.sqrt(x)
    # a has a short significand (includes 0 and powers of 2)
    if xx == 0:
        return c

    # Dekker (1971), sqrt2
    hc = high_part(c)
    lc = c - hc
    u = c * c
    uu = product_low(hc, lc, hc, lc, u)
    cc = (x - u - uu + xx) * 0.5 / c
    return c + cc


def xsqrt2pi(x: float) -> float:
    """
    Compute ``x * sqrt(2 * pi)``.

    The product with the two-term constant :data:`SQRT2PI` is formed in
    extended precision and rounded once.

    Parameters
    ----------
    x : float
        Value.

    Returns
    -------
    float
        ``x * sqrt(2 * pi)``. Zero, infinities and ``NaN`` follow IEEE
        multiplication by the high part of the constant.
    """
    if x == 0 or not math.isfinite(x):
        return x * SQRT2PI.hi
    a = abs(x)
    if a > _BIG:
        return _xsqrt2pi(x * _SCALE_DOWN) * _SCALE_UP
    if a < _SMALL:
        return _xsqrt2pi(x * _SCALE_UP) * _SCALE_DOWN
    return _xsqrt2pi(x)


def _xsqrt2pi(a: float) -> float:
    ha = high_part(a)
    la = a - ha
    x = a * SQRT2PI.hi
    xx = product_low(ha, la, _SQRT2PI_SPLIT.hi, _SQRT2PI_SPLIT.lo, x) + a * SQRT2PI.lo
    return x + xx


def expmhxx(x: float) -> float:
    """
    Compute ``exp(-0.5 * x * x)``.

    Uses ``exp(a + b) = exp(a) * expm1(b) + exp(a)`` with ``(a, b)`` the
    exact square split into its rounded value and remainder.

    Parameters
    ----------
    x : float
        Value.

    Returns
    -------
    float
        ``1.0`` at zero, ``0.0`` once the result underflows (including
        infinite ``x``), ``NaN`` for ``NaN``. Symmetric in ``x``.
    """
    z = x * x
    if z <= 0.5:
        return math.exp(-0.5 * z)
    if z >= _EXP_M_HALF_XX_UNDERFLOW:
        return 0.0
    hx = high_part(x)
    lx = x - hx
    zz = square_low(hx, lx, z)
    ea = math.exp(-0.5 * z)
    return ea * math.expm1(-0.5 * zz) + ea

__all__ = [
    "DoubleDouble",
    "SQRT2PI",
    "high_part",
    "split",
    "product_low",
    "square_low",
    "two_sum",
    "fast_two_sum",
    "two_product",
    "sum_compensated",
    "sqrt2xx",
    "xsqrt2pi",
    "expmhxx",
]
