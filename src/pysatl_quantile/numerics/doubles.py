"""
IEEE-754 helpers
================

Bit-level utilities for binary64 values: the monotone mapping of doubles
onto integers, the ULP distance derived from it, and the midpoint of two
doubles measured in representable steps rather than in value.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import struct

_SIGN_MASK = 0x8000_0000_0000_0000
_MAGNITUDE_MASK = 0x7FFF_FFFF_FFFF_FFFF
_PACKER = struct.Struct("<d")
_UNPACKER = struct.Struct("<Q")


def to_bits(x: float) -> int:
    """Raw 64-bit pattern of ``x`` as an unsigned integer."""
    return int(_UNPACKER.unpack(_PACKER.pack(x))[0])


def from_bits(bits: int) -> float:
    """Inverse of :func:`to_bits`."""
    return float(_PACKER.unpack(_UNPACKER.pack(bits))[0])


def to_ordered(x: float) -> int:
    """
    Map a double onto an integer so that numeric order is preserved.

    Adjacent doubles map to adjacent integers and both signed zeros map
    to ``0``. ``NaN`` maps outside the range of the finite values and
    must be filtered by the caller.

    Parameters
    ----------
    x : float
        Value to map.

    Returns
    -------
    int
        Ordered integer representation.
    """
    bits = to_bits(x)
    if bits & _SIGN_MASK:
        return -(bits & _MAGNITUDE_MASK)
    return bits


def from_ordered(n: int) -> float:
    """Inverse of :func:`to_ordered` (``0`` maps to ``+0.0``)."""
    if n < 0:
        return from_bits(_SIGN_MASK | -n)
    return from_bits(n)


def ulp_distance(a: float, b: float) -> int:
    """
    Number of representable steps between two non-NaN doubles.

    ``+0.0`` and ``-0.0`` are zero steps apart; ``MAX_VALUE`` and
    ``inf`` are one step apart.
    """
    return abs(to_ordered(a) - to_ordered(b))


def bit_midpoint(a: float, b: float) -> float:
    """
    Midpoint of ``[a, b]`` in ordered bit space.

    Halving the number of representable values in the interval bounds a
    bisection over any finite interval by the width of the
    representation, independent of magnitude.

    Parameters
    ----------
    a : float
        Lower end, ``a <= b``.
    b : float
        Upper end.

    Returns
    -------
    float
        A double ``m`` with ``a <= m <= b``; strictly inside when the
        ends are more than one step apart.
    """
    lo = to_ordered(a)
    hi = to_ordered(b)
    return from_ordered(lo + (hi - lo) // 2)


def equals_including_nan(a: float, b: float, max_ulps: int = 1) -> bool:
    """
    ``True`` when both values are ``NaN`` or at most ``max_ulps`` apart.
    """
    a_nan = math.isnan(a)
    b_nan = math.isnan(b)
    if a_nan or b_nan:
        return a_nan and b_nan
    return ulp_distance(a, b) <= max_ulps


def equals(a: float, b: float, max_ulps: int = 1) -> bool:
    """Like :func:`equals_including_nan` but ``NaN`` is never equal."""
    if math.isnan(a) or math.isnan(b):
        return False
    return ulp_distance(a, b) <= max_ulps


__all__ = [
    "to_bits",
    "from_bits",
    "to_ordered",
    "from_ordered",
    "ulp_distance",
    "bit_midpoint",
    "equals",
    "equals_including_nan",
]
