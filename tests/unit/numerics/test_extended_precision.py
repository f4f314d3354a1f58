from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from collections.abc import Callable
from decimal import Decimal, localcontext
from fractions import Fraction

import numpy as np
import pytest

from pysatl_quantile.numerics.extended_precision import (
    SQRT2PI,
    expmhxx,
    fast_two_sum,
    split,
    sqrt2xx,
    sum_compensated,
    two_product,
    two_sum,
    xsqrt2pi,
)
from pysatl_quantile.types import MAX_VALUE, MIN_VALUE

SQRT_TWO_PI = "2.506628274631000502415765284811045253006986740609938316629923576"
ROOT2PI = math.sqrt(2 * math.pi)
PRECISION = 60


def ulp_errors(
    function: Callable[[float], float], xs: np.ndarray, exact: Callable[[Decimal], Decimal]
) -> np.ndarray:
    """ULP error of ``function`` against a high precision oracle."""
    errors = []
    with localcontext() as ctx:
        ctx.prec = PRECISION
        for x in xs:
            expected = exact(Decimal(float(x)))
            actual = function(float(x))
            ulp = Decimal(math.ulp(float(expected)))
            errors.append(float((Decimal(actual) - expected) / ulp))
    return np.abs(np.array(errors))


def rms(errors: np.ndarray) -> float:
    return float(np.sqrt(np.mean(errors**2)))


class TestSqrt2PiConstant:
    def test_constant_is_correctly_rounded_pair(self) -> None:
        with localcontext() as ctx:
            ctx.prec = 80
            sqrt2pi = Decimal(SQRT_TWO_PI)
            value = float(sqrt2pi)
            round_off = float(sqrt2pi - Decimal(value))
        assert value + round_off == value
        assert SQRT2PI.hi == value
        assert SQRT2PI.lo == round_off
        assert abs(value - ROOT2PI) <= math.ulp(value)

    def test_pair_recovers_more_digits(self) -> None:
        with localcontext() as ctx:
            ctx.prec = 80
            total = Decimal(SQRT2PI.hi) + Decimal(SQRT2PI.lo)
            assert abs(total - Decimal(SQRT_TWO_PI)) < Decimal("1e-31")


class TestErrorFreeTransformations:
    @pytest.mark.parametrize(
        ("a", "b"),
        [(1.0, 1e-17), (1e16, 1.0), (0.1, 0.2), (-3.5, 1e-300), (1e308, -1e292)],
    )
    def test_two_sum_is_exact(self, a: float, b: float) -> None:
        r = two_sum(a, b)
        assert r.hi == a + b
        assert Fraction(r.hi) + Fraction(r.lo) == Fraction(a) + Fraction(b)

    def test_fast_two_sum_matches_two_sum_for_ordered_inputs(self) -> None:
        assert fast_two_sum(1e16, 1.0) == two_sum(1e16, 1.0)

    @pytest.mark.parametrize(("a", "b"), [(0.1, 0.3), (1.0 / 3, 3.0), (123456.789, 1e-5)])
    def test_two_product_is_exact(self, a: float, b: float) -> None:
        r = two_product(a, b)
        assert r.hi == a * b
        assert Fraction(r.hi) + Fraction(r.lo) == Fraction(a) * Fraction(b)

    def test_split_halves_are_exact(self) -> None:
        x = math.pi
        parts = split(x)
        assert parts.hi + parts.lo == x
        # Squares of the halves are representable
        assert Fraction(parts.hi * parts.hi) == Fraction(parts.hi) ** 2
        assert Fraction(parts.lo * parts.lo) == Fraction(parts.lo) ** 2

    def test_compensated_sum_recovers_cancelled_terms(self) -> None:
        assert sum_compensated([1e16, 1.0, -1e16]) == 1.0
        assert sum([1e16, 1.0, -1e16]) == 0.0

    def test_compensated_sum_matches_fsum(self, rng: np.random.Generator) -> None:
        values = rng.normal(size=1000) * 10.0 ** rng.integers(-5, 5, size=1000)
        exact = math.fsum(values.tolist())
        assert abs(sum_compensated(values.tolist()) - exact) <= 2 * math.ulp(exact)

    def test_compensated_sum_propagates_non_finite(self) -> None:
        assert sum_compensated([1.0, math.inf]) == math.inf
        assert math.isnan(sum_compensated([1.0, math.nan]))


class TestSqrt2xx:
    @pytest.mark.parametrize("i", [-1000, -600, -200, 200, 600, 1000])
    def test_scaling_under_and_overflow(self, i: int) -> None:
        x = 1.5
        e = 2.12132034355964257320253308631
        assert sqrt2xx(x) == e
        assert sqrt2xx(math.ldexp(x, i)) == math.ldexp(e, i)

    def test_edge_cases(self) -> None:
        assert sqrt2xx(MAX_VALUE) == math.inf
        assert sqrt2xx(math.inf) == math.inf
        assert sqrt2xx(0.0) == 0.0
        assert sqrt2xx(1.0) == math.sqrt(2)
        assert sqrt2xx(2.0) == math.sqrt(8)
        assert math.isnan(sqrt2xx(math.nan))

    @pytest.mark.parametrize("i", range(1, 10))
    def test_subnormals_are_not_flushed(self, i: int) -> None:
        assert sqrt2xx(i * MIN_VALUE) == i * MIN_VALUE * math.sqrt(2)

    def test_negative_values(self) -> None:
        assert sqrt2xx(-1.5) == sqrt2xx(1.5)
        assert sqrt2xx(-1e300) == math.inf
        # the square of a negative input overflows before any scaling
        assert sqrt2xx(-1e200) == math.inf
        assert sqrt2xx(1e200) == pytest.approx(math.sqrt(2.0) * 1e200, rel=1e-15)
        assert sqrt2xx(-math.inf) == math.inf

    def test_precision_beats_standard_computation(self, rng: np.random.Generator) -> None:
        xs = rng.uniform(1.0, 2.0, size=2000) * 2.0 ** rng.integers(-400, 400, size=2000)

        def exact(x: Decimal) -> Decimal:
            return (2 * x * x).sqrt()

        high = ulp_errors(sqrt2xx, xs, exact)
        standard = ulp_errors(lambda x: math.sqrt(2 * x * x), xs, exact)
        assert high.max() < 0.51
        assert rms(high) < 0.35
        assert standard.max() > high.max()


class TestXsqrt2pi:
    @pytest.mark.parametrize("x", [0.0, 1.0])
    def test_finite_edge_cases(self, x: float) -> None:
        assert xsqrt2pi(x) == pytest.approx(x * ROOT2PI, abs=1e-15)

    def test_ieee_edge_cases(self) -> None:
        assert xsqrt2pi(MAX_VALUE) == math.inf
        assert xsqrt2pi(math.inf) == math.inf
        assert xsqrt2pi(-math.inf) == -math.inf
        assert math.copysign(1.0, xsqrt2pi(-0.0)) == -1.0
        assert math.isnan(xsqrt2pi(math.nan))

    def test_precision_beats_standard_computation(self, rng: np.random.Generator) -> None:
        xs = rng.uniform(1.0, 2.0, size=2000) * 2.0 ** rng.integers(-600, 600, size=2000)
        sqrt2pi = Decimal(SQRT_TWO_PI)

        def exact(x: Decimal) -> Decimal:
            return x * sqrt2pi

        high = ulp_errors(xsqrt2pi, xs, exact)
        standard = ulp_errors(lambda x: x * ROOT2PI, xs, exact)
        assert high.max() < 0.51
        assert standard.max() > 0.75


class TestExpmhxx:
    @pytest.mark.parametrize("x", [0.0, 0.5, 1.0, 2.0, 3.0, 4.0, 5.0, 38.5, MAX_VALUE, math.inf])
    def test_edge_cases(self, x: float) -> None:
        expected = math.exp(-0.5 * x * x)
        assert expmhxx(x) == expected
        assert expmhxx(-x) == expected

    def test_exact_at_zero_and_underflow(self) -> None:
        assert expmhxx(0.0) == 1.0
        assert expmhxx(40.0) == 0.0
        assert math.isnan(expmhxx(math.nan))

    def test_precision_beats_standard_computation(self, rng: np.random.Generator) -> None:
        xs = rng.uniform(1.0, 38.0, size=2000)

        def exact(x: Decimal) -> Decimal:
            return (-x * x / 2).exp()

        high = ulp_errors(expmhxx, xs, exact)
        standard = ulp_errors(lambda x: math.exp(-0.5 * x * x), xs, exact)
        assert high.max() < 1.5
        assert rms(high) < 0.6
        assert standard.max() > 10
        assert rms(standard) > 10 * rms(high)
