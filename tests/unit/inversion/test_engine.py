from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy import stats

from pysatl_quantile.errors import DistributionError, InvalidStateError
from pysatl_quantile.families.normal import NormalDistribution
from pysatl_quantile.inversion.config import InversionConfig
from pysatl_quantile.inversion.engine import (
    inverse_cumulative_probability,
    inverse_survival_probability,
)
from pysatl_quantile.types import MAX_VALUE, MIN_VALUE
from tests.utils.mocks import (
    CentredUniformDistribution,
    DiracDistribution,
    NaNDistribution,
    PlateauDistribution,
    StepDistribution,
    TriangleDistribution,
)


class TestPlateau:
    @pytest.mark.parametrize(
        ("p", "expected"),
        [
            (0.0, 0.0),
            (MIN_VALUE, 2 * MIN_VALUE),
            (1e-7, 2e-7),
            (0.25, 0.5),
            (0.5, 1.0),
            (0.75, 2.5),
            (1.0, 3.0),
        ],
    )
    @pytest.mark.parametrize("connected", [True, False])
    def test_inverse_cdf_is_the_infimum(self, p: float, expected: float, connected: bool) -> None:
        dist = PlateauDistribution(connected=connected)
        assert inverse_cumulative_probability(dist, p) == expected

    @pytest.mark.parametrize(("q", "expected"), [(0.75, 0.5), (0.5, 1.0), (0.25, 2.5)])
    def test_inverse_sf(self, q: float, expected: float) -> None:
        dist = PlateauDistribution()
        assert inverse_survival_probability(dist, q) == pytest.approx(expected, abs=1e-15)

    def test_inverse_sf_bounds(self) -> None:
        dist = PlateauDistribution()
        assert inverse_survival_probability(dist, 1.0) == 0.0
        assert inverse_survival_probability(dist, 0.0) == 3.0

    def test_evaluation_stays_inside_support(self) -> None:
        dist = PlateauDistribution()
        for p in np.linspace(0.0, 1.0, 21):
            inverse_cumulative_probability(dist, float(p))
        assert all(0.0 <= x <= 3.0 for x in dist.calls)


class TestStep:
    @pytest.mark.parametrize(("p", "expected"), [(0.1, 1.0), (0.3, 1.0), (0.5, 2.0), (1.0, 2.0)])
    def test_inverse_cdf(self, p: float, expected: float) -> None:
        assert inverse_cumulative_probability(StepDistribution(), p) == expected

    @pytest.mark.parametrize(("q", "expected"), [(0.9, 1.0), (0.75, 1.0), (0.5, 2.0), (0.0, 3.0)])
    def test_inverse_sf(self, q: float, expected: float) -> None:
        assert inverse_survival_probability(StepDistribution(), q) == expected


class TestUnreliableMoments:
    def test_zero_variance(self) -> None:
        dist = DiracDistribution(10.0)
        for inverse, p in (
            (inverse_cumulative_probability, 0.5),
            (inverse_survival_probability, 0.5),
        ):
            x = inverse(dist, p)
            assert x != 10.0
            assert abs(x - 10.0) < 1e-8
        assert inverse_cumulative_probability(dist, 0.0) == 10.0
        assert inverse_cumulative_probability(dist, 1.0) == math.inf
        assert inverse_survival_probability(dist, 1.0) == 10.0
        assert inverse_survival_probability(dist, 0.0) == math.inf

    @pytest.mark.parametrize(
        ("p", "expected"),
        [
            (0.0, -math.inf),
            (0.02, -8.0),
            (0.25, math.sqrt(50.0) - 10.0),
            (0.5, 0.0),
            (0.75, 10.0 - math.sqrt(50.0)),
            (0.98, 8.0),
            (1.0, math.inf),
        ],
    )
    def test_infinite_variance(self, p: float, expected: float) -> None:
        dist = TriangleDistribution()
        x = inverse_cumulative_probability(dist, p)
        assert x == pytest.approx(expected, rel=1e-12, abs=1e-14)
        # upper tail mass 1 - p lands on the same quantile
        x = inverse_survival_probability(dist, 1.0 - p)
        assert x == pytest.approx(expected, rel=1e-12, abs=1e-14)


class TestBeyondFiniteRange:
    def test_upper_truncation(self) -> None:
        dist = CentredUniformDistribution(MAX_VALUE, MAX_VALUE)
        assert inverse_cumulative_probability(dist, 0.5) == MAX_VALUE
        assert inverse_cumulative_probability(dist, 0.9) == math.inf

    def test_lower_truncation(self) -> None:
        dist = CentredUniformDistribution(-MAX_VALUE, MAX_VALUE)
        assert inverse_cumulative_probability(dist, 0.5) == -MAX_VALUE
        assert inverse_cumulative_probability(dist, 0.1) == -math.inf


class TestNormal:
    @pytest.mark.parametrize("p", [1e-300, 1e-20, 0.001, 0.3, 0.5, 0.8, 0.999])
    def test_matches_scipy(self, p: float) -> None:
        x = inverse_cumulative_probability(NormalDistribution(), p)
        assert x == pytest.approx(stats.norm.ppf(p), rel=1e-9, abs=1e-15)

    @pytest.mark.parametrize("q", [1e-300, 1e-20, 0.001, 0.3])
    def test_sf_keeps_upper_tail_precision(self, q: float) -> None:
        x = inverse_survival_probability(NormalDistribution(), q)
        assert x == pytest.approx(stats.norm.isf(q), rel=1e-9)

    def test_result_is_infimum(self, rng: np.random.Generator) -> None:
        dist = NormalDistribution(2.0, 3.0)
        for p in rng.uniform(0.0, 1.0, size=50):
            x = inverse_cumulative_probability(dist, float(p))
            assert dist.cumulative_probability(x) >= p
            assert dist.cumulative_probability(math.nextafter(x, -math.inf)) < p

    @pytest.mark.parametrize("p", [1e-20, 0.01, 0.25, 0.5, 0.9])
    def test_tail_inverses_are_symmetric(self, p: float) -> None:
        dist = NormalDistribution(2.0, 3.0)
        total = inverse_cumulative_probability(dist, p) + inverse_survival_probability(dist, p)
        assert total == pytest.approx(4.0, abs=1e-9)


class TestErrors:
    @pytest.mark.parametrize("p", [-0.1, 1.1, math.nan, math.inf])
    def test_probability_outside_unit_interval(self, p: float) -> None:
        with pytest.raises(DistributionError, match="Not a probability"):
            inverse_cumulative_probability(PlateauDistribution(), p)
        with pytest.raises(DistributionError, match="Not a probability"):
            inverse_survival_probability(PlateauDistribution(), p)

    def test_nan_from_cdf(self) -> None:
        with pytest.raises(InvalidStateError):
            inverse_cumulative_probability(NaNDistribution(0.5), 0.7)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"initial_step": 0.0},
            {"initial_step": math.inf},
            {"expansion_factor": 1.0},
            {"max_expansions": 0},
            {"max_iterations": 0},
        ],
    )
    def test_invalid_config(self, kwargs: dict[str, float]) -> None:
        with pytest.raises(ValueError):
            InversionConfig(**kwargs)  # type: ignore[arg-type]
