"""
Families subpackage

Concrete distribution families built on the abstract distributions:

- parameter declarations with validated constraints (:mod:`.parametrizations`);
- normal (:mod:`.normal`), folded normal (:mod:`.folded_normal`) and gamma
  (:mod:`.gamma`) distributions;
- point mass (:mod:`.constant`);
- Poisson distribution (:mod:`.poisson`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .constant import ConstantContinuousDistribution
from .folded_normal import (
    FoldedNormalDistribution,
    HalfNormalDistribution,
    RegularFoldedNormalDistribution,
)
from .gamma import GammaDistribution
from .normal import NormalDistribution
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from .poisson import PoissonDistribution

__all__ = [
    # parametrizations
    "Parametrization",
    "ParametrizationConstraint",
    "constraint",
    "parametrization",
    # continuous
    "ConstantContinuousDistribution",
    "FoldedNormalDistribution",
    "GammaDistribution",
    "HalfNormalDistribution",
    "NormalDistribution",
    "RegularFoldedNormalDistribution",
    # discrete
    "PoissonDistribution",
]
