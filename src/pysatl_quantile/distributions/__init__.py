"""
Distributions subpackage

Interfaces and default implementations for probability distributions:

- distribution protocols (:mod:`.distribution`);
- abstract base classes with numeric inverses (:mod:`.base`);
- closure bundle distribution (:mod:`.functional`);
- sample containers and inverse transform sampling (:mod:`.sampling`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .base import AbstractContinuousDistribution, AbstractDiscreteDistribution
from .distribution import ContinuousDistribution, DiscreteDistribution
from .functional import FunctionalDistribution
from .sampling import ArraySample, InverseTransformSampler, Sample

__all__ = [
    # protocols
    "ContinuousDistribution",
    "DiscreteDistribution",
    # base classes
    "AbstractContinuousDistribution",
    "AbstractDiscreteDistribution",
    "FunctionalDistribution",
    # sampling
    "ArraySample",
    "InverseTransformSampler",
    "Sample",
]
