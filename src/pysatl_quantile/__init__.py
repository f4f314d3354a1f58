"""
PySATL Quantile
===============

Probability distribution models with a generic numeric inversion engine
and extended precision numerics: inverse CDF and inverse survival function
of any continuous distribution from its forward functions, compensated
floating-point primitives, composable tolerances and concrete families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .inversion import *
from .inversion import __all__ as _inversion_all
from .numerics import *
from .numerics import __all__ as _numerics_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-quantile")
__all__ = [
    "__version__",
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_inversion_all,
    *_numerics_all,
    *_types_all,
]

del _distr_all
del _errors_all
del _family_all
del _inversion_all
del _numerics_all
del _types_all
