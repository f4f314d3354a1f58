"""
Parameterization classes for distribution families.

This module provides the abstraction for the parameter sets of the
distribution families: immutable dataclasses whose constraints are
declared as decorated predicates and checked on construction.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, is_dataclass
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec, TypeVar

from pysatl_quantile.errors import DistributionError

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values for a parametrization.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], bool]
        Validation function that returns True if constraint is satisfied.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Abstract base class for distribution parametrizations.

    Concrete parametrizations are declared with the :func:`parametrization`
    decorator and validated right after construction.
    """

    # These attributes are set by the @parametrization decorator
    __param_name__: ClassVar[str]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> str:
        """Get the name of this parametrization."""
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Get parameters as a dictionary."""
        fields = getattr(self, "__dataclass_fields__", {})
        return {f: getattr(self, f) for f in fields}

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        """Get constraints for this parametrization."""
        return self._constraints

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """
        Validate all constraints for this parametrization.

        Raises
        ------
        DistributionError
            If any constraint is not satisfied.
        """
        for constraint in self._constraints:
            if not constraint.check(self):
                raise DistributionError(
                    'Constraint "{}" does not hold for {}', constraint.description, self.parameters
                )


P = ParamSpec("P")
T = TypeVar("T", bound=type[Parametrization])

_CONSTRAINT_MARK = "__constraint_description__"


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Mark an instance method of a parametrization as a constraint.

    The method is returned unchanged apart from the description attached
    to it, so it stays callable as a plain predicate.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        setattr(func, _CONSTRAINT_MARK, description)
        return func

    return decorator


def _collect_constraints(cls: type) -> list[ParametrizationConstraint]:
    found: list[ParametrizationConstraint] = []
    for attr_name, attr in vars(cls).items():
        if isinstance(attr, staticmethod | classmethod):
            if hasattr(attr.__func__, _CONSTRAINT_MARK):
                raise TypeError(f"@constraint '{attr_name}' must be an instance method")
            continue
        if isfunction(attr) and hasattr(attr, _CONSTRAINT_MARK):
            found.append(ParametrizationConstraint(getattr(attr, _CONSTRAINT_MARK), attr))
    return found


def parametrization(*, name: str) -> Callable[[T], T]:
    """
    Class decorator declaring a parametrization.

    Parameters
    ----------
    name : str
        Name of the parametrization, e.g. ``"meanStd"``.

    Returns
    -------
    Callable[[type[Parametrization]], type[Parametrization]]
        Class decorator turning the class into a frozen slotted dataclass
        whose marked constraints are checked after ``__init__``.
    """

    def decorator(cls: T) -> T:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)  # type: ignore[assignment]
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)
        return cls

    return decorator


__all__ = [
    "Parametrization",
    "ParametrizationConstraint",
    "constraint",
    "parametrization",
]
