"""
Parametrization base class and constraint declarations.

Every built-in family is a frozen parameter bundle deriving from
:class:`Parametrization`. Constraints are declared with :func:`constraint`
and checked only on request through :meth:`Parametrization.validate`, never
on construction or evaluation.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_stats.types import FamilyName


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
    Abstract base class for distribution parameter bundles.

    Holds parameter introspection and opt-in constraint validation.
    """

    # These attributes are set by the @parametrization decorator
    __family_name__: ClassVar[FamilyName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def family_name(self) -> FamilyName:
        """Name of the family this parametrization belongs to."""
        return type(self).__family_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Get parameters as a dictionary."""
        if is_dataclass(self):
            return {f.name: getattr(self, f.name) for f in fields(self)}
        return {}

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        """Get constraints for this parametrization."""
        return self._constraints

    @property
    def is_valid(self) -> bool:
        """Whether every constraint holds."""
        return all(c.check(self) for c in self._constraints)

    def validate(self) -> None:
        """
        Validate all constraints for this parametrization.

        Raises
        ------
        ValueError
            If any constraint is not satisfied.
        """
        for constraint in self._constraints:
            if not constraint.check(self):
                raise ValueError(f'Constraint "{constraint.description}" does not hold')


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.

    Returns
    -------
    Callable[[Callable[P, bool]], Callable[P, bool]]
        Decorator that marks the function as a constraint.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def parametrization[T: Parametrization](
    *, family: FamilyName
) -> Callable[[type[T]], type[T]]:
    """
    Class decorator turning a :class:`Parametrization` subclass into a family.

    Parameters
    ----------
    family : FamilyName
        Name the family is registered under.

    Returns
    -------
    Callable[[type[T]], type[T]]
        Decorator producing a frozen, slotted dataclass with its constraints
        collected.

    Raises
    ------
    TypeError
        If a constraint is declared as a static or class method.
    """

    def _collect_constraints(cls: type[Parametrization]) -> list[ParametrizationConstraint]:
        constraints: list[ParametrizationConstraint] = []
        for name, attr in cls.__dict__.items():
            if isinstance(attr, staticmethod | classmethod) and getattr(
                attr.__func__, "__is_constraint", False
            ):
                raise TypeError(f"@constraint '{name}' must be an instance method")

            func = attr if isfunction(attr) else None
            if func is not None and getattr(func, "__is_constraint", False):
                desc = getattr(func, "__constraint_description", func.__name__)
                constraints.append(ParametrizationConstraint(description=desc, check=func))
        return constraints

    def decorator(cls: type[T]) -> type[T]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__family_name__ = family
        cls._constraints = _collect_constraints(cls)
        return cls

    return decorator
