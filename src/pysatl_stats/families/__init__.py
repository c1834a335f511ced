"""
Parametric Families module for statistical distribution families.

Parameter value types with opt-in constraint validation, the global family
registry, and the built-in Normal, Student's t, Chi-squared and F families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .builtins import ChiSquared, FDist, Normal, StudentT
from .configuration import configure_families_register, reset_families_register
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from .registry import ParametricFamilyRegister

__all__ = [
    "Normal",
    "StudentT",
    "ChiSquared",
    "FDist",
    "ParametricFamilyRegister",
    "ParametrizationConstraint",
    "Parametrization",
    "constraint",
    "parametrization",
    "configure_families_register",
    "reset_families_register",
]
