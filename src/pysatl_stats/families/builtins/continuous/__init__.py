"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_stats.families.builtins.continuous.chi_squared import (
    ChiSquared,
    configure_chi_squared_family,
)
from pysatl_stats.families.builtins.continuous.fisher import FDist, configure_f_family
from pysatl_stats.families.builtins.continuous.normal import Normal, configure_normal_family
from pysatl_stats.families.builtins.continuous.student_t import (
    StudentT,
    configure_student_t_family,
)

__all__ = [
    "Normal",
    "StudentT",
    "ChiSquared",
    "FDist",
    "configure_normal_family",
    "configure_student_t_family",
    "configure_chi_squared_family",
    "configure_f_family",
]
