"""
Built-in distribution families for PySATL Stats.

This package contains implementations of standard statistical distribution families
that are available by default in PySATL Stats.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_stats.families.builtins.continuous import (
    ChiSquared,
    FDist,
    Normal,
    StudentT,
    configure_chi_squared_family,
    configure_f_family,
    configure_normal_family,
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
