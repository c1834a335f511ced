"""
Distribution Families Configuration
====================================

Registers the built-in parametric families in the global
:class:`~pysatl_stats.families.registry.ParametricFamilyRegister`:

- :class:`Normal` — Gaussian distribution.
- :class:`StudentT` — Student's t distribution.
- :class:`ChiSquared` — Chi-squared distribution.
- :class:`FDist` — Fisher–Snedecor F distribution.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_stats.families.builtins import (
    configure_chi_squared_family,
    configure_f_family,
    configure_normal_family,
    configure_student_t_family,
)
from pysatl_stats.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Register all built-in distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_normal_family()
    configure_student_t_family()
    configure_chi_squared_family()
    configure_f_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
