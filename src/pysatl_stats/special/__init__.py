"""
Special functions subpackage

Scalar special functions underlying the distribution families:

- regularized incomplete gamma (:mod:`.gamma`);
- beta, log-beta and regularized incomplete beta (:mod:`.beta`);
- normal CDF, its inverse and the inverse error function (:mod:`.erf`).

All functions take and return Python floats and signal domain violations by
returning ``nan`` rather than raising.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .beta import beta, betainc, log_beta, regularized_incomplete_beta
from .erf import erfinv, inverse_error_function, inverse_normal_cdf, ndtr, ndtri
from .gamma import (
    gammainc,
    gammaincc,
    regularized_lower_incomplete_gamma,
    regularized_upper_incomplete_gamma,
)

__all__ = [
    # gamma
    "gammainc",
    "gammaincc",
    "regularized_lower_incomplete_gamma",
    "regularized_upper_incomplete_gamma",
    # beta
    "beta",
    "log_beta",
    "betainc",
    "regularized_incomplete_beta",
    # normal / erf
    "ndtr",
    "ndtri",
    "erfinv",
    "inverse_normal_cdf",
    "inverse_error_function",
]
