"""
Distributions subpackage

Interfaces and shared machinery for the distribution families of
PySATL Stats:

- distribution protocol (:mod:`.distribution`);
- name-resolved analytical computations (:mod:`.computation`);
- safeguarded Newton quantile fitters (:mod:`.fitters`);
- supports (:mod:`.support`);
- array-backed samples and inverse transform sampling (:mod:`.sampling`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .computation import AnalyticalComputation
from .distribution import Distribution
from .fitters import fit_quantile, safeguarded_newton
from .sampling import ArraySample, inverse_transform_sample
from .support import NON_NEGATIVE_HALF_LINE, REAL_LINE, ContinuousSupport, Support

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    # distribution
    "Distribution",
    # fitters
    "fit_quantile",
    "safeguarded_newton",
    # sampling
    "ArraySample",
    "inverse_transform_sample",
    # support
    "Support",
    "ContinuousSupport",
    "REAL_LINE",
    "NON_NEGATIVE_HALF_LINE",
]
