"""
Shared numerical helpers for the special functions.

Lentz continued fractions divide by running denominators that may collapse to
zero; every such denominator is clamped to :data:`FPMIN` first.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import Final

FPMIN: Final = 1e-30
"""Smallest magnitude a Lentz denominator is allowed to take."""

INTEGER_TOL: Final = 1e-12
"""Distance below which a float is treated as an integer."""


def clamp_tiny(value: float) -> float:
    """Replace a near-zero Lentz denominator with :data:`FPMIN`."""
    if abs(value) < FPMIN:
        return FPMIN
    return value


def clip_probability(value: float) -> float:
    """Clip a rounded probability back into ``[0, 1]``."""
    if value < 0.0:
        return 0.0
    if value > 1.0:
        return 1.0
    return value


def is_near_positive_integer(value: float, limit: int) -> bool:
    """
    Check whether ``value`` is within :data:`INTEGER_TOL` of an integer in ``[1, limit]``.

    Parameters
    ----------
    value : float
        Value to classify.
    limit : int
        Largest integer that still counts.

    Returns
    -------
    bool
        ``True`` if ``value`` is numerically a small positive integer.
    """
    if not math.isfinite(value):
        return False
    nearest = round(value)
    return 1 <= nearest <= limit and abs(value - nearest) < INTEGER_TOL
