"""
Distribution supports.

Continuous supports are closed-or-open intervals on the real line.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Protocol, overload, runtime_checkable

from pysatl_stats.types import BoolArray, Interval1D, Number, NumericArray


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D, Support): ...


REAL_LINE = ContinuousSupport()
"""Support of the Normal and Student's t families."""

NON_NEGATIVE_HALF_LINE = ContinuousSupport(left=0.0, left_closed=True)
"""Support ``[0, inf)`` of the Chi-squared and F families."""
