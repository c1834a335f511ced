"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout PySATL Stats.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from math import inf
from typing import Any, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    CONTINUOUS : str
        Continuous probability distribution.
    """

    CONTINUOUS = "continuous"


@dataclass(frozen=True, slots=True)
class DistributionType:
    """
    Distribution type descriptor.

    Parameters
    ----------
    kind : Kind
        Distribution kind.
    dimension : int
        Spatial dimension (e.g., 1 for univariate).
    """

    kind: Kind
    dimension: int


UnivariateContinuous = DistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Type for univariate continuous distributions."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    1D interval with configurable closure.

    Parameters
    ----------
    left : float, default=-inf
        Left endpoint of the interval.
    right : float, default=inf
        Right endpoint of the interval.
    left_closed : bool, default=True
        Whether left endpoint is included (ignored if left = -inf).
    right_closed : bool, default=True
        Whether right endpoint is included (ignored if right = inf).
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        """Infinite endpoints are never included."""
        if self.left == -inf and self.left_closed:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf and self.right_closed:
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check if point(s) are contained in the interval.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            True for points within the interval, False otherwise.
        """
        arr = np.asarray(x)

        left_ok = (arr > self.left) | (self.left_closed & (arr >= self.left))
        right_ok = (arr < self.right) | (self.right_closed & (arr <= self.right))
        result = left_ok & right_ok

        if np.ndim(arr) == 0:
            return bool(result)

        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))


type GenericCharacteristicName = str
"""Type alias for characteristic names (e.g., 'pdf', 'cdf')."""

ScalarFunc = Callable[[float], float]
"""Type alias for scalar functions (float -> float)."""


class CharacteristicName(StrEnum):
    """
    Enumeration of distribution characteristics.

    Every built-in family provides an analytical implementation of each
    member, resolvable through
    :meth:`~pysatl_stats.distributions.distribution.Distribution.query_method`.
    """

    PDF = "pdf"
    LOG_PDF = "log_pdf"
    CDF = "cdf"
    SF = "sf"
    PPF = "ppf"
    ISF = "isf"
    MEAN = "mean"
    VAR = "var"
    STD = "std"
    SKEW = "skewness"
    KURT = "kurtosis"


class FamilyName(StrEnum):
    NORMAL = "Normal"
    STUDENT_T = "StudentT"
    CHI_SQUARED = "ChiSquared"
    F = "F"


__all__ = [
    "Kind",
    "DistributionType",
    "UnivariateContinuous",
    "GenericCharacteristicName",
    "ScalarFunc",
    "Interval1D",
    "BoolArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "CharacteristicName",
    "FamilyName",
]
