"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol implemented by
every built-in family.

Notes
-----
- Characteristics are scalar (``float -> float``) and never raise on the
  evaluation path: domain violations produce ``nan``.
- The protocol carries default implementations of ``std``, name-based
  characteristic resolution and inverse transform sampling, which families
  inherit by subclassing it explicitly.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pysatl_stats.distributions.computation import AnalyticalComputation
from pysatl_stats.distributions.sampling import inverse_transform_sample
from pysatl_stats.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_stats.distributions.sampling import ArraySample, SeedLike
    from pysatl_stats.distributions.support import ContinuousSupport
    from pysatl_stats.types import DistributionType, GenericCharacteristicName


@runtime_checkable
class Distribution(Protocol):
    """Public interface of a univariate continuous distribution."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def support(self) -> ContinuousSupport: ...

    def pdf(self, x: float) -> float: ...
    def log_pdf(self, x: float) -> float: ...
    def cdf(self, x: float) -> float: ...
    def sf(self, x: float) -> float: ...
    def ppf(self, p: float) -> float: ...
    def isf(self, q: float) -> float: ...
    def mean(self) -> float: ...
    def variance(self) -> float: ...
    def skewness(self) -> float: ...
    def kurtosis(self, excess: bool = False) -> float: ...

    def std(self) -> float:
        """Standard deviation, ``nan`` where the variance is undefined."""
        return math.sqrt(self.variance())

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Analytical implementations keyed by characteristic name.

        Moments ignore the ``data`` argument of the returned computation.
        """
        pointwise = {
            CharacteristicName.PDF: self.pdf,
            CharacteristicName.LOG_PDF: self.log_pdf,
            CharacteristicName.CDF: self.cdf,
            CharacteristicName.SF: self.sf,
            CharacteristicName.PPF: self.ppf,
            CharacteristicName.ISF: self.isf,
        }
        moments = {
            CharacteristicName.MEAN: self.mean,
            CharacteristicName.VAR: self.variance,
            CharacteristicName.STD: self.std,
            CharacteristicName.SKEW: self.skewness,
        }

        computations: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = {}
        for name, func in pointwise.items():
            computations[name] = AnalyticalComputation(
                target=name, func=lambda x, _f=func, **_: _f(float(x))
            )
        for name, moment in moments.items():
            computations[name] = AnalyticalComputation(
                target=name, func=lambda _data, _m=moment, **_: _m()
            )
        computations[CharacteristicName.KURT] = AnalyticalComputation(
            target=CharacteristicName.KURT,
            func=lambda _data, excess=False, **_: self.kurtosis(excess=excess),
        )
        return computations

    def query_method(
        self, characteristic_name: GenericCharacteristicName
    ) -> AnalyticalComputation[Any, Any]:
        """
        Resolve a characteristic by name.

        Raises
        ------
        KeyError
            If the distribution has no such characteristic.
        """
        computations = self.analytical_computations
        if characteristic_name not in computations:
            raise KeyError(f"Unknown characteristic '{characteristic_name}'")
        return computations[characteristic_name]

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any = None, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)

    def sample(self, n: int, rng: SeedLike = None) -> ArraySample:
        """Draw ``n`` samples by inverse transform of :meth:`ppf`."""
        return inverse_transform_sample(self.ppf, n, rng)
