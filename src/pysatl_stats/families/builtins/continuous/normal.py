"""
Normal distribution family implementation.

The quantile is closed form through :func:`~pysatl_stats.special.ndtri`.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import Final

from pysatl_stats.distributions.distribution import Distribution
from pysatl_stats.distributions.support import REAL_LINE, ContinuousSupport
from pysatl_stats.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_stats.families.registry import ParametricFamilyRegister
from pysatl_stats.special import ndtr, ndtri
from pysatl_stats.types import DistributionType, FamilyName, UnivariateContinuous

_LOG_SQRT_2PI: Final = 0.5 * math.log(2.0 * math.pi)


@parametrization(family=FamilyName.NORMAL)
class Normal(Parametrization, Distribution):
    """
    Normal (Gaussian) distribution.

    The normal distribution is a continuous probability distribution characterized
    by its bell-shaped curve. It is symmetric about its mean and is defined by
    two parameters: mean (μ) and standard deviation (σ).

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

    Parameters
    ----------
    mu : float
        Mean of the distribution
    sigma : float
        Standard deviation of the distribution, ``sigma > 0``
    """

    mu: float
    sigma: float

    @constraint(description="sigma > 0")
    def check_sigma_positive(self) -> bool:
        """Check that standard deviation is positive."""
        return self.sigma > 0

    @property
    def distribution_type(self) -> DistributionType:
        return UnivariateContinuous

    @property
    def support(self) -> ContinuousSupport:
        return REAL_LINE

    def _standardize(self, x: float) -> float:
        return (x - self.mu) / self.sigma

    def log_pdf(self, x: float) -> float:
        z = self._standardize(x)
        return -0.5 * z * z - math.log(self.sigma) - _LOG_SQRT_2PI

    def pdf(self, x: float) -> float:
        """
        Probability density function.

        Parameters
        ----------
        x : float
            Point at which to evaluate the density

        Returns
        -------
        float
            Density at ``x``, computed as ``exp(log_pdf(x))``
        """
        return math.exp(self.log_pdf(x))

    def cdf(self, x: float) -> float:
        """
        Cumulative distribution function, ``Φ((x - μ)/σ)`` via ``erfc``.

        Parameters
        ----------
        x : float
            Point at which to evaluate the cumulative distribution function

        Returns
        -------
        float
            Probability P(X ≤ x)
        """
        return ndtr(self._standardize(x))

    def sf(self, x: float) -> float:
        """Survival function P(X > x), evaluated directly in the upper tail."""
        return ndtr(-self._standardize(x))

    def ppf(self, p: float) -> float:
        """
        Percent point function (inverse CDF).

        Parameters
        ----------
        p : float
            Probability from [0, 1]

        Returns
        -------
        float
            Quantile corresponding to ``p``; ``-inf`` / ``inf`` at 0 / 1,
            ``nan`` outside [0, 1]
        """
        return self.mu + self.sigma * ndtri(p)

    def isf(self, q: float) -> float:
        """Inverse survival function."""
        return self.mu - self.sigma * ndtri(q)

    def mean(self) -> float:
        return self.mu

    def variance(self) -> float:
        return self.sigma**2

    def std(self) -> float:
        return self.sigma

    def skewness(self) -> float:
        """Skewness of normal distribution (always 0)."""
        return 0.0

    def kurtosis(self, excess: bool = False) -> float:
        """Raw or excess kurtosis of normal distribution.

        Parameters
        ----------
        excess : bool
            A value defines if there will be raw or excess kurtosis
            default is False

        Returns
        -------
        float
            Kurtosis value
        """
        return 0.0 if excess else 3.0


def configure_normal_family() -> None:
    """
    Register the Normal distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return
    ParametricFamilyRegister.register(Normal)
