"""
Chi-squared distribution family implementation.

If ``X ~ χ²(k)``, then ``X/2 ~ Gamma(k/2, 1)``: the CDF is the regularized
lower incomplete gamma ``P(k/2, x/2)`` and the SF its complement
``Q(k/2, x/2)``. The quantile starts from the Wilson–Hilferty approximation
and is refined by a safeguarded Newton iteration.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import Final

from pysatl_stats.distributions.distribution import Distribution
from pysatl_stats.distributions.fitters import fit_quantile
from pysatl_stats.distributions.support import NON_NEGATIVE_HALF_LINE, ContinuousSupport
from pysatl_stats.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_stats.families.registry import ParametricFamilyRegister
from pysatl_stats.special import gammainc, gammaincc, ndtri
from pysatl_stats.types import DistributionType, FamilyName, UnivariateContinuous

_LN2: Final = math.log(2.0)


@parametrization(family=FamilyName.CHI_SQUARED)
class ChiSquared(Parametrization, Distribution):
    """
    Chi-squared distribution.

    Probability density function:
        f(x) = x^(k/2-1) e^(-x/2) / (2^(k/2) Γ(k/2)),  x > 0

    At ``x = 0`` the density is ``inf`` for ``k < 2``, ``1/2`` for ``k = 2``
    and ``0`` for ``k > 2``.

    Parameters
    ----------
    df : float
        Degrees of freedom k, ``df > 0``
    """

    df: float

    @constraint(description="df > 0")
    def check_df_positive(self) -> bool:
        """Check that degrees of freedom are positive."""
        return self.df > 0

    @property
    def distribution_type(self) -> DistributionType:
        return UnivariateContinuous

    @property
    def support(self) -> ContinuousSupport:
        return NON_NEGATIVE_HALF_LINE

    def _density_at_zero(self) -> float:
        if self.df < 2:
            return math.inf
        if self.df == 2:
            return 0.5
        return 0.0

    def log_pdf(self, x: float) -> float:
        if math.isnan(x):
            return math.nan
        if x < 0 or math.isinf(x):
            return -math.inf
        if x == 0:
            density = self._density_at_zero()
            return math.log(density) if density > 0 else -math.inf

        k = 0.5 * self.df
        return (k - 1.0) * math.log(x) - 0.5 * x - k * _LN2 - math.lgamma(k)

    def pdf(self, x: float) -> float:
        if math.isnan(x):
            return math.nan
        if x < 0:
            return 0.0
        if x == 0:
            return self._density_at_zero()
        return math.exp(self.log_pdf(x))

    def cdf(self, x: float) -> float:
        if math.isnan(x):
            return math.nan
        if x <= 0:
            return 0.0
        return gammainc(0.5 * self.df, 0.5 * x)

    def sf(self, x: float) -> float:
        if math.isnan(x):
            return math.nan
        if x <= 0:
            return 1.0
        return gammaincc(0.5 * self.df, 0.5 * x)

    def _initial_guess(self, p_lower: float, p_upper: float) -> float:
        """
        Wilson–Hilferty approximation of the quantile.

        ``(X/k)^(1/3)`` is approximately normal with mean ``1 - 2/(9k)`` and
        variance ``2/(9k)``. Where that cube base is not positive the lower
        tail power law ``P(X ≤ x) ≈ (x/2)^(k/2) / Γ(k/2 + 1)`` is inverted.
        """
        k = self.df
        z = ndtri(p_lower) if p_lower <= p_upper else -ndtri(p_upper)
        c = 2.0 / (9.0 * k)
        base = 1.0 - c + z * math.sqrt(c)
        if base > 0:
            return k * base**3

        half_k = 0.5 * k
        return 2.0 * math.exp((math.log(p_lower) + math.lgamma(half_k + 1.0)) / half_k)

    def _solve(self, p: float, upper_tail: bool) -> float:
        p_lower, p_upper = (1.0 - p, p) if upper_tail else (p, 1.0 - p)
        return fit_quantile(
            p,
            cdf=self.cdf,
            sf=self.sf,
            pdf=self.pdf,
            x0=self._initial_guess(p_lower, p_upper),
            lower=0.0,
            upper_tail=upper_tail,
        )

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
            Quantile; ``0`` at ``p = 0``, ``inf`` at ``p = 1``,
            ``nan`` outside [0, 1]
        """
        if not 0.0 <= p <= 1.0:
            return math.nan
        if p == 0.0:
            return 0.0
        if p == 1.0:
            return math.inf
        return self._solve(p, upper_tail=False)

    def isf(self, q: float) -> float:
        """Inverse survival function, solved on the upper tail."""
        if not 0.0 <= q <= 1.0:
            return math.nan
        if q == 0.0:
            return math.inf
        if q == 1.0:
            return 0.0
        return self._solve(q, upper_tail=True)

    def mean(self) -> float:
        return self.df

    def variance(self) -> float:
        return 2.0 * self.df

    def skewness(self) -> float:
        return math.sqrt(8.0 / self.df)

    def kurtosis(self, excess: bool = False) -> float:
        ex = 12.0 / self.df
        return ex if excess else ex + 3.0


def configure_chi_squared_family() -> None:
    """
    Register the Chi-squared distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.CHI_SQUARED):
        return
    ParametricFamilyRegister.register(ChiSquared)
