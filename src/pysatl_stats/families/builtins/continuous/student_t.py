"""
Student's t distribution family implementation.

CDF and SF are expressed through the regularized incomplete beta function;
the quantile is found by a safeguarded Newton iteration on the upper tail of
the positive half-line and reflected for lower-tail probabilities.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from pysatl_stats.distributions.distribution import Distribution
from pysatl_stats.distributions.fitters import safeguarded_newton
from pysatl_stats.distributions.support import REAL_LINE, ContinuousSupport
from pysatl_stats.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_stats.families.registry import ParametricFamilyRegister
from pysatl_stats.special import betainc, ndtri
from pysatl_stats.types import DistributionType, FamilyName, UnivariateContinuous


@parametrization(family=FamilyName.STUDENT_T)
class StudentT(Parametrization, Distribution):
    """
    Student's t distribution.

    Probability density function:
        f(x) = Γ((ν+1)/2) / (√(νπ) Γ(ν/2)) * (1 + x²/ν)^(-(ν+1)/2)

    Parameters
    ----------
    df : float
        Degrees of freedom ν, ``df > 0``
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
        return REAL_LINE

    def log_pdf(self, x: float) -> float:
        df = self.df
        log_norm = (
            math.lgamma(0.5 * (df + 1.0))
            - math.lgamma(0.5 * df)
            - 0.5 * math.log(df * math.pi)
        )
        return log_norm - 0.5 * (df + 1.0) * math.log1p(x * x / df)

    def pdf(self, x: float) -> float:
        return math.exp(self.log_pdf(x))

    def cdf(self, x: float) -> float:
        """
        Cumulative distribution function.

        The mass beyond ``|x|`` is always ``I_{ν/(ν+x²)}(ν/2, 1/2) / 2``,
        evaluated directly. The larger side near the centre (``x² < ν``)
        comes from ``1/2 + I_{x²/(ν+x²)}(1/2, ν/2) / 2``.
        """
        if math.isnan(x):
            return math.nan
        if math.isinf(x):
            return 1.0 if x > 0 else 0.0

        df = self.df
        x2 = x * x
        if x <= 0:
            return 0.5 * betainc(0.5 * df, 0.5, df / (df + x2))
        if x2 < df:
            return 0.5 + 0.5 * betainc(0.5, 0.5 * df, x2 / (df + x2))
        return 1.0 - 0.5 * betainc(0.5 * df, 0.5, df / (df + x2))

    def sf(self, x: float) -> float:
        """Survival function, by symmetry ``cdf(-x)``."""
        return self.cdf(-x)

    def _initial_guess(self, q: float) -> float:
        """Cornish–Fisher expansion of the upper ``q`` quantile."""
        z = -ndtri(q)
        z2 = z * z
        g1 = (z2 + 1.0) * z / 4.0
        g2 = ((5.0 * z2 + 16.0) * z2 + 3.0) * z / 96.0
        g3 = (((3.0 * z2 + 19.0) * z2 + 17.0) * z2 - 15.0) * z / 384.0
        df = self.df
        return z + g1 / df + g2 / df**2 + g3 / df**3

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
            Quantile; ``-inf`` / ``inf`` at 0 / 1, exactly ``0.0`` at 0.5,
            ``nan`` outside [0, 1]
        """
        if not 0.0 <= p <= 1.0:
            return math.nan
        if p == 0.0:
            return -math.inf
        if p == 1.0:
            return math.inf
        if p == 0.5:
            return 0.0

        q = min(p, 1.0 - p)
        x = safeguarded_newton(
            self.sf,
            q,
            pdf=self.pdf,
            x0=self._initial_guess(q),
            lower=0.0,
            decreasing=True,
        )
        return x if p > 0.5 else -x

    def isf(self, q: float) -> float:
        """Inverse survival function, by symmetry ``-ppf(q)``."""
        return -self.ppf(q)

    def mean(self) -> float:
        return 0.0 if self.df > 1 else math.nan

    def variance(self) -> float:
        df = self.df
        return df / (df - 2.0) if df > 2 else math.nan

    def skewness(self) -> float:
        return 0.0 if self.df > 3 else math.nan

    def kurtosis(self, excess: bool = False) -> float:
        df = self.df
        if df <= 4:
            return math.nan
        ex = 6.0 / (df - 4.0)
        return ex if excess else ex + 3.0


def configure_student_t_family() -> None:
    """
    Register the Student's t distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.STUDENT_T):
        return
    ParametricFamilyRegister.register(StudentT)
