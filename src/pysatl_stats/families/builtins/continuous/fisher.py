"""
Fisher–Snedecor F distribution family implementation.

With ``u = d1·x / (d1·x + d2)`` the CDF is ``I_u(d1/2, d2/2)`` and the SF is
``I_{1-u}(d2/2, d1/2)``; whichever of ``u`` and ``1 - u`` is smaller is formed
directly to avoid cancellation.
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
from pysatl_stats.special import betainc, log_beta
from pysatl_stats.types import DistributionType, FamilyName, UnivariateContinuous

_MAX_EXPONENT: Final = 700.0


def _clip_exponent(value: float) -> float:
    return min(max(value, -_MAX_EXPONENT), _MAX_EXPONENT)


@parametrization(family=FamilyName.F)
class FDist(Parametrization, Distribution):
    """
    F distribution.

    Probability density function:
        f(x) = (d1/d2)^(d1/2) x^(d1/2-1) (1 + d1·x/d2)^(-(d1+d2)/2) / B(d1/2, d2/2)

    At ``x = 0`` the density is ``inf`` for ``d1 < 2``, ``1`` for ``d1 = 2``
    and ``0`` for ``d1 > 2``.

    Parameters
    ----------
    dfn : float
        Numerator degrees of freedom d1, ``dfn > 0``
    dfd : float
        Denominator degrees of freedom d2, ``dfd > 0``
    """

    dfn: float
    dfd: float

    @constraint(description="dfn > 0")
    def check_dfn_positive(self) -> bool:
        """Check that numerator degrees of freedom are positive."""
        return self.dfn > 0

    @constraint(description="dfd > 0")
    def check_dfd_positive(self) -> bool:
        """Check that denominator degrees of freedom are positive."""
        return self.dfd > 0

    @property
    def distribution_type(self) -> DistributionType:
        return UnivariateContinuous

    @property
    def support(self) -> ContinuousSupport:
        return NON_NEGATIVE_HALF_LINE

    def _density_at_zero(self) -> float:
        if self.dfn < 2:
            return math.inf
        if self.dfn == 2:
            return 1.0
        return 0.0

    def log_pdf(self, x: float) -> float:
        if math.isnan(x):
            return math.nan
        if x < 0 or math.isinf(x):
            return -math.inf
        if x == 0:
            density = self._density_at_zero()
            return math.log(density) if density > 0 else -math.inf

        d1, d2 = self.dfn, self.dfd
        h1, h2 = 0.5 * d1, 0.5 * d2
        return (
            h1 * math.log(d1 / d2)
            + (h1 - 1.0) * math.log(x)
            - (h1 + h2) * math.log1p(d1 * x / d2)
            - log_beta(h1, h2)
        )

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
        if math.isinf(x):
            return 1.0

        d1, d2 = self.dfn, self.dfd
        d1x = d1 * x
        if d1x <= d2:
            return betainc(0.5 * d1, 0.5 * d2, d1x / (d1x + d2))
        return 1.0 - betainc(0.5 * d2, 0.5 * d1, d2 / (d2 + d1x))

    def sf(self, x: float) -> float:
        if math.isnan(x):
            return math.nan
        if x <= 0:
            return 1.0
        if math.isinf(x):
            return 0.0

        d1, d2 = self.dfn, self.dfd
        d1x = d1 * x
        if d1x >= d2:
            return betainc(0.5 * d2, 0.5 * d1, d2 / (d2 + d1x))
        return 1.0 - betainc(0.5 * d1, 0.5 * d2, d1x / (d1x + d2))

    def _initial_guess(self, p_lower: float, p_upper: float) -> float:
        """
        Starting point on the tail being solved.

        Inverts the power laws ``P(X ≤ x) ≈ (d1·x/d2)^(d1/2) / ((d1/2)·B)`` and
        ``P(X > x) ≈ (d2/(d1·x))^(d2/2) / ((d2/2)·B)``, ``B = B(d1/2, d2/2)``.
        Each power law bounds its tail from above, so the guess lies further
        out than the root; the mean (or 1) caps it on the other side.
        """
        d1, d2 = self.dfn, self.dfd
        h1, h2 = 0.5 * d1, 0.5 * d2
        central = d2 / (d2 - 2.0) if d2 > 2 else 1.0
        log_b = log_beta(h1, h2)
        if p_lower <= p_upper:
            exponent = (math.log(p_lower) + math.log(h1) + log_b) / h1
            return min(central, d2 / d1 * math.exp(_clip_exponent(exponent)))
        exponent = -(math.log(p_upper) + math.log(h2) + log_b) / h2
        return max(central, d2 / d1 * math.exp(_clip_exponent(exponent)))

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
        d2 = self.dfd
        return d2 / (d2 - 2.0) if d2 > 2 else math.nan

    def variance(self) -> float:
        d1, d2 = self.dfn, self.dfd
        if d2 <= 4:
            return math.nan
        return 2.0 * d2**2 * (d1 + d2 - 2.0) / (d1 * (d2 - 2.0) ** 2 * (d2 - 4.0))

    def skewness(self) -> float:
        d1, d2 = self.dfn, self.dfd
        if d2 <= 6:
            return math.nan
        return (
            (2.0 * d1 + d2 - 2.0)
            * math.sqrt(8.0 * (d2 - 4.0))
            / ((d2 - 6.0) * math.sqrt(d1 * (d1 + d2 - 2.0)))
        )

    def kurtosis(self, excess: bool = False) -> float:
        d1, d2 = self.dfn, self.dfd
        if d2 <= 8:
            return math.nan
        numerator = 12.0 * (d1 * (5.0 * d2 - 22.0) * (d1 + d2 - 2.0) + (d2 - 4.0) * (d2 - 2.0) ** 2)
        ex = numerator / (d1 * (d2 - 6.0) * (d2 - 8.0) * (d1 + d2 - 2.0))
        return ex if excess else ex + 3.0


def configure_f_family() -> None:
    """
    Register the F distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.F):
        return
    ParametricFamilyRegister.register(FDist)
