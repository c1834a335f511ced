"""
Quantile Fitters
================

Safeguarded Newton–Raphson inversion of a scalar distribution tail, used to
build ``ppf`` / ``isf`` for families without a closed-form quantile.

- :func:`safeguarded_newton` — solve ``tail(x) = target`` on ``[lower, inf)``.
- :func:`fit_quantile` — choose the tail (``cdf`` or ``sf``) whose target
  probability is at most one half and solve on it.

Notes
-----
- The upper bracket end starts at the initial guess and doubles until the
  root is enclosed; the lower end starts at the support bound. Iteration
  starts from the guess itself whenever it lies in the bracket.
- Newton steps are taken on ``log(tail)`` against ``log(x - lower)``, so deep
  power-law and exponential tails are crossed in a few steps.
- A step that leaves the bracket, is not finite, uses a density below
  ``min_density``, or fails to halve the step taken two iterations before is
  replaced by bisection. Brackets spanning decades are split geometrically.
- Convergence is declared when the residual drops below ``tol`` times the
  target probability, or when the step or the bracket shrinks to machine
  resolution. Otherwise the last iterate is returned.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
import sys
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from typing import Any

    from pysatl_stats.types import ScalarFunc

logger = logging.getLogger(__name__)

PPF_TOL: Final = 1e-12
PPF_MAX_ITER: Final = 100
MAX_EXPAND: Final = 1100
MIN_DENSITY: Final = 1e-300
_X_RESOLUTION: Final = 4.0 * sys.float_info.epsilon
_MAX_LOG_STEP: Final = 700.0


def safeguarded_newton(
    tail: ScalarFunc,
    target: float,
    *,
    pdf: ScalarFunc,
    x0: float,
    lower: float = 0.0,
    decreasing: bool = False,
    tol: float = PPF_TOL,
    max_iter: int = PPF_MAX_ITER,
    max_expand: int = MAX_EXPAND,
    min_density: float = MIN_DENSITY,
) -> float:
    """
    Solve ``tail(x) = target`` for ``x >= lower``.

    Parameters
    ----------
    tail : Callable[[float], float]
        Monotone tail probability: the ``cdf`` (``decreasing=False``) or the
        ``sf`` (``decreasing=True``).
    target : float
        Target probability in ``(0, 1)``.
    pdf : Callable[[float], float]
        Density, the derivative of the ``cdf``.
    x0 : float
        Initial guess; values not finite or not above ``lower`` fall back to
        ``lower + 1``.
    lower : float, default 0.0
        Finite lower end of the search range, with ``tail`` on the correct
        side of ``target`` there.
    decreasing : bool, default False
        Whether ``tail`` decreases in ``x``.
    tol : float, default 1e-12
        Residual tolerance relative to ``target``.
    max_iter : int, default 100
        Maximum Newton/bisection iterations.
    max_expand : int, default 1100
        Maximum doublings of the upper bracket end.
    min_density : float, default 1e-300
        Densities below this are not trusted for a Newton step.

    Returns
    -------
    float
        Approximate root.
    """
    sign = -1.0 if decreasing else 1.0

    def residual(x: float) -> float:
        # Increasing in x for either tail.
        return sign * (tail(x) - target)

    if not (math.isfinite(x0) and x0 > lower):
        x0 = lower + 1.0
    lo, hi = lower, x0
    r_hi = residual(hi)
    for _ in range(max_expand):
        if r_hi >= 0.0:
            break
        lo = hi
        hi = lower + 2.0 * (hi - lower)
        r_hi = residual(hi)
    if r_hi < 0.0:
        logger.debug("quantile bracket expansion exhausted: target=%r, hi=%r", target, hi)
        return hi
    if r_hi == 0.0:
        return hi

    x = x0 if lo <= x0 <= hi else _bisect(lo, hi, lower)
    dx_old = dx = math.inf
    for _ in range(max_iter):
        value = tail(x)
        r = sign * (value - target)
        if abs(r) <= tol * target:
            return x
        if r < 0.0:
            lo = x
        else:
            hi = x

        density = pdf(x)
        if density >= min_density and math.isfinite(density):
            x_new = _newton_step(x, value, target, density, lower=lower, sign=sign)
        else:
            x_new = math.nan
        if not lo < x_new < hi or abs(x_new - x) > 0.5 * abs(dx_old):
            x_new = _bisect(lo, hi, lower)
        dx_old, dx = dx, x_new - x

        if abs(dx) <= _X_RESOLUTION * abs(x_new) or hi - lo <= _X_RESOLUTION * abs(x_new):
            return x_new
        x = x_new

    logger.debug("quantile iteration did not converge: target=%r, x=%r", target, x)
    return x


def _newton_step(
    x: float, value: float, target: float, density: float, *, lower: float, sign: float
) -> float:
    """
    Newton step on ``log(tail)`` against ``log(x - lower)``.

    Power-law and exponential tails are close to linear in these coordinates.
    Falls back to a plain Newton step at the support bound or where the tail
    underflows.
    """
    offset = x - lower
    if value > 0.0 and offset > 0.0:
        log_residual = sign * (math.log(value) - math.log(target))
        log_step = -log_residual * value / (density * offset)
        log_step = min(max(log_step, -_MAX_LOG_STEP), _MAX_LOG_STEP)
        return lower + offset * math.exp(log_step)
    return x - sign * (value - target) / density


def _bisect(lo: float, hi: float, lower: float) -> float:
    """Split ``[lo, hi]`` geometrically about ``lower`` when it spans decades."""
    span_lo, span_hi = lo - lower, hi - lower
    if span_lo > 0.0 and span_hi > 4.0 * span_lo:
        return lower + math.sqrt(span_lo) * math.sqrt(span_hi)
    return lo + 0.5 * (hi - lo)


def fit_quantile(
    p: float,
    *,
    cdf: ScalarFunc,
    sf: ScalarFunc,
    pdf: ScalarFunc,
    x0: float,
    lower: float = 0.0,
    upper_tail: bool = False,
    **options: Any,
) -> float:
    """
    Invert a distribution on whichever tail keeps the target small.

    Parameters
    ----------
    p : float
        Probability in ``(0, 1)``: lower-tail probability, or upper-tail
        probability if ``upper_tail`` is set.
    cdf, sf, pdf : Callable[[float], float]
        Distribution characteristics.
    x0 : float
        Initial guess.
    lower : float, default 0.0
        Lower end of the support.
    upper_tail : bool, default False
        Interpret ``p`` as ``P(X > x)`` (inverse survival function).
    **options
        Forwarded to :func:`safeguarded_newton`.

    Returns
    -------
    float
        ``x`` with ``cdf(x) = p`` (or ``sf(x) = p`` when ``upper_tail``).
    """
    if upper_tail:
        p_lower, p_upper = 1.0 - p, p
    else:
        p_lower, p_upper = p, 1.0 - p

    if p_lower <= p_upper:
        return safeguarded_newton(cdf, p_lower, pdf=pdf, x0=x0, lower=lower, **options)
    return safeguarded_newton(
        sf, p_upper, pdf=pdf, x0=x0, lower=lower, decreasing=True, **options
    )
