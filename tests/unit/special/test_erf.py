"""
Tests for the normal CDF, its inverse and the inverse error function.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest
from scipy import special as sp

from pysatl_stats.special import erfinv, ndtr, ndtri

PROBABILITIES = [1e-300, 1e-20, 1e-10, 1e-3, 0.02, 0.02425, 0.3, 0.5, 0.7, 0.975, 0.999]


class TestNdtr:
    @pytest.mark.parametrize("x", [-30.0, -5.0, -1.0, 0.0, 0.3, 2.0, 8.0])
    def test_against_scipy(self, x):
        assert ndtr(x) == pytest.approx(sp.ndtr(x), rel=1e-12, abs=1e-300)

    def test_infinities(self):
        assert ndtr(-math.inf) == 0.0
        assert ndtr(math.inf) == 1.0


class TestNdtri:
    def test_concrete_value(self):
        assert ndtri(0.975) == pytest.approx(1.959963984540054, rel=1e-12)

    @pytest.mark.parametrize("p", PROBABILITIES)
    def test_against_scipy(self, p):
        assert ndtri(p) == pytest.approx(sp.ndtri(p), rel=1e-11, abs=1e-14)

    @pytest.mark.parametrize("p", PROBABILITIES)
    def test_round_trip_through_ndtr(self, p):
        assert ndtr(ndtri(p)) == pytest.approx(p, rel=1e-11)

    @pytest.mark.parametrize("p", [1e-8, 0.01, 0.2, 0.45])
    def test_antisymmetric(self, p):
        assert ndtri(1.0 - p) == pytest.approx(-ndtri(p), rel=1e-9)

    def test_boundaries(self):
        assert ndtri(0.0) == -math.inf
        assert ndtri(1.0) == math.inf
        assert ndtri(0.5) == 0.0

    @pytest.mark.parametrize("p", [-0.1, 1.1, math.nan])
    def test_outside_unit_interval_gives_nan(self, p):
        assert math.isnan(ndtri(p))


class TestErfinv:
    def test_concrete_value(self):
        assert erfinv(0.5) == pytest.approx(0.4769362762044701, rel=1e-12)

    @pytest.mark.parametrize("y", [-0.9, -0.5, 0.1, 0.5, 0.9, 0.999])
    def test_against_scipy(self, y):
        assert erfinv(y) == pytest.approx(sp.erfinv(y), rel=1e-10)

    @pytest.mark.parametrize("y", [-0.75, -0.2, 0.3, 0.6, 0.95])
    def test_inverts_erf(self, y):
        assert math.erf(erfinv(y)) == pytest.approx(y, abs=1e-14)

    def test_boundaries(self):
        assert erfinv(0.0) == 0.0
        assert erfinv(1.0) == math.inf
        assert erfinv(-1.0) == -math.inf

    @pytest.mark.parametrize("y", [-1.5, 1.0000001, math.nan])
    def test_outside_domain_gives_nan(self, y):
        assert math.isnan(erfinv(y))
