"""
Tests for Normal Distribution Family

This module tests the functionality of the normal distribution family,
including characteristics, quantiles and sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest
from scipy.stats import norm

from pysatl_stats.distributions.support import REAL_LINE
from pysatl_stats.families.configuration import configure_families_register
from pysatl_stats.types import (
    CharacteristicName,
    FamilyName,
    UnivariateContinuous,
)

from .base import ROUND_TRIP_PROBABILITIES, BaseDistributionTest

POINTS = [-40.0, -5.0, -1.0, 0.0, 1.0, 2.0, 3.0, 4.0, 9.0, 40.0]


class TestNormalFamily(BaseDistributionTest):
    """Test suite for Normal distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.normal_family = registry.get(FamilyName.NORMAL)
        self.normal_dist_example = self.normal_family(mu=2.0, sigma=1.5)

    def test_creation(self):
        """Test creation of distribution."""
        dist = self.normal_family(mu=2.0, sigma=1.5)

        assert dist.family_name == FamilyName.NORMAL
        assert dist.distribution_type == UnivariateContinuous
        assert dist.parameters == {"mu": 2.0, "sigma": 1.5}

    def test_standard_density_at_zero(self):
        """Test the density of the standard normal at its mode."""
        self.assert_close(self.normal_family(mu=0.0, sigma=1.0).pdf(0.0), 0.3989422804014327, 1e-15)

    @pytest.mark.parametrize("x", POINTS)
    def test_pdf_and_log_pdf(self, x):
        """Test density and log-density against scipy."""
        dist = self.normal_dist_example
        self.assert_close(dist.pdf(x), norm.pdf(x, loc=2.0, scale=1.5), abs_tol=1e-300)
        self.assert_close(dist.log_pdf(x), norm.logpdf(x, loc=2.0, scale=1.5))

    @pytest.mark.parametrize("x", POINTS)
    def test_cdf_and_sf(self, x):
        """Test that both tails are computed directly, matching scipy."""
        dist = self.normal_dist_example
        self.assert_close(dist.cdf(x), norm.cdf(x, loc=2.0, scale=1.5), 1e-12, abs_tol=1e-300)
        self.assert_close(dist.sf(x), norm.sf(x, loc=2.0, scale=1.5), 1e-12, abs_tol=1e-300)

    @pytest.mark.parametrize("x", [0.0, 0.3, 1.0, 2.5, 6.0, 12.0])
    def test_standard_cdf_symmetry(self, x):
        """Test that cdf(x) + cdf(-x) == 1 and the lower tail mirrors the upper one."""
        dist = self.normal_family(mu=0.0, sigma=1.0)
        self.assert_close(dist.cdf(x) + dist.cdf(-x), 1.0, 1e-15)
        assert dist.cdf(-x) == dist.sf(x)
        assert dist.pdf(-x) == dist.pdf(x)

    @pytest.mark.parametrize("p", [1e-200, 1e-10, 0.001, 0.25, 0.5, 0.75, 0.999, 1 - 1e-12])
    def test_ppf_and_isf(self, p):
        """Test quantiles against scipy."""
        dist = self.normal_dist_example
        self.assert_close(dist.ppf(p), norm.ppf(p, loc=2.0, scale=1.5), 1e-11, abs_tol=1e-12)
        self.assert_close(dist.isf(p), norm.isf(p, loc=2.0, scale=1.5), 1e-11, abs_tol=1e-12)

    @pytest.mark.parametrize("p", ROUND_TRIP_PROBABILITIES)
    def test_round_trip(self, p):
        """Test that cdf(ppf(p)) recovers p."""
        dist = self.normal_dist_example
        self.assert_close(dist.cdf(dist.ppf(p)), p, self.ROUND_TRIP_PRECISION)
        self.assert_close(dist.sf(dist.isf(p)), p, self.ROUND_TRIP_PRECISION)

    def test_quantile_boundaries(self):
        """Test quantiles at and outside the unit interval."""
        dist = self.normal_dist_example
        assert dist.ppf(0.0) == -math.inf
        assert dist.ppf(1.0) == math.inf
        assert dist.ppf(0.5) == 2.0
        assert math.isnan(dist.ppf(1.5))
        assert math.isnan(dist.ppf(-0.5))

    @pytest.mark.parametrize(
        "char_func_getter, expected",
        [
            (lambda distr: distr.query_method(CharacteristicName.MEAN)(None), 2.0),
            (lambda distr: distr.query_method(CharacteristicName.VAR)(None), 2.25),
            (lambda distr: distr.query_method(CharacteristicName.STD)(None), 1.5),
            (lambda distr: distr.query_method(CharacteristicName.SKEW)(None), 0.0),
        ],
    )
    def test_moments(self, char_func_getter, expected):
        """Test moment calculations using parameterized tests."""
        actual = char_func_getter(self.normal_dist_example)
        assert abs(actual - expected) < self.CALCULATION_PRECISION

    def test_kurtosis_calculation(self):
        """Test kurtosis calculation with excess parameter."""
        kurt_func = self.normal_dist_example.query_method(CharacteristicName.KURT)

        assert kurt_func(None) == 3.0
        assert kurt_func(None, excess=True) == 0.0
        assert kurt_func(None, excess=False) == 3.0

    def test_normal_support(self):
        """Test that normal distribution has correct support (entire real line)."""
        support = self.normal_dist_example.support
        assert support is REAL_LINE
        assert -1e300 in support
        assert 1e300 in support

    def test_sampling(self):
        """Test sampling by inverse transform."""
        sample = self.normal_dist_example.sample(5000, rng=0)
        assert sample.shape == (5000, 1)
        assert abs(sample.array.mean() - 2.0) < 0.1
        assert abs(sample.array.std() - 1.5) < 0.1
