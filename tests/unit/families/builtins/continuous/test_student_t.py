"""
Tests for Student's t Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest
from scipy.stats import t as student_t

from pysatl_stats.distributions.support import REAL_LINE
from pysatl_stats.families.configuration import configure_families_register
from pysatl_stats.types import FamilyName

from .base import ROUND_TRIP_PROBABILITIES, BaseDistributionTest

DFS = [1.0, 2.5, 5.0, 30.0, 1000.0]
POINTS = [-40.0, -4.0, -1.5, -0.3, 0.0, 0.7, 2.0, 6.0]


class TestStudentTFamily(BaseDistributionTest):
    """Test suite for Student's t distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.family = registry.get(FamilyName.STUDENT_T)

    def test_creation(self):
        """Test creation of distribution."""
        dist = self.family(df=5.0)
        assert dist.family_name == FamilyName.STUDENT_T
        assert dist.parameters == {"df": 5.0}
        assert dist.support is REAL_LINE

    @pytest.mark.parametrize("df", DFS)
    @pytest.mark.parametrize("x", POINTS)
    def test_pdf_and_log_pdf(self, df, x):
        """Test density and log-density against scipy."""
        dist = self.family(df=df)
        self.assert_close(dist.pdf(x), student_t.pdf(x, df), abs_tol=1e-300)
        self.assert_close(dist.log_pdf(x), student_t.logpdf(x, df))

    @pytest.mark.parametrize("df", DFS)
    @pytest.mark.parametrize("x", POINTS)
    def test_cdf_and_sf(self, df, x):
        """Test distribution function and survival function against scipy."""
        dist = self.family(df=df)
        self.assert_close(dist.cdf(x), student_t.cdf(x, df), abs_tol=1e-14)
        self.assert_close(dist.sf(x), student_t.sf(x, df), abs_tol=1e-14)

    def test_cdf_symmetry(self):
        """Test that cdf(-x) + cdf(x) == 1."""
        dist = self.family(df=3.0)
        for x in (0.1, 1.0, 2.5, 10.0):
            self.assert_close(dist.cdf(-x) + dist.cdf(x), 1.0, 1e-12)

    @pytest.mark.parametrize("df", DFS)
    def test_pdf_symmetry(self, df):
        """Test that pdf(x) == pdf(-x)."""
        dist = self.family(df=df)
        for x in (0.3, 2.0, 40.0):
            assert dist.pdf(x) == dist.pdf(-x)

    @pytest.mark.parametrize("df, x", [(100.0, 8.0), (1e4, 10.0), (1e4, 6.0), (30.0, 3.0)])
    def test_large_df_tails_are_relative_accurate(self, df, x):
        """Test that the smaller tail keeps relative accuracy where it is far below 1."""
        dist = self.family(df=df)
        expected = student_t.sf(x, df)
        self.assert_close(dist.sf(x), expected, 1e-8)
        self.assert_close(dist.cdf(-x), expected, 1e-8)
        self.assert_close(dist.cdf(x), student_t.cdf(x, df), 1e-12)

    @pytest.mark.parametrize("df, q", [(1e4, 1e-20), (1e4, 1e-10), (100.0, 1e-15)])
    def test_large_df_isf_against_scipy(self, df, q):
        """Test upper quantiles of nearly normal t distributions."""
        dist = self.family(df=df)
        self.assert_close(dist.isf(q), student_t.isf(q, df), 1e-8)
        self.assert_close(dist.ppf(q), student_t.ppf(q, df), 1e-8)

    def test_cdf_at_infinity_and_nan(self):
        """Test non-finite inputs."""
        dist = self.family(df=4.0)
        assert dist.cdf(math.inf) == 1.0
        assert dist.cdf(-math.inf) == 0.0
        assert dist.sf(math.inf) == 0.0
        assert math.isnan(dist.cdf(math.nan))

    @pytest.mark.parametrize("df", DFS)
    @pytest.mark.parametrize("p", [0.001, 0.025, 0.3, 0.5, 0.8, 0.975, 0.999])
    def test_ppf_against_scipy(self, df, p):
        """Test quantiles against scipy."""
        dist = self.family(df=df)
        self.assert_close(dist.ppf(p), student_t.ppf(p, df), abs_tol=1e-12)

    @pytest.mark.parametrize("df", DFS)
    @pytest.mark.parametrize("p", ROUND_TRIP_PROBABILITIES)
    def test_round_trip(self, df, p):
        """Test that cdf(ppf(p)) recovers p and isf mirrors ppf."""
        dist = self.family(df=df)
        x = dist.ppf(p)
        self.assert_close(dist.cdf(x), p, self.ROUND_TRIP_PRECISION)
        self.assert_close(dist.isf(p), -x, 1e-12)

    def test_ppf_is_antisymmetric(self):
        """Test that ppf(1 - p) == -ppf(p)."""
        dist = self.family(df=7.0)
        for p in (0.01, 0.2, 0.4):
            self.assert_close(dist.ppf(1.0 - p), -dist.ppf(p), 1e-9)

    def test_one_degree_is_cauchy(self):
        """Test the Cauchy special case of the quantile."""
        dist = self.family(df=1.0)
        self.assert_close(dist.ppf(0.75), 1.0, 1e-10)
        self.assert_close(dist.ppf(0.975), math.tan(math.pi * 0.475), 1e-10)

    def test_quantile_boundaries(self):
        """Test quantiles at and outside the unit interval."""
        dist = self.family(df=3.0)
        assert dist.ppf(0.0) == -math.inf
        assert dist.ppf(1.0) == math.inf
        assert dist.ppf(0.5) == 0.0
        assert math.isnan(dist.ppf(2.0))
        assert dist.isf(0.0) == math.inf

    @pytest.mark.parametrize("df", [5.5, 10.0, 30.0])
    def test_moments_against_scipy(self, df):
        """Test moments where they exist."""
        dist = self.family(df=df)
        mean, var, skew, kurt = student_t.stats(df, moments="mvsk")
        self.assert_close(dist.mean(), float(mean), abs_tol=1e-15)
        self.assert_close(dist.variance(), float(var))
        self.assert_close(dist.std(), math.sqrt(float(var)))
        self.assert_close(dist.skewness(), float(skew), abs_tol=1e-15)
        self.assert_close(dist.kurtosis(excess=True), float(kurt))
        self.assert_close(dist.kurtosis(), float(kurt) + 3.0)

    @pytest.mark.parametrize(
        "df, mean_defined, var_defined, skew_defined, kurt_defined",
        [
            (0.5, False, False, False, False),
            (1.0, False, False, False, False),
            (1.5, True, False, False, False),
            (2.0, True, False, False, False),
            (3.0, True, True, False, False),
            (4.0, True, True, True, False),
            (4.5, True, True, True, True),
        ],
    )
    def test_undefined_moments_are_nan(
        self, df, mean_defined, var_defined, skew_defined, kurt_defined
    ):
        """Test that moments beyond the available order are nan."""
        dist = self.family(df=df)
        assert math.isnan(dist.mean()) is not mean_defined
        assert math.isnan(dist.variance()) is not var_defined
        assert math.isnan(dist.skewness()) is not skew_defined
        assert math.isnan(dist.kurtosis()) is not kurt_defined

    def test_sampling(self):
        """Test sampling by inverse transform."""
        self.check_sample(self.family(df=4.0), scipy_mean=0.0)
