"""Tests for the standard-normal approximations."""

import math

import numpy as np
import pytest
from scipy.stats import norm

from bspricer.normal import (
    norm_cdf, norm_pdf, norm_cdf_vec, norm_pdf_vec,
    INV_SQRT_2PI, MAX_CDF_ERROR,
)

XS = np.linspace(-8.0, 8.0, 16_001)


class TestNormCDF:
    def test_error_bound_vs_scipy(self):
        err = np.max(np.abs(norm_cdf_vec(XS) - norm.cdf(XS)))
        assert err <= MAX_CDF_ERROR

    def test_scalar_error_bound(self):
        for x in (-3.0, -1.0, -0.25, 0.0, 0.5, 1.0, 1.96, 4.0):
            assert abs(norm_cdf(x) - norm.cdf(x)) <= MAX_CDF_ERROR

    def test_centre(self):
        assert abs(norm_cdf(0.0) - 0.5) < 1e-8

    @pytest.mark.parametrize("x", [0.0, 0.1, 0.7, 1.5, 3.0, 6.0, 12.0, 40.0])
    def test_symmetry(self, x):
        assert abs(norm_cdf(-x) - (1.0 - norm_cdf(x))) < 1e-8

    def test_tails(self):
        assert norm_cdf(-40.0) == pytest.approx(0.0, abs=1e-12)
        assert norm_cdf(40.0) == pytest.approx(1.0, abs=1e-12)

    def test_monotone(self):
        xs = np.linspace(-4.0, 4.0, 8_001)
        assert np.all(np.diff(norm_cdf_vec(xs)) > 0.0)

    def test_vec_matches_scalar(self):
        xs = np.array([-2.5, -0.3, 0.0, 0.3, 2.5])
        expected = [norm_cdf(x) for x in xs]
        np.testing.assert_allclose(norm_cdf_vec(xs), expected, rtol=0, atol=1e-15)


class TestNormPDF:
    def test_constant(self):
        assert INV_SQRT_2PI == pytest.approx(1.0 / math.sqrt(2.0 * math.pi), rel=1e-15)

    def test_peak_at_zero(self):
        assert norm_pdf(0.0) == INV_SQRT_2PI
        vals = norm_pdf_vec(XS)
        assert np.all(vals >= 0.0)
        assert vals.max() <= norm_pdf(0.0)
        assert norm_pdf(0.5) < norm_pdf(0.0)

    def test_matches_scipy(self):
        np.testing.assert_allclose(norm_pdf_vec(XS), norm.pdf(XS), rtol=1e-12, atol=1e-300)

    def test_even(self):
        for x in (0.2, 1.0, 3.3):
            assert norm_pdf(x) == norm_pdf(-x)
