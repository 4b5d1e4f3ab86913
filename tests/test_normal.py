"""Tests for the standard-normal helpers."""

import math
import numpy as np
import pytest
from statistics import NormalDist

from bspricer.normal import (
    normal_cdf, normal_pdf, normal_cdf_vec, normal_pdf_vec, CDF_MAX_ERROR,
)

_nd = NormalDist()
GRID = np.linspace(-6.0, 6.0, 241)


class TestNormalCDF:
    def test_at_zero(self):
        assert abs(normal_cdf(0.0) - 0.5) < 1e-9

    def test_symmetry(self):
        for x in GRID:
            assert abs(normal_cdf(-x) - (1.0 - normal_cdf(x))) < 1e-7

    def test_error_bound_vs_exact(self):
        worst = max(abs(normal_cdf(float(x)) - _nd.cdf(float(x))) for x in GRID)
        assert worst < 1e-7
        assert CDF_MAX_ERROR == 7.5e-8

    def test_known_values(self):
        assert abs(normal_cdf(1.0) - 0.8413447461) < 1e-7
        assert abs(normal_cdf(-1.96) - 0.0249978951) < 1e-7

    def test_saturates_in_tails(self):
        assert normal_cdf(40.0) == 1.0
        assert normal_cdf(-40.0) == 0.0

    def test_range(self):
        values = [normal_cdf(float(x)) for x in GRID]
        assert all(0.0 <= v <= 1.0 for v in values)


class TestNormalPDF:
    def test_peak(self):
        assert normal_pdf(0.0) == 0.3989422804014327

    def test_symmetric(self):
        for x in GRID:
            assert normal_pdf(x) == normal_pdf(-x)

    def test_matches_exact(self):
        for x in (-3.0, -0.5, 0.7, 2.2):
            assert abs(normal_pdf(x) - _nd.pdf(x)) < 1e-15


class TestVectorised:
    def test_cdf_matches_scalar(self):
        expected = np.array([normal_cdf(float(x)) for x in GRID])
        np.testing.assert_allclose(normal_cdf_vec(GRID), expected, rtol=0, atol=1e-14)

    def test_pdf_matches_scalar(self):
        expected = np.array([normal_pdf(float(x)) for x in GRID])
        np.testing.assert_allclose(normal_pdf_vec(GRID), expected, rtol=0, atol=1e-15)

    def test_scalar_input(self):
        assert abs(float(normal_cdf_vec(0.0)) - 0.5) < 1e-9
