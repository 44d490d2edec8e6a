#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Bivariate Polynomial Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
License:        MIT License
================================================================================
"""

import numpy as np
import pytest
from phasediagram.bivariate import BivariatePolynomial
from phasediagram.polynomial import Polynomial


def sample_polynomial():
    """P(x, y) = 1 + 2x + (3 - x^2) y + 4x y^2."""
    p = BivariatePolynomial(2)
    p[0] = [1.0, 2.0]
    p[1] = Polynomial([3.0, 0.0, -1.0])
    p[2] = [0.0, 4.0]
    return p


def sample_value(x, y):
    return 1.0 + 2.0 * x + (3.0 - x ** 2) * y + 4.0 * x * y ** 2


class TestBivariatePolynomial:
    """Tests for construction and evaluation."""

    def test_construction(self):
        """A new polynomial holds degree + 1 zero slots."""
        p = BivariatePolynomial(3)
        assert p.degree == 3
        assert len(p) == 4
        assert p(1.5, -2.0) == 0.0

    def test_slot_assignment(self):
        """Slots accept sequences and Polynomial instances."""
        p = sample_polynomial()
        assert isinstance(p[0], Polynomial)
        assert np.allclose(p[1].coefficients, [3.0, 0.0, -1.0])

    def test_evaluation(self):
        """Evaluation matches the closed form."""
        p = sample_polynomial()
        for x, y in [(0.0, 0.0), (1.0, 2.0), (-0.5, 1.5), (2.0, -3.0)]:
            assert p(x, y) == pytest.approx(sample_value(x, y))

    def test_copy_is_deep(self):
        """Differentiating a copy leaves the original intact."""
        p = sample_polynomial()
        p.copy().differentiate(1, 1)
        assert p(1.0, 2.0) == pytest.approx(sample_value(1.0, 2.0))


class TestPartialDerivatives:
    """Tests for in-place partial differentiation."""

    def test_returns_self(self):
        p = sample_polynomial()
        assert p.differentiate(1, 0) is p

    def test_derivative_x(self):
        """dP/dx = 2 - 2x y + 4 y^2."""
        p = sample_polynomial().differentiate(1, 0)
        for x, y in [(0.0, 0.0), (1.0, 2.0), (-0.5, 1.5)]:
            assert p(x, y) == pytest.approx(2.0 - 2.0 * x * y + 4.0 * y ** 2)

    def test_derivative_y(self):
        """dP/dy = 3 - x^2 + 8x y."""
        p = sample_polynomial().differentiate(0, 1)
        assert p.degree == 1
        for x, y in [(0.0, 0.0), (1.0, 2.0), (-0.5, 1.5)]:
            assert p(x, y) == pytest.approx(3.0 - x ** 2 + 8.0 * x * y)

    def test_second_derivatives(self):
        """Pure and mixed second derivatives."""
        x, y = 0.7, -1.3
        assert sample_polynomial().differentiate(2, 0)(x, y) == pytest.approx(-2.0 * y)
        assert sample_polynomial().differentiate(0, 2)(x, y) == pytest.approx(8.0 * x)
        assert sample_polynomial().differentiate(1, 1)(x, y) == pytest.approx(-2.0 * x + 8.0 * y)

    def test_outer_degree_normalized(self):
        """Slots that vanish after differentiation are dropped."""
        p = BivariatePolynomial(2)
        p[0] = [1.0, 1.0]
        p[2] = [5.0]
        p.differentiate(1, 0)
        assert p.degree == 0
        assert p(3.0, 4.0) == pytest.approx(1.0)

    def test_differentiate_past_degree(self):
        """Differentiating a degree-0 polynomial in y gives zero."""
        p = BivariatePolynomial(0)
        p[0] = [1.0, 2.0, 3.0]
        p.differentiate(0, 2)
        assert p.degree == 0
        assert p(1.0, 1.0) == 0.0
