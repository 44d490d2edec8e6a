#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Phase Solver Tests
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
from phasediagram.solver import PhaseSolver, most_stable_index, stable_potential
from phasediagram.thermodynamics import (
    Coefficients, PhaseFamily, PhaseRecord, invariants, landau_potential
)


def quadratic_form(a, b, c):
    """P(x, y) = a x² + b x y + c y²."""
    p = BivariatePolynomial(2)
    p[0] = [0.0, 0.0, a]
    p[1] = [0.0, b]
    p[2] = [c]
    return p


def isotropic_coefficients(alpha1):
    """Φ = α1·I1 + I1² + I1³ + I2², no odd terms."""
    return Coefficients(alpha1=alpha1, alpha2=1.0, alpha3=1.0, alpha4=0.0,
                        beta1=0.0, beta2=1.0, delta1=0.0, delta2=0.0, delta3=0.0)


class TestStabilityTest:
    """Tests for the local minimum test."""

    def test_minimum_accepted(self):
        """x² + y² has a minimum at the origin."""
        assert stable_potential(quadratic_form(1.0, 0.0, 1.0), 0.0, 0.0) == 0.0

    def test_minimum_returns_potential(self):
        """The accepted value is the potential at the point."""
        p = quadratic_form(1.0, 0.0, 1.0)
        p[0] = [3.0, 0.0, 1.0]
        assert stable_potential(p, 0.0, 0.0) == pytest.approx(3.0)

    def test_maximum_rejected(self):
        """A maximum has a positive Hessian but a negative second derivative."""
        assert stable_potential(quadratic_form(-1.0, 0.0, -1.0), 0.0, 0.0) is None

    def test_saddle_rejected(self):
        """x² - y² is a saddle."""
        assert stable_potential(quadratic_form(1.0, 0.0, -1.0), 0.0, 0.0) is None

    def test_degenerate_rejected(self):
        """A zero Hessian determinant is not a strict minimum."""
        assert stable_potential(quadratic_form(1.0, 2.0, 1.0), 0.0, 0.0) is None

    def test_potential_unchanged(self):
        """The test does not modify the potential it is given."""
        p = quadratic_form(1.0, 0.5, 2.0)
        before = p(0.3, 0.4)
        stable_potential(p, 0.1, 0.1)
        assert p(0.3, 0.4) == before


class TestMostStable:
    """Tests for picking the most stable phase."""

    def test_empty(self):
        assert most_stable_index([]) is None

    def test_lowest_potential(self):
        phases = [PhaseRecord(PhaseFamily.SYMMETRIC, 0.0),
                  PhaseRecord(PhaseFamily.POSITIVE, -2.0, (1.0, 0.0)),
                  PhaseRecord(PhaseFamily.NEGATIVE, -1.0, (-1.0, 0.0))]
        assert most_stable_index(phases) == 1

    def test_ties_pick_first(self):
        """Equal potentials resolve to the earliest phase."""
        phases = [PhaseRecord(PhaseFamily.NEGATIVE, -1.0, (-1.0, 0.0)),
                  PhaseRecord(PhaseFamily.POSITIVE, -1.0, (1.0, 0.0))]
        assert most_stable_index(phases) == 0


class TestPotentials:
    """Tests for the two polynomial forms of the model potential."""

    @pytest.fixture
    def coefficients(self):
        return Coefficients(alpha1=-1.5, alpha2=0.7, alpha3=1.2, alpha4=0.3,
                            beta1=-0.8, beta2=0.9, delta1=0.4, delta2=-0.6, delta3=0.25)

    def test_order_parameter_form(self, coefficients):
        """Φ(η1, η2) agrees with the direct evaluation."""
        potential = PhaseSolver(coefficients).order_parameter_potential()
        for eta in [(0.0, 0.0), (0.5, 0.0), (-0.3, 0.7), (1.1, -0.4)]:
            assert potential(*eta) == pytest.approx(landau_potential(coefficients, *eta))

    def test_invariant_form(self, coefficients):
        """Φ(I1, I2) agrees with the direct evaluation."""
        potential = PhaseSolver(coefficients).invariant_potential()
        for eta in [(0.5, 0.0), (-0.3, 0.7), (1.1, -0.4)]:
            i1, i2 = invariants(*eta)
            assert potential(i1, i2) == pytest.approx(landau_potential(coefficients, *eta))


class TestPhaseSolver:
    """Tests for finding the stable phases."""

    def test_private_coefficients(self):
        """The solver works on its own copy of the coefficients."""
        c = Coefficients(alpha1=1.0)
        solver = PhaseSolver(c)
        solver.set_axes(-3.0, 2.0)
        assert c.alpha1 == 1.0
        assert (solver.coefficients.alpha1, solver.coefficients.beta1) == (-3.0, 2.0)

    def test_coefficients_snapshot(self):
        """Mutating the snapshot does not affect the solver."""
        solver = PhaseSolver(Coefficients(alpha1=1.0))
        snapshot = solver.coefficients
        snapshot.alpha1 = 5.0
        assert solver.coefficients.alpha1 == 1.0

    @pytest.mark.parametrize("alpha1", [0.5, 1.0, 5.0])
    def test_only_symmetric_phase(self, alpha1):
        """A positive quadratic term without odd terms leaves only phase 1."""
        phases = PhaseSolver(isotropic_coefficients(alpha1)).phases()
        assert phases == [PhaseRecord(PhaseFamily.SYMMETRIC, 0.0, (0.0, 0.0))]

    def test_no_symmetric_phase_below_zero(self):
        """Phase 1 is never reported for α1 <= 0."""
        for alpha1 in (0.0, -1.0):
            phases = PhaseSolver(isotropic_coefficients(alpha1)).phases()
            assert all(p.family != PhaseFamily.SYMMETRIC for p in phases)

    def test_all_zero_coefficients(self):
        """A vanishing potential has no strict minimum."""
        zero = Coefficients(*([0.0] * 9))
        assert PhaseSolver(zero).phases() == []

    @pytest.mark.parametrize("alpha1,beta1", [
        (-5.0, -5.0), (-5.0, 5.0), (-2.0, 0.5), (-8.0, -1.0), (1.0, -6.0)
    ])
    def test_phases_are_consistent(self, alpha1, beta1):
        """Every reported phase is a stationary point with the reported potential."""
        c = Coefficients(alpha1=alpha1, beta1=beta1)
        phases = PhaseSolver(c).phases()
        assert phases, "a bounded potential with α1 < 0 or a cubic term must have a minimum"

        h = 1e-6
        for record in phases:
            eta1, eta2 = record.order_parameter
            assert landau_potential(c, eta1, eta2) == pytest.approx(record.potential, abs=1e-6)
            grad1 = (landau_potential(c, eta1 + h, eta2) - landau_potential(c, eta1 - h, eta2)) / (2 * h)
            grad2 = (landau_potential(c, eta1, eta2 + h) - landau_potential(c, eta1, eta2 - h)) / (2 * h)
            assert abs(grad1) < 1e-3
            assert abs(grad2) < 1e-3

    @pytest.mark.parametrize("alpha1,beta1", [(-5.0, -5.0), (-5.0, 5.0), (-8.0, -1.0)])
    def test_family_signs(self, alpha1, beta1):
        """Phase 2 has η1 < 0, phase 3 η1 > 0, phase 4 both components non-zero."""
        for record in PhaseSolver(Coefficients(alpha1=alpha1, beta1=beta1)).phases():
            eta1, eta2 = record.order_parameter
            if record.family == PhaseFamily.NEGATIVE:
                assert eta1 < 0 and eta2 == 0.0
            elif record.family == PhaseFamily.POSITIVE:
                assert eta1 >= 0 and eta2 == 0.0
            elif record.family == PhaseFamily.TWO_COMPONENT:
                assert eta2 > 0

    def test_order_parameter_from_invariants(self):
        """I1 = 1, I2 = 0 gives η = (√3/2, 1/2)."""
        eta = PhaseSolver(Coefficients()).order_parameter_from_invariants(1.0, 0.0)
        assert np.allclose(eta, (np.sqrt(3) / 2, 0.5))

    def test_order_parameter_from_invariants_on_axis(self):
        """I2 = I1^(3/2) lies on the η2 = 0 axis and is rejected."""
        solver = PhaseSolver(Coefficients())
        assert solver.order_parameter_from_invariants(1.0, 1.0) is None

    def test_invariant_candidates_branches(self):
        """Each coefficient regime yields stationary points of Φ(I1, I2)."""
        regimes = [
            Coefficients(alpha1=-2.0, beta1=-1.0, beta2=0.0, delta3=0.0),
            Coefficients(alpha1=-2.0, beta1=-1.0, beta2=1.0, delta3=0.0),
            Coefficients(alpha1=-2.0, beta1=-1.0, beta2=1.0, delta3=0.5),
        ]
        for c in regimes:
            solver = PhaseSolver(c)
            potential = solver.invariant_potential()
            for i1, i2 in solver.invariant_candidates():
                d1 = potential.copy().differentiate(1, 0)(i1, i2)
                d2 = potential.copy().differentiate(0, 1)(i1, i2)
                assert abs(d1) < 1e-4 * max(1.0, abs(i1) ** 3)
                assert abs(d2) < 1e-4 * max(1.0, abs(i1) ** 2)
