#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Equilibrium and Stability of Phases
================================================================================

Project:        Landau Phase Diagram
Module:         solver.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Finds the thermodynamically stable phases for one set of model coefficients.

For every phase family the equations of state ∂Φ = 0 are reduced to a
polynomial equation in one variable, whose real roots are the candidate
solutions. A candidate is kept when the potential has a local minimum
there:

    ∂²Φ/∂x² > 0   and   ∂²Φ/∂x² · ∂²Φ/∂y² - (∂²Φ/∂x∂y)² > 0

Phases 2 and 3 are tested as functions of the components (η1, η2), phase 4
as a function of the invariants (I1, I2).
"""

import math
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from .bivariate import BivariatePolynomial
from .polynomial import Polynomial, ZERO_EPS, ROOT_EPS
from .thermodynamics import Coefficients, PhaseFamily, PhaseRecord


def stable_potential(potential: BivariatePolynomial, x: float, y: float) -> Optional[float]:
    """
    Test a stationary point for a local minimum.

    Args:
        potential: Potential as a polynomial of two variables
        x: First variable at the stationary point
        y: Second variable at the stationary point

    Returns:
        The potential at (x, y) if it is a local minimum, else None
    """
    d2x = potential.copy().differentiate(2, 0)(x, y)
    if d2x <= 0:
        return None

    d2y = potential.copy().differentiate(0, 2)(x, y)
    dxy = potential.copy().differentiate(1, 1)(x, y)
    if d2x * d2y - dxy ** 2 <= 0:
        return None

    return potential(x, y)


def most_stable_index(phases: Sequence[PhaseRecord]) -> Optional[int]:
    """Index of the first phase with the lowest potential, None if empty."""
    if not phases:
        return None
    return min(range(len(phases)), key=lambda k: phases[k].potential)


class PhaseSolver:
    """
    Stable phases of the model potential.

    The solver owns a private copy of the coefficients. The two axis
    coefficients (alpha1, beta1) are overwritten through set_axes() while a
    diagram is scanned; all others stay fixed.
    """

    def __init__(
        self,
        coefficients: Coefficients,
        zero_eps: float = ZERO_EPS,
        root_eps: float = ROOT_EPS
    ):
        self._coeffs = replace(coefficients)
        self.zero_eps = zero_eps
        self.root_eps = root_eps

    @property
    def coefficients(self) -> Coefficients:
        """Snapshot of the current coefficients."""
        return replace(self._coeffs)

    def set_axes(self, alpha1: float, beta1: float) -> None:
        """Overwrite the two control parameters."""
        self._coeffs.alpha1 = alpha1
        self._coeffs.beta1 = beta1

    def _poly(self, coefficients: Sequence[float]) -> Polynomial:
        return Polynomial(coefficients, self.zero_eps, self.root_eps)

    # ------------------------------------------------------------------
    # Potentials
    # ------------------------------------------------------------------

    def order_parameter_potential(self) -> BivariatePolynomial:
        """
        Potential as a function of the components, Φ(η1, η2).

        Slot i holds the coefficient of η2^i as a polynomial in η1.
        """
        c = self._coeffs
        potential = BivariatePolynomial(8, self.zero_eps)
        potential[8] = [c.alpha4]
        potential[6] = [
            c.alpha3,
            -3 * c.delta2,
            9 * c.delta3 + 4 * c.alpha4,
        ]
        potential[4] = [
            c.alpha2,
            -3 * c.delta1,
            3 * (c.alpha3 + 3 * c.beta2),
            -5 * c.delta2,
            3 * (2 * c.alpha4 + c.delta3),
        ]
        potential[2] = [
            c.alpha1,
            -3 * c.beta1,
            2 * c.alpha2,
            -2 * c.delta1,
            3 * (c.alpha3 - 2 * c.beta2),
            -c.delta2,
            4 * c.alpha4 - 5 * c.delta3,
        ]
        potential[0] = [
            0.0,
            0.0,
            c.alpha1,
            c.beta1,
            c.alpha2,
            c.delta1,
            c.alpha3 + c.beta2,
            c.delta2,
            c.alpha4 + c.delta3,
        ]
        return potential

    def invariant_potential(self) -> BivariatePolynomial:
        """
        Potential as a function of the invariants, Φ(I1, I2).

        Slot i holds the coefficient of I2^i as a polynomial in I1.
        """
        c = self._coeffs
        potential = BivariatePolynomial(2, self.zero_eps)
        potential[2] = [c.beta2, c.delta3]
        potential[1] = [c.beta1, c.delta1, c.delta2]
        potential[0] = [0.0, c.alpha1, c.alpha2, c.alpha3, c.alpha4]
        return potential

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------

    def phases(self) -> List[PhaseRecord]:
        """
        Find all stable phases for the current coefficients.

        Returns:
            Stable phases in discovery order: phase 1, phases 2/3, phase 4
        """
        found: List[PhaseRecord] = []

        if self._coeffs.alpha1 > 0:
            found.append(PhaseRecord(PhaseFamily.SYMMETRIC, 0.0, (0.0, 0.0)))

        found.extend(self._one_component_phases())
        found.extend(self._two_component_phases())
        return found

    def _one_component_phases(self) -> List[PhaseRecord]:
        """Phases 2 and 3: η = (η1, 0), from ∂Φ/∂η1 / η1 = 0."""
        c = self._coeffs
        equation = self._poly([
            2 * c.alpha1,
            3 * c.beta1,
            4 * c.alpha2,
            5 * c.delta1,
            6 * (c.alpha3 + c.beta2),
            7 * c.delta2,
            8 * (c.alpha4 + c.delta3),
        ])

        potential = self.order_parameter_potential()
        records = []
        for eta in equation.roots():
            phi = stable_potential(potential, eta, 0.0)
            if phi is not None:
                family = PhaseFamily.NEGATIVE if eta < 0 else PhaseFamily.POSITIVE
                records.append(PhaseRecord(family, phi, (eta, 0.0)))
        return records

    def invariant_candidates(self) -> List[Tuple[float, float]]:
        """
        Stationary points (I1, I2) of the potential in invariant form.

        The structure of the equation depends on which of δ3 and β2 vanish.
        """
        c = self._coeffs
        eps = self.zero_eps
        b = self._poly([c.delta1, 2 * c.delta2])
        cc = self._poly([c.alpha1, 2 * c.alpha2, 3 * c.alpha3, 4 * c.alpha4])
        f = self._poly([c.beta1, c.delta1, c.delta2])
        candidates: List[Tuple[float, float]] = []

        if c.delta3 == 0.0:
            if c.beta2 == 0.0:
                for i1 in f.roots():
                    bb = b(i1)
                    if abs(bb) > eps:
                        candidates.append((i1, -cc(i1) / bb))
            else:
                e = self._poly([2 * c.beta2])
                equation = b * f - cc * e
                for i1 in equation.roots():
                    candidates.append((i1, -f(i1) / e(i1)))
        else:
            a = self._poly([c.delta3])
            d = b * b - 4 * a * cc
            e = self._poly([2 * c.beta2, 2 * c.delta3])
            g = b * e - 2 * a * f
            equation = e * e * d - g * g
            for i1 in equation.roots():
                dd = d(i1)
                if dd >= 0:
                    # Branch of the square root chosen by the sign of E·G
                    if e(i1) * g(i1) >= 0:
                        i2 = 0.5 * (-b(i1) + math.sqrt(dd)) / a(i1)
                    else:
                        i2 = 0.5 * (-b(i1) - math.sqrt(dd)) / a(i1)
                    candidates.append((i1, i2))

        return candidates

    def _two_component_phases(self) -> List[PhaseRecord]:
        """Phase 4: stable invariant pairs converted back to (η1, η2)."""
        potential = self.invariant_potential()
        records = []
        for i1, i2 in self.invariant_candidates():
            if i1 <= 0:
                continue
            phi = stable_potential(potential, i1, i2)
            if phi is None:
                continue
            eta = self.order_parameter_from_invariants(i1, i2)
            if eta is not None:
                records.append(PhaseRecord(PhaseFamily.TWO_COMPONENT, phi, eta))
        return records

    def order_parameter_from_invariants(self, i1: float, i2: float) -> Optional[Tuple[float, float]]:
        """
        Recover (η1, η2) from the invariants.

        η1 is a root of 4η1³ - 3 I1 η1 - I2 = 0 and η2 = √(I1 - η1²).

        Returns:
            (η1, η2) with η2 > 0, or None when I1 - η1² is not positive
        """
        roots = self._poly([-i2, -3 * i1, 0.0, 4.0]).roots()
        if not roots:
            return None
        eta1 = roots[0]
        square = i1 - eta1 ** 2
        if square <= self.zero_eps:
            return None
        return eta1, math.sqrt(square)
