#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Model Potential and Phases
================================================================================

Project:        Landau Phase Diagram
Module:         thermodynamics.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

This module describes the model thermodynamic potential with 3m symmetry
and the phases it admits:
- Model coefficients (two control parameters and seven constants)
- Order parameter invariants and the potential itself
- Phase families and stable phase records
- Symmetry-equivalent domains of a phase

The potential is written in terms of the invariants of the two-component
order parameter (η1, η2):

    I1 = η1² + η2²
    I2 = η1³ - 3 η1 η2²

    Φ = α1 I1 + α2 I1² + α3 I1³ + α4 I1⁴ + β1 I2 + β2 I2²
        + δ1 I1 I2 + δ2 I1² I2 + δ3 I1 I2²
"""

import numpy as np
from typing import Tuple, List
from dataclasses import dataclass, astuple
from enum import IntEnum


POTENTIAL_EXPRESSION = (
    "Φ = α1·I1 + α2·I1² + α3·I1³ + α4·I1⁴ + β1·I2 + β2·I2² "
    "+ δ1·I1·I2 + δ2·I1²·I2 + δ3·I1·I2²,  "
    "I1 = η1² + η2²,  I2 = η1³ - 3·η1·η2²"
)

COEFFICIENT_NAMES = (
    "alpha1", "alpha2", "alpha3", "alpha4",
    "beta1", "beta2",
    "delta1", "delta2", "delta3",
)

COEFFICIENT_SYMBOLS = ("α1", "α2", "α3", "α4", "β1", "β2", "δ1", "δ2", "δ3")

SQRT3 = np.sqrt(3.0)


@dataclass
class Coefficients:
    """
    Coefficients of the model potential.

    alpha1 and beta1 are the diagram axes (rows and columns); the other
    seven are held fixed during a computation. Defaults match the initial
    input table of the diagram tool.
    """
    alpha1: float = -10.0   # Vertical axis
    alpha2: float = 1.0
    alpha3: float = 1.0
    alpha4: float = 0.0
    beta1: float = -10.0    # Horizontal axis
    beta2: float = 1.0
    delta1: float = 1.0
    delta2: float = 0.0
    delta3: float = 0.0

    def as_tuple(self) -> Tuple[float, ...]:
        """All nine coefficients in the order of COEFFICIENT_NAMES."""
        return astuple(self)


class PhaseFamily(IntEnum):
    """Families of phases distinguished by their order parameter."""
    SYMMETRIC = 1       # η = 0
    NEGATIVE = 2        # η = (η1, 0), η1 < 0
    POSITIVE = 3        # η = (η1, 0), η1 > 0
    TWO_COMPONENT = 4   # η1 and η2 both non-zero


@dataclass(frozen=True)
class PhaseRecord:
    """A thermodynamically stable phase at one point of the diagram."""
    family: PhaseFamily
    potential: float
    order_parameter: Tuple[float, float] = (0.0, 0.0)

    def domains(self) -> List[Tuple[float, float]]:
        """
        Symmetry-related solutions (domains) of this phase.

        The symmetric phase has a single domain. Phases 2 and 3 have three,
        related by rotations through ±120°. Phase 4 has six: three rotations
        and their reflections η2 -> -η2.

        Returns:
            List of (η1, η2) pairs, the record's own order parameter first
        """
        n1, n2 = self.order_parameter
        result = [(n1, n2)]

        if self.family in (PhaseFamily.NEGATIVE, PhaseFamily.POSITIVE):
            result.append((-0.5 * n1, 0.5 * SQRT3 * n1))
            result.append((-0.5 * n1, -0.5 * SQRT3 * n1))
        elif self.family == PhaseFamily.TWO_COMPONENT:
            result.append((-0.5 * (n1 - SQRT3 * n2), 0.5 * (n2 + SQRT3 * n1)))
            result.append((-0.5 * (n1 + SQRT3 * n2), 0.5 * (n2 - SQRT3 * n1)))
            result.extend([(a, -b) for a, b in result[:3]])

        return [(float(a), float(b)) for a, b in result]


def invariants(eta1: float, eta2: float) -> Tuple[float, float]:
    """
    Calculate the order parameter invariants.

    Args:
        eta1: First order parameter component
        eta2: Second order parameter component

    Returns:
        (I1, I2)
    """
    i1 = eta1 * eta1 + eta2 * eta2
    i2 = eta1 ** 3 - 3.0 * eta1 * eta2 * eta2
    return i1, i2


def landau_potential(coefficients: Coefficients, eta1: float, eta2: float) -> float:
    """
    Evaluate the model potential Φ(η1, η2) directly from the invariants.

    Args:
        coefficients: Model coefficients
        eta1: First order parameter component
        eta2: Second order parameter component

    Returns:
        Potential value
    """
    c = coefficients
    i1, i2 = invariants(eta1, eta2)
    return (
        c.alpha1 * i1 + c.alpha2 * i1 ** 2 + c.alpha3 * i1 ** 3 + c.alpha4 * i1 ** 4
        + c.beta1 * i2 + c.beta2 * i2 ** 2
        + c.delta1 * i1 * i2 + c.delta2 * i1 ** 2 * i2 + c.delta3 * i1 * i2 ** 2
    )
