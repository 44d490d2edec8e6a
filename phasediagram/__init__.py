#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Landau Phase Diagram
================================================================================

Project:        Landau Phase Diagram
Description:    Phase diagrams of a Landau-type thermodynamic potential with
                a two-component order parameter and 3m symmetry

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

This package computes phase diagrams in the (β1, α1) plane:
- Real roots of univariate polynomials (closed forms up to degree 4,
  Sturm sequences with Newton refinement beyond)
- Polynomials of two variables for the stability analysis
- Stable phases and the most stable phase at every diagram point
- First-order transition lines between competing phases

Modules:
    - polynomial: Univariate polynomials and real root finding
    - bivariate: Polynomials of two variables
    - thermodynamics: Model coefficients, potential and phase records
    - solver: Stable phases for one set of coefficients
    - diagram: Grid scan, transition detection and background worker
    - visualization: Diagram images, legend and surface plots
    - logging_config: Logger setup for the package
"""

__version__ = "1.0.0"
__author__ = "Ryan Kamp"

from .polynomial import Polynomial, ZERO_EPS, ROOT_EPS
from .bivariate import BivariatePolynomial
from .thermodynamics import Coefficients, PhaseFamily, PhaseRecord, landau_potential
from .solver import PhaseSolver
from .diagram import (
    DiagramConfig,
    DiagramGrid,
    DiagramWorker,
    GridCellResult,
    compute_diagram,
)
from .logging_config import setup_logging
