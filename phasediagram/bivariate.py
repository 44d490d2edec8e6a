#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Polynomials of Two Variables
================================================================================

Project:        Landau Phase Diagram
Module:         bivariate.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

A polynomial in two variables, stored as a polynomial in y whose
coefficients are polynomials in x:

    P(x, y) = Σ_i p_i(x) y^i

Only what the stability analysis needs is implemented: partial derivatives
and evaluation at a point.
"""

import numpy as np
from typing import List, Sequence, Union

from .polynomial import Polynomial, ZERO_EPS, horner


class BivariatePolynomial:
    """Polynomial in y with Polynomial-in-x coefficients."""

    def __init__(self, degree: int, zero_eps: float = ZERO_EPS):
        self.zero_eps = zero_eps
        self._slots: List[Polynomial] = [
            Polynomial(zero_eps=zero_eps) for _ in range(degree + 1)
        ]

    @property
    def degree(self) -> int:
        """Degree in the outer variable y."""
        return len(self._slots) - 1

    def copy(self) -> "BivariatePolynomial":
        p = BivariatePolynomial(0, self.zero_eps)
        p._slots = [slot.copy() for slot in self._slots]
        return p

    def _normalize(self) -> None:
        """Drop vanishing top slots, keeping at least one."""
        while len(self._slots) > 1:
            top = self._slots[-1]
            if top.degree or abs(top[0]) >= self.zero_eps:
                break
            self._slots.pop()

    def differentiate(self, times_x: int = 0, times_y: int = 0) -> "BivariatePolynomial":
        """
        Take partial derivatives in place.

        Args:
            times_x: Order of differentiation in x (applied to every slot)
            times_y: Order of differentiation in y

        Returns:
            self, to allow chaining
        """
        for _ in range(times_x):
            for slot in self._slots:
                slot.differentiate()

        for _ in range(times_y):
            if self.degree:
                self._slots = [
                    i * self._slots[i] for i in range(1, len(self._slots))
                ]
            else:
                self._slots[0] = Polynomial(zero_eps=self.zero_eps)

        self._normalize()
        return self

    def __call__(self, x: float, y: float) -> float:
        values = np.array([slot(x) for slot in self._slots])
        return float(horner(values, float(y)))

    def __getitem__(self, index: int) -> Polynomial:
        return self._slots[index]

    def __setitem__(self, index: int, value: Union[Polynomial, Sequence[float]]) -> None:
        if not isinstance(value, Polynomial):
            value = Polynomial(value, zero_eps=self.zero_eps)
        self._slots[index] = value

    def __len__(self) -> int:
        return len(self._slots)

    def __repr__(self) -> str:
        return f"BivariatePolynomial({self._slots!r})"
