#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Real Polynomial Engine
================================================================================

Project:        Landau Phase Diagram
Module:         polynomial.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 18, 2026
Last Updated:   October 18, 2026

License:        MIT License
================================================================================

Single-variable polynomials with real coefficients and a real root finder.

Roots are found analytically for degrees 1 to 4:
    - linear:     x = -c0 / c1
    - quadratic:  discriminant formula
    - cubic:      Cardano (trigonometric form when all three roots are real)
    - quartic:    Ferrari (cubic resolvent, product of two quadratics)

For degree 5 and above the real roots are isolated with a Sturm sequence
and refined with Newton's method, falling back to bisection whenever Newton
leaves its bracket or stalls.
"""

import math
import numbers
import numpy as np
from numba import jit
from typing import List, Sequence, Tuple


# Coefficients smaller than this in magnitude are treated as zero
ZERO_EPS = 1e-10

# Width of the bracket at which a root is accepted
ROOT_EPS = 1e-5

# Newton iterations allowed before falling back to bisection
NEWTON_MAX_ITERATIONS = 20


@jit(nopython=True, cache=True)
def horner(coeffs: np.ndarray, x: float) -> float:
    """
    Evaluate a polynomial with Horner's scheme.

    Args:
        coeffs: Coefficients, index = power of x
        x: Evaluation point

    Returns:
        Polynomial value at x
    """
    result = coeffs[coeffs.shape[0] - 1]
    for i in range(coeffs.shape[0] - 2, -1, -1):
        result = result * x + coeffs[i]
    return result


class Polynomial:
    """
    Polynomial of one real variable.

    Coefficients are stored lowest power first. The leading coefficient is
    never smaller than ``zero_eps`` in magnitude, except for the zero
    polynomial which is kept as a single zero coefficient of degree 0.
    """

    # Keep numpy scalars from broadcasting over the coefficients
    __array_ufunc__ = None

    def __init__(
        self,
        coefficients: Sequence[float] = (0.0,),
        zero_eps: float = ZERO_EPS,
        root_eps: float = ROOT_EPS
    ):
        coeffs = np.array(coefficients, dtype=np.float64).ravel()
        if coeffs.size == 0:
            coeffs = np.zeros(1)
        self._coeffs = coeffs
        self.zero_eps = zero_eps
        self.root_eps = root_eps
        self._normalize()

    @classmethod
    def zeros(
        cls,
        degree: int,
        zero_eps: float = ZERO_EPS,
        root_eps: float = ROOT_EPS
    ) -> "Polynomial":
        """Polynomial with ``degree + 1`` zero slots, ready to be filled."""
        p = cls(zero_eps=zero_eps, root_eps=root_eps)
        p._coeffs = np.zeros(degree + 1)
        return p

    def _new(self, coeffs: np.ndarray) -> "Polynomial":
        """Polynomial sharing this instance's tolerances."""
        return Polynomial(coeffs, self.zero_eps, self.root_eps)

    def _normalize(self) -> None:
        """Strip negligible leading coefficients."""
        size = self._coeffs.size
        while size > 1 and abs(self._coeffs[size - 1]) < self.zero_eps:
            size -= 1
        if size != self._coeffs.size:
            self._coeffs = self._coeffs[:size].copy()

    @property
    def degree(self) -> int:
        return self._coeffs.size - 1

    @property
    def coefficients(self) -> np.ndarray:
        """Copy of the coefficient array (index = power)."""
        return self._coeffs.copy()

    @property
    def leading(self) -> float:
        return float(self._coeffs[-1])

    def copy(self) -> "Polynomial":
        p = Polynomial.__new__(Polynomial)
        p._coeffs = self._coeffs.copy()
        p.zero_eps = self.zero_eps
        p.root_eps = self.root_eps
        return p

    def differentiate(self) -> "Polynomial":
        """
        Differentiate in place.

        A constant becomes the zero polynomial.

        Returns:
            self, to allow chaining
        """
        if self.degree:
            self._coeffs = self._coeffs[1:] * np.arange(1, self._coeffs.size)
            self._normalize()
        else:
            self._coeffs = np.zeros(1)
        return self

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        size = max(self._coeffs.size, other._coeffs.size)
        coeffs = np.zeros(size)
        coeffs[:self._coeffs.size] += self._coeffs
        coeffs[:other._coeffs.size] += other._coeffs
        return self._new(coeffs)

    def __sub__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self + (-other)

    def __neg__(self) -> "Polynomial":
        return self._new(-self._coeffs)

    def __mul__(self, other) -> "Polynomial":
        if isinstance(other, Polynomial):
            return self._new(np.convolve(self._coeffs, other._coeffs))
        if isinstance(other, numbers.Real):
            return self._new(self._coeffs * float(other))
        return NotImplemented

    def __rmul__(self, other) -> "Polynomial":
        if isinstance(other, numbers.Real):
            return self._new(self._coeffs * float(other))
        return NotImplemented

    def __mod__(self, other: "Polynomial") -> "Polynomial":
        """
        Remainder of polynomial long division.

        Raises:
            ZeroDivisionError: if ``other`` is the zero polynomial
        """
        if not isinstance(other, Polynomial):
            return NotImplemented
        if other.degree == 0:
            if abs(other._coeffs[0]) < other.zero_eps:
                raise ZeroDivisionError("polynomial division by zero")
            return self._new(np.zeros(1))

        remainder = self.copy()
        while remainder.degree >= other.degree:
            shift = remainder.degree - other.degree
            term = Polynomial.zeros(shift, self.zero_eps, self.root_eps)
            term[shift] = remainder.leading / other.leading
            reduced = remainder - other * term
            # Cancellation may leave a tiny leading term above zero_eps
            if reduced.degree == remainder.degree:
                reduced._coeffs = reduced._coeffs[:-1].copy()
                reduced._normalize()
            remainder = reduced
        return remainder

    def __call__(self, x: float) -> float:
        return float(horner(self._coeffs, float(x)))

    def __getitem__(self, index: int) -> float:
        return float(self._coeffs[index])

    def __setitem__(self, index: int, value: float) -> None:
        self._coeffs[index] = value

    def __len__(self) -> int:
        return self._coeffs.size

    def __eq__(self, other) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return np.array_equal(self._coeffs, other._coeffs)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Polynomial({self._coeffs.tolist()})"

    # ------------------------------------------------------------------
    # Root finding
    # ------------------------------------------------------------------

    def roots(self) -> List[float]:
        """
        Return the real roots of the polynomial.

        A constant polynomial returns ``[0.0]``; this keeps the result type
        uniform and carries no mathematical meaning.

        Returns:
            List of real roots (not sorted, no multiplicities)
        """
        self._normalize()
        degree = self.degree

        if degree == 0:
            return [0.0]
        if degree == 1:
            return self._linear_roots()
        if degree == 2:
            return self._quadratic_roots()
        if degree == 3:
            return self._cubic_roots()
        if degree == 4:
            return self._quartic_roots()

        low = self.lower_root_bound()
        high = self.upper_root_bound()
        sturm = self.sturm_sequence()
        second_derivative = self.copy().differentiate().differentiate()
        found: List[float] = []
        self._search_roots(low, high, sturm, second_derivative, found)
        return found

    def _linear_roots(self) -> List[float]:
        return [-float(self._coeffs[0]) / float(self._coeffs[1])]

    def _quadratic_roots(self) -> List[float]:
        c, b, a = (float(v) for v in self._coeffs[:3])
        d = b * b - 4.0 * a * c

        if abs(d) < self.zero_eps:
            return [-0.5 * b / a]
        if d > 0:
            sqrt_d = math.sqrt(d)
            return [0.5 * (sqrt_d - b) / a, -0.5 * (sqrt_d + b) / a]
        return []

    def _cubic_roots(self) -> List[float]:
        d, c, b, a = (float(v) for v in self._coeffs[:4])

        # Substitution x = y - shift gives y^3 - 3p*y + 2q = 0
        shift = b / (3.0 * a)
        p = shift ** 2 - c / (3.0 * a)
        p_cubed = p ** 3
        q = shift ** 3 - (b * c / (3.0 * a) - d) / (2.0 * a)
        discriminant = p_cubed - q ** 2

        if discriminant > 0:
            phi = math.acos(min(1.0, max(-1.0, -q / math.sqrt(p_cubed))))
            amplitude = 2.0 * math.sqrt(p)
            return [
                amplitude * math.cos((phi + 2.0 * math.pi * k) / 3.0) - shift
                for k in range(3)
            ]

        root = math.sqrt(-discriminant)
        return [float(np.cbrt(root - q) - np.cbrt(q + root) - shift)]

    def _quartic_roots(self) -> List[float]:
        lead = float(self._coeffs[4])
        b = float(self._coeffs[3]) / lead
        c = float(self._coeffs[2]) / lead
        d = float(self._coeffs[1]) / lead
        e = float(self._coeffs[0]) / lead

        resolvent = self._new(np.array([
            e * (4.0 * c - b * b) - d * d,
            b * d - 4.0 * e,
            -c,
            1.0
        ]))
        y = resolvent._cubic_roots()[0]

        t = (b / 2.0) ** 2 - c + y
        solution: List[float] = []

        if abs(t) < self.zero_eps:
            radicand = (y / 2.0) ** 2 - e
            if radicand < 0:
                return solution
            s = math.sqrt(radicand)
            for constant in (y / 2.0 - s, y / 2.0 + s):
                solution.extend(self._new(np.array([constant, b / 2.0, 1.0]))._quadratic_roots())
        elif t > 0:
            t = math.sqrt(t)
            u = b * y / 2.0 - d
            solution.extend(
                self._new(np.array([0.5 * (y - u / t), b / 2.0 - t, 1.0]))._quadratic_roots()
            )
            solution.extend(
                self._new(np.array([0.5 * (y + u / t), b / 2.0 + t, 1.0]))._quadratic_roots()
            )
        return solution

    def upper_root_bound(self) -> float:
        """
        Upper bound of the real roots (Lagrange's bound).

        For a leading coefficient a_n > 0 the bound is 1 + (B / a_n)^(1/(n-k)),
        where B is the largest magnitude among the negative coefficients and
        k is the index of the highest-degree negative coefficient. A
        polynomial without negative coefficients has no positive roots and
        the bound is 0.
        """
        coeffs = self._coeffs if self._coeffs[-1] >= 0 else -self._coeffs
        negative = np.nonzero(coeffs < 0)[0]
        if negative.size == 0:
            return 0.0
        k = int(negative[-1])
        largest = -float(coeffs.min())
        return 1.0 + (largest / float(coeffs[-1])) ** (1.0 / (self.degree - k))

    def lower_root_bound(self) -> float:
        """Lower bound of the real roots: minus the upper bound of P(-x)."""
        mirrored = self._coeffs.copy()
        mirrored[1::2] *= -1
        return -self._new(mirrored).upper_root_bound()

    def sturm_sequence(self) -> List["Polynomial"]:
        """
        Build the standard Sturm sequence.

        P, P', then the negated remainders of the two preceding members,
        ending with a constant.
        """
        sequence = [self.copy(), self.copy().differentiate()]
        while True:
            remainder = sequence[-2] % sequence[-1]
            sequence.append(-remainder)
            if remainder.degree == 0:
                return sequence

    @staticmethod
    def sign_changes(sequence: Sequence["Polynomial"], x: float) -> int:
        """Number of sign changes of a Sturm sequence evaluated at x."""
        values = [p(x) for p in sequence]
        return sum(1 for left, right in zip(values, values[1:]) if left * right < 0)

    def count_roots(self, low: float, high: float) -> int:
        """Number of distinct real roots in (low, high] by Sturm's theorem."""
        sturm = self.sturm_sequence()
        return self.sign_changes(sturm, low) - self.sign_changes(sturm, high)

    def _search_roots(
        self,
        low: float,
        high: float,
        sturm: List["Polynomial"],
        second_derivative: "Polynomial",
        found: List[float]
    ) -> None:
        """Isolate and refine all roots in [low, high], appending to found."""
        n_roots = self.sign_changes(sturm, low) - self.sign_changes(sturm, high)
        if n_roots <= 0:
            return

        middle = (low + high) / 2.0
        if high - low < self.root_eps:
            found.append(middle)
            return

        if n_roots > 1:
            self._search_roots(low, middle, sturm, second_derivative, found)
            self._search_roots(middle, high, sturm, second_derivative, found)
        elif n_roots == 1:
            # Start Newton from the end where the iterates approach the root monotonically
            value_low = self(low)
            if second_derivative(middle) > 0:
                x = low if value_low > 0 else high
            else:
                x = low if value_low < 0 else high

            converged, x = self._newton(low, high, x, sturm[1])
            found.append(x if converged else self._bisection(low, high))

    def _newton(
        self,
        low: float,
        high: float,
        x: float,
        derivative: "Polynomial",
        max_iterations: int = NEWTON_MAX_ITERATIONS
    ) -> Tuple[bool, float]:
        """
        Refine a root with Newton's method inside [low, high].

        Returns:
            (converged, x): converged is False when an iterate leaves the
            bracket, the derivative vanishes or the iteration budget runs out
        """
        while True:
            slope = derivative(x)
            if abs(slope) < self.zero_eps or x < low or x > high or max_iterations == 0:
                return False, x
            max_iterations -= 1
            step = self(x) / slope
            x -= step
            if abs(step) <= self.root_eps:
                return True, x

    def _bisection(self, low: float, high: float) -> float:
        """Locate a bracketed root by halving the interval."""
        value_low, value_high = self(low), self(high)
        while abs(high - low) > self.root_eps:
            if abs(value_low) < self.zero_eps:
                return low
            if abs(value_high) < self.zero_eps:
                return high
            middle = (low + high) / 2.0
            value_middle = self(middle)
            if value_low * value_middle <= 0.0:
                high, value_high = middle, value_middle
            else:
                low, value_low = middle, value_middle
        return low
