"""Descartes' Circle Theorem and its complex extension.

Given three mutually tangent circles with curvatures k1, k2, k3 the fourth
tangent circle has curvature

    k4 = k1 + k2 + k3 ± 2√(k1k2 + k2k3 + k1k3)

and, writing the centers as complex numbers, its center satisfies

    k4·z4 = k1z1 + k2z2 + k3z3 ± 2√(k1z1·k2z2 + k2z2·k3z3 + k1z1·k3z3)

The sign pairing between the two formulas is not fixed, so both centers are
produced for each curvature and the validator sorts out which are real.
"""

from __future__ import annotations

import cmath
import math
from typing import NamedTuple, Tuple

from .circle import Circle
from .numeric import clamp_radicand


class DescartesValue(NamedTuple):
    positive: float
    negative: float


class ComplexDescartesValue(NamedTuple):
    positive: Tuple[complex, complex]
    negative: Tuple[complex, complex]


def descartes(c1: Circle, c2: Circle, c3: Circle) -> DescartesValue:
    """Curvatures of the two circles tangent to ``c1``, ``c2`` and ``c3``.

    The radicand is non-negative for tangent input; rounding can push it
    slightly below zero, in which case it is clamped and both solutions
    coincide.
    """
    k1, k2, k3 = c1.k, c2.k, c3.k
    total = k1 + k2 + k3
    root = math.sqrt(clamp_radicand(k1 * k2 + k2 * k3 + k1 * k3))
    return DescartesValue(total + 2.0 * root, total - 2.0 * root)


def complex_descartes(c1: Circle, c2: Circle, c3: Circle, k4: DescartesValue) -> ComplexDescartesValue:
    """Candidate centers for each curvature in ``k4``.

    Uses the principal branch of the complex square root; both ``(S + R)/k``
    and ``(S - R)/k`` are returned so the branch choice is immaterial.
    """
    zk1 = c1.k * c1.z
    zk2 = c2.k * c2.z
    zk3 = c3.k * c3.z
    total = zk1 + zk2 + zk3
    root = 2.0 * cmath.sqrt(zk1 * zk2 + zk2 * zk3 + zk1 * zk3)

    def centers(k: float) -> Tuple[complex, complex]:
        if k == 0:
            raise ZeroDivisionError("zero curvature in complex Descartes solve")
        return ((total + root) / k, (total - root) / k)

    return ComplexDescartesValue(centers(k4.positive), centers(k4.negative))


def descartes_residual(k1: float, k2: float, k3: float, k4: float) -> float:
    """(k1+k2+k3+k4)² - 2(k1²+k2²+k3²+k4²); zero for a Descartes quadruple."""
    s = k1 + k2 + k3 + k4
    q = k1 * k1 + k2 * k2 + k3 * k3 + k4 * k4
    return s * s - 2.0 * q


__all__ = [
    "DescartesValue",
    "ComplexDescartesValue",
    "descartes",
    "complex_descartes",
    "descartes_residual",
]
