"""Circle value type and the distance/tangency predicates used by the gasket."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Tuple

import numpy as np

from .numeric import nearly_equal


@dataclass(frozen=True)
class Circle:
    """Circle with signed curvature, complex center and generation depth."""

    k: float        # curvature = 1/radius (negative for the outer circle)
    z: complex      # center as complex number x + iy
    depth: int = 0  # generation depth (0 = seed circles)

    def __post_init__(self) -> None:
        if self.k == 0 or not math.isfinite(self.k):
            raise ValueError(f"curvature must be finite and non-zero, got {self.k!r}")

    @property
    def radius(self) -> float:
        return abs(1.0 / self.k)

    @property
    def center(self) -> Tuple[float, float]:
        """Center as (x, y) tuple."""
        return (self.z.real, self.z.imag)

    @property
    def is_outer(self) -> bool:
        return self.k < 0


def distance(a: complex, b: complex) -> float:
    return abs(b - a)


def is_tangent(a: Circle, b: Circle, eps: float) -> bool:
    """True when ``a`` and ``b`` touch externally or one is nested in the other."""
    d = distance(a.z, b.z)
    external = nearly_equal(d, a.radius + b.radius, eps=eps)
    internal = nearly_equal(d, abs(a.radius - b.radius), eps=eps)
    return external or internal


class CircleSet(Sequence[Circle]):
    """Append-only ordered collection of accepted circles.

    Centers and radii are mirrored into numpy buffers (grown by doubling) so
    the duplicate lookup is a single vectorised comparison.
    """

    def __init__(self, circles: Iterable[Circle] = (), capacity: int = 64) -> None:
        self._circles: list[Circle] = []
        self._centers = np.empty(max(1, capacity), dtype=complex)
        self._radii = np.empty(max(1, capacity), dtype=float)
        for c in circles:
            self.append(c)

    def __len__(self) -> int:
        return len(self._circles)

    def __getitem__(self, index):
        return self._circles[index]

    def __iter__(self) -> Iterator[Circle]:
        return iter(self._circles)

    def append(self, circle: Circle) -> None:
        n = len(self._circles)
        if n == self._centers.shape[0]:
            self._centers = np.concatenate([self._centers, np.empty_like(self._centers)])
            self._radii = np.concatenate([self._radii, np.empty_like(self._radii)])
        self._centers[n] = circle.z
        self._radii[n] = circle.radius
        self._circles.append(circle)

    def has_near(self, circle: Circle, eps: float) -> bool:
        """True when some stored circle matches ``circle`` in center and radius within ``eps``."""
        n = len(self._circles)
        if n == 0:
            return False
        close_center = np.abs(self._centers[:n] - circle.z) < eps
        close_radius = np.abs(self._radii[:n] - circle.radius) < eps
        return bool(np.any(close_center & close_radius))

    def snapshot(self) -> Tuple[Circle, ...]:
        return tuple(self._circles)

    def as_array(self) -> np.ndarray:
        """(N, 3) array of ``[x, y, radius]`` rows, in insertion order."""
        n = len(self._circles)
        out = np.empty((n, 3), dtype=float)
        out[:, 0] = self._centers[:n].real
        out[:, 1] = self._centers[:n].imag
        out[:, 2] = self._radii[:n]
        return out


__all__ = ["Circle", "CircleSet", "distance", "is_tangent"]
