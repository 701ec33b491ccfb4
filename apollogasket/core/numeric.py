"""Numeric tolerances for the gasket kernel, scaled to the drawing extent."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .. import settings


@dataclass(frozen=True)
class TolerancePolicy:
    """Container for the absolute tolerances used by the validator.

    ``linear`` is the ε of the tangency and duplicate tests. ``min_radius`` is
    the degenerate-size threshold below which candidates are rejected.
    """

    linear: float
    min_radius: float

    @classmethod
    def for_canvas(
        cls,
        canvas_size: float,
        ratio: float = settings.TOLERANCE_RATIO,
        min_radius_factor: float = settings.MIN_RADIUS_FACTOR,
    ) -> "TolerancePolicy":
        """Derive tolerances as a proportion of the canvas edge.

        Rescaling the canvas rescales ε, so the same circles are considered
        tangent or duplicate regardless of the drawing size.
        """

        if not math.isfinite(canvas_size) or canvas_size <= 0.0:
            raise ValueError("canvas_size must be a positive finite number")
        if not 0.0 < ratio < 1.0:
            raise ValueError("tolerance ratio must be in (0, 1)")
        if min_radius_factor < 0.0:
            raise ValueError("min_radius_factor must be >= 0")
        eps = canvas_size * ratio
        return cls(linear=eps, min_radius=eps * min_radius_factor)


def nearly_equal(a: float, b: float, *, eps: float) -> bool:
    return abs(a - b) < eps


def clamp_radicand(value: float) -> float:
    """Clamp a real radicand that fell below zero through rounding."""
    return value if value > 0.0 else 0.0


__all__ = ["TolerancePolicy", "nearly_equal", "clamp_radicand"]
