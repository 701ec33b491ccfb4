"""Acceptance rules for candidate circles."""

from __future__ import annotations

import enum
from typing import Optional

from .circle import Circle, CircleSet, is_tangent
from .numeric import TolerancePolicy
from .types import Triplet


class Rejection(str, enum.Enum):
    DEGENERATE = "degenerate"
    DUPLICATE = "duplicate"
    NOT_TANGENT = "not_tangent"


def rejection_reason(
    candidate: Circle,
    circles: CircleSet,
    triplet: Triplet,
    tolerance: TolerancePolicy,
) -> Optional[Rejection]:
    """First rule ``candidate`` fails, or ``None`` when it is acceptable.

    Rules are checked in order: size, then duplication against the accepted
    set, then tangency with each circle of the generating triplet.
    """
    eps = tolerance.linear
    if candidate.radius < tolerance.min_radius:
        return Rejection.DEGENERATE
    if circles.has_near(candidate, eps):
        return Rejection.DUPLICATE
    for other in triplet:
        if not is_tangent(candidate, other, eps):
            return Rejection.NOT_TANGENT
    return None


def validate_circle(
    candidate: Circle,
    circles: CircleSet,
    triplet: Triplet,
    tolerance: TolerancePolicy,
) -> bool:
    return rejection_reason(candidate, circles, triplet, tolerance) is None


__all__ = ["Rejection", "rejection_reason", "validate_circle"]
