from __future__ import annotations

from typing import List

from .circle import Circle
from .descartes import ComplexDescartesValue, DescartesValue


def generate_circles(dv: DescartesValue, cdv: ComplexDescartesValue, *, depth: int = 0) -> List[Circle]:
    """Build the four candidates: each curvature paired with both of its centers."""
    (p1, p2), (n1, n2) = cdv.positive, cdv.negative
    return [
        Circle(dv.positive, p1, depth),
        Circle(dv.positive, p2, depth),
        Circle(dv.negative, n1, depth),
        Circle(dv.negative, n2, depth),
    ]


__all__ = ["generate_circles"]
