from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import NamedTuple, Tuple

from .. import settings
from .circle import Circle
from .numeric import TolerancePolicy


@dataclass(frozen=True)
class GasketConfig:
    """Configuration for a gasket run on a square canvas."""

    canvas_size: float = settings.CANVAS_SIZE
    # ε = canvas_size * tolerance_ratio
    tolerance_ratio: float = settings.TOLERANCE_RATIO
    # Degenerate-size threshold, in multiples of ε
    min_radius_factor: float = settings.MIN_RADIUS_FACTOR

    def tolerance(self) -> TolerancePolicy:
        return TolerancePolicy.for_canvas(
            float(self.canvas_size),
            float(self.tolerance_ratio),
            float(self.min_radius_factor),
        )


class Triplet(NamedTuple):
    """Three pairwise tangent circles seeding the next subdivision."""

    c1: Circle
    c2: Circle
    c3: Circle

    def children(self, new: Circle) -> Tuple["Triplet", "Triplet", "Triplet"]:
        """Triplets formed by ``new`` and each pair of this triplet's circles."""
        return (
            Triplet(self.c1, self.c2, new),
            Triplet(self.c1, self.c3, new),
            Triplet(self.c2, self.c3, new),
        )


class DriverState(str, enum.Enum):
    IDLE = "idle"
    EXPANDING = "expanding"


__all__ = ["GasketConfig", "Triplet", "DriverState"]
