"""Breadth-first subdivision driver for the Apollonian gasket.

The driver owns the accepted circle set and the frontier of triplets that can
still be subdivided. Each :meth:`GasketDriver.step` expands every frontier
triplet through solve -> generate -> validate and replaces the frontier with
the child triplets of the accepted circles. Branches whose candidates are all
rejected simply stop contributing, so the packing terminates once circles
shrink below the tolerance.
"""

from __future__ import annotations

import collections
import logging
from typing import List, Optional, Tuple

from .circle import Circle, CircleSet
from .descartes import complex_descartes, descartes
from .generator import generate_circles
from .types import DriverState, GasketConfig, Triplet
from .validator import rejection_reason

log = logging.getLogger("apollogasket.core")


def seed_circles(canvas_size: float) -> Tuple[Circle, Circle, Circle]:
    """Outer bounding circle plus two equal inner circles touching at the middle."""
    half = canvas_size / 2.0
    quarter = half / 2.0
    outer = Circle(-1.0 / half, complex(half, half))
    left = Circle(1.0 / quarter, complex(quarter, half))
    right = Circle(1.0 / quarter, complex(half + quarter, half))
    return outer, left, right


class GasketDriver:
    """Owns the accepted circles and the frontier; advances one level per step."""

    def __init__(self, config: Optional[GasketConfig] = None, seeds: Optional[Tuple[Circle, Circle, Circle]] = None):
        self.config = config or GasketConfig()
        self.tolerance = self.config.tolerance()
        if seeds is None:
            seeds = seed_circles(float(self.config.canvas_size))
        if len(seeds) != 3:
            raise ValueError("exactly three seed circles are required")
        self.circles = CircleSet(seeds)
        self.frontier: List[Triplet] = [Triplet(*seeds)]
        self.generation = 0
        self.state = DriverState.IDLE
        self._rejections: collections.Counter = collections.Counter()

    @property
    def exhausted(self) -> bool:
        return not self.frontier

    def snapshot(self) -> Tuple[Circle, ...]:
        return self.circles.snapshot()

    def expand(self, triplet: Triplet, depth: int) -> List[Circle]:
        """Accept every valid candidate of ``triplet`` into the circle set.

        Returns the accepted circles in candidate order. Rejection tallies are
        accumulated on ``self._rejections`` for the per-step log line.
        """
        k4 = descartes(*triplet)
        centers = complex_descartes(*triplet, k4)
        accepted = []
        for candidate in generate_circles(k4, centers, depth=depth):
            reason = rejection_reason(candidate, self.circles, triplet, self.tolerance)
            if reason is not None:
                self._rejections[reason.value] += 1
                continue
            self.circles.append(candidate)
            accepted.append(candidate)
        return accepted

    def step(self) -> List[Circle]:
        """Run one subdivision level and return the newly accepted circles."""
        if self.state is DriverState.EXPANDING:
            raise RuntimeError("subdivision step already in progress")
        self.state = DriverState.EXPANDING
        self._rejections = collections.Counter()
        try:
            depth = self.generation + 1
            accepted: List[Circle] = []
            next_frontier: List[Triplet] = []
            for triplet in self.frontier:
                for new in self.expand(triplet, depth):
                    accepted.append(new)
                    next_frontier.extend(triplet.children(new))
            self.frontier = next_frontier
            self.generation = depth
        finally:
            self.state = DriverState.IDLE

        log.info(
            "Depth %d: added %d circles (total: %d, frontier: %d)",
            self.generation,
            len(accepted),
            len(self.circles),
            len(self.frontier),
        )
        if self._rejections:
            log.debug("Depth %d rejections: %s", self.generation, dict(self._rejections))
        if not self.frontier:
            log.info("No triplets left to subdivide after depth %d", self.generation)
        return accepted

    def run(self, steps: int) -> int:
        """Perform ``steps`` subdivision levels; returns the number of circles added."""
        if steps < 0:
            raise ValueError("steps must be >= 0")
        added = 0
        for _ in range(int(steps)):
            if self.exhausted:
                break
            added += len(self.step())
        return added


__all__ = ["GasketDriver", "seed_circles"]
