"""Circle-generation engine: Descartes solver, candidate validation and the subdivision driver."""

from .circle import Circle, CircleSet, distance, is_tangent
from .descartes import (
    ComplexDescartesValue,
    DescartesValue,
    complex_descartes,
    descartes,
    descartes_residual,
)
from .driver import GasketDriver, seed_circles
from .generator import generate_circles
from .numeric import TolerancePolicy, clamp_radicand, nearly_equal
from .types import DriverState, GasketConfig, Triplet
from .validator import Rejection, rejection_reason, validate_circle

__all__ = [
    "Circle",
    "CircleSet",
    "distance",
    "is_tangent",
    "DescartesValue",
    "ComplexDescartesValue",
    "descartes",
    "complex_descartes",
    "descartes_residual",
    "generate_circles",
    "Rejection",
    "rejection_reason",
    "validate_circle",
    "TolerancePolicy",
    "clamp_radicand",
    "nearly_equal",
    "GasketConfig",
    "Triplet",
    "DriverState",
    "GasketDriver",
    "seed_circles",
]
