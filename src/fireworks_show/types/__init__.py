"""Type definitions for the fireworks engine."""

from __future__ import annotations

from .vector import (
    Vector,
    InvalidOperandError,
    check_vector,
    ZERO,
    from_polar,
    from_cartesian,
    distance,
)
from .particle import (
    Particle,
    MAX_TRAIL,
    INITIAL_LIFESPAN,
)
from .shape import (
    Shape,
    SHAPE_ALIASES,
    PATH_SHAPES,
)

__all__ = [
    # Vector
    "Vector",
    "InvalidOperandError",
    "check_vector",
    "ZERO",
    "from_polar",
    "from_cartesian",
    "distance",
    # Particle
    "Particle",
    "MAX_TRAIL",
    "INITIAL_LIFESPAN",
    # Shapes
    "Shape",
    "SHAPE_ALIASES",
    "PATH_SHAPES",
]
