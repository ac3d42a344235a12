"""Fireworks simulation engine."""

from __future__ import annotations

from .explosions import (
    ExplosionContext,
    explode,
    default_path_library,
    explode_normal,
    explode_circle,
    explode_donut,
    explode_heart,
    explode_rose,
    explode_twinkle,
    explode_path,
    resolve_shape,
    rose_sweep,
    FRAGMENT_COUNT,
    ROSE_RATIOS,
)
from .paths import PathGeometry, PathLibrary, SvgPathGeometry
from .firework import Firework, FRAGMENT_LIFESPAN, TARGET_PROXIMITY
from .firework_box import FireworkBox, FRAMES_PER_SECOND, ASCENT_TICKS, GRAVITY

__all__ = [
    # Explosions
    "ExplosionContext",
    "explode",
    "default_path_library",
    "explode_normal",
    "explode_circle",
    "explode_donut",
    "explode_heart",
    "explode_rose",
    "explode_twinkle",
    "explode_path",
    "resolve_shape",
    "rose_sweep",
    "FRAGMENT_COUNT",
    "ROSE_RATIOS",
    # Paths
    "PathGeometry",
    "PathLibrary",
    "SvgPathGeometry",
    # Fireworks
    "Firework",
    "FRAGMENT_LIFESPAN",
    "TARGET_PROXIMITY",
    "FireworkBox",
    "FRAMES_PER_SECOND",
    "ASCENT_TICKS",
    "GRAVITY",
]
