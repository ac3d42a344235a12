"""Explosion shape generators.

Each generator takes an :class:`ExplosionContext` and returns the fragment
particles of one detonation, all starting at the explosion origin.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Optional

import numpy as np

from fireworks_show.types import PATH_SHAPES, Particle, Shape, Vector, from_polar

from .paths import PathGeometry, PathLibrary

logger = logging.getLogger(__name__)

FRAGMENT_COUNT = 180
MAX_NORMAL_FRAGMENTS = 360
FRAGMENT_DECAY = 1.0

RING_SPEED = 0.8
DONUT_INNER_FACTOR = 0.8
HEART_SCALE = 0.05
ROSE_SPEED = 0.8
TWINKLE_RADII = (4, 3, 1)

# (n, d) pairs for the rose curve r = cos(n/d * a)
ROSE_RATIOS: tuple[tuple[int, int], ...] = (
    (2, 1), (3, 1), (4, 1), (5, 1), (6, 1), (7, 1),
    (3, 2), (4, 2), (5, 2), (6, 2), (7, 2),
    (2, 3), (4, 3), (5, 3), (6, 3), (7, 3),
    (3, 4), (5, 4), (6, 4), (7, 4),
    (2, 5), (3, 5), (4, 5), (6, 5), (7, 5),
    (4, 6), (5, 6), (7, 6),
    (2, 7), (3, 7), (4, 7), (5, 7), (6, 7),
    (3, 8), (5, 8), (6, 8), (7, 8),
    (2, 9), (4, 9), (5, 9), (6, 9), (7, 9),
)


@dataclass
class ExplosionContext:
    """Inputs shared by every shape generator."""

    origin: Vector
    hue: float
    direction: Vector  # Unit vector of the ascent velocity
    rng: random.Random

    def fragment(self, velocity: Vector) -> Particle:
        """Create a fragment particle leaving the origin at a velocity."""
        return Particle(self.origin, velocity, self.hue, decay=FRAGMENT_DECAY)


def _ring_angles(count: int) -> np.ndarray:
    return np.arange(count) * (2 * math.pi / count)


def explode_normal(ctx: ExplosionContext, count: int = FRAGMENT_COUNT) -> list[Particle]:
    """Random-speed scatter, biased in the direction of travel.

    Args:
        ctx: Explosion context.
        count: Number of fragments, 180 to 360.

    Raises:
        ValueError: If count is out of range.
    """
    if not FRAGMENT_COUNT <= count <= MAX_NORMAL_FRAGMENTS:
        raise ValueError(
            f"Normal fragment count must be between {FRAGMENT_COUNT} and "
            f"{MAX_NORMAL_FRAGMENTS}, got {count}"
        )

    particles = []
    for a in _ring_angles(count):
        m = 0.1 + 1.5 * ctx.rng.random()
        particles.append(ctx.fragment(from_polar(float(a), m).plus(ctx.direction)))
    return particles


def explode_circle(ctx: ExplosionContext) -> list[Particle]:
    return [ctx.fragment(from_polar(float(a), RING_SPEED)) for a in _ring_angles(FRAGMENT_COUNT)]


def explode_donut(ctx: ExplosionContext) -> list[Particle]:
    """Two concentric rings, the inner one slower."""
    particles = []
    for a in _ring_angles(FRAGMENT_COUNT):
        v = from_polar(float(a), RING_SPEED)
        particles.append(ctx.fragment(v))
        particles.append(ctx.fragment(v.multiply(DONUT_INNER_FACTOR)))
    return particles


def explode_heart(ctx: ExplosionContext) -> list[Particle]:
    """Fragments on the parametric heart curve."""
    a = _ring_angles(FRAGMENT_COUNT)
    xs = 16 * np.sin(a) ** 3
    ys = -(13 * np.cos(a) - 5 * np.cos(2 * a) - 2 * np.cos(3 * a) - np.cos(4 * a))
    return [
        ctx.fragment(Vector(float(x), float(y)).multiply(HEART_SCALE))
        for x, y in zip(xs, ys)
    ]


def rose_sweep(n: int, d: int) -> tuple[float, float, int]:
    """Sweep of the rose curve with ratio n/d.

    The curve closes after d / gcd(n, d) full turns. The step starts at one
    degree and doubles until at most FRAGMENT_COUNT samples cover the sweep.

    Returns:
        Tuple of (max_angle, step, sample_count), angles in radians.

    Raises:
        ValueError: If d is not positive.
    """
    if d <= 0:
        raise ValueError(f"Rose denominator must be positive, got {d}")

    turns = d // math.gcd(n, d)
    # Whole degrees keep the sample count exact
    sweep_degrees = 360 * turns
    step_degrees = 1
    while sweep_degrees / step_degrees > FRAGMENT_COUNT:
        step_degrees *= 2
    count = -(-sweep_degrees // step_degrees)
    return (2 * math.pi * turns, math.radians(step_degrees), count)


def explode_rose(
    ctx: ExplosionContext,
    ratio: Optional[tuple[int, int]] = None,
) -> list[Particle]:
    """Fragments tracing a rose curve.

    Args:
        ctx: Explosion context.
        ratio: (n, d) pair. Picked from ROSE_RATIOS when omitted.
    """
    n, d = ratio if ratio is not None else ctx.rng.choice(ROSE_RATIOS)
    k = n / d
    _, step, count = rose_sweep(n, d)
    angles = np.arange(count) * step
    magnitudes = ROSE_SPEED * np.cos(k * angles)
    return [ctx.fragment(from_polar(float(a), float(m))) for a, m in zip(angles, magnitudes)]


def explode_twinkle(ctx: ExplosionContext, arms: Optional[int] = None) -> list[Particle]:
    """A star silhouette of 3 * arms fragments.

    Args:
        ctx: Explosion context.
        arms: Number of star arms. Picked from 4 to 7 when omitted.
    """
    if arms is None:
        arms = ctx.rng.randint(4, 7)
    if arms < 1:
        raise ValueError(f"Twinkle needs at least one arm, got {arms}")

    angle = math.pi / arms
    return [
        ctx.fragment(from_polar(i * angle, TWINKLE_RADII[i % len(TWINKLE_RADII)]))
        for i in range(3 * arms)
    ]


def explode_path(
    ctx: ExplosionContext,
    geometry: PathGeometry,
    count: int = FRAGMENT_COUNT,
) -> list[Particle]:
    """Fragments tracing the outline of a path.

    Points are sampled evenly along the path and scaled down by the largest
    sampled magnitude, so the outline fits in unit scale while keeping its
    proportions. The path coordinates are relative to the explosion origin.
    """
    length = math.floor(geometry.length())
    points = np.array(
        [geometry.point_at_length(length * i / count) for i in range(count)],
        dtype=float,
    )
    largest = float(np.hypot(points[:, 0], points[:, 1]).max())
    if largest > 0:
        points = points / largest
    return [ctx.fragment(Vector(float(x), float(y))) for x, y in points]


GENERATORS: dict[Shape, Callable[[ExplosionContext], list[Particle]]] = {
    Shape.NORMAL: explode_normal,
    Shape.CIRCLE: explode_circle,
    Shape.DONUT: explode_donut,
    Shape.HEART: explode_heart,
    Shape.ROSE: explode_rose,
    Shape.TWINKLE: explode_twinkle,
}


@lru_cache(maxsize=None)
def default_path_library() -> PathLibrary:
    """Get the shared library of built-in outlines, parsed at most once each."""
    return PathLibrary()


def resolve_shape(shape: Shape, rng: random.Random) -> Shape:
    """Pick a concrete shape for random explosions."""
    if shape is Shape.RANDOM:
        return rng.choice([s for s in Shape if s is not Shape.RANDOM])
    return shape


def explode(
    shape: Shape,
    ctx: ExplosionContext,
    path_library: Optional[PathLibrary] = None,
    path_reference: Optional[str] = None,
    normal_count: int = FRAGMENT_COUNT,
) -> list[Particle]:
    """Generate the fragments of one detonation.

    Args:
        shape: Requested shape. Random is resolved here, at explosion time.
        ctx: Explosion context.
        path_library: Library used to resolve outline shapes.
        path_reference: Reference of the custom path, if any.
        normal_count: Fragment count of the normal shape.

    Returns:
        The fragment particles.
    """
    shape = resolve_shape(shape, ctx.rng)
    if path_library is None:
        path_library = default_path_library()

    if shape in PATH_SHAPES:
        return explode_path(ctx, path_library.for_shape(shape))

    if shape is Shape.CUSTOM_PATH:
        geometry = path_library.get(path_reference)
        if geometry is not None:
            return explode_path(ctx, geometry)
        logger.debug("Path %r not found, exploding as normal", path_reference)
        shape = Shape.NORMAL

    if shape is Shape.NORMAL:
        return explode_normal(ctx, normal_count)
    return GENERATORS[shape](ctx)
