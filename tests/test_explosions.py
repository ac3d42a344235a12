"""Tests for explosion shape generators."""

from __future__ import annotations

import math

import pytest

from fireworks_show.engine import paths
from fireworks_show.engine import (
    FRAGMENT_COUNT,
    ROSE_RATIOS,
    ExplosionContext,
    PathLibrary,
    SvgPathGeometry,
    default_path_library,
    explode,
    explode_circle,
    explode_donut,
    explode_heart,
    explode_normal,
    explode_path,
    explode_rose,
    explode_twinkle,
    resolve_shape,
    rose_sweep,
)
from fireworks_show.types import PATH_SHAPES, Shape, Vector


class ZeroLengthPath:
    """A path that is a single point at the origin."""

    def length(self) -> float:
        return 0.0

    def point_at_length(self, distance: float) -> tuple[float, float]:
        return (0.0, 0.0)


def assert_fragments(particles, ctx):
    """Check every fragment starts at the origin with the context hue."""
    for p in particles:
        assert p.position == ctx.origin
        assert p.hue == ctx.hue
        assert p.decay == 1


class TestNormal:
    """Tests for the normal scatter."""

    def test_fragment_count(self, explosion_context):
        """Test the default burst has 180 fragments."""
        particles = explode_normal(explosion_context)
        assert len(particles) == FRAGMENT_COUNT
        assert_fragments(particles, explosion_context)

    def test_legacy_count(self, explosion_context):
        """Test the legacy 360-fragment burst."""
        assert len(explode_normal(explosion_context, count=360)) == 360

    @pytest.mark.parametrize("count", [0, 179, 361])
    def test_count_out_of_range(self, explosion_context, count):
        """Test counts outside 180..360 are rejected."""
        with pytest.raises(ValueError):
            explode_normal(explosion_context, count=count)

    def test_burst_is_biased_by_direction(self, explosion_context):
        """Test each velocity is a ring velocity plus the ascent direction."""
        particles = explode_normal(explosion_context)
        step = 2 * math.pi / FRAGMENT_COUNT
        for i, p in enumerate(particles):
            ring = p.velocity.minus(explosion_context.direction)
            assert 0.1 <= ring.magnitude < 1.6 + 1e-9
            diff = (ring.angle - i * step) % (2 * math.pi)
            assert min(diff, 2 * math.pi - diff) == pytest.approx(0.0, abs=1e-6)

    def test_seeded_bursts_repeat(self, explosion_context):
        """Test the same seed gives the same burst."""
        import random

        first = explode_normal(ExplosionContext(Vector(0, 0), 1, Vector(0, -1), random.Random(7)))
        second = explode_normal(ExplosionContext(Vector(0, 0), 1, Vector(0, -1), random.Random(7)))
        assert [p.velocity for p in first] == [p.velocity for p in second]


class TestRings:
    """Tests for circle, donut and heart shapes."""

    def test_circle(self, explosion_context):
        """Test the circle is one ring at fixed speed."""
        particles = explode_circle(explosion_context)
        assert len(particles) == 180
        assert_fragments(particles, explosion_context)
        for p in particles:
            assert p.velocity.magnitude == pytest.approx(0.8)

    def test_donut(self, explosion_context):
        """Test the donut has an outer ring and a slower inner ring."""
        particles = explode_donut(explosion_context)
        assert len(particles) == 360
        for outer, inner in zip(particles[::2], particles[1::2]):
            assert outer.velocity.magnitude == pytest.approx(0.8)
            assert inner.velocity.magnitude == pytest.approx(0.64)
            assert inner.velocity.angle == pytest.approx(outer.velocity.angle)

    def test_heart(self, explosion_context):
        """Test the heart follows the parametric curve."""
        particles = explode_heart(explosion_context)
        assert len(particles) == 180
        assert_fragments(particles, explosion_context)
        # a = 0: x = 0, y = -(13 - 5 - 2 - 1)
        assert particles[0].velocity.x == pytest.approx(0.0)
        assert particles[0].velocity.y == pytest.approx(-5 * 0.05)
        # a = pi/2: x = 16, y = -(0 + 5 - 0 - 1)
        assert particles[45].velocity.x == pytest.approx(16 * 0.05)
        assert particles[45].velocity.y == pytest.approx(-4 * 0.05)


class TestRose:
    """Tests for the rose curve."""

    def test_sweep_for_three_halves(self):
        """Test ratio 3/2 sweeps two turns in at most 180 samples."""
        max_angle, step, count = rose_sweep(3, 2)
        assert max_angle == pytest.approx(2 * math.pi * 2 / math.gcd(3, 2))
        assert count <= 180
        assert count == 180
        assert step == pytest.approx(math.pi / 45)

    def test_sweep_reduces_ratio(self):
        """Test 4/2 closes after a single turn, like 2/1."""
        assert rose_sweep(4, 2) == rose_sweep(2, 1)
        assert rose_sweep(2, 1)[0] == pytest.approx(2 * math.pi)

    def test_sweep_with_many_turns(self):
        """Test nine turns sample every 32 degrees."""
        max_angle, step, count = rose_sweep(2, 9)
        assert max_angle == pytest.approx(18 * math.pi)
        assert step == pytest.approx(math.radians(32))
        assert count == 102

    @pytest.mark.parametrize("ratio", ROSE_RATIOS)
    def test_every_ratio_covers_sweep(self, ratio):
        """Test every curated ratio stays within bounds and covers its sweep."""
        max_angle, step, count = rose_sweep(*ratio)
        assert count <= 180
        assert (count - 1) * step < max_angle <= count * step + 1e-9

    def test_zero_denominator_raises(self):
        """Test a zero denominator is rejected."""
        with pytest.raises(ValueError):
            rose_sweep(3, 0)

    def test_rose_fragments(self, explosion_context):
        """Test fragments follow r = 0.8 cos(k a)."""
        particles = explode_rose(explosion_context, ratio=(3, 2))
        assert len(particles) == 180
        assert_fragments(particles, explosion_context)
        _, step, _ = rose_sweep(3, 2)
        for i, p in enumerate(particles):
            assert abs(p.velocity.magnitude) == pytest.approx(abs(0.8 * math.cos(1.5 * i * step)), abs=1e-9)

    def test_random_ratio(self, explosion_context):
        """Test a random ratio gives at most 180 fragments."""
        for _ in range(20):
            assert 0 < len(explode_rose(explosion_context)) <= 180


class TestTwinkle:
    """Tests for the twinkle star."""

    def test_five_arms(self, explosion_context):
        """Test five arms give 15 fragments with radii cycling 4, 3, 1."""
        particles = explode_twinkle(explosion_context, arms=5)
        assert len(particles) == 15
        assert_fragments(particles, explosion_context)
        radii = [round(p.velocity.magnitude, 9) for p in particles]
        assert radii == [4, 3, 1] * 5
        assert particles[1].velocity.angle == pytest.approx(math.pi / 5)

    def test_random_arms(self, explosion_context):
        """Test the arm count is picked between 4 and 7."""
        for _ in range(20):
            count = len(explode_twinkle(explosion_context))
            assert count % 3 == 0
            assert 12 <= count <= 21

    def test_no_arms_raises(self, explosion_context):
        """Test zero arms is rejected."""
        with pytest.raises(ValueError):
            explode_twinkle(explosion_context, arms=0)


class TestPathSample:
    """Tests for sampling a path outline."""

    def test_square_fits_unit_scale(self, explosion_context):
        """Test sampled points are scaled by the largest magnitude."""
        geometry = SvgPathGeometry("M-10,-10 L10,-10 L10,10 L-10,10 Z")
        assert geometry.length() == pytest.approx(80)

        particles = explode_path(explosion_context, geometry)
        assert len(particles) == 180
        assert_fragments(particles, explosion_context)

        magnitudes = [p.velocity.magnitude for p in particles]
        assert max(magnitudes) == pytest.approx(1.0)
        # The first sample is the starting corner
        assert particles[0].velocity.x == pytest.approx(-math.sqrt(0.5))
        assert particles[0].velocity.y == pytest.approx(-math.sqrt(0.5))

    def test_shape_is_preserved(self, explosion_context):
        """Test relative proportions survive normalization."""
        geometry = SvgPathGeometry("M-10,-10 L10,-10 L10,10 L-10,10 Z")
        particles = explode_path(explosion_context, geometry)
        # A quarter of the way along is the next corner
        corner = particles[45].velocity
        assert corner.x == pytest.approx(math.sqrt(0.5))
        assert corner.y == pytest.approx(-math.sqrt(0.5))

    def test_zero_length_path(self, explosion_context):
        """Test a degenerate path leaves fragments at rest."""
        particles = explode_path(explosion_context, ZeroLengthPath())
        assert len(particles) == 180
        assert all(p.velocity == Vector(0, 0) for p in particles)

    @pytest.mark.parametrize("shape", sorted(PATH_SHAPES, key=lambda s: s.value))
    def test_builtin_outlines(self, explosion_context, shape):
        """Test every built-in outline samples into unit scale."""
        particles = explode(shape, explosion_context, path_library=PathLibrary())
        assert len(particles) == 180
        assert max(p.velocity.magnitude for p in particles) == pytest.approx(1.0)

    def test_cubic_is_sampled_by_arc_length(self):
        """Test points on a curve are placed by distance, not curve parameter."""
        # Control points at the start make the parameter crawl, then rush
        geometry = SvgPathGeometry("M0,0 C0,0 0,0 100,0")
        assert geometry.length() == pytest.approx(100, rel=1e-3)

        x, y = geometry.point_at_length(50)
        assert x == pytest.approx(50, abs=0.5)
        assert y == pytest.approx(0)
        x, _ = geometry.point_at_length(25)
        assert x == pytest.approx(25, abs=0.5)

    def test_curve_samples_are_evenly_spaced(self):
        """Test equal distances along a quarter circle give equal chords."""
        geometry = SvgPathGeometry("M100,0 C100,55.2285 55.2285,100 0,100")
        length = geometry.length()
        assert length == pytest.approx(math.pi * 50, rel=1e-3)

        points = [geometry.point_at_length(length * i / 9) for i in range(10)]
        gaps = [math.dist(a, b) for a, b in zip(points, points[1:])]
        assert max(gaps) == pytest.approx(min(gaps), rel=0.01)
        assert all(math.hypot(x, y) == pytest.approx(100, abs=0.1) for x, y in points)

    def test_builtin_outline_spacing(self):
        """Test the curved umbrella outline is sampled at even steps."""
        geometry = PathLibrary().for_shape(Shape.UMBRELLA)
        step = math.floor(geometry.length()) / 180
        points = [geometry.point_at_length(step * i) for i in range(180)]
        gaps = [math.dist(a, b) for a, b in zip(points, points[1:])]
        # A chord is never longer than the arc it spans
        assert max(gaps) <= step * 1.02
        assert sorted(gaps)[90] == pytest.approx(step, rel=0.05)


class TestDispatch:
    """Tests for shape resolution."""

    @pytest.mark.parametrize(
        "shape, count",
        [
            (Shape.NORMAL, 180),
            (Shape.CIRCLE, 180),
            (Shape.DONUT, 360),
            (Shape.HEART, 180),
        ],
    )
    def test_fixed_counts(self, explosion_context, path_library, shape, count):
        """Test each shape dispatches to its generator."""
        assert len(explode(shape, explosion_context, path_library=path_library)) == count

    def test_custom_path(self, explosion_context, path_library):
        """Test a registered custom path is traced."""
        particles = explode(
            Shape.CUSTOM_PATH,
            explosion_context,
            path_library=path_library,
            path_reference="square",
        )
        assert len(particles) == 180
        assert max(p.velocity.magnitude for p in particles) == pytest.approx(1.0)

    @pytest.mark.parametrize("reference", [None, "missing"])
    def test_unresolvable_path_falls_back_to_normal(self, explosion_context, path_library, reference):
        """Test a missing path explodes as the normal shape."""
        particles = explode(
            Shape.CUSTOM_PATH,
            explosion_context,
            path_library=path_library,
            path_reference=reference,
            normal_count=360,
        )
        assert len(particles) == 360

    def test_unparsable_path_falls_back_to_normal(self, explosion_context):
        """Test path data that cannot be parsed explodes as normal."""
        library = PathLibrary({"broken": ""})
        particles = explode(
            Shape.CUSTOM_PATH,
            explosion_context,
            path_library=library,
            path_reference="broken",
        )
        assert len(particles) == 180

    def test_random_never_resolves_to_random(self, rng):
        """Test random picks a concrete shape."""
        picked = {resolve_shape(Shape.RANDOM, rng) for _ in range(300)}
        assert Shape.RANDOM not in picked
        assert len(picked) > 5

    def test_concrete_shape_resolves_to_itself(self, rng):
        """Test non-random shapes are kept."""
        assert resolve_shape(Shape.ROSE, rng) is Shape.ROSE

    def test_random_explosion_produces_fragments(self, explosion_context, path_library):
        """Test random explosions always produce fragments."""
        for _ in range(20):
            assert len(explode(Shape.RANDOM, explosion_context, path_library=path_library)) > 0

    def test_default_library_is_shared(self, explosion_context, monkeypatch):
        """Test outline shapes without a library reuse one parsed geometry."""
        library = default_path_library()
        assert default_path_library() is library

        explode(Shape.STAR, explosion_context)
        geometry = library.get("star")

        parsed = []
        monkeypatch.setattr(paths, "SvgPathGeometry", parsed.append)
        assert len(explode(Shape.STAR, explosion_context)) == 180
        assert parsed == []
        assert library.get("star") is geometry
