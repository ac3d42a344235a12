"""Pytest configuration and fixtures."""

from __future__ import annotations

import random

import pytest

from fireworks_show.engine import ExplosionContext, FireworkBox, PathLibrary
from fireworks_show.renderer.headless import HeadlessRenderer
from fireworks_show.types import Vector


class RecordingSurface:
    """Surface that records every draw call."""

    def __init__(self, width: float = 800, height: float = 500):
        self.width = width
        self.height = height
        self.discs: list[tuple[float, float, float, float, float]] = []
        self.clear_count = 0

    def clear(self) -> None:
        self.discs.clear()
        self.clear_count += 1

    def draw_disc(self, x: float, y: float, radius: float, hue: float, alpha: float) -> None:
        self.discs.append((x, y, radius, hue, alpha))


class FakeClock:
    """Manually advanced clock, in seconds."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def rng() -> random.Random:
    """Create a seeded random source."""
    return random.Random(1234)


@pytest.fixture
def recording_surface() -> RecordingSurface:
    """Create a surface that records draw calls."""
    return RecordingSurface()


@pytest.fixture
def headless_surface() -> HeadlessRenderer:
    """Create a headless text surface."""
    return HeadlessRenderer(width=800, height=500, cols=80, rows=24)


@pytest.fixture
def fake_clock() -> FakeClock:
    """Create a manually advanced clock."""
    return FakeClock()


@pytest.fixture
def explosion_context(rng) -> ExplosionContext:
    """Create an explosion context at (100, 100) heading straight up."""
    return ExplosionContext(
        origin=Vector(100.0, 100.0),
        hue=120,
        direction=Vector(0.0, -1.0),
        rng=rng,
    )


@pytest.fixture
def path_library() -> PathLibrary:
    """Create a path library with a square registered as 'square'."""
    return PathLibrary({"square": "M-10,-10 L10,-10 L10,10 L-10,10 Z"})


@pytest.fixture
def basic_box(rng, path_library) -> FireworkBox:
    """Create a 200x400 box with the default gravity."""
    return FireworkBox(200, 400, gravity=Vector(0.0, 0.07), rng=rng, path_library=path_library)
