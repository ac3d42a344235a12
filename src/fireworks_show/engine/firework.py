"""A single firework: one rising particle, then a swarm of fragments."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Optional

from fireworks_show.types import Particle, Shape, Vector, check_vector, distance

from .explosions import FRAGMENT_COUNT, ExplosionContext, explode
from .paths import PathLibrary

if TYPE_CHECKING:
    from fireworks_show.renderer.surface import Surface

TARGET_PROXIMITY = 10.0
FRAGMENT_LIFESPAN = 200


class Firework:
    """A particle shot upwards that explodes at its highest point.

    While ascending the firework holds exactly one particle, which does not
    age. At the apex (or near the target, when one is given) that particle is
    replaced by the fragments of the explosion shape, which fall and fade.
    """

    def __init__(
        self,
        origin: Vector,
        initial_velocity: Vector,
        shape: Shape,
        hue: float,
        rng: Optional[random.Random] = None,
        target: Optional[Vector] = None,
        path_library: Optional[PathLibrary] = None,
        path_reference: Optional[str] = None,
        normal_count: int = FRAGMENT_COUNT,
    ):
        """Initialize the firework.

        Args:
            origin: Launch position.
            initial_velocity: Launch velocity.
            shape: Explosion shape.
            hue: Colour hue in degrees.
            rng: Random source for shape generation.
            target: Optional point that triggers the explosion when reached.
            path_library: Library used to resolve outline shapes.
            path_reference: Reference of the custom path, if any.
            normal_count: Fragment count of the normal shape.
        """
        check_vector(initial_velocity)
        if target is not None:
            check_vector(target)
        self.origin = origin
        self.initial_velocity = initial_velocity.normalized()
        self.shape = shape
        self.hue = hue
        self.target = target
        self.fragment_lifespan = FRAGMENT_LIFESPAN
        self.explosion_origin: Optional[Vector] = None
        self._rng = rng or random.Random()
        self._path_library = path_library
        self._path_reference = path_reference
        self._normal_count = normal_count
        self._exploded = False
        self._particles: list[Particle] = [Particle(origin, initial_velocity, hue, decay=0.0)]

    @property
    def exploded(self) -> bool:
        return self._exploded

    @property
    def particles(self) -> tuple[Particle, ...]:
        return tuple(self._particles)

    @property
    def dead(self) -> bool:
        """Check if the firework has burnt out."""
        return self.fragment_lifespan <= 0 and not self._particles

    def apply_force(self, force: Vector) -> None:
        """Apply a force to every particle of the firework."""
        for particle in self._particles:
            particle.apply_force(force)

    def step(self) -> None:
        """Advance the firework by one tick."""
        if not self._exploded:
            rocket = self._particles[0]
            rocket.step()
            if self._reached_apex(rocket):
                self._explode(rocket.position)
            return

        for particle in self._particles:
            particle.step()
        self._particles = [p for p in self._particles if not p.dead]
        self.fragment_lifespan -= 1

    def _reached_apex(self, rocket: Particle) -> bool:
        if rocket.velocity.y >= 0.0:
            return True
        return self.target is not None and distance(self.target, rocket.position) < TARGET_PROXIMITY

    def _explode(self, center: Vector) -> None:
        self._exploded = True
        self.explosion_origin = center
        ctx = ExplosionContext(
            origin=center,
            hue=self.hue,
            direction=self.initial_velocity,
            rng=self._rng,
        )
        self._particles = explode(
            self.shape,
            ctx,
            path_library=self._path_library,
            path_reference=self._path_reference,
            normal_count=self._normal_count,
        )

    def render(self, surface: Surface) -> None:
        """Draw every particle of the firework."""
        for particle in reversed(self._particles):
            particle.render(surface)
