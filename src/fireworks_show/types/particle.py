"""Point-mass particle with a fading trail."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from .vector import ZERO, Vector, check_vector

if TYPE_CHECKING:
    from fireworks_show.renderer.surface import Surface

MAX_TRAIL = 10
INITIAL_LIFESPAN = 100.0
TRAIL_ALPHA_STEP = 10
PARTICLE_RADIUS = 1


class Particle:
    """A single point mass.

    Forces accumulate into the acceleration until the next ``step``, which
    integrates with semi-implicit Euler and then clears the accumulator.
    """

    def __init__(self, position: Vector, velocity: Vector, hue: float, decay: float = 1.0):
        """Initialize the particle.

        Args:
            position: Starting position.
            velocity: Starting velocity, in units per tick.
            hue: Colour hue in degrees, [0, 360).
            decay: Lifespan lost per step. 0 keeps the particle alive forever.
        """
        check_vector(position)
        check_vector(velocity)
        self.position = position
        self.velocity = velocity
        self.acceleration = ZERO
        self.lifespan = INITIAL_LIFESPAN
        self.decay = decay
        self.hue = hue
        # Most recent first
        self.trail: deque[tuple[float, float]] = deque(
            [(position.x, position.y)], maxlen=MAX_TRAIL
        )

    @property
    def dead(self) -> bool:
        """Check if the particle has used up its lifespan."""
        return self.lifespan <= 0.0

    @property
    def alpha(self) -> float:
        return max(0.0, self.lifespan) / INITIAL_LIFESPAN

    def apply_force(self, force: Vector) -> None:
        """Accumulate a force for the next step."""
        self.acceleration = self.acceleration.plus(force)

    def step(self) -> None:
        """Advance the particle by one tick."""
        # The trail lags the position by one step
        self.trail.appendleft((self.position.x, self.position.y))
        self.velocity = self.velocity.plus(self.acceleration)
        self.position = self.position.plus(self.velocity)
        self.lifespan -= self.decay
        self.acceleration = ZERO

    def render(self, surface: Surface) -> None:
        """Draw the particle and its trail.

        Args:
            surface: Surface to draw on.
        """
        if self.alpha > 0:
            surface.draw_disc(self.position.x, self.position.y, PARTICLE_RADIUS, self.hue, self.alpha)

        # The oldest trail point is not drawn
        for i in range(len(self.trail) - 1):
            alpha = (self.lifespan - (i * TRAIL_ALPHA_STEP) - 1) / INITIAL_LIFESPAN
            if alpha <= 0:
                break
            x, y = self.trail[i]
            surface.draw_disc(x, y, PARTICLE_RADIUS, self.hue, alpha)

    def __repr__(self) -> str:
        return (
            f"Particle(position={self.position!r}, velocity={self.velocity!r}, "
            f"lifespan={self.lifespan}, decay={self.decay})"
        )
