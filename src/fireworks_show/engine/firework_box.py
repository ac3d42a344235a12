"""A box that ignites and manages many fireworks."""

from __future__ import annotations

import logging
import math
import random
from typing import TYPE_CHECKING, Optional, Union

from fireworks_show.types import Shape, Vector

from .explosions import FRAGMENT_COUNT
from .firework import Firework
from .paths import PathLibrary

if TYPE_CHECKING:
    from fireworks_show.renderer.surface import Surface

logger = logging.getLogger(__name__)

FRAMES_PER_SECOND = 60
ASCENT_SECONDS = 2
ASCENT_TICKS = ASCENT_SECONDS * FRAMES_PER_SECOND
GRAVITY = Vector(0.0, 0.07)

# Random targets, as fractions of the box extents
TARGET_X_RANGE = (0.1, 0.9)
TARGET_Y_RANGE = (0.2, 0.4)

Target = Union[Vector, tuple[float, float]]


class FireworkBox:
    """Creates, advances and retires fireworks within fixed extents.

    Fireworks launch from the middle of the bottom edge. Ignition cadence and
    the concurrency cap are the caller's concern.
    """

    def __init__(
        self,
        width: float,
        height: float,
        gravity: Vector = GRAVITY,
        shape: Union[Shape, str] = Shape.NORMAL,
        rng: Optional[random.Random] = None,
        path_library: Optional[PathLibrary] = None,
        path_reference: Optional[str] = None,
        normal_count: int = FRAGMENT_COUNT,
    ):
        """Initialize the box.

        Args:
            width: Width of the display area.
            height: Height of the display area.
            gravity: Force applied to every particle each tick.
            shape: Explosion shape of new fireworks.
            rng: Random source for hues, targets and shapes.
            path_library: Library used to resolve outline shapes.
            path_reference: Reference of the custom path, if any.
            normal_count: Fragment count of the normal shape.
        """
        self._fireworks: list[Firework] = []
        self._width = width
        self._height = height
        self._gravity = gravity
        self._shape = Shape.from_name(shape)
        self._rng = rng or random.Random()
        self._path_library = path_library or PathLibrary()
        self._path_reference = path_reference
        self._normal_count = normal_count
        self._peak_count = 0

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def gravity(self) -> Vector:
        return self._gravity

    @property
    def count(self) -> int:
        """Number of live fireworks."""
        return len(self._fireworks)

    @property
    def peak_count(self) -> int:
        """Highest number of fireworks alive at once."""
        return self._peak_count

    @property
    def fireworks(self) -> tuple[Firework, ...]:
        return tuple(self._fireworks)

    @property
    def shape(self) -> Shape:
        return self._shape

    @shape.setter
    def shape(self, shape: Union[Shape, str]) -> None:
        self._shape = Shape.from_name(shape)

    def launch_velocity(self, origin: Vector, target: Vector) -> Vector:
        """Solve the launch velocity that peaks at the target height.

        The horizontal speed covers the distance in ASCENT_TICKS ticks. The
        vertical speed follows from energy conservation under constant
        gravity: v = sqrt(2 * g * h).
        """
        x_vel = (target.x - origin.x) / ASCENT_TICKS
        y_vel = -math.sqrt(2 * self._gravity.y * max(0.0, self._height - target.y))
        return Vector(x_vel, y_vel)

    def start_new_firework(self, target: Optional[Target] = None) -> Firework:
        """Ignite a new firework.

        Args:
            target: Point to aim at. A random point in the upper part of the
                box is used when omitted.

        Returns:
            The new firework.
        """
        hue = self._rng.randrange(0, 360)
        origin = Vector(float(math.floor(self._width / 2)), float(self._height))

        if target is not None and not isinstance(target, Vector):
            target = Vector(float(target[0]), float(target[1]))

        if target is not None:
            aim = target
        else:
            aim = Vector(
                self._rng.uniform(self._width * TARGET_X_RANGE[0], self._width * TARGET_X_RANGE[1]),
                self._rng.uniform(self._height * TARGET_Y_RANGE[0], self._height * TARGET_Y_RANGE[1]),
            )

        firework = Firework(
            origin,
            self.launch_velocity(origin, aim),
            self._shape,
            hue,
            rng=self._rng,
            target=target,
            path_library=self._path_library,
            path_reference=self._path_reference,
            normal_count=self._normal_count,
        )
        self._fireworks.append(firework)

        if len(self._fireworks) > self._peak_count:
            self._peak_count = len(self._fireworks)
            logger.debug("Reached record number of fireworks: %d", self._peak_count)

        return firework

    def step(self) -> None:
        """Advance every firework and remove the dead ones."""
        alive = []
        for firework in self._fireworks:
            try:
                firework.apply_force(self._gravity)
                firework.step()
            except Exception:
                logger.exception("Dropping firework that failed to step")
                continue
            if not firework.dead:
                alive.append(firework)
        self._fireworks = alive

    def render(self, surface: Surface) -> None:
        """Draw every live firework."""
        for firework in reversed(self._fireworks[:]):
            try:
                firework.render(surface)
            except Exception:
                logger.exception("Dropping firework that failed to render")
                self._fireworks.remove(firework)

    def clear(self) -> None:
        """Remove all fireworks."""
        self._fireworks.clear()
