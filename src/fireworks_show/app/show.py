"""Fireworks show: drives a firework box at a fixed frame rate."""

from __future__ import annotations

import asyncio
import logging
import random
import time
from typing import TYPE_CHECKING, Callable, Optional

from fireworks_show.engine import FRAMES_PER_SECOND, FireworkBox, PathLibrary
from fireworks_show.types import Vector

from .options import FireworksOptions

if TYPE_CHECKING:
    from fireworks_show.renderer.surface import Surface

logger = logging.getLogger(__name__)


class FireworksShow:
    """One running fireworks display.

    Holds everything the display needs: the surface, the options, the box of
    fireworks and the ignition clock. Independent shows share no state.

    Ignition cadence follows the clock, but the physics advances a fixed
    amount per tick, so an irregular tick rate distorts trajectories.
    """

    def __init__(
        self,
        surface: Surface,
        options: FireworksOptions,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], float]] = None,
        path_library: Optional[PathLibrary] = None,
    ):
        """Initialize the show.

        Args:
            surface: Surface to draw on.
            options: Display options.
            rng: Random source. Seed it for reproducible shows.
            clock: Function returning the current time in seconds.
            path_library: Library used to resolve outline shapes.
        """
        self.surface = surface
        self.options = options
        self.target_frame_time = 1.0 / FRAMES_PER_SECOND
        self._rng = rng or random.Random()
        self._clock = clock or time.monotonic
        self._path_library = path_library or PathLibrary()
        self._last_ignite_ms: Optional[float] = None
        self._running = False
        self._frame_count = 0
        self.box = self._create_box(surface.width, surface.height)

    def _create_box(self, width: float, height: float) -> FireworkBox:
        return FireworkBox(
            width,
            height,
            gravity=Vector(0.0, self.options.gravity),
            shape=self.options.shape,
            rng=self._rng,
            path_library=self._path_library,
            path_reference=self.options.path_reference,
            normal_count=self.options.normal_fragments,
        )

    @property
    def is_running(self) -> bool:
        """Check if the show is running."""
        return self._running

    @property
    def frame_count(self) -> int:
        """Number of ticks processed."""
        return self._frame_count

    def start(self) -> None:
        """Start the show."""
        self._running = True

    def stop(self) -> None:
        """Stop the show. Ticks after this are ignored."""
        if self._running:
            logger.debug("Stopping show after %d frames", self._frame_count)
        self._running = False

    def resize(self, width: float, height: float) -> None:
        """Restart the display with new extents.

        Live fireworks are discarded and the ignition cadence restarts.
        """
        self.box = self._create_box(width, height)
        self._last_ignite_ms = None
        self.surface.clear()

    def maybe_ignite(self, now_ms: Optional[float] = None) -> bool:
        """Ignite a firework if the interval has passed and the cap allows it.

        Args:
            now_ms: Current time in milliseconds. Read from the clock if omitted.

        Returns:
            True if a firework was ignited.
        """
        if now_ms is None:
            now_ms = self._clock() * 1000

        due = (
            self._last_ignite_ms is None
            or now_ms - self._last_ignite_ms > self.options.ignite_interval_ms
        )
        if not due or self.box.count >= self.options.max_concurrent:
            return False

        self._last_ignite_ms = now_ms
        firework = self.box.start_new_firework()
        logger.debug("Ignited firework with hue %d (%d live)", firework.hue, self.box.count)
        return True

    def tick(self) -> None:
        """Process a single frame: ignite, step, render."""
        if not self._running:
            return

        self.maybe_ignite()
        self.surface.clear()
        self.box.step()
        self.box.render(self.surface)
        self._frame_count += 1

    async def run_async(
        self,
        max_ticks: Optional[int] = None,
        on_frame: Optional[Callable[[FireworksShow], None]] = None,
    ) -> None:
        """Run the show until stopped.

        Args:
            max_ticks: Stop after this many ticks. Runs until stopped if omitted.
            on_frame: Called with the show after every tick, e.g. to present
                the surface.
        """
        self.start()
        ticks = 0
        while self._running:
            frame_start = time.perf_counter()

            self.tick()
            if on_frame is not None:
                on_frame(self)
            ticks += 1
            if max_ticks is not None and ticks >= max_ticks:
                self.stop()
                break

            # Calculate sleep time to maintain target FPS
            frame_time = time.perf_counter() - frame_start
            sleep_time = max(0, self.target_frame_time - frame_time)

            if sleep_time > 0:
                await asyncio.sleep(sleep_time)
