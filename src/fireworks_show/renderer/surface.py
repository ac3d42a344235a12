"""Drawing contract shared by all surfaces."""

from __future__ import annotations

from typing import Protocol


class Surface(Protocol):
    """Something fireworks can be drawn on.

    Coordinates are logical units with the origin at the top left and y
    growing downwards.
    """

    width: float
    height: float

    def clear(self) -> None:
        ...

    def draw_disc(self, x: float, y: float, radius: float, hue: float, alpha: float) -> None:
        ...
