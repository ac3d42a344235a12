"""Renderer package for fireworks."""

from __future__ import annotations

from .surface import Surface
from .headless import HeadlessRenderer
from .image_surface import ImageSurface, hue_to_rgb

__all__ = [
    "Surface",
    "HeadlessRenderer",
    "ImageSurface",
    "hue_to_rgb",
]
