"""Fireworks display application package."""

from __future__ import annotations

from .options import FireworksOptions
from .show import FireworksShow
from .lifecycle import start, stop

__all__ = [
    "FireworksOptions",
    "FireworksShow",
    "start",
    "stop",
]
