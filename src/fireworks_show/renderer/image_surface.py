"""Pillow-backed drawing surface."""

from __future__ import annotations

from functools import lru_cache

from PIL import Image, ImageColor, ImageDraw

SATURATION = 50
LIGHTNESS = 50
BACKGROUND = (0, 0, 0)


@lru_cache(maxsize=360)
def hue_to_rgb(hue: int) -> tuple[int, int, int]:
    """Convert a hue in degrees to RGB at the fireworks saturation and lightness."""
    return ImageColor.getrgb(f"hsl({hue % 360}, {SATURATION}%, {LIGHTNESS}%)")


class ImageSurface:
    """Draws onto an RGB image frame, alpha-blending each disc.

    The frame is ``pixel_ratio`` times the logical size; drawing calls take
    logical coordinates.
    """

    def __init__(self, width: int, height: int, pixel_ratio: float = 1.0):
        """Initialize the surface.

        Args:
            width: Logical width.
            height: Logical height.
            pixel_ratio: Physical pixels per logical unit.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive, got {width}x{height}")
        if pixel_ratio <= 0:
            raise ValueError(f"Pixel ratio must be positive, got {pixel_ratio}")

        self.width = width
        self.height = height
        self.pixel_ratio = pixel_ratio
        self.disc_count = 0
        self.frame = Image.new("RGB", self.pixel_size, BACKGROUND)
        self.draw = ImageDraw.Draw(self.frame, "RGBA")

    @property
    def pixel_size(self) -> tuple[int, int]:
        return (round(self.width * self.pixel_ratio), round(self.height * self.pixel_ratio))

    def clear(self) -> None:
        """Reset the frame to the background colour."""
        self.draw.rectangle([0, 0, self.frame.width, self.frame.height], fill=BACKGROUND)
        self.disc_count = 0

    def draw_disc(self, x: float, y: float, radius: float, hue: float, alpha: float) -> None:
        """Blend a filled disc into the frame."""
        a = round(min(1.0, max(0.0, alpha)) * 255)
        if a == 0:
            return

        r, g, b = hue_to_rgb(int(hue))
        scale = self.pixel_ratio
        cx, cy, cr = x * scale, y * scale, radius * scale
        self.draw.ellipse([cx - cr, cy - cr, cx + cr, cy + cr], fill=(r, g, b, a))
        self.disc_count += 1

    def to_image(self) -> Image.Image:
        """Get a copy of the current frame."""
        return self.frame.copy()
