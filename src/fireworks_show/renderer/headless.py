"""Headless text surface for testing and terminal demos."""

from __future__ import annotations

import math

GLYPHS = " .+*"


class HeadlessRenderer:
    """A surface that draws discs as characters on a text grid.

    Used for testing and demo environments.
    """

    def __init__(self, width: float = 800, height: float = 500, cols: int = 80, rows: int = 24):
        """Initialize the headless renderer.

        Args:
            width: Logical width of the display area.
            height: Logical height of the display area.
            cols: Screen width in characters.
            rows: Screen height in characters.
        """
        self.width = width
        self.height = height
        self.cols = cols
        self.rows = rows
        self.screen: list[list[str]] = [[" " for _ in range(cols)] for _ in range(rows)]
        self.disc_count = 0
        self.clipped_count = 0

    def clear(self) -> None:
        """Clear the screen buffer."""
        self.screen = [[" " for _ in range(self.cols)] for _ in range(self.rows)]
        self.disc_count = 0
        self.clipped_count = 0

    def draw_disc(self, x: float, y: float, radius: float, hue: float, alpha: float) -> None:
        """Draw a disc as a single character."""
        self.disc_count += 1

        # Convert logical position to screen position
        screen_x = math.floor(x * self.cols / self.width)
        screen_y = math.floor(y * self.rows / self.height)
        if not (0 <= screen_x < self.cols and 0 <= screen_y < self.rows):
            self.clipped_count += 1
            return

        # Brighter discs win over fainter ones in the same cell
        char = self._glyph(alpha)
        if GLYPHS.index(char) >= GLYPHS.index(self.screen[screen_y][screen_x]):
            self.screen[screen_y][screen_x] = char

    @staticmethod
    def _glyph(alpha: float) -> str:
        if alpha > 0.66:
            return "*"
        elif alpha > 0.33:
            return "+"
        elif alpha > 0:
            return "."
        return " "

    def get_screen_string(self) -> str:
        """Get the screen as a string."""
        return "\n".join("".join(row) for row in self.screen)
