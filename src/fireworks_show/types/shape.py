"""Explosion shape names."""

from __future__ import annotations

from enum import Enum


class Shape(Enum):
    """Shapes a firework can explode into."""

    NORMAL = "normal"
    CIRCLE = "circle"
    DONUT = "donut"
    HEART = "heart"
    ROSE = "rose"
    TWINKLE = "twinkle"
    STAR = "star"
    SKULL = "skull"
    RABBIT = "rabbit"
    EAGLE = "eagle"
    UMBRELLA = "umbrella"
    CUSTOM_PATH = "custom-path"
    RANDOM = "random"

    @classmethod
    def from_name(cls, name: str | Shape) -> Shape:
        """Resolve a shape name or alias.

        Args:
            name: A shape, its value, or an alias such as ``"hearts"``.

        Returns:
            The canonical shape.

        Raises:
            ValueError: If the name is not a known shape.
        """
        if isinstance(name, Shape):
            return name

        key = str(name).strip().lower().replace("_", "-")
        shape = SHAPE_ALIASES.get(key)
        if shape is None:
            raise ValueError(
                f"Unknown shape: {name}. "
                f"Available: {', '.join(s.value for s in cls)}"
            )
        return shape


SHAPE_ALIASES: dict[str, Shape] = {shape.value: shape for shape in Shape}
SHAPE_ALIASES.update({
    "hearts": Shape.HEART,
    "circles": Shape.CIRCLE,
    "donuts": Shape.DONUT,
    "roses": Shape.ROSE,
    "twinkles": Shape.TWINKLE,
    "stars": Shape.STAR,
    "skulls": Shape.SKULL,
    "rabbits": Shape.RABBIT,
    "eagles": Shape.EAGLE,
    "umbrellas": Shape.UMBRELLA,
    "svg-path": Shape.CUSTOM_PATH,
    "path": Shape.CUSTOM_PATH,
})

# Shapes sampled from a path outline
PATH_SHAPES = frozenset({Shape.STAR, Shape.SKULL, Shape.RABBIT, Shape.EAGLE, Shape.UMBRELLA})
