"""Immutable 2D vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real


class InvalidOperandError(TypeError):
    """Raised when a vector operation receives an operand of the wrong type."""


def check_vector(value: object) -> None:
    if not isinstance(value, Vector):
        raise InvalidOperandError(f"Vector expected but received {type(value).__name__}")


def _check_scalar(value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidOperandError(f"Number expected but received {type(value).__name__}")


def from_polar(angle: float, magnitude: float = 1.0) -> Vector:
    """Create a vector from an angle in radians and a magnitude."""
    return Vector(magnitude * math.cos(angle), magnitude * math.sin(angle))


def from_cartesian(x: float, y: float) -> Vector:
    """Create a vector from its components."""
    return Vector(x, y)


def distance(a: Vector, b: Vector) -> float:
    """Euclidean distance between two points."""
    return b.minus(a).magnitude


@dataclass(frozen=True)
class Vector:
    """A 2D vector. Every operation returns a new instance."""

    x: float
    y: float

    def copy(self) -> Vector:
        """Create a copy of this vector."""
        return Vector(self.x, self.y)

    def dot(self, other: Vector) -> float:
        """The dot product of this and the other vector.

        Geometrically, the length of the projection of this vector onto the
        unit vector of ``other`` when both tails coincide, scaled by the
        magnitude of ``other``.
        """
        check_vector(other)
        return (self.x * other.x) + (self.y * other.y)

    def plus(self, other: Vector) -> Vector:
        check_vector(other)
        return Vector(self.x + other.x, self.y + other.y)

    def minus(self, other: Vector) -> Vector:
        check_vector(other)
        return Vector(self.x - other.x, self.y - other.y)

    def multiply(self, factor: float) -> Vector:
        _check_scalar(factor)
        return Vector(self.x * factor, self.y * factor)

    def divide(self, divisor: float) -> Vector:
        _check_scalar(divisor)
        return Vector(self.x / divisor, self.y / divisor)

    @property
    def magnitude(self) -> float:
        return math.sqrt((self.x * self.x) + (self.y * self.y))

    @property
    def angle(self) -> float:
        """Angle in radians, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def with_magnitude(self, magnitude: float) -> Vector:
        return from_polar(self.angle, magnitude)

    def with_angle(self, angle: float) -> Vector:
        return from_polar(angle, self.magnitude)

    def normalized(self) -> Vector:
        """Unit vector in the same direction.

        The zero vector has no direction and is returned unchanged.
        """
        m = self.magnitude
        if m != 0:
            return self.divide(m)
        return self

    def equal(self, other: Vector) -> bool:
        """Exact component equality."""
        check_vector(other)
        return self.x == other.x and self.y == other.y

    def __add__(self, other: Vector) -> Vector:
        return self.plus(other)

    def __sub__(self, other: Vector) -> Vector:
        return self.minus(other)

    def __mul__(self, factor: float) -> Vector:
        return self.multiply(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vector:
        return self.divide(divisor)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def __str__(self) -> str:
        return f"(x:{self.x}, y:{self.y})=(m:{self.magnitude}, a:{self.angle})"


ZERO = Vector(0.0, 0.0)
