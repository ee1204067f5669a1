"""Scalar helpers and small 2D/3D vector types used by the game."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

PI = 3.1415926535
TWO_PI = PI * 2.0
PI_OVER_2 = PI / 2.0
INFINITY = math.inf
NEG_INFINITY = -math.inf


def to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * PI / 180.0


def to_degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians * 180.0 / PI


def near_zero(value: float, epsilon: float = 0.001) -> bool:
    """Return True if ``value`` is within ``epsilon`` of zero."""
    return abs(value) <= epsilon


def clamp(value, lower, upper):
    """Limit ``value`` to the closed range ``[lower, upper]``."""
    return min(upper, max(lower, value))


def lerp(a: float, b: float, f: float) -> float:
    """Linearly interpolate from ``a`` to ``b`` by ``f``."""
    return a + f * (b - a)


@dataclass(slots=True)
class Vector2:
    """A mutable two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def set(self, x: float, y: float) -> None:
        """Set both components at once."""
        self.x = x
        self.y = y

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union[Vector2, float]) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> Vector2:
        if isinstance(scalar, (int, float)):
            return Vector2(self.x * scalar, self.y * scalar)
        return NotImplemented

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def length_sq(self) -> float:
        """Squared length of the vector."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        """Length of the vector."""
        return math.sqrt(self.length_sq())

    def normalize(self) -> None:
        """Scale this vector to unit length in place.

        Raises ZeroDivisionError for a zero vector.
        """
        size = self.length()
        self.x /= size
        self.y /= size

    def normalized(self) -> Vector2:
        """Return a unit-length copy of this vector."""
        result = Vector2(self.x, self.y)
        result.normalize()
        return result

    @staticmethod
    def dot(a: Vector2, b: Vector2) -> float:
        """Dot product of ``a`` and ``b``."""
        return a.x * b.x + a.y * b.y

    @staticmethod
    def lerp(a: Vector2, b: Vector2, f: float) -> Vector2:
        """Interpolate from ``a`` to ``b`` by ``f``."""
        return a + f * (b - a)

    @staticmethod
    def reflect(v: Vector2, n: Vector2) -> Vector2:
        """Reflect ``v`` about the normalized vector ``n``."""
        return v - 2.0 * Vector2.dot(v, n) * n


@dataclass(slots=True)
class Vector3:
    """A mutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def set(self, x: float, y: float, z: float) -> None:
        """Set all three components at once."""
        self.x = x
        self.y = y
        self.z = z

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[Vector3, float]) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> Vector3:
        if isinstance(scalar, (int, float)):
            return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)
        return NotImplemented

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def length_sq(self) -> float:
        """Squared length of the vector."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        """Length of the vector."""
        return math.sqrt(self.length_sq())

    def normalize(self) -> None:
        """Scale this vector to unit length in place.

        Raises ZeroDivisionError for a zero vector.
        """
        size = self.length()
        self.x /= size
        self.y /= size
        self.z /= size

    def normalized(self) -> Vector3:
        """Return a unit-length copy of this vector."""
        result = Vector3(self.x, self.y, self.z)
        result.normalize()
        return result

    @staticmethod
    def dot(a: Vector3, b: Vector3) -> float:
        """Dot product of ``a`` and ``b``."""
        return a.x * b.x + a.y * b.y + a.z * b.z

    @staticmethod
    def cross(a: Vector3, b: Vector3) -> Vector3:
        """Cross product ``a x b``."""
        return Vector3(
            a.y * b.z - a.z * b.y,
            a.z * b.x - a.x * b.z,
            a.x * b.y - a.y * b.x,
        )

    @staticmethod
    def lerp(a: Vector3, b: Vector3, f: float) -> Vector3:
        """Interpolate from ``a`` to ``b`` by ``f``."""
        return a + f * (b - a)

    @staticmethod
    def reflect(v: Vector3, n: Vector3) -> Vector3:
        """Reflect ``v`` about the normalized vector ``n``."""
        return v - 2.0 * Vector3.dot(v, n) * n