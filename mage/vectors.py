"""Two- and three-component vectors in float and integer flavours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Iterator


def _require_nonzero(length: float) -> float:
    if length == 0:
        raise ValueError("operation is undefined for a zero-length vector")
    return length


def _angle_degrees(dot: float, length_product: float) -> float:
    _require_nonzero(length_product)
    cosine = max(-1.0, min(1.0, dot / length_product))
    return math.degrees(math.acos(cosine))


@dataclass
class Vector2f:
    """A mutable two-component float vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalised(self) -> Vector2f:
        length = _require_nonzero(self.length())
        return Vector2f(self.x / length, self.y / length)

    def normalise_in_place(self) -> None:
        length = _require_nonzero(self.length())
        self.x /= length
        self.y /= length

    def dot(self, other: Vector2f) -> float:
        return self.x * other.x + self.y * other.y

    def angle_between(self, other: Vector2f) -> float:
        """Angle to ``other`` in degrees."""
        return _angle_degrees(self.dot(other), self.length() * other.length())

    def copy(self) -> Vector2f:
        return Vector2f(self.x, self.y)

    def __add__(self, other: Vector2f) -> Vector2f:
        if not isinstance(other, Vector2f):
            return NotImplemented
        return Vector2f(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2f) -> Vector2f:
        if not isinstance(other, Vector2f):
            return NotImplemented
        return Vector2f(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vector2f | float) -> Vector2f:
        if isinstance(other, Vector2f):
            return Vector2f(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            return Vector2f(self.x * other, self.y * other)
        return NotImplemented


@dataclass
class Vector2i:
    """A mutable two-component integer vector."""

    x: int = 0
    y: int = 0

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalised(self) -> Vector2i:
        """Unit direction with each component truncated toward zero."""
        length = _require_nonzero(self.length())
        return Vector2i(int(self.x / length), int(self.y / length))

    def normalise_in_place(self) -> None:
        length = _require_nonzero(self.length())
        self.x = int(self.x / length)
        self.y = int(self.y / length)

    def dot(self, other: Vector2i) -> float:
        return float(self.x * other.x + self.y * other.y)

    def angle_between(self, other: Vector2i) -> float:
        """Angle to ``other`` in degrees."""
        return _angle_degrees(self.dot(other), self.length() * other.length())

    def copy(self) -> Vector2i:
        return Vector2i(self.x, self.y)

    def __add__(self, other: Vector2i) -> Vector2i:
        if not isinstance(other, Vector2i):
            return NotImplemented
        return Vector2i(self.x + other.x, self.y + other.y)

    def __mul__(self, other: Vector2i | int) -> Vector2i:
        if isinstance(other, Vector2i):
            return Vector2i(self.x * other.x, self.y * other.y)
        if isinstance(other, Integral):
            return Vector2i(self.x * other, self.y * other)
        return NotImplemented


@dataclass
class Vector3f:
    """A mutable three-component float vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalised(self) -> Vector3f:
        length = _require_nonzero(self.length())
        return Vector3f(self.x / length, self.y / length, self.z / length)

    def normalise_in_place(self) -> None:
        length = _require_nonzero(self.length())
        self.x /= length
        self.y /= length
        self.z /= length

    def dot(self, other: Vector3f) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def angle_between(self, other: Vector3f) -> float:
        """Angle to ``other`` in degrees."""
        return _angle_degrees(self.dot(other), self.length() * other.length())

    def cross(self, other: Vector3f) -> Vector3f:
        return Vector3f(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def reflect(self, normal: Vector3f) -> Vector3f:
        """Mirror this vector about the plane with the given normal."""
        return self - (normal * self.dot(normal)) * 2

    def copy(self) -> Vector3f:
        return Vector3f(self.x, self.y, self.z)

    def __add__(self, other: Vector3f) -> Vector3f:
        if not isinstance(other, Vector3f):
            return NotImplemented
        return Vector3f(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iadd__(self, other: Vector3f) -> Vector3f:
        if not isinstance(other, Vector3f):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __sub__(self, other: Vector3f) -> Vector3f:
        if not isinstance(other, Vector3f):
            return NotImplemented
        return Vector3f(self.x - other.x, self.y - other.y, self.z - other.z)

    def __truediv__(self, scalar: float) -> Vector3f:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3f(self.x / scalar, self.y / scalar, self.z / scalar)

    def __mul__(self, other: Vector3f | float) -> Vector3f:
        if isinstance(other, Vector3f):
            # The z component is scaled by the other vector's y, as the engine always has.
            return Vector3f(self.x * other.x, self.y * other.y, self.z * other.y)
        if isinstance(other, Real):
            return Vector3f(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __imul__(self, scalar: float) -> Vector3f:
        if not isinstance(scalar, Real):
            return NotImplemented
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    def __gt__(self, other: Vector3f) -> bool:
        if not isinstance(other, Vector3f):
            return NotImplemented
        return other.x < self.x and other.y < self.y and other.z < self.z

    def __lt__(self, other: Vector3f) -> bool:
        if not isinstance(other, Vector3f):
            return NotImplemented
        return other.x > self.x and other.y > self.y and other.z > self.z


@dataclass
class Vector3i:
    """A mutable three-component integer vector."""

    x: int = 0
    y: int = 0
    z: int = 0

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y
        yield self.z

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalised(self) -> Vector3i:
        """Unit direction with each component truncated toward zero."""
        length = _require_nonzero(self.length())
        return Vector3i(int(self.x / length), int(self.y / length), int(self.z / length))

    def normalise_in_place(self) -> None:
        length = _require_nonzero(self.length())
        self.x = int(self.x / length)
        self.y = int(self.y / length)
        self.z = int(self.z / length)

    def dot(self, other: Vector3i) -> float:
        return float(self.x * other.x + self.y * other.y + self.z * other.z)

    def angle_between(self, other: Vector3i) -> float:
        """Angle to ``other`` in degrees."""
        return _angle_degrees(self.dot(other), self.length() * other.length())

    def cross(self, other: Vector3i) -> Vector3i:
        return Vector3i(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def copy(self) -> Vector3i:
        return Vector3i(self.x, self.y, self.z)

    def __add__(self, other: Vector3i) -> Vector3i:
        if not isinstance(other, Vector3i):
            return NotImplemented
        return Vector3i(self.x + other.x, self.y + other.y, self.z + other.z)

    def __mul__(self, other: Vector3i | int) -> Vector3i:
        if isinstance(other, Vector3i):
            return Vector3i(self.x * other.x, self.y * other.y, self.z * other.y)
        if isinstance(other, Integral):
            return Vector3i(self.x * other, self.y * other, self.z * other)
        return NotImplemented