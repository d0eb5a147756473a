"""A 4x4 float matrix with translate, scale and axis rotations."""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from mage.vectors import Vector3f


class Matrix4f:
    """A row-major 4x4 matrix; transforms compose by right multiplication."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: Iterable | None = None) -> None:
        if values is None:
            self.values = np.identity(4)
            return
        array = np.array(values, dtype=float)
        if array.size != 16:
            raise ValueError("a 4x4 matrix needs exactly 16 values")
        self.values = array.reshape(4, 4)

    @classmethod
    def identity(cls) -> Matrix4f:
        return cls()

    @classmethod
    def diagonal(cls, x: float, y: float, z: float) -> Matrix4f:
        return cls(np.diag([x, y, z, 1.0]))

    @classmethod
    def from_vector(cls, v: Vector3f) -> Matrix4f:
        return cls.diagonal(v.x, v.y, v.z)

    def translate(self, translation: Vector3f) -> None:
        offset = np.identity(4)
        offset[:3, 3] = list(translation)
        self.values = self.values @ offset

    def scale(self, scale: Vector3f) -> None:
        self.values = self.values @ np.diag([scale.x, scale.y, scale.z, 1.0])

    def rotate(self, axis: Vector3f, angle: float) -> None:
        """Rotate by ``angle`` radians about the x, y or z unit axis; other axes are ignored."""
        c, s = math.cos(angle), math.sin(angle)
        if axis == Vector3f(0, 1, 0):
            rotation = [[c, 0, s, 0], [0, 1, 0, 0], [-s, 0, c, 0], [0, 0, 0, 1]]
        elif axis == Vector3f(0, 0, 1):
            rotation = [[c, -s, 0, 0], [s, c, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]]
        elif axis == Vector3f(1, 0, 0):
            rotation = [[1, 0, 0, 0], [0, c, -s, 0], [0, s, c, 0], [0, 0, 0, 1]]
        else:
            return
        self.values = self.values @ np.array(rotation, dtype=float)

    def copy(self) -> Matrix4f:
        return Matrix4f(self.values)

    def __matmul__(self, other: Matrix4f) -> Matrix4f:
        if not isinstance(other, Matrix4f):
            return NotImplemented
        return Matrix4f(self.values @ other.values)

    def __getitem__(self, key):
        return self.values[key]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4f):
            return NotImplemented
        return bool(np.array_equal(self.values, other.values))

    def __repr__(self) -> str:
        return f"Matrix4f({self.values.tolist()!r})"