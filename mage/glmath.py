"""4x4 transform helpers in column-vector convention (points are multiplied on the right)."""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np


def _vec3(values: Iterable[float]) -> np.ndarray:
    array = np.asarray(list(values), dtype=float)
    if array.shape != (3,):
        raise ValueError("expected exactly three components")
    return array


def _unit(vector: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(vector))
    if length == 0:
        raise ValueError("cannot normalise a zero-length vector")
    return vector / length


def identity() -> np.ndarray:
    return np.identity(4)


def translate(matrix: np.ndarray, offset: Iterable[float]) -> np.ndarray:
    """``matrix`` followed by a translation by ``offset`` in its local frame."""
    translation = np.identity(4)
    translation[:3, 3] = _vec3(offset)
    return np.asarray(matrix, dtype=float) @ translation


def rotate(matrix: np.ndarray, angle: float, axis: Iterable[float]) -> np.ndarray:
    """``matrix`` followed by a rotation of ``angle`` radians about ``axis``."""
    x, y, z = _unit(_vec3(axis))
    c, s = math.cos(angle), math.sin(angle)
    t = 1 - c
    rotation = np.identity(4)
    rotation[:3, :3] = [
        [c + x * x * t, x * y * t - z * s, x * z * t + y * s],
        [y * x * t + z * s, c + y * y * t, y * z * t - x * s],
        [z * x * t - y * s, z * y * t + x * s, c + z * z * t],
    ]
    return np.asarray(matrix, dtype=float) @ rotation


def scale(matrix: np.ndarray, factors: Iterable[float]) -> np.ndarray:
    return np.asarray(matrix, dtype=float) @ np.diag([*_vec3(factors), 1.0])


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed projection mapping depth [-near, -far] to NDC [-1, 1]."""
    if aspect == 0 or near == far or math.tan(fovy / 2) == 0:
        raise ValueError("degenerate perspective parameters")
    f = 1.0 / math.tan(fovy / 2)
    projection = np.zeros((4, 4))
    projection[0, 0] = f / aspect
    projection[1, 1] = f
    projection[2, 2] = -(far + near) / (far - near)
    projection[2, 3] = -2 * far * near / (far - near)
    projection[3, 2] = -1
    return projection


def look_at(eye: Iterable[float], center: Iterable[float], up: Iterable[float]) -> np.ndarray:
    """Right-handed view matrix: the camera at ``eye`` looks down -z toward ``center``."""
    eye_v = _vec3(eye)
    f = _unit(_vec3(center) - eye_v)
    s = _unit(np.cross(f, _vec3(up)))
    u = np.cross(s, f)
    view = np.identity(4)
    view[0, :3] = s
    view[1, :3] = u
    view[2, :3] = -f
    view[0, 3] = -np.dot(s, eye_v)
    view[1, 3] = -np.dot(u, eye_v)
    view[2, 3] = np.dot(f, eye_v)
    return view