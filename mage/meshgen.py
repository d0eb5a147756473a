"""CPU-side mesh data: vertices, indices and the procedural shapes the engine draws."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

import numpy as np

from mage.vectors import Vector2f, Vector3f

# The engine's own value of pi, kept so generated angles match exactly.
PI = 3.14159265

_FACE_INDICES = (0, 1, 2, 2, 1, 3)


class VertexAttribute(IntEnum):
    """Shader attribute locations of the vertex layout."""

    POSITION = 0
    COLOR = 1
    NORMAL = 2
    TEX_COORDS = 3


FLOATS_PER_VERTEX = 11


@dataclass
class Vertex:
    """One vertex: position, colour, normal and texture coordinates."""

    position: Vector3f = field(default_factory=Vector3f)
    color: Vector3f = field(default_factory=Vector3f)
    normal: Vector3f = field(default_factory=Vector3f)
    tex_coords: Vector2f = field(default_factory=Vector2f)

    def as_floats(self) -> list[float]:
        """Position, colour, normal and texture coordinates, flattened in that order."""
        return [*self.position, *self.color, *self.normal, *self.tex_coords]


@dataclass
class MeshData:
    """A triangle mesh: a vertex list and indices into it, three per triangle."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    @property
    def element_count(self) -> int:
        return len(self.indices)

    def vertex_array(self) -> np.ndarray:
        """Interleaved float32 vertex data, one row of 11 floats per vertex."""
        array = np.array([v.as_floats() for v in self.vertices], dtype=np.float32)
        return array.reshape(len(self.vertices), FLOATS_PER_VERTEX)

    def index_array(self) -> np.ndarray:
        return np.array(self.indices, dtype=np.uint32)


class MeshLibrary:
    """Meshes stored by name; the first mesh added under a name is kept."""

    def __init__(self) -> None:
        self._meshes: dict[str, MeshData] = {}

    def add(self, name: str, mesh: MeshData) -> MeshData:
        """Store ``mesh`` under ``name`` unless the name is taken; return the stored mesh."""
        return self._meshes.setdefault(name, mesh)

    def get(self, name: str) -> MeshData:
        try:
            return self._meshes[name]
        except KeyError:
            raise KeyError(f"no mesh named {name!r}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._meshes

    def __len__(self) -> int:
        return len(self._meshes)

    def __iter__(self):
        return iter(self._meshes)


def generate_face(
    vertices: list[Vertex],
    indices: list[int],
    min_size: Vector3f,
    max_size: Vector3f,
    min_tex: Vector2f,
    max_tex: Vector2f,
    normal: Vector3f,
    offset: int,
) -> None:
    """Append a quad of two triangles spanning ``min_size`` to ``max_size``.

    The four new vertices are appended to ``vertices``; the six indices are
    appended to ``indices``, shifted by ``offset``.
    """
    indices.extend(i + offset for i in _FACE_INDICES)
    for i in range(4):
        even = i % 2 == 0
        low = i < 2
        if min_size.x != max_size.x:
            position = Vector3f(
                min_size.x if even else max_size.x,
                min_size.y if low else max_size.y,
                min_size.z if low else max_size.z,
            )
        else:
            position = Vector3f(
                min_size.x,
                min_size.y if low else max_size.y,
                min_size.z if even else max_size.z,
            )
        vertices.append(
            Vertex(
                position=position,
                color=Vector3f(),
                normal=normal.copy(),
                tex_coords=Vector2f(
                    min_tex.x if even else max_tex.x,
                    min_tex.y if low else max_tex.y,
                ),
            )
        )


def square_mesh(min_size: float, max_size: float, min_tex: float, max_tex: float) -> MeshData:
    """A flat square in the z = 0 plane facing +z."""
    mesh = MeshData()
    generate_face(
        mesh.vertices,
        mesh.indices,
        Vector3f(min_size, min_size, 0),
        Vector3f(max_size, max_size, 0),
        Vector2f(min_tex, min_tex),
        Vector2f(max_tex, max_tex),
        Vector3f(0, 0, 1),
        0,
    )
    return mesh


def box_mesh(min_size: float, max_size: float, min_tex: float, max_tex: float) -> MeshData:
    """A cube from ``min_size`` to ``max_size`` on every axis, six separate faces."""
    lo, hi = min_size, max_size
    tex_lo = Vector2f(min_tex, min_tex)
    tex_hi = Vector2f(max_tex, max_tex)
    faces = (
        (Vector3f(lo, lo, lo), Vector3f(hi, hi, lo), Vector3f(0, 0, -1)),  # back
        (Vector3f(lo, lo, hi), Vector3f(hi, hi, hi), Vector3f(0, 0, 1)),  # front
        (Vector3f(lo, hi, lo), Vector3f(hi, hi, hi), Vector3f(0, 1, 0)),  # top
        (Vector3f(lo, lo, lo), Vector3f(hi, lo, hi), Vector3f(0, -1, 0)),  # bottom
        (Vector3f(lo, lo, lo), Vector3f(lo, hi, hi), Vector3f(-1, 0, 0)),  # left
        (Vector3f(hi, lo, lo), Vector3f(hi, hi, hi), Vector3f(1, 0, 0)),  # right
    )
    mesh = MeshData()
    for face, (low, high, normal) in enumerate(faces):
        generate_face(mesh.vertices, mesh.indices, low, high, tex_lo, tex_hi, normal, face * 4)
    return mesh


def _check_details(details: int) -> None:
    if details < 0:
        raise ValueError("sphere detail must not be negative")


def _sphere_column(
    top: Vector3f, center: Vector3f, details: int, theta: float
) -> list[Vertex]:
    theta1 = (180 // (details + 1)) * (PI / 180)
    x_tex = theta * (180 / PI) / 360
    cs, sn = math.cos(theta), math.sin(theta)
    up = Vector3f(0, 1, 0)
    column = []
    for j in range(1, details + 1):
        cs1, sn1 = math.cos(theta1 * j), math.sin(theta1 * j)
        # Rotate the top pole about z, then the result about y.
        px = top.x * cs1 - top.y * sn1
        py = top.x * sn1 + top.y * cs1
        position = Vector3f(px * cs, py, -(px * sn))
        column.append(
            Vertex(
                position=position,
                color=Vector3f(),
                normal=(position - center).normalised(),
                tex_coords=Vector2f(x_tex, (up.dot(position.normalised()) + 1) / 2),
            )
        )
    return column


def sphere_vertices(center: Vector3f, radius: float, details: int) -> list[Vertex]:
    """The top and bottom poles followed by ``details + 1`` columns of ``details`` vertices."""
    _check_details(details)
    top = Vertex(
        position=center + Vector3f(0, radius, 0),
        color=Vector3f(),
        normal=Vector3f(0, 1, 0),
        tex_coords=Vector2f(0, 0),
    )
    bottom = Vertex(
        position=center - Vector3f(0, radius, 0),
        color=Vector3f(),
        normal=Vector3f(0, -1, 0),
        tex_coords=Vector2f(1, 1),
    )
    vertices = [top, bottom]
    theta_change = (360 // (details + 1)) * (PI / 180)
    for i in range(details):
        vertices.extend(_sphere_column(top.position, center, details, theta_change * i))
    if details > 0:
        # The seam column closes the sphere at a full turn.
        vertices.extend(_sphere_column(top.position, center, details, 360 * (PI / 180)))
    return vertices


def sphere_indices(details: int) -> list[int]:
    """Triangle indices joining the sphere's rows: a top fan, middle quads, a bottom fan."""
    _check_details(details)
    indices: list[int] = []
    for i in range(details):
        row, previous_row = i + 2, i + 1
        for j in range(details + 1):
            column, next_column = j * details, (j + 1) * details
            if i != 0 and i != details - 1:
                indices += [
                    previous_row + column,
                    previous_row + next_column,
                    row + column,
                    row + column,
                    previous_row + next_column,
                    row + next_column,
                ]
            elif i == 0:
                indices += [0, row + next_column, row + column]
            else:
                indices += [
                    previous_row + column,
                    previous_row + next_column,
                    row + column,
                    row + column,
                    previous_row + next_column,
                    row + next_column,
                    row + column,
                    row + next_column,
                    1,
                ]
    return indices


def sphere_mesh(center: Vector3f, radius: float, details: int) -> MeshData:
    """A UV sphere of ``radius`` around ``center``."""
    return MeshData(sphere_vertices(center, radius, details), sphere_indices(details))