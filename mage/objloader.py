"""Reading Wavefront OBJ geometry into mesh data."""

from __future__ import annotations

import os
from typing import Iterable

from mage.meshgen import MeshData, Vertex
from mage.vectors import Vector2f, Vector3f

_MAX_FACE_VERTICES = 4


def _floats(parts: list[str], count: int, keyword: str) -> list[float]:
    if len(parts) < count:
        raise ValueError(f"'{keyword}' needs {count} numbers, got {len(parts)}")
    try:
        return [float(p) for p in parts[:count]]
    except ValueError as exc:
        raise ValueError(f"bad number in '{keyword}' line: {' '.join(parts)}") from exc


def _face_reference(token: str) -> tuple[int, int, int]:
    """Zero-based (position, texture, normal) indices of a ``v/vt/vn`` token."""
    parts = token.split("/")
    if len(parts) != 3 or not all(parts):
        raise ValueError(f"face vertex {token!r} is not of the form v/vt/vn")
    try:
        position, tex, normal = (int(p) - 1 for p in parts)
    except ValueError as exc:
        raise ValueError(f"face vertex {token!r} holds a non-integer index") from exc
    return position, tex, normal


def _lookup(items: list, index: int, what: str):
    if not 0 <= index < len(items):
        raise ValueError(f"{what} index {index + 1} is out of range (have {len(items)})")
    return items[index]


def parse_obj(lines: Iterable[str] | str) -> MeshData:
    """Build a mesh from OBJ text: ``v``, ``vt``, ``vn`` and triangle or quad ``f`` lines.

    Faces must give every corner as ``v/vt/vn``. A face ends at the fourth
    corner or at the first token that does not start with a digit. Identical
    corners share one vertex.
    """
    if isinstance(lines, str):
        lines = lines.splitlines()
    positions: list[Vector3f] = []
    normals: list[Vector3f] = []
    tex_coords: list[Vector2f] = []
    mesh = MeshData()
    known: dict[tuple, int] = {}

    for line in lines:
        parts = line.split()
        if not parts:
            continue
        keyword, args = parts[0], parts[1:]
        if keyword == "v":
            positions.append(Vector3f(*_floats(args, 3, keyword)))
        elif keyword == "vn":
            normals.append(Vector3f(*_floats(args, 3, keyword)))
        elif keyword == "vt":
            tex_coords.append(Vector2f(*_floats(args, 2, keyword)))
        elif keyword == "f":
            corners: list[int] = []
            for token in args[:_MAX_FACE_VERTICES]:
                if not token[0].isdigit():
                    break
                p, t, n = _face_reference(token)
                vertex = Vertex(
                    position=_lookup(positions, p, "position").copy(),
                    normal=_lookup(normals, n, "normal").copy(),
                    tex_coords=_lookup(tex_coords, t, "texture coordinate").copy(),
                )
                key = (tuple(vertex.position), tuple(vertex.normal), tuple(vertex.tex_coords))
                if key not in known:
                    known[key] = len(mesh.vertices)
                    mesh.vertices.append(vertex)
                corners.append(known[key])
            if len(corners) == 4:
                mesh.indices += [corners[1], corners[0], corners[2]]
                mesh.indices += [corners[2], corners[0], corners[3]]
            elif len(corners) == 3:
                mesh.indices += [corners[1], corners[0], corners[2]]
    return mesh


def load_obj(path: str | os.PathLike) -> MeshData:
    """Read and parse the OBJ file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return parse_obj(handle)