import math

import pytest

from mage.meshgen import (
    FLOATS_PER_VERTEX,
    MeshData,
    MeshLibrary,
    Vertex,
    box_mesh,
    generate_face,
    sphere_indices,
    sphere_mesh,
    sphere_vertices,
    square_mesh,
)
from mage.vectors import Vector2f, Vector3f


def test_generate_face_indices_are_offset():
    vertices = [Vertex() for _ in range(4)]
    indices = []
    generate_face(
        vertices,
        indices,
        Vector3f(0, 0, 0),
        Vector3f(1, 1, 0),
        Vector2f(0, 0),
        Vector2f(1, 1),
        Vector3f(0, 0, 1),
        4,
    )
    assert indices == [4, 5, 6, 6, 5, 7]
    assert len(vertices) == 8


def test_square_mesh_corners_and_tex_coords():
    mesh = square_mesh(-1, 1, 0, 1)
    assert [v.position for v in mesh.vertices] == [
        Vector3f(-1, -1, 0),
        Vector3f(1, -1, 0),
        Vector3f(-1, 1, 0),
        Vector3f(1, 1, 0),
    ]
    assert [v.tex_coords for v in mesh.vertices] == [
        Vector2f(0, 0),
        Vector2f(1, 0),
        Vector2f(0, 1),
        Vector2f(1, 1),
    ]
    assert all(v.normal == Vector3f(0, 0, 1) for v in mesh.vertices)
    assert mesh.indices == [0, 1, 2, 2, 1, 3]


def test_face_with_constant_x_varies_z():
    vertices, indices = [], []
    generate_face(
        vertices,
        indices,
        Vector3f(2, -1, -1),
        Vector3f(2, 1, 1),
        Vector2f(0, 0),
        Vector2f(1, 1),
        Vector3f(1, 0, 0),
        0,
    )
    assert all(v.position.x == 2 for v in vertices)
    assert [v.position.z for v in vertices] == [-1, 1, -1, 1]
    assert [v.position.y for v in vertices] == [-1, -1, 1, 1]


def test_box_mesh_faces():
    mesh = box_mesh(-1, 1, 0, 1)
    assert len(mesh.vertices) == 24
    assert mesh.element_count == 36
    assert max(mesh.indices) == len(mesh.vertices) - 1
    for vertex in mesh.vertices:
        assert set(vertex.position) <= {-1.0, 1.0}
        # Every vertex lies on the face its normal points out of.
        assert vertex.position.dot(vertex.normal) == 1.0


def test_box_mesh_has_six_distinct_normals():
    mesh = box_mesh(0, 2, 0, 1)
    normals = {tuple(v.normal) for v in mesh.vertices}
    assert len(normals) == 6


def test_sphere_vertices_lie_on_sphere():
    details = 4
    vertices = sphere_vertices(Vector3f(), 1.0, details)
    assert len(vertices) == 2 + (details + 1) * details
    assert vertices[0].position == Vector3f(0, 1, 0)
    assert vertices[1].position == Vector3f(0, -1, 0)
    for vertex in vertices[2:]:
        assert vertex.position.length() == pytest.approx(1.0)
        normalised = vertex.position.normalised()
        assert vertex.normal.x == pytest.approx(normalised.x)
        assert vertex.normal.y == pytest.approx(normalised.y)
        assert vertex.normal.z == pytest.approx(normalised.z)
        assert 0.0 <= vertex.tex_coords.y <= 1.0


def test_sphere_columns_span_tex_coords():
    details = 3
    vertices = sphere_vertices(Vector3f(), 2.0, details)
    first_column = vertices[2 : 2 + details]
    seam_column = vertices[-details:]
    assert all(v.tex_coords.x == 0 for v in first_column)
    assert all(v.tex_coords.x == pytest.approx(1.0) for v in seam_column)
    for first, seam in zip(first_column, seam_column):
        assert seam.position.x == pytest.approx(first.position.x, abs=1e-6)
        assert seam.position.z == pytest.approx(first.position.z, abs=1e-6)


def test_sphere_indices_structure():
    details = 5
    indices = sphere_indices(details)
    assert len(indices) % 3 == 0
    assert indices[:3] == [0, 2 + details, 2]
    assert indices[-1] == 1
    assert all(i >= 0 for i in indices)


def test_sphere_indices_zero_detail_is_empty():
    assert sphere_indices(0) == []
    assert len(sphere_vertices(Vector3f(), 1.0, 0)) == 2


def test_negative_detail_rejected():
    with pytest.raises(ValueError):
        sphere_indices(-1)
    with pytest.raises(ValueError):
        sphere_vertices(Vector3f(), 1.0, -2)


def test_sphere_mesh_combines_parts():
    mesh = sphere_mesh(Vector3f(), 1.0, 6)
    assert mesh.indices == sphere_indices(6)
    assert mesh.vertices == sphere_vertices(Vector3f(), 1.0, 6)
    assert mesh.element_count == len(mesh.indices)


def test_vertex_array_layout():
    mesh = square_mesh(-1, 1, 0, 1)
    array = mesh.vertex_array()
    assert array.shape == (4, FLOATS_PER_VERTEX)
    assert list(array[3]) == [1, 1, 0, 0, 0, 0, 0, 0, 1, 1, 1]
    assert list(mesh.index_array()) == mesh.indices


def test_mesh_library_keeps_first_mesh():
    library = MeshLibrary()
    first = square_mesh(-1, 1, 0, 1)
    second = box_mesh(-1, 1, 0, 1)
    assert library.add("quad", first) is first
    assert library.add("quad", second) is first
    assert library.get("quad") is first
    assert "quad" in library
    assert len(library) == 1


def test_mesh_library_missing_name():
    library = MeshLibrary()
    library.add("empty", MeshData())
    with pytest.raises(KeyError):
        library.get("sphere")


def test_vertex_defaults_are_independent():
    a, b = Vertex(), Vertex()
    a.position.x = 5
    assert b.position.x == 0
    assert math.isclose(a.position.x, 5)