import math

import pytest

from terraforge.mesh import (
    Mesh,
    VertexData,
    calculate_tangents,
    index_vertices,
    load_obj,
)

QUAD_OBJ = """\
# a unit quad
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
vt 0 0
vt 1 0
vt 1 1
vt 0.25 0.25
vn 0 0 1
f 1/1/1 2/2/1 3/3/1 4/4/1
"""


def test_vertex_defaults_are_zero():
    vertex = VertexData((1, 2, 3))
    assert vertex.position == (1.0, 2.0, 3.0)
    assert vertex.uv == (0.0, 0.0)
    assert vertex.normal == (0.0, 0.0, 0.0)
    assert vertex.tangent == (0.0, 0.0, 0.0)


def test_vertex_rejects_wrong_size():
    with pytest.raises(ValueError):
        VertexData((1, 2))


def test_index_vertices_merges_duplicates():
    a = VertexData((0, 0, 0))
    b = VertexData((1, 0, 0))
    indices, unique = index_vertices([a, b, VertexData((0, 0, 0)), b])
    assert indices == [0, 1, 0, 1]
    assert [v.position for v in unique] == [a.position, b.position]


def test_index_vertices_distinguishes_signed_zero():
    indices, unique = index_vertices([VertexData((0.0, 0, 0)), VertexData((-0.0, 0, 0))])
    assert indices == [0, 1]
    assert len(unique) == 2


def test_index_vertices_copies():
    original = VertexData((0, 0, 0))
    _, unique = index_vertices([original])
    unique[0].tangent = (1.0, 0.0, 0.0)
    assert original.tangent == (0.0, 0.0, 0.0)


def test_calculate_tangents_follow_u_direction():
    vertices = [
        VertexData((0, 0, 0), (0, 0)),
        VertexData((1, 0, 0), (1, 0)),
        VertexData((0, 1, 0), (0, 1)),
    ]
    calculate_tangents(vertices, [0, 1, 2])
    for vertex in vertices:
        assert vertex.tangent == pytest.approx((1.0, 0.0, 0.0))


def test_calculate_tangents_are_unit_length():
    vertices = [
        VertexData((0, 0, 0), (0, 0)),
        VertexData((2, 1, 0), (0.5, 0.1)),
        VertexData((0, 3, 1), (0.2, 0.9)),
        VertexData((4, 4, 4), (0.7, 0.7)),
    ]
    calculate_tangents(vertices, [0, 1, 2, 1, 3, 2])
    for vertex in vertices:
        assert math.hypot(*vertex.tangent) == pytest.approx(1.0)


def test_degenerate_uvs_give_nan_tangents():
    mesh = Mesh([VertexData((0, 0, 0)), VertexData((1, 0, 0)), VertexData((0, 1, 0))])
    assert mesh.vertex_count() == 3
    for vertex in mesh.vertices:
        assert [math.isnan(c) for c in vertex.tangent] == [True, True, True]


def test_from_arrays_indexes_shared_vertices():
    positions = [(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 0, 0), (1, 1, 0), (0, 1, 0)]
    mesh = Mesh.from_arrays(positions)
    assert mesh.index_count() == len(positions)
    assert mesh.vertex_count() == 4
    assert [mesh.vertices[i].position for i in mesh.indices] == [
        tuple(float(c) for c in p) for p in positions
    ]
    assert all(v.tangent == (0.0, 0.0, 0.0) for v in mesh.vertices)


def test_from_arrays_length_mismatch():
    with pytest.raises(ValueError):
        Mesh.from_arrays([(0, 0, 0), (1, 0, 0)], uvs=[(0, 0)])


def test_mesh_computes_tangents_by_default():
    mesh = Mesh(
        [
            VertexData((0, 0, 0), (0, 0)),
            VertexData((1, 0, 0), (1, 0)),
            VertexData((0, 1, 0), (0, 1)),
        ]
    )
    assert all(math.hypot(*v.tangent) == pytest.approx(1.0) for v in mesh.vertices)


def test_update_vertex_z():
    mesh = Mesh.from_arrays([(1, 2, 3), (4, 5, 6), (7, 8, 9)])
    mesh.update_vertex_z(1, 42.5)
    assert mesh.vertices[1].position == (4.0, 5.0, 42.5)


@pytest.mark.parametrize("index", [3, -1])
def test_update_vertex_z_out_of_range(index):
    mesh = Mesh.from_arrays([(1, 2, 3), (4, 5, 6), (7, 8, 9)])
    with pytest.raises(IndexError):
        mesh.update_vertex_z(index, 0.0)


def test_load_obj_triangulates_and_flips_v(tmp_path):
    path = tmp_path / "quad.obj"
    path.write_text(QUAD_OBJ)
    vertices = load_obj(path)
    assert len(vertices) == 6
    assert [v.position for v in vertices[:3]] == [(0, 0, 0), (1, 0, 0), (1, 1, 0)]
    assert vertices[-1].uv == pytest.approx((0.25, 0.75))
    assert all(v.normal == (0.0, 0.0, 1.0) for v in vertices)


def test_load_obj_negative_indices(tmp_path):
    plain = tmp_path / "plain.obj"
    plain.write_text("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n")
    relative = tmp_path / "relative.obj"
    relative.write_text("v 0 0 0\nv 1 0 0\nv 0 1 0\nf -3 -2 -1\n")
    assert [v.position for v in load_obj(plain)] == [v.position for v in load_obj(relative)]


def test_load_obj_bad_index(tmp_path):
    path = tmp_path / "bad.obj"
    path.write_text("v 0 0 0\nf 1 2 3\n")
    with pytest.raises(ValueError):
        load_obj(path)


def test_from_file_builds_indexed_mesh(tmp_path):
    path = tmp_path / "quad.obj"
    path.write_text(QUAD_OBJ)
    mesh = Mesh.from_file(path)
    assert mesh.index_count() == 6
    assert mesh.vertex_count() == 4


def test_from_file_rejects_other_formats(tmp_path):
    with pytest.raises(ValueError, match="File format not supported"):
        Mesh.from_file(tmp_path / "model.fbx")


def test_from_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        Mesh.from_file(tmp_path / "missing.obj")