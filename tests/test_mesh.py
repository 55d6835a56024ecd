import pytest

from odrkit.mesh import Mesh3D


def _triangle(z=0.0):
    return Mesh3D(
        vertices=[(0.0, 0.0, z), (1.0, 0.0, z), (0.0, 1.0, z)],
        indices=[0, 1, 2],
    )


def test_add_mesh_offsets_indices():
    mesh = _triangle()
    other = _triangle(1.0)
    mesh.add_mesh(other)
    assert len(mesh.vertices) == 6
    assert mesh.indices == [0, 1, 2] + [i + 3 for i in other.indices]
    assert mesh.vertices[3:] == other.vertices


def test_add_empty_mesh_changes_nothing():
    mesh = _triangle()
    before = Mesh3D(list(mesh.vertices), list(mesh.indices))
    mesh.add_mesh(Mesh3D())
    assert mesh == before


def test_obj_without_normals():
    obj = _triangle().get_obj()
    lines = obj.splitlines()
    assert lines[0] == "v 0 0 0"
    assert lines[-1] == "f 1 2 3"
    assert sum(line.startswith("v ") for line in lines) == 3


def test_obj_with_normals():
    mesh = _triangle()
    mesh.normals = [(0.0, 0.0, 1.0)] * 3
    lines = mesh.get_obj().splitlines()
    assert sum(line.startswith("vn ") for line in lines) == 3
    assert lines[-1] == "f 1//1 2//2 3//3"


def test_obj_of_empty_mesh():
    assert Mesh3D().get_obj() == ""


def test_obj_rejects_partial_triangle():
    mesh = _triangle()
    mesh.indices.append(0)
    with pytest.raises(ValueError):
        mesh.get_obj()


def test_obj_face_count_matches_indices():
    mesh = _triangle()
    mesh.add_mesh(_triangle(2.0))
    faces = [line for line in mesh.get_obj().splitlines() if line.startswith("f ")]
    assert len(faces) == len(mesh.indices) // 3