"""Tests for the Wavefront OBJ loader."""

import pytest
from scene.graph import Material, triangles_from_mesh
from scene.obj_loader import load_obj
from core.color import Color

QUAD = """\
# a unit quad
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
vn 0 0 1
vt 0 0
f 1 2 3 4
"""


def write(tmp_path, text, name="model.obj"):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


class TestLoadObj:

    def test_quad_is_fan_triangulated(self, tmp_path):
        mesh = load_obj(write(tmp_path, QUAD))
        assert mesh.vertices.shape == (4, 3)
        assert mesh.indices.tolist() == [[0, 1, 2], [0, 2, 3]]
        assert mesh.materials == []

    def test_vertex_tokens_with_texture_and_normal_indices(self, tmp_path):
        text = "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1/1/1 2//1 3/1\n"
        mesh = load_obj(write(tmp_path, text))
        assert mesh.indices.tolist() == [[0, 1, 2]]

    def test_negative_indices_are_relative(self, tmp_path):
        text = "v 0 0 0\nv 1 0 0\nv 0 1 0\nf -3 -2 -1\n"
        assert load_obj(write(tmp_path, text)).indices.tolist() == [[0, 1, 2]]

    def test_inline_comments_and_blank_lines(self, tmp_path):
        text = "\nv 0 0 0 # origin\nv 1 0 0\n\nv 0 1 0\nf 1 2 3 # face\n"
        assert len(triangles_from_mesh(load_obj(write(tmp_path, text)))) == 1

    def test_material_is_attached(self, tmp_path):
        material = Material(Color(0, 0, 1))
        mesh = load_obj(write(tmp_path, QUAD), material)
        assert mesh.materials == [material]

    def test_vertices_without_faces_give_no_triangles(self, tmp_path):
        mesh = load_obj(write(tmp_path, "v 0 0 0\nv 1 0 0\nv 0 1 0\n"))
        assert triangles_from_mesh(mesh) == []

    def test_malformed_vertex_names_line(self, tmp_path):
        with pytest.raises(ValueError, match=":2:"):
            load_obj(write(tmp_path, "v 0 0 0\nv 1 zero 0\n"))

    def test_index_out_of_range(self, tmp_path):
        with pytest.raises(ValueError, match="out of range"):
            load_obj(write(tmp_path, "v 0 0 0\nv 1 0 0\nf 1 2 3\n"))

    def test_face_needs_three_vertices(self, tmp_path):
        with pytest.raises(ValueError):
            load_obj(write(tmp_path, "v 0 0 0\nv 1 0 0\nf 1 2\n"))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_obj(str(tmp_path / "missing.obj"))
