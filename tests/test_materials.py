import pytest

from gkitlite.color import Color
from gkitlite.files import pathname
from gkitlite.materials import Material, Materials, read_materials_mtl


def _write(tmp_path, text, name="scene.mtl"):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


def test_material_defaults_are_black_without_textures():
    m = Material()
    assert m.diffuse == Color(0.0, 0.0, 0.0, 1.0)
    assert (m.diffuse_texture, m.specular_texture, m.ns_texture) == (-1, -1, -1)
    assert Material(Color(1.0, 0.0, 0.0)).diffuse == Color(1.0, 0.0, 0.0)


def test_insert_is_unique_by_name():
    mats = Materials()
    a = mats.insert(Material(), "a")
    b = mats.insert(Material(), "b")
    again = mats.insert(Material(Color(1.0, 1.0, 1.0)), "a")
    assert (a, b, again) == (0, 1, 0)
    assert mats.count() == 2
    assert mats.name(1) == "b"
    assert mats.material(0).diffuse == Color()


def test_find_missing_and_empty():
    mats = Materials()
    mats.insert(Material(), "x")
    assert mats.find("x") == 0
    assert mats.find("y") == -1
    assert mats.find("") == -1
    assert mats.find(None) == -1


def test_default_material_created_once():
    mats = Materials()
    index = mats.default_material_index()
    assert mats.default_material_index() == index
    assert mats.name(index) == "default"
    assert mats.default_material().diffuse == Color(0.8, 0.8, 0.8)
    assert mats.count() == 1


def test_material_by_name_falls_back_to_default():
    mats = Materials()
    mats.insert(Material(Color(0.0, 1.0, 0.0)), "green")
    assert mats.material_by_name("green").diffuse == Color(0.0, 1.0, 0.0)
    assert mats.material_by_name("nope") is mats.default_material()


def test_textures_indexing():
    mats = Materials()
    assert mats.insert_texture("a.png") == 0
    assert mats.insert_texture("b.png") == 1
    assert mats.insert_texture("a.png") == 0
    assert mats.filename_count() == 2
    assert mats.filename(1) == "b.png"
    assert mats.filename(-1) is None
    assert mats.find_texture("c.png") == -1
    with pytest.raises(IndexError):
        mats.filename(5)


def test_out_of_range_material_raises():
    mats = Materials()
    with pytest.raises(IndexError):
        mats.material(0)
    with pytest.raises(IndexError):
        mats.name(-1)


def test_clear():
    mats = Materials()
    mats.default_material_index()
    mats.insert_texture("t.png")
    mats.clear()
    assert mats.count() == 0
    assert mats.filename_count() == 0
    assert mats.default_material_id == -1


def test_read_mtl_parses_colors_and_scalars(tmp_path):
    path = _write(
        tmp_path,
        "# comment\n"
        "Kd 1 1 1\n"
        "newmtl red\n"
        "  Kd 1 0 0\n"
        "Ks 0.5 0.5 0.5\n"
        "Ke 0 0 2\n"
        "Ns 32\n"
        "Ni 1.5\n"
        "Tf 0.25 0.5 0.75\n"
        "newmtl plain\n",
    )
    mats = read_materials_mtl(path, Materials())
    assert mats.names == ["red", "plain"]
    red = mats.material(mats.find("red"))
    assert red.diffuse == Color(1.0, 0.0, 0.0)
    assert red.specular == Color(0.5, 0.5, 0.5)
    assert red.emission == Color(0.0, 0.0, 2.0)
    assert red.ns == 32.0
    assert red.ni == 1.5
    assert red.transmission == Color(0.25, 0.5, 0.75)
    assert mats.material(1).diffuse == Color(0.0, 0.0, 0.0)


def test_read_mtl_textures_resolved_and_shared(tmp_path):
    path = _write(
        tmp_path,
        "newmtl a\n"
        "map_Kd tex.png\n"
        "map_Ks /abs/spec.png\n"
        "newmtl b\n"
        "map_Kd tex.png\n"
        "map_Ns ./rough.png\n",
    )
    mats = read_materials_mtl(path, Materials())
    a = mats.material(0)
    b = mats.material(1)
    assert mats.filename(a.diffuse_texture) == pathname(path) + "tex.png"
    assert mats.filename(a.specular_texture) == "/abs/spec.png"
    assert a.diffuse_texture == b.diffuse_texture
    assert mats.filename(b.ns_texture) == "./rough.png"
    assert mats.filename_count() == 3


def test_read_mtl_redefinition_reuses_material(tmp_path):
    path = _write(tmp_path, "newmtl m\nKd 1 0 0\nnewmtl m\nNs 4\n")
    mats = read_materials_mtl(path, Materials())
    assert mats.count() == 1
    assert mats.material(0).diffuse == Color(1.0, 0.0, 0.0)
    assert mats.material(0).ns == 4.0


def test_read_mtl_incomplete_color_is_ignored(tmp_path):
    path = _write(tmp_path, "newmtl m\nKd 1 0\n")
    mats = read_materials_mtl(path, Materials())
    assert mats.material(0).diffuse == Color(0.0, 0.0, 0.0)


def test_read_mtl_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_materials_mtl(str(tmp_path / "missing.mtl"), Materials())