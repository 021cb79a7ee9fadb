"""Readers for .obj / wavefront meshes: positions, indices, texcoords, normals and materials."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .files import normalize_filename, pathname
from .image import Image
from .materials import Materials, read_materials_mtl
from .vec import Point, Vector

_FLOAT = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

_INT = r"\s*([+-]?\d+)"

# Accepted vertex forms, tried in order: p/t/n, p/t, p//n, p.
_VERTEX_FORMS = (
    (re.compile(_INT + "/" + _INT + "/" + _INT + r"\s*"), ("p", "t", "n")),
    (re.compile(_INT + "/" + _INT + r"\s*"), ("p", "t")),
    (re.compile(_INT + "//" + _INT + r"\s*"), ("p", "n")),
    (re.compile(_INT + r"\s*"), ("p",)),
)

_RawVertex = tuple[int, int, int]


class ObjFormatError(ValueError):
    """Raised when an .obj file holds a line or an index that cannot be used."""


@dataclass
class MeshIOData:
    """Every attribute and material of a mesh, loaded at once."""

    positions: list[Point] = field(default_factory=list)
    texcoords: list[Point] = field(default_factory=list)
    normals: list[Vector] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    material_indices: list[int] = field(default_factory=list)
    materials: Materials = field(default_factory=Materials)
    images: list[Image] = field(default_factory=list)


def _floats(text: str, n: int) -> list[float] | None:
    values = []
    pos = 0
    for _ in range(n):
        match = _FLOAT.match(text, pos)
        if match is None:
            return None
        values.append(float(match.group(1)))
        pos = match.end()
    return values


def _text(line: str, keyword: str) -> str | None:
    if not line.startswith(keyword):
        return None
    value = re.split(r"[\r\n]", line[len(keyword):].lstrip(), maxsplit=1)[0]
    return value or None


def _parse_face(text: str) -> list[_RawVertex]:
    """Raw (position, texcoord, normal) indices of each vertex; 0 means absent."""
    vertices = []
    pos = 0
    while True:
        for regex, fields in _VERTEX_FORMS:
            match = regex.match(text, pos)
            if match:
                values = dict(zip(fields, (int(g) for g in match.groups())))
                vertices.append((values.get("p", 0), values.get("t", 0), values.get("n", 0)))
                pos = match.end()
                break
        else:
            return vertices


def _triangles(vertices: list[_RawVertex]) -> Iterator[tuple[_RawVertex, _RawVertex, _RawVertex]]:
    """Fan triangulation of a face."""
    for k in range(2, len(vertices)):
        yield vertices[0], vertices[k - 1], vertices[k]


def _resolve(raw: int, count: int, what: str, filename: str, *, optional: bool) -> int:
    """0-based index of a 1-based or negative (from the end) .obj index; -1 if absent."""
    if optional and raw == 0:
        return -1
    index = count + raw if raw < 0 else raw - 1
    if not 0 <= index < count:
        raise ObjFormatError(f"invalid {what} index {raw} in '{filename}'")
    return index


def _records(filename: str, kinds: Iterable[str]) -> Iterator[tuple[str, object]]:
    """Parsed lines of an .obj file, restricted to the given kinds.

    Kinds are "v", "vt", "vn", "f", "mtllib" and "usemtl".
    """
    wanted = set(kinds)
    directory = pathname(filename)
    with open(filename, "r", encoding="utf-8", errors="replace") as f:
        for raw in f:
            line = raw.lstrip()
            if not line:
                continue
            head = line[0]
            second = line[1:2]

            if head == "v":
                if second == " " and "v" in wanted:
                    values = _floats(line[1:], 3)
                    if values is None:
                        raise ObjFormatError(f"bad position in '{filename}': {line.rstrip()}")
                    yield "v", Point(*values)
                elif second == "n" and "vn" in wanted:
                    values = _floats(line[2:], 3) if line.startswith("vn") else None
                    if values is None:
                        raise ObjFormatError(f"bad normal in '{filename}': {line.rstrip()}")
                    yield "vn", Vector(*values)
                elif second == "t" and "vt" in wanted:
                    values = _floats(line[2:], 2) if line.startswith("vt") else None
                    if values is None:
                        raise ObjFormatError(f"bad texcoord in '{filename}': {line.rstrip()}")
                    yield "vt", Point(values[0], values[1], 0.0)

            elif head == "f":
                if "f" in wanted:
                    yield "f", _parse_face(line[1:])

            elif head == "m":
                if "mtllib" in wanted:
                    name = _text(line, "mtllib")
                    if name is not None:
                        if name[:1] != "/" and name[1:2] != ":":
                            name = normalize_filename(directory + name)
                        yield "mtllib", name

            elif head == "u":
                if "usemtl" in wanted:
                    name = _text(line, "usemtl")
                    if name is not None:
                        yield "usemtl", name


def read_positions(filename: str) -> list[Point]:
    """Positions of the triangles of an .obj file, 3 successive points per triangle."""
    vertices: list[Point] = []
    positions: list[Point] = []
    for kind, value in _records(filename, ("v", "f")):
        if kind == "v":
            vertices.append(value)
            continue
        for triangle in _triangles(value):
            for p, _, _ in triangle:
                index = _resolve(p, len(vertices), "position", filename, optional=False)
                positions.append(vertices[index])
    return positions


def read_indexed_positions(filename: str) -> tuple[list[Point], list[int]]:
    """Positions of an .obj file and 3 successive position indices per triangle."""
    positions: list[Point] = []
    indices: list[int] = []
    for kind, value in _records(filename, ("v", "f")):
        if kind == "v":
            positions.append(value)
            continue
        for triangle in _triangles(value):
            for p, _, _ in triangle:
                indices.append(_resolve(p, len(positions), "position", filename, optional=False))
    return positions, indices


def read_textured_positions(
    filename: str,
) -> tuple[list[Point], list[int], list[Point], list[int]]:
    """Positions, position indices, texcoords and per-triangle material indices.

    Texcoords are listed once for each distinct (material, position, texcoord)
    vertex, in order of first use.
    """
    positions: list[Point] = []
    indices: list[int] = []
    read_texcoords: list[Point] = []
    texcoords: list[Point] = []
    material_indices: list[int] = []
    materials = Materials()
    remap: dict[tuple[int, int, int, int], int] = {}
    material_id = -1

    for kind, value in _records(filename, ("v", "vt", "f", "mtllib", "usemtl")):
        if kind == "v":
            positions.append(value)
        elif kind == "vt":
            read_texcoords.append(value)
        elif kind == "mtllib":
            read_materials_mtl(value, materials)
        elif kind == "usemtl":
            material_id = materials.find(value)
        else:
            if material_id == -1:
                material_id = materials.default_material_index()
            for triangle in _triangles(value):
                material_indices.append(material_id)
                for raw_p, raw_t, _ in triangle:
                    p = _resolve(raw_p, len(positions), "position", filename, optional=False)
                    t = _resolve(raw_t, len(read_texcoords), "texcoord", filename, optional=True)
                    key = (material_id, p, t, p)
                    if key not in remap:
                        remap[key] = len(remap)
                        if t != -1:
                            texcoords.append(read_texcoords[t])
                    indices.append(p)
    return positions, indices, texcoords, material_indices


def read_materials(
    filename: str, materials: Materials | None = None
) -> tuple[Materials, list[int]]:
    """Materials of an .obj file and the material index of each triangle.

    The materials are added to `materials` (a new set if None), which is returned
    along with the per-triangle indices. Faces before any known material use the
    default material.
    """
    if materials is None:
        materials = Materials()
    indices: list[int] = []
    material_id = -1
    for kind, value in _records(filename, ("f", "mtllib", "usemtl")):
        if kind == "f":
            if material_id == -1:
                material_id = materials.default_material_index()
            indices.extend([material_id] * max(0, len(value) - 2))
        elif kind == "mtllib":
            read_materials_mtl(value, materials)
        else:
            material_id = materials.find(value)
    return materials, indices


def read_meshio_data(filename: str) -> MeshIOData:
    """Load every attribute and material of an .obj file, with an index buffer.

    Vertices sharing the same material, position, texcoord and normal are merged.
    """
    data = MeshIOData()
    read_positions_: list[Point] = []
    read_texcoords: list[Point] = []
    read_normals: list[Vector] = []
    remap: dict[tuple[int, int, int, int], int] = {}
    material_id = -1

    for kind, value in _records(filename, ("v", "vt", "vn", "f", "mtllib", "usemtl")):
        if kind == "v":
            read_positions_.append(value)
        elif kind == "vt":
            read_texcoords.append(value)
        elif kind == "vn":
            read_normals.append(value)
        elif kind == "mtllib":
            read_materials_mtl(value, data.materials)
        elif kind == "usemtl":
            material_id = data.materials.find(value)
        else:
            if material_id == -1:
                material_id = data.materials.default_material_index()
            for triangle in _triangles(value):
                data.material_indices.append(material_id)
                for raw_p, raw_t, raw_n in triangle:
                    p = _resolve(raw_p, len(read_positions_), "position", filename, optional=False)
                    t = _resolve(raw_t, len(read_texcoords), "texcoord", filename, optional=True)
                    n = _resolve(raw_n, len(read_normals), "normal", filename, optional=True)
                    key = (material_id, p, t, n)
                    index = remap.get(key)
                    if index is None:
                        index = remap[key] = len(remap)
                        if t != -1:
                            data.texcoords.append(read_texcoords[t])
                        if n != -1:
                            data.normals.append(read_normals[n])
                        data.positions.append(read_positions_[p])
                    data.indices.append(index)
    return data