"""Blinn-Phong materials of a mesh and the .mtl reader."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .color import Color
from .files import absolute_filename, pathname

_FLOAT = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


@dataclass
class Material:
    """Parameters of a Blinn-Phong material; black by default."""

    diffuse: Color = Color()
    specular: Color = Color()
    emission: Color = Color()
    ns: float = 0.0
    ni: float = 0.0
    transmission: Color = Color()
    diffuse_texture: int = -1
    specular_texture: int = -1
    ns_texture: int = -1


@dataclass
class Materials:
    """Named materials of a mesh, plus the texture files they reference.

    `names[i]` is the name of `materials[i]`; textures are indexed separately
    so that each image file is listed once.
    """

    names: list[str] = field(default_factory=list)
    materials: list[Material] = field(default_factory=list)
    texture_filenames: list[str] = field(default_factory=list)
    default_material_id: int = -1

    def clear(self) -> None:
        """Remove every material and texture."""
        self.names.clear()
        self.materials.clear()
        self.texture_filenames.clear()
        self.default_material_id = -1

    def insert(self, material: Material, name: str) -> int:
        """Add a material unless one with that name exists; return its index."""
        index = self.find(name)
        if index == -1:
            index = len(self.materials)
            self.names.append(name)
            self.materials.append(material)
        return index

    def insert_texture(self, filename: str) -> int:
        """Add a texture file name unless already listed; return its index."""
        index = self.find_texture(filename)
        if index == -1:
            index = len(self.texture_filenames)
            self.texture_filenames.append(filename)
        return index

    def find(self, name: str | None) -> int:
        """Index of the material with that name, or -1."""
        if not name:
            return -1
        try:
            return self.names.index(name)
        except ValueError:
            return -1

    def count(self) -> int:
        """Number of materials."""
        return len(self.materials)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self.materials):
            raise IndexError(f"material index out of range: {index}")

    def name(self, index: int) -> str:
        """Name of the material at index."""
        self._check(index)
        return self.names[index]

    def material(self, index: int) -> Material:
        """Material at index."""
        self._check(index)
        return self.materials[index]

    def material_by_name(self, name: str) -> Material:
        """Material with that name, or the default material."""
        index = self.find(name)
        if index != -1:
            return self.materials[index]
        return self.default_material()

    def default_material(self) -> Material:
        """The default material, created on first use."""
        return self.material(self.default_material_index())

    def default_material_index(self) -> int:
        """Index of the default material, created on first use."""
        if self.default_material_id == -1:
            self.default_material_id = self.insert(
                Material(Color(0.8, 0.8, 0.8)), "default"
            )
        return self.default_material_id

    def filename_count(self) -> int:
        """Number of texture file names."""
        return len(self.texture_filenames)

    def filename(self, index: int) -> str | None:
        """Texture file name at index, or None for a negative index."""
        if index < 0:
            return None
        if index >= len(self.texture_filenames):
            raise IndexError(f"texture index out of range: {index}")
        return self.texture_filenames[index]

    def find_texture(self, filename: str | None) -> int:
        """Index of a texture file name, or -1."""
        if not filename:
            return -1
        try:
            return self.texture_filenames.index(filename)
        except ValueError:
            return -1


def _floats(line: str, keyword: str, n: int) -> list[float] | None:
    """n floats following keyword at the start of line, or None."""
    if not line.startswith(keyword):
        return None
    rest = line[len(keyword):]
    values = []
    pos = 0
    for _ in range(n):
        match = _FLOAT.match(rest, pos)
        if match is None:
            return None
        values.append(float(match.group(1)))
        pos = match.end()
    return values


def _text(line: str, keyword: str) -> str | None:
    """Rest of the line after keyword, without leading blanks or line end."""
    if not line.startswith(keyword):
        return None
    rest = line[len(keyword):].lstrip()
    value = re.split(r"[\r\n]", rest, maxsplit=1)[0]
    return value or None


def read_materials_mtl(filename: str, materials: Materials) -> Materials:
    """Read the materials of a .mtl file into materials and return it.

    Texture file names are resolved against the directory of filename.
    Raises OSError if the file cannot be read.
    """
    directory = pathname(filename)
    current: Material | None = None
    with open(filename, "r", encoding="utf-8", errors="replace") as f:
        for raw in f:
            line = raw.lstrip()
            if not line:
                continue
            head = line[0]

            if head == "n":
                name = _text(line, "newmtl")
                if name is not None:
                    current = materials.material(
                        materials.insert(Material(Color(0.0, 0.0, 0.0)), name)
                    )

            if current is None:
                continue

            if head == "K":
                for keyword, attr in (("Kd", "diffuse"), ("Ks", "specular"), ("Ke", "emission")):
                    values = _floats(line, keyword, 3)
                    if values is not None:
                        setattr(current, attr, Color(*values))
                        break
            elif head == "N":
                values = _floats(line, "Ns", 1)
                if values is not None:
                    current.ns = values[0]
                values = _floats(line, "Ni", 1)
                if values is not None:
                    current.ni = values[0]
            elif head == "T":
                values = _floats(line, "Tf", 3)
                if values is not None:
                    current.transmission = Color(*values)
            elif head == "m":
                for keyword, attr in (
                    ("map_Kd", "diffuse_texture"),
                    ("map_Ks", "specular_texture"),
                    ("map_Ns", "ns_texture"),
                ):
                    texture = _text(line, keyword)
                    if texture is not None:
                        setattr(
                            current,
                            attr,
                            materials.insert_texture(absolute_filename(directory, texture)),
                        )
                        break
    return materials