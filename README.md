# gkitlite

A small toolkit for writing simple renderers in pure Python, with no
dependencies beyond the standard library.

## Modules

- `gkitlite.vec`: frozen dataclasses `Point`, `Vector`, `Vec2`, `Vec3` and
  `Vec4`. `Point - Point` gives a `Vector`, `Point + Vector` gives a `Point`,
  `Vector.between(a, b)` is the vector from `a` to `b`, and
  `Vec4.from_point` / `Vec4.from_vector` give homogeneous coordinates
  (w = 1 and w = 0). Helpers: `origin`, `distance`, `distance2`, `center`,
  `min_point`, `max_point`, `normalize`, `cross`, `dot`, `length`, `length2`.
- `gkitlite.mat`: the 4x4 row-major `Transform`. Calling a transform applies
  it to a `Point`, `Vector` or `Vec4`, or composes it with another
  `Transform`; `a * b` also composes. It has `transpose`, `inverse` (raises
  `ValueError` on a singular matrix), `normal`, `column`, `row`,
  `column_major`, `row_major` and `from_columns`. Builders: `identity`,
  `scale` (one or three factors), `translation` (x, y, z or a `Vector`),
  `rotation_x`, `rotation_y`, `rotation_z`, `rotation` (axis and angle in
  degrees), `rotation_between`, `perspective`, `ortho`, `viewport`, `lookat`,
  `compose_transform`, plus `radians` and `degrees`.
- `gkitlite.color`: the RGBA `Color` (opaque by default) with arithmetic,
  `power`, `max` and `with_alpha`; the presets `black`, `white`, `red`,
  `green`, `blue`, `yellow`; and `srgb` / `linear` conversions
  (`srgb_value` / `linear_value` for single components).
- `gkitlite.image`: the float RGBA `Image`. `image[x, y]` clamps coordinates
  to the image, `image[i]` addresses the i-th pixel and raises `IndexError`
  out of range. It supports `len`, iteration, `offset`, bilinear `sample`
  and normalized `texture`.
- `gkitlite.image_io`: `srgb_image`, `linear_image`, `exposure_range` and
  `tone`; the encoders `encode_png` (8-bit RGBA), `encode_bmp` (32-bit with
  alpha) and `encode_hdr` (Radiance RGBE) returning bytes; and the writers
  `write_image` / `write_image_png`, `write_image_bmp`, `write_image_hdr`
  and `write_image_preview` (tone-mapped PNG). All take `flip_y`, `True` by
  default; empty images raise `ValueError`.
- `gkitlite.materials`: Blinn-Phong `Material`, the `Materials` set (names,
  materials, texture file names, a default material created on demand) and
  the `.mtl` loader `read_materials_mtl`.
- `gkitlite.mesh_io`: Wavefront `.obj` loading with `read_positions`,
  `read_indexed_positions`, `read_textured_positions`, `read_materials` and
  `read_meshio_data`, which returns a `MeshIOData`. Faces are fan
  triangulated; indices may be 1-based or negative. A malformed line or an
  invalid index raises `ObjFormatError`; a missing file raises `OSError`.
- `gkitlite.files`: file name helpers `exists`, `timestamp`, `pathname`,
  `normalize_filename`, `relative_filename` and `absolute_filename`.

## Installation

```
pip install .
```

## Example

```python
from gkitlite.vec import Point, Vector
from gkitlite.mat import perspective, lookat, viewport
from gkitlite.color import red
from gkitlite.image import Image
from gkitlite.image_io import write_image

view = lookat(Point(0, 0, 5), Point(0, 0, 0), Vector(0, 1, 0))
projection = perspective(45, 1, 0.1, 100)
screen = viewport(256, 256) * projection * view

image = Image(256, 256)
p = screen(Point(0, 0, 0))
image[int(p.x), int(p.y)] = red()
write_image(image, "out.png")
```

Loading a mesh with its materials:

```python
from gkitlite.mesh_io import read_meshio_data

data = read_meshio_data("scene.obj")
for triangle, material_id in enumerate(data.material_indices):
    a, b, c = (data.positions[i] for i in data.indices[3 * triangle: 3 * triangle + 3])
    color = data.materials.material(material_id).diffuse
```

## What it does not do

The package writes images but does not read image files. Texture files named
in `.mtl` files are recorded in `Materials.texture_filenames` only;
`MeshIOData.images` is left empty. There is no command-line program and no
window or display.

## Running the tests

```
pip install .[test]
pytest
```