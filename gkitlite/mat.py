"""4x4 transforms of points and vectors."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from .vec import Point, Vec4, Vector, cross, dot, length, normalize

_IDENTITY = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


def radians(deg: float) -> float:
    """Convert degrees to radians."""
    return math.pi / 180 * deg


def degrees(rad: float) -> float:
    """Convert radians to degrees."""
    return 180 / math.pi * rad


class Transform:
    """A 4x4 matrix stored row by row; `m[row][column]`."""

    __slots__ = ("m",)

    def __init__(self, *values: float) -> None:
        """Build the identity, or a matrix from 16 values given row by row."""
        if not values:
            self.m = [list(row) for row in _IDENTITY]
        elif len(values) == 16:
            flat = [float(v) for v in values]
            self.m = [flat[4 * r: 4 * r + 4] for r in range(4)]
        else:
            raise ValueError(f"a transform needs 0 or 16 values, got {len(values)}")

    @classmethod
    def from_columns(cls, x: Vector, y: Vector, z: Vector, w: Vector) -> "Transform":
        """Build a transform from 4 column vectors; the last row is (0, 0, 0, 1)."""
        return cls(
            x.x, y.x, z.x, w.x,
            x.y, y.y, z.y, w.y,
            x.z, y.z, z.z, w.z,
            0.0, 0.0, 0.0, 1.0,
        )

    def column(self, index: int, t0: float, t1: float, t2: float, t3: float) -> "Transform":
        """Set a column of the matrix; returns self."""
        for row, value in zip(self.m, (t0, t1, t2, t3)):
            row[index] = float(value)
        return self

    def row(self, index: int, t0: float, t1: float, t2: float, t3: float) -> "Transform":
        """Set a row of the matrix; returns self."""
        self.m[index] = [float(t0), float(t1), float(t2), float(t3)]
        return self

    @staticmethod
    def _check16(values: Sequence[float]) -> list[float]:
        flat = list(values)
        if len(flat) != 16:
            raise ValueError(f"expected 16 values, got {len(flat)}")
        return flat

    def column_major(self, values: Iterable[float]) -> "Transform":
        """Fill the matrix from 16 values given column by column; returns self."""
        flat = self._check16(values)
        for i in range(4):
            self.column(i, *flat[4 * i: 4 * i + 4])
        return self

    def row_major(self, values: Iterable[float]) -> "Transform":
        """Fill the matrix from 16 values given row by row; returns self."""
        flat = self._check16(values)
        for i in range(4):
            self.row(i, *flat[4 * i: 4 * i + 4])
        return self

    def __getitem__(self, c: int) -> Vector:
        """Column c of the matrix, as a Vector (first three rows)."""
        if not 0 <= c <= 3:
            raise IndexError(f"column index out of range: {c}")
        return Vector(self.m[0][c], self.m[1][c], self.m[2][c])

    def __call__(self, value):
        """Transform a Point, Vector or Vec4, or compose with another Transform."""
        m = self.m
        if isinstance(value, Point):
            x, y, z = value.x, value.y, value.z
            xt, yt, zt, wt = (r[0] * x + r[1] * y + r[2] * z + r[3] for r in m)
            w = 1.0 / wt
            if wt == 1.0:
                return Point(xt, yt, zt)
            return Point(xt * w, yt * w, zt * w)
        if isinstance(value, Vector):
            x, y, z = value.x, value.y, value.z
            xt, yt, zt = (r[0] * x + r[1] * y + r[2] * z for r in m[:3])
            return Vector(xt, yt, zt)
        if isinstance(value, Vec4):
            x, y, z, w = value.x, value.y, value.z, value.w
            return Vec4(*(r[0] * x + r[1] * y + r[2] * z + r[3] * w for r in m))
        if isinstance(value, Transform):
            return compose_transform(self, value)
        raise TypeError(f"cannot transform {type(value).__name__}")

    def __mul__(self, other):
        if isinstance(other, Transform):
            return compose_transform(self, other)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if isinstance(other, Transform):
            return self.m == other.m
        return NotImplemented

    def __repr__(self) -> str:
        return f"Transform({', '.join(repr(v) for row in self.m for v in row)})"

    def __str__(self) -> str:
        return "".join(" ".join(f"{v:g}" for v in row) + " \n" for row in self.m)

    def data(self) -> tuple[float, ...]:
        """The 16 values, row by row."""
        return tuple(v for row in self.m for v in row)

    def transpose(self) -> "Transform":
        """Transposed matrix."""
        return Transform(*(v for col in zip(*self.m) for v in col))

    def inverse(self) -> "Transform":
        """Inverse matrix, by Gauss-Jordan elimination with full pivoting."""
        minv = [row[:] for row in self.m]
        indxc = [0] * 4
        indxr = [0] * 4
        ipiv = [0] * 4

        for i in range(4):
            irow = icol = -1
            big = 0.0
            for j in range(4):
                if ipiv[j] == 1:
                    continue
                for k in range(4):
                    if ipiv[k] == 0:
                        if abs(minv[j][k]) >= big:
                            big = abs(minv[j][k])
                            irow, icol = j, k
                    elif ipiv[k] > 1:
                        raise ValueError("singular matrix in Transform.inverse()")
            if irow < 0 or icol < 0:
                raise ValueError("singular matrix in Transform.inverse()")

            ipiv[icol] += 1
            if irow != icol:
                minv[irow], minv[icol] = minv[icol], minv[irow]

            indxr[i] = irow
            indxc[i] = icol
            if minv[icol][icol] == 0.0:
                raise ValueError("singular matrix in Transform.inverse()")

            pivinv = 1.0 / minv[icol][icol]
            minv[icol][icol] = 1.0
            minv[icol] = [v * pivinv for v in minv[icol]]

            pivot_row = minv[icol]
            for j in range(4):
                if j != icol:
                    save = minv[j][icol]
                    minv[j][icol] = 0.0
                    minv[j] = [a - b * save for a, b in zip(minv[j], pivot_row)]

        for j in reversed(range(4)):
            r, c = indxr[j], indxc[j]
            if r != c:
                for row in minv:
                    row[r], row[c] = row[c], row[r]

        return Transform(*(v for row in minv for v in row))

    def normal(self) -> "Transform":
        """Transform to apply to the normals of an object transformed by this matrix."""
        return self.inverse().transpose()


def identity() -> Transform:
    """The identity transform."""
    return Transform()


def transpose(m: Transform) -> Transform:
    """Transposed matrix."""
    return m.transpose()


def inverse(m: Transform) -> Transform:
    """Inverse matrix."""
    return m.inverse()


def normal(m: Transform) -> Transform:
    """Normal transform of m."""
    return m.normal()


def scale(x: float, y: float | None = None, z: float | None = None) -> Transform:
    """Scale along each axis; with a single argument, a uniform scale."""
    if y is None and z is None:
        y = z = x
    if y is None or z is None:
        raise TypeError("scale needs either one or three factors")
    return Transform(
        x, 0, 0, 0,
        0, y, 0, 0,
        0, 0, z, 0,
        0, 0, 0, 1,
    )


def translation(x, y: float = 0.0, z: float = 0.0) -> Transform:
    """Translation by (x, y, z), or by a Vector given as the first argument."""
    if isinstance(x, Vector):
        x, y, z = x.x, x.y, x.z
    return Transform(
        1, 0, 0, x,
        0, 1, 0, y,
        0, 0, 1, z,
        0, 0, 0, 1,
    )


def rotation_x(angle: float) -> Transform:
    """Rotation of angle degrees around the X axis."""
    s = math.sin(radians(angle))
    c = math.cos(radians(angle))
    return Transform(
        1, 0, 0, 0,
        0, c, -s, 0,
        0, s, c, 0,
        0, 0, 0, 1,
    )


def rotation_y(angle: float) -> Transform:
    """Rotation of angle degrees around the Y axis."""
    s = math.sin(radians(angle))
    c = math.cos(radians(angle))
    return Transform(
        c, 0, s, 0,
        0, 1, 0, 0,
        -s, 0, c, 0,
        0, 0, 0, 1,
    )


def rotation_z(angle: float) -> Transform:
    """Rotation of angle degrees around the Z axis."""
    s = math.sin(radians(angle))
    c = math.cos(radians(angle))
    return Transform(
        c, -s, 0, 0,
        s, c, 0, 0,
        0, 0, 1, 0,
        0, 0, 0, 1,
    )


def _axis_rotation(a: Vector, s: float, c: float) -> Transform:
    return Transform(
        a.x * a.x + (1 - a.x * a.x) * c,
        a.x * a.y * (1 - c) - a.z * s,
        a.x * a.z * (1 - c) + a.y * s,
        0,

        a.x * a.y * (1 - c) + a.z * s,
        a.y * a.y + (1 - a.y * a.y) * c,
        a.y * a.z * (1 - c) - a.x * s,
        0,

        a.x * a.z * (1 - c) - a.y * s,
        a.y * a.z * (1 - c) + a.x * s,
        a.z * a.z + (1 - a.z * a.z) * c,
        0,

        0, 0, 0, 1,
    )


def rotation(axis: Vector, angle: float) -> Transform:
    """Rotation of angle degrees around axis."""
    return _axis_rotation(normalize(axis), math.sin(radians(angle)), math.cos(radians(angle)))


def rotation_between(u: Vector, v: Vector) -> Transform:
    """Rotation taking the direction of u onto the direction of v."""
    a = normalize(u)
    b = normalize(v)
    w = cross(a, b)
    s = length(w)
    c = dot(a, b)
    if s < 0.00001:
        return scale(math.copysign(c, 1))
    return _axis_rotation(w / s, s, c)


def perspective(fov: float, aspect: float, znear: float, zfar: float) -> Transform:
    """Perspective projection, OpenGL convention; fov in degrees."""
    itan = 1 / math.tan(radians(fov) * 0.5)
    inv_depth = 1 / (znear - zfar)
    return Transform(
        itan / aspect, 0, 0, 0,
        0, itan, 0, 0,
        0, 0, (zfar + znear) * inv_depth, 2 * zfar * znear * inv_depth,
        0, 0, -1, 0,
    )


def ortho(left: float, right: float, bottom: float, top: float,
          znear: float, zfar: float) -> Transform:
    """Orthographic projection of a box onto [-1 1]x[-1 1]x[-1 1]."""
    tx = -(right + left) / (right - left)
    ty = -(top + bottom) / (top - bottom)
    tz = -(zfar + znear) / (zfar - znear)
    return Transform(
        2 / (right - left), 0, 0, tx,
        0, 2 / (top - bottom), 0, ty,
        0, 0, -2 / (zfar - znear), tz,
        0, 0, 0, 1,
    )


def viewport(width: float, height: float) -> Transform:
    """Viewport transform from [-1 1] cube to [0 width]x[0 height]x[0 1]."""
    w = width / 2
    h = height / 2
    return Transform(
        w, 0, 0, w,
        0, h, 0, h,
        0, 0, 0.5, 0.5,
        0, 0, 0, 1,
    )


def lookat(origin: Point, target: Point, up: Vector) -> Transform:
    """View transform of a camera at origin looking at target."""
    direction = normalize(Vector.between(origin, target))
    right = normalize(cross(direction, normalize(up)))
    new_up = normalize(cross(right, direction))
    m = Transform(
        right.x, new_up.x, -direction.x, origin.x,
        right.y, new_up.y, -direction.y, origin.y,
        right.z, new_up.z, -direction.z, origin.z,
        0, 0, 0, 1,
    )
    return m.inverse()


def compose_transform(a: Transform, b: Transform) -> Transform:
    """Composition a * b."""
    columns = list(zip(*b.m))
    return Transform(*(sum(x * y for x, y in zip(row, col)) for row in a.m for col in columns))