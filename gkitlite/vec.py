"""Points, vectors and small generic vectors in 3d."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point in 3d space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __getitem__(self, i: int) -> float:
        return (self.x, self.y, self.z)[i]

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other):
        """Point + Point and Point + Vector both give a Point."""
        if isinstance(other, (Point, Vector)):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        """Point - Point gives a Vector, Point - Vector gives a Point."""
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, k):
        if isinstance(k, (int, float)):
            return Point(self.x * k, self.y * k, self.z * k)
        return NotImplemented

    def __rmul__(self, k):
        return self.__mul__(k)

    def __truediv__(self, k):
        if isinstance(k, (int, float)):
            return self * (1.0 / k)
        return NotImplemented

    def __str__(self) -> str:
        return f"p({self.x:g},{self.y:g},{self.z:g})"


@dataclass(frozen=True)
class Vector:
    """A direction / displacement in 3d space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def between(cls, a: Point, b: Point) -> "Vector":
        """Return the vector going from a to b."""
        return cls(b.x - a.x, b.y - a.y, b.z - a.z)

    def __getitem__(self, i: int) -> float:
        return (self.x, self.y, self.z)[i]

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other):
        """Vector + Vector gives a Vector, Vector + Point gives a Point."""
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, Point):
            return Point(other.x + self.x, other.y + self.y, other.z + self.z)
        return NotImplemented

    def __sub__(self, other):
        """Vector - Vector gives a Vector; Vector - Point gives the Point moved by -v."""
        if isinstance(other, Vector):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Point):
            return other + (-self)
        return NotImplemented

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        """Scale by a number, or multiply component-wise by another Vector."""
        if isinstance(other, Vector):
            return Vector(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vector(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, k):
        if isinstance(k, (int, float)):
            return Vector(k * self.x, k * self.y, k * self.z)
        return NotImplemented

    def __truediv__(self, k):
        if isinstance(k, (int, float)):
            return self * (1.0 / k)
        return NotImplemented

    def __str__(self) -> str:
        return f"v({self.x:g},{self.y:g},{self.z:g})"


@dataclass(frozen=True)
class Vec2:
    """Generic 2d vector."""

    x: float = 0.0
    y: float = 0.0

    def __getitem__(self, i: int) -> float:
        return (self.x, self.y)[i]


@dataclass(frozen=True)
class Vec3:
    """Generic 3d vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __getitem__(self, i: int) -> float:
        return (self.x, self.y, self.z)[i]


@dataclass(frozen=True)
class Vec4:
    """Generic 4d vector, or homogeneous 3d coordinates."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def from_point(cls, p: Point) -> "Vec4":
        """Homogeneous coordinates of a point: (x, y, z, 1)."""
        return cls(p.x, p.y, p.z, 1.0)

    @classmethod
    def from_vector(cls, v: Vector) -> "Vec4":
        """Homogeneous coordinates of a vector: (x, y, z, 0)."""
        return cls(v.x, v.y, v.z, 0.0)

    def __getitem__(self, i: int) -> float:
        return (self.x, self.y, self.z, self.w)[i]


def origin() -> Point:
    """Return the point (0, 0, 0)."""
    return Point(0.0, 0.0, 0.0)


def distance(a: Point, b: Point) -> float:
    """Distance between two points."""
    return length(a - b)


def distance2(a: Point, b: Point) -> float:
    """Squared distance between two points."""
    return length2(a - b)


def center(a: Point, b: Point) -> Point:
    """Middle of the segment ab."""
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2, (a.z + b.z) / 2)


def min_point(a: Point, b: Point) -> Point:
    """Component-wise minimum of two points."""
    return Point(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))


def max_point(a: Point, b: Point) -> Point:
    """Component-wise maximum of two points."""
    return Point(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))


def normalize(v: Vector) -> Vector:
    """Return v scaled to unit length."""
    return (1.0 / length(v)) * v


def cross(u: Vector, v: Vector) -> Vector:
    """Cross product of two vectors."""
    return Vector(
        u.y * v.z - u.z * v.y,
        u.z * v.x - u.x * v.z,
        u.x * v.y - u.y * v.x,
    )


def dot(u: Vector, v: Vector) -> float:
    """Dot product of two vectors."""
    return u.x * v.x + u.y * v.y + u.z * v.z


def length(v: Vector) -> float:
    """Length of a vector."""
    return math.sqrt(length2(v))


def length2(v: Vector) -> float:
    """Squared length of a vector."""
    return v.x * v.x + v.y * v.y + v.z * v.z