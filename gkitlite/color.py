"""RGBA colors and color space conversions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An rgba color, opaque by default."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    def power(self) -> float:
        """Mean of the three color components."""
        return (self.r + self.g + self.b) / 3

    def max(self) -> float:
        """Largest color component, never below 0."""
        return max(self.r, self.g, self.b, 0.0)

    def with_alpha(self, alpha: float) -> "Color":
        """Same color with its alpha replaced."""
        return Color(self.r, self.g, self.b, alpha)

    def __add__(self, other):
        if isinstance(other, Color):
            return Color(self.r + other.r, self.g + other.g, self.b + other.b, self.a + other.a)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Color):
            return self + (-other)
        return NotImplemented

    def __neg__(self) -> "Color":
        return Color(-self.r, -self.g, -self.b, -self.a)

    def __mul__(self, other):
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b, self.a * other.a)
        if isinstance(other, (int, float)):
            return Color(self.r * other, self.g * other, self.b * other, self.a * other)
        return NotImplemented

    def __rmul__(self, k):
        if isinstance(k, (int, float)):
            return self.__mul__(k)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Color):
            return Color(self.r / other.r, self.g / other.g, self.b / other.b, self.a / other.a)
        if isinstance(other, (int, float)):
            return (1.0 / other) * self
        return NotImplemented

    def __rtruediv__(self, k):
        if isinstance(k, (int, float)):
            return Color(k / self.r, k / self.g, k / self.b, k / self.a)
        return NotImplemented


def black() -> Color:
    return Color(0.0, 0.0, 0.0)


def white() -> Color:
    return Color(1.0, 1.0, 1.0)


def red() -> Color:
    return Color(1.0, 0.0, 0.0)


def green() -> Color:
    return Color(0.0, 1.0, 0.0)


def blue() -> Color:
    return Color(0.0, 0.0, 1.0)


def yellow() -> Color:
    return Color(1.0, 1.0, 0.0)


def srgb_value(x: float) -> float:
    """Linear rgb component to srgb."""
    if x < 0.00031308:
        return 12.92 * x
    return (1.055 * x) ** (1.0 / 2.4) - 0.055


def linear_value(x: float) -> float:
    """srgb component to linear rgb."""
    if x < 0.04045:
        return x / 12.92
    return ((x + 0.055) / 1.055) ** 2.4


def srgb(color: Color) -> Color:
    """Linear rgb color to srgb; alpha is kept."""
    return Color(srgb_value(color.r), srgb_value(color.g), srgb_value(color.b), color.a)


def linear(color: Color) -> Color:
    """srgb color to linear rgb; alpha is kept."""
    return Color(linear_value(color.r), linear_value(color.g), linear_value(color.b), color.a)