"""Tone mapping and encoding of images to png, bmp and hdr files."""

from __future__ import annotations

import math
import struct
import sys
import zlib
from typing import Iterable

from .color import Color, linear, srgb
from .image import Image

_PNG_SIGNATURE = bytes([137, 80, 78, 71, 13, 10, 26, 10])


def srgb_image(image: Image) -> Image:
    """Convert every pixel from linear rgb to srgb."""
    result = Image(image.width, image.height)
    result.pixels = [srgb(c) for c in image]
    return result


def linear_image(image: Image) -> Image:
    """Convert every pixel from srgb to linear rgb."""
    result = Image(image.width, image.height)
    result.pixels = [linear(c) for c in image]
    return result


def exposure_range(image: Image) -> float:
    """Estimate the exposure of an image: the level under which 75% of pixels lie."""
    if len(image) == 0:
        return 0.0
    levels = [c.r + c.g + c.b for c in image]
    gmin = sys.float_info.max
    gmax = 0.0
    for g in levels:
        if g < gmin:
            gmin = g
        if g > gmax:
            gmax = g

    span = gmax - gmin
    bins = [0] * 100
    for g in levels:
        if span == 0 or not math.isfinite(g):
            b = 0
        else:
            scaled = (g - gmin) * 100 / span
            b = int(scaled) if math.isfinite(scaled) else 0
        bins[min(max(b, 0), 99)] += 1

    total = 0.0
    for i, count in enumerate(bins):
        total += count / len(image)
        if total > 0.75:
            return gmin + (i + 1) / 100 * span
    return gmax


def tone(image: Image, saturation: float) -> Image:
    """Exposure correction and gamma transform; invalid pixels become magenta."""
    k = 1 / saturation ** (1 / 2.2)
    result = Image(image.width, image.height)
    pixels = []
    for color in image:
        if math.isnan(color.r) or math.isnan(color.g) or math.isnan(color.b):
            color = Color(1.0, 0.0, 1.0)
        else:
            color = k * srgb(color)
        pixels.append(color.with_alpha(1.0))
    result.pixels = pixels
    return result


def _check(image: Image) -> None:
    if len(image) == 0:
        raise ValueError("cannot write an empty image")


def _to_byte(value: float) -> int:
    v = value * 255
    if math.isnan(v):
        return 0
    return int(min(max(v, 0.0), 255.0))


def _rgba_rows(image: Image) -> list[bytes]:
    """8-bit rgba rows of the image, row 0 first."""
    w = image.width
    rows = []
    for y in range(image.height):
        row = bytearray()
        for c in image.pixels[y * w:(y + 1) * w]:
            row += bytes((_to_byte(c.r), _to_byte(c.g), _to_byte(c.b), _to_byte(c.a)))
        rows.append(bytes(row))
    return rows


def _png_chunk(tag: bytes, data: bytes) -> bytes:
    crc = zlib.crc32(tag + data) & 0xFFFFFFFF
    return struct.pack(">I", len(data)) + tag + data + struct.pack(">I", crc)


def encode_png(image: Image, flip_y: bool = True) -> bytes:
    """Encode an image as an 8-bit rgba png; with flip_y, the last row comes first."""
    _check(image)
    rows = _rgba_rows(image)
    if flip_y:
        rows.reverse()
    raw = b"".join(b"\x00" + row for row in rows)
    header = struct.pack(">IIBBBBB", image.width, image.height, 8, 6, 0, 0, 0)
    return (
        _PNG_SIGNATURE
        + _png_chunk(b"IHDR", header)
        + _png_chunk(b"IDAT", zlib.compress(raw, 8))
        + _png_chunk(b"IEND", b"")
    )


def encode_bmp(image: Image, flip_y: bool = True) -> bytes:
    """Encode an image as a 32-bit bmp with an alpha channel (v4 header)."""
    _check(image)
    w, h = image.width, image.height
    header = struct.pack(
        "<2sIHHI", b"BM", 14 + 108 + w * h * 4, 0, 0, 14 + 108
    ) + struct.pack(
        "<IiiHHIIIIII" "IIII" "I" "9I" "3I",
        108, w, h, 1, 32, 3, 0, 0, 0, 0, 0,
        0xFF0000, 0xFF00, 0xFF, 0xFF000000,
        0,
        *([0] * 9),
        *([0] * 3),
    )
    rows = _rgba_rows(image)
    # bmp rows go bottom-up; flip_y keeps row 0 first
    if not flip_y:
        rows.reverse()
    body = bytearray()
    for row in rows:
        for i in range(0, len(row), 4):
            r, g, b, a = row[i:i + 4]
            body += bytes((b, g, r, a))
    return header + bytes(body)


def _rgbe(r: float, g: float, b: float) -> tuple[int, int, int, int]:
    maxcomp = max(r, g, b)
    if not maxcomp >= 1e-32:
        return (0, 0, 0, 0)
    mantissa, exponent = math.frexp(maxcomp)
    scale = mantissa * 256.0 / maxcomp

    def byte(v: float) -> int:
        x = v * scale
        if math.isnan(x):
            return 0
        return int(min(max(x, 0.0), 255.0))

    return (byte(r), byte(g), byte(b), (exponent + 128) & 0xFF)


def _hdr_scanline(pixels: Iterable[Color], width: int) -> bytes:
    rgbe = [_rgbe(c.r, c.g, c.b) for c in pixels]
    out = bytearray()
    if width < 8 or width >= 32768:
        for p in rgbe:
            out += bytes(p)
        return bytes(out)

    out += bytes((2, 2, (width >> 8) & 0xFF, width & 0xFF))
    for c in range(4):
        comp = [p[c] for p in rgbe]
        x = 0
        while x < width:
            r = x
            while r + 2 < width:
                if comp[r] == comp[r + 1] == comp[r + 2]:
                    break
                r += 1
            if r + 2 >= width:
                r = width
            while x < r:
                n = min(r - x, 128)
                out.append(n)
                out += bytes(comp[x:x + n])
                x += n
            if r + 2 < width:
                while r < width and comp[r] == comp[x]:
                    r += 1
                while x < r:
                    n = min(r - x, 127)
                    out += bytes((n + 128, comp[x]))
                    x += n
    return bytes(out)


def encode_hdr(image: Image, flip_y: bool = True) -> bytes:
    """Encode an image as a radiance rgbe .hdr file; alpha is dropped."""
    _check(image)
    w, h = image.width, image.height
    out = bytearray(b"#?RADIANCE\nFORMAT=32-bit_rle_rgbe\n")
    out += f"EXPOSURE=          1.0000000000000\n\n-Y {h} +X {w}\n".encode("ascii")
    order = reversed(range(h)) if flip_y else range(h)
    for y in order:
        out += _hdr_scanline(image.pixels[y * w:(y + 1) * w], w)
    return bytes(out)


def _write(filename: str, data: bytes) -> None:
    with open(filename, "wb") as f:
        f.write(data)


def write_image_png(image: Image, filename: str, flip_y: bool = True) -> None:
    """Write an image to a .png file."""
    _write(filename, encode_png(image, flip_y))


def write_image(image: Image, filename: str, flip_y: bool = True) -> None:
    """Write an image to a .png file."""
    write_image_png(image, filename, flip_y)


def write_image_bmp(image: Image, filename: str, flip_y: bool = True) -> None:
    """Write an image to a .bmp file."""
    _write(filename, encode_bmp(image, flip_y))


def write_image_hdr(image: Image, filename: str, flip_y: bool = True) -> None:
    """Write an image to a .hdr file."""
    _write(filename, encode_hdr(image, flip_y))


def write_image_preview(image: Image, filename: str, flip_y: bool = True) -> None:
    """Write tone(image, exposure_range(image)) to a .png file."""
    _check(image)
    write_image_png(tone(image, exposure_range(image)), filename, flip_y)