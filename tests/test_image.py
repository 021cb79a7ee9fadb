import pytest

from gkitlite.color import Color, red
from gkitlite.image import Image


def test_default_color_is_black_and_size():
    image = Image(3, 2)
    assert image.width == 3
    assert image.height == 2
    assert len(image) == 6
    assert all(c == Color(0.0, 0.0, 0.0, 1.0) for c in image)


def test_fill_color():
    image = Image(2, 2, red())
    assert list(image) == [red()] * 4


def test_set_and_get_by_coordinates_and_index():
    image = Image(4, 3)
    image[1, 2] = red()
    assert image[1, 2] == red()
    assert image[2 * 4 + 1] == red()
    image[0] = Color(0.5, 0.5, 0.5)
    assert image[0, 0] == Color(0.5, 0.5, 0.5)


def test_offset_clamps_outside_coordinates():
    image = Image(4, 3)
    assert image.offset(-5, -5) == 0
    assert image.offset(10, 10) == image.offset(3, 2)
    assert image.offset(2, 1) == 1 * 4 + 2


def test_index_out_of_range():
    image = Image(2, 2)
    with pytest.raises(IndexError):
        image[4]
    with pytest.raises(IndexError):
        image[-1] = red()


def test_empty_image_offset_raises():
    with pytest.raises(IndexError):
        Image().offset(0, 0)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Image(-1, 2)


def test_sample_at_integer_position_returns_pixel():
    image = Image(3, 3)
    image[1, 1] = Color(0.2, 0.4, 0.6, 1.0)
    c = image.sample(1.0, 1.0)
    assert c.r == pytest.approx(0.2)
    assert c.g == pytest.approx(0.4)
    assert c.b == pytest.approx(0.6)


def test_sample_interpolates_between_pixels():
    image = Image(2, 1)
    image[0, 0] = Color(0.0, 0.0, 0.0)
    image[1, 0] = Color(1.0, 1.0, 1.0)
    c = image.sample(0.5, 0.0)
    assert c.r == pytest.approx(0.5)
    assert c.a == pytest.approx(1.0)


def test_texture_uses_normalized_coordinates():
    image = Image(4, 4)
    image[2, 2] = red()
    assert image.texture(0.5, 0.5) == image.sample(2.0, 2.0)