import pytest

from gkitlite.color import (
    Color,
    black,
    blue,
    green,
    linear,
    linear_value,
    red,
    srgb,
    srgb_value,
    white,
    yellow,
)

C1 = Color(0.2, 0.5, 0.9, 0.7)
C2 = Color(0.4, 0.25, 0.1, 0.5)


def test_named_colors():
    assert black() == Color(0, 0, 0, 1)
    assert white() == Color(1, 1, 1, 1)
    assert red() == Color(1, 0, 0)
    assert green() == Color(0, 1, 0)
    assert blue() == Color(0, 0, 1)
    assert yellow() == red() + green() - Color(0, 0, 0, 1)


def test_default_color_is_opaque_black():
    assert Color() == black()


def test_power_is_mean():
    assert C1.power() == pytest.approx((C1.r + C1.g + C1.b) / 3)
    assert white().power() == pytest.approx(white().r)


def test_max_never_negative():
    assert C1.max() == C1.b
    assert Color(-1, -2, -3).max() == 0


def test_with_alpha_replaces_only_alpha():
    c = C1.with_alpha(0.25)
    assert (c.r, c.g, c.b, c.a) == (C1.r, C1.g, C1.b, 0.25)


def test_add_sub_round_trip():
    c = C1 + C2 - C2
    for got, want in zip((c.r, c.g, c.b, c.a), (C1.r, C1.g, C1.b, C1.a)):
        assert got == pytest.approx(want)


def test_negation():
    assert -(-C1) == C1
    assert C1 - C1 == Color(0, 0, 0, 0)


def test_products():
    assert C1 * C2 == Color(C1.r * C2.r, C1.g * C2.g, C1.b * C2.b, C1.a * C2.a)
    assert 2 * C1 == C1 * 2


def test_divisions():
    q = C1 / C2
    assert q.g == pytest.approx(C1.g / C2.g)
    d = C1 / 4
    assert d.b == pytest.approx(C1.b * 0.25)
    inv = 1 / C2
    assert inv.r == pytest.approx(1 / C2.r)
    assert inv.a == pytest.approx(1 / C2.a)


def test_srgb_value_below_threshold_is_linear_ramp():
    assert srgb_value(0.0) == 0.0
    assert srgb_value(0.0001) == pytest.approx(12.92 * 0.0001)


def test_linear_value_endpoints():
    assert linear_value(0.0) == 0.0
    assert linear_value(1.0) == pytest.approx(1.0)
    assert linear_value(0.01) == pytest.approx(0.01 / 12.92)


def test_conversions_are_monotonic():
    xs = [0.0, 0.1, 0.3, 0.6, 0.9]
    assert [srgb_value(x) for x in xs] == sorted(srgb_value(x) for x in xs)
    assert [linear_value(x) for x in xs] == sorted(linear_value(x) for x in xs)


def test_color_conversions_keep_alpha():
    assert srgb(C1).a == C1.a
    assert linear(C1).a == C1.a
    assert srgb(C1).g == pytest.approx(srgb_value(C1.g))
    assert linear(C2).r == pytest.approx(linear_value(C2.r))