import random

import pytest

from canvasui.core import color
from canvasui.core.color import Color, parse_rgba


def test_hsl_primaries():
    assert str(Color.from_hsl(0, 100, 50)) == "rgba(255, 0, 0, 1)"
    assert str(Color.from_hsl(120, 100, 50)) == "rgba(0, 255, 0, 1)"
    assert str(Color.from_hsl(240, 100, 50)) == "rgba(0, 0, 255, 1)"


def test_hsl_edges():
    # Hue wraps
    assert Color.from_hsl(360, 100, 50) == Color.from_rgb(255, 0, 0)
    assert Color.from_hsl(-120, 100, 50) == Color.from_rgb(0, 0, 255)

    assert Color.from_hsl(0, 0, 100) == Color.from_rgb(255, 255, 255)
    assert Color.from_hsl(200, 50, 0) == Color.from_rgb(0, 0, 0)
    assert Color.from_hsl(0, 0, 50) == Color.from_rgb(128, 128, 128)


def test_string_format_alpha():
    assert Color.from_hsla(0, 100, 50, 0.5).to_string() == "rgba(255, 0, 0, 0.5)"
    assert Color.from_rgba(1, 2, 3, 0).to_string() == "rgba(1, 2, 3, 0)"


def test_channels_clamped_and_rounded():
    c = Color.from_rgba(300, -5, 127.5, 2)
    assert c.to_tuple() == (255, 0, 128, 1.0)

    c = Color.from_rgba(10, 10, 10, -1)
    assert c.a == 0.0


def test_lerp_in_place():
    c = Color.from_rgba(0, 0, 0, 0)
    same = c.lerp(Color.from_rgba(255, 255, 255, 1), 0.5)
    assert same is c
    assert c.to_tuple() == (128, 128, 128, 0.5)


def test_lerp_in_place_takes_alpha_from_target():
    c = Color.from_rgba(0, 0, 0, 1)
    c.lerp(Color.from_rgba(0, 0, 0, 0), 1)
    assert c.a == 0.0


def test_pure_lerp_does_not_mutate():
    a = Color.from_rgb(0, 0, 0)
    b = Color.from_rgb(100, 200, 50)
    mid = color.lerp(a, b, 0.5)
    assert mid.to_tuple() == (50, 100, 25, 1.0)
    assert a == Color.from_rgb(0, 0, 0)


def test_lerp_endpoints():
    c1 = Color.from_rgba(10, 20, 30, 0.2)
    c2 = Color.from_rgba(200, 100, 50, 0.8)

    assert color.lerp(c1, c2, 0) == c1
    assert color.lerp(c1, c2, 1) == c2

    assert c1.copy().lerp(c2, 0) == c1
    assert c1.copy().lerp(c2, 1) == c2


def test_copy_is_independent():
    a = Color.from_rgb(1, 2, 3)
    b = a.copy()
    b.lerp(Color.from_rgb(255, 255, 255), 1)
    assert a == Color.from_rgb(1, 2, 3)


def test_random_color_is_valid():
    c = Color.random(random.Random(3))
    for channel in (c.r, c.g, c.b):
        assert 0 <= channel <= 255
    assert c.a == 1.0


def test_parse_rgba():
    assert parse_rgba("rgba(255, 0, 0, 1)") == (1.0, 0.0, 0.0, 1.0)
    r, g, b, a = parse_rgba(str(Color.from_rgba(0, 51, 255, 0.25)))
    assert (r, g, b, a) == pytest.approx((0.0, 0.2, 1.0, 0.25))

    with pytest.raises(ValueError):
        parse_rgba("red")
    with pytest.raises(ValueError):
        parse_rgba("rgba(1, 2, 3)")


if __name__ == "__main__":
    test_hsl_primaries()
    test_lerp_in_place_takes_alpha_from_target()
