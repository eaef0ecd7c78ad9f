import pytest

from tide.color import Color
from tide.interpolation import gradient, lerp, mix


@pytest.mark.parametrize(
    "c1, c2, t, expect",
    [
        (Color(0, 0, 0, 255), Color(255, 255, 255, 255), 0.5, Color(127, 127, 127, 255)),
        (Color(100, 150, 200, 255), Color(200, 50, 100, 255), 0.0, Color(100, 150, 200, 255)),
        (Color(100, 150, 200, 255), Color(200, 50, 100, 255), 1.0, Color(200, 50, 100, 255)),
        (Color(100, 100, 100, 0), Color(100, 100, 100, 255), 0.5, Color(100, 100, 100, 127)),
    ],
)
def test_lerp(c1, c2, t, expect):
    assert lerp(c1, c2, t) == expect


def test_lerp_clamps_t():
    a, b = Color(10, 20, 30, 255), Color(200, 210, 220, 255)
    assert lerp(a, b, -1.0) == a
    assert lerp(a, b, 5.0) == b


def check_gradient(colors, start, end):
    assert colors[0] == start
    assert colors[-1] == end
    for prev, cur in zip(colors, colors[1:]):
        assert cur.r >= prev.r and cur.g >= prev.g and cur.b >= prev.b


def test_gradient_normal_case():
    start, end = Color(0, 0, 0, 255), Color(255, 255, 255, 255)
    colors = gradient(start, end, 5)
    assert len(colors) == 5
    check_gradient(colors, start, end)


def test_gradient_same_colors():
    start = end = Color(100, 100, 100, 255)
    colors = gradient(start, end, 5)
    assert len(colors) == 5
    check_gradient(colors, start, end)


def test_gradient_single_step():
    start = Color(100, 100, 100, 255)
    assert gradient(start, Color(200, 200, 200, 255), 1) == [start]


@pytest.mark.parametrize(
    "c1, c2, weight, expect",
    [
        (Color(0, 0, 0, 255), Color(255, 255, 255, 255), 0.5, Color(127, 127, 127, 255)),
        (Color(100, 100, 100, 255), Color(200, 200, 200, 255), 0.0, Color(100, 100, 100, 255)),
        (Color(100, 100, 100, 255), Color(200, 200, 200, 255), 1.0, Color(200, 200, 200, 255)),
    ],
)
def test_mix(c1, c2, weight, expect):
    assert mix(c1, c2, weight) == expect