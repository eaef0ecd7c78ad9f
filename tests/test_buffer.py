import pytest

from tide.buffer import Buffer, Cell
from tide.geometry import Point, Size
from tide.screen import COLOR_RED, STYLE_DEFAULT


def test_new_buffer():
    size = Size(80, 24)
    buf = Buffer(size)
    assert buf.size == size
    assert buf.cursor == Point(0, 0)
    assert buf.dirty is False


def test_cell_operations():
    buf = Buffer(Size(80, 24))
    style = STYLE_DEFAULT.foreground(COLOR_RED)
    buf.set_cell(5, 5, "A", None, style)
    cell = buf.get_cell(5, 5)
    assert cell is not None
    assert cell.rune == "A"
    assert cell.style == style
    assert cell.width == 1
    assert buf.dirty is True
    assert buf.get_cell(100, 100) is None


def test_combining_mark_has_zero_width():
    buf = Buffer(Size(10, 10))
    buf.set_cell(0, 0, "\u0301", None, STYLE_DEFAULT)
    assert buf.get_cell(0, 0).width == 0


def test_clear():
    buf = Buffer(Size(80, 24))
    buf.set_cell(0, 0, "A", None, STYLE_DEFAULT)
    buf.set_cell(1, 1, "B", None, STYLE_DEFAULT)
    buf.clear()
    assert all(buf.get_cell(x, y) is None for y in range(24) for x in range(80))


def test_resize():
    buf = Buffer(Size(80, 24))
    buf.set_cell(79, 23, "A", None, STYLE_DEFAULT)
    buf.set_cell(0, 0, "B", None, STYLE_DEFAULT)
    buf.set_cell(85, 25, "C", None, STYLE_DEFAULT)
    new_size = Size(40, 20)
    buf.resize(new_size)
    assert buf.size == new_size
    assert buf.get_cell(0, 0) is not None
    assert buf.get_cell(85, 25) is None
    assert buf.get_cell(79, 23) is None


def test_cursor_movement():
    buf = Buffer(Size(80, 24))
    steps = [
        (5, 0, Point(5, 0)),
        (0, 5, Point(5, 5)),
        (-2, 0, Point(3, 5)),
        (0, -2, Point(3, 3)),
        (-10, -10, Point(0, 0)),
        (100, 100, Point(79, 23)),
    ]
    for dx, dy, expected in steps:
        buf.move_cursor(dx, dy)
        assert buf.cursor == expected


def test_set_cursor():
    buf = Buffer(Size(80, 24))
    buf.set_cursor(-1, -1)
    assert buf.cursor == Point(-1, -1)


def test_copy_from():
    src = Buffer(Size(80, 24))
    dst = Buffer(Size(40, 20))
    src.set_cell(5, 5, "A", None, STYLE_DEFAULT)
    src.set_cursor(10, 10)

    dst.copy_from(src)

    assert dst.size == src.size
    assert dst.get_cell(5, 5) == src.get_cell(5, 5)
    assert dst.cursor == src.cursor

    src.set_cell(5, 5, "B", None, STYLE_DEFAULT)
    assert dst.get_cell(5, 5).rune == "A"


def test_cells_compare_by_value():
    a = Cell("x", STYLE_DEFAULT, ("\u0301",), 1)
    b = Cell("x", STYLE_DEFAULT, ("\u0301",), 1)
    assert a == b
    with pytest.raises(AttributeError):
        a.rune = "y"