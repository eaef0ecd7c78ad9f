import queue
import threading

import pytest

from tide.screen import (
    COLOR_BLUE,
    COLOR_DEFAULT,
    COLOR_MAROON,
    COLOR_RED,
    COLOR_WHITE,
    MOUSE_BUTTON_EVENTS,
    MOUSE_DRAG_EVENTS,
    MOUSE_MOTION_EVENTS,
    STYLE_DEFAULT,
    AttrMask,
    ButtonMask,
    CellStyle,
    EventFocus,
    EventKey,
    EventMouse,
    EventResize,
    Key,
    SimulationScreen,
    TermColor,
)


def test_rgb_color_round_trip():
    assert TermColor.from_rgb(123, 45, 67).rgb() == (123, 45, 67)


def test_default_color_has_no_rgb():
    assert COLOR_DEFAULT.is_default
    assert COLOR_DEFAULT.rgb() == (-1, -1, -1)


def test_named_palette_color():
    assert COLOR_MAROON.rgb() == (128, 0, 0)
    assert TermColor.from_palette(9) == COLOR_RED


@pytest.mark.parametrize("args", [(256, 0, 0), (0, -1, 0)])
def test_rgb_out_of_range(args):
    with pytest.raises(ValueError):
        TermColor.from_rgb(*args)


def test_palette_out_of_range():
    with pytest.raises(ValueError):
        TermColor.from_palette(256)


def test_cube_and_gray_entries_are_gray_or_colored():
    r, g, b = TermColor.from_palette(240).rgb()
    assert r == g == b
    assert TermColor.from_palette(231).rgb() == COLOR_WHITE.rgb()


def test_cell_style_builders():
    style = STYLE_DEFAULT.foreground(COLOR_WHITE).background(COLOR_BLUE)
    style = style.with_attrs(AttrMask.BOLD).with_attrs(AttrMask.ITALIC)
    assert style.fg == COLOR_WHITE
    assert style.bg == COLOR_BLUE
    assert style.attrs == AttrMask.BOLD | AttrMask.ITALIC
    assert STYLE_DEFAULT == CellStyle()


def test_content_round_trip():
    screen = SimulationScreen(10, 5)
    style = STYLE_DEFAULT.foreground(COLOR_RED)
    screen.set_content(2, 3, "e", ["\u0301"], style)
    ch, combining, got_style, _ = screen.get_content(2, 3)
    assert ch == "e"
    assert list(combining) == ["\u0301"]
    assert got_style == style


def test_empty_cell_is_blank():
    screen = SimulationScreen(10, 5)
    ch, combining, style, _ = screen.get_content(0, 0)
    assert (ch, len(combining), style) == (" ", 0, STYLE_DEFAULT)


def test_out_of_bounds_content_ignored():
    screen = SimulationScreen(10, 5)
    screen.set_content(10, 0, "X", None, STYLE_DEFAULT)
    assert screen.get_content(10, 0)[0] == " "


def test_clear_blanks_cells():
    screen = SimulationScreen(10, 5)
    screen.set_content(1, 1, "X", None, STYLE_DEFAULT)
    screen.clear()
    assert screen.get_content(1, 1)[0] == " "


def test_set_size_drops_cells_outside():
    screen = SimulationScreen(10, 5)
    screen.set_content(1, 1, "A", None, STYLE_DEFAULT)
    screen.set_content(8, 4, "B", None, STYLE_DEFAULT)
    screen.set_size(5, 3)
    assert screen.size() == (5, 3)
    assert screen.get_content(1, 1)[0] == "A"
    screen.set_size(10, 5)
    assert screen.get_content(8, 4)[0] == " "


def test_show_snapshots_content():
    screen = SimulationScreen(10, 5)
    screen.set_content(0, 0, "X", None, STYLE_DEFAULT)
    assert (0, 0) not in screen.shown
    screen.show()
    assert screen.shown[(0, 0)][0] == "X"


def test_cursor_show_and_hide():
    screen = SimulationScreen()
    screen.show_cursor(3, 4)
    assert screen.cursor == (3, 4)
    screen.hide_cursor()
    assert screen.cursor == (-1, -1)


def test_mouse_flags():
    screen = SimulationScreen()
    screen.enable_mouse(MOUSE_BUTTON_EVENTS)
    assert screen.mouse_flags == MOUSE_BUTTON_EVENTS
    screen.enable_mouse()
    assert screen.mouse_flags == MOUSE_BUTTON_EVENTS | MOUSE_DRAG_EVENTS | MOUSE_MOTION_EVENTS
    screen.disable_mouse()
    assert screen.mouse_flags == 0


def test_events_are_delivered_in_order():
    screen = SimulationScreen()
    screen.init()
    posted = [
        EventResize(100, 50),
        EventKey(Key.CTRL_C),
        EventMouse(1, 2, ButtonMask.PRIMARY),
        EventFocus(True),
    ]
    for event in posted:
        screen.post_event(event)
    assert [screen.poll_event(1) for _ in posted] == posted


def test_poll_times_out():
    screen = SimulationScreen()
    screen.init()
    assert screen.poll_event(0.01) is None


def test_full_queue_raises():
    screen = SimulationScreen(queue_size=1)
    screen.post_event(EventFocus(True))
    with pytest.raises(queue.Full):
        screen.post_event(EventFocus(False))


def test_fini_wakes_waiting_poller():
    screen = SimulationScreen()
    screen.init()
    results = []
    worker = threading.Thread(target=lambda: results.append(screen.poll_event(None)))
    worker.start()
    screen.fini()
    worker.join(2)
    assert results == [None]
    assert screen.active is False


def test_init_after_fini_accepts_events():
    screen = SimulationScreen()
    screen.init()
    screen.fini()
    screen.init()
    event = EventFocus(False)
    screen.post_event(event)
    assert screen.active is True
    assert screen.poll_event(1) == event