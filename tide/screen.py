"""An in-memory terminal screen with cells, styles, colours and an event queue."""

from __future__ import annotations

import queue
import threading
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import IntEnum, IntFlag

from wcwidth import wcwidth


class AttrMask(IntFlag):
    """Text attributes of a cell."""

    NONE = 0
    BOLD = 1
    BLINK = 2
    REVERSE = 4
    UNDERLINE = 8
    DIM = 16
    ITALIC = 32
    STRIKETHROUGH = 64


_STANDARD_16 = (
    (0, 0, 0),
    (128, 0, 0),
    (0, 128, 0),
    (128, 128, 0),
    (0, 0, 128),
    (128, 0, 128),
    (0, 128, 128),
    (192, 192, 192),
    (128, 128, 128),
    (255, 0, 0),
    (0, 255, 0),
    (255, 255, 0),
    (0, 0, 255),
    (255, 0, 255),
    (0, 255, 255),
    (255, 255, 255),
)
_CUBE_LEVELS = (0x00, 0x5F, 0x87, 0xAF, 0xD7, 0xFF)


def _palette_rgb(index: int) -> tuple[int, int, int]:
    if index < 16:
        return _STANDARD_16[index]
    if index < 232:
        offset = index - 16
        return (
            _CUBE_LEVELS[offset // 36],
            _CUBE_LEVELS[(offset // 6) % 6],
            _CUBE_LEVELS[offset % 6],
        )
    level = 8 + 10 * (index - 232)
    return level, level, level


@dataclass(frozen=True)
class TermColor:
    """A terminal colour: the default, a palette entry or a 24-bit value."""

    palette: int | None = None
    true_color: tuple[int, int, int] | None = None

    def __post_init__(self) -> None:
        if self.palette is not None and self.true_color is not None:
            raise ValueError("a colour is either a palette entry or a 24-bit value")
        if self.palette is not None and not 0 <= self.palette <= 255:
            raise ValueError(f"palette index out of range: {self.palette}")
        if self.true_color is not None and not all(0 <= v <= 255 for v in self.true_color):
            raise ValueError(f"RGB value out of range: {self.true_color}")

    @classmethod
    def from_palette(cls, index: int) -> TermColor:
        """Return the palette colour at ``index``."""
        return cls(palette=index)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> TermColor:
        """Return a 24-bit colour."""
        return cls(true_color=(r, g, b))

    @property
    def is_default(self) -> bool:
        """True for the terminal's default colour."""
        return self.palette is None and self.true_color is None

    def rgb(self) -> tuple[int, int, int]:
        """Return the RGB components; ``(-1, -1, -1)`` for the default colour."""
        if self.true_color is not None:
            return self.true_color
        if self.palette is None:
            return -1, -1, -1
        return _palette_rgb(self.palette)


COLOR_DEFAULT = TermColor()
COLOR_BLACK = TermColor(palette=0)
COLOR_MAROON = TermColor(palette=1)
COLOR_GREEN = TermColor(palette=2)
COLOR_OLIVE = TermColor(palette=3)
COLOR_NAVY = TermColor(palette=4)
COLOR_PURPLE = TermColor(palette=5)
COLOR_TEAL = TermColor(palette=6)
COLOR_SILVER = TermColor(palette=7)
COLOR_GRAY = TermColor(palette=8)
COLOR_RED = TermColor(palette=9)
COLOR_LIME = TermColor(palette=10)
COLOR_YELLOW = TermColor(palette=11)
COLOR_BLUE = TermColor(palette=12)
COLOR_FUCHSIA = TermColor(palette=13)
COLOR_AQUA = TermColor(palette=14)
COLOR_WHITE = TermColor(palette=15)


@dataclass(frozen=True)
class CellStyle:
    """Foreground, background and attributes of a cell."""

    fg: TermColor = COLOR_DEFAULT
    bg: TermColor = COLOR_DEFAULT
    attrs: AttrMask = AttrMask.NONE

    def foreground(self, color: TermColor) -> CellStyle:
        """Return the style with a different foreground."""
        return replace(self, fg=color)

    def background(self, color: TermColor) -> CellStyle:
        """Return the style with a different background."""
        return replace(self, bg=color)

    def with_attrs(self, attrs: AttrMask) -> CellStyle:
        """Return the style with ``attrs`` added."""
        return replace(self, attrs=self.attrs | attrs)


STYLE_DEFAULT = CellStyle()


class Key(IntEnum):
    """Keys reported by key events."""

    NUL = 0
    CTRL_C = 3
    BACKSPACE = 8
    TAB = 9
    ENTER = 13
    CTRL_V = 22
    ESC = 27
    BACKSPACE2 = 127
    RUNE = 256
    UP = 257
    DOWN = 258
    RIGHT = 259
    LEFT = 260


class ButtonMask(IntFlag):
    """Mouse buttons and wheel directions."""

    NONE = 0
    PRIMARY = 1
    SECONDARY = 2
    MIDDLE = 4
    WHEEL_UP = 256
    WHEEL_DOWN = 512
    WHEEL_LEFT = 1024
    WHEEL_RIGHT = 2048


class ModMask(IntFlag):
    """Keyboard modifiers."""

    NONE = 0
    SHIFT = 1
    CTRL = 2
    ALT = 4
    META = 8


MOUSE_BUTTON_EVENTS = 1
MOUSE_DRAG_EVENTS = 2
MOUSE_MOTION_EVENTS = 4
_ALL_MOUSE_EVENTS = MOUSE_BUTTON_EVENTS | MOUSE_DRAG_EVENTS | MOUSE_MOTION_EVENTS


@dataclass(frozen=True)
class EventResize:
    """The screen changed size."""

    width: int
    height: int
    when: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class EventKey:
    """A key was pressed."""

    key: Key
    rune: str = ""
    modifiers: ModMask = ModMask.NONE
    when: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class EventMouse:
    """The mouse moved or a button changed state."""

    x: int
    y: int
    buttons: ButtonMask = ButtonMask.NONE
    modifiers: ModMask = ModMask.NONE
    when: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class EventFocus:
    """The terminal gained or lost focus."""

    focused: bool
    when: datetime = field(default_factory=datetime.now)


_STOP = object()


class SimulationScreen:
    """A screen kept entirely in memory."""

    def __init__(self, width: int = 80, height: int = 25, *, queue_size: int = 128) -> None:
        self._lock = threading.RLock()
        self._width = width
        self._height = height
        self._cells: dict[tuple[int, int], tuple[str, tuple[str, ...], CellStyle]] = {}
        self._queue_size = queue_size
        self._events: queue.Queue = queue.Queue()
        self._stopped = False
        self.shown: dict[tuple[int, int], tuple[str, tuple[str, ...], CellStyle]] = {}
        self.cursor: tuple[int, int] = (-1, -1)
        self.mouse_flags = 0
        self.active = False

    def init(self) -> None:
        """Start the screen; a finalized screen gets a fresh event queue."""
        with self._lock:
            if self._stopped:
                self._events = queue.Queue()
                self._stopped = False
            self.active = True

    def fini(self) -> None:
        """Stop the screen and wake anyone waiting for events."""
        with self._lock:
            self.active = False
            if not self._stopped:
                self._stopped = True
                self._events.put(_STOP)

    def size(self) -> tuple[int, int]:
        """Return ``(width, height)``."""
        with self._lock:
            return self._width, self._height

    def set_size(self, width: int, height: int) -> None:
        """Change the size, dropping cells that no longer fit."""
        with self._lock:
            self._width, self._height = width, height
            self._cells = {
                pos: cell for pos, cell in self._cells.items() if pos[0] < width and pos[1] < height
            }

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def set_content(
        self,
        x: int,
        y: int,
        ch: str,
        combining: Iterable[str] | None,
        style: CellStyle,
    ) -> None:
        """Put a character with its combining marks and style at ``(x, y)``."""
        with self._lock:
            if self._in_bounds(x, y):
                self._cells[(x, y)] = (ch, tuple(combining or ()), style)

    def get_content(self, x: int, y: int) -> tuple[str, tuple[str, ...], CellStyle, int]:
        """Return ``(char, combining, style, width)`` at ``(x, y)``."""
        with self._lock:
            entry = self._cells.get((x, y))
        if entry is None:
            return " ", (), STYLE_DEFAULT, 1
        ch, combining, style = entry
        return ch, combining, style, max(wcwidth(ch), 1)

    def clear(self) -> None:
        """Blank every cell."""
        with self._lock:
            self._cells.clear()

    def show(self) -> None:
        """Make the current content visible."""
        with self._lock:
            self.shown = dict(self._cells)

    def sync(self) -> None:
        """Redraw everything."""
        self.show()

    def show_cursor(self, x: int, y: int) -> None:
        """Place the visible cursor."""
        with self._lock:
            self.cursor = (x, y)

    def hide_cursor(self) -> None:
        """Hide the cursor."""
        with self._lock:
            self.cursor = (-1, -1)

    def enable_mouse(self, *args: int) -> None:
        """Report mouse events of the given kinds; all kinds if none are given."""
        flags = 0
        for flag in args:
            flags |= flag
        with self._lock:
            self.mouse_flags = flags or _ALL_MOUSE_EVENTS

    def disable_mouse(self) -> None:
        """Stop reporting mouse events."""
        with self._lock:
            self.mouse_flags = 0

    def post_event(self, event: object) -> None:
        """Queue an event; raises ``queue.Full`` if the queue is full."""
        with self._lock:
            if self._events.qsize() >= self._queue_size:
                raise queue.Full("event queue is full")
            self._events.put(event)

    def poll_event(self, timeout: float | None = None) -> object | None:
        """Wait for the next event; None on timeout or once the screen is finalized."""
        with self._lock:
            events = self._events
        try:
            event = events.get(timeout=timeout)
        except queue.Empty:
            return None
        if event is _STOP:
            events.put(_STOP)
            return None
        return event