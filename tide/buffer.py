"""A thread-safe grid of character cells with a cursor."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from dataclasses import dataclass

from wcwidth import wcwidth

from tide.geometry import Point, Size
from tide.screen import STYLE_DEFAULT, CellStyle


def _rune_width(ch: str) -> int:
    return max(wcwidth(ch), 0)


@dataclass(frozen=True)
class Cell:
    """One character cell."""

    rune: str
    style: CellStyle = STYLE_DEFAULT
    combining: tuple[str, ...] = ()
    width: int = 1


class Buffer:
    """Sparse cell storage of a fixed size, with a cursor and a dirty flag."""

    def __init__(self, size: Size) -> None:
        self._lock = threading.RLock()
        self._cells: dict[Point, Cell] = {}
        self._size = size
        self._cursor = Point()
        self.dirty = False

    @property
    def size(self) -> Size:
        """The buffer's size."""
        with self._lock:
            return self._size

    @property
    def cursor(self) -> Point:
        """The cursor position."""
        with self._lock:
            return self._cursor

    def set_cell(
        self,
        x: int,
        y: int,
        ch: str,
        combining: Iterable[str] | None,
        style: CellStyle,
    ) -> None:
        """Store a character at ``(x, y)``."""
        cell = Cell(ch, style, tuple(combining or ()), _rune_width(ch))
        with self._lock:
            self._cells[Point(x, y)] = cell
            self.dirty = True

    def get_cell(self, x: int, y: int) -> Cell | None:
        """Return the cell at ``(x, y)``, or None if nothing was stored there."""
        with self._lock:
            return self._cells.get(Point(x, y))

    def clear(self) -> None:
        """Remove every cell."""
        with self._lock:
            self._cells = {}
            self.dirty = True

    def resize(self, size: Size) -> None:
        """Change the size, dropping cells beyond the new bounds."""
        with self._lock:
            if self._size == size:
                return
            self._cells = {
                pos: cell
                for pos, cell in self._cells.items()
                if pos.x < size.width and pos.y < size.height
            }
            self._size = size
            self.dirty = True

    def set_cursor(self, x: int, y: int) -> None:
        """Place the cursor."""
        with self._lock:
            self._cursor = Point(x, y)
            self.dirty = True

    def move_cursor(self, dx: int, dy: int) -> None:
        """Move the cursor relative to where it is, staying inside the buffer."""
        with self._lock:
            x = self._cursor.x + dx
            y = self._cursor.y + dy
            x = max(x, 0)
            y = max(y, 0)
            if x >= self._size.width:
                x = self._size.width - 1
            if y >= self._size.height:
                y = self._size.height - 1
            self._cursor = Point(x, y)
            self.dirty = True

    def copy_from(self, other: Buffer) -> None:
        """Replace this buffer's content with a copy of ``other``'s."""
        with other._lock:
            cells = dict(other._cells)
            size, cursor, dirty = other._size, other._cursor, other.dirty
        with self._lock:
            self._cells = cells
            self._size = size
            self._cursor = cursor
            self.dirty = dirty