"""Points, sizes and rectangles on an integer grid."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A position on the grid."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Size:
    """A width and height."""

    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Rect:
    """A half-open rectangle from ``min`` (inclusive) to ``max`` (exclusive)."""

    min: Point = Point()
    max: Point = Point()

    def size(self) -> Size:
        """Return the width and height of the rectangle."""
        return Size(self.max.x - self.min.x, self.max.y - self.min.y)

    def contains(self, p: Point) -> bool:
        """Return True if ``p`` lies inside the rectangle."""
        return self.min.x <= p.x < self.max.x and self.min.y <= p.y < self.max.y

    def is_empty(self) -> bool:
        """Return True if the rectangle covers no cells."""
        return self.min.x >= self.max.x or self.min.y >= self.max.y


def new_rect(x: int, y: int, width: int, height: int) -> Rect:
    """Build a rectangle from its origin and dimensions."""
    return Rect(Point(x, y), Point(x + width, y + height))