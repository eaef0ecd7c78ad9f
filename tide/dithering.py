"""Dithering of colours onto a fixed palette."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

from tide.color import Color, color_distance
from tide.geometry import Point, Rect

ErrorTerms = tuple[float, float, float]
DitherMatrix = Sequence[Sequence[float]]

_ZERO_ERROR: ErrorTerms = (0.0, 0.0, 0.0)


class DitherMethod(IntEnum):
    """Available dithering algorithms."""

    NONE = 0
    FLOYD_STEINBERG = 1
    ORDERED = 2
    BAYER = 3


BAYER_4X4: DitherMatrix = (
    (0.0, 8.0, 2.0, 10.0),
    (12.0, 4.0, 14.0, 6.0),
    (3.0, 11.0, 1.0, 9.0),
    (15.0, 7.0, 13.0, 5.0),
)

# Floyd-Steinberg diffusion pattern:
#     X   7/16
# 3/16  5/16  1/16
_FLOYD_STEINBERG_WEIGHTS = (
    ((1, 0), 7.0 / 16.0),
    ((-1, 1), 3.0 / 16.0),
    ((0, 1), 5.0 / 16.0),
    ((1, 1), 1.0 / 16.0),
)


class ErrorBuffer:
    """Error terms carried between pixels during Floyd-Steinberg dithering."""

    def __init__(self, bounds: Rect) -> None:
        self._bounds = bounds
        self._errors: dict[Point, ErrorTerms] = {}

    def get(self, p: Point) -> ErrorTerms:
        """Return the error terms stored at ``p``, zeros if none."""
        return self._errors.get(p, _ZERO_ERROR)

    def set(self, p: Point, err: Sequence[float]) -> None:
        """Store error terms at ``p``; points outside the bounds are ignored."""
        if self._bounds.contains(p):
            r, g, b = err
            self._errors[p] = (float(r), float(g), float(b))

    def clear(self) -> None:
        """Forget all stored error terms."""
        self._errors.clear()


def _clamp_byte(value: float) -> int:
    return int(max(0.0, min(255.0, value)))


def nearest_color(color: Color, palette: Sequence[Color]) -> Color:
    """Return the palette entry closest to ``color``; the colour itself if empty."""
    if not palette:
        return color
    if len(palette) == 1:
        return palette[0]
    return min(palette, key=lambda candidate: color_distance(color, candidate))


def _floyd_steinberg(
    color: Color, x: int, y: int, palette: Sequence[Color], buffer: ErrorBuffer
) -> Color:
    er, eg, eb = buffer.get(Point(x, y))
    adjusted = Color(
        _clamp_byte(color.r + er),
        _clamp_byte(color.g + eg),
        _clamp_byte(color.b + eb),
        color.a,
    )
    nearest = nearest_color(adjusted, palette)
    new_err = (
        adjusted.r - nearest.r,
        adjusted.g - nearest.g,
        adjusted.b - nearest.b,
    )
    for (dx, dy), weight in _FLOYD_STEINBERG_WEIGHTS:
        neighbour = Point(x + dx, y + dy)
        current = buffer.get(neighbour)
        buffer.set(neighbour, [c + e * weight for c, e in zip(current, new_err)])
    return nearest


def ordered_dither(
    color: Color, x: int, y: int, palette: Sequence[Color], matrix: DitherMatrix
) -> Color:
    """Dither ``color`` at ``(x, y)`` with a threshold matrix."""
    if not matrix:
        return nearest_color(color, palette)
    mx = x % len(matrix)
    my = y % len(matrix[0])
    # Thresholds are centred on zero; the scale of 32 turns 50% grey into a checkerboard.
    offset = (matrix[my][mx] / 16.0 - 0.5) * 32
    adjusted = Color(
        _clamp_byte(color.r + offset),
        _clamp_byte(color.g + offset),
        _clamp_byte(color.b + offset),
        color.a,
    )
    return nearest_color(adjusted, palette)


def dither(
    color: Color,
    method: DitherMethod,
    x: int,
    y: int,
    palette: Sequence[Color] | None,
    buffer: ErrorBuffer | None = None,
) -> Color:
    """Map ``color`` at ``(x, y)`` onto ``palette`` using ``method``."""
    if not palette:
        return color
    if method == DitherMethod.FLOYD_STEINBERG:
        if buffer is None:
            buffer = ErrorBuffer(Rect(Point(0, 0), Point(x + 2, y + 2)))
        return _floyd_steinberg(color, x, y, palette, buffer)
    if method == DitherMethod.ORDERED:
        return ordered_dither(color, x, y, palette, BAYER_4X4)
    if method == DitherMethod.BAYER:
        return ordered_dither(color, x, y, palette, BAYER_4X4)
    return nearest_color(color, palette)