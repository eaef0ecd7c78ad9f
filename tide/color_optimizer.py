"""Mapping of RGBA colours to terminal colours, with caching."""

from __future__ import annotations

import math
import threading

from tide.color import Color, ColorMode, rgb_to_hsl
from tide.screen import (
    COLOR_AQUA,
    COLOR_BLACK,
    COLOR_BLUE,
    COLOR_DEFAULT,
    COLOR_FUCHSIA,
    COLOR_GRAY,
    COLOR_GREEN,
    COLOR_LIME,
    COLOR_MAROON,
    COLOR_NAVY,
    COLOR_OLIVE,
    COLOR_PURPLE,
    COLOR_RED,
    COLOR_TEAL,
    COLOR_WHITE,
    COLOR_YELLOW,
    TermColor,
)


def is_intense_color(c: Color) -> bool:
    """Return True if the colour should use the bright variant of a basic colour."""
    hi = max(c.r, c.g, c.b)
    lo = min(c.r, c.g, c.b)
    # Pure colours such as (255, 0, 0) map to the dark variant.
    if hi == 255 and lo == 0:
        return False
    if hi > 128 and lo > 64:
        return True
    _, s, l = rgb_to_hsl(c.r, c.g, c.b)
    return l > 0.6 and s < 0.8


def _round_half_away(value: float) -> int:
    return int(math.floor(value + 0.5))


def _convert_true_color(c: Color) -> TermColor:
    return TermColor.from_rgb(c.r, c.g, c.b)


def _convert_256(c: Color) -> TermColor:
    if c.r == c.g == c.b:
        if c.r < 8:
            return TermColor.from_palette(16)
        if c.r > 238:
            return TermColor.from_palette(231)
        return TermColor.from_palette(232 + (c.r - 8) // 10)
    r = _round_half_away(c.r / 51.0)
    g = _round_half_away(c.g / 51.0)
    b = _round_half_away(c.b / 51.0)
    return TermColor.from_palette(16 + 36 * r + 6 * g + b)


_HUE_BANDS = (
    (90, COLOR_OLIVE, COLOR_YELLOW),
    (150, COLOR_GREEN, COLOR_LIME),
    (210, COLOR_TEAL, COLOR_AQUA),
    (270, COLOR_NAVY, COLOR_BLUE),
)


def _convert_16(c: Color) -> TermColor:
    h, s, l = rgb_to_hsl(c.r, c.g, c.b)
    if s < 0.2:
        if l < 0.2:
            return COLOR_BLACK
        if l > 0.8:
            return COLOR_WHITE
        return COLOR_GRAY

    bright = is_intense_color(c)
    if h < 30 or h >= 330:
        return COLOR_RED if bright else COLOR_MAROON
    for upper, dark, light in _HUE_BANDS:
        if h < upper:
            return light if bright else dark
    return COLOR_FUCHSIA if bright else COLOR_PURPLE


_CONVERTERS = {
    ColorMode.TRUE_COLOR: _convert_true_color,
    ColorMode.COLOR256: _convert_256,
    ColorMode.COLOR16: _convert_16,
}


class ColorOptimizer:
    """Converts colours for one colour mode and remembers the results."""

    def __init__(self, mode: ColorMode) -> None:
        self.mode = ColorMode(mode)
        self._cache: dict[Color, TermColor] = {}
        self._lock = threading.Lock()

    def get_color(self, c: Color) -> TermColor:
        """Return the terminal colour for ``c``; transparent colours give the default."""
        if c.a == 0:
            return COLOR_DEFAULT
        convert = _CONVERTERS.get(self.mode)
        if convert is None:
            return COLOR_DEFAULT
        with self._lock:
            cached = self._cache.get(c)
        if cached is not None:
            return cached
        result = convert(c)
        with self._lock:
            return self._cache.setdefault(c, result)