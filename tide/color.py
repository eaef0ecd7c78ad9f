"""RGBA colours, HSL conversion, quantization and gamma conversion."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol

from tide.utils import is_color_intensity_high


class ColorMode(IntEnum):
    """Levels of colour support."""

    NONE = 0
    COLOR16 = 1
    COLOR256 = 2
    TRUE_COLOR = 3


class _GammaProfile(Protocol):
    gamma: float


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _to_byte(value: float, *, rounded: bool = False) -> int:
    """Convert a float to a byte, wrapping out-of-range values."""
    if not math.isfinite(value):
        return 0
    if rounded:
        value = _round_half_away(value)
    return int(value) & 0xFF


def _pow(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except (ValueError, ZeroDivisionError, OverflowError):
        return math.inf


def _inverse(value: float) -> float:
    if value == 0:
        return math.copysign(math.inf, value)
    return 1.0 / value


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name} out of range: {value}")

    def rgba(self) -> tuple[int, int, int, int]:
        """Return alpha-premultiplied 16-bit channels."""
        r, g, b, a = self.r, self.g, self.b, self.a
        if a != 0xFF:
            r = r * a // 0xFF
            g = g * a // 0xFF
            b = b * a // 0xFF
        return r << 8, g << 8, b << 8, a << 8

    def lighten(self, amount: float) -> Color:
        """Return the colour with its lightness raised by ``amount``."""
        h, s, l = rgb_to_hsl(self.r, self.g, self.b)
        r, g, b = hsl_to_rgb(h, s, min(1.0, l + amount))
        return Color(r, g, b, self.a)

    def darken(self, amount: float) -> Color:
        """Return the colour with its lightness lowered by ``amount``."""
        h, s, l = rgb_to_hsl(self.r, self.g, self.b)
        r, g, b = hsl_to_rgb(h, s, max(0.0, l - amount))
        return Color(r, g, b, self.a)

    def with_alpha(self, alpha: int) -> Color:
        """Return the colour with a different alpha."""
        return Color(self.r, self.g, self.b, alpha)

    def is_transparent(self) -> bool:
        """Return True if the colour is fully transparent."""
        return self.a == 0

    def quantize_to(self, mode: ColorMode) -> Color:
        """Reduce the colour to what ``mode`` can show."""
        if mode == ColorMode.NONE:
            return Color()
        if mode == ColorMode.COLOR16:
            return self._quantize_to_16()
        if mode == ColorMode.COLOR256:
            return self._quantize_to_256()
        return self

    def _quantize_to_16(self) -> Color:
        if self.a < 128:
            return Color()
        key = (
            (0b100 if is_color_intensity_high(self.r) else 0)
            | (0b010 if is_color_intensity_high(self.g) else 0)
            | (0b001 if is_color_intensity_high(self.b) else 0)
        )
        return _BASIC_COLORS[key]

    def _quantize_to_256(self) -> Color:
        if self.a < 128:
            return Color()

        def level(v: int) -> int:
            return _to_byte((v * 5 / 255) * 255 / 5)

        return Color(level(self.r), level(self.g), level(self.b), 255)

    def to_linear_rgb(self, gamma: float) -> Color:
        """Convert from gamma-encoded to linear values."""
        if gamma == 1.0:
            return self

        def convert(v: int) -> int:
            return _to_byte(_pow(v / 255.0, gamma) * 255.0, rounded=True)

        return Color(convert(self.r), convert(self.g), convert(self.b), self.a)

    def from_linear_rgb(self, gamma: float) -> Color:
        """Convert from linear to gamma-encoded values."""
        if gamma == 1.0:
            return self
        exponent = _inverse(gamma)

        def convert(v: int) -> int:
            return _to_byte(_pow(v / 255.0, exponent) * 255.0, rounded=True)

        return Color(convert(self.r), convert(self.g), convert(self.b), self.a)

    def convert_to_profile(self, source: _GammaProfile, target: _GammaProfile) -> Color:
        """Re-encode the colour from one profile's gamma to another's."""
        if source == target:
            return self
        return self.to_linear_rgb(source.gamma).from_linear_rgb(target.gamma)


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Convert RGB bytes to hue (degrees), saturation and lightness."""
    fr, fg, fb = r / 255.0, g / 255.0, b / 255.0
    hi = max(fr, fg, fb)
    lo = min(fr, fg, fb)
    l = (hi + lo) / 2.0
    if hi == lo:
        return 0.0, 0.0, l

    d = hi - lo
    s = d / (2.0 - hi - lo) if l > 0.5 else d / (hi + lo)

    if hi == fr:
        h = (fg - fb) / d
        if fg < fb:
            h += 6
    elif hi == fg:
        h = (fb - fr) / d + 2
    else:
        h = (fr - fg) / d + 4
    return h * 60, s, l


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """Convert hue (degrees), saturation and lightness to RGB bytes."""
    if s == 0:
        v = _to_byte(l * 255, rounded=True)
        return v, v, v

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    hue = h / 360

    def channel(t: float) -> float:
        if t < 0:
            t += 1
        if t > 1:
            t -= 1
        if t < 1.0 / 6.0:
            return p + (q - p) * 6 * t
        if t < 1.0 / 2.0:
            return q
        if t < 2.0 / 3.0:
            return p + (q - p) * (2.0 / 3.0 - t) * 6
        return p

    return (
        _to_byte(channel(hue + 1.0 / 3.0) * 255),
        _to_byte(channel(hue) * 255),
        _to_byte(channel(hue - 1.0 / 3.0) * 255),
    )


def color_distance(c1: Color, c2: Color) -> float:
    """Euclidean distance between two colours in RGB space."""
    dr = c1.r - c2.r
    dg = c1.g - c2.g
    db = c1.b - c2.b
    return math.sqrt(dr * dr + dg * dg + db * db)


RED = Color(255, 0, 0, 255)
GREEN = Color(0, 255, 0, 255)
BLUE = Color(0, 0, 255, 255)
YELLOW = Color(255, 255, 0, 255)
CYAN = Color(0, 255, 255, 255)
MAGENTA = Color(255, 0, 255, 255)
BLACK = Color(0, 0, 0, 255)
WHITE = Color(255, 255, 255, 255)
GRAY = Color(128, 128, 128, 255)
ORANGE = Color(255, 165, 0, 255)
PURPLE = Color(128, 0, 128, 255)
BROWN = Color(165, 42, 42, 255)
PINK = Color(255, 192, 203, 255)
SILVER = Color(192, 192, 192, 255)
LIGHT_GRAY = Color(211, 211, 211, 255)
DARK_GRAY = Color(64, 64, 64, 255)
NAVY = Color(0, 0, 128, 255)
TEAL = Color(0, 128, 128, 255)
MAROON = Color(128, 0, 0, 255)
OLIVE = Color(128, 128, 0, 255)
PRIMARY = Color(33, 150, 243, 255)
SUCCESS = Color(76, 175, 80, 255)
WARNING = Color(255, 152, 0, 255)
ERROR = Color(244, 67, 54, 255)
INFO = Color(3, 169, 244, 255)
TRANSPARENT = Color(0, 0, 0, 0)
DARK_RED = Color(139, 0, 0, 255)
INDIAN_RED = Color(205, 92, 92, 255)
CRIMSON = Color(220, 20, 60, 255)
FOREST_GREEN = Color(34, 139, 34, 255)
LIME_GREEN = Color(50, 205, 50, 255)
SEA_GREEN = Color(46, 139, 87, 255)
ROYAL_BLUE = Color(65, 105, 225, 255)
STEEL_BLUE = Color(70, 130, 180, 255)
DEEP_SKY_BLUE = Color(0, 191, 255, 255)
GOLD = Color(255, 215, 0, 255)
GOLDENROD = Color(218, 165, 32, 255)
KHAKI = Color(240, 230, 140, 255)
VIOLET = Color(238, 130, 238, 255)
ORCHID = Color(218, 112, 214, 255)
PLUM = Color(221, 160, 221, 255)
SADDLE_BROWN = Color(139, 69, 19, 255)
SIENNA = Color(160, 82, 45, 255)
PERU = Color(205, 133, 63, 255)

_BASIC_COLORS = {
    0b000: BLACK,
    0b001: BLUE,
    0b010: GREEN,
    0b011: CYAN,
    0b100: RED,
    0b101: MAGENTA,
    0b110: YELLOW,
    0b111: WHITE,
}