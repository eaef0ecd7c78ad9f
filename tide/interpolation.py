"""Interpolation between colours."""

from __future__ import annotations

from tide.color import Color


def _channel(a: int, b: int, t: float) -> int:
    # Channel arithmetic wraps like unsigned bytes.
    return int(a + t * ((b - a) & 0xFF)) & 0xFF


def lerp(c1: Color, c2: Color, t: float) -> Color:
    """Linearly interpolate from ``c1`` to ``c2``; ``t`` is clamped to [0, 1]."""
    t = max(0.0, min(1.0, t))
    return Color(
        _channel(c1.r, c2.r, t),
        _channel(c1.g, c2.g, t),
        _channel(c1.b, c2.b, t),
        _channel(c1.a, c2.a, t),
    )


def gradient(start: Color, end: Color, steps: int) -> list[Color]:
    """Return ``steps`` colours evenly spaced from ``start`` to ``end``."""
    if steps < 2:
        return [start]
    return [lerp(start, end, i / (steps - 1)) for i in range(steps)]


def mix(c1: Color, c2: Color, weight: float) -> Color:
    """Blend two colours; ``weight`` 0 gives ``c1``, 1 gives ``c2``."""
    return lerp(c1, c2, weight)