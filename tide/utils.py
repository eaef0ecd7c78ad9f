"""Small numeric and sequence helpers shared across the package."""

from __future__ import annotations

from collections.abc import Sequence


def equal_runes(a: Sequence[str] | None, b: Sequence[str] | None) -> bool:
    """Return True when both character sequences hold the same items in order.

    ``None`` is treated as an empty sequence.
    """
    return list(a or ()) == list(b or ())


def clamp(f: float, low: float, high: float) -> float:
    """Clamp ``f`` to the closed range ``[low, high]``."""
    if f < low:
        return low
    if f > high:
        return high
    return f


def clamp_int(i: int, low: int, high: int) -> int:
    """Clamp ``i`` to ``[low, high]``; reversed bounds are swapped first."""
    if low > high:
        low, high = high, low
    if i < low:
        return low
    if i > high:
        return high
    return i


def is_color_intensity_high(component: int) -> bool:
    """Return True if a colour component is above mid-range."""
    return component > 127


def color_component_to_basic(component: int) -> int:
    """Reduce a colour component to its basic form, 0 or 255."""
    if is_color_intensity_high(component):
        return 255
    return 0