"""Colour profiles: colour space, gamma and white point."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ColorSpace(IntEnum):
    """Colour spaces a profile can describe."""

    SRGB = 0
    LINEAR_RGB = 1
    DISPLAY_P3 = 2


_D65 = (0.9505, 1.0, 1.0890)


@dataclass(frozen=True)
class Profile:
    """A colour space with its gamma and white point."""

    space: ColorSpace
    gamma: float
    white_point: tuple[float, float, float] = _D65


DEFAULT_PROFILE = Profile(ColorSpace.SRGB, 2.2)
LINEAR_PROFILE = Profile(ColorSpace.LINEAR_RGB, 1.0)
DISPLAY_P3_PROFILE = Profile(ColorSpace.DISPLAY_P3, 2.2)