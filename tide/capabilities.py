"""Backend-independent description of what a renderer can do."""

from __future__ import annotations

from dataclasses import dataclass

from tide.color import ColorMode


@dataclass(frozen=True)
class Capabilities:
    """Colour, text styling and input support of a rendering backend."""

    color_mode: ColorMode = ColorMode.NONE
    supports_italic: bool = False
    supports_bold: bool = False
    supports_underline: bool = False
    supports_strikethrough: bool = False
    supports_mouse: bool = False
    supports_keyboard: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "color_mode", ColorMode(self.color_mode))