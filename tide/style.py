"""Backend-independent visual style of text."""

from __future__ import annotations

from dataclasses import dataclass, replace

from tide.capabilities import Capabilities
from tide.color import Color, ColorMode


@dataclass(frozen=True)
class Style:
    """Colours and text attributes."""

    foreground_color: Color = Color()
    background_color: Color = Color()
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strike_through: bool = False

    def adapt_style(self, caps: Capabilities) -> Style:
        """Return the style reduced to what ``caps`` supports."""
        adapted = self
        if caps.color_mode < ColorMode.TRUE_COLOR:
            mode = ColorMode(caps.color_mode)
            adapted = replace(
                adapted,
                foreground_color=adapted.foreground_color.quantize_to(mode),
                background_color=adapted.background_color.quantize_to(mode),
            )
        return replace(
            adapted,
            italic=adapted.italic and caps.supports_italic,
            bold=adapted.bold and caps.supports_bold,
            underline=adapted.underline and caps.supports_underline,
            strike_through=adapted.strike_through and caps.supports_strikethrough,
        )