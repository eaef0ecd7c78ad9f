import pytest

from tide.capabilities import Capabilities
from tide.color import Color, ColorMode
from tide.style import Style

FG = Color(255, 128, 64)
BG = Color(64, 128, 255)
FULL = Style(FG, BG, bold=True, italic=True, underline=True, strike_through=True)


@pytest.mark.parametrize(
    "caps, want",
    [
        (
            Capabilities(ColorMode.TRUE_COLOR, True, True, True, True),
            Style(FG, BG, True, True, True, True),
        ),
        (
            Capabilities(ColorMode.COLOR256, True, True, True, True),
            Style(
                FG.quantize_to(ColorMode.COLOR256),
                BG.quantize_to(ColorMode.COLOR256),
                True,
                True,
                True,
                True,
            ),
        ),
        (
            Capabilities(ColorMode.TRUE_COLOR, False, False, False, False),
            Style(FG, BG, False, False, False, False),
        ),
        (
            Capabilities(
                ColorMode.COLOR256,
                supports_italic=True,
                supports_bold=False,
                supports_underline=True,
                supports_strikethrough=False,
            ),
            Style(
                FG.quantize_to(ColorMode.COLOR256),
                BG.quantize_to(ColorMode.COLOR256),
                bold=False,
                italic=True,
                underline=True,
                strike_through=False,
            ),
        ),
    ],
    ids=["no restrictions", "limited color", "no style support", "mixed"],
)
def test_adapt_style(caps, want):
    assert FULL.adapt_style(caps) == want


def test_adapt_style_leaves_original_untouched():
    FULL.adapt_style(Capabilities())
    assert FULL.bold and FULL.italic and FULL.underline and FULL.strike_through
    assert FULL.foreground_color == FG


def test_adapt_style_no_color_clears_colors():
    opaque = Style(Color(255, 0, 0, 255), Color(0, 0, 255, 255))
    adapted = opaque.adapt_style(Capabilities(ColorMode.NONE))
    assert adapted.foreground_color == Color()
    assert adapted.background_color == Color()