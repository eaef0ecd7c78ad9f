# tide

Building blocks for drawing in a terminal:

- `tide.color`: the `Color` RGBA type with HSL conversion (`rgb_to_hsl`, `hsl_to_rgb`), `lighten`, `darken`, `with_alpha`, quantisation to a `ColorMode` (`quantize_to`), gamma conversion (`to_linear_rgb`, `from_linear_rgb`, `convert_to_profile`), `color_distance`, and named colours such as `RED`, `GOLD` and `TRANSPARENT`.
- `tide.profile`: `Profile` and `ColorSpace`, with `DEFAULT_PROFILE`, `LINEAR_PROFILE` and `DISPLAY_P3_PROFILE`.
- `tide.interpolation`: `lerp`, `gradient` and `mix`.
- `tide.dithering`: `dither` with `DitherMethod.NONE`, `FLOYD_STEINBERG`, `ORDERED` and `BAYER`, plus `ErrorBuffer`, `nearest_color` and `ordered_dither`.
- `tide.geometry`: `Point`, `Size`, `Rect` and `new_rect`.
- `tide.capabilities` and `tide.style`: `Capabilities` describes a backend, and `Style.adapt_style` removes the attributes it cannot show and reduces colours to its colour mode.
- `tide.screen`: `SimulationScreen`, an in-memory screen with cells, a cursor, mouse flags and an event queue, together with `CellStyle`, `TermColor`, `AttrMask` and the event types `EventKey`, `EventMouse`, `EventResize` and `EventFocus`.
- `tide.buffer`: `Buffer`, a thread-safe grid of `Cell`s with a clamped cursor and a dirty flag.
- `tide.color_optimizer`: `ColorOptimizer` maps `Color`s to `TermColor`s for true colour, 256 colours or 16 colours, and caches the results.
- `tide.term_capabilities`: `detect_capabilities` reads `TERM` and `COLORTERM` and returns `TerminalCapabilities`.
- `tide.events`: `KeyEvent` and `MouseEvent`.
- `tide.clipboard`: `SystemClipboard` calls `pbcopy`/`pbpaste`, `xclip`/`xsel`/`wl-copy`/`wl-paste` or PowerShell. `FallbackClipboard` keeps the text in memory.

## Installation

```
pip install .
```

Run `pip install .[test]` to get the test dependencies, then run the tests with `pytest`.

## Colours

```python
from tide.color import Color, ColorMode, hsl_to_rgb
from tide.interpolation import gradient

indigo = Color(75, 0, 130, 255)
print(indigo.lighten(0.2))
print(Color(255, 128, 64, 255).quantize_to(ColorMode.COLOR16))
print(hsl_to_rgb(120, 1.0, 0.5))          # (0, 255, 0)

for step in gradient(Color(0, 0, 0, 255), Color(255, 255, 255, 255), 5):
    print(step)
```

## Dithering

```python
from tide.color import Color
from tide.dithering import DitherMethod, ErrorBuffer, dither
from tide.geometry import new_rect

palette = [Color(0, 0, 0, 255), Color(255, 255, 255, 255)]
grey = Color(128, 128, 128, 255)
errors = ErrorBuffer(new_rect(0, 0, 4, 4))

rows = [
    [dither(grey, DitherMethod.FLOYD_STEINBERG, x, y, palette, errors) for x in range(4)]
    for y in range(4)
]
```

## Cells, colours and the in-memory screen

```python
from tide.buffer import Buffer
from tide.color import Color, ColorMode
from tide.color_optimizer import ColorOptimizer
from tide.geometry import Size
from tide.screen import STYLE_DEFAULT, AttrMask, SimulationScreen

optimizer = ColorOptimizer(ColorMode.COLOR256)
style = (
    STYLE_DEFAULT.foreground(optimizer.get_color(Color(255, 215, 0, 255)))
    .background(optimizer.get_color(Color(0, 0, 0, 255)))
    .with_attrs(AttrMask.BOLD)
)

buffer = Buffer(Size(80, 25))
buffer.set_cell(0, 0, "e", ["\u0301"], style)

screen = SimulationScreen(80, 25)
screen.init()
for y in range(buffer.size.height):
    for x in range(buffer.size.width):
        cell = buffer.get_cell(x, y)
        if cell is not None:
            screen.set_content(x, y, cell.rune, cell.combining, cell.style)
screen.show()
print(screen.get_content(0, 0))   # ('e', ('\u0301',), style, 1)
screen.fini()
```

`SimulationScreen.post_event` queues an event and `poll_event(timeout)` returns the next one, or `None` on timeout or after `fini`.

## Capabilities and clipboard

```python
from tide.clipboard import ClipboardError, FallbackClipboard, SystemClipboard
from tide.term_capabilities import detect_capabilities

caps = detect_capabilities({"TERM": "xterm-256color"})
print(caps.color_mode, caps.mouse, caps.title)

try:
    clipboard = SystemClipboard()
    clipboard.set("hello")
except ClipboardError:
    clipboard = FallbackClipboard()
    clipboard.set("hello")
print(clipboard.get())
```

If you call `detect_capabilities()` with no argument, it reads the process environment.

## What this package does not do

The package has no terminal object that puts these pieces together. Nothing double-buffers `Buffer`s onto a screen, reads events in a background loop, handles mouse modes or an alternate screen, or runs resize, focus and suspend callbacks. It does not open or draw on a real terminal device, and it has no command-line program. You draw with `Buffer` and `SimulationScreen` yourself, as in the example above.