"""Detection of terminal features from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from tide.color import ColorMode

_URL_CAPABLE_TERMS = (
    "iterm",
    "iterm2",
    "wezterm",
    "konsole",
    "vte",
    "terminator",
    "gnome",
    "gnome-256",
    "gnome-direct",
)

_NO_TITLE_TERMS = frozenset(
    {"dumb", "cons25", "emacs", "linux", "sun", "vt52", "vt100", "ansi"}
)


@dataclass(frozen=True)
class TerminalCapabilities:
    """What a terminal supports."""

    color_mode: ColorMode = ColorMode.NONE
    unicode: bool = False
    italic: bool = False
    strikethrough: bool = False
    mouse: bool = False
    modified_keys: bool = False
    bracketed_paste: bool = False
    urls: bool = False
    title: bool = False


def detect_color_mode(term: str, color_term: str) -> ColorMode:
    """Work out the colour support from TERM and COLORTERM values."""
    if color_term in ("truecolor", "24bit"):
        return ColorMode.TRUE_COLOR
    if "256color" in term:
        return ColorMode.COLOR256
    if "color" in term or "ansi" in term:
        return ColorMode.COLOR16
    return ColorMode.NONE


def detect_url_support(term: str) -> bool:
    """Return True if the terminal is known to show hyperlinks."""
    return any(name in term for name in _URL_CAPABLE_TERMS)


def detect_title_support(term: str) -> bool:
    """Return True unless the terminal is known not to have a window title."""
    return term not in _NO_TITLE_TERMS


def detect_capabilities(env: Mapping[str, str] | None = None) -> TerminalCapabilities:
    """Detect the terminal's capabilities from ``env`` (the process environment by default)."""
    if env is None:
        env = os.environ
    term = env.get("TERM", "").lower()
    color_term = env.get("COLORTERM", "").lower()

    is_xterm = "xterm" in term
    is_tmux = "tmux" in term
    is_screen = "screen" in term

    return TerminalCapabilities(
        color_mode=detect_color_mode(term, color_term),
        unicode="ascii" not in term and term != "dumb",
        italic=is_xterm or is_tmux,
        strikethrough=is_xterm or is_tmux,
        mouse=is_xterm or is_tmux or is_screen,
        modified_keys=is_xterm or is_tmux or is_screen,
        bracketed_paste=is_xterm or is_tmux,
        urls=detect_url_support(term),
        title=detect_title_support(term),
    )