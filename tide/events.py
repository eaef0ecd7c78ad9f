"""Input events delivered by the terminal."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Union

from tide.geometry import Point
from tide.screen import ButtonMask, Key, ModMask


@dataclass(frozen=True)
class KeyEvent:
    """A key press, with the character it produced and the modifiers held."""

    key: Key
    rune: str = ""
    modifiers: ModMask = ModMask.NONE
    when: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class MouseEvent:
    """A mouse button change or movement at a screen position."""

    buttons: ButtonMask
    position: Point = Point()
    when: datetime = field(default_factory=datetime.now)


Event = Union[KeyEvent, MouseEvent]