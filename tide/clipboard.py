"""System clipboard access through platform utilities, with an in-memory fallback."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


class ClipboardError(Exception):
    """The clipboard could not be read or written."""


@runtime_checkable
class ClipboardProvider(Protocol):
    """Something that can read and write clipboard text."""

    def get(self) -> str:
        """Return the clipboard content."""
        ...

    def set(self, content: str) -> None:
        """Replace the clipboard content."""
        ...


_READ_COMMANDS: dict[str, tuple[tuple[str, ...], ...]] = {
    "darwin": (("pbpaste",),),
    "linux": (
        ("xclip", "-selection", "clipboard", "-o"),
        ("xsel", "--clipboard", "--output"),
        ("wl-paste",),
    ),
    "windows": (("powershell.exe", "-command", "Get-Clipboard"),),
}

_WRITE_COMMANDS: dict[str, tuple[tuple[str, ...], ...]] = {
    "darwin": (("pbcopy",),),
    "linux": (
        ("xclip", "-selection", "clipboard"),
        ("xsel", "--clipboard", "--input"),
        ("wl-copy",),
    ),
    "windows": (("powershell.exe", "-command", "Set-Clipboard"),),
}


def _os_name(platform: str) -> str:
    if platform.startswith("linux"):
        return "linux"
    if platform == "win32":
        return "windows"
    return platform


def _run_command(args: Sequence[str]) -> str:
    try:
        result = subprocess.run(
            list(args),
            capture_output=True,
            check=True,
            encoding="utf-8",
            errors="replace",
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        raise ClipboardError(f"{args[0]}: {exc}") from exc
    return (result.stdout or "").strip()


def _write_command(content: str, args: Sequence[str]) -> None:
    try:
        subprocess.run(
            list(args),
            input=content,
            check=True,
            encoding="utf-8",
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        raise ClipboardError(f"{args[0]}: {exc}") from exc


@dataclass
class SystemClipboard:
    """The operating system clipboard, reached through command-line utilities.

    ``platform`` defaults to the running platform.
    """

    platform: str | None = None

    def _commands(self, table: dict[str, tuple[tuple[str, ...], ...]]) -> tuple[tuple[str, ...], ...]:
        name = _os_name(self.platform or sys.platform)
        commands = table.get(name)
        if commands is None:
            raise ClipboardError(f"unsupported platform: {name}")
        return commands

    def get(self) -> str:
        """Return the clipboard text; raises ClipboardError on failure."""
        commands = self._commands(_READ_COMMANDS)
        if len(commands) == 1:
            return _run_command(commands[0])
        for args in commands:
            try:
                return _run_command(args)
            except ClipboardError:
                continue
        raise ClipboardError("no clipboard utility found")

    def set(self, content: str) -> None:
        """Replace the clipboard text; raises ClipboardError on failure."""
        commands = self._commands(_WRITE_COMMANDS)
        if len(commands) == 1:
            _write_command(content, commands[0])
            return
        for args in commands:
            try:
                _write_command(content, args)
                return
            except ClipboardError:
                continue
        raise ClipboardError("no clipboard utility found")


@dataclass
class FallbackClipboard:
    """An in-memory clipboard for when the system one is unavailable."""

    content: str = ""

    def get(self) -> str:
        """Return the stored text."""
        return self.content

    def set(self, content: str) -> None:
        """Store ``content``."""
        self.content = content