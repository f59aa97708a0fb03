from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from rich.console import Console
from rich.theme import Theme

THEME = Theme(
    {
        "title": "bold blue",
        "number": "bold",
        "path": "cyan",
        "muted": "dim",
        "warning": "yellow",
        "error": "red",
    }
)


def _stream_is_tty(stream: TextIO | None) -> bool:
    if stream is None:
        return False
    try:
        return bool(stream.isatty())
    except (OSError, ValueError):
        return False


def _build_console(*, stderr: bool) -> Console:
    # The real process stream decides; sys.stdout may be swapped by test runners.
    stream = sys.__stderr__ if stderr else sys.__stdout__
    return Console(stderr=stderr, theme=THEME, force_terminal=_stream_is_tty(stream) or None)


@dataclass
class UIContext:
    console: Console = field(default_factory=lambda: _build_console(stderr=False))
    console_err: Console = field(default_factory=lambda: _build_console(stderr=True))

    def set_color(self, enabled: bool) -> None:
        for target in (self.console, self.console_err):
            target.no_color = not enabled


_CONTEXT = UIContext()


def get_context() -> UIContext:
    return _CONTEXT
