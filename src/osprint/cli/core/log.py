from __future__ import annotations

from rich.markup import escape

from ..api import console_err


def _warn(message: str, *, quiet: bool) -> None:
    if quiet:
        return
    console_err.print(f"[warning]Warning:[/warning] {escape(message)}")
