#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

from collections.abc import Sequence

from rich import box
from rich.table import Table

from .state import THEME, UIContext, get_context

console = get_context().console
console_err = get_context().console_err


def configure_ui(*, no_color: bool, context: UIContext | None = None) -> None:
    (context or get_context()).set_color(not no_color)


def build_kv_table(rows: Sequence[tuple[str, str]], *, title: str | None = None) -> Table:
    """Two-column summary table; values may carry theme markup."""
    table = Table(title=title, title_style="title", show_header=False, box=box.SIMPLE)
    table.add_column("Field", style="muted", no_wrap=True)
    table.add_column("Value")
    for key, value in rows:
        table.add_row(key, value)
    return table


__all__ = [
    "THEME",
    "build_kv_table",
    "configure_ui",
    "console",
    "console_err",
]
