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

from pathlib import Path

from rich.markup import escape

from ...render.types import RenderedDocument
from ..api import build_kv_table, console


def print_document_summary(document: RenderedDocument, path: Path, *, quiet: bool) -> None:
    if quiet:
        return
    console.print(
        build_kv_table(
            [
                ("Number", f"[number]{document.number}[/number]"),
                ("Pages", str(document.page_count)),
                ("Output", f"[path]{escape(str(path))}[/path]"),
            ],
            title="Document ready",
        )
    )
