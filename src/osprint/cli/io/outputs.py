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

from ...config import OutputDefaults
from ...render.html_render import render_document_to_html_file
from ...render.pdf_render import render_document_to_pdf
from ...render.types import RenderedDocument
from ..api import console_err


def resolve_output_path(
    output: Path | None,
    *,
    defaults: OutputDefaults,
    filename: str,
    output_format: str,
) -> Path:
    if output is not None:
        return output.expanduser()
    name = Path(filename).with_suffix(f".{output_format}").name
    base = Path(defaults.directory).expanduser() if defaults.directory else Path.cwd()
    return base / name


def write_document(
    document: RenderedDocument,
    path: Path,
    *,
    output_format: str,
    title: str | None = None,
    quiet: bool,
) -> Path:
    if output_format == "pdf":
        written = render_document_to_pdf(document, path)
    elif output_format == "html":
        written = render_document_to_html_file(document, path, title=title)
    else:
        raise ValueError(f"unsupported output format: {output_format}")
    if not quiet:
        console_err.print(f"[dim]- wrote {written}[/dim]")
    return written
