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

from .compose import compose_document
from .cursor import Cursor
from .geometry import PageGeometry, paper_geometry
from .html_render import render_document_to_html, render_document_to_html_file
from .identifiers import build_filename, format_os_number
from .pdf_render import render_document_to_pdf, render_document_to_pdf_bytes
from .style import DocumentStyle, RenderContext
from .text import FontSpec, FpdfTextMetrics, MonospaceTextMetrics, TextMetrics, build_metrics
from .types import (
    ContentBlock,
    FieldRow,
    Footer,
    Heading,
    LineOp,
    Page,
    Paragraph,
    RectOp,
    RenderedDocument,
    SectionTitle,
    SignaturePair,
    Spacer,
    TextBlock,
    TextOp,
)

__all__ = [
    "ContentBlock",
    "Cursor",
    "DocumentStyle",
    "FieldRow",
    "FontSpec",
    "Footer",
    "FpdfTextMetrics",
    "Heading",
    "LineOp",
    "MonospaceTextMetrics",
    "Page",
    "PageGeometry",
    "Paragraph",
    "RectOp",
    "RenderContext",
    "RenderedDocument",
    "SectionTitle",
    "SignaturePair",
    "Spacer",
    "TextBlock",
    "TextMetrics",
    "TextOp",
    "build_filename",
    "build_metrics",
    "compose_document",
    "format_os_number",
    "paper_geometry",
    "render_document_to_html",
    "render_document_to_html_file",
    "render_document_to_pdf",
    "render_document_to_pdf_bytes",
]
