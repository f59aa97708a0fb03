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
from typing import Any, cast

from fpdf import FPDF

from .types import DrawOp, LineOp, RectOp, RenderedDocument, TextOp

_PRODUCER = "osprint"


def render_document_to_pdf_bytes(document: RenderedDocument) -> bytes:
    geometry = document.geometry
    pdf = FPDF(unit="mm", format=cast(Any, (geometry.width, geometry.height)))
    pdf.set_auto_page_break(False)
    pdf.set_creator(_PRODUCER)
    pdf.set_title(document.number)
    for page in document.pages:
        pdf.add_page()
        for op in page.ops:
            _draw_op(pdf, op)
    return bytes(pdf.output())


def render_document_to_pdf(document: RenderedDocument, output_path: str | Path) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(render_document_to_pdf_bytes(document))
    return output_path


def _draw_op(pdf: FPDF, op: DrawOp) -> None:
    if isinstance(op, RectOp):
        if op.fill is not None:
            pdf.set_fill_color(*op.fill)
        if op.stroke is not None:
            pdf.set_draw_color(*op.stroke)
        if "D" in op.style:
            pdf.set_line_width(op.line_width)
        pdf.rect(op.x, op.y, op.width, op.height, style=op.style)
    elif isinstance(op, LineOp):
        pdf.set_draw_color(*op.color)
        pdf.set_line_width(op.width)
        pdf.line(op.x1, op.y1, op.x2, op.y2)
    elif isinstance(op, TextOp):
        pdf.set_font(op.font.family, style=op.font.style, size=op.font.size)
        pdf.set_text_color(*op.color)
        pdf.text(_text_x(pdf, op), op.y, op.text)
    else:
        raise TypeError(f"unsupported draw op: {type(op).__name__}")


def _text_x(pdf: FPDF, op: TextOp) -> float:
    if op.align == "left":
        return op.x
    width = pdf.get_string_width(op.text)
    if op.align == "center":
        return op.x - width / 2
    return op.x - width
