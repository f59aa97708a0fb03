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

from .geometry import PT_TO_MM
from .templating import PRINTABLE_TEMPLATE_PATH, render_template
from .types import Color, DrawOp, LineOp, RectOp, RenderedDocument, TextOp

_CSS_FONT_FAMILIES = {
    "helvetica": "Helvetica, Arial, sans-serif",
    "times": "'Times New Roman', Times, serif",
    "courier": "'Courier New', Courier, monospace",
}
_SVG_ANCHORS = {"left": "start", "center": "middle", "right": "end"}


def render_document_to_html(
    document: RenderedDocument,
    *,
    title: str | None = None,
    template_path: str | Path = PRINTABLE_TEMPLATE_PATH,
) -> str:
    geometry = document.geometry
    context: dict[str, object] = {
        "title": title or document.number,
        "number": document.number,
        "page_width_mm": geometry.width,
        "page_height_mm": geometry.height,
        "pages": [[_op_context(op) for op in page.ops] for page in document.pages],
    }
    return render_template(template_path, context)


def render_document_to_html_file(
    document: RenderedDocument,
    output_path: str | Path,
    *,
    title: str | None = None,
) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_document_to_html(document, title=title), encoding="utf-8")
    return output_path


def _op_context(op: DrawOp) -> dict[str, object]:
    if isinstance(op, RectOp):
        return {
            "kind": "rect",
            "x": op.x,
            "y": op.y,
            "width": op.width,
            "height": op.height,
            "fill": _css_color(op.fill) if "F" in op.style else "none",
            "stroke": _css_color(op.stroke) if "D" in op.style else "none",
            "line_width": op.line_width,
        }
    if isinstance(op, LineOp):
        return {
            "kind": "line",
            "x1": op.x1,
            "y1": op.y1,
            "x2": op.x2,
            "y2": op.y2,
            "stroke": _css_color(op.color),
            "width": op.width,
        }
    if isinstance(op, TextOp):
        return {
            "kind": "text",
            "x": op.x,
            "y": op.y,
            "text": op.text,
            "fill": _css_color(op.color),
            "font_family": _CSS_FONT_FAMILIES.get(op.font.family.lower(), op.font.family),
            "font_size": op.font.size * PT_TO_MM,
            "font_weight": "bold" if "B" in op.font.style else "normal",
            "font_style": "italic" if "I" in op.font.style else "normal",
            "anchor": _SVG_ANCHORS[op.align],
        }
    raise TypeError(f"unsupported draw op: {type(op).__name__}")


def _css_color(color: Color | None) -> str:
    if color is None:
        return "none"
    red, green, blue = color
    return f"rgb({red}, {green}, {blue})"
