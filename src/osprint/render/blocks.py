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

from ..core.errors import StructuralInputError
from .cursor import Cursor
from .geometry import FOOTER_OFFSET_MM, SECTION_SPACING_MM, font_line_height
from .style import RenderContext
from .types import (
    BLACK,
    WHITE,
    ContentBlock,
    DrawOp,
    FieldRow,
    Footer,
    Heading,
    LineOp,
    Paragraph,
    RectOp,
    SectionTitle,
    SignaturePair,
    Spacer,
    TextBlock,
    TextOp,
)

# Heading
HEADING_SUBTITLE_OFFSET_MM = 10.0
HEADING_NUMBER_OFFSET_MM = 15.0
HEADING_RULE_OFFSET_MM = 25.0
HEADING_RULE_WIDTH_MM = 1.0

# Section title bar
TITLE_BAR_HEIGHT_MM = 8.0
TITLE_GAP_MM = 4.0
TITLE_TEXT_INSET_MM = 3.0
TITLE_TEXT_BASELINE_MM = 6.0

# Field rows
FIELD_ROW_GAP_MM = 2.0
LABEL_PADDING_MM = 5.0
VALUE_PADDING_MM = 5.0
# Labels never take more than this share of the usable width
MAX_LABEL_SHARE = 0.5
UNDERLINE_OFFSET_MM = 1.0
PLACEHOLDER = "_" * 30

# Text boxes
TEXT_INSET_X_MM = 3.0
TEXT_INSET_TOP_MM = 8.0
TEXT_INSET_BOTTOM_MM = 3.0

# Signatures
SIGNATURE_TITLE_GAP_MM = 30.0
SIGNATURE_WIDTH_MM = 80.0
SIGNATURE_INSET_MM = 10.0
SIGNATURE_CAPTION_OFFSET_MM = 8.0
SIGNATURE_DATE_OFFSET_MM = 25.0
SIGNATURE_TAIL_MM = 5.0


def block_height(block: ContentBlock, ctx: RenderContext) -> float:
    """Vertical space a block needs before it may be drawn at the cursor."""
    if isinstance(block, Heading):
        return HEADING_RULE_OFFSET_MM + SECTION_SPACING_MM
    if isinstance(block, SectionTitle):
        return TITLE_BAR_HEIGHT_MM + TITLE_GAP_MM
    if isinstance(block, FieldRow):
        return ctx.geometry.line_height + FIELD_ROW_GAP_MM
    if isinstance(block, TextBlock):
        if block.box_height <= 0:
            raise StructuralInputError("text box height must be positive")
        return block.box_height + SECTION_SPACING_MM
    if isinstance(block, SignaturePair):
        title_gap = SIGNATURE_TITLE_GAP_MM if block.title else 0.0
        return title_gap + SIGNATURE_DATE_OFFSET_MM + SIGNATURE_TAIL_MM
    if isinstance(block, Paragraph):
        return len(block.lines) * _paragraph_line_height(ctx)
    if isinstance(block, Spacer):
        if block.height < 0:
            raise StructuralInputError("spacer height cannot be negative")
        return 0.0
    if isinstance(block, Footer):
        return 0.0
    raise TypeError(f"unsupported block: {type(block).__name__}")


def render_block(
    block: ContentBlock,
    cursor: Cursor,
    ctx: RenderContext,
) -> tuple[list[DrawOp], Cursor]:
    if isinstance(block, Heading):
        return _render_heading(block, cursor, ctx)
    if isinstance(block, SectionTitle):
        return _render_section_title(block, cursor, ctx)
    if isinstance(block, FieldRow):
        return _render_field_row(block, cursor, ctx)
    if isinstance(block, TextBlock):
        return _render_text_block(block, cursor, ctx)
    if isinstance(block, SignaturePair):
        return _render_signature_pair(block, cursor, ctx)
    if isinstance(block, Paragraph):
        return _render_paragraph(block, cursor, ctx)
    if isinstance(block, Spacer):
        return [], cursor.advance(min(block.height, cursor.remaining_height()))
    if isinstance(block, Footer):
        raise TypeError("footers are pinned to the page bottom; use footer_ops")
    raise TypeError(f"unsupported block: {type(block).__name__}")


def footer_ops(block: Footer, ctx: RenderContext) -> list[DrawOp]:
    geometry = ctx.geometry
    style = ctx.style
    font = style.font(style.footer_size)
    text = ctx.metrics.truncate_to_width(block.text, font, geometry.usable_width)
    if not text:
        return []
    return [
        TextOp(
            x=geometry.center_x,
            y=geometry.height - FOOTER_OFFSET_MM,
            text=text,
            font=font,
            color=style.muted,
            align="center",
        )
    ]


def text_block_lines(block: TextBlock, ctx: RenderContext) -> list[str]:
    font = ctx.style.font(ctx.style.text_size)
    width = ctx.geometry.usable_width - 2 * TEXT_INSET_X_MM
    return ctx.metrics.wrap(block.text, font, width)


def text_block_content_height(block: TextBlock, ctx: RenderContext) -> float:
    """Box height the wrapped text would need to show every line."""
    lines = text_block_lines(block, ctx)
    if not lines:
        return 0.0
    line_h = font_line_height(ctx.style.text_size)
    return TEXT_INSET_TOP_MM + (len(lines) - 1) * line_h + TEXT_INSET_BOTTOM_MM


def _render_heading(
    block: Heading,
    cursor: Cursor,
    ctx: RenderContext,
) -> tuple[list[DrawOp], Cursor]:
    geometry = ctx.geometry
    style = ctx.style
    y = cursor.y
    metrics = ctx.metrics
    title_font = style.font(style.title_size, bold=True)
    subtitle_font = style.font(style.subtitle_size)
    number_font = style.font(style.number_size, bold=True)
    x = geometry.center_x
    ops: list[DrawOp] = []
    if block.title:
        ops.append(
            TextOp(
                x=x,
                y=y,
                text=metrics.displayable(block.title, title_font),
                font=title_font,
                color=style.primary,
                align="center",
            )
        )
    if block.subtitle:
        ops.append(
            TextOp(
                x=x,
                y=y + HEADING_SUBTITLE_OFFSET_MM,
                text=metrics.displayable(block.subtitle, subtitle_font),
                font=subtitle_font,
                color=style.muted,
                align="center",
            )
        )
    if block.number:
        ops.append(
            TextOp(
                x=x,
                y=y + HEADING_NUMBER_OFFSET_MM,
                text=metrics.displayable(block.number, number_font),
                font=number_font,
                color=style.primary,
                align="center",
            )
        )
    rule_y = y + HEADING_RULE_OFFSET_MM
    ops.append(
        LineOp(
            x1=geometry.margin,
            y1=rule_y,
            x2=geometry.width - geometry.margin,
            y2=rule_y,
            color=style.primary,
            width=HEADING_RULE_WIDTH_MM,
        )
    )
    return ops, cursor.advance(block_height(block, ctx))


def _render_section_title(
    block: SectionTitle,
    cursor: Cursor,
    ctx: RenderContext,
) -> tuple[list[DrawOp], Cursor]:
    geometry = ctx.geometry
    style = ctx.style
    font = style.font(style.section_size, bold=True)
    text = ctx.metrics.truncate_to_width(
        block.text, font, geometry.usable_width - 2 * TITLE_TEXT_INSET_MM
    )
    ops: list[DrawOp] = [
        RectOp(
            x=geometry.margin,
            y=cursor.y,
            width=geometry.usable_width,
            height=TITLE_BAR_HEIGHT_MM,
            style="F",
            fill=style.primary,
        ),
    ]
    if text:
        ops.append(
            TextOp(
                x=geometry.margin + TITLE_TEXT_INSET_MM,
                y=cursor.y + TITLE_TEXT_BASELINE_MM,
                text=text,
                font=font,
                color=WHITE,
            )
        )
    return ops, cursor.advance(block_height(block, ctx))


def _render_field_row(
    block: FieldRow,
    cursor: Cursor,
    ctx: RenderContext,
) -> tuple[list[DrawOp], Cursor]:
    geometry = ctx.geometry
    style = ctx.style
    metrics = ctx.metrics
    label_font = style.font(style.field_size, bold=True)
    value_font = style.font(style.field_size)
    y = cursor.y

    label = metrics.truncate_to_width(
        block.label, label_font, geometry.usable_width * MAX_LABEL_SHARE - LABEL_PADDING_MM
    )
    label_width = metrics.measure(label, label_font) + LABEL_PADDING_MM
    value_x = geometry.margin + label_width
    value_width = geometry.usable_width - label_width
    display = block.value or PLACEHOLDER
    display = metrics.truncate_to_width(display, value_font, value_width - VALUE_PADDING_MM)

    ops: list[DrawOp] = [
        TextOp(x=geometry.margin, y=y, text=label, font=label_font, color=style.label),
        TextOp(x=value_x, y=y, text=display, font=value_font, color=BLACK),
        LineOp(
            x1=value_x,
            y1=y + UNDERLINE_OFFSET_MM,
            x2=value_x + value_width,
            y2=y + UNDERLINE_OFFSET_MM,
            color=style.rule,
        ),
    ]
    return ops, cursor.advance(block_height(block, ctx))


def _render_text_block(
    block: TextBlock,
    cursor: Cursor,
    ctx: RenderContext,
) -> tuple[list[DrawOp], Cursor]:
    geometry = ctx.geometry
    style = ctx.style
    font = style.font(style.text_size)
    line_h = font_line_height(style.text_size)
    top = cursor.y
    box_bottom = top + block.box_height

    ops: list[DrawOp] = [
        RectOp(
            x=geometry.margin,
            y=top,
            width=geometry.usable_width,
            height=block.box_height,
            style="FD",
            fill=style.box_fill,
            stroke=style.rule,
        ),
    ]
    # Lines past the box bottom are clipped, not moved to another page.
    for idx, line in enumerate(text_block_lines(block, ctx)):
        baseline = top + TEXT_INSET_TOP_MM + idx * line_h
        if baseline + TEXT_INSET_BOTTOM_MM > box_bottom:
            break
        if line:
            ops.append(
                TextOp(x=geometry.margin + TEXT_INSET_X_MM, y=baseline, text=line, font=font)
            )
    return ops, cursor.advance(block_height(block, ctx))


def _render_signature_pair(
    block: SignaturePair,
    cursor: Cursor,
    ctx: RenderContext,
) -> tuple[list[DrawOp], Cursor]:
    geometry = ctx.geometry
    style = ctx.style
    caption_font = style.font(style.caption_size)
    title_font = style.font(style.section_size, bold=True)
    ops: list[DrawOp] = []
    y = cursor.y
    if block.title:
        ops.append(
            TextOp(
                x=geometry.center_x,
                y=y,
                text=ctx.metrics.displayable(block.title, title_font),
                font=title_font,
                color=style.primary,
                align="center",
            )
        )
        y += SIGNATURE_TITLE_GAP_MM

    width = min(SIGNATURE_WIDTH_MM, (geometry.usable_width - 3 * SIGNATURE_INSET_MM) / 2)
    if block.right_label:
        slots = [
            (geometry.margin + SIGNATURE_INSET_MM, block.left_label),
            (geometry.width - geometry.margin - width - SIGNATURE_INSET_MM, block.right_label),
        ]
    else:
        slots = [(geometry.center_x - width / 2, block.left_label)]

    for x, label in slots:
        ops.append(LineOp(x1=x, y1=y, x2=x + width, y2=y, color=BLACK))
        caption = ctx.metrics.truncate_to_width(label, caption_font, width)
        if caption:
            ops.append(
                TextOp(
                    x=x + width / 2,
                    y=y + SIGNATURE_CAPTION_OFFSET_MM,
                    text=caption,
                    font=caption_font,
                    color=style.muted,
                    align="center",
                )
            )

    if block.date_text:
        ops.append(
            TextOp(
                x=geometry.center_x,
                y=y + SIGNATURE_DATE_OFFSET_MM,
                text=ctx.metrics.displayable(block.date_text, caption_font),
                font=caption_font,
                color=BLACK,
                align="center",
            )
        )
    return ops, cursor.advance(block_height(block, ctx))


def _render_paragraph(
    block: Paragraph,
    cursor: Cursor,
    ctx: RenderContext,
) -> tuple[list[DrawOp], Cursor]:
    geometry = ctx.geometry
    style = ctx.style
    font = style.font(style.paragraph_size)
    line_h = _paragraph_line_height(ctx)
    ops: list[DrawOp] = []
    for idx, line in enumerate(block.lines):
        text = ctx.metrics.truncate_to_width(line, font, geometry.usable_width)
        if not text:
            continue
        ops.append(
            TextOp(
                x=geometry.center_x,
                y=cursor.y + idx * line_h,
                text=text,
                font=font,
                color=style.muted,
                align="center",
            )
        )
    return ops, cursor.advance(block_height(block, ctx))


def _paragraph_line_height(ctx: RenderContext) -> float:
    return font_line_height(ctx.style.paragraph_size, multiplier=1.5)
