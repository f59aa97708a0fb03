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

import random
from collections.abc import Iterable
from datetime import datetime

from ..core.errors import StructuralInputError
from .blocks import block_height, footer_ops, render_block
from .cursor import Cursor
from .identifiers import build_filename, format_os_number
from .pages import PageSequence
from .style import RenderContext
from .types import ContentBlock, Footer, RenderedDocument

__all__ = ["compose_document"]


def compose_document(
    blocks: Iterable[ContentBlock],
    *,
    ctx: RenderContext | None = None,
    number: str | None = None,
    filename: str | None = None,
    filename_prefix: str = "OS",
    now: datetime | None = None,
    rng: random.Random | None = None,
) -> RenderedDocument:
    """Lay out ``blocks`` top to bottom and return the finished pages.

    Blocks are placed in the order given. Before each block the cursor is
    checked against the block's height; a block that does not fit starts a
    new page. Footer blocks do not take part in the flow and are drawn on
    every page once all other blocks are placed.
    """
    ctx = ctx or RenderContext()
    geometry = ctx.geometry
    ctx.check_fonts()

    planned = _plan_blocks(blocks, ctx)
    sequence = PageSequence(geometry)
    cursor = Cursor.start(geometry)
    footers: list[Footer] = []

    for block, height in planned:
        if isinstance(block, Footer):
            footers.append(block)
            continue
        cursor = sequence.ensure_space(cursor, height)
        ops, next_cursor = render_block(block, cursor, ctx)
        sequence.draw(cursor, ops)
        cursor = next_cursor

    for footer in footers:
        sequence.draw_on_every_page(footer_ops(footer, ctx))

    now = now or datetime.now()
    number = number or format_os_number(now, rng)
    filename = filename or build_filename(filename_prefix, number, now)
    return RenderedDocument(
        geometry=geometry,
        pages=sequence.finish(),
        number=number,
        filename=filename,
    )


def _plan_blocks(
    blocks: Iterable[ContentBlock],
    ctx: RenderContext,
) -> list[tuple[ContentBlock, float]]:
    usable_height = ctx.geometry.usable_height
    planned: list[tuple[ContentBlock, float]] = []
    for block in blocks:
        height = block_height(block, ctx)
        if height > usable_height:
            raise StructuralInputError(
                f"{type(block).__name__} needs {height:.1f}mm but a page only has "
                f"{usable_height:.1f}mm"
            )
        planned.append((block, height))
    return planned
