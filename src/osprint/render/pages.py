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

from collections.abc import Iterable

from .cursor import Cursor
from .geometry import PageGeometry
from .types import DrawOp, Page


class PageSequence:
    """Pages under construction plus the page-break policy."""

    def __init__(self, geometry: PageGeometry) -> None:
        self.geometry = geometry
        self._pages: list[list[DrawOp]] = [[]]

    @property
    def page_count(self) -> int:
        return len(self._pages)

    def ensure_space(self, cursor: Cursor, required_height: float) -> Cursor:
        """Return ``cursor`` if the block fits, else a cursor on a fresh page."""
        if cursor.fits(required_height):
            return cursor
        return self.new_page(cursor)

    def new_page(self, cursor: Cursor) -> Cursor:
        self._pages.append([])
        return cursor.reset_for_new_page()

    def draw(self, cursor: Cursor, ops: Iterable[DrawOp]) -> None:
        if cursor.page_index != len(self._pages) - 1:
            raise RuntimeError(
                f"cursor is on page {cursor.page_index} but page "
                f"{len(self._pages) - 1} is current"
            )
        self._pages[cursor.page_index].extend(ops)

    def draw_on_every_page(self, ops: Iterable[DrawOp]) -> None:
        ops = tuple(ops)
        for page in self._pages:
            page.extend(ops)

    def finish(self) -> tuple[Page, ...]:
        return tuple(Page(index=idx, ops=tuple(ops)) for idx, ops in enumerate(self._pages))
