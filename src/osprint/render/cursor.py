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

from dataclasses import dataclass

from .geometry import COORDINATE_EPSILON, PageGeometry


@dataclass(frozen=True)
class Cursor:
    """Write position: page index and baseline offset from the page top (mm).

    Cursors are values. ``advance`` and ``reset_for_new_page`` return a new
    cursor and are the only ways to move one.
    """

    geometry: PageGeometry
    page_index: int = 0
    y: float = 0.0

    @classmethod
    def start(cls, geometry: PageGeometry) -> "Cursor":
        return cls(geometry=geometry, page_index=0, y=geometry.top)

    def remaining_height(self) -> float:
        return max(0.0, self.geometry.bottom - self.y)

    def fits(self, height: float) -> bool:
        """True when ``height`` ends on or above the bottom margin.

        ``COORDINATE_EPSILON`` absorbs float drift from summed block heights;
        ``advance`` snaps any such overshoot back onto the margin.
        """
        return self.y + height <= self.geometry.bottom + COORDINATE_EPSILON

    def advance(self, height: float) -> "Cursor":
        if height < 0:
            raise ValueError("cursor cannot move backwards")
        y = self.y + height
        if y > self.geometry.bottom >= self.y:
            y = self.geometry.bottom
        return Cursor(geometry=self.geometry, page_index=self.page_index, y=y)

    def reset_for_new_page(self) -> "Cursor":
        return Cursor(geometry=self.geometry, page_index=self.page_index + 1, y=self.geometry.top)
