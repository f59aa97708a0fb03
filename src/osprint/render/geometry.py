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

from ..core.errors import StructuralInputError

# Layout constants (mm)
DEFAULT_MARGIN_MM = 20.0
DEFAULT_LINE_HEIGHT_MM = 6.0
SECTION_SPACING_MM = 15.0
FOOTER_OFFSET_MM = 15.0
PT_TO_MM = 0.3527777778

# Tolerance for coordinate comparisons
COORDINATE_EPSILON = 0.01

PAPER_SIZES_MM: dict[str, tuple[float, float]] = {
    "A4": (210.0, 297.0),
    "LETTER": (215.9, 279.4),
}


@dataclass(frozen=True)
class PageGeometry:
    width: float = 210.0
    height: float = 297.0
    margin: float = DEFAULT_MARGIN_MM
    line_height: float = DEFAULT_LINE_HEIGHT_MM

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise StructuralInputError("page width and height must be positive")
        if self.margin < 0:
            raise StructuralInputError("page margin cannot be negative")
        if self.margin >= self.width / 2 or self.margin >= self.height / 2:
            raise StructuralInputError(
                f"margin {self.margin} leaves no usable area on a "
                f"{self.width}x{self.height} page"
            )
        if self.line_height <= 0:
            raise StructuralInputError("line height must be positive")

    @property
    def usable_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def usable_height(self) -> float:
        return self.height - 2 * self.margin

    @property
    def top(self) -> float:
        return self.margin

    @property
    def bottom(self) -> float:
        return self.height - self.margin

    @property
    def center_x(self) -> float:
        return self.width / 2


def paper_geometry(
    paper_size: str,
    *,
    margin: float = DEFAULT_MARGIN_MM,
    line_height: float = DEFAULT_LINE_HEIGHT_MM,
) -> PageGeometry:
    key = paper_size.strip().upper()
    if key not in PAPER_SIZES_MM:
        raise ValueError(f"unknown paper size: {paper_size}")
    width, height = PAPER_SIZES_MM[key]
    return PageGeometry(width=width, height=height, margin=margin, line_height=line_height)


def font_line_height(size_pt: float, multiplier: float = 1.15) -> float:
    return float(size_pt) * PT_TO_MM * multiplier
