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

from dataclasses import dataclass, field

from .geometry import PageGeometry
from .text import FontSpec, FpdfTextMetrics, TextMetrics
from .types import Color

CORE_FONT_FAMILIES = frozenset({"courier", "helvetica", "times"})


@dataclass(frozen=True)
class DocumentStyle:
    font_family: str = "helvetica"
    primary: Color = (42, 82, 152)
    muted: Color = (102, 102, 102)
    label: Color = (51, 51, 51)
    rule: Color = (221, 221, 221)
    box_fill: Color = (250, 250, 250)
    title_size: float = 24.0
    subtitle_size: float = 14.0
    number_size: float = 16.0
    section_size: float = 12.0
    field_size: float = 11.0
    text_size: float = 12.0
    caption_size: float = 10.0
    paragraph_size: float = 9.0
    footer_size: float = 8.0

    def font(self, size: float, *, bold: bool = False) -> FontSpec:
        return FontSpec(family=self.font_family, style="B" if bold else "", size=size)

    def fonts_in_use(self) -> tuple[FontSpec, ...]:
        return (
            self.font(self.title_size, bold=True),
            self.font(self.subtitle_size),
            self.font(self.number_size, bold=True),
            self.font(self.section_size, bold=True),
            self.font(self.field_size, bold=True),
            self.font(self.field_size),
            self.font(self.text_size),
            self.font(self.caption_size),
            self.font(self.paragraph_size),
            self.font(self.footer_size),
        )


@dataclass(frozen=True)
class RenderContext:
    geometry: PageGeometry = field(default_factory=PageGeometry)
    metrics: TextMetrics = field(default_factory=FpdfTextMetrics)
    style: DocumentStyle = field(default_factory=DocumentStyle)

    def check_fonts(self) -> None:
        for font in self.style.fonts_in_use():
            self.metrics.check(font)
