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
from typing import Literal, Union

from .geometry import PageGeometry
from .text import FontSpec

Color = tuple[int, int, int]
Align = Literal["left", "center", "right"]
RectStyle = Literal["F", "D", "FD"]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)


# Draw operations (absolute page coordinates, mm)


@dataclass(frozen=True)
class RectOp:
    x: float
    y: float
    width: float
    height: float
    style: RectStyle = "F"
    fill: Color | None = None
    stroke: Color | None = None
    line_width: float = 0.2


@dataclass(frozen=True)
class LineOp:
    x1: float
    y1: float
    x2: float
    y2: float
    color: Color = BLACK
    width: float = 0.2


@dataclass(frozen=True)
class TextOp:
    """Text anchored at ``x`` with its baseline at ``y``."""

    x: float
    y: float
    text: str
    font: FontSpec
    color: Color = BLACK
    align: Align = "left"


DrawOp = Union[RectOp, LineOp, TextOp]


@dataclass(frozen=True)
class Page:
    index: int
    ops: tuple[DrawOp, ...]


@dataclass(frozen=True)
class RenderedDocument:
    geometry: PageGeometry
    pages: tuple[Page, ...]
    number: str
    filename: str

    @property
    def page_count(self) -> int:
        return len(self.pages)


# Content blocks


@dataclass(frozen=True)
class Heading:
    title: str
    subtitle: str = ""
    number: str = ""


@dataclass(frozen=True)
class SectionTitle:
    text: str


@dataclass(frozen=True)
class FieldRow:
    label: str
    value: str = ""


@dataclass(frozen=True)
class TextBlock:
    text: str
    box_height: float = 40.0


@dataclass(frozen=True)
class SignaturePair:
    left_label: str
    right_label: str = ""
    title: str = ""
    date_text: str = ""


@dataclass(frozen=True)
class Paragraph:
    lines: tuple[str, ...]


@dataclass(frozen=True)
class Spacer:
    height: float


@dataclass(frozen=True)
class Footer:
    text: str


ContentBlock = Union[
    Heading,
    SectionTitle,
    FieldRow,
    TextBlock,
    SignaturePair,
    Paragraph,
    Spacer,
    Footer,
]
