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

from dataclasses import dataclass, replace

from fpdf import FPDF
from fpdf.errors import FPDFException

from ..core.errors import MeasurementUnavailable, StructuralInputError
from .geometry import PT_TO_MM

ELLIPSIS = "..."
FALLBACK_GLYPH = "?"
MONOSPACE_ADVANCE = 0.6


@dataclass(frozen=True)
class FontSpec:
    family: str = "helvetica"
    style: str = ""
    size: float = 11.0

    def bold(self) -> "FontSpec":
        return replace(self, style="B")

    def regular(self) -> "FontSpec":
        return replace(self, style="")

    def sized(self, size: float) -> "FontSpec":
        return replace(self, size=size)


class TextMetrics:
    """Width measurement plus the wrapping and truncation built on top of it.

    Subclasses provide ``_measure`` and, where the backend cannot draw every
    character, ``displayable``. Wrapping and truncation are defined
    here so that every backend lays text out the same way and only the numbers
    differ.
    """

    def measure(self, text: str, font: FontSpec) -> float:
        if not text:
            return 0.0
        if font.size <= 0:
            raise MeasurementUnavailable(f"font size must be positive: {font.size}")
        return self._measure(self.displayable(text, font), font)

    def _measure(self, text: str, font: FontSpec) -> float:
        raise NotImplementedError

    def displayable(self, text: str, font: FontSpec) -> str:
        """Return ``text`` as the backend will draw it."""
        return text

    def check(self, font: FontSpec) -> None:
        """Fail early when a font cannot be measured at all."""
        self.measure("M", font)

    def wrap(self, text: str, font: FontSpec, max_width: float) -> list[str]:
        if not text:
            return []
        text = self.displayable(text, font)
        if max_width <= 0:
            raise StructuralInputError("wrap width must be positive")
        wrapped: list[str] = []
        for paragraph in text.splitlines():
            words = paragraph.split()
            if not words:
                wrapped.append("")
                continue
            current = ""
            for word in words:
                candidate = word if not current else f"{current} {word}"
                if self.measure(candidate, font) <= max_width:
                    current = candidate
                    continue
                if current:
                    wrapped.append(current)
                    current = ""
                if self.measure(word, font) <= max_width:
                    current = word
                    continue
                parts = self._split_word(word, font, max_width)
                wrapped.extend(parts[:-1])
                current = parts[-1] if parts else ""
            if current:
                wrapped.append(current)
        return wrapped

    def _split_word(self, word: str, font: FontSpec, max_width: float) -> list[str]:
        parts: list[str] = []
        chunk = ""
        for ch in word:
            next_chunk = f"{chunk}{ch}"
            if chunk and self.measure(next_chunk, font) > max_width:
                parts.append(chunk)
                chunk = ch
            else:
                chunk = next_chunk
        if chunk:
            parts.append(chunk)
        return parts

    def truncate_to_width(self, text: str, font: FontSpec, max_width: float) -> str:
        """Trim one character at a time until ``text + ELLIPSIS`` fits."""
        if not text:
            return ""
        text = self.displayable(text, font)
        if self.measure(text, font) <= max_width:
            return text
        trimmed = text
        while trimmed and self.measure(f"{trimmed}{ELLIPSIS}", font) > max_width:
            trimmed = trimmed[:-1]
        return f"{trimmed}{ELLIPSIS}"


class MonospaceTextMetrics(TextMetrics):
    """Every character advances ``0.6 em``."""

    def __init__(self, advance: float = MONOSPACE_ADVANCE) -> None:
        if advance <= 0:
            raise ValueError("advance must be positive")
        self.advance = float(advance)

    def _measure(self, text: str, font: FontSpec) -> float:
        return len(text) * font.size * PT_TO_MM * self.advance


class FpdfTextMetrics(TextMetrics):
    """Measures with the fpdf2 core font tables (mm)."""

    def __init__(self) -> None:
        self._pdf = FPDF(unit="mm")

    def displayable(self, text: str, font: FontSpec) -> str:
        """Replace characters the core fonts cannot encode with ``FALLBACK_GLYPH``."""
        if text.isascii():
            return text
        encoding = self._pdf.core_fonts_encoding
        return "".join(_encodable_or_fallback(ch, encoding) for ch in text)

    def _measure(self, text: str, font: FontSpec) -> float:
        try:
            self._pdf.set_font(font.family, style=font.style, size=font.size)
            return float(self._pdf.get_string_width(text))
        except FPDFException as exc:
            raise MeasurementUnavailable(
                f"cannot measure {font.family!r} {font.style or 'regular'} {font.size}pt: {exc}"
            ) from exc


def _encodable_or_fallback(ch: str, encoding: str) -> str:
    try:
        ch.encode(encoding)
    except UnicodeEncodeError:
        return FALLBACK_GLYPH
    return ch


def build_metrics(kind: str) -> TextMetrics:
    normalized = kind.strip().lower()
    if normalized == "fpdf":
        return FpdfTextMetrics()
    if normalized == "monospace":
        return MonospaceTextMetrics()
    raise ValueError(f"unknown metrics backend: {kind}")
