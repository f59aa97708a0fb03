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

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, cast

from ..forms.receipt import RECEIPT_THEMES
from ..render.geometry import PAPER_SIZES_MM, PageGeometry
from ..render.style import CORE_FONT_FAMILIES, DocumentStyle, RenderContext
from ..render.text import build_metrics
from .installer import DEFAULT_PAPER_SIZE, resolve_config_path

OutputFormat = Literal["pdf", "html"]
MetricsKind = Literal["fpdf", "monospace"]


@dataclass(frozen=True)
class PageDefaults:
    width_mm: float = PAPER_SIZES_MM[DEFAULT_PAPER_SIZE][0]
    height_mm: float = PAPER_SIZES_MM[DEFAULT_PAPER_SIZE][1]
    margin_mm: float = 20.0
    line_height_mm: float = 6.0


@dataclass(frozen=True)
class FontDefaults:
    family: str = "helvetica"
    metrics: MetricsKind = "fpdf"


@dataclass(frozen=True)
class OutputDefaults:
    directory: str | None = None
    format: OutputFormat = "pdf"
    work_order_prefix: str = "OS"


@dataclass(frozen=True)
class ReceiptDefaults:
    theme: str = "default"


@dataclass(frozen=True)
class UiDefaults:
    quiet: bool = False
    no_color: bool = False


@dataclass(frozen=True)
class AppConfig:
    paper_size: str = DEFAULT_PAPER_SIZE
    page: PageDefaults = field(default_factory=PageDefaults)
    fonts: FontDefaults = field(default_factory=FontDefaults)
    output: OutputDefaults = field(default_factory=OutputDefaults)
    receipt: ReceiptDefaults = field(default_factory=ReceiptDefaults)
    ui: UiDefaults = field(default_factory=UiDefaults)

    def geometry(self) -> PageGeometry:
        return PageGeometry(
            width=self.page.width_mm,
            height=self.page.height_mm,
            margin=self.page.margin_mm,
            line_height=self.page.line_height_mm,
        )

    def style(self) -> DocumentStyle:
        return DocumentStyle(font_family=self.fonts.family)

    def render_context(self, style: DocumentStyle | None = None) -> RenderContext:
        return RenderContext(
            geometry=self.geometry(),
            metrics=build_metrics(self.fonts.metrics),
            style=style or self.style(),
        )


def load_app_config(path: str | Path | None = None, *, paper_size: str | None = None) -> AppConfig:
    config_path = resolve_config_path(path, paper_size=paper_size)
    data = _load_toml(config_path)
    page_cfg = _get_dict(data, "page")
    resolved_paper_size = (
        _parse_optional_str(page_cfg.get("size"), field="page.size") or DEFAULT_PAPER_SIZE
    ).upper()
    return AppConfig(
        paper_size=resolved_paper_size,
        page=_parse_page_defaults(page_cfg, paper_size=resolved_paper_size),
        fonts=_parse_font_defaults(_get_dict(data, "fonts")),
        output=_parse_output_defaults(_get_dict(data, "output")),
        receipt=_parse_receipt_defaults(_get_dict(data, "receipt")),
        ui=_parse_ui_defaults(_get_dict(data, "ui")),
    )


def _parse_page_defaults(cfg: dict[str, object], *, paper_size: str) -> PageDefaults:
    if paper_size not in PAPER_SIZES_MM:
        raise ValueError(f"page.size must be one of {', '.join(sorted(PAPER_SIZES_MM))}")
    width, height = PAPER_SIZES_MM[paper_size]
    return PageDefaults(
        width_mm=_parse_positive_float(cfg.get("width_mm"), field="page.width_mm", default=width),
        height_mm=_parse_positive_float(
            cfg.get("height_mm"), field="page.height_mm", default=height
        ),
        margin_mm=_parse_non_negative_float(
            cfg.get("margin_mm"), field="page.margin_mm", default=PageDefaults.margin_mm
        ),
        line_height_mm=_parse_positive_float(
            cfg.get("line_height_mm"),
            field="page.line_height_mm",
            default=PageDefaults.line_height_mm,
        ),
    )


def _parse_font_defaults(cfg: dict[str, object]) -> FontDefaults:
    family = (
        _parse_optional_str(cfg.get("family"), field="fonts.family") or FontDefaults.family
    ).lower()
    if family not in CORE_FONT_FAMILIES:
        raise ValueError(f"fonts.family must be one of {', '.join(sorted(CORE_FONT_FAMILIES))}")
    metrics = (
        _parse_optional_str(cfg.get("metrics"), field="fonts.metrics") or FontDefaults.metrics
    ).lower()
    if metrics not in {"fpdf", "monospace"}:
        raise ValueError("fonts.metrics must be 'fpdf' or 'monospace'")
    return FontDefaults(family=family, metrics=cast(MetricsKind, metrics))


def _parse_output_defaults(cfg: dict[str, object]) -> OutputDefaults:
    output_format = (
        _parse_optional_str(cfg.get("format"), field="output.format") or OutputDefaults.format
    ).lower()
    if output_format not in {"pdf", "html"}:
        raise ValueError("output.format must be 'pdf' or 'html'")
    prefix = _parse_optional_str(cfg.get("work_order_prefix"), field="output.work_order_prefix")
    return OutputDefaults(
        directory=_parse_optional_str(cfg.get("directory"), field="output.directory"),
        format=cast(OutputFormat, output_format),
        work_order_prefix=prefix or OutputDefaults.work_order_prefix,
    )


def _parse_receipt_defaults(cfg: dict[str, object]) -> ReceiptDefaults:
    theme = (
        _parse_optional_str(cfg.get("theme"), field="receipt.theme") or ReceiptDefaults.theme
    ).lower()
    if theme not in RECEIPT_THEMES:
        raise ValueError(f"receipt.theme must be one of {', '.join(sorted(RECEIPT_THEMES))}")
    return ReceiptDefaults(theme=theme)


def _parse_ui_defaults(cfg: dict[str, object]) -> UiDefaults:
    return UiDefaults(
        quiet=_parse_bool(cfg.get("quiet"), field="ui.quiet", default=False),
        no_color=_parse_bool(cfg.get("no_color"), field="ui.no_color", default=False),
    )


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_optional_str(value: object, *, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    normalized = value.strip()
    return normalized or None


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{field} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"{field} must be a boolean")
    raise ValueError(f"{field} must be a boolean")


def _parse_float_strict(value: object, *, field: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{field} must be a number")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return float(text)
        except ValueError as exc:
            raise ValueError(f"{field} must be a number") from exc
    raise ValueError(f"{field} must be a number")


def _parse_positive_float(value: object, *, field: str, default: float) -> float:
    if value is None:
        return default
    parsed = _parse_float_strict(value, field=field)
    if parsed <= 0:
        raise ValueError(f"{field} must be positive")
    return parsed


def _parse_non_negative_float(value: object, *, field: str, default: float) -> float:
    if value is None:
        return default
    parsed = _parse_float_strict(value, field=field)
    if parsed < 0:
        raise ValueError(f"{field} cannot be negative")
    return parsed
