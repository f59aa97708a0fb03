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

import importlib.metadata
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import typer
from rich.markup import escape
from rich.traceback import install as install_rich_traceback

from ...config import AppConfig, load_app_config
from ...core.errors import MeasurementUnavailable, StructuralInputError
from ...render.geometry import PAPER_SIZES_MM
from ..api import configure_ui, console_err

_ERROR_LABELS: tuple[tuple[type[Exception], str], ...] = (
    (StructuralInputError, "Layout error"),
    (MeasurementUnavailable, "Font error"),
    (OSError, "File error"),
)


@dataclass(frozen=True)
class CliOptions:
    """Global options given before the subcommand."""

    config: str | None = None
    paper: str | None = None
    debug: bool = False
    quiet: bool = False
    no_color: bool = False


def cli_options(ctx: typer.Context) -> CliOptions:
    return ctx.find_object(CliOptions) or CliOptions()


def load_command_config(ctx: typer.Context) -> AppConfig:
    options = cli_options(ctx)
    if options.config and options.paper:
        raise typer.BadParameter("use either --config or --paper, not both")
    config = load_app_config(options.config, paper_size=options.paper)
    configure_ui(no_color=options.no_color or config.ui.no_color)
    return config


def is_quiet(ctx: typer.Context, config: AppConfig | None = None) -> bool:
    if cli_options(ctx).quiet:
        return True
    return bool(config is not None and config.ui.quiet)


def _error_label(exc: Exception) -> str:
    for exc_type, label in _ERROR_LABELS:
        if isinstance(exc, exc_type):
            return label
    return "Error"


def _run_cli(func: Callable[[], Any], *, debug: bool) -> None:
    if debug:
        install_rich_traceback(show_locals=True)
    try:
        result = func()
    except (OSError, RuntimeError, ValueError, TypeError, LookupError) as exc:
        if debug:
            raise
        console_err.print(f"[error]{_error_label(exc)}:[/error] {escape(str(exc))}")
        raise typer.Exit(code=2)
    if isinstance(result, int) and result != 0:
        raise typer.Exit(code=result)


def _paper_callback(value: str | None) -> str | None:
    if value is None:
        return None
    normalized = value.strip().upper()
    if normalized not in PAPER_SIZES_MM:
        raise typer.BadParameter(f"paper must be one of {', '.join(sorted(PAPER_SIZES_MM))}")
    return normalized


def _get_version() -> str:
    try:
        return importlib.metadata.version("osprint")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0"
