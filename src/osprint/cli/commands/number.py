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

from datetime import datetime

import typer

from ...render.identifiers import build_filename, format_os_number
from ..api import console
from ..core.common import _run_cli, cli_options


def register(app: typer.Typer) -> None:
    app.command("number", help="Print a new YYMMDDNNN service order number.")(number)


def number(
    ctx: typer.Context,
    filename: bool = typer.Option(
        False,
        "--filename",
        help="Also print the PDF filename built from the number.",
    ),
    prefix: str = typer.Option("OS", "--prefix", help="Filename prefix."),
) -> None:
    debug_value = cli_options(ctx).debug

    def _run() -> None:
        now = datetime.now()
        value = format_os_number(now)
        console.print(value)
        if filename:
            console.print(build_filename(prefix, value, now))

    _run_cli(_run, debug=debug_value)
