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

import typer

from . import command_registry
from .api import console, console_err
from .core.common import CliOptions, _get_version, _paper_callback
from .startup import run_startup

app = typer.Typer(
    add_completion=False,
    help="Print-ready service orders (ordens de serviço) and voucher receipts.",
)


def _version_callback(value: bool) -> None:
    if not value:
        return
    console.print(f"osprint {_get_version()}")
    raise typer.Exit()


@app.callback(invoke_without_command=True)
def cli(
    ctx: typer.Context,
    config: str | None = typer.Option(
        None,
        "--config",
        help="Read settings from this TOML file instead of the user config.",
        rich_help_panel="Config",
    ),
    paper: str | None = typer.Option(
        None,
        "--paper",
        help="Use the bundled settings for this paper size (A4 or LETTER).",
        callback=_paper_callback,
        rich_help_panel="Config",
    ),
    init_config: bool = typer.Option(
        False,
        "--init-config",
        help="Copy the bundled A4/Letter settings to the user config directory and exit.",
        rich_help_panel="Config",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only print errors.",
        rich_help_panel="Output",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Print without ANSI colours.",
        rich_help_panel="Output",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Raise errors with a full traceback instead of a one-line message.",
        rich_help_panel="Debug",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Print the installed version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    try:
        done = run_startup(
            quiet=quiet,
            no_color=no_color,
            debug=debug,
            init_config=init_config,
        )
    except OSError as exc:
        console_err.print(f"[error]File error:[/error] {exc}")
        raise typer.Exit(code=2)
    if done:
        raise typer.Exit()
    ctx.obj = CliOptions(
        config=config,
        paper=paper,
        debug=debug,
        quiet=quiet,
        no_color=no_color,
    )
    if ctx.invoked_subcommand is None:
        console_err.print(
            "[error]Error:[/error] choose a command (work-order, receipt, number); "
            "see `osprint --help`."
        )
        raise typer.Exit(code=2)


command_registry.register(app)


def main() -> None:
    app()
