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

from pathlib import Path
from typing import Literal

import typer

from ...forms.receipt import RECEIPT_FIELDS, build_receipt, receipt_style
from ..core.common import _run_cli, cli_options, is_quiet, load_command_config
from ..core.documents import print_document_summary
from ..core.log import _warn
from ..io.inputs import load_field_map, unknown_fields
from ..io.outputs import resolve_output_path, write_document

OutputFormat = Literal["pdf", "html"]
ReceiptTheme = Literal["default", "professional", "modern"]

_RECEIPT_HELP = (
    "Render a transport/meal voucher payment receipt.\n\n"
    "Examples:\n"
    "  osprint receipt --data recibo.json\n"
    "  osprint receipt -d recibo.json --theme modern -o recibo.pdf\n"
)


def register(app: typer.Typer) -> None:
    app.command("receipt", help=_RECEIPT_HELP)(receipt)


def receipt(
    ctx: typer.Context,
    data: str | None = typer.Option(
        None,
        "--data",
        "-d",
        help="JSON object of field values ('-' reads stdin).",
        rich_help_panel="Inputs",
    ),
    field: list[str] | None = typer.Option(
        None,
        "--field",
        "-F",
        help="Set one field as key=value (repeatable, overrides --data).",
        rich_help_panel="Inputs",
    ),
    theme: ReceiptTheme | None = typer.Option(
        None,
        "--theme",
        help="Colour theme (defaults to receipt.theme from the config).",
        rich_help_panel="Outputs",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path (defaults to recibo_<name>_<date>).",
        rich_help_panel="Outputs",
    ),
    format: OutputFormat | None = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format (defaults to output.format from the config).",
        rich_help_panel="Outputs",
    ),
) -> None:
    debug_value = cli_options(ctx).debug

    def _run() -> None:
        config = load_command_config(ctx)
        quiet = is_quiet(ctx, config)
        fields = load_field_map(data, field or ())
        extra = unknown_fields(fields, RECEIPT_FIELDS)
        if extra:
            _warn(f"ignoring unknown fields: {', '.join(extra)}", quiet=quiet)

        style = receipt_style(theme or config.receipt.theme, config.style())
        document = build_receipt(fields, ctx=config.render_context(style))
        output_format = format or config.output.format
        path = resolve_output_path(
            output,
            defaults=config.output,
            filename=document.filename,
            output_format=output_format,
        )
        written = write_document(
            document,
            path,
            output_format=output_format,
            title="Recibo de Pagamento",
            quiet=quiet,
        )
        print_document_summary(document, written, quiet=quiet)

    _run_cli(_run, debug=debug_value)
