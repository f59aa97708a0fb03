#!/usr/bin/env python3
from __future__ import annotations

import typer

from .commands import (
    number as number_command,
    receipt as receipt_command,
    work_order as work_order_command,
)


def register(app: typer.Typer) -> None:
    work_order_command.register(app)
    receipt_command.register(app)
    number_command.register(app)
