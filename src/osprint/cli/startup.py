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

from rich.markup import escape
from rich.traceback import install as install_rich_traceback

from ..config import init_user_config, user_config_needs_init
from .api import configure_ui, console


def run_startup(
    *,
    quiet: bool,
    no_color: bool,
    debug: bool,
    init_config: bool,
) -> bool:
    """Prepare the console and user config; return True when the CLI should exit."""
    configure_ui(no_color=no_color)
    if debug:
        install_rich_traceback(show_locals=True)
    if init_config:
        config_dir = init_user_config()
        console.print(f"User config ready at [path]{escape(str(config_dir))}[/path]")
        return True
    if user_config_needs_init():
        config_dir = init_user_config()
        if not quiet:
            console.print(f"[muted]Initialized user config at {escape(str(config_dir))}[/muted]")
    return False
