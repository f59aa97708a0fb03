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

from datetime import date, datetime

PT_BR_MONTHS = (
    "janeiro",
    "fevereiro",
    "março",
    "abril",
    "maio",
    "junho",
    "julho",
    "agosto",
    "setembro",
    "outubro",
    "novembro",
    "dezembro",
)


def format_date(value: str) -> str:
    """``2024-03-05`` -> ``05/03/2024``. Unparseable input is returned as is."""
    if not value:
        return ""
    try:
        parsed = date.fromisoformat(value.strip())
    except ValueError:
        return value
    return f"{parsed:%d/%m/%Y}"


def format_date_time(value: str) -> str:
    """``2024-03-05T14:30`` -> ``05/03/2024, 14:30``."""
    if not value:
        return ""
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return value
    return f"{parsed:%d/%m/%Y, %H:%M}"


def format_month(value: str) -> str:
    """``2024-03`` -> ``março de 2024``."""
    if not value:
        return ""
    year, sep, month = value.strip().partition("-")
    if not sep or not year.isdigit() or not month.isdigit():
        return value
    month_idx = int(month)
    if not 1 <= month_idx <= 12:
        return value
    return f"{PT_BR_MONTHS[month_idx - 1]} de {int(year)}"


def format_today(today: date) -> str:
    return f"Data: {today:%d/%m/%Y}"
