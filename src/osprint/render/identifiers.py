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

import random
from datetime import datetime

NUMBER_SUFFIX_RANGE = 1000


def format_os_number(now: datetime | None = None, rng: random.Random | None = None) -> str:
    """Return ``YYMMDDNNN``: the date plus a random 3-digit suffix.

    The suffix is a display label only; two numbers generated on the same day
    can collide.
    """
    now = now or datetime.now()
    suffix = (rng or random).randrange(NUMBER_SUFFIX_RANGE)
    return f"{now:%y%m%d}{suffix:03d}"


def build_filename(
    prefix: str,
    number: str,
    now: datetime | None = None,
    *,
    extension: str = "pdf",
) -> str:
    now = now or datetime.now()
    stem = "_".join(part for part in (prefix, number, f"{now:%Y%m%d}", f"{now:%H%M}") if part)
    return f"{stem}.{extension}"
