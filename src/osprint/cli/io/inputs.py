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

import json
import sys
from collections.abc import Sequence
from pathlib import Path

from ...core.validation import parse_assignment, require_field_map


def load_field_map(data_path: str | None, assignments: Sequence[str] = ()) -> dict[str, str]:
    """Read a JSON field map (``-`` for stdin) and apply ``key=value`` overrides."""
    fields: dict[str, str] = {}
    if data_path:
        fields.update(require_field_map(_read_json(data_path), label=_source_label(data_path)))
    overrides = dict(parse_assignment(raw) for raw in assignments)
    fields.update(require_field_map(overrides, label="--field"))
    return fields


def unknown_fields(fields: dict[str, str], known: Sequence[str]) -> list[str]:
    known_set = set(known)
    return sorted(key for key in fields if key not in known_set)


def _read_json(data_path: str) -> object:
    if data_path == "-":
        raw = sys.stdin.read()
    else:
        path = Path(data_path).expanduser()
        if not path.is_file():
            raise ValueError(f"data file not found: {path}")
        raw = path.read_text(encoding="utf-8")
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"{_source_label(data_path)} is not valid JSON: {exc.msg}") from exc


def _source_label(data_path: str) -> str:
    return "stdin" if data_path == "-" else data_path
