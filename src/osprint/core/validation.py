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

import unicodedata
from collections.abc import Mapping


def normalize_text(value: object, *, label: str) -> str:
    """Normalize a field value to Unicode NFC, rejecting non-string input."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{label} must be a string")
    return unicodedata.normalize("NFC", value)


def require_field_map(value: object, *, label: str = "fields") -> dict[str, str]:
    """Validate a field map of string keys to string values."""
    if not isinstance(value, Mapping):
        raise ValueError(f"{label} must be a mapping of field names to strings")
    fields: dict[str, str] = {}
    for key, raw in value.items():
        if not isinstance(key, str) or not key.strip():
            raise ValueError(f"{label} keys must be non-empty strings")
        fields[key.strip()] = normalize_text(raw, label=f"{label}.{key}")
    return fields


def field_value(fields: Mapping[str, str], key: str, default: str = "") -> str:
    value = fields.get(key)
    if value is None:
        return default
    stripped = value.strip()
    return stripped or default


def parse_assignment(raw: str) -> tuple[str, str]:
    """Split a ``key=value`` assignment."""
    key, sep, value = raw.partition("=")
    key = key.strip()
    if not sep or not key:
        raise ValueError(f"field must look like key=value: {raw!r}")
    return key, value
