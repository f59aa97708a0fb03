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

"""Paginated layout of service orders and payment receipts."""

from __future__ import annotations

from .core.errors import MeasurementUnavailable, StructuralInputError
from .forms import build_receipt, build_work_order
from .render import RenderedDocument, compose_document

__all__ = [
    "MeasurementUnavailable",
    "RenderedDocument",
    "StructuralInputError",
    "build_receipt",
    "build_work_order",
    "compose_document",
]
