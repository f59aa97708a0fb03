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

from .receipt import RECEIPT_FIELDS, build_receipt, build_receipt_blocks
from .work_order import WORK_ORDER_FIELDS, build_work_order, build_work_order_blocks

__all__ = [
    "RECEIPT_FIELDS",
    "WORK_ORDER_FIELDS",
    "build_receipt",
    "build_receipt_blocks",
    "build_work_order",
    "build_work_order_blocks",
]
