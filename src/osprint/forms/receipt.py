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
import re
from collections.abc import Mapping
from dataclasses import replace
from datetime import datetime

from ..core.validation import field_value
from ..render.compose import compose_document
from ..render.style import DocumentStyle, RenderContext
from ..render.types import (
    Color,
    ContentBlock,
    FieldRow,
    Heading,
    Paragraph,
    RenderedDocument,
    SectionTitle,
    SignaturePair,
    Spacer,
)
from .formatting import format_date, format_month

RECEIPT_FIELDS = (
    "funcionarioNome",
    "funcionarioCpf",
    "funcionarioMatricula",
    "funcionarioCargo",
    "empresaNome",
    "empresaCnpj",
    "valeTransporte",
    "valeAlimentacao",
    "dataRecibo",
    "periodoReferencia",
)
ZERO_AMOUNT = "R$ 0,00"
# Tighter than the work order; a complete receipt fits one A4 page.
SECTION_GAP_MM = 10.0
SIGNATURE_LEAD_MM = 15.0
CLOSING_LINES = (
    "Este documento comprova o recebimento dos valores de vale transporte e vale alimentação",
    "conforme especificado acima para o período de referência indicado.",
)

RECEIPT_THEMES: dict[str, Color] = {
    "default": (0x1A, 0x23, 0x7E),
    "professional": (0x2C, 0x3E, 0x50),
    "modern": (0x8E, 0x24, 0xAA),
}

_NUMBER_RE = re.compile(r"\d+\.?\d*|\.\d+")
_WHITESPACE_RE = re.compile(r"\s+")


def parse_money_value(value: str) -> float:
    """``R$ 1.234,56`` -> ``1234.56``; anything unparseable is 0."""
    digits = re.sub(r"[^\d,]", "", value or "").replace(",", ".", 1)
    match = _NUMBER_RE.match(digits)
    if match is None:
        return 0.0
    return float(match.group(0))


def format_money(amount: float) -> str:
    return f"R$ {amount:.2f}".replace(".", ",")


def calculate_total(*values: str) -> str:
    return format_money(sum(parse_money_value(value) for value in values))


def receipt_style(theme: str, base: DocumentStyle | None = None) -> DocumentStyle:
    key = theme.strip().lower()
    if key not in RECEIPT_THEMES:
        raise ValueError(f"unknown receipt theme: {theme}")
    return replace(base or DocumentStyle(), primary=RECEIPT_THEMES[key])


def receipt_filename(fields: Mapping[str, str], now: datetime) -> str:
    name = _WHITESPACE_RE.sub("_", field_value(fields, "funcionarioNome"))
    return f"recibo_{name}_{now:%Y-%m-%d}.pdf"


def build_receipt_blocks(fields: Mapping[str, str]) -> list[ContentBlock]:
    """Blocks of a transport/meal voucher receipt, in print order."""
    transport = field_value(fields, "valeTransporte", ZERO_AMOUNT)
    meal = field_value(fields, "valeAlimentacao", ZERO_AMOUNT)

    blocks: list[ContentBlock] = [
        Heading(title="RECIBO DE PAGAMENTO", subtitle="VALE TRANSPORTE E VALE ALIMENTAÇÃO"),
        SectionTitle("DADOS DA EMPRESA"),
        FieldRow("Empresa:", field_value(fields, "empresaNome")),
    ]
    _optional_row(blocks, fields, "CNPJ:", "empresaCnpj")
    blocks.append(Spacer(SECTION_GAP_MM))

    blocks.append(SectionTitle("DADOS DO FUNCIONÁRIO"))
    blocks.append(FieldRow("Nome:", field_value(fields, "funcionarioNome")))
    blocks.append(FieldRow("CPF:", field_value(fields, "funcionarioCpf")))
    _optional_row(blocks, fields, "Matrícula:", "funcionarioMatricula")
    _optional_row(blocks, fields, "Cargo:", "funcionarioCargo")
    blocks.append(Spacer(SECTION_GAP_MM))

    blocks.append(SectionTitle("VALORES DOS BENEFÍCIOS"))
    blocks.append(FieldRow("Vale Transporte:", transport))
    blocks.append(FieldRow("Vale Alimentação:", meal))
    blocks.append(FieldRow("TOTAL:", calculate_total(transport, meal)))
    blocks.append(Spacer(SECTION_GAP_MM))

    blocks.append(FieldRow("Data de Emissão:", format_date(field_value(fields, "dataRecibo"))))
    period = field_value(fields, "periodoReferencia")
    if period:
        blocks.append(FieldRow("Período de Referência:", format_month(period)))

    blocks.append(Spacer(SIGNATURE_LEAD_MM))
    blocks.append(SignaturePair(left_label="Assinatura do Responsável"))
    blocks.append(Paragraph(CLOSING_LINES))
    return blocks


def build_receipt(
    fields: Mapping[str, str],
    *,
    ctx: RenderContext | None = None,
    now: datetime | None = None,
    rng: random.Random | None = None,
) -> RenderedDocument:
    now = now or datetime.now()
    return compose_document(
        build_receipt_blocks(fields),
        ctx=ctx,
        filename=receipt_filename(fields, now),
        now=now,
        rng=rng,
    )


def _optional_row(
    blocks: list[ContentBlock],
    fields: Mapping[str, str],
    label: str,
    key: str,
) -> None:
    value = field_value(fields, key)
    if value:
        blocks.append(FieldRow(label, value))
