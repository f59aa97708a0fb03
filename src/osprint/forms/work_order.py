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
from collections.abc import Mapping
from datetime import datetime

from ..core.validation import field_value
from ..render.blocks import text_block_content_height
from ..render.compose import compose_document
from ..render.geometry import SECTION_SPACING_MM
from ..render.identifiers import format_os_number
from ..render.style import RenderContext
from ..render.types import (
    ContentBlock,
    FieldRow,
    Footer,
    Heading,
    RenderedDocument,
    SectionTitle,
    SignaturePair,
    Spacer,
    TextBlock,
)
from .formatting import format_date, format_date_time, format_today

FILENAME_PREFIX = "OS"
DESCRIPTION_BOX_HEIGHT_MM = 40.0
SIGNATURE_LEAD_MM = 20.0
FOOTER_TEXT = "Sistema de Emissão de Ordens de Serviço - Gerado automaticamente"

WORK_ORDER_FIELDS = (
    "dataHora",
    "tipoManutencao",
    "dataSolicitacao",
    "contratanteNome",
    "contratanteCnpj",
    "contratanteEndereco",
    "contratanteTelefone",
    "contratadaNome",
    "contratadaCnpj",
    "contratadaEndereco",
    "contratadaTelefone",
    "tecnicoNome",
    "tecnicoCpf",
    "descricao",
)

MAINTENANCE_TYPES = {
    "diaria": "Manutenção Diária",
    "semanal": "Manutenção Semanal",
    "mensal": "Manutenção Mensal",
    "trimestral": "Manutenção Trimestral",
    "anual": "Manutenção Anual",
}

# (label, field) pairs per party section
_PARTY_FIELDS = (
    ("Empresa:", "Nome"),
    ("CNPJ:", "Cnpj"),
    ("Endereço:", "Endereco"),
    ("Telefone:", "Telefone"),
)


def format_maintenance_type(value: str) -> str:
    return MAINTENANCE_TYPES.get(value, value)


def build_work_order_blocks(
    fields: Mapping[str, str],
    *,
    number: str,
    now: datetime,
) -> list[ContentBlock]:
    """Blocks of a service order, in print order."""
    blocks: list[ContentBlock] = [
        Heading(
            title="ORDEM DE SERVIÇO",
            subtitle="Sistema de Manutenção",
            number=f"OS Nº {number}",
        )
    ]
    _section(
        blocks,
        "INFORMAÇÕES BÁSICAS",
        [
            FieldRow("Data e Hora:", format_date_time(field_value(fields, "dataHora"))),
            FieldRow(
                "Tipo de Manutenção:",
                format_maintenance_type(field_value(fields, "tipoManutencao")),
            ),
            FieldRow("Data de Solicitação:", format_date(field_value(fields, "dataSolicitacao"))),
        ],
    )
    _section(blocks, "DADOS DA CONTRATANTE", _party_rows(fields, "contratante"))
    _section(blocks, "DADOS DA CONTRATADA", _party_rows(fields, "contratada"))
    _section(
        blocks,
        "TÉCNICO RESPONSÁVEL",
        [
            FieldRow("Nome:", field_value(fields, "tecnicoNome")),
            FieldRow("CPF:", field_value(fields, "tecnicoCpf")),
        ],
    )
    blocks.append(SectionTitle("DESCRIÇÃO DA SOLICITAÇÃO"))
    blocks.append(
        TextBlock(text=field_value(fields, "descricao"), box_height=DESCRIPTION_BOX_HEIGHT_MM)
    )
    blocks.append(Spacer(SIGNATURE_LEAD_MM))
    blocks.append(
        SignaturePair(
            left_label="Contratante",
            right_label="Contratada",
            title="ASSINATURAS",
            date_text=format_today(now.date()),
        )
    )
    blocks.append(Footer(FOOTER_TEXT))
    return blocks


def build_work_order(
    fields: Mapping[str, str],
    *,
    ctx: RenderContext | None = None,
    now: datetime | None = None,
    rng: random.Random | None = None,
    filename_prefix: str = FILENAME_PREFIX,
) -> RenderedDocument:
    now = now or datetime.now()
    number = format_os_number(now, rng)
    blocks = build_work_order_blocks(fields, number=number, now=now)
    return compose_document(
        blocks,
        ctx=ctx,
        number=number,
        filename_prefix=filename_prefix,
        now=now,
    )


def _party_rows(fields: Mapping[str, str], prefix: str) -> list[ContentBlock]:
    return [
        FieldRow(label, field_value(fields, f"{prefix}{suffix}"))
        for label, suffix in _PARTY_FIELDS
    ]


def _section(blocks: list[ContentBlock], title: str, rows: list[ContentBlock]) -> None:
    blocks.append(SectionTitle(title))
    blocks.extend(rows)
    blocks.append(Spacer(SECTION_SPACING_MM))


def description_overflows(fields: Mapping[str, str], ctx: RenderContext) -> bool:
    """True when the description needs more room than its fixed box."""
    block = TextBlock(text=field_value(fields, "descricao"), box_height=DESCRIPTION_BOX_HEIGHT_MM)
    return text_block_content_height(block, ctx) > block.box_height
