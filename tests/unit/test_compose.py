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

import random
import unittest
from unittest import mock

from osprint.core.errors import MeasurementUnavailable, StructuralInputError
from osprint.forms.work_order import build_work_order
from osprint.render.compose import compose_document
from osprint.render.identifiers import format_os_number
from osprint.render.pdf_render import render_document_to_pdf_bytes
from osprint.render.style import DocumentStyle, RenderContext
from osprint.render.text import FpdfTextMetrics, MonospaceTextMetrics
from osprint.render.types import FieldRow, Footer, LineOp, RectOp, SectionTitle, TextBlock, TextOp
from tests.test_support import FIXED_NOW, WORK_ORDER_SAMPLE, monospace_context


def _group(idx: int) -> list:
    return [
        SectionTitle(f"SEÇÃO {idx}"),
        FieldRow("Nome:", "Ana"),
        FieldRow("CPF:", ""),
        FieldRow("Telefone:", "(11) 4000-1234"),
    ]


def _op_top(op) -> float:
    return op.y1 if isinstance(op, LineOp) else op.y


class TestComposeDocument(unittest.TestCase):
    def setUp(self) -> None:
        self.ctx = monospace_context()

    def test_short_document_fits_one_page(self) -> None:
        document = compose_document(_group(1), ctx=self.ctx, now=FIXED_NOW)
        self.assertEqual(document.page_count, 1)
        page = document.pages[0]
        self.assertIsInstance(page.ops[0], RectOp)
        self.assertEqual(page.ops[0].y, 20.0)
        self.assertEqual(len(page.ops), 2 + 3 * 3)

    def test_long_document_breaks_at_block_boundaries(self) -> None:
        blocks = [block for idx in range(30) for block in _group(idx)]
        document = compose_document(blocks, ctx=self.ctx, now=FIXED_NOW)
        # Seven 36mm groups fit in 257mm; the eighth title would end at 284mm.
        self.assertEqual(document.page_count, 5)
        for page in document.pages:
            bars = [op for op in page.ops if isinstance(op, RectOp)]
            self.assertEqual(page.ops[0], bars[0])
            self.assertEqual(bars[0].y, 20.0)
            for op in page.ops:
                self.assertGreaterEqual(_op_top(op), 20.0)
                self.assertLessEqual(_op_top(op), 277.0)
        self.assertEqual(
            [len([op for op in page.ops if isinstance(op, RectOp)]) for page in document.pages],
            [7, 7, 7, 7, 2],
        )

    def test_rows_break_exactly_when_next_row_does_not_fit(self) -> None:
        blocks = [FieldRow("Campo:", str(idx)) for idx in range(40)]
        document = compose_document(blocks, ctx=self.ctx, now=FIXED_NOW)
        self.assertEqual(document.page_count, 2)
        self.assertEqual(len(document.pages[0].ops), 32 * 3)
        first_on_second = document.pages[1].ops[1]
        self.assertEqual(first_on_second.text, "32")
        self.assertEqual(document.pages[1].ops[0].y, 20.0)

    def test_footer_is_drawn_on_every_page(self) -> None:
        blocks = [Footer("Gerado automaticamente")]
        blocks += [FieldRow("Campo:", str(idx)) for idx in range(40)]
        document = compose_document(blocks, ctx=self.ctx, now=FIXED_NOW)
        self.assertEqual(document.page_count, 2)
        for page in document.pages:
            footer = page.ops[-1]
            self.assertIsInstance(footer, TextOp)
            self.assertEqual(footer.text, "Gerado automaticamente")
            self.assertEqual(footer.y, 282.0)

    def test_empty_document_has_one_blank_page(self) -> None:
        document = compose_document([], ctx=self.ctx, now=FIXED_NOW)
        self.assertEqual(document.page_count, 1)
        self.assertEqual(document.pages[0].ops, ())

    def test_block_taller_than_page_is_rejected(self) -> None:
        with self.assertRaises(StructuralInputError):
            compose_document([TextBlock("x", box_height=250)], ctx=self.ctx)

    def test_unmeasurable_font_aborts_before_layout(self) -> None:
        cases = (
            RenderContext(metrics=MonospaceTextMetrics(), style=DocumentStyle(footer_size=0)),
            RenderContext(metrics=FpdfTextMetrics(), style=DocumentStyle(font_family="nope")),
        )
        for ctx in cases:
            with self.subTest(ctx=ctx.style):
                with mock.patch("osprint.render.compose.render_block") as render_block:
                    with self.assertRaises(MeasurementUnavailable):
                        compose_document([FieldRow("Nome:", "Ana")], ctx=ctx)
                render_block.assert_not_called()

    def test_text_outside_core_font_still_renders(self) -> None:
        fields = dict(WORK_ORDER_SAMPLE, descricao="Troca – “cabo” concluída ✓")
        document = build_work_order(fields, ctx=RenderContext(), now=FIXED_NOW)
        texts = [op.text for page in document.pages for op in page.ops if isinstance(op, TextOp)]
        self.assertIn("Troca ? ?cabo? concluída ?", texts)
        self.assertTrue(render_document_to_pdf_bytes(document).startswith(b"%PDF"))

    def test_number_and_filename(self) -> None:
        document = compose_document([], ctx=self.ctx, now=FIXED_NOW, rng=random.Random(11))
        expected = format_os_number(FIXED_NOW, random.Random(11))
        self.assertEqual(document.number, expected)
        self.assertEqual(document.filename, f"OS_{expected}_20240305_1430.pdf")

    def test_explicit_number_and_filename_win(self) -> None:
        document = compose_document(
            [],
            ctx=self.ctx,
            number="240305001",
            filename="recibo.pdf",
            now=FIXED_NOW,
        )
        self.assertEqual(document.number, "240305001")
        self.assertEqual(document.filename, "recibo.pdf")


if __name__ == "__main__":
    unittest.main()
