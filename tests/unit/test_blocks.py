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

import unittest

from osprint.core.errors import StructuralInputError
from osprint.render.blocks import (
    PLACEHOLDER,
    block_height,
    footer_ops,
    render_block,
    text_block_content_height,
)
from osprint.render.cursor import Cursor
from osprint.render.geometry import font_line_height
from osprint.render.types import (
    FieldRow,
    Footer,
    Heading,
    LineOp,
    Paragraph,
    RectOp,
    SectionTitle,
    SignaturePair,
    Spacer,
    TextBlock,
    TextOp,
)
from tests.test_support import A4, monospace_context


def _texts(ops) -> list[TextOp]:
    return [op for op in ops if isinstance(op, TextOp)]


def _lines(ops) -> list[LineOp]:
    return [op for op in ops if isinstance(op, LineOp)]


class TestBlockHeights(unittest.TestCase):
    def setUp(self) -> None:
        self.ctx = monospace_context()

    def test_fixed_heights(self) -> None:
        cases = (
            (Heading("T", "S", "N"), 40.0),
            (SectionTitle("DADOS"), 12.0),
            (FieldRow("Nome:", "Ana"), 8.0),
            (TextBlock("texto", box_height=40), 55.0),
            (SignaturePair("A", "B"), 30.0),
            (SignaturePair("A", "B", title="ASSINATURAS"), 60.0),
            (Spacer(15), 0.0),
            (Footer("rodapé"), 0.0),
        )
        for block, expected in cases:
            with self.subTest(block=type(block).__name__):
                self.assertAlmostEqual(block_height(block, self.ctx), expected)

    def test_paragraph_height(self) -> None:
        block = Paragraph(("linha um", "linha dois"))
        self.assertAlmostEqual(block_height(block, self.ctx), 2 * font_line_height(9, 1.5))

    def test_invalid_sizes(self) -> None:
        for block in (TextBlock("x", box_height=0), Spacer(-1)):
            with self.subTest(block=block):
                with self.assertRaises(StructuralInputError):
                    block_height(block, self.ctx)

    def test_unknown_block(self) -> None:
        with self.assertRaises(TypeError):
            block_height(object(), self.ctx)  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            render_block(object(), Cursor.start(A4), self.ctx)  # type: ignore[arg-type]


class TestRenderBlocks(unittest.TestCase):
    def setUp(self) -> None:
        self.ctx = monospace_context()
        self.cursor = Cursor(A4, page_index=0, y=50.0)

    def test_first_op_starts_at_cursor(self) -> None:
        blocks = (
            Heading("ORDEM DE SERVIÇO", "Sistema", "OS Nº 1"),
            SectionTitle("DADOS"),
            FieldRow("Nome:", "Ana"),
            TextBlock("texto"),
            SignaturePair("A", "B", title="ASSINATURAS"),
            Paragraph(("linha",)),
        )
        for block in blocks:
            with self.subTest(block=type(block).__name__):
                ops, moved = render_block(block, self.cursor, self.ctx)
                first = ops[0]
                first_y = first.y1 if isinstance(first, LineOp) else first.y
                self.assertAlmostEqual(first_y, 50.0)
                self.assertAlmostEqual(moved.y, 50.0 + block_height(block, self.ctx))
                self.assertEqual(self.cursor.y, 50.0)

    def test_heading_layout(self) -> None:
        ops, _ = render_block(Heading("T", "S", "N"), self.cursor, self.ctx)
        self.assertEqual([op.text for op in _texts(ops)], ["T", "S", "N"])
        self.assertEqual([op.y for op in _texts(ops)], [50.0, 60.0, 65.0])
        rule = _lines(ops)[0]
        self.assertEqual((rule.x1, rule.x2, rule.y1), (20.0, 190.0, 75.0))
        self.assertEqual(rule.width, 1.0)

    def test_section_title_bar(self) -> None:
        ops, _ = render_block(SectionTitle("DADOS"), self.cursor, self.ctx)
        bar, text = ops
        self.assertIsInstance(bar, RectOp)
        self.assertEqual((bar.x, bar.width, bar.height), (20.0, 170.0, 8.0))
        self.assertEqual((text.x, text.y, text.text), (23.0, 56.0, "DADOS"))

    def test_empty_field_value_renders_placeholder(self) -> None:
        ops, _ = render_block(FieldRow("Nome:", ""), self.cursor, self.ctx)
        label, value = _texts(ops)
        self.assertEqual(label.text, "Nome:")
        self.assertEqual(label.font.style, "B")
        self.assertEqual(value.text, PLACEHOLDER)
        self.assertEqual(len(PLACEHOLDER), 30)

    def test_long_field_value_is_truncated(self) -> None:
        ops, _ = render_block(FieldRow("Nome:", "x" * 200), self.cursor, self.ctx)
        label, value = _texts(ops)
        label_width = self.ctx.metrics.measure("Nome:", label.font) + 5
        self.assertAlmostEqual(value.x, 20.0 + label_width)
        self.assertEqual(value.text, "x" * 60 + "...")
        self.assertLessEqual(
            self.ctx.metrics.measure(value.text, value.font), 170.0 - label_width - 5
        )
        underline = _lines(ops)[0]
        self.assertAlmostEqual(underline.y1, 51.0)
        self.assertAlmostEqual(underline.x2, 190.0)

    def test_long_label_keeps_value_on_the_page(self) -> None:
        ops, _ = render_block(FieldRow("Rótulo " * 40, "valor"), self.cursor, self.ctx)
        label, value = _texts(ops)
        underline = _lines(ops)[0]
        self.assertTrue(label.text.endswith("..."))
        self.assertLessEqual(self.ctx.metrics.measure(label.text, label.font), 80.0)
        self.assertLessEqual(value.x, 20.0 + 85.0)
        self.assertEqual(value.text, "valor")
        self.assertAlmostEqual(underline.x1, value.x)
        self.assertLess(underline.x1, underline.x2)
        self.assertAlmostEqual(underline.x2, 190.0)

    def test_text_block_clips_overflow(self) -> None:
        text = "\n".join(f"linha {idx}" for idx in range(20))
        ops, moved = render_block(TextBlock(text, box_height=40), self.cursor, self.ctx)
        box = ops[0]
        self.assertIsInstance(box, RectOp)
        self.assertEqual(box.style, "FD")
        lines = _texts(ops)
        self.assertEqual([op.text for op in lines], [f"linha {idx}" for idx in range(6)])
        self.assertAlmostEqual(lines[0].y, 58.0)
        for op in lines:
            self.assertLessEqual(op.y + 3, 90.0)
        self.assertAlmostEqual(moved.y, 105.0)

    def test_text_block_content_height(self) -> None:
        text = "\n".join(f"linha {idx}" for idx in range(20))
        expected = 8 + 19 * font_line_height(12) + 3
        self.assertAlmostEqual(text_block_content_height(TextBlock(text), self.ctx), expected)
        self.assertEqual(text_block_content_height(TextBlock(""), self.ctx), 0.0)

    def test_empty_text_block_draws_only_the_box(self) -> None:
        ops, _ = render_block(TextBlock(""), self.cursor, self.ctx)
        self.assertEqual(len(ops), 1)

    def test_signature_pair_with_two_slots(self) -> None:
        block = SignaturePair("Contratante", "Contratada", title="ASSINATURAS", date_text="Data: x")
        ops, _ = render_block(block, self.cursor, self.ctx)
        slots = _lines(ops)
        self.assertEqual(len(slots), 2)
        self.assertEqual([(line.x1, line.x2) for line in slots], [(30.0, 100.0), (110.0, 180.0)])
        self.assertTrue(all(line.y1 == 80.0 for line in slots))
        texts = {op.text: op for op in _texts(ops)}
        self.assertEqual(texts["ASSINATURAS"].y, 50.0)
        self.assertEqual(texts["Contratante"].y, 88.0)
        self.assertEqual(texts["Contratada"].x, 145.0)
        self.assertEqual(texts["Data: x"].y, 105.0)

    def test_signature_single_slot_is_centred(self) -> None:
        ops, moved = render_block(SignaturePair("Assinatura"), self.cursor, self.ctx)
        (line,) = _lines(ops)
        self.assertEqual((line.x1, line.x2, line.y1), (70.0, 140.0, 50.0))
        self.assertEqual(moved.y, 80.0)

    def test_paragraph_lines_are_centred(self) -> None:
        ops, _ = render_block(Paragraph(("um", "dois")), self.cursor, self.ctx)
        self.assertEqual([op.align for op in ops], ["center", "center"])
        self.assertAlmostEqual(ops[1].y - ops[0].y, font_line_height(9, 1.5))

    def test_spacer_advances_without_drawing(self) -> None:
        ops, moved = render_block(Spacer(15), self.cursor, self.ctx)
        self.assertEqual(ops, [])
        self.assertEqual(moved.y, 65.0)

    def test_spacer_is_clamped_to_bottom_margin(self) -> None:
        ops, moved = render_block(Spacer(20), Cursor(A4, page_index=0, y=270.0), self.ctx)
        self.assertEqual(ops, [])
        self.assertEqual(moved.y, 277.0)
        self.assertEqual(moved.page_index, 0)

    def test_footer_is_not_a_flow_block(self) -> None:
        with self.assertRaises(TypeError):
            render_block(Footer("rodapé"), self.cursor, self.ctx)

    def test_footer_ops(self) -> None:
        (op,) = footer_ops(Footer("rodapé"), self.ctx)
        self.assertEqual((op.x, op.y, op.align), (105.0, 282.0, "center"))
        self.assertEqual(footer_ops(Footer(""), self.ctx), [])


if __name__ == "__main__":
    unittest.main()
