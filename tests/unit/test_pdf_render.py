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

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from osprint.forms.work_order import build_work_order
from osprint.render.pdf_render import (
    _draw_op,
    _text_x,
    render_document_to_pdf,
    render_document_to_pdf_bytes,
)
from osprint.render.text import FontSpec
from osprint.render.types import LineOp, RectOp, TextOp
from tests.test_support import FIXED_NOW, WORK_ORDER_SAMPLE


class TestPdfRender(unittest.TestCase):
    def test_work_order_pdf_bytes(self) -> None:
        document = build_work_order(WORK_ORDER_SAMPLE, now=FIXED_NOW)
        data = render_document_to_pdf_bytes(document)
        self.assertTrue(data.startswith(b"%PDF"))

    def test_render_to_nested_path(self) -> None:
        document = build_work_order({}, now=FIXED_NOW)
        with tempfile.TemporaryDirectory() as tmpdir:
            target = Path(tmpdir) / "saida" / document.filename
            written = render_document_to_pdf(document, target)
            self.assertEqual(written, target)
            self.assertTrue(target.read_bytes().startswith(b"%PDF"))

    def test_text_alignment(self) -> None:
        pdf = mock.Mock()
        pdf.get_string_width.return_value = 10.0
        font = FontSpec()
        cases = (("left", 105.0), ("center", 100.0), ("right", 95.0))
        for align, expected in cases:
            with self.subTest(align=align):
                op = TextOp(x=105.0, y=50.0, text="texto", font=font, align=align)
                self.assertEqual(_text_x(pdf, op), expected)

    def test_draw_ops_map_to_fpdf_calls(self) -> None:
        pdf = mock.Mock()
        pdf.get_string_width.return_value = 10.0
        _draw_op(pdf, RectOp(20, 30, 170, 8, style="F", fill=(1, 2, 3)))
        pdf.set_fill_color.assert_called_once_with(1, 2, 3)
        pdf.set_draw_color.assert_not_called()
        pdf.rect.assert_called_once_with(20, 30, 170, 8, style="F")

        _draw_op(pdf, LineOp(20, 75, 190, 75, color=(4, 5, 6), width=1.0))
        pdf.set_draw_color.assert_called_once_with(4, 5, 6)
        pdf.set_line_width.assert_called_once_with(1.0)
        pdf.line.assert_called_once_with(20, 75, 190, 75)

        _draw_op(pdf, TextOp(105, 50, "Título", FontSpec("times", "B", 24), align="center"))
        pdf.set_font.assert_called_once_with("times", style="B", size=24)
        pdf.text.assert_called_once_with(100.0, 50, "Título")

    def test_stroked_rect_resets_line_width(self) -> None:
        pdf = mock.Mock()
        _draw_op(pdf, LineOp(20, 75, 190, 75, width=1.0))
        _draw_op(pdf, RectOp(20, 90, 170, 40, style="FD", fill=(1, 2, 3), stroke=(4, 5, 6)))
        self.assertEqual(
            pdf.set_line_width.call_args_list,
            [mock.call(1.0), mock.call(0.2)],
        )
        pdf.rect.assert_called_once_with(20, 90, 170, 40, style="FD")

    def test_unknown_op(self) -> None:
        with self.assertRaises(TypeError):
            _draw_op(mock.Mock(), object())  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
