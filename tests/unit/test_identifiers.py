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
from datetime import datetime
from unittest import mock

from osprint.render.identifiers import build_filename, format_os_number
from tests.test_support import FIXED_NOW


class TestFormatOsNumber(unittest.TestCase):
    def test_date_prefix_and_padded_suffix(self) -> None:
        rng = mock.Mock()
        rng.randrange.return_value = 7
        self.assertEqual(format_os_number(FIXED_NOW, rng), "240305007")
        rng.randrange.assert_called_once_with(1000)

    def test_suffix_range(self) -> None:
        for suffix, expected in ((0, "240305000"), (999, "240305999")):
            rng = mock.Mock()
            rng.randrange.return_value = suffix
            with self.subTest(suffix=suffix):
                self.assertEqual(format_os_number(FIXED_NOW, rng), expected)

    def test_seeded_rng_is_deterministic(self) -> None:
        first = format_os_number(FIXED_NOW, random.Random(42))
        second = format_os_number(FIXED_NOW, random.Random(42))
        self.assertEqual(first, second)
        self.assertEqual(len(first), 9)
        self.assertTrue(first.isdigit())

    def test_defaults_to_current_time(self) -> None:
        with mock.patch("osprint.render.identifiers.datetime") as fake_datetime:
            fake_datetime.now.return_value = datetime(2025, 12, 31, 23, 59)
            value = format_os_number()
        self.assertTrue(value.startswith("251231"))


class TestBuildFilename(unittest.TestCase):
    def test_filename_parts(self) -> None:
        self.assertEqual(
            build_filename("OS", "240305007", FIXED_NOW),
            "OS_240305007_20240305_1430.pdf",
        )

    def test_empty_prefix_is_skipped(self) -> None:
        self.assertEqual(
            build_filename("", "240305007", FIXED_NOW, extension="html"),
            "240305007_20240305_1430.html",
        )


if __name__ == "__main__":
    unittest.main()
