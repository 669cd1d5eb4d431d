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

import io
import tempfile
import unittest
from pathlib import Path

from PIL import Image

from greenpass.qr.codec import (
    DEFAULT_BORDER,
    QrConfig,
    make_qr,
    qr_bytes,
    render_text,
    save_qr,
    scale_for_size,
)
from tests.test_support import TEST_PAYLOAD

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class TestQrCodec(unittest.TestCase):
    def test_png_signature(self) -> None:
        self.assertTrue(qr_bytes(TEST_PAYLOAD, kind="png").startswith(PNG_SIGNATURE))

    def test_default_border_matches_display_quiet_zone(self) -> None:
        self.assertEqual(DEFAULT_BORDER, 8)
        self.assertEqual(QrConfig().border, 8)
        self.assertEqual(QrConfig().size, 404)

    def test_scale_for_size(self) -> None:
        qr = make_qr(TEST_PAYLOAD, error="Q")
        # Version 1 symbol: 21 modules plus two 8-module borders.
        self.assertEqual(scale_for_size(qr, 404, border=8), 10)
        self.assertEqual(scale_for_size(qr, 10, border=8), 1)

    def test_size_controls_png_dimensions(self) -> None:
        png = qr_bytes(TEST_PAYLOAD, size=404, border=8)
        with Image.open(io.BytesIO(png)) as image:
            self.assertEqual(image.size, (370, 370))

    def test_save_qr_uses_suffix_for_kind(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            svg_path = Path(tmpdir) / "pass.svg"
            png_path = Path(tmpdir) / "pass.png"
            save_qr(svg_path, TEST_PAYLOAD)
            save_qr(png_path, TEST_PAYLOAD, config=QrConfig(dark="navy", light="white"), size=100)
            self.assertIn(b"<svg", svg_path.read_bytes())
            self.assertTrue(png_path.read_bytes().startswith(PNG_SIGNATURE))

    def test_render_text_line_layout(self) -> None:
        text = render_text(TEST_PAYLOAD, error="Q", border=2)
        lines = text.split("\n")
        # 25 module rows padded to 26, two rows per line.
        self.assertEqual(len(lines), 13)
        self.assertTrue(all(len(line) == 25 for line in lines))
        self.assertEqual(lines[0], "█" * 25)


if __name__ == "__main__":
    unittest.main()
