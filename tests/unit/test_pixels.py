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

from greenpass.core.models import ImageSample
from greenpass.imaging.pixels import OPAQUE_ALPHA, normalize, normalize_sample


class TestNormalize(unittest.TestCase):
    def test_expands_rgb_to_opaque_rgba(self) -> None:
        samples = bytes([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12])
        buffer = normalize(samples, 2, 2)
        self.assertEqual(buffer.width, 2)
        self.assertEqual(buffer.height, 2)
        self.assertEqual(
            buffer.data,
            bytes([1, 2, 3, 255, 4, 5, 6, 255, 7, 8, 9, 255, 10, 11, 12, 255]),
        )

    def test_length_and_alpha_positions(self) -> None:
        width, height = 5, 3
        samples = bytes(range(width * height * 3))
        data = normalize(samples, width, height).data
        self.assertEqual(len(data), width * height * 4)
        for index in range(width * height):
            with self.subTest(pixel=index):
                self.assertEqual(data[4 * index + 3], OPAQUE_ALPHA)
                self.assertEqual(data[4 * index : 4 * index + 3], samples[3 * index : 3 * index + 3])

    def test_single_pixel(self) -> None:
        self.assertEqual(normalize(b"\x00\x00\x00", 1, 1).data, b"\x00\x00\x00\xff")

    def test_accepts_bytearray(self) -> None:
        self.assertEqual(normalize(bytearray(b"\x10\x20\x30"), 1, 1).data, b"\x10\x20\x30\xff")

    def test_rejects_length_mismatch(self) -> None:
        with self.assertRaisesRegex(ValueError, "samples must be 12 bytes, got 11"):
            normalize(b"\x00" * 11, 2, 2)

    def test_rejects_non_positive_dimensions(self) -> None:
        for width, height in ((0, 1), (1, 0), (-2, 3)):
            with self.subTest(width=width, height=height):
                with self.assertRaises(ValueError):
                    normalize(b"", width, height)

    def test_normalize_sample(self) -> None:
        sample = ImageSample(samples=b"\xff\x00\x00" * 2, width=2, height=1)
        buffer = normalize_sample(sample)
        self.assertEqual(buffer.data, b"\xff\x00\x00\xff" * 2)
        self.assertEqual((buffer.width, buffer.height), (2, 1))


class TestImageSample(unittest.TestCase):
    def test_rejects_inconsistent_sample_length(self) -> None:
        with self.assertRaises(ValueError):
            ImageSample(samples=b"\x00" * 5, width=1, height=2)


if __name__ == "__main__":
    unittest.main()
