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

from dataclasses import dataclass
from enum import Enum

RGB_CHANNELS = 3
RGBA_CHANNELS = 4

# Rendered QR edge length used until a PDF import supplies the source image height.
DEFAULT_QR_SIZE = 404


class AcquisitionMode(str, Enum):
    IDLE = "idle"
    CAMERA_SCANNING = "camera_scanning"
    RESULT_DISPLAYED = "result_displayed"


@dataclass(frozen=True)
class ImageSample:
    """Row-major RGB samples of an image painted on a PDF page."""

    samples: bytes
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("image dimensions must be positive")
        expected = self.width * self.height * RGB_CHANNELS
        if len(self.samples) != expected:
            raise ValueError(
                f"image samples must be {expected} bytes for "
                f"{self.width}x{self.height}, got {len(self.samples)}"
            )


@dataclass(frozen=True)
class PixelBuffer:
    """Row-major RGBA pixels ready for QR decoding."""

    data: bytes
    width: int
    height: int


@dataclass(frozen=True)
class DisplayState:
    mode: AcquisitionMode = AcquisitionMode.IDLE
    payload: str | None = None
    qr_size: int = DEFAULT_QR_SIZE

    @property
    def has_result(self) -> bool:
        return self.mode is AcquisitionMode.RESULT_DISPLAYED and self.payload is not None

    def to_dict(self) -> dict[str, object]:
        return {
            "mode": self.mode.value,
            "payload": self.payload,
            "qr_size": self.qr_size,
        }
