#!/usr/bin/env python3
from __future__ import annotations

from ..core.models import RGB_CHANNELS, RGBA_CHANNELS, ImageSample, PixelBuffer
from ..core.validation import require_bytes_like, require_length, require_positive_int

OPAQUE_ALPHA = 0xFF


def normalize(samples: bytes, width: int, height: int) -> PixelBuffer:
    """Expand packed RGB samples to RGBA with an opaque alpha channel.

    Channel order and pixel order are preserved; nothing is resampled or
    color-converted.
    """
    require_positive_int(width, label="width")
    require_positive_int(height, label="height")
    raw = require_bytes_like(samples, label="samples")
    pixel_count = width * height
    require_length(raw, pixel_count * RGB_CHANNELS, label="samples")

    rgba = bytearray([OPAQUE_ALPHA]) * (pixel_count * RGBA_CHANNELS)
    for channel in range(RGB_CHANNELS):
        rgba[channel::RGBA_CHANNELS] = raw[channel::RGB_CHANNELS]
    return PixelBuffer(data=bytes(rgba), width=width, height=height)


def normalize_sample(sample: ImageSample) -> PixelBuffer:
    return normalize(sample.samples, sample.width, sample.height)
