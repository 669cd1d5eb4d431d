#!/usr/bin/env python3
from __future__ import annotations

import functools
import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

import PIL.Image as pil_image
import zxingcpp

from ..core.models import PixelBuffer

logger = logging.getLogger(__name__)


class FrameSourceError(RuntimeError):
    pass


@dataclass(frozen=True)
class QrDecoder:
    name: str
    decode_pixels: Callable[[bytes, int, int], list[str]]
    decode_image_path: Callable[[Path], list[str]]

    def decode(self, buffer: bytes, width: int, height: int) -> str | None:
        """Decode an RGBA buffer; None means no readable QR symbol."""
        texts = self.decode_pixels(buffer, width, height)
        return texts[0] if texts else None

    def decode_buffer(self, buffer: PixelBuffer) -> str | None:
        return self.decode(buffer.data, buffer.width, buffer.height)


_IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tif", ".tiff", ".webp"}

_SMALL_IMAGE_EDGE = 64
_QUIET_ZONE_PX = 4
_UPSCALE = 4


def _decode_image(image, *, zxing_module) -> list[str]:
    results = zxing_module.read_barcodes(image, formats=zxing_module.BarcodeFormat.QRCode)
    texts: list[str] = []
    for result in results:
        text = getattr(result, "text", None)
        if text:
            texts.append(text)
    return texts


def _decode_pixels(
    buffer: bytes,
    width: int,
    height: int,
    *,
    zxing_module,
    image_module,
) -> list[str]:
    image = image_module.frombytes("RGBA", (width, height), bytes(buffer)).convert("L")
    texts = _decode_image(image, zxing_module=zxing_module)
    if texts or min(width, height) >= _SMALL_IMAGE_EDGE:
        return texts
    return _decode_image(_enlarge(image, image_module=image_module), zxing_module=zxing_module)


def _enlarge(image, *, image_module):
    # Embedded symbols are often one pixel per module with no quiet zone.
    margin = _QUIET_ZONE_PX
    canvas = image_module.new("L", (image.width + 2 * margin, image.height + 2 * margin), 255)
    canvas.paste(image, (margin, margin))
    return canvas.resize(
        (canvas.width * _UPSCALE, canvas.height * _UPSCALE),
        image_module.Resampling.NEAREST,
    )


def _decode_image_path(path: Path, *, zxing_module, image_module) -> list[str]:
    with image_module.open(path) as image:
        return _decode_image(image.convert("L"), zxing_module=zxing_module)


def load_decoder(
    *,
    zxing_module: Any = zxingcpp,
    image_module: Any = pil_image,
) -> QrDecoder:
    return QrDecoder(
        name="zxingcpp",
        decode_pixels=functools.partial(
            _decode_pixels,
            zxing_module=zxing_module,
            image_module=image_module,
        ),
        decode_image_path=functools.partial(
            _decode_image_path,
            zxing_module=zxing_module,
            image_module=image_module,
        ),
    )


def iter_frame_payloads(
    paths: Sequence[str | Path],
    decoder: QrDecoder | None = None,
) -> Iterator[str]:
    """Yield decoded strings from image frames, one frame at a time.

    Frames that cannot be opened are skipped, as a camera would drop them.
    """
    decoder = decoder or load_decoder()
    for path in expand_frame_paths(paths):
        try:
            texts = decoder.decode_image_path(path)
        except OSError as exc:
            logger.warning("skipping unreadable frame %s: %s", path, exc)
            continue
        if not texts:
            logger.debug("no QR code in frame %s", path)
        yield from texts


def expand_frame_paths(paths: Sequence[str | Path]) -> Iterable[Path]:
    for raw in paths:
        path = Path(raw).expanduser()
        if not path.exists():
            raise FrameSourceError(f"frame path not found: {path}")
        if path.is_dir():
            frames = _iter_frame_files(path)
            if not frames:
                raise FrameSourceError(f"no image frames found in directory: {path}")
            yield from frames
        else:
            yield path


def _iter_frame_files(directory: Path) -> list[Path]:
    files: list[Path] = []
    for path in sorted(directory.rglob("*")):
        if not path.is_file():
            continue
        if path.suffix.lower() in _IMAGE_SUFFIXES:
            files.append(path)
    return files
