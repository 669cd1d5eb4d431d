#!/usr/bin/env python3
from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import segno

from ..core.models import DEFAULT_QR_SIZE

# Quiet zone around the rendered certificate, in modules.
DEFAULT_BORDER = 8

# (upper light, lower light) -> glyph; light modules are drawn so dark ones
# take the terminal background.
_HALF_BLOCKS = {
    (True, True): "█",
    (True, False): "▀",
    (False, True): "▄",
    (False, False): " ",
}

Color = str | tuple[int, int, int] | tuple[int, int, int, int] | None


@dataclass(frozen=True)
class QrConfig:
    error: str = "Q"
    scale: int = 4
    border: int = DEFAULT_BORDER
    kind: str = "png"
    dark: Color = None
    light: Color = None
    size: int = DEFAULT_QR_SIZE


def make_qr(data: str, *, error: str = "Q") -> Any:
    # Full-size symbols only; certificate readers do not accept Micro QR.
    return segno.make(data, error=error, micro=False)


def scale_for_size(qr: Any, size: int, *, border: int) -> int:
    width, _height = qr.symbol_size(scale=1, border=border)
    return max(1, size // width)


def qr_bytes(
    data: str,
    *,
    error: str = "Q",
    scale: int = 4,
    border: int = DEFAULT_BORDER,
    kind: str = "png",
    dark: Color = None,
    light: Color = None,
    size: int | None = None,
) -> bytes:
    qr = make_qr(data, error=error)
    if size is not None:
        scale = scale_for_size(qr, size, border=border)
    buf = io.BytesIO()
    qr.save(
        buf,
        kind=kind,
        scale=scale,
        border=border,
        **_colors(dark, light),
    )
    return buf.getvalue()


def save_qr(
    path: str | Path,
    data: str,
    *,
    config: QrConfig | None = None,
    size: int | None = None,
) -> None:
    config = config or QrConfig()
    kind = Path(path).suffix.lower().lstrip(".") or config.kind
    payload = qr_bytes(
        data,
        error=config.error,
        scale=config.scale,
        border=config.border,
        kind=kind,
        dark=config.dark,
        light=config.light,
        size=size,
    )
    with open(path, "wb") as handle:
        handle.write(payload)


def render_text(data: str, *, error: str = "Q", border: int = 2) -> str:
    """Render the symbol with half-block glyphs, two module rows per line."""
    qr = make_qr(data, error=error)
    rows = [[not dark for dark in row] for row in qr.matrix_iter(scale=1, border=border)]
    if len(rows) % 2:
        rows.append([True] * len(rows[0]))
    lines = []
    for upper, lower in zip(rows[0::2], rows[1::2]):
        lines.append("".join(_HALF_BLOCKS[(top, bottom)] for top, bottom in zip(upper, lower)))
    return "\n".join(lines)


def _colors(dark: Color, light: Color) -> dict[str, Color]:
    # segno falls back to its own defaults for unset colors.
    return {key: value for key, value in (("dark", dark), ("light", light)) if value is not None}
