import io
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from unittest import mock

import segno
from fpdf import FPDF
from PIL import Image
from pypdf import PdfWriter
from pypdf.generic import ContentStream

from greenpass.qr.scan import QrDecoder

# =============================================================================
# Test Constants
# =============================================================================

TEST_PAYLOAD = "HC1:TESTDATA"
RED = (255, 0, 0)
BLUE = (0, 0, 255)


# =============================================================================
# Environment Helpers
# =============================================================================


@contextmanager
def temp_env(overrides: dict[str, str], *, clear: bool = False):
    with mock.patch.dict(os.environ, overrides, clear=clear):
        yield


@contextmanager
def temp_config(*, store_name: str = "store.json"):
    """Yield (config_path, store_path) for a throwaway config file."""
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        store_path = root / store_name
        config_path = root / "config.toml"
        config_path.write_text(
            f'[storage]\npath = "{store_path.as_posix()}"\n\n[qr]\nborder = 4\n',
            encoding="utf-8",
        )
        yield config_path, store_path


# =============================================================================
# Image Builders
# =============================================================================


def make_qr_image(text: str = TEST_PAYLOAD, *, scale: int = 1, border: int = 0) -> Image.Image:
    """Render text as an RGB QR image; scale=1, border=0 gives one pixel per module."""
    qr = segno.make(text, error="L", micro=False)
    buf = io.BytesIO()
    qr.save(buf, kind="png", scale=scale, border=border)
    buf.seek(0)
    with Image.open(buf) as image:
        return image.convert("RGB")


def solid_image(color: tuple[int, int, int], size: tuple[int, int] = (4, 3)) -> Image.Image:
    return Image.new("RGB", size, color)


# =============================================================================
# PDF Builders
# =============================================================================


def build_pdf(images: list[Image.Image], *, page_size: tuple[float, float] = (300, 300)) -> bytes:
    """Build a one-page PDF painting each image in order."""
    pdf = FPDF(unit="pt", format=page_size)
    pdf.add_page()
    y = 10.0
    for image in images:
        pdf.image(image, x=10, y=y, w=image.width, h=image.height)
        y += image.height + 10
    return bytes(pdf.output())


def build_blank_pdf() -> bytes:
    writer = PdfWriter()
    writer.add_blank_page(width=200, height=200)
    buf = io.BytesIO()
    writer.write(buf)
    return buf.getvalue()


def build_pdf_with_content(content: bytes) -> bytes:
    """One-page PDF with a raw content stream and no resources."""
    writer = PdfWriter()
    page = writer.add_blank_page(width=200, height=200)
    stream = ContentStream(None, writer)
    stream.set_data(content)
    page.replace_contents(stream)
    buf = io.BytesIO()
    writer.write(buf)
    return buf.getvalue()


def _pdf_stream(header: bytes, data: bytes) -> bytes:
    return b"<< " + header + b" /Length %d >>\nstream\n" % len(data) + data + b"\nendstream"


def raw_image_xobject(color: tuple[int, int, int], size: tuple[int, int] = (4, 3)) -> bytes:
    """Uncompressed DeviceRGB image XObject filled with one color."""
    width, height = size
    header = (
        b"/Type /XObject /Subtype /Image /Width %d /Height %d "
        b"/ColorSpace /DeviceRGB /BitsPerComponent 8" % (width, height)
    )
    return _pdf_stream(header, bytes(color) * (width * height))


def raw_form_xobject(content: bytes = b"") -> bytes:
    return _pdf_stream(b"/Type /XObject /Subtype /Form /BBox [0 0 10 10]", content)


def build_raw_pdf(
    content: bytes,
    *,
    xobjects: dict[str, bytes] | None = None,
    resources: bytes | None = None,
) -> bytes:
    """Assemble a one-page PDF by hand.

    ``xobjects`` maps resource names (without the slash) to object bodies, kept
    in the given order. ``resources`` replaces the page's /Resources entry.
    """
    xobjects = xobjects or {}
    first = 5
    refs = b" ".join(
        b"/%s %d 0 R" % (name.encode("ascii"), first + offset)
        for offset, name in enumerate(xobjects)
    )
    if resources is None:
        resources = b"<< /XObject << " + refs + b" >> >>"
    bodies = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 200 200] /Resources "
        + resources
        + b" /Contents 4 0 R >>",
        _pdf_stream(b"", content),
        *xobjects.values(),
    ]
    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(bodies, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"
    xref_offset = len(out)
    out += b"xref\n0 %d\n0000000000 65535 f \n" % (len(bodies) + 1)
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(bodies) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    return bytes(out)


# =============================================================================
# Decoder Doubles
# =============================================================================


def make_stub_decoder(
    *,
    pixels_result: list[str] | None = None,
    path_result: list[str] | None = None,
    name: str = "stub-decoder",
) -> QrDecoder:
    """Decoder whose callables are mocks, so tests can inspect the calls."""
    return QrDecoder(
        name=name,
        decode_pixels=mock.Mock(return_value=list(pixels_result or [])),
        decode_image_path=mock.Mock(return_value=list(path_result or [])),
    )
