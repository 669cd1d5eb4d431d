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

"""Pull the first painted raster image out of a PDF's first page.

Only the page's content stream is parsed; nothing is rendered. The first
``Do`` operation that paints an image XObject wins, later ones are ignored.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Callable, Sequence
from typing import Any

from pypdf import PageObject, PdfReader
from pypdf.errors import PyPdfError
from pypdf.generic import DictionaryObject

from ..core.errors import MalformedDocument, NoImageFound
from ..core.models import ImageSample

logger = logging.getLogger(__name__)

PAINT_XOBJECT = b"Do"
_IMAGE_SUBTYPE = "/Image"
_FORM_SUBTYPE = "/Form"

# pypdf surfaces broken structure as a mix of its own and builtin exceptions.
_PARSE_ERRORS = (PyPdfError, OSError, ValueError, KeyError, TypeError, AttributeError)
_IMAGE_DECODE_ERRORS = (PyPdfError, OSError, ValueError, KeyError, NotImplementedError)

Operation = tuple[Sequence[Any], bytes]


def extract_first_image(document: bytes) -> ImageSample:
    if not document:
        raise MalformedDocument("document is empty")
    reader = _open_document(document)
    page = _first_page(reader)
    operations = _page_operations(page)
    xobjects = _page_xobjects(page)
    index = find_first_paint_image(operations, lambda name: _subtype(xobjects.get(str(name))))
    if index is None:
        raise NoImageFound("no image is painted on the first page")
    operands, _operator = operations[index]
    name = str(operands[0])
    xobject = xobjects.get(name)
    if xobject is None:
        raise NoImageFound(f"image resource {name} is not defined on the first page")
    logger.debug("painting operation %d references image %s", index, name)
    return _decode_image(page, name, xobject)


def find_first_paint_image(
    operations: Sequence[Operation],
    subtype_of: Callable[[object], str | None],
) -> int | None:
    """Return the index of the first operation painting an image XObject.

    Form XObjects are skipped; a name that resolves to nothing still counts as
    the paint operation so the caller can report it.
    """
    for index, (operands, operator) in enumerate(operations):
        if operator != PAINT_XOBJECT or not operands:
            continue
        if subtype_of(operands[0]) == _FORM_SUBTYPE:
            continue
        return index
    return None


def _open_document(document: bytes) -> PdfReader:
    try:
        return PdfReader(io.BytesIO(bytes(document)))
    except _PARSE_ERRORS as exc:
        raise MalformedDocument(f"failed to read PDF: {exc}") from exc


def _first_page(reader: PdfReader) -> PageObject:
    try:
        pages = reader.pages
        page = pages[0] if len(pages) else None
    except _PARSE_ERRORS as exc:
        raise MalformedDocument(f"failed to load first page: {exc}") from exc
    if page is None:
        raise NoImageFound("document has no pages")
    return page


def _page_operations(page: PageObject) -> list[Operation]:
    try:
        contents = page.get_contents()
        if contents is None:
            return []
        return list(contents.operations)
    except _PARSE_ERRORS as exc:
        raise MalformedDocument(f"failed to parse page content stream: {exc}") from exc


def _page_xobjects(page: PageObject) -> dict[str, DictionaryObject]:
    """Map each XObject name on the page to its resolved dictionary."""
    try:
        resources = page.get("/Resources")
        if resources is None:
            return {}
        resources = resources.get_object()
        if not isinstance(resources, DictionaryObject):
            raise MalformedDocument("page /Resources is not a dictionary")
        xobjects = resources.get("/XObject")
        if xobjects is None:
            return {}
        xobjects = xobjects.get_object()
        if not isinstance(xobjects, DictionaryObject):
            raise MalformedDocument("page /XObject resources are not a dictionary")
        resolved = {}
        for name, value in xobjects.items():
            xobject = value.get_object()
            # streams are dictionaries too; anything else cannot be painted
            if isinstance(xobject, DictionaryObject):
                resolved[str(name)] = xobject
        return resolved
    except _PARSE_ERRORS as exc:
        raise MalformedDocument(f"failed to resolve page resources: {exc}") from exc


def _subtype(xobject: DictionaryObject | None) -> str | None:
    if xobject is None:
        return None
    subtype = xobject.get("/Subtype")
    return None if subtype is None else str(subtype)


def _decode_image(page: PageObject, name: str, xobject: DictionaryObject) -> ImageSample:
    if _subtype(xobject) != _IMAGE_SUBTYPE:
        raise NoImageFound(f"resource {name} is not an image")
    try:
        image_file = page.images[name]
        image = image_file.image
        if image is None:
            raise ValueError("image data is empty")
        rgb = image.convert("RGB")
        samples = rgb.tobytes()
    except _IMAGE_DECODE_ERRORS as exc:
        raise MalformedDocument(f"failed to decode image {name}: {exc}") from exc
    width, height = rgb.size
    return ImageSample(samples=samples, width=width, height=height)
