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

"""Present a green pass certificate scanned from a camera or read from a PDF."""

from .acquisition.orchestrator import AcquisitionOrchestrator
from .core.errors import (
    AcquisitionStateError,
    ExtractionError,
    ImportCancelled,
    ImportFailure,
    MalformedDocument,
    NoImageFound,
    NoReadableCode,
)
from .core.models import AcquisitionMode, DisplayState, ImageSample, PixelBuffer
from .core.validation import HC1_PREFIX, validate_payload
from .imaging.pixels import normalize
from .pdf.extract import extract_first_image
from .storage.store import JsonFileStore, MemoryStore, PayloadStore

__all__ = [
    "AcquisitionMode",
    "AcquisitionOrchestrator",
    "AcquisitionStateError",
    "DisplayState",
    "ExtractionError",
    "HC1_PREFIX",
    "ImageSample",
    "ImportCancelled",
    "ImportFailure",
    "JsonFileStore",
    "MalformedDocument",
    "MemoryStore",
    "NoImageFound",
    "NoReadableCode",
    "PayloadStore",
    "PixelBuffer",
    "extract_first_image",
    "normalize",
    "validate_payload",
]
