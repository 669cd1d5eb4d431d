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

"""Mode machine for camera and PDF acquisition of a certificate payload.

Idle -> CameraScanning -> ResultDisplayed, or Idle -> ResultDisplayed through
a PDF import. Reset always returns to Idle and empties the store. Frames and
documents that do not yield an accepted payload leave the mode untouched.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from dataclasses import replace

from ..core.errors import AcquisitionStateError, ImportCancelled, NoReadableCode
from ..core.models import AcquisitionMode, DisplayState
from ..core.validation import validate_payload
from ..imaging.pixels import normalize_sample
from ..pdf.extract import extract_first_image
from ..qr.scan import QrDecoder, load_decoder
from ..storage.store import PayloadStore

logger = logging.getLogger(__name__)


class AcquisitionOrchestrator:
    def __init__(self, store: PayloadStore, *, decoder: QrDecoder | None = None) -> None:
        self._store = store
        self._decoder = decoder
        self._state = DisplayState()

    @property
    def state(self) -> DisplayState:
        return self._state

    @property
    def mode(self) -> AcquisitionMode:
        return self._state.mode

    @property
    def payload(self) -> str | None:
        return self._state.payload

    def load(self) -> DisplayState:
        stored = self._store.load()
        if stored:
            self._state = DisplayState(mode=AcquisitionMode.RESULT_DISPLAYED, payload=stored)
            logger.debug("restored persisted payload")
        else:
            self._state = DisplayState()
        return self._state

    def begin_scan(self) -> None:
        self._require_mode(AcquisitionMode.IDLE, action="start scanning")
        self._state = replace(self._state, mode=AcquisitionMode.CAMERA_SCANNING)

    def cancel_scan(self) -> None:
        if self._state.mode is not AcquisitionMode.CAMERA_SCANNING:
            return
        self._state = replace(self._state, mode=AcquisitionMode.IDLE)

    def offer_frame(self, candidate: str) -> bool:
        if self._state.mode is not AcquisitionMode.CAMERA_SCANNING:
            # Late frames after a cancel or a hit are dropped.
            return False
        return self._accept(candidate, qr_size=self._state.qr_size)

    def scan_frames(self, candidates: Iterable[str]) -> bool:
        """Offer decoded frames in order until one is accepted."""
        if self._state.mode is not AcquisitionMode.CAMERA_SCANNING:
            self.begin_scan()
        for candidate in candidates:
            if self.offer_frame(candidate):
                return True
            if self._state.mode is not AcquisitionMode.CAMERA_SCANNING:
                break
        return False

    def import_document(
        self,
        document: bytes,
        *,
        cancel: threading.Event | None = None,
    ) -> bool:
        self._require_mode(AcquisitionMode.IDLE, action="import a document")
        sample = extract_first_image(document)
        _check_cancelled(cancel)
        buffer = normalize_sample(sample)
        _check_cancelled(cancel)
        decoded = self._get_decoder().decode_buffer(buffer)
        if decoded is None:
            logger.info(
                "no readable code in %dx%d image",
                sample.width,
                sample.height,
            )
            raise NoReadableCode("no readable QR code found in the document image")
        _check_cancelled(cancel)
        return self._accept(decoded, qr_size=sample.height)

    def reset(self) -> None:
        self._store.clear()
        self._state = DisplayState()

    def _accept(self, candidate: str, *, qr_size: int) -> bool:
        if not validate_payload(candidate):
            logger.debug("ignoring unrecognized payload (%d chars)", len(candidate or ""))
            return False
        self._store.save(candidate)
        self._state = DisplayState(
            mode=AcquisitionMode.RESULT_DISPLAYED,
            payload=candidate,
            qr_size=qr_size,
        )
        return True

    def _get_decoder(self) -> QrDecoder:
        if self._decoder is None:
            self._decoder = load_decoder()
        return self._decoder

    def _require_mode(self, expected: AcquisitionMode, *, action: str) -> None:
        if self._state.mode is not expected:
            raise AcquisitionStateError(
                f"cannot {action} while {self._state.mode.value.replace('_', ' ')}"
            )


def _check_cancelled(cancel: threading.Event | None) -> None:
    if cancel is not None and cancel.is_set():
        raise ImportCancelled("import cancelled")
