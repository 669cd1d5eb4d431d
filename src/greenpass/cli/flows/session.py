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

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from ...acquisition.orchestrator import AcquisitionOrchestrator
from ...config import AppConfig, load_app_config
from ...core.errors import ImportFailure
from ...core.models import AcquisitionMode
from ...qr.codec import render_text, save_qr
from ...qr.scan import FrameSourceError, QrDecoder, iter_frame_payloads, load_decoder
from ...storage.store import JsonFileStore, PayloadStore
from ..core.log import _warn
from ..ui import (
    build_kv_table,
    console,
    print_result_view,
    prompt_existing_path,
    prompt_home_action,
    prompt_result_action,
    prompt_yes_no,
    status,
)


@dataclass
class Session:
    config: AppConfig
    orchestrator: AcquisitionOrchestrator
    decoder: QrDecoder | None = None

    def frame_decoder(self) -> QrDecoder:
        if self.decoder is None:
            self.decoder = load_decoder()
        return self.decoder


def open_session(config_path: str | None, *, decoder: QrDecoder | None = None) -> Session:
    config = load_app_config(config_path)
    store = PayloadStore(JsonFileStore(config.storage.path), key=config.storage.key)
    orchestrator = AcquisitionOrchestrator(store, decoder=decoder)
    orchestrator.load()
    return Session(config=config, orchestrator=orchestrator, decoder=decoder)


def read_document(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    return Path(path).expanduser().read_bytes()


def run_import(session: Session, path: str, *, quiet: bool, display: bool = True) -> int:
    document = read_document(path)
    with status("Reading certificate from PDF...", quiet=quiet):
        accepted = session.orchestrator.import_document(document)
    if not accepted:
        _warn("the QR code in this document is not a certificate payload", quiet=quiet)
        return 1
    if display:
        show_result(session, quiet=quiet)
    return 0


def run_scan(
    session: Session,
    frames: Sequence[str],
    *,
    quiet: bool,
    display: bool = True,
) -> int:
    orchestrator = session.orchestrator
    try:
        accepted = orchestrator.scan_frames(
            iter_frame_payloads(frames, decoder=session.frame_decoder())
        )
    finally:
        orchestrator.cancel_scan()
    if not accepted:
        _warn("no certificate payload found in the scanned frames", quiet=quiet)
        return 1
    if display:
        show_result(session, quiet=quiet)
    return 0


def run_reset(session: Session, *, assume_yes: bool, quiet: bool) -> int:
    if not assume_yes and sys.stdin.isatty():
        if not prompt_yes_no("Remove the stored certificate?", default=False):
            return 1
    session.orchestrator.reset()
    if not quiet:
        console.print("[success]Stored certificate removed.[/success]")
    return 0


def show_result(
    session: Session,
    *,
    quiet: bool,
    output: str | None = None,
    size: int | None = None,
) -> int:
    state = session.orchestrator.state
    if not state.has_result or state.payload is None:
        _warn(
            "no certificate stored; run `greenpass scan` or `greenpass import` first",
            quiet=quiet,
        )
        return 1
    qr_config = session.config.qr_config
    if output:
        save_qr(
            output,
            state.payload,
            config=qr_config,
            size=size or min(state.qr_size, qr_config.size),
        )
        if not quiet:
            console.print(f"[success]Saved QR code to {output}[/success]")
    if not quiet:
        print_result_view(render_text(state.payload, error=qr_config.error), state.payload)
    return 0


def print_status(session: Session) -> int:
    state = session.orchestrator.state
    rows = [
        ("Mode", state.mode.value.replace("_", " ")),
        ("Certificate", "stored" if state.has_result else "none"),
        ("Store", str(session.config.storage.path)),
        ("Config", str(session.config.config_path)),
    ]
    console.print(build_kv_table(rows, title="greenpass"))
    return 0


def run_home(session: Session, *, quiet: bool) -> int:
    """Interactive loop: chooser while idle, result view once a payload is held."""
    orchestrator = session.orchestrator
    while True:
        if orchestrator.mode is AcquisitionMode.RESULT_DISPLAYED:
            show_result(session, quiet=False)
            if prompt_result_action() == "reset":
                run_reset(session, assume_yes=True, quiet=quiet)
                continue
            return 0

        action = prompt_home_action(quiet=quiet)
        if action == "quit":
            return 0
        if action == "scan":
            frames = prompt_existing_path(
                "Camera frames (image file or directory)",
                allow_dir=True,
                hint="Each image is decoded in turn until a certificate is found.",
            )
            try:
                run_scan(session, [frames], quiet=quiet, display=False)
            except FrameSourceError as exc:
                console.print(f"[error]{exc}[/error]")
        elif action == "pdf":
            path = prompt_existing_path("Certificate PDF")
            try:
                run_import(session, path, quiet=quiet, display=False)
            except (ImportFailure, OSError) as exc:
                console.print(f"[error]{exc}[/error]")
