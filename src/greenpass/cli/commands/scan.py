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

import typer

from ..core.common import global_options, run_command
from ..flows.session import open_session, run_scan


def register(app: typer.Typer) -> None:
    app.command(
        help=(
            "Scan camera frames until one holds a certificate QR code.\n\n"
            "Frames are image files (or directories of images) decoded in order;\n"
            "frames without a certificate are skipped.\n\n"
            "Examples:\n"
            "  greenpass scan ./frames\n"
            "  greenpass scan photo1.jpg photo2.jpg\n"
        )
    )(scan)


def scan(
    ctx: typer.Context,
    frames: list[str] = typer.Argument(..., help="Image files or directories of frames."),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Hide non-error output.",
        rich_help_panel="Behavior",
    ),
) -> None:
    options = global_options(ctx, quiet=quiet)

    def _run() -> int:
        session = open_session(options.config)
        return run_scan(session, frames, quiet=options.quiet)

    run_command(_run, debug=options.debug)
