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
from ..flows.session import open_session, run_import


def register(app: typer.Typer) -> None:
    app.command(
        name="import",
        help=(
            "Read a certificate from the QR image embedded in a PDF.\n\n"
            "Only the first image painted on the first page is considered.\n\n"
            "Examples:\n"
            "  greenpass import certificate.pdf\n"
            "  cat certificate.pdf | greenpass import -\n"
        ),
    )(import_pdf)


def import_pdf(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="PDF file to read (use - for stdin)."),
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
        return run_import(session, path, quiet=options.quiet)

    run_command(_run, debug=options.debug)
