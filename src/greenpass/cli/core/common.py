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

import importlib.metadata
from collections.abc import Callable
from dataclasses import dataclass

import typer

from ..ui import console_err

EXIT_FAILURE = 1
EXIT_ERROR = 2

# Failures a user can act on; anything else is a bug and keeps its traceback.
CLI_ERRORS = (OSError, RuntimeError, ValueError, LookupError)


@dataclass(frozen=True)
class GlobalOptions:
    config: str | None = None
    debug: bool = False
    quiet: bool = False


def global_options(ctx: typer.Context, *, quiet: bool = False) -> GlobalOptions:
    """Options given before the subcommand, merged with a per-command --quiet."""
    values = ctx.obj or {}
    return GlobalOptions(
        config=values.get("config"),
        debug=bool(values.get("debug")),
        quiet=quiet or bool(values.get("quiet")),
    )


def run_command(body: Callable[[], int | None], *, debug: bool) -> None:
    try:
        code = body()
    except CLI_ERRORS as exc:
        if debug:
            raise
        console_err.print(f"[error]Error:[/error] {exc}")
        raise typer.Exit(code=EXIT_ERROR) from exc
    if code:
        raise typer.Exit(code=code)


def package_version() -> str:
    try:
        return importlib.metadata.version("greenpass")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0"
