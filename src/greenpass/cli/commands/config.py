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

import os
import shlex
import subprocess
from pathlib import Path

import typer

from ...config import AppConfig, load_app_config
from ..core.common import global_options, run_command
from ..ui import build_kv_table, console

_CONFIG_HELP = (
    "Show the settings greenpass is running with.\n\n"
    "Values come from the active TOML file; --edit opens it with $VISUAL / $EDITOR\n"
    "or the system default application.\n\n"
    "Examples:\n"
    "  greenpass config\n"
    "  greenpass config --path\n"
    "  greenpass config --edit --editor nano\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_CONFIG_HELP)(config)


def config(
    ctx: typer.Context,
    edit: bool = typer.Option(
        False,
        "--edit",
        help="Open the config file in an editor instead of printing it.",
        rich_help_panel="Behavior",
    ),
    editor: str | None = typer.Option(
        None,
        "--editor",
        "-e",
        help="Editor command for --edit (defaults to $VISUAL/$EDITOR).",
        rich_help_panel="Behavior",
    ),
    path_only: bool = typer.Option(
        False,
        "--path",
        help="Print only the resolved config path.",
        rich_help_panel="Behavior",
    ),
) -> None:
    options = global_options(ctx)

    def _run() -> None:
        app_config = load_app_config(options.config)
        if path_only:
            console.print(str(app_config.config_path))
        elif edit:
            _edit_config(app_config.config_path, editor=editor)
        else:
            console.print(build_kv_table(config_rows(app_config), title="Config"))

    run_command(_run, debug=options.debug)


def config_rows(app_config: AppConfig) -> list[tuple[str, str]]:
    qr = app_config.qr_config
    return [
        ("File", str(app_config.config_path)),
        ("Store", str(app_config.storage.path)),
        ("Store key", app_config.storage.key),
        ("Error correction", qr.error),
        ("Quiet zone", f"{qr.border} modules"),
        ("Export size", f"{qr.size} px"),
        ("Colors", f"{qr.dark or 'default'} on {qr.light or 'default'}"),
    ]


def _edit_config(path: Path | None, *, editor: str | None) -> None:
    if path is None or not path.exists():
        raise FileNotFoundError(f"config file not found: {path}")
    command = _editor_command(editor)
    if command is None:
        typer.launch(str(path))
        return
    subprocess.run([*command, str(path)], check=False)


def _editor_command(editor: str | None) -> list[str] | None:
    value = editor if editor is not None else os.environ.get("VISUAL") or os.environ.get("EDITOR")
    value = (value or "").strip()
    if not value:
        return None
    return shlex.split(value, posix=os.name != "nt")
