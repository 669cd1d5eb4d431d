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

import typer

from . import command_registry
from .core.common import CLI_ERRORS, EXIT_ERROR, package_version, run_command
from .flows.session import open_session, run_home
from .startup import run_startup
from .ui import console, console_err

app = typer.Typer(add_completion=False, help="Keep your green pass certificate at hand.")


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"greenpass {package_version()}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def cli(
    ctx: typer.Context,
    config: str | None = typer.Option(
        None,
        "--config",
        envvar="GREENPASS_CONFIG",
        help="TOML config file to use.",
        rich_help_panel="Config",
    ),
    init_config: bool = typer.Option(
        False,
        "--init-config",
        help="Write the default config to the user config directory and exit.",
        rich_help_panel="Config",
    ),
    quiet: bool = typer.Option(False, "--quiet", help="Only print errors."),
    no_color: bool = typer.Option(False, "--no-color", help="Print without colors."),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Log debug details and show full tracebacks.",
        rich_help_panel="Debug",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print the version and exit.",
    ),
) -> None:
    del version
    try:
        startup = run_startup(
            config=config,
            quiet=quiet,
            no_color=no_color,
            debug=debug,
            init_config=init_config,
        )
    except CLI_ERRORS as exc:
        if debug:
            raise
        console_err.print(f"[error]Error:[/error] {exc}")
        raise typer.Exit(code=EXIT_ERROR) from exc
    if startup.finished:
        raise typer.Exit()
    ctx.obj = {"config": config, "debug": debug, "quiet": startup.quiet}
    if ctx.invoked_subcommand is not None:
        return
    if not sys.stdin.isatty():
        console_err.print("[error]Error:[/error] no command given. Run `greenpass --help`.")
        raise typer.Exit(code=EXIT_ERROR)
    run_command(lambda: run_home(open_session(config), quiet=startup.quiet), debug=debug)


command_registry.register(app)


def main() -> None:
    app()
