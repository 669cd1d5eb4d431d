#!/usr/bin/env python3
from __future__ import annotations

import typer

from ..core.common import global_options, run_command
from ..flows.session import open_session, run_reset


def register(app: typer.Typer) -> None:
    app.command(help="Forget the stored certificate.")(reset)


def reset(
    ctx: typer.Context,
    assume_yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Skip the confirmation prompt.",
        rich_help_panel="Behavior",
    ),
) -> None:
    options = global_options(ctx)

    def _run() -> int:
        session = open_session(options.config)
        return run_reset(session, assume_yes=assume_yes, quiet=options.quiet)

    run_command(_run, debug=options.debug)
