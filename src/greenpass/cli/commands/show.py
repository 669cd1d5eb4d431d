#!/usr/bin/env python3
from __future__ import annotations

import typer

from ..core.common import global_options, run_command
from ..flows.session import open_session, show_result


def register(app: typer.Typer) -> None:
    app.command(
        help=(
            "Show the stored certificate as a QR code.\n\n"
            "Examples:\n"
            "  greenpass show\n"
            "  greenpass show --output pass.png\n"
            "  greenpass show --output pass.svg --size 600\n"
        )
    )(show)


def show(
    ctx: typer.Context,
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Also save the QR code to this file (.png or .svg).",
        rich_help_panel="Output",
    ),
    size: int | None = typer.Option(
        None,
        "--size",
        min=1,
        help="Target edge length in pixels for --output.",
        rich_help_panel="Output",
    ),
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
        return show_result(session, quiet=options.quiet, output=output, size=size)

    run_command(_run, debug=options.debug)
