#!/usr/bin/env python3
from __future__ import annotations

import typer

from ..core.common import global_options, run_command
from ..flows.session import open_session, print_status


def register(app: typer.Typer) -> None:
    app.command(help="Show whether a certificate is stored and where.")(status)


def status(ctx: typer.Context) -> None:
    options = global_options(ctx)
    run_command(lambda: print_status(open_session(options.config)), debug=options.debug)
