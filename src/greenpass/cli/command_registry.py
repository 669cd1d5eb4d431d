#!/usr/bin/env python3
from __future__ import annotations

import typer

from .commands import (
    config as config_command,
    import_pdf as import_command,
    reset as reset_command,
    scan as scan_command,
    show as show_command,
    status as status_command,
)


def register(app: typer.Typer) -> None:
    scan_command.register(app)
    import_command.register(app)
    show_command.register(app)
    reset_command.register(app)
    status_command.register(app)
    config_command.register(app)
