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

from dataclasses import dataclass

from rich.traceback import install as install_rich_traceback

from ..config import init_user_config, load_app_config, user_config_needs_init
from .core.log import configure_logging
from .ui import configure_ui, console


@dataclass(frozen=True)
class Startup:
    finished: bool = False
    quiet: bool = False
    no_color: bool = False


def run_startup(
    *,
    config: str | None,
    quiet: bool,
    no_color: bool,
    debug: bool,
    init_config: bool,
) -> Startup:
    """Set up output, logging and the user config before any command runs.

    Flags given on the command line win over the ``[ui]`` section of the config.
    """
    if debug:
        install_rich_traceback(show_locals=True)
    if init_config:
        configure_ui(no_color=no_color)
        console.print(f"User config ready at {init_user_config()}")
        return Startup(finished=True, quiet=quiet, no_color=no_color)
    if config is None and user_config_needs_init():
        config_dir = init_user_config()
        if not quiet:
            console.print(f"[muted]Initialized user config at {config_dir}[/muted]")
    ui = load_app_config(config).ui
    startup = Startup(quiet=quiet or ui.quiet, no_color=no_color or ui.no_color)
    configure_ui(no_color=startup.no_color)
    configure_logging(debug=debug, quiet=startup.quiet)
    return startup
