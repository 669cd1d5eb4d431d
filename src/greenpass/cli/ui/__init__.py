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

"""Terminal output and prompts for the greenpass CLI."""

from .console import (
    DEFAULT_CONTEXT,
    RESULT_TITLE,
    THEME,
    UIContext,
    build_kv_table,
    configure_ui,
    panel,
    print_result_view,
    status,
    stream_is_terminal,
    summarize_payload,
)
from .prompts import (
    check_path,
    prompt_choice,
    prompt_existing_path,
    prompt_home_action,
    prompt_result_action,
    prompt_yes_no,
)

console = DEFAULT_CONTEXT.console
console_err = DEFAULT_CONTEXT.console_err

__all__ = [
    "RESULT_TITLE",
    "THEME",
    "UIContext",
    "build_kv_table",
    "check_path",
    "configure_ui",
    "console",
    "console_err",
    "panel",
    "print_result_view",
    "prompt_choice",
    "prompt_existing_path",
    "prompt_home_action",
    "prompt_result_action",
    "prompt_yes_no",
    "status",
    "stream_is_terminal",
    "summarize_payload",
]
