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
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass

from rich import box
from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.live import Live
from rich.panel import Panel
from rich.spinner import Spinner
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

RESULT_TITLE = "My COVID-19 Green Pass"
_SUMMARY_CHARS = 48

THEME = Theme(
    {
        "title": "bold green",
        "subtitle": "dim",
        "hint": "dim italic",
        "success": "green",
        "warning": "yellow",
        "error": "red",
        "pass": "bold green",
        "muted": "dim",
    }
)


def stream_is_terminal(*streams: object) -> bool:
    """True for the first stream that answers isatty(); False if none do."""
    for stream in streams:
        if stream is None:
            continue
        try:
            return bool(stream.isatty())
        except (OSError, ValueError, AttributeError):
            continue
    return False


@dataclass
class UIContext:
    console: Console
    console_err: Console
    animations_enabled: bool = True

    @classmethod
    def create(cls) -> UIContext:
        return cls(
            console=Console(
                theme=THEME,
                force_terminal=stream_is_terminal(sys.__stdout__, sys.stdout),
            ),
            console_err=Console(
                stderr=True,
                theme=THEME,
                force_terminal=stream_is_terminal(sys.__stderr__, sys.stderr),
            ),
        )


DEFAULT_CONTEXT = UIContext.create()


def _resolve_context(context: UIContext | None) -> UIContext:
    return context or DEFAULT_CONTEXT


def configure_ui(
    *,
    no_color: bool,
    no_animations: bool = False,
    context: UIContext | None = None,
) -> None:
    context = _resolve_context(context)
    context.animations_enabled = not no_animations
    for target in (context.console, context.console_err):
        target.no_color = no_color


@contextmanager
def status(message: str, *, quiet: bool, context: UIContext | None = None) -> Iterator[None]:
    """Show a spinner while a slow step runs; plain text off a terminal."""
    context = _resolve_context(context)
    if quiet:
        yield
        return
    if context.animations_enabled and context.console.is_terminal:
        spinner = Spinner("dots", text=Text(message, style="subtitle"))
        with Live(spinner, console=context.console, transient=True, refresh_per_second=12):
            yield
        return
    context.console.print(Text(message, style="subtitle"))
    yield


def build_kv_table(rows: Sequence[tuple[str, str]], *, title: str | None = None) -> Table:
    table = Table(title=title, show_header=False, box=box.SIMPLE)
    table.add_column("Field", style="bold", no_wrap=True)
    table.add_column("Value", overflow="fold")
    for key, value in rows:
        table.add_row(key, value)
    return table


def panel(title: str, body: RenderableType, *, style: str = "title") -> Panel:
    return Panel(body, title=title, title_align="left", border_style=style, box=box.ROUNDED)


def summarize_payload(payload: str) -> str:
    if len(payload) <= _SUMMARY_CHARS:
        return payload
    return f"{payload[: _SUMMARY_CHARS - 3]}..."


def print_result_view(qr_text: str, payload: str, *, context: UIContext | None = None) -> None:
    context = _resolve_context(context)
    body = Group(
        Align.center(Text(qr_text, no_wrap=True, overflow="ignore")),
        Align.center(Text(summarize_payload(payload), style="muted")),
    )
    context.console.print(panel(RESULT_TITLE, body, style="pass"))
