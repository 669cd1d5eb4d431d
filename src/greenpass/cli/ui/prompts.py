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

from pathlib import Path
from typing import Any

import questionary
from rich.rule import Rule
from rich.text import Text

from .console import UIContext, _resolve_context, panel

QUESTIONARY_STYLE = questionary.Style(
    [
        ("question", "bold"),
        ("answer", "fg:ansigreen bold"),
        ("pointer", "fg:ansigreen bold"),
        ("highlighted", "fg:ansigreen"),
        ("instruction", "fg:ansibrightblack"),
    ]
)

HOME_PROMPT = "How would you like to import your green pass?"
HOME_CHOICES = {
    "scan": "Scan QR code",
    "pdf": "Read from PDF",
    "quit": "Quit",
}
RESULT_CHOICES = {
    "quit": "Done",
    "reset": "Reset",
}


def _ask(question: questionary.Question) -> Any:
    # questionary returns None when the prompt is aborted with Ctrl-C.
    answer = question.ask()
    if answer is None:
        raise KeyboardInterrupt
    return answer


def _print_hint(hint: str | None, *, context: UIContext | None) -> None:
    context = _resolve_context(context)
    context.console.print(Rule(style="muted"))
    if hint:
        context.console.print(Text(hint, style="hint"))


def prompt_choice(
    prompt: str,
    choices: dict[str, str],
    *,
    default: str | None = None,
    hint: str | None = None,
    context: UIContext | None = None,
) -> str:
    _print_hint(hint, context=context)
    return _ask(
        questionary.select(
            prompt,
            choices=[questionary.Choice(title=label, value=key) for key, label in choices.items()],
            default=default,
            qmark="",
            pointer=">",
            style=QUESTIONARY_STYLE,
        )
    )


def prompt_yes_no(prompt: str, *, default: bool, context: UIContext | None = None) -> bool:
    _print_hint(None, context=context)
    return _ask(questionary.confirm(prompt, default=default, qmark="", style=QUESTIONARY_STYLE))


def check_path(value: str, *, allow_dir: bool) -> bool | str:
    """questionary validator: True, or the message to show under the prompt."""
    text = value.strip()
    if not text:
        return "A path is required."
    path = Path(text).expanduser()
    if path.is_file() or (allow_dir and path.is_dir()):
        return True
    if path.exists():
        return f"not a file: {path}"
    return f"not found: {path}"


def prompt_existing_path(
    prompt: str,
    *,
    allow_dir: bool = False,
    hint: str | None = None,
    context: UIContext | None = None,
) -> str:
    _print_hint(hint, context=context)
    answer = _ask(
        questionary.path(
            prompt,
            only_directories=False,
            validate=lambda value: check_path(value, allow_dir=allow_dir),
            qmark="",
            style=QUESTIONARY_STYLE,
        )
    )
    return answer.strip()


def prompt_home_action(*, quiet: bool, context: UIContext | None = None) -> str:
    context = _resolve_context(context)
    if not quiet:
        context.console.print(panel("greenpass", Text("Green pass wallet", style="title")))
    return prompt_choice(
        HOME_PROMPT,
        HOME_CHOICES,
        default="scan",
        hint="You can also run `greenpass scan` or `greenpass import` directly.",
        context=context,
    )


def prompt_result_action(*, context: UIContext | None = None) -> str:
    return prompt_choice("What next?", RESULT_CHOICES, default="quit", context=context)
