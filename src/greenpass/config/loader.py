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

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from ..core.models import DEFAULT_QR_SIZE
from ..qr.codec import DEFAULT_BORDER, Color, QrConfig
from ..storage.store import DEFAULT_PAYLOAD_KEY, default_store_path
from .installer import resolve_config_path

ERROR_LEVELS = ("L", "M", "Q", "H")
_UNSET_COLORS = {"", "none", "default"}


@dataclass(frozen=True)
class StorageDefaults:
    path: Path = field(default_factory=default_store_path)
    key: str = DEFAULT_PAYLOAD_KEY


@dataclass(frozen=True)
class UiDefaults:
    quiet: bool = False
    no_color: bool = False


@dataclass(frozen=True)
class AppConfig:
    config_path: Path | None = None
    storage: StorageDefaults = field(default_factory=StorageDefaults)
    qr_config: QrConfig = field(default_factory=QrConfig)
    ui: UiDefaults = field(default_factory=UiDefaults)


def load_app_config(path: str | Path | None = None) -> AppConfig:
    config_path = resolve_config_path(path)
    with config_path.open("rb") as handle:
        data = tomllib.load(handle)
    ui = _table(data, "ui")
    return AppConfig(
        config_path=config_path,
        storage=_storage_defaults(_table(data, "storage")),
        qr_config=build_qr_config(_table(data, "qr")),
        ui=UiDefaults(quiet=_bool(ui, "ui.quiet"), no_color=_bool(ui, "ui.no_color")),
    )


def build_qr_config(cfg: dict[str, object] | None = None) -> QrConfig:
    """Validate a ``[qr]`` table; missing keys keep the QrConfig defaults."""
    cfg = cfg or {}
    error = (_text(cfg, "qr.error") or "Q").upper()
    if error not in ERROR_LEVELS:
        raise ValueError(f"qr.error must be one of {', '.join(ERROR_LEVELS)}")
    return QrConfig(
        error=error,
        scale=_integer(cfg, "qr.scale", default=4, minimum=1),
        border=_integer(cfg, "qr.border", default=DEFAULT_BORDER, minimum=0),
        kind=_text(cfg, "qr.kind") or "png",
        dark=_color(cfg, "qr.dark"),
        light=_color(cfg, "qr.light"),
        size=_integer(cfg, "qr.size", default=DEFAULT_QR_SIZE, minimum=1),
    )


def _storage_defaults(cfg: dict[str, object]) -> StorageDefaults:
    raw_path = _text(cfg, "storage.path")
    return StorageDefaults(
        path=Path(raw_path).expanduser() if raw_path else default_store_path(),
        key=_text(cfg, "storage.key") or DEFAULT_PAYLOAD_KEY,
    )


def _table(data: dict[str, object], name: str) -> dict[str, object]:
    value = data.get(name, {})
    if not isinstance(value, dict):
        raise ValueError(f"[{name}] must be a table")
    return value


def _key(dotted: str) -> str:
    return dotted.rsplit(".", 1)[-1]


def _text(cfg: dict[str, object], dotted: str) -> str | None:
    value = cfg.get(_key(dotted))
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{dotted} must be a string")
    return value.strip() or None


def _bool(cfg: dict[str, object], dotted: str) -> bool:
    value = cfg.get(_key(dotted), False)
    if not isinstance(value, bool):
        raise ValueError(f"{dotted} must be true or false")
    return value


def _integer(cfg: dict[str, object], dotted: str, *, default: int, minimum: int) -> int:
    value = cfg.get(_key(dotted), default)
    # TOML booleans are ints to Python.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{dotted} must be an integer")
    if value < minimum:
        kind = "positive" if minimum > 0 else "non-negative"
        raise ValueError(f"{dotted} must be a {kind} integer")
    return value


def _color(cfg: dict[str, object], dotted: str) -> Color:
    value = cfg.get(_key(dotted))
    if value is None:
        return None
    if isinstance(value, str):
        return None if value.strip().lower() in _UNSET_COLORS else value.strip()
    if (
        isinstance(value, list)
        and len(value) in (3, 4)
        and all(isinstance(part, int) and not isinstance(part, bool) for part in value)
        and all(0 <= part <= 255 for part in value)
    ):
        return tuple(value)
    raise ValueError(f"{dotted} must be a color name or a list of 3 or 4 integers (0-255)")
