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

import os
import shutil
import sys
from pathlib import Path

from platformdirs import user_config_dir

APP_DIR_NAME = "greenpass"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().with_name("config.toml")
CONFIG_ENV = "GREENPASS_CONFIG"
XDG_CONFIG_ENV = "XDG_CONFIG_HOME"


def user_config_dir_path() -> Path:
    xdg_home = os.environ.get(XDG_CONFIG_ENV)
    if xdg_home:
        return Path(xdg_home) / APP_DIR_NAME
    # ~/.config on macOS, not ~/Library/Application Support.
    if sys.platform == "darwin":
        return Path.home() / ".config" / APP_DIR_NAME
    return Path(user_config_dir(APP_DIR_NAME, appauthor=False))


def user_config_path() -> Path:
    return user_config_dir_path() / DEFAULT_CONFIG_PATH.name


def user_config_needs_init() -> bool:
    return not user_config_path().exists()


def init_user_config() -> Path:
    """Copy the packaged config into the user config dir unless one exists."""
    target = user_config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    if not target.exists():
        shutil.copyfile(DEFAULT_CONFIG_PATH, target)
    return target.parent


def resolve_config_path(path: str | Path | None = None) -> Path:
    """Explicit path, then $GREENPASS_CONFIG, then the user config, then the default."""
    for candidate in (path, os.environ.get(CONFIG_ENV)):
        if candidate:
            return Path(candidate).expanduser()
    user_config = user_config_path()
    return user_config if user_config.exists() else DEFAULT_CONFIG_PATH
