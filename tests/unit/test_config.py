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

import tempfile
import unittest
from pathlib import Path

from greenpass.config import (
    CONFIG_ENV,
    DEFAULT_CONFIG_PATH,
    build_qr_config,
    init_user_config,
    load_app_config,
    resolve_config_path,
    user_config_needs_init,
    user_config_path,
)
from greenpass.storage.store import DEFAULT_PAYLOAD_KEY, default_store_path
from tests.test_support import temp_env


def _write_config(root: Path, text: str) -> Path:
    path = root / "config.toml"
    path.write_text(text, encoding="utf-8")
    return path


class TestConfig(unittest.TestCase):
    def test_load_app_config_parses_sections(self) -> None:
        toml = """
[storage]
path = "~/passes/store.json"
key = "pass"

[qr]
error = "h"
scale = 6
border = 2
size = 300
dark = [1, 2, 3]
light = [4, 5, 6, 7]

[ui]
quiet = true
no_color = true
"""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = _write_config(Path(tmpdir), toml)
            config = load_app_config(path=path)

        self.assertEqual(config.config_path, path)
        self.assertEqual(config.storage.path, Path("~/passes/store.json").expanduser())
        self.assertEqual(config.storage.key, "pass")
        self.assertEqual(config.qr_config.error, "H")
        self.assertEqual(config.qr_config.scale, 6)
        self.assertEqual(config.qr_config.border, 2)
        self.assertEqual(config.qr_config.size, 300)
        self.assertEqual(config.qr_config.dark, (1, 2, 3))
        self.assertEqual(config.qr_config.light, (4, 5, 6, 7))
        self.assertTrue(config.ui.quiet)
        self.assertTrue(config.ui.no_color)

    def test_load_app_config_empty_file_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config = load_app_config(path=_write_config(Path(tmpdir), ""))

        self.assertEqual(config.storage.path, default_store_path())
        self.assertEqual(config.storage.key, DEFAULT_PAYLOAD_KEY)
        self.assertEqual(config.qr_config.error, "Q")
        self.assertEqual(config.qr_config.border, 8)
        self.assertEqual(config.qr_config.size, 404)
        self.assertFalse(config.ui.quiet)

    def test_packaged_default_config_loads(self) -> None:
        config = load_app_config(path=DEFAULT_CONFIG_PATH)
        self.assertEqual(config.storage.path, default_store_path())
        self.assertEqual(config.qr_config.dark, "black")
        self.assertEqual(config.qr_config.light, "white")

    def test_invalid_values_raise(self) -> None:
        cases = (
            ({"error": "X"}, "qr.error must be one of L, M, Q, H"),
            ({"scale": 0}, "qr.scale must be a positive integer"),
            ({"scale": "6"}, "qr.scale must be an integer"),
            ({"size": -5}, "qr.size must be a positive integer"),
            ({"border": -1}, "qr.border must be a non-negative integer"),
            ({"border": True}, "qr.border must be an integer"),
            ({"border": 1.5}, "qr.border must be an integer"),
            ({"dark": [1, 2]}, "qr.dark must be a color name"),
            ({"light": [0, 0, 300]}, "qr.light must be a color name"),
            ({"error": 3}, "qr.error must be a string"),
        )
        for cfg, message in cases:
            with self.subTest(cfg=cfg):
                with self.assertRaisesRegex(ValueError, message):
                    build_qr_config(cfg)

    def test_invalid_sections_raise(self) -> None:
        cases = (
            ("[ui]\nquiet = \"maybe\"\n", "ui.quiet must be true or false"),
            ("[storage]\npath = 5\n", "storage.path must be a string"),
            ("qr = 5\n", r"\[qr\] must be a table"),
        )
        for toml, message in cases:
            with self.subTest(toml=toml):
                with tempfile.TemporaryDirectory() as tmpdir:
                    path = _write_config(Path(tmpdir), toml)
                    with self.assertRaisesRegex(ValueError, message):
                        load_app_config(path=path)

    def test_transparent_colors_are_unset(self) -> None:
        qr_config = build_qr_config({"dark": "none", "light": ""})
        self.assertIsNone(qr_config.dark)
        self.assertIsNone(qr_config.light)


class TestConfigResolution(unittest.TestCase):
    def test_explicit_path_wins_over_env(self) -> None:
        with temp_env({CONFIG_ENV: "/tmp/env.toml"}):
            self.assertEqual(resolve_config_path("/tmp/explicit.toml"), Path("/tmp/explicit.toml"))
            self.assertEqual(resolve_config_path(), Path("/tmp/env.toml"))

    def test_falls_back_to_packaged_default(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with temp_env({"XDG_CONFIG_HOME": tmpdir, CONFIG_ENV: ""}):
                self.assertEqual(resolve_config_path(), DEFAULT_CONFIG_PATH)

    def test_init_user_config_copies_default(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with temp_env({"XDG_CONFIG_HOME": tmpdir, CONFIG_ENV: ""}):
                self.assertTrue(user_config_needs_init())
                config_dir = init_user_config()
                self.assertEqual(config_dir, Path(tmpdir) / "greenpass")
                self.assertFalse(user_config_needs_init())
                self.assertEqual(
                    user_config_path().read_text(encoding="utf-8"),
                    DEFAULT_CONFIG_PATH.read_text(encoding="utf-8"),
                )
                self.assertEqual(resolve_config_path(), user_config_path())


if __name__ == "__main__":
    unittest.main()
