"""Tests for config lookup of the default log file."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirsize import config


class ConfigLogFileTests(unittest.TestCase):
    def test_missing_config_uses_default_log_name(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirsize.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_log_file(), Path(config.DEFAULT_LOG_FILENAME))

    def test_configured_log_file_is_used_and_expanded(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text('{"log_file": "  ~/logs/dirsize.log  "}\n', encoding="utf-8")
            with mock.patch("dirsize.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_log_file(), Path("~/logs/dirsize.log").expanduser())

    def test_invalid_values_fall_back_to_default(self) -> None:
        payloads = [
            "not json",
            "[1, 2, 3]\n",
            '{"log_file": 42}\n',
            '{"log_file": "   "}\n',
        ]
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirsize.config.CONFIG_PATH", config_path):
                for payload in payloads:
                    with self.subTest(payload=payload):
                        config_path.write_text(payload, encoding="utf-8")
                        self.assertEqual(config.load_log_file(), Path(config.DEFAULT_LOG_FILENAME))


if __name__ == "__main__":
    unittest.main()
