"""Persistent JSON config lookup.

Only read access is needed: the config can override the default log file.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "dirsize"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_LOG_FILENAME = "dirsize_error.log"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_log_file() -> Path:
    """Return the configured default log file, or ``DEFAULT_LOG_FILENAME``.

    Non-string or blank ``log_file`` values are ignored. ``~`` is expanded.
    """
    value = load_config().get("log_file")
    if not isinstance(value, str):
        return Path(DEFAULT_LOG_FILENAME)
    stripped = value.strip()
    if not stripped:
        return Path(DEFAULT_LOG_FILENAME)
    return Path(stripped).expanduser()
