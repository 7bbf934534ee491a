"""Append-only run log backed by a standard ``logging`` file handler.

Each log path gets its own non-propagating logger so records never leak to the
root logger or to a sink for another path opened in the same process.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(levelname)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOGGER_NAME_PREFIX = "dirsize.run"


def build_log_handler(log_path: Path) -> logging.FileHandler:
    """Open ``log_path`` for appending; raises ``OSError`` when it cannot be opened."""
    handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return handler


@contextmanager
def open_log_sink(log_path: Path) -> Iterator[logging.Logger]:
    """Yield a logger writing to ``log_path`` and close the file on exit.

    Loggers live in the ``logging`` registry for the whole process, so one
    logger is kept per resolved log path and reused by later sinks.
    """
    handler = build_log_handler(log_path)
    logger = logging.getLogger(f"{LOGGER_NAME_PREFIX}.{log_path.resolve()}")
    logger.setLevel(logging.INFO)
    logger.propagate = False
    logger.addHandler(handler)
    try:
        yield logger
    finally:
        logger.removeHandler(handler)
        handler.close()


__all__ = [
    "LOG_FORMAT",
    "LOG_DATE_FORMAT",
    "build_log_handler",
    "open_log_sink",
]
