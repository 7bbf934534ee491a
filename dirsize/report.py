"""Per-subdirectory size report for one root directory.

Walks the root's immediate children in filesystem order, measures every
visible subdirectory, and prints one fixed-width row per candidate. Progress
and failures go to the logger passed in by the caller.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from .size_labels import ERROR_LABEL, format_report_row, human_readable_size
from .tree_size import Candidate, iter_candidates, measure_directory

EXIT_OK = 0
EXIT_SETUP_ERROR = 1


def report_candidate(candidate: Candidate, logger: logging.Logger, out: TextIO) -> None:
    """Measure one candidate and print its row, logging any traversal error."""
    logger.info("Processing directory: %s", candidate.path)
    result = measure_directory(candidate.path)
    if result.ok:
        label = human_readable_size(result.size_bytes)
    else:
        for error in result.errors:
            logger.error("Filesystem error: %s in directory: %s", error.message, error.path)
        label = ERROR_LABEL
    print(format_report_row(candidate.name, label), file=out)


def run(root: Path, logger: logging.Logger, out: TextIO | None = None) -> int:
    """Report sizes for the visible subdirectories of ``root``.

    Returns ``EXIT_SETUP_ERROR`` when ``root`` is not an existing directory.
    Failures while listing ``root`` are logged and end the report early, but
    still count as a normal exit.
    """
    if out is None:
        out = sys.stdout

    if not root.is_dir():
        logger.error("Invalid directory path: %s", root)
        return EXIT_SETUP_ERROR

    try:
        for candidate in iter_candidates(root):
            if not candidate.reportable:
                continue
            report_candidate(candidate, logger, out)
    except OSError as exc:
        logger.error("Filesystem error: %s", exc)

    return EXIT_OK


__all__ = [
    "EXIT_OK",
    "EXIT_SETUP_ERROR",
    "report_candidate",
    "run",
]
