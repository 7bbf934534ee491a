"""Filesystem walking for directory size totals and report candidates."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

from .types import Candidate, MeasureError, SizeResult


def _sum_regular_file_bytes(directory: Path) -> int:
    """Return the byte total of every regular file below ``directory``.

    The walk is depth-first and does not follow symlinks below ``directory``.
    Any ``OSError`` from scanning or stat calls propagates unchanged.
    """
    total = 0
    pending: list[str] = [os.fspath(directory)]
    while pending:
        current = pending.pop()
        with os.scandir(current) as entries:
            for entry in entries:
                if entry.is_dir(follow_symlinks=False):
                    pending.append(entry.path)
                elif entry.is_file(follow_symlinks=False):
                    total += entry.stat(follow_symlinks=False).st_size
    return total


def measure_directory(path: Path) -> SizeResult:
    """Measure ``path`` and return a tagged result.

    A single traversal failure abandons the whole measurement: the result has
    ``size_bytes=None`` and exactly one ``MeasureError`` for ``path``. There is
    no partial total.
    """
    try:
        total = _sum_regular_file_bytes(path)
    except OSError as exc:
        return SizeResult(
            path=path,
            size_bytes=None,
            errors=(MeasureError(path=path, message=str(exc)),),
        )
    return SizeResult(path=path, size_bytes=total)


def measure(path: Path) -> tuple[int, list[tuple[Path, str]]]:
    """Return ``(size_bytes, errors)`` for ``path``.

    ``errors`` holds ``(path, message)`` pairs; when it is non-empty the byte
    count is ``0`` and must not be trusted.
    """
    result = measure_directory(path)
    errors = [(error.path, error.message) for error in result.errors]
    return (result.size_bytes if result.ok else 0), errors


def iter_candidates(root: Path) -> Iterator[Candidate]:
    """Yield every immediate child of ``root`` in filesystem order.

    Errors from listing ``root`` or from classifying one of its children are
    raised from the iterator, so callers see them part-way through a loop.
    """
    with os.scandir(root) as entries:
        for child in entries:
            yield Candidate(name=child.name, path=Path(child.path), is_dir=child.is_dir())


__all__ = [
    "measure",
    "measure_directory",
    "iter_candidates",
]
