"""Value types produced by directory size measurement."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class MeasureError:
    """One traversal failure: the directory being measured and what went wrong."""

    path: Path
    message: str


@dataclass(frozen=True)
class SizeResult:
    """Byte total for one directory, or ``None`` when it could not be measured."""

    path: Path
    size_bytes: int | None
    errors: tuple[MeasureError, ...] = ()

    @property
    def ok(self) -> bool:
        return self.size_bytes is not None


@dataclass(frozen=True)
class Candidate:
    """Immediate child of a report root."""

    name: str
    path: Path
    is_dir: bool

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")

    @property
    def reportable(self) -> bool:
        return self.is_dir and not self.is_hidden


__all__ = [
    "MeasureError",
    "SizeResult",
    "Candidate",
]
