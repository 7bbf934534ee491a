"""Human-readable size labels and fixed-width report rows."""

from __future__ import annotations

KB = 1024
MB = KB * 1024
GB = MB * 1024

NAME_COLUMN_WIDTH = 30
SIZE_COLUMN_WIDTH = 10
ERROR_LABEL = "Error"

_SCALED_UNITS: tuple[tuple[int, str], ...] = (
    (GB, "GB"),
    (MB, "MB"),
    (KB, "KB"),
)


def human_readable_size(size_bytes: int) -> str:
    """Render ``size_bytes`` using the largest 1024-based unit up to GB.

    Byte counts below 1 KB are printed as a bare integer with a ``bytes``
    suffix; larger values use two decimals. There is no unit above GB.
    """
    if size_bytes < 0:
        raise ValueError(f"size must be non-negative: {size_bytes}")
    for unit_bytes, suffix in _SCALED_UNITS:
        if size_bytes >= unit_bytes:
            return f"{size_bytes / unit_bytes:.2f} {suffix}"
    return f"{size_bytes} bytes"


def format_report_row(name: str, size_label: str) -> str:
    """Left-justify ``name`` and ``size_label`` into the report columns.

    Over-long names are kept whole and push the size field right.
    """
    return f"{name:<{NAME_COLUMN_WIDTH}} Size: {size_label:<{SIZE_COLUMN_WIDTH}}"


__all__ = [
    "KB",
    "MB",
    "GB",
    "ERROR_LABEL",
    "human_readable_size",
    "format_report_row",
]
