"""Directory size model: recursive byte totals and report candidates.

This package contains the non-I/O-formatting half of the tool:
- value types for measurement results and traversal errors
- the depth-first size walk over ``os.scandir``
- listing of a root directory's immediate children
"""

from __future__ import annotations

from .types import Candidate, MeasureError, SizeResult
from .fs import iter_candidates, measure, measure_directory

__all__ = [
    "Candidate",
    "MeasureError",
    "SizeResult",
    "iter_candidates",
    "measure",
    "measure_directory",
]
