"""Search configuration dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ScanConfig:
    """Immutable search configuration.

    Built once by the CLI from ``<path> <pattern>`` and the ``-r``/``-n``
    flags.  ``max_workers`` and ``follow_symlinks`` are only reachable
    programmatically.
    """

    root: Path
    pattern: str
    recursive: bool = False
    line_numbers: bool = False
    max_workers: int | None = None    # None = ThreadPoolExecutor default
    follow_symlinks: bool = False
