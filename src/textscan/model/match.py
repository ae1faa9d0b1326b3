"""Match and FileScanBatch — the normalized output of one file scan."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Match:
    """One line of a file that contains the search pattern."""

    path: str
    line_number: int   # 0-based position of the line within the file
    line: str          # no trailing newline

    def render(self, line_numbers: bool = False) -> str:
        if line_numbers:
            return f"{self.path}:{self.line_number}:{self.line}"
        return f"{self.path}:{self.line}"


@dataclass(frozen=True, slots=True)
class FileScanBatch:
    """Every match found in a single file, in line order.

    A batch is either a success (``error is None``) holding zero or more
    matches, or a failure holding the reason the file could not be read.
    Failed batches never carry matches.
    """

    path: str
    matches: tuple[Match, ...] = ()
    error: str | None = None

    def __post_init__(self) -> None:
        if self.error is not None and self.matches:
            raise ValueError("a failed batch cannot carry matches")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, path: str, exc: OSError) -> FileScanBatch:
        """Build the failure variant from the ``OSError`` that ended the scan."""
        reason = exc.strerror or str(exc) or type(exc).__name__
        return cls(path=path, error=reason)
