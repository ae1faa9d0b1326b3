"""Exception types raised by the search engine and its CLI."""

from __future__ import annotations

from pathlib import Path


class SearchError(RuntimeError):
    """Base class for failures the CLI reports as a single message."""


class UsageError(SearchError):
    """Raised when the required positional arguments are missing."""


class PathTypeError(SearchError):
    """Raised when *path* is a directory but recursion was not requested."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"{path.name or path}: is a directory")


class WalkError(OSError):
    """Raised when the directory walk cannot visit an entry.

    A walk failure stops discovery of further files.
    """

    def __init__(self, cause: OSError) -> None:
        self.cause = cause
        where = cause.filename if cause.filename is not None else "<unknown>"
        reason = cause.strerror or str(cause)
        super().__init__(f"cannot walk {where}: {reason}")
