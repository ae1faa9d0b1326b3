"""File discovery — lazily walk a directory tree for regular files."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import Iterator

from textscan.errors import WalkError

logger = logging.getLogger(__name__)


def _abort(exc: OSError) -> None:
    raise WalkError(exc) from exc


def _dir_key(path: str) -> tuple[int, int]:
    try:
        st = os.stat(path)
    except OSError as exc:
        raise WalkError(exc) from exc
    return st.st_dev, st.st_ino


def _prune_visited(dirpath: str, dirnames: list[str], visited: set[tuple[int, int]]) -> None:
    """Drop subdirectories already walked, in place, so link cycles end."""
    kept = []
    for name in dirnames:
        key = _dir_key(os.path.join(dirpath, name))
        if key in visited:
            logger.debug(f"Skipping already visited directory {os.path.join(dirpath, name)}")
            continue
        visited.add(key)
        kept.append(name)
    dirnames[:] = kept


def walk(root: str | os.PathLike[str], *, follow_symlinks: bool = False) -> Iterator[Path]:
    """Yield every regular file under *root*, in filesystem listing order.

    Directories are descended top-down and never yielded themselves.
    Symbolic links are skipped unless *follow_symlinks* is set, in which case
    linked directories are descended and linked regular files are yielded.
    Each directory is walked at most once, so link cycles terminate.  Broken
    links, FIFOs, sockets and device files are never yielded.

    The iterator is lazy and cannot be restarted.

    Raises
    ------
    WalkError
        If any directory or entry cannot be visited.  The walk stops there.
    """
    visited: set[tuple[int, int]] = set()
    if follow_symlinks:
        visited.add(_dir_key(os.fspath(root)))
    for dirpath, dirnames, filenames in os.walk(
        root, onerror=_abort, followlinks=follow_symlinks
    ):
        if follow_symlinks:
            _prune_visited(dirpath, dirnames, visited)
        base = Path(dirpath)
        for name in filenames:
            p = base / name
            try:
                if p.is_symlink():
                    if not follow_symlinks:
                        logger.debug(f"Skipping symlink {p}")
                        continue
                    if not p.exists():
                        logger.debug(f"Skipping broken symlink {p}")
                        continue
                mode = p.stat().st_mode
            except OSError as exc:
                raise WalkError(exc) from exc
            if not stat.S_ISREG(mode):
                logger.debug(f"Skipping special file {p}")
                continue
            yield p
