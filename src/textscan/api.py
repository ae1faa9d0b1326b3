"""
textscan.api
============

Programmatic entrypoint for using textscan as a library.

Goals:
  - No argparse / CLI dependencies
  - Same output contract as the CLI (``path:line`` / ``path:N:line``)
  - One failure policy for both modes: an unreadable file is reported on
    the error stream and the search continues

Usage::

    from pathlib import Path
    from textscan.api import search
    from textscan.core.config import ScanConfig

    summary = search(ScanConfig(root=Path("src"), pattern="TODO", recursive=True))
"""

from __future__ import annotations

import logging
import stat
from typing import TextIO

from textscan.core.config import ScanConfig
from textscan.core.dispatcher import ScanDispatcher
from textscan.core.scanner import scan_file
from textscan.errors import PathTypeError
from textscan.model import FileScanBatch
from textscan.output import RenderSummary, render

logger = logging.getLogger(__name__)


def _scan_single(config: ScanConfig) -> FileScanBatch:
    name = str(config.root)
    try:
        return FileScanBatch(path=name, matches=tuple(scan_file(config.root, config.pattern)))
    except OSError as exc:
        return FileScanBatch.failed(name, exc)


def search(
    config: ScanConfig,
    *,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> RenderSummary:
    """Search ``config.root`` for ``config.pattern`` and render the matches.

    A file root is scanned synchronously.  A directory root is walked and
    its files are scanned concurrently when ``config.recursive`` is set.

    Returns
    -------
    ``RenderSummary``
        Files seen, matches written and files that could not be read.

    Raises
    ------
    OSError
        If ``config.root`` cannot be stat-ed (missing, permission denied).
    PathTypeError
        If ``config.root`` is a directory and recursion was not requested.
    WalkError
        If the directory walk fails.  Batches delivered before the failure
        have already been rendered.
    """
    root = config.root
    mode = root.stat().st_mode

    if stat.S_ISDIR(mode):
        if not config.recursive:
            raise PathTypeError(root)
        logger.debug(f"Recursive search of {root} for {config.pattern!r}")
        dispatcher = ScanDispatcher(
            config.pattern,
            max_workers=config.max_workers,
            follow_symlinks=config.follow_symlinks,
        )
        batches = dispatcher.dispatch(root)
    else:
        batches = [_scan_single(config)]

    return render(batches, line_numbers=config.line_numbers, out=out, err=err)
