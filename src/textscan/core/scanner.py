"""Line scanner — literal substring search over the lines of one file."""

from __future__ import annotations

import logging
import os

from textscan.model import Match

logger = logging.getLogger(__name__)


def _split_line(raw: bytes) -> str:
    """Strip the line terminator and decode.

    Lines end at ``\\n``; one trailing ``\\r`` is dropped as well so CRLF
    files behave like LF files on every platform.  Bytes are decoded the
    way the interpreter decodes argv (``os.fsdecode``), so undecodable bytes
    survive as surrogates, compare equal to the same bytes in the pattern and
    encode back unchanged.
    """
    if raw.endswith(b"\n"):
        raw = raw[:-1]
    if raw.endswith(b"\r"):
        raw = raw[:-1]
    return os.fsdecode(raw)


def scan_file(path: str | os.PathLike[str], pattern: str) -> list[Match]:
    """Return every line of *path* containing *pattern*, in file order.

    An empty *pattern* matches every line.  The final line does not need a
    trailing newline.

    Raises
    ------
    OSError
        If the file cannot be opened or a read fails part-way.  No partial
        result is returned.
    """
    name = os.fspath(path)
    matches: list[Match] = []
    with open(path, "rb") as fh:
        for line_number, raw in enumerate(fh):
            line = _split_line(raw)
            if pattern in line:
                matches.append(Match(path=name, line_number=line_number, line=line))
    logger.debug(f"Scanned {name}: {len(matches)} match(es)")
    return matches
