"""CLI entry-point for textscan.

Usage:
    python -m textscan <path> <pattern>
    python -m textscan -n <file> <pattern>
    python -m textscan -r [-n] <dir> <pattern>

Prints ``path:line`` (or ``path:N:line`` with ``-n``, N counted from 0) for
every line containing the literal *pattern*, followed by the elapsed time.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import TextIO

from textscan import __version__
from textscan.api import search
from textscan.core.config import ScanConfig
from textscan.errors import SearchError, UsageError, WalkError
from textscan.utils.exit_codes import ExitCode

USAGE = "usage: textscan <path> <pattern> to search"


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="textscan",
        description="Print every line containing a literal substring.",
    )
    # Missing positionals exit with USAGE and ExitCode.ERROR, not argparse status 2.
    p.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=None,
        help="File to scan, or directory to scan with -r.",
    )
    p.add_argument(
        "pattern",
        nargs="?",
        default=None,
        help="Literal substring to search for (\"\" matches every line).",
    )
    p.add_argument(
        "-r",
        dest="recursive",
        action="store_true",
        default=False,
        help="recursive search: for directories",
    )
    p.add_argument(
        "-n",
        dest="line_numbers",
        action="store_true",
        default=False,
        help="print line number",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p


def _config_from_args(args: argparse.Namespace) -> ScanConfig:
    if args.path is None or args.pattern is None:
        raise UsageError(USAGE)
    return ScanConfig(
        root=args.path,
        pattern=args.pattern,
        recursive=args.recursive,
        line_numbers=args.line_numbers,
    )


def _keep_undecodable_bytes(*streams: TextIO) -> None:
    """Write scanned lines back out byte for byte.

    Lines and paths carry undecodable bytes as surrogates (see
    ``core.scanner``); ``surrogateescape`` turns them back into the original
    bytes instead of raising ``UnicodeEncodeError``.
    """
    for stream in streams:
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(errors="surrogateescape")


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = success, 1 = error)."""
    args = _build_parser().parse_args(argv)

    try:
        config = _config_from_args(args)
    except UsageError as exc:
        print(exc)
        return ExitCode.ERROR

    _keep_undecodable_bytes(sys.stdout, sys.stderr)

    start = time.perf_counter()
    try:
        summary = search(config)
    except (SearchError, WalkError) as exc:
        sys.stdout.flush()
        print(f"error: {exc}", file=sys.stderr)
        return ExitCode.ERROR
    except OSError as exc:
        print(f"error: {exc.filename}: {exc.strerror or exc}", file=sys.stderr)
        return ExitCode.ERROR

    elapsed = time.perf_counter() - start
    print(f"Elapsed: {elapsed:.6f}s")
    return ExitCode.SUCCESS if summary.ok else ExitCode.ERROR


if __name__ == "__main__":
    raise SystemExit(main())
