"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success — search completed, every file was read
  1   Error — usage error, directory without -r, missing path,
      unreadable file or aborted directory walk
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 1
