"""textscan — literal substring search over files and directory trees."""

__all__ = [
    "__version__",
    "search",
    "scan_file",
    "dispatch",
    "Match",
    "FileScanBatch",
    "ScanConfig",
]
__version__ = "0.1.0"

# Programmatic entrypoints.
from textscan.api import search  # noqa: E402, F401
from textscan.core.config import ScanConfig  # noqa: E402, F401
from textscan.core.dispatcher import dispatch  # noqa: E402, F401
from textscan.core.scanner import scan_file  # noqa: E402, F401
from textscan.model import FileScanBatch, Match  # noqa: E402, F401
