"""Shared utilities for textscan."""

from textscan.utils.exit_codes import ExitCode

__all__ = ["ExitCode"]
