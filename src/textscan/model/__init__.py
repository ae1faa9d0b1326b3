"""Immutable result types shared by the scanner, dispatcher and sink."""

from __future__ import annotations

from textscan.model.match import FileScanBatch, Match

__all__ = ["FileScanBatch", "Match"]
