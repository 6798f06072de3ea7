# src/core/errors.py — v1
"""Exception hierarchy for preprocessing and GraphML encoding."""

from __future__ import annotations


class ExportError(Exception):
    """Base class for failures that abort an export."""


class UnsupportedFormatError(ExportError, ValueError):
    """Raised when partitioning is asked for an unknown export format."""


class ResequencingError(ExportError):
    """Raised when an edge references a node that has not been resequenced."""


class CodebookError(ExportError):
    """Raised when the codebook is structurally unusable for a variable."""
