# src/logging/handlers.py — v1
"""Size-based rotating file handler for export logs."""

from __future__ import annotations

import re
from logging.handlers import RotatingFileHandler
from pathlib import Path

_SIZE_PATTERN = re.compile(r"^(\d+)\s*([KMG]?B)$", re.IGNORECASE)
_UNITS = {"B": 1, "KB": 1024, "MB": 1024**2, "GB": 1024**3}


def parse_size(size: str) -> int:
    """Convert '512KB', '10MB', '1GB' or '100B' to a byte count."""
    match = _SIZE_PATTERN.match(size.strip())
    if match is None:
        raise ValueError(f"Invalid size format: {size!r}. Use e.g. '10MB'.")
    count, unit = match.groups()
    return int(count) * _UNITS[unit.upper()]


def create_rotating_handler(
    log_file: str | Path,
    rotation: str = "10MB",
    retention: int = 30,
) -> RotatingFileHandler:
    """Rotating handler writing UTF-8 to ``log_file``; parent dirs are created.

    ``retention`` is the number of rotated backups kept.
    """
    path = Path(log_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        filename=path,
        maxBytes=parse_size(rotation),
        backupCount=retention,
        encoding="utf-8",
    )
