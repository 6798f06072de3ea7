# src/storage/local_sink.py — v1
"""Local filesystem storage sink (default backend)."""

from __future__ import annotations

import shutil
from pathlib import Path

from ncexport.storage.base_sink import BaseStorageSink


class LocalSink(BaseStorageSink):
    """Write export chunks to the local filesystem."""

    def __init__(self, base_path: str | None = None) -> None:
        """Initialize with optional base path.

        Args:
            base_path: Root directory for all writes. If None, paths are used as given.
        """
        self._base = Path(base_path) if base_path else None

    def _resolve(self, path: str) -> Path:
        """Resolve a path relative to base_path."""
        if self._base is not None:
            return self._base / path
        return Path(path)

    async def write(self, path: str, chunk: bytes | str) -> None:
        """Append a chunk to a local file."""
        p = self._resolve(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(chunk, bytes):
            with p.open("ab") as fh:
                fh.write(chunk)
        else:
            with p.open("a", encoding="utf-8") as fh:
                fh.write(chunk)

    async def create_directory(self, path: str) -> None:
        self._resolve(path).mkdir(parents=True, exist_ok=True)

    async def remove(self, path: str) -> None:
        p = self._resolve(path)
        if p.is_dir() and not p.is_symlink():
            shutil.rmtree(p)
        elif p.exists() or p.is_symlink():
            p.unlink()

    async def exists(self, path: str) -> bool:
        """Check if a local path exists."""
        return self._resolve(path).exists()
