# src/storage/base_sink.py — v1
"""Abstract storage sink interface.

Exported documents are streamed to a sink one fragment at a time. Platform
selection (local disk, remote storage) happens entirely outside the encoder.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseStorageSink(ABC):
    """Unified interface for export destinations."""

    @abstractmethod
    async def write(self, path: str, chunk: bytes | str) -> None:
        """Append a chunk to the file at path, creating it if needed."""

    @abstractmethod
    async def create_directory(self, path: str) -> None:
        """Create a directory (and its parents) if it does not exist."""

    @abstractmethod
    async def remove(self, path: str) -> None:
        """Remove a file or directory. Missing paths are ignored."""

    @abstractmethod
    async def exists(self, path: str) -> bool:
        """Check if path exists."""
