# src/storage/sink_factory.py — v1
"""Factory: instantiate the storage sink from configuration."""

from __future__ import annotations

from ncexport.config.settings import Settings
from ncexport.storage.base_sink import BaseStorageSink
from ncexport.storage.local_sink import LocalSink


def create_sink(settings: Settings) -> BaseStorageSink:
    """Create the storage sink selected by settings.

    Args:
        settings: Application settings (OUTPUT_WRITER, OUTPUT_DIR env vars).

    Returns:
        BaseStorageSink instance.

    Raises:
        ValueError: If the sink type is not supported.
    """
    if settings.output_writer == "local":
        return LocalSink(str(settings.output_dir))

    raise ValueError(f"Unsupported output writer: {settings.output_writer!r}")
