# src/api/facade.py — v1
"""Public API facade: single entry point for GraphML export.

Usage:
    from ncexport.api.facade import export_graphml
    paths = await export_graphml(sessions, codebook)
"""

from __future__ import annotations

import logging
import re

from ncexport.config.settings import Settings
from ncexport.core.models import Codebook, ExportOptions, Session, UnifiedNetwork
from ncexport.graphml.exporter import GraphMLExporter
from ncexport.logging.context import clear_context, set_export_context, set_stage_context
from ncexport.network.aggregation import build_networks
from ncexport.network.preprocessing import (
    insert_ego_into_session_networks,
    partition_network_by_type,
    resequence_ids,
)
from ncexport.storage.base_sink import BaseStorageSink
from ncexport.storage.sink_factory import create_sink

logger = logging.getLogger(__name__)

UNIFIED_FILENAME = "networkCanvasExport"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_.-]+")


def _safe_filename(stem: str) -> str:
    return _UNSAFE_FILENAME_CHARS.sub("_", stem).strip("_") or "session"


def prepare_sessions(sessions: list[Session], codebook: Codebook) -> list[Session]:
    """Run the preprocessing pipeline for a GraphML export.

    Ego attribution, then resequencing across all sessions, then partitioning
    (a no-op for GraphML, which encodes the whole graph at once).
    """
    set_stage_context("preprocess")
    prepared = resequence_ids(insert_ego_into_session_networks(sessions))
    return [
        partition
        for session in prepared
        for partition in partition_network_by_type(codebook, session, "graphml")
    ]


async def export_graphml(
    sessions: list[Session],
    codebook: Codebook,
    settings: Settings | None = None,
    options: ExportOptions | None = None,
    sink: BaseStorageSink | None = None,
) -> list[str]:
    """Export sessions to GraphML and return the paths written.

    Without unification each session is written to its own document named
    after its case id and session id. With unification all sessions share one
    document with a common key schema and one <graph> per session.

    Args:
        sessions: Raw sessions, in export order.
        codebook: Codebook describing every variable.
        settings: Global settings. Loaded from .env if None.
        options: Export options. Built from settings if None.
        sink: Storage sink. Built from settings if None.

    Returns:
        Paths of the written documents, relative to the sink.

    Raises:
        ExportError: If preprocessing or encoding fails.
    """
    settings = settings or Settings()
    options = options or settings.export_options()
    sink = sink or create_sink(settings)

    set_export_context("graphml")
    try:
        prepared = prepare_sessions(sessions, codebook)
        networks = build_networks(prepared, unify=options.unify_networks)

        exporter = GraphMLExporter(
            sink, codebook, options, batch_size=settings.graphml_batch_size
        )
        set_stage_context("encode")

        if isinstance(networks, UnifiedNetwork):
            path = f"{UNIFIED_FILENAME}{exporter.file_extension}"
            return [await exporter.export(networks, path)]

        paths: list[str] = []
        for network in networks:
            variables = network.session_variables
            set_export_context("graphml", variables.session_uuid)
            stem = _safe_filename(f"{variables.case_id}_{variables.session_uuid}")
            paths.append(await exporter.export(network, f"{stem}{exporter.file_extension}"))

        logger.info("Exported %d GraphML documents", len(paths))
        return paths
    finally:
        clear_context()
