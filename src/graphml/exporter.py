# src/graphml/exporter.py — v1
"""GraphML exporter: streams document fragments into a storage sink."""

from __future__ import annotations

import logging
from pathlib import PurePosixPath

from ncexport.core.models import Codebook, ExportOptions, Network, UnifiedNetwork
from ncexport.graphml.base_exporter import BaseNetworkExporter
from ncexport.graphml.document import DEFAULT_BATCH_SIZE, graphml_generator
from ncexport.storage.base_sink import BaseStorageSink

logger = logging.getLogger(__name__)


class GraphMLExporter(BaseNetworkExporter):
    """Export a network to GraphML, one fragment write at a time."""

    def __init__(
        self,
        sink: BaseStorageSink,
        codebook: Codebook,
        options: ExportOptions,
        batch_size: int = DEFAULT_BATCH_SIZE,
    ) -> None:
        self._sink = sink
        self._codebook = codebook
        self._options = options
        self._batch_size = batch_size

    @property
    def format_name(self) -> str:
        return "graphml"

    @property
    def file_extension(self) -> str:
        return ".graphml"

    async def export(self, network: Network | UnifiedNetwork, output_path: str) -> str:
        # Fails before anything touches the sink if the network shape is wrong
        fragments = graphml_generator(
            network, self._codebook, self._options, batch_size=self._batch_size
        )

        parent = str(PurePosixPath(output_path).parent)
        if parent not in ("", "."):
            await self._sink.create_directory(parent)
        # The sink appends, so start from an empty file
        if await self._sink.exists(output_path):
            await self._sink.remove(output_path)

        count = 0
        try:
            for fragment in fragments:
                if fragment:
                    await self._sink.write(output_path, fragment)
                    count += 1
        except BaseException:
            logger.warning("Export of %s failed, removing partial document", output_path)
            await self._sink.remove(output_path)
            raise

        logger.info("Wrote GraphML document %s (%d fragments)", output_path, count)
        return output_path
