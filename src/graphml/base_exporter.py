# src/graphml/base_exporter.py — v1
"""Abstract network export interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ncexport.core.models import Network, UnifiedNetwork


class BaseNetworkExporter(ABC):
    """Unified interface for network export formats."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Export format identifier (e.g., 'graphml')."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Output file extension (e.g., '.graphml')."""

    @abstractmethod
    async def export(self, network: Network | UnifiedNetwork, output_path: str) -> str:
        """Export network to a file, return the path written."""
