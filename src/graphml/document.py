# src/graphml/document.py — v1
"""Streaming GraphML document assembly.

``graphml_generator`` returns a lazy iterator of text fragments, in order:
  1. XML declaration and <graphml> opening tag
  2. <key> declarations for ego, nodes, then edges
  3. one <graph> section per document, or per session when unified
  4. closing </graphml>

Node and edge elements are produced in batches so that no fragment holds more
than ``batch_size`` elements. Consumers may write each fragment to a sink
before pulling the next.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import TypeVar
from xml.sax.saxutils import quoteattr

from ncexport.core.errors import ExportError
from ncexport.core.models import (
    Codebook,
    Ego,
    ExportOptions,
    Network,
    SessionVariables,
    UnifiedNetwork,
)
from ncexport.core.reserved import (
    GRAPHML_NAMESPACE,
    GRAPHML_SCHEMA_LOCATION,
    NC_CASE_ID,
    NC_NAMESPACE,
    NC_PROTOCOL_NAME,
    NC_REMOTE_PROTOCOL_ID,
    NC_SESSION_EXPORT_TIME,
    NC_SESSION_FINISH_TIME,
    NC_SESSION_START_TIME,
    NC_SESSION_UUID,
    XSI_NAMESPACE,
)
from ncexport.graphml.elements import generate_data_elements, generate_ego_data_elements
from ncexport.graphml.keys import generate_key_elements
from ncexport.graphml.xml_utils import EOL

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 100

T = TypeVar("T")

XML_FOOTER = f"</graphml>{EOL}"
GRAPH_FOOTER = f"</graph>{EOL}"


def xml_header() -> str:
    return (
        f'<?xml version="1.0" encoding="UTF-8"?>{EOL}'
        f"<graphml{EOL}"
        f'  xmlns="{GRAPHML_NAMESPACE}"{EOL}'
        f'  xmlns:xsi="{XSI_NAMESPACE}"{EOL}'
        f'  xsi:schemaLocation="{GRAPHML_NAMESPACE}{EOL}'
        f'  {GRAPHML_SCHEMA_LOCATION}"{EOL}'
        f'  xmlns:nc="{NC_NAMESPACE}">{EOL}'
    )


def graph_header(options: ExportOptions, session_variables: SessionVariables) -> str:
    """Opening <graph> tag carrying the session metadata."""
    edge_default = "directed" if options.use_directed_edges else "undirected"
    attributes = [
        ("edgedefault", edge_default),
        (NC_CASE_ID, session_variables.case_id),
        (NC_SESSION_UUID, session_variables.session_uuid),
        (NC_PROTOCOL_NAME, session_variables.protocol_name),
        (NC_REMOTE_PROTOCOL_ID, session_variables.remote_protocol_id),
        (NC_SESSION_EXPORT_TIME, session_variables.export_time),
    ]
    if session_variables.start_time:
        attributes.append((NC_SESSION_START_TIME, session_variables.start_time))
    if session_variables.finish_time:
        attributes.append((NC_SESSION_FINISH_TIME, session_variables.finish_time))

    lines = "".join(f"  {name}={quoteattr(str(value))}{EOL}" for name, value in attributes)
    return f"<graph{EOL}{lines}>{EOL}"


def _batched(items: Sequence[T], size: int) -> Iterator[Sequence[T]]:
    for start in range(0, len(items), size):
        yield items[start:start + size]


def graphml_generator(
    network: Network | UnifiedNetwork,
    codebook: Codebook,
    options: ExportOptions,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> Iterator[str]:
    """Encode a network as a lazy sequence of GraphML fragments.

    Args:
        network: A ``UnifiedNetwork`` when ``options.unify_networks`` is set,
            otherwise a flattened ``Network``.
        codebook: Codebook for the export.
        options: Export options.
        batch_size: Maximum number of node or edge elements per fragment.

    Returns:
        A finite, non-restartable iterator of XML text fragments.

    Raises:
        ExportError: If the network shape does not match the unify option, or
            the batch size is not positive. Raised immediately, before any
            fragment is produced.
    """
    if batch_size < 1:
        raise ExportError(f"batch_size must be >= 1, got {batch_size}")

    if options.unify_networks:
        if not isinstance(network, UnifiedNetwork):
            raise ExportError("unify_networks requires a UnifiedNetwork")
        return _unified_fragments(network, codebook, options, batch_size)

    if not isinstance(network, Network):
        raise ExportError("A UnifiedNetwork can only be exported with unify_networks")
    return _network_fragments(network, codebook, options, batch_size)


def _graph_body(
    ego: Ego | None,
    nodes: Sequence,
    edges: Sequence,
    codebook: Codebook,
    options: ExportOptions,
    batch_size: int,
) -> Iterator[str]:
    if ego is not None:
        yield generate_ego_data_elements(ego, [], codebook, options)
    for batch in _batched(nodes, batch_size):
        yield generate_data_elements(batch, "node", [], codebook, options)
    for batch in _batched(edges, batch_size):
        yield generate_data_elements(batch, "edge", [], codebook, options)


def _network_fragments(
    network: Network, codebook: Codebook, options: ExportOptions, batch_size: int
) -> Iterator[str]:
    yield xml_header()

    egos = [network.ego] if network.ego is not None else []
    yield generate_key_elements(egos, "ego", [], codebook)
    yield generate_key_elements(network.nodes, "node", [], codebook)
    yield generate_key_elements(network.edges, "edge", [], codebook)

    logger.debug(
        "Writing graph %s: %d nodes, %d edges",
        network.session_variables.session_uuid, len(network.nodes), len(network.edges),
    )
    yield graph_header(options, network.session_variables)
    yield from _graph_body(
        network.ego, network.nodes, network.edges, codebook, options, batch_size
    )
    yield GRAPH_FOOTER

    yield XML_FOOTER


def _unified_fragments(
    network: UnifiedNetwork, codebook: Codebook, options: ExportOptions, batch_size: int
) -> Iterator[str]:
    yield xml_header()

    # Keys are document-global: declare the union across every session
    all_nodes = [node for nodes in network.nodes.values() for node in nodes]
    all_edges = [edge for edges in network.edges.values() for edge in edges]
    yield generate_key_elements(network.ego.values(), "ego", [], codebook)
    yield generate_key_elements(all_nodes, "node", [], codebook)
    yield generate_key_elements(all_edges, "edge", [], codebook)

    for session_id, session_variables in network.session_variables.items():
        nodes = network.nodes.get(session_id, [])
        edges = network.edges.get(session_id, [])
        logger.debug(
            "Writing graph %s: %d nodes, %d edges", session_id, len(nodes), len(edges)
        )
        yield graph_header(options, session_variables)
        yield from _graph_body(
            network.ego.get(session_id), nodes, edges, codebook, options, batch_size
        )
        yield GRAPH_FOOTER

    yield XML_FOOTER
