# src/network/preprocessing.py — v1
"""Normalize raw sessions into an exportable shape.

Steps, each returning new models and never mutating their input:
  1. Ego attribution: stamp each node/edge with its session's ego key
  2. ID resequencing: compact integer ids across all sessions
  3. Partitioning: split per entity subtype for per-table formats
  4. Attribute renaming: human-readable columns for tabular formats
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal, TypeVar, get_args

from ncexport.codebook.resolver import (
    get_attribute_property,
    get_categorical_options,
    get_display_name,
    get_entity_type_name,
)
from ncexport.core.errors import ResequencingError, UnsupportedFormatError
from ncexport.core.models import (
    Codebook,
    Edge,
    Entity,
    EntityKind,
    ExportOptions,
    Node,
    Session,
)
from ncexport.network.coordinates import is_layout_value, resolve_layout

logger = logging.getLogger(__name__)

ExportFormat = Literal["graphml", "ego", "attributeList", "edgeList", "adjacencyMatrix"]

EXPORT_FORMATS: tuple[str, ...] = get_args(ExportFormat)

E = TypeVar("E", bound=Entity)


# === EGO ATTRIBUTION ===


def insert_network_ego(session: Session) -> Session:
    """Reference the session's ego from every node and edge.

    An entity that already carries an ego reference keeps it.
    """
    ego_key = session.ego.primary_key
    return session.model_copy(
        update={
            "nodes": [_with_ego(node, ego_key) for node in session.nodes],
            "edges": [_with_ego(edge, ego_key) for edge in session.edges],
        }
    )


def insert_ego_into_session_networks(sessions: list[Session]) -> list[Session]:
    return [insert_network_ego(session) for session in sessions]


def _with_ego(entity: E, ego_key: str | None) -> E:
    if entity.ego_id is not None:
        return entity
    return entity.model_copy(update={"ego_id": ego_key})


# === ATTRIBUTE RENAMING (tabular formats) ===


def selection_includes(selection: object, value: object) -> bool:
    """Whether a (possibly multi-valued) categorical selection holds ``value``."""
    if selection is None:
        return False
    if isinstance(selection, (list, tuple, set, frozenset)):
        return value in selection
    return selection == value


def process_entity_variables(
    entity: E,
    entity_kind: EntityKind,
    codebook: Codebook,
    options: ExportOptions,
) -> E:
    """Replace variable UUIDs with names and expand compound variables.

    Categorical variables become one boolean per option named
    ``{name}_{option}``; layout variables become ``{name}_x`` / ``{name}_y``,
    projected to screen pixels when the options ask for it. Attributes missing
    from the codebook keep their raw key.
    """
    attributes: dict[str, object] = {}
    for key, value in entity.attributes.items():
        name = get_display_name(codebook, entity_kind, entity, key)
        variable_type = get_attribute_property(codebook, entity_kind, entity, key)

        if variable_type == "categorical":
            for option in get_categorical_options(codebook, entity_kind, entity, key):
                attributes[f"{name}_{option.value}"] = selection_includes(value, option.value)
        elif variable_type == "layout":
            if value and not is_layout_value(value):
                logger.warning(
                    "Skipping malformed layout value for %s on %s %s",
                    key, entity_kind, entity.primary_key,
                )
                x, y = None, None
            else:
                x, y = resolve_layout(value, options)
            attributes[f"{name}_x"] = x
            attributes[f"{name}_y"] = y
        else:
            attributes[name] = value

    return entity.model_copy(update={"attributes": attributes})


# === PARTITIONING ===


def _group_by_type(entities: list[E]) -> dict[str, list[E]]:
    groups: dict[str, list[E]] = {}
    for entity in entities:
        groups.setdefault(entity.type, []).append(entity)
    return groups


def partition_network_by_type(
    codebook: Codebook, session: Session, export_format: str
) -> list[Session]:
    """Split a session into one network per entity subtype, as the format needs.

    Whole-graph formats (graphml, ego) return the session unchanged. Node-table
    formats split nodes by subtype, edge-oriented formats split edges. Each
    partition carries ``partition_entity``, the subtype's display name.

    Args:
        codebook: Codebook used to resolve subtype names.
        session: Session to partition.
        export_format: One of ``EXPORT_FORMATS``.

    Returns:
        At least one session; the input itself if there is nothing to split.

    Raises:
        UnsupportedFormatError: If the format is not recognised.
    """
    if export_format in ("graphml", "ego"):
        return [session]

    if export_format == "attributeList":
        if not session.nodes:
            return [session]
        node_groups = _group_by_type(session.nodes)
        logger.debug("Partitioned %d nodes into %d node types", len(session.nodes), len(node_groups))
        return [
            session.model_copy(
                update={
                    "nodes": nodes,
                    "partition_entity": get_entity_type_name(codebook, "node", node_type),
                }
            )
            for node_type, nodes in node_groups.items()
        ]

    if export_format in ("edgeList", "adjacencyMatrix"):
        if not session.edges:
            return [session]
        edge_groups = _group_by_type(session.edges)
        logger.debug("Partitioned %d edges into %d edge types", len(session.edges), len(edge_groups))
        return [
            session.model_copy(
                update={
                    "edges": edges,
                    "partition_entity": get_entity_type_name(codebook, "edge", edge_type),
                }
            )
            for edge_type, edges in edge_groups.items()
        ]

    raise UnsupportedFormatError(f"Unexpected export format: {export_format!r}")


# === ID RESEQUENCING ===


@dataclass
class ResequenceState:
    """Counter and original-key lookup shared by one resequencing pass."""

    counter: int = 0
    lookup: dict[str, int] = field(default_factory=dict)

    def assign(self, primary_key: str | None) -> int:
        self.counter += 1
        if primary_key is not None:
            self.lookup[primary_key] = self.counter
        return self.counter

    def resolve(self, edge: Edge, endpoint_key: str) -> int:
        try:
            return self.lookup[endpoint_key]
        except KeyError:
            raise ResequencingError(
                f"Edge {edge.primary_key!r} references node {endpoint_key!r} "
                "which has not been resequenced"
            ) from None


def _resequence_node(node: Node, state: ResequenceState) -> Node:
    return node.model_copy(update={"export_id": state.assign(node.primary_key)})


def _resequence_edge(edge: Edge, state: ResequenceState) -> Edge:
    export_id = state.assign(edge.primary_key)
    return edge.model_copy(
        update={
            "export_id": export_id,
            "source_uuid": edge.source_key,
            "target_uuid": edge.target_key,
            "source_id": state.resolve(edge, edge.source_key),
            "target_id": state.resolve(edge, edge.target_key),
        }
    )


def resequence_ids(
    sessions: list[Session], state: ResequenceState | None = None
) -> list[Session]:
    """Assign compact, monotonically increasing export ids.

    Sessions are walked in order, nodes before edges, with a single counter
    starting at 1. The original-key lookup is not reset between sessions, so
    an edge may reference a node from an earlier session.

    Args:
        sessions: Sessions to resequence.
        state: Optional state to continue numbering from. A fresh one is used
            by default.

    Raises:
        ResequencingError: If an edge endpoint has not been resequenced yet.
    """
    state = state or ResequenceState()
    resequenced: list[Session] = []
    for session in sessions:
        nodes = [_resequence_node(node, state) for node in session.nodes]
        edges = [_resequence_edge(edge, state) for edge in session.edges]
        resequenced.append(session.model_copy(update={"nodes": nodes, "edges": edges}))

    logger.info(
        "Resequenced %d sessions: %d entities", len(resequenced), state.counter
    )
    return resequenced
