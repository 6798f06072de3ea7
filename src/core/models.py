# src/core/models.py — v1
"""Shared Pydantic domain models used across modules.

No module redefines these types; all imports come from core.models.
Field aliases match the JSON shape of Network Canvas session exports, so raw
session files validate directly into these models.
"""

from __future__ import annotations

from typing import Any, Literal, get_args

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

VariableType = Literal[
    "boolean",
    "ordinal",
    "number",
    "scalar",
    "text",
    "datetime",
    "categorical",
    "layout",
]

VARIABLE_TYPES: tuple[str, ...] = get_args(VariableType)

EntityKind = Literal["node", "edge", "ego"]


# === CODEBOOK ===


class VariableOption(BaseModel):
    """One selectable value of a categorical (or ordinal) variable."""

    model_config = ConfigDict(frozen=True)

    value: str | int | bool
    label: str | None = None


class VariableDefinition(BaseModel):
    """Codebook entry for a single variable."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: VariableType
    options: list[VariableOption] | None = None


class EntityDefinition(BaseModel):
    """Codebook entry for a node or edge subtype."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    variables: dict[str, VariableDefinition] = Field(default_factory=dict)


class EgoDefinition(BaseModel):
    """Ego has a single flat variable namespace."""

    model_config = ConfigDict(frozen=True)

    variables: dict[str, VariableDefinition] = Field(default_factory=dict)


class Codebook(BaseModel):
    """Variable definitions per entity kind and subtype."""

    model_config = ConfigDict(frozen=True)

    node: dict[str, EntityDefinition] = Field(default_factory=dict)
    edge: dict[str, EntityDefinition] = Field(default_factory=dict)
    ego: EgoDefinition | None = None


# === ENTITIES ===


class Entity(BaseModel):
    """A node (or the common part of an edge) captured during a session."""

    model_config = ConfigDict(populate_by_name=True)

    primary_key: str | None = Field(
        default=None, validation_alias=AliasChoices("primary_key", "_uid")
    )
    type: str
    attributes: dict[str, Any] = Field(default_factory=dict)

    # --- Set by preprocessing ---
    ego_id: str | None = None
    export_id: int | None = None


class Node(Entity):
    """A person, place or other alter nominated in a session."""


class Edge(Entity):
    """A relationship between two nodes of a session."""

    source_key: str = Field(validation_alias=AliasChoices("source_key", "from"))
    target_key: str = Field(validation_alias=AliasChoices("target_key", "to"))

    # --- Set by resequencing ---
    source_uuid: str | None = None
    target_uuid: str | None = None
    source_id: int | None = None
    target_id: int | None = None


class Ego(BaseModel):
    """The respondent of a session. Has no subtype."""

    model_config = ConfigDict(populate_by_name=True)

    primary_key: str | None = Field(
        default=None, validation_alias=AliasChoices("primary_key", "_uid")
    )
    attributes: dict[str, Any] = Field(default_factory=dict)


# === SESSIONS AND NETWORKS ===


class SessionVariables(BaseModel):
    """Per-session metadata written onto the <graph> element."""

    model_config = ConfigDict(populate_by_name=True)

    case_id: str = Field(validation_alias=AliasChoices("case_id", "caseId"))
    session_uuid: str = Field(
        validation_alias=AliasChoices("session_uuid", "sessionId")
    )
    protocol_name: str = Field(
        validation_alias=AliasChoices("protocol_name", "protocolName")
    )
    remote_protocol_id: str = Field(
        validation_alias=AliasChoices("remote_protocol_id", "protocolUID")
    )
    export_time: str = Field(
        validation_alias=AliasChoices("export_time", "sessionExported")
    )
    start_time: str | None = Field(
        default=None, validation_alias=AliasChoices("start_time", "sessionStart")
    )
    finish_time: str | None = Field(
        default=None, validation_alias=AliasChoices("finish_time", "sessionFinish")
    )


class Session(BaseModel):
    """One interview: an ego and the network they described."""

    model_config = ConfigDict(populate_by_name=True)

    ego: Ego
    nodes: list[Node] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)
    session_variables: SessionVariables = Field(
        validation_alias=AliasChoices("session_variables", "sessionVariables")
    )

    # Display name of the subtype a partitioned session was split on
    partition_entity: str | None = None


class Network(BaseModel):
    """Flattened network: one ego and one set of session variables."""

    nodes: list[Node] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)
    ego: Ego | None = None
    session_variables: SessionVariables


class UnifiedNetwork(BaseModel):
    """Several sessions combined into one document, indexed by session id.

    Session order is the insertion order of ``session_variables``.
    """

    nodes: dict[str, list[Node]] = Field(default_factory=dict)
    edges: dict[str, list[Edge]] = Field(default_factory=dict)
    ego: dict[str, Ego] = Field(default_factory=dict)
    session_variables: dict[str, SessionVariables] = Field(default_factory=dict)


# === EXPORT OPTIONS ===


class ExportOptions(BaseModel):
    """Caller-selected options for one export."""

    model_config = ConfigDict(frozen=True)

    use_directed_edges: bool = False
    use_screen_layout_coordinates: bool = True
    screen_layout_width: float = 1920
    screen_layout_height: float = 1080
    unify_networks: bool = False
