# src/codebook/resolver.py — v1
"""Codebook lookups: resolve a raw attribute key to its variable definition.

Codebooks are frequently partial, so every lookup tolerates missing levels and
returns None instead of raising. Ego variables live in one flat namespace and
ignore the entity subtype.
"""

from __future__ import annotations

from typing import Any, Literal

from ncexport.core.errors import CodebookError
from ncexport.core.models import (
    VARIABLE_TYPES,
    Codebook,
    EntityDefinition,
    VariableDefinition,
    VariableOption,
)

VariableProperty = Literal["name", "type", "options"]


def get_ego_variable_info(codebook: Codebook, key: str) -> VariableDefinition | None:
    """Return the ego variable definition for ``key``, if any."""
    if codebook.ego is None:
        return None
    return codebook.ego.variables.get(key)


def _entity_definitions(
    codebook: Codebook, entity_kind: str
) -> dict[str, EntityDefinition] | None:
    if entity_kind == "node":
        return codebook.node
    if entity_kind == "edge":
        return codebook.edge
    return None


def get_variable_info(
    codebook: Codebook, entity_kind: str, entity: Any, key: str
) -> VariableDefinition | None:
    """Return the variable definition for ``key`` on ``entity``.

    Args:
        codebook: Codebook for the export.
        entity_kind: "node", "edge" or "ego".
        entity: The entity carrying the attribute. Only its ``type`` is read,
            and not at all for ego.
        key: Raw attribute key (normally a variable UUID).

    Returns:
        The definition, or None for external attributes and unknown kinds.
    """
    if entity_kind == "ego":
        return get_ego_variable_info(codebook, key)

    definitions = _entity_definitions(codebook, entity_kind)
    subtype = getattr(entity, "type", None)
    if definitions is None or subtype is None:
        return None

    definition = definitions.get(subtype)
    if definition is None:
        return None
    return definition.variables.get(key)


def get_attribute_property(
    codebook: Codebook,
    entity_kind: str,
    entity: Any,
    key: str,
    attribute_property: VariableProperty = "type",
) -> Any:
    """Return one property (name, type or options) of a variable, or None."""
    variable = get_variable_info(codebook, entity_kind, entity, key)
    if variable is None:
        return None
    return getattr(variable, attribute_property, None)


def codebook_exists(codebook: Codebook, entity_kind: str, entity: Any, key: str) -> bool:
    """True if ``key`` is a codebook variable with a recognised type."""
    variable = get_variable_info(codebook, entity_kind, entity, key)
    return variable is not None and variable.type in VARIABLE_TYPES


def get_display_name(codebook: Codebook, entity_kind: str, entity: Any, key: str) -> str:
    """Human-readable variable name, falling back to the raw key."""
    return get_attribute_property(codebook, entity_kind, entity, key, "name") or key


def get_categorical_options(
    codebook: Codebook, entity_kind: str, entity: Any, key: str
) -> list[VariableOption]:
    """Options of a categorical variable.

    Raises:
        CodebookError: If the variable is categorical but declares no options.
    """
    variable = get_variable_info(codebook, entity_kind, entity, key)
    if variable is None or variable.options is None:
        raise CodebookError(
            f"Categorical variable {key!r} on {entity_kind} has no options in the codebook"
        )
    return variable.options


def get_entity_type_name(codebook: Codebook, entity_kind: str, subtype: str) -> str:
    """Display name of a node or edge subtype, falling back to the subtype id."""
    definitions = _entity_definitions(codebook, entity_kind) or {}
    definition = definitions.get(subtype)
    if definition is None or not definition.name:
        return subtype
    return definition.name


def find_name_variable(codebook: Codebook, entity_kind: str, subtype: str) -> str | None:
    """Key of the first variable whose name is "name" (case-insensitive)."""
    definitions = _entity_definitions(codebook, entity_kind) or {}
    definition = definitions.get(subtype)
    if definition is None:
        return None
    for key, variable in definition.variables.items():
        if variable.name.lower() == "name":
            return key
    return None
