# src/graphml/keys.py — v1
"""<key> declarations: the type schema for every <data> element.

Keys are declared once per raw attribute key even when a variable expands into
several keys (categorical options, layout X/Y), so scanning many entities that
share attributes never produces duplicates.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from ncexport.codebook.resolver import (
    get_attribute_property,
    get_categorical_options,
    get_display_name,
)
from ncexport.codebook.type_inference import infer_graphml_type
from ncexport.core.models import Codebook, EntityKind
from ncexport.core.reserved import (
    LABEL_KEY,
    NC_SOURCE_UUID_KEY,
    NC_TARGET_UUID_KEY,
    NC_TYPE_KEY,
    NC_UUID_KEY,
)
from ncexport.graphml.identifiers import categorical_key_id, layout_key_ids, resolve_key_id
from ncexport.graphml.xml_utils import create_element, format_value, serialize

logger = logging.getLogger(__name__)


def _key_element(key_id: str, name: str, attr_type: str, key_for: str) -> str:
    return serialize(
        create_element(
            "key",
            {"id": key_id, "attr.name": name, "attr.type": attr_type, "for": key_for},
        )
    )


def _reserved_keys(entity_kind: str, exclude: Sequence[str]) -> list[str]:
    keys: list[str] = []
    if entity_kind == "node":
        # Label, type and UUID apply to every element, ego included
        for key_id in (LABEL_KEY, NC_TYPE_KEY, NC_UUID_KEY):
            if key_id not in exclude:
                keys.append(_key_element(key_id, key_id, "string", "all"))
    elif entity_kind == "edge":
        keys.append(_key_element(NC_TARGET_UUID_KEY, NC_TARGET_UUID_KEY, "string", "edge"))
        keys.append(_key_element(NC_SOURCE_UUID_KEY, NC_SOURCE_UUID_KEY, "string", "edge"))
    return keys


def _attribute_keys(
    entities: Sequence[Any],
    entity: Any,
    entity_kind: str,
    key: str,
    key_id: str,
    name: str,
    codebook: Codebook,
    key_for: str,
) -> list[str]:
    variable_type = get_attribute_property(codebook, entity_kind, entity, key)

    if variable_type == "boolean":
        return [_key_element(key_id, name, "boolean", key_for)]

    if variable_type in ("ordinal", "number"):
        attr_type = infer_graphml_type(entities, key) or "string"
        return [_key_element(key_id, name, attr_type, key_for)]

    if variable_type == "scalar":
        return [_key_element(key_id, name, "float", key_for)]

    if variable_type == "categorical":
        return [
            _key_element(
                categorical_key_id(key, option.value),
                f"{name}_{format_value(option.value)}",
                "boolean",
                key_for,
            )
            for option in get_categorical_options(codebook, entity_kind, entity, key)
        ]

    if variable_type == "layout":
        x_id, y_id = layout_key_ids(key)
        return [
            _key_element(x_id, f"{name}_X", "double", key_for),
            _key_element(y_id, f"{name}_Y", "double", key_for),
        ]

    # text, datetime and attributes missing from the codebook
    return [_key_element(key_id, name, "string", key_for)]


def generate_key_elements(
    entities: Iterable[Any],
    entity_kind: EntityKind,
    exclude: Sequence[str],
    codebook: Codebook,
) -> str:
    """Build the <key> declarations for one kind of entity.

    Args:
        entities: Nodes, edges, or egos (several egos when sessions are unified).
        entity_kind: "node", "edge" or "ego". Ego keys target the <graph>.
        exclude: Variable names (or raw keys) to leave out.
        codebook: Codebook for the export.

    Returns:
        Serialized <key> elements, one per line.
    """
    entities = list(entities)
    key_for = "graph" if entity_kind == "ego" else entity_kind
    fragment = _reserved_keys(entity_kind, exclude)
    done: set[str] = set()

    for entity in entities:
        for key in entity.attributes:
            # Tracked by resolved id: the same raw key may be a codebook
            # variable on one subtype and external data on another
            key_id = resolve_key_id(codebook, entity_kind, entity, key)
            if key_id in done:
                continue
            name = get_display_name(codebook, entity_kind, entity, key)
            if name in exclude:
                continue
            fragment.extend(
                _attribute_keys(
                    entities, entity, entity_kind, key, key_id, name, codebook, key_for
                )
            )
            done.add(key_id)

    logger.debug("Declared %d %s attribute keys", len(done), entity_kind)
    return "".join(fragment)
