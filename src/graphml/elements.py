# src/graphml/elements.py — v1
"""<node>, <edge> and ego <data> elements.

Every <data> key is derived with the same rules as the <key> declarations in
graphml.keys. Deduplication is not needed here: each entity writes each of its
attributes exactly once.
"""

from __future__ import annotations

import logging
import uuid
import xml.etree.ElementTree as ET
from collections.abc import Iterable, Sequence
from typing import Any

from ncexport.codebook.resolver import (
    find_name_variable,
    get_attribute_property,
    get_categorical_options,
    get_display_name,
    get_entity_type_name,
)
from ncexport.core.models import Codebook, Edge, Ego, Entity, EntityKind, ExportOptions
from ncexport.core.reserved import (
    DEFAULT_NODE_LABEL,
    LABEL_KEY,
    NC_SOURCE_UUID_KEY,
    NC_TARGET_UUID_KEY,
    NC_TYPE_KEY,
    NC_UUID_KEY,
)
from ncexport.graphml.identifiers import categorical_key_id, layout_key_ids, resolve_key_id
from ncexport.graphml.xml_utils import (
    create_data_element,
    create_element,
    format_and_serialize,
)
from ncexport.network.coordinates import is_layout_value, resolve_layout
from ncexport.network.preprocessing import selection_includes

logger = logging.getLogger(__name__)


def _coordinate_text(value: float, options: ExportOptions) -> Any:
    # Screen coordinates are always written with two decimals
    if options.use_screen_layout_coordinates:
        return f"{value:.2f}"
    return value


def _attribute_data_elements(
    entity: Entity | Ego,
    entity_kind: str,
    exclude: Sequence[str],
    codebook: Codebook,
    options: ExportOptions,
) -> list[ET.Element]:
    elements: list[ET.Element] = []
    for key, value in entity.attributes.items():
        if not value:
            continue
        if get_display_name(codebook, entity_kind, entity, key) in exclude:
            continue

        variable_type = get_attribute_property(codebook, entity_kind, entity, key)

        if variable_type == "categorical":
            for option in get_categorical_options(codebook, entity_kind, entity, key):
                elements.append(
                    create_data_element(
                        categorical_key_id(key, option.value),
                        selection_includes(value, option.value),
                    )
                )
        elif variable_type == "layout":
            if not is_layout_value(value):
                logger.warning(
                    "Skipping malformed layout value for %s on %s %s",
                    key, entity_kind, entity.primary_key,
                )
                continue
            x, y = resolve_layout(value, options)
            x_id, y_id = layout_key_ids(key)
            elements.append(create_data_element(x_id, _coordinate_text(x, options)))
            elements.append(create_data_element(y_id, _coordinate_text(y, options)))
        else:
            elements.append(
                create_data_element(resolve_key_id(codebook, entity_kind, entity, key), value)
            )
    return elements


def _node_label(entity: Entity, codebook: Codebook) -> Any:
    name_variable = find_name_variable(codebook, "node", entity.type)
    if name_variable and entity.attributes.get(name_variable):
        return entity.attributes[name_variable]
    return DEFAULT_NODE_LABEL


def _entity_element(
    entity: Entity,
    entity_kind: str,
    exclude: Sequence[str],
    codebook: Codebook,
    options: ExportOptions,
) -> ET.Element:
    if entity.primary_key:
        element_id = entity.export_id if entity.export_id is not None else entity.primary_key
    else:
        logger.warning("No primary key found on %s; generating a random id", entity_kind)
        element_id = str(uuid.uuid4())

    element = create_element(entity_kind, {"id": element_id})

    if entity.primary_key:
        element.append(create_data_element(NC_UUID_KEY, entity.primary_key))
    element.append(
        create_data_element(NC_TYPE_KEY, get_entity_type_name(codebook, entity_kind, entity.type))
    )

    if isinstance(entity, Edge):
        source = entity.source_id if entity.source_id is not None else entity.source_key
        target = entity.target_id if entity.target_id is not None else entity.target_key
        element.set("source", str(source))
        element.set("target", str(target))
        element.append(
            create_data_element(NC_SOURCE_UUID_KEY, entity.source_uuid or entity.source_key)
        )
        element.append(
            create_data_element(NC_TARGET_UUID_KEY, entity.target_uuid or entity.target_key)
        )
    else:
        element.append(create_data_element(LABEL_KEY, _node_label(entity, codebook)))

    element.extend(_attribute_data_elements(entity, entity_kind, exclude, codebook, options))
    return element


def generate_data_elements(
    entities: Iterable[Entity],
    entity_kind: EntityKind,
    exclude: Sequence[str],
    codebook: Codebook,
    options: ExportOptions,
) -> str:
    """Serialize one <node> or <edge> element per entity.

    Args:
        entities: Resequenced nodes or edges.
        entity_kind: "node" or "edge".
        exclude: Variable names (or raw keys) to leave out.
        codebook: Codebook for the export.
        options: Export options (layout projection).

    Returns:
        The indented elements, concatenated.
    """
    return "".join(
        format_and_serialize(_entity_element(entity, entity_kind, exclude, codebook, options))
        for entity in entities
    )


def generate_ego_data_elements(
    ego: Ego,
    exclude: Sequence[str],
    codebook: Codebook,
    options: ExportOptions,
) -> str:
    """Serialize the ego's <data> elements.

    Ego data attaches to the enclosing <graph>, so there is no wrapper element.
    """
    elements = [create_data_element(NC_UUID_KEY, ego.primary_key)] if ego.primary_key else []
    elements.extend(_attribute_data_elements(ego, "ego", exclude, codebook, options))
    return "".join(format_and_serialize(element) for element in elements)
