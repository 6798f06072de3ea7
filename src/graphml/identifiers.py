# src/graphml/identifiers.py — v1
"""Derivation of <key> ids from attribute keys.

The key-schema generator and the element generator both go through these
functions, so a <data key="..."> always matches a declared <key id="...">.

<key> ids must be xs:NMTOKEN. Codebook variable keys are UUIDs and are used
as-is; anything else may be free text and is replaced by its SHA-1. Do not
switch this to variable names for the same reason.
"""

from __future__ import annotations

from typing import Any

from ncexport.codebook.resolver import get_attribute_property
from ncexport.core.models import Codebook
from ncexport.graphml.xml_utils import format_value, sha1


def resolve_key_id(codebook: Codebook, entity_kind: str, entity: Any, key: str) -> str:
    if get_attribute_property(codebook, entity_kind, entity, key):
        return key
    return sha1(key)


def categorical_key_id(key: str, option_value: Any) -> str:
    return f"{key}_{sha1(format_value(option_value))}"


def layout_key_ids(key: str) -> tuple[str, str]:
    return f"{key}_X", f"{key}_Y"
