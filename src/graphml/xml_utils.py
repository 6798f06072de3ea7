# src/graphml/xml_utils.py — v1
"""XML construction and serialization helpers for GraphML fragments."""

from __future__ import annotations

import hashlib
import json
import xml.etree.ElementTree as ET
from typing import Any

from ncexport.codebook.type_inference import number_to_text

EOL = "\n"


def sha1(text: str) -> str:
    """Hex SHA-1 of UTF-8 text. Always a valid NMTOKEN."""
    return hashlib.sha1(text.encode("utf-8")).hexdigest()


def format_value(value: Any) -> str:
    """Text content for a <data> element."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return number_to_text(value)
    if isinstance(value, (list, dict)):
        return json.dumps(value, default=str)
    return str(value)


def create_element(
    tag: str, attrs: dict[str, Any] | None = None, text: str | None = None
) -> ET.Element:
    element = ET.Element(tag, {k: str(v) for k, v in (attrs or {}).items()})
    if text is not None:
        element.text = text
    return element


def create_data_element(key: str, value: Any) -> ET.Element:
    return create_element("data", {"key": key}, format_value(value))


def serialize(element: ET.Element) -> str:
    return f"{ET.tostring(element, encoding='unicode')}{EOL}"


def format_xml(element: ET.Element, tab: str = "\t") -> str:
    """Serialize an element with every child on its own indented line.

    Gephi rejects very long lines, so node and edge elements are broken up
    before being written. Only whitespace between tags is touched: leaf text,
    including whitespace-only values, is written as-is.
    """
    ET.indent(element, space=tab)
    return ET.tostring(element, encoding="unicode")


def format_and_serialize(element: ET.Element) -> str:
    return f"{format_xml(element)}{EOL}"
