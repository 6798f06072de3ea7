# src/codebook/type_inference.py — v1
"""Infer a GraphML primitive type for ordinal and number variables.

GraphML types extend xs:NMTOKEN: boolean, int, long, float, double, string.
Numeric variables are scanned across all entities: the first classified value
seeds the result and later conflicts only ever widen it
(int -> double -> string).
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any, Literal

GraphMLType = Literal["int", "double", "string"]


def number_to_text(value: float) -> str:
    """Shortest text form of a number: integral values drop the fraction."""
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return str(value)


def classify_value(value: Any) -> GraphMLType:
    """Classify a single attribute value."""
    if isinstance(value, bool):
        return "string"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        if not math.isfinite(value):
            return "string"
        return "int" if value.is_integer() else "double"
    if isinstance(value, str):
        return _classify_text(value)
    return "string"


def _classify_text(text: str) -> GraphMLType:
    # Only strings that survive a parse/format round trip count as numbers
    try:
        if str(int(text)) == text:
            return "int"
    except ValueError:
        pass
    try:
        parsed = float(text)
    except ValueError:
        return "string"
    if math.isfinite(parsed) and number_to_text(parsed) == text:
        return "double"
    return "string"


def _widen(current: GraphMLType, other: GraphMLType) -> GraphMLType:
    if current == other:
        return current
    if {current, other} == {"int", "double"}:
        return "double"
    return "string"


def infer_graphml_type(entities: Iterable[Any], key: str) -> GraphMLType | None:
    """Infer the GraphML type of attribute ``key`` across ``entities``.

    Entities missing the attribute (or holding None) are skipped.

    Returns:
        "int", "double" or "string"; None if no entity had a value.
    """
    result: GraphMLType | None = None
    for entity in entities:
        value = entity.attributes.get(key)
        if value is None:
            continue
        current = classify_value(value)
        result = current if result is None else _widen(result, current)
    return result
