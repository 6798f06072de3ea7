# src/network/coordinates.py — v1
"""Layout variable projection from normalized space into screen pixels.

Normalized coordinates live in [0, 1] with a bottom-up Y axis; screen space is
top-down, so Y is flipped when denormalizing.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ncexport.core.models import ExportOptions


def denormalize(x: float, y: float, width: float, height: float) -> tuple[float, float]:
    """Project a normalized point to pixels, rounded to two decimals."""
    return round(x * width, 2), round((1.0 - y) * height, 2)


def resolve_layout(
    value: Mapping[str, Any] | None, options: ExportOptions
) -> tuple[float | None, float | None]:
    """Return the (x, y) pair to export for a layout attribute value.

    Args:
        value: Stored layout value, a mapping with "x" and "y", or None.
        options: Export options; screen projection is applied only when
            ``use_screen_layout_coordinates`` is set.

    Returns:
        (None, None) when the entity has no layout value.
    """
    if not value:
        return None, None
    x, y = value["x"], value["y"]
    if options.use_screen_layout_coordinates:
        return denormalize(x, y, options.screen_layout_width, options.screen_layout_height)
    return x, y


def is_layout_value(value: Any) -> bool:
    """True for a stored layout value: a mapping with "x" and "y"."""
    return isinstance(value, Mapping) and "x" in value and "y" in value
