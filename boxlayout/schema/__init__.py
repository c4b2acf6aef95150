"""Authoritative value types for boxlayout.

Enums, the `Rect` value type and size-value parsing shared by the node
model, the resolver, the distributor and the renderer.
"""

from .lib import (
    AlignItems,
    FlexDirection,
    HorizontalAlign,
    ImageFit,
    JustifyContent,
    MeasurementMode,
    NodeKind,
    Rect,
    TextAlign,
    VerticalAlign,
    parse_position,
    parse_size,
)

__all__ = [
    # Sizing
    "MeasurementMode",
    "parse_position",
    "parse_size",
    # Node variants
    "NodeKind",
    # Flex enums
    "FlexDirection",
    "JustifyContent",
    "AlignItems",
    # Content hints
    "ImageFit",
    "HorizontalAlign",
    "VerticalAlign",
    "TextAlign",
    # Geometry
    "Rect",
]
