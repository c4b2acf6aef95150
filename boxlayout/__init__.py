"""boxlayout: box and flex layout for paged documents."""

from boxlayout.core import (
    ConfigurationError,
    LayoutError,
    LayoutNotComputedError,
    MissingAnchorError,
    get_logger,
    setup_logging,
)
from boxlayout.engine import compute_layout, resolve_and_distribute
from boxlayout.flex import distribute
from boxlayout.geometry import resolve, resolve_box
from boxlayout.node import (
    Container,
    FlexContainer,
    Image,
    LayoutNode,
    Measurable,
    Text,
    walk,
)
from boxlayout.render import Canvas, draw, layout
from boxlayout.schema import Rect
from boxlayout.validation import ValidationError, is_valid, validate_layout

__all__ = [
    # Nodes
    "LayoutNode",
    "Container",
    "Image",
    "Text",
    "FlexContainer",
    "Measurable",
    "walk",
    "Rect",
    # Layout
    "resolve",
    "resolve_box",
    "distribute",
    "resolve_and_distribute",
    "compute_layout",
    # Rendering
    "Canvas",
    "draw",
    "layout",
    # Validation
    "validate_layout",
    "is_valid",
    "ValidationError",
    # Errors
    "LayoutError",
    "ConfigurationError",
    "MissingAnchorError",
    "LayoutNotComputedError",
    # Logging
    "get_logger",
    "setup_logging",
]
