"""Error taxonomy for boxlayout."""

from .lib import (
    ConfigurationError,
    LayoutError,
    LayoutNotComputedError,
    MissingAnchorError,
)

__all__ = [
    "LayoutError",
    "ConfigurationError",
    "MissingAnchorError",
    "LayoutNotComputedError",
]
