"""Core services shared by every boxlayout package."""

from .errors import (
    ConfigurationError,
    LayoutError,
    LayoutNotComputedError,
    MissingAnchorError,
)
from .log import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "LayoutError",
    "ConfigurationError",
    "MissingAnchorError",
    "LayoutNotComputedError",
]
