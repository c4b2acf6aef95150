"""Exceptions raised by the layout engine.

All of them signal programmer errors: they are raised where the condition is
detected and are never swallowed by the engine. Overflowing or degenerate
geometry is not an error and never raises.
"""

__all__ = [
    "LayoutError",
    "ConfigurationError",
    "MissingAnchorError",
    "LayoutNotComputedError",
]


class LayoutError(Exception):
    """Base class for layout errors.

    Attributes:
        node_id: ID of the offending node, when known.
    """

    def __init__(self, message: str, node_id: str | None = None):
        super().__init__(message)
        self.node_id = node_id


class ConfigurationError(LayoutError):
    """Invalid node configuration, raised at construction or attach time."""


class MissingAnchorError(LayoutError):
    """A proportional node has neither a parent nor a page rectangle."""


class LayoutNotComputedError(LayoutError):
    """A flex child was resolved before its container was distributed."""
