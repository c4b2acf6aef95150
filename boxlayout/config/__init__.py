"""Centralized configuration management for boxlayout.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from boxlayout.config import EnvVar, get_environment
    >>>
    >>> # Get any environment variable with automatic type conversion
    >>> width = get_environment(EnvVar.BOXLAYOUT_BORDER_WIDTH)  # Returns float: 1.0
    >>>
    >>> # Override at runtime
    >>> width = get_environment(EnvVar.BOXLAYOUT_BORDER_WIDTH, override=0.5)

Environment Variable Categories:
    logging: Log verbosity
    defaults: Default styling applied to newly constructed nodes
"""

from .lib import (
    # Core types
    EnvConfig,
    EnvVar,
    # Main interface
    get_environment,
    get_environment_info,
    get_log_level,
    get_node_defaults,
    # Introspection
    list_environment_variables,
)

__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_log_level",
    "get_node_defaults",
    # Introspection
    "list_environment_variables",
]
