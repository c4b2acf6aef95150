"""Centralized environment configuration management for boxlayout.

Provides a unified interface for all environment variables with:
- Single `get_environment()` function for all configuration
- Type-safe enum with metadata (default, type, description)
- Consistent resolution: override > environment > default

Example:
    >>> from boxlayout.config import EnvVar, get_environment
    >>>
    >>> # Get values with automatic type conversion
    >>> size = get_environment(EnvVar.BOXLAYOUT_FONT_SIZE)  # Returns float
    >>>
    >>> # Override at runtime
    >>> size = get_environment(EnvVar.BOXLAYOUT_FONT_SIZE, override=9.0)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, overload

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "BOXLAYOUT_LOG_LEVEL").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str or float).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by boxlayout.

    Each member contains an EnvConfig with name, default, type, and description.
    Use with `get_environment()` for type-safe access.

    Categories:
        - logging: Log verbosity
        - defaults: Node styling defaults
    """

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    BOXLAYOUT_LOG_LEVEL = EnvConfig(
        name="BOXLAYOUT_LOG_LEVEL",
        default="WARNING",
        var_type=str,
        description="Log level name used by setup_logging (DEBUG, INFO, ...)",
        category="logging",
    )

    # -------------------------------------------------------------------------
    # Node Defaults
    # -------------------------------------------------------------------------
    BOXLAYOUT_BORDER_WIDTH = EnvConfig(
        name="BOXLAYOUT_BORDER_WIDTH",
        default=1.0,
        var_type=float,
        description="Default border width in pixels (0 disables borders)",
        category="defaults",
    )
    BOXLAYOUT_BORDER_COLOR = EnvConfig(
        name="BOXLAYOUT_BORDER_COLOR",
        default="black",
        var_type=str,
        description="Default border color",
        category="defaults",
    )
    BOXLAYOUT_FONT_SIZE = EnvConfig(
        name="BOXLAYOUT_FONT_SIZE",
        default=12.0,
        var_type=float,
        description="Default font size for text nodes",
        category="defaults",
    )
    BOXLAYOUT_TEXT_COLOR = EnvConfig(
        name="BOXLAYOUT_TEXT_COLOR",
        default="black",
        var_type=str,
        description="Default fill color for text nodes",
        category="defaults",
    )


# =============================================================================
# Type Conversion Helpers
# =============================================================================


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Convert string value to target type.

    Args:
        value: Raw string value from environment (or None).
        var_type: Target Python type.
        default: Default value if conversion fails or value is None.

    Returns:
        Converted value or default.
    """
    if value is None:
        return default

    if var_type is str:
        return value

    if var_type is float:
        try:
            return float(value)
        except ValueError:
            return default

    # Unknown type, return as-is
    return value


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: float) -> float: ...
@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Get environment variable value with type conversion.

    Resolution priority:
        1. Explicit override parameter (highest)
        2. Environment variable value
        3. Default from EnvConfig (lowest)

    Args:
        env_var: Environment variable enum member.
        override: Optional override value (bypasses env lookup).

    Returns:
        Value converted to the appropriate type.

    Example:
        >>> get_environment(EnvVar.BOXLAYOUT_BORDER_COLOR)
        'black'
        >>> get_environment(EnvVar.BOXLAYOUT_BORDER_COLOR, override="red")
        'red'
    """
    config: EnvConfig = env_var.value

    if override is not None:
        return override

    raw_value = os.environ.get(config.name)
    return _convert_value(raw_value, config.var_type, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Get metadata for an environment variable.

    Args:
        env_var: Environment variable enum member.

    Returns:
        EnvConfig with name, default, type, and description.
    """
    return env_var.value


# =============================================================================
# Convenience Functions
# =============================================================================


def get_log_level(override: str | None = None) -> int:
    """Get the configured log level as a `logging` constant.

    Unknown level names fall back to WARNING.
    """
    name = str(get_environment(EnvVar.BOXLAYOUT_LOG_LEVEL, override=override))
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


def get_node_defaults() -> dict[str, Any]:
    """Get styling defaults for newly constructed nodes.

    Returns:
        Dict with border_width, border_color, font_size and text_color.
    """
    return {
        "border_width": get_environment(EnvVar.BOXLAYOUT_BORDER_WIDTH),
        "border_color": get_environment(EnvVar.BOXLAYOUT_BORDER_COLOR),
        "font_size": get_environment(EnvVar.BOXLAYOUT_FONT_SIZE),
        "text_color": get_environment(EnvVar.BOXLAYOUT_TEXT_COLOR),
    }


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (logging, defaults).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


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
