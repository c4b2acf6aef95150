"""Authoritative value types for the layout engine.

This module is the single source of truth for the vocabulary shared by every
layer: measurement modes, node kinds, flex enums, content alignment hints and
the `Rect` value type. It also owns the parsing of size values given at the
configuration boundary (numbers or percentage strings).
"""

import re
from dataclasses import dataclass
from enum import Enum

from boxlayout.core.errors import ConfigurationError


class MeasurementMode(str, Enum):
    """How a node's position and size are interpreted.

    - ABSOLUTE: position and size are pixels
    - PROPORTIONAL: position and size are fractions of the parent's content
      rectangle, or of the slot assigned by a flex parent
    """

    ABSOLUTE = "absolute"
    PROPORTIONAL = "proportional"


class NodeKind(str, Enum):
    """Closed set of layout node variants."""

    CONTAINER = "container"
    IMAGE = "image"
    TEXT = "text"
    FLEX_CONTAINER = "flex_container"


class FlexDirection(str, Enum):
    """Main axis of a flex container (CSS flex-direction).

    - ROW: main axis is x/width
    - COLUMN: main axis is y/height
    """

    ROW = "row"
    COLUMN = "column"


class JustifyContent(str, Enum):
    """Main-axis distribution for flex children (CSS justify-content)."""

    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    CENTER = "center"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"
    SPACE_EVENLY = "space-evenly"


class AlignItems(str, Enum):
    """Cross-axis alignment for flex children (CSS align-items).

    - FLEX_START: align to the cross-axis start, keep own size
    - FLEX_END: align to the cross-axis end, keep own size
    - CENTER: center along the cross axis, keep own size
    - STRETCH: fill the cross axis
    """

    FLEX_START = "flex-start"
    FLEX_END = "flex-end"
    CENTER = "center"
    STRETCH = "stretch"


class ImageFit(str, Enum):
    """How an image is scaled into its rectangle."""

    CONTAIN = "contain"
    COVER = "cover"


class HorizontalAlign(str, Enum):
    """Horizontal placement hint for images."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalAlign(str, Enum):
    """Vertical anchoring for text and images."""

    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


class TextAlign(str, Enum):
    """Horizontal text alignment inside the text block."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in page pixels.

    Width and height may be negative when insets exceed the available space.
    """

    x: float
    y: float
    width: float
    height: float

    def inset(self, amount: float) -> "Rect":
        """Shrink by `amount` on every side."""
        return Rect(
            x=self.x + amount,
            y=self.y + amount,
            width=self.width - 2 * amount,
            height=self.height - 2 * amount,
        )


# =============================================================================
# Size Value Parsing
# =============================================================================

_PERCENT_RE = re.compile(r"^\s*(-?\d+(?:\.\d+)?|-?\.\d+)\s*%\s*$")


def _parse_percentage(value: str, field_name: str) -> float:
    match = _PERCENT_RE.match(value)
    if match is None:
        raise ConfigurationError(
            f"{field_name} {value!r} must be a number or a percentage "
            f"such as '50%'"
        )
    return float(match.group(1)) / 100


def parse_position(
    value: float | int | str, mode: MeasurementMode, field_name: str
) -> float:
    """Parse an x/y value given at construction.

    Args:
        value: Number, or a percentage string for proportional nodes.
        mode: Measurement mode of the node.
        field_name: Field name used in error messages.

    Returns:
        Pixels (absolute) or a fraction (proportional).

    Raises:
        ConfigurationError: If the value is a string on an absolute node
            or is not a percentage.
    """
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be numeric, got {value!r}")
    if isinstance(value, str):
        if mode == MeasurementMode.ABSOLUTE:
            raise ConfigurationError(
                f"{field_name} {value!r} must be numeric pixels on an absolute node"
            )
        return _parse_percentage(value, field_name)
    return float(value)


def parse_size(
    value: float | int | str, mode: MeasurementMode, field_name: str
) -> float:
    """Parse a width/height value given at construction.

    Proportional sizes must be fractions in [0, 1] or the equivalent
    percentage string.

    Raises:
        ConfigurationError: On any other unit, or a fraction out of range.
    """
    size = parse_position(value, mode, field_name)
    if mode == MeasurementMode.PROPORTIONAL and not 0 <= size <= 1:
        raise ConfigurationError(
            f"Proportional {field_name} must be within [0, 1] (or 0%-100%), "
            f"got {value!r}"
        )
    return size


__all__ = [
    "MeasurementMode",
    "NodeKind",
    "FlexDirection",
    "JustifyContent",
    "AlignItems",
    "ImageFit",
    "HorizontalAlign",
    "VerticalAlign",
    "TextAlign",
    "Rect",
    "parse_position",
    "parse_size",
]
