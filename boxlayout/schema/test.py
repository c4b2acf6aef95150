"""Unit tests for the schema module."""

import pytest

from boxlayout.core.errors import ConfigurationError
from boxlayout.schema import (
    AlignItems,
    FlexDirection,
    JustifyContent,
    MeasurementMode,
    NodeKind,
    Rect,
    VerticalAlign,
    parse_position,
    parse_size,
)


class TestEnums:
    """Tests for layout vocabulary enums."""

    @pytest.mark.unit
    def test_justify_values(self):
        """All six justify-content modes exist."""
        assert {j.value for j in JustifyContent} == {
            "flex-start",
            "flex-end",
            "center",
            "space-between",
            "space-around",
            "space-evenly",
        }

    @pytest.mark.unit
    def test_align_items_values(self):
        """All four align-items modes exist."""
        assert {a.value for a in AlignItems} == {
            "flex-start",
            "flex-end",
            "center",
            "stretch",
        }

    @pytest.mark.unit
    def test_node_kinds(self):
        """Node kinds form a closed set of four variants."""
        assert len(NodeKind) == 4
        assert NodeKind.FLEX_CONTAINER.value == "flex_container"

    @pytest.mark.unit
    def test_str_enum_compares_to_value(self):
        """Enums compare equal to their raw string values."""
        assert FlexDirection.ROW == "row"
        assert VerticalAlign.MIDDLE == "middle"


class TestRect:
    """Tests for the Rect value type."""

    @pytest.mark.unit
    def test_inset(self):
        """Inset shrinks symmetrically and shifts the origin."""
        assert Rect(10, 20, 100, 50).inset(5) == Rect(15, 25, 90, 40)

    @pytest.mark.unit
    def test_inset_can_go_negative(self):
        """Insets larger than the rectangle are not clamped."""
        rect = Rect(0, 0, 10, 10).inset(8)
        assert rect.width == -6
        assert rect.height == -6

    @pytest.mark.unit
    def test_frozen(self):
        """Rect is immutable."""
        with pytest.raises(AttributeError):
            Rect(0, 0, 1, 1).x = 5


class TestParseSize:
    """Tests for size value parsing at the configuration boundary."""

    @pytest.mark.unit
    def test_fraction(self):
        """Fractions pass through for proportional nodes."""
        assert parse_size(0.25, MeasurementMode.PROPORTIONAL, "width") == 0.25

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("50%", 0.5), ("100%", 1.0), ("0%", 0.0), (" 12.5 % ", 0.125)],
    )
    def test_percentage_string(self, raw, expected):
        """Percentage strings become fractions."""
        assert parse_size(raw, MeasurementMode.PROPORTIONAL, "width") == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", ["50px", "1em", "half", "%"])
    def test_other_units_rejected(self, raw):
        """Any other unit specifier is a configuration error."""
        with pytest.raises(ConfigurationError, match="percentage"):
            parse_size(raw, MeasurementMode.PROPORTIONAL, "width")

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", [1.5, -0.1, "150%"])
    def test_out_of_range_rejected(self, raw):
        """Proportional sizes must stay within [0, 1]."""
        with pytest.raises(ConfigurationError, match=r"\[0, 1\]"):
            parse_size(raw, MeasurementMode.PROPORTIONAL, "height")

    @pytest.mark.unit
    def test_absolute_pixels(self):
        """Absolute sizes are plain pixels with no range limit."""
        assert parse_size(400, MeasurementMode.ABSOLUTE, "width") == 400.0

    @pytest.mark.unit
    def test_absolute_rejects_strings(self):
        """Absolute sizes must be numeric."""
        with pytest.raises(ConfigurationError, match="numeric pixels"):
            parse_size("50%", MeasurementMode.ABSOLUTE, "width")

    @pytest.mark.unit
    def test_bool_rejected(self):
        """Booleans are not sizes."""
        with pytest.raises(ConfigurationError):
            parse_size(True, MeasurementMode.ABSOLUTE, "width")


class TestParsePosition:
    """Tests for position parsing."""

    @pytest.mark.unit
    def test_position_not_range_checked(self):
        """Positions may lie outside [0, 1]."""
        assert parse_position(1.5, MeasurementMode.PROPORTIONAL, "x") == 1.5

    @pytest.mark.unit
    def test_position_percentage(self):
        """Positions accept percentage strings on proportional nodes."""
        assert parse_position("25%", MeasurementMode.PROPORTIONAL, "y") == 0.25
