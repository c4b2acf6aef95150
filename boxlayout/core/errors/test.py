"""Tests for the error taxonomy."""

import pytest

from .lib import (
    ConfigurationError,
    LayoutError,
    LayoutNotComputedError,
    MissingAnchorError,
)


class TestLayoutErrors:
    """Tests for exception hierarchy and attributes."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "error_cls",
        [ConfigurationError, MissingAnchorError, LayoutNotComputedError],
    )
    def test_subclasses_layout_error(self, error_cls):
        """Every error can be caught as LayoutError."""
        with pytest.raises(LayoutError):
            raise error_cls("boom")

    @pytest.mark.unit
    def test_node_id_attribute(self):
        """Errors carry the offending node id."""
        error = MissingAnchorError("no anchor", node_id="header")
        assert error.node_id == "header"
        assert str(error) == "no anchor"

    @pytest.mark.unit
    def test_node_id_defaults_to_none(self):
        """node_id is optional."""
        assert ConfigurationError("bad unit").node_id is None

    @pytest.mark.unit
    def test_not_a_value_error(self):
        """Configuration errors are not ValueErrors.

        Pydantic wraps ValueError raised from validators; these must
        propagate unchanged.
        """
        assert not issubclass(ConfigurationError, ValueError)
