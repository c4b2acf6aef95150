"""Tests for layout validation."""

import pytest

from boxlayout.node import Container, FlexContainer, Text
from boxlayout.schema import Rect
from boxlayout.validation import ValidationError, is_valid, validate_layout

PAGE = Rect(0, 0, 612, 792)


class TestValidateLayout:
    """Tests for validate_layout function."""

    @pytest.mark.unit
    def test_valid_tree(self):
        """Well-formed tree passes validation."""
        root = Container(id="root")
        root.add_children(Text(id="a", content="A"), FlexContainer(id="b"))
        assert validate_layout(root, PAGE) == []
        assert is_valid(root, PAGE)

    @pytest.mark.unit
    def test_duplicate_ids(self):
        """Duplicate IDs are detected."""
        root = Container(id="root")
        root.add_children(Container(id="dupe"), Text(id="dupe", content="x"))
        errors = validate_layout(root, PAGE)
        assert len(errors) == 1
        assert errors[0].error_type == "duplicate_id"
        assert "dupe" in errors[0].message

    @pytest.mark.unit
    def test_missing_anchor(self):
        """A proportional root without a page is reported."""
        root = Container(id="root")
        errors = validate_layout(root)
        assert [e.error_type for e in errors] == ["missing_anchor"]
        assert not is_valid(root)

    @pytest.mark.unit
    def test_absolute_root_needs_no_page(self):
        """Absolute roots anchor themselves."""
        root = Container(measurement_mode="absolute", width=100, height=100)
        assert is_valid(root)

    @pytest.mark.unit
    def test_parent_mismatch(self):
        """Children appended directly to the list are reported."""
        root = Container(id="root")
        root.children.append(Container(id="stray"))
        errors = validate_layout(root, PAGE)
        assert errors == [
            ValidationError(
                node_id="stray",
                message=(
                    "Node 'stray' is listed under 'root' "
                    "but its parent reference points elsewhere"
                ),
                error_type="parent_mismatch",
            )
        ]

    @pytest.mark.unit
    def test_cycle(self):
        """A node reachable from itself is reported as a cycle."""
        root = Container(id="root")
        child = Container(id="child")
        root.add_child(child)
        child.children.append(root)
        errors = validate_layout(root, PAGE)
        assert [e.error_type for e in errors] == ["cycle"]
        assert errors[0].node_id == "root"
