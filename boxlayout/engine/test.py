"""Unit tests for the layout pass."""

from dataclasses import astuple

import pytest

from boxlayout.core.errors import LayoutNotComputedError, MissingAnchorError
from boxlayout.engine import compute_layout, resolve_and_distribute
from boxlayout.geometry import resolve
from boxlayout.node import Container, FlexContainer, Image, Text
from boxlayout.schema import Rect


class TestResolveAndDistribute:
    """Tests for the tree-wide pass."""

    @pytest.mark.unit
    def test_nested_flex_resolves(self):
        """Nested flex containers are distributed parents first."""
        root = Container(measurement_mode="absolute", width=600, height=400)
        row = FlexContainer(height=0.5, gap=10)
        column = FlexContainer(width=0.5, height=1.0, direction="column")
        cell = Text(content="cell", width=1.0, height=0.25)
        root.add_child(row)
        row.add_children(column, Container(width=0.25, height=1.0))
        column.add_child(cell)

        with pytest.raises(LayoutNotComputedError):
            resolve(cell)

        resolve_and_distribute(root)
        assert resolve(column) == Rect(0, 0, 300, 200)
        assert resolve(cell) == Rect(0, 0, 300, 50)

    @pytest.mark.unit
    def test_page_anchor(self):
        """A proportional flex root is anchored on the page rectangle."""
        page = Rect(50, 50, 500, 700)
        root = FlexContainer(justify_content="center")
        child = Container(measurement_mode="absolute", width=100, height=100)
        root.add_child(child)
        resolve_and_distribute(root, page)
        assert root.slot_for(child) == Rect(250, 50, 100, 100)

    @pytest.mark.unit
    def test_missing_anchor(self):
        """Without a page, a proportional flex root cannot be laid out."""
        root = FlexContainer()
        with pytest.raises(MissingAnchorError):
            resolve_and_distribute(root)

    @pytest.mark.unit
    def test_tree_without_flex(self):
        """Trees without flex containers need no cache."""
        root = Container(measurement_mode="absolute", width=10, height=10)
        root.add_child(Container())
        resolve_and_distribute(root)


class TestComputeLayout:
    """Tests for whole-tree resolution."""

    @pytest.mark.unit
    def test_every_node_resolved(self):
        """Every node gets a rectangle, in paint order."""
        page = Rect(0, 0, 800, 600)
        root = Container(id="root", padding=10)
        banner = Image(id="banner", source="logo.png", height=0.25)
        body = FlexContainer(
            id="body", y=0.25, height=0.75, justify_content="space-between"
        )
        left = Text(id="left", content="L", width=0.25, height=1.0)
        right = Text(id="right", content="R", width=0.25, height=1.0)
        root.add_children(banner, body)
        body.add_children(left, right)

        layout = compute_layout(root, page)

        assert [node.id for node in layout] == [
            "root",
            "banner",
            "body",
            "left",
            "right",
        ]
        assert layout[root] == Rect(0, 0, 800, 600)
        assert astuple(layout[banner]) == pytest.approx((10, 10, 780, 130))
        assert astuple(layout[body]) == pytest.approx((10, 160, 780, 430))
        assert astuple(layout[left]) == pytest.approx((10, 160, 195, 430))
        assert astuple(layout[right]) == pytest.approx((595, 160, 195, 430))
