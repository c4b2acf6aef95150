"""Unit tests for the geometry resolver."""

from dataclasses import astuple

import pytest

from boxlayout.core.errors import LayoutNotComputedError, MissingAnchorError
from boxlayout.geometry import resolve, resolve_box
from boxlayout.node import Container, FlexContainer, Text
from boxlayout.schema import Rect


def _absolute(**kwargs) -> Container:
    return Container(measurement_mode="absolute", **kwargs)


class TestAbsolute:
    """Absolute nodes resolve from their own pixels."""

    @pytest.mark.unit
    def test_no_margin(self):
        """Bounds equal the declared pixels."""
        node = _absolute(x=10, y=20, width=100, height=200)
        assert resolve(node) == Rect(10, 20, 100, 200)

    @pytest.mark.unit
    def test_margin_insets_all_sides(self):
        """Margin shifts the origin and shrinks both axes."""
        node = _absolute(x=10, y=20, width=100, height=200, margin=5)
        assert resolve(node) == Rect(15, 25, 90, 190)

    @pytest.mark.unit
    @pytest.mark.parametrize("margin", [0, 3, 12.5, 80])
    def test_width_independent_of_parent(self, margin):
        """Width is always width minus twice the margin."""
        parent = _absolute(width=50, height=50, padding=7)
        node = _absolute(width=120, height=40, margin=margin)
        parent.add_child(node)
        assert resolve(node).width == 120 - 2 * margin

    @pytest.mark.unit
    def test_oversized_margin_goes_negative(self):
        """Degenerate geometry is returned, not rejected."""
        node = _absolute(width=10, height=10, margin=20)
        assert resolve(node) == Rect(20, 20, -30, -30)


class TestProportional:
    """Proportional nodes resolve against their parent."""

    @pytest.mark.unit
    def test_without_parent_or_page(self):
        """A proportional orphan has nothing to anchor to."""
        node = Container(id="orphan", x=0.5, y=0.5, width=0.5, height=0.5)
        with pytest.raises(MissingAnchorError) as excinfo:
            resolve(node)
        assert excinfo.value.node_id == "orphan"

    @pytest.mark.unit
    def test_relative_to_parent(self):
        """Fractions scale the parent's rectangle."""
        parent = _absolute(width=400, height=600)
        child = Container(x=0.1, y=0.2, width=0.5, height=0.3)
        parent.add_child(child)
        assert astuple(resolve(child)) == pytest.approx((40, 120, 200, 180))

    @pytest.mark.unit
    def test_nested_round_trip(self):
        """Nested fractions compose through every level."""
        root = _absolute(width=800, height=600)
        middle = Container(x=0.1, y=0.1, width=0.8, height=0.8)
        inner = Container(x=0.25, y=0.25, width=0.5, height=0.5)
        root.add_child(middle)
        middle.add_child(inner)

        rect = resolve(inner)
        assert rect.x == pytest.approx(240)
        assert rect.y == pytest.approx(180)
        assert rect.width == pytest.approx(320)
        assert rect.height == pytest.approx(240)

    @pytest.mark.unit
    def test_page_anchors_root(self):
        """A proportional root is anchored on the page content rectangle."""
        page = Rect(72, 72, 468, 648)
        root = Container(width="50%", height="100%")
        assert astuple(resolve(root, page)) == pytest.approx((72, 72, 234, 648))

    @pytest.mark.unit
    def test_page_threaded_through_chain(self):
        """The page rectangle reaches a proportional root several levels up."""
        page = Rect(0, 0, 1000, 500)
        root = Container()
        child = Container(x=0.5, width=0.5)
        root.add_child(child)
        assert astuple(resolve(child, page)) == pytest.approx((500, 0, 500, 500))

    @pytest.mark.unit
    def test_parent_padding_offsets_and_shrinks(self):
        """Parent padding offsets the origin and shrinks the size."""
        parent = _absolute(x=0, y=0, width=400, height=200, padding=10)
        child = Container(x=0.5, y=0, width=0.5, height=1)
        parent.add_child(child)
        assert astuple(resolve(child)) == pytest.approx((210, 10, 180, 180))

    @pytest.mark.unit
    def test_padding_reaches_one_level(self):
        """Padding only affects direct proportional children."""
        root = _absolute(width=400, height=400, padding=20)
        middle = Container()
        leaf = Container()
        root.add_child(middle)
        middle.add_child(leaf)

        assert astuple(resolve(middle)) == pytest.approx((20, 20, 360, 360))
        # middle has no padding of its own, so the leaf fills it
        assert astuple(resolve(leaf)) == pytest.approx((20, 20, 360, 360))

    @pytest.mark.unit
    def test_padding_metadata(self):
        """The resolved box carries the node's own padding."""
        parent = _absolute(width=100, height=100, padding=4)
        child = Container(padding=9)
        parent.add_child(child)
        assert resolve_box(parent).padding == 4
        assert resolve_box(child).padding == 9

    @pytest.mark.unit
    def test_margin_ignored_under_plain_parent(self):
        """Margin is not applied on the plain proportional path.

        The absolute and flex-slot paths do apply it; this asymmetry is kept
        on purpose and pinned here.
        """
        parent = _absolute(width=400, height=400)
        with_margin = Container(width=0.5, height=0.5, margin=25)
        without_margin = Container(width=0.5, height=0.5)
        parent.add_children(with_margin, without_margin)
        assert resolve(with_margin) == resolve(without_margin)

    @pytest.mark.unit
    def test_insufficient_space_not_clamped(self):
        """Padding larger than the share yields negative sizes."""
        parent = _absolute(width=100, height=100, padding=40)
        child = Container(width=0.5, height=0.5)
        parent.add_child(child)
        assert resolve(child).width == pytest.approx(-30)


class TestFlexSlots:
    """Proportional children of flex containers read the cache."""

    @pytest.mark.unit
    def test_not_computed(self):
        """Resolving before distribution fails."""
        flex = FlexContainer(measurement_mode="absolute", width=400, height=100)
        child = Container(width=0.25, height=0.5)
        flex.add_child(child)
        with pytest.raises(LayoutNotComputedError):
            resolve(child)

    @pytest.mark.unit
    def test_slot_with_margin(self):
        """The slot is inset by the child's margin."""
        flex = FlexContainer(measurement_mode="absolute", width=400, height=100)
        child = Text(content="x", width=0.25, height=0.5, margin=5)
        flex.add_child(child)
        flex.replace_layout({child: Rect(0, 0, 100, 50)})
        assert resolve(child) == Rect(5, 5, 90, 40)

    @pytest.mark.unit
    def test_absolute_child_ignores_slot(self):
        """Absolute children never consult their parent."""
        flex = FlexContainer(measurement_mode="absolute", width=400, height=100)
        child = _absolute(x=3, y=4, width=100, height=50)
        flex.add_child(child)
        flex.replace_layout({child: Rect(150, 0, 100, 50)})
        assert resolve(child) == Rect(3, 4, 100, 50)
