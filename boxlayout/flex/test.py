"""Unit tests for the flex distributor."""

from dataclasses import astuple

import pytest

from boxlayout.core.errors import LayoutNotComputedError
from boxlayout.flex import (
    ChildMeasure,
    cross_placement,
    distribute,
    justify_offsets,
    measure_child,
)
from boxlayout.geometry import resolve
from boxlayout.node import Container, FlexContainer, Text
from boxlayout.schema import (
    AlignItems,
    FlexDirection,
    JustifyContent,
    Rect,
)


def _flex(width=400, height=100, **kwargs) -> FlexContainer:
    return FlexContainer(
        measurement_mode="absolute", width=width, height=height, **kwargs
    )


def _fixed(width, height, **kwargs) -> Container:
    return Container(measurement_mode="absolute", width=width, height=height, **kwargs)


# =============================================================================
# Phase helpers
# =============================================================================


class TestJustifyOffsets:
    """Tests for the start/between table."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("justify", "expected"),
        [
            (JustifyContent.FLEX_START, (0, 0)),
            (JustifyContent.FLEX_END, (120, 0)),
            (JustifyContent.CENTER, (60, 0)),
            (JustifyContent.SPACE_BETWEEN, (0, 60)),
            (JustifyContent.SPACE_AROUND, (20, 40)),
            (JustifyContent.SPACE_EVENLY, (30, 30)),
        ],
    )
    def test_three_children(self, justify, expected):
        """Offsets for 120px of free space and three children."""
        assert justify_offsets(justify, 120, 3) == pytest.approx(expected)

    @pytest.mark.unit
    def test_space_between_single_child(self):
        """A single child under space-between does not divide by zero."""
        assert justify_offsets(JustifyContent.SPACE_BETWEEN, 300, 1) == (0, 0)

    @pytest.mark.unit
    def test_negative_remaining(self):
        """Overflow flows through the same formulas."""
        assert justify_offsets(JustifyContent.CENTER, -50, 2) == (-25, 0)


class TestCrossPlacement:
    """Tests for align-items."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("align", "expected"),
        [
            (AlignItems.FLEX_START, (0, 30)),
            (AlignItems.FLEX_END, (70, 30)),
            (AlignItems.CENTER, (35, 30)),
            (AlignItems.STRETCH, (0, 100)),
        ],
    )
    def test_modes(self, align, expected):
        """Position and size for a 30px child in 100px."""
        assert cross_placement(align, 30, 100) == expected


class TestMeasureChild:
    """Tests for the measure phase."""

    @pytest.mark.unit
    def test_absolute_row(self):
        """Absolute children contribute literal pixels."""
        child = _fixed(100, 50)
        content = Rect(0, 0, 400, 100)
        assert measure_child(child, content, FlexDirection.ROW) == ChildMeasure(100, 50)

    @pytest.mark.unit
    def test_absolute_column_swaps_axes(self):
        """Column direction maps height to the main axis."""
        child = _fixed(100, 50)
        content = Rect(0, 0, 400, 100)
        measure = measure_child(child, content, FlexDirection.COLUMN)
        assert measure == ChildMeasure(main=50, cross=100)

    @pytest.mark.unit
    def test_proportional(self):
        """Proportional children scale the content rectangle."""
        child = Container(width=0.25, height=0.5)
        content = Rect(0, 0, 400, 100)
        assert measure_child(child, content, FlexDirection.ROW) == ChildMeasure(100, 50)

    @pytest.mark.unit
    def test_unmeasurable(self):
        """Objects without the capability take no space."""
        content = Rect(0, 0, 400, 100)
        assert measure_child(object(), content, FlexDirection.ROW) == ChildMeasure(0, 0)


# =============================================================================
# Full passes
# =============================================================================


class TestRowLayout:
    """Tests for row direction."""

    @pytest.mark.unit
    def test_flex_start(self):
        """Children pack at the start."""
        flex = _flex()
        first, second = _fixed(100, 50), _fixed(150, 50)
        flex.add_children(first, second)
        distribute(flex)
        assert flex.slot_for(first) == Rect(0, 0, 100, 50)
        assert flex.slot_for(second) == Rect(100, 0, 150, 50)

    @pytest.mark.unit
    def test_gap(self):
        """Gap separates consecutive children."""
        flex = _flex(gap=20)
        first, second = _fixed(100, 50), _fixed(100, 50)
        flex.add_children(first, second)
        distribute(flex)
        assert flex.slot_for(first) == Rect(0, 0, 100, 50)
        assert flex.slot_for(second) == Rect(120, 0, 100, 50)

    @pytest.mark.unit
    def test_flex_end(self):
        """Children pack at the end."""
        flex = _flex(justify_content="flex-end")
        first, second = _fixed(100, 50), _fixed(100, 50)
        flex.add_children(first, second)
        distribute(flex)
        assert flex.slot_for(first).x == 200
        assert flex.slot_for(second).x == 300

    @pytest.mark.unit
    def test_center(self):
        """A single child is centered."""
        flex = _flex(justify_content="center")
        child = _fixed(100, 50)
        flex.add_child(child)
        distribute(flex)
        assert flex.slot_for(child).x == 150

    @pytest.mark.unit
    def test_space_between(self):
        """Free space goes between children."""
        flex = _flex(justify_content="space-between")
        children = [_fixed(100, 50) for _ in range(3)]
        flex.add_children(*children)
        distribute(flex)
        assert [flex.slot_for(c).x for c in children] == [0, 150, 300]

    @pytest.mark.unit
    def test_space_between_single_child(self):
        """A lone child stays at the start."""
        flex = _flex(justify_content="space-between")
        child = _fixed(100, 50)
        flex.add_child(child)
        distribute(flex)
        assert flex.slot_for(child).x == 0

    @pytest.mark.unit
    def test_space_around(self):
        """Half-size gaps at the edges."""
        flex = _flex(justify_content="space-around")
        first, second = _fixed(100, 50), _fixed(100, 50)
        flex.add_children(first, second)
        distribute(flex)
        assert flex.slot_for(first).x == pytest.approx(50)
        assert flex.slot_for(second).x == pytest.approx(250)

    @pytest.mark.unit
    def test_space_evenly(self):
        """Three equal gaps around two children."""
        flex = _flex(justify_content="space-evenly")
        first, second = _fixed(100, 50), _fixed(100, 50)
        flex.add_children(first, second)
        distribute(flex)
        assert flex.slot_for(first).x == pytest.approx(66.67, abs=0.01)
        assert flex.slot_for(second).x == pytest.approx(233.33, abs=0.01)

    @pytest.mark.unit
    def test_container_origin_and_padding(self):
        """Slots are offset by the container origin and padding."""
        flex = _flex(x=30, y=40, width=420, height=120, padding=10)
        child = _fixed(100, 50)
        flex.add_child(child)
        distribute(flex)
        assert flex.slot_for(child) == Rect(40, 50, 100, 50)

    @pytest.mark.unit
    def test_overflow_not_clamped(self, caplog):
        """Overflowing children overlap the edge and a warning is logged."""
        flex = _flex(width=150, justify_content="center")
        first, second = _fixed(100, 50), _fixed(100, 50)
        flex.add_children(first, second)
        with caplog.at_level("WARNING", logger="boxlayout.flex"):
            distribute(flex)
        assert flex.slot_for(first).x == -25
        assert flex.slot_for(second).x == 75
        assert "overflows" in caplog.text


class TestColumnLayout:
    """Tests for column direction."""

    @pytest.mark.unit
    def test_vertical_stacking(self):
        """Children stack along y."""
        flex = _flex(width=100, height=400, direction="column")
        first, second = _fixed(50, 100), _fixed(50, 150)
        flex.add_children(first, second)
        distribute(flex)
        assert flex.slot_for(first) == Rect(0, 0, 50, 100)
        assert flex.slot_for(second) == Rect(0, 100, 50, 150)

    @pytest.mark.unit
    def test_column_cross_axis_is_x(self):
        """Cross-axis alignment moves children along x."""
        flex = _flex(
            width=100, height=400, direction="column", align_items="flex-end"
        )
        child = _fixed(40, 100)
        flex.add_child(child)
        distribute(flex)
        assert flex.slot_for(child) == Rect(60, 0, 40, 100)


class TestAlignItems:
    """Tests for cross-axis alignment in full passes."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("align", "y", "height"),
        [
            ("flex-start", 0, 50),
            ("flex-end", 50, 50),
            ("center", 25, 50),
            ("stretch", 0, 100),
        ],
    )
    def test_row_alignment(self, align, y, height):
        """Cross placement for a 50px-tall child in a 100px row."""
        flex = _flex(align_items=align)
        child = _fixed(100, 50)
        flex.add_child(child)
        distribute(flex)
        slot = flex.slot_for(child)
        assert (slot.y, slot.height) == (y, height)

    @pytest.mark.unit
    def test_stretch_ignores_requested_cross_size(self):
        """Stretch always fills the cross-axis content size."""
        flex = _flex(align_items="stretch", padding=5)
        short, tall = _fixed(50, 10), _fixed(50, 500)
        flex.add_children(short, tall)
        distribute(flex)
        assert flex.slot_for(short).height == 90
        assert flex.slot_for(tall).height == 90


class TestProportionalChildren:
    """Tests for proportional children inside flex containers."""

    @pytest.mark.unit
    def test_fractions_of_content(self):
        """Fractions are taken of the content rectangle."""
        flex = _flex()
        first = Container(width=0.25, height=0.5)
        second = Container(width=0.5, height=0.5)
        flex.add_children(first, second)
        distribute(flex)
        assert flex.slot_for(first) == Rect(0, 0, 100, 50)
        assert flex.slot_for(second) == Rect(100, 0, 200, 50)

    @pytest.mark.unit
    def test_resolve_reads_slot(self):
        """Resolving a proportional child returns its slot minus margin."""
        flex = _flex(justify_content="center")
        child = Text(content="Hi", width=0.25, height=0.5, margin=10)
        flex.add_child(child)
        distribute(flex)
        assert resolve(child) == Rect(160, 10, 80, 30)

    @pytest.mark.unit
    def test_child_added_after_pass(self):
        """A child attached after the pass has no slot until the next pass."""
        flex = _flex()
        flex.add_child(Container(width=0.1, height=0.1))
        distribute(flex)
        late = Container(width=0.1, height=0.1)
        flex.add_child(late)
        with pytest.raises(LayoutNotComputedError):
            resolve(late)
        distribute(flex)
        assert astuple(resolve(late)) == pytest.approx((40, 0, 40, 10))

    @pytest.mark.unit
    def test_nested_flex(self):
        """A flex container inside a flex container resolves through both."""
        outer = _flex(width=400, height=200)
        inner = FlexContainer(width=0.5, height=1.0, justify_content="flex-end")
        leaf = _fixed(50, 50)
        outer.add_child(inner)
        inner.add_child(leaf)
        distribute(outer)
        distribute(inner)
        assert resolve(inner) == Rect(0, 0, 200, 200)
        assert inner.slot_for(leaf) == Rect(150, 0, 50, 50)

    @pytest.mark.unit
    def test_flex_inside_plain_container(self):
        """A proportional flex container under a plain parent."""
        root = _fixed(400, 400, padding=20)
        flex = FlexContainer(width=0.5, height=0.5)
        child = _fixed(10, 10)
        root.add_child(flex)
        flex.add_child(child)
        distribute(flex)
        assert flex.slot_for(child) == Rect(20, 20, 10, 10)


class TestCacheLifecycle:
    """Tests for cache replacement semantics."""

    @pytest.mark.unit
    def test_idempotent(self):
        """Distributing an unchanged container twice yields the same cache."""
        flex = _flex(justify_content="space-around", gap=7)
        flex.add_children(_fixed(30, 20), Container(width=0.2, height=0.7))
        distribute(flex)
        first = dict(flex.layout_cache)
        distribute(flex)
        assert dict(flex.layout_cache) == first

    @pytest.mark.unit
    def test_rebuilt_after_change(self):
        """A removed child disappears from the cache on the next pass."""
        flex = _flex()
        keep, drop = _fixed(10, 10), _fixed(10, 10)
        flex.add_children(keep, drop)
        distribute(flex)
        flex.children.remove(drop)
        distribute(flex)
        assert set(flex.layout_cache) == {keep}

    @pytest.mark.unit
    def test_empty_container(self):
        """An empty container still records a completed pass."""
        flex = _flex()
        distribute(flex)
        assert flex.is_distributed
        assert dict(flex.layout_cache) == {}

    @pytest.mark.unit
    def test_unmeasurable_child_gets_empty_slot(self):
        """Unmeasurable children are placed with zero size."""
        flex = _flex(justify_content="flex-start")
        marker = object()
        first = _fixed(100, 50)
        flex.add_child(first)
        flex.children.append(marker)
        distribute(flex)
        assert flex.slot_for(marker) == Rect(100, 0, 0, 0)
