"""Unit tests for the node model."""

import gc

import pydantic
import pytest

from boxlayout.core.errors import ConfigurationError, LayoutNotComputedError
from boxlayout.node import (
    Container,
    FlexContainer,
    Image,
    LayoutNode,
    Measurable,
    Text,
    walk,
)
from boxlayout.schema import MeasurementMode, NodeKind, Rect


class TestDefaults:
    """Tests for default node configuration."""

    @pytest.mark.unit
    def test_container_defaults(self):
        """Container defaults match the documented values."""
        node = Container()
        assert node.kind == NodeKind.CONTAINER
        assert node.measurement_mode == MeasurementMode.PROPORTIONAL
        assert (node.x, node.y, node.width, node.height) == (0, 0, 1, 1)
        assert node.padding == 0
        assert node.margin == 0
        assert node.border_width == 1.0
        assert node.border_color == "black"
        assert node.children == []
        assert node.parent is None

    @pytest.mark.unit
    def test_defaults_follow_environment(self, monkeypatch):
        """Styling defaults are read from the environment."""
        monkeypatch.setenv("BOXLAYOUT_BORDER_WIDTH", "0")
        monkeypatch.setenv("BOXLAYOUT_FONT_SIZE", "18")
        monkeypatch.setenv("BOXLAYOUT_TEXT_COLOR", "navy")
        text = Text(content="Hi")
        assert text.border_width == 0
        assert text.font_size == 18
        assert text.color == "navy"

    @pytest.mark.unit
    def test_generated_ids_are_unique(self):
        """Each node gets its own id."""
        assert Container().id != Container().id

    @pytest.mark.unit
    def test_flex_defaults(self):
        """Flex container defaults."""
        flex = FlexContainer()
        assert flex.direction == "row"
        assert flex.justify_content == "flex-start"
        assert flex.align_items == "flex-start"
        assert flex.gap == 0
        assert flex.is_distributed is False
        assert flex.layout_cache is None


class TestVariants:
    """Tests for Image and Text variants."""

    @pytest.mark.unit
    def test_image_fields(self):
        """Image carries source, fit and alignment hints."""
        image = Image(
            source="static/tools1.jpg",
            fit="cover",
            align="right",
            vertical_align="bottom",
        )
        assert image.kind == NodeKind.IMAGE
        assert image.source == "static/tools1.jpg"
        assert image.fit == "cover"
        assert image.align == "right"
        assert image.vertical_align == "bottom"

    @pytest.mark.unit
    def test_image_requires_source(self):
        """Images need a source."""
        with pytest.raises(pydantic.ValidationError):
            Image()

    @pytest.mark.unit
    def test_text_defaults(self):
        """Text aligns center and anchors middle by default."""
        text = Text(content="Hello")
        assert text.kind == NodeKind.TEXT
        assert text.align == "center"
        assert text.vertical_align == "middle"

    @pytest.mark.unit
    def test_text_center_alias(self):
        """'center' is accepted as vertical alignment."""
        assert Text(content="x", vertical_align="center").vertical_align == "middle"

    @pytest.mark.unit
    def test_kind_cannot_be_overridden(self):
        """The variant tag is fixed per class."""
        with pytest.raises(pydantic.ValidationError):
            Container(kind="text")

    @pytest.mark.unit
    def test_json_serialization(self):
        """Nodes dump to plain data including children."""
        root = Container(id="root", children=[Text(id="t", content="Hi")])
        data = root.model_dump()
        assert data["id"] == "root"
        assert data["children"][0]["content"] == "Hi"


class TestGeometryInputs:
    """Tests for size parsing at construction."""

    @pytest.mark.unit
    def test_percentage_strings(self):
        """Percentage strings become fractions."""
        node = Container(width="100%", height="50%", x="25%")
        assert node.width == 1.0
        assert node.height == 0.5
        assert node.x == 0.25

    @pytest.mark.unit
    def test_non_percentage_unit_rejected(self):
        """Other units raise ConfigurationError at construction."""
        with pytest.raises(ConfigurationError):
            Container(width="120px")

    @pytest.mark.unit
    def test_fraction_out_of_range_rejected(self):
        """Proportional sizes above 1 are rejected."""
        with pytest.raises(ConfigurationError):
            Container(height=400)

    @pytest.mark.unit
    def test_absolute_pixels(self):
        """Absolute nodes take pixel sizes."""
        node = Container(measurement_mode="absolute", width=400, height=100)
        assert node.is_absolute
        assert (node.width, node.height) == (400, 100)

    @pytest.mark.unit
    def test_absolute_rejects_percentages(self):
        """Absolute nodes reject string sizes."""
        with pytest.raises(ConfigurationError):
            Container(measurement_mode="absolute", width="50%")

    @pytest.mark.unit
    def test_negative_padding_rejected(self):
        """Padding must be non-negative."""
        with pytest.raises(pydantic.ValidationError):
            Container(padding=-1)


class TestChildManagement:
    """Tests for attaching children."""

    @pytest.mark.unit
    def test_add_child_sets_parent(self):
        """Attaching sets the weak parent reference and appends."""
        parent = Container()
        child = Container()
        parent.add_child(child)
        assert parent.children == [child]
        assert child.parent is parent

    @pytest.mark.unit
    def test_add_children_keeps_order(self):
        """Several children attach in order."""
        parent = Container()
        first, second, third = Container(), Text(content="b"), Container()
        parent.add_children(first, second, third)
        assert [c.id for c in parent.children] == [first.id, second.id, third.id]

    @pytest.mark.unit
    def test_constructor_children_get_parent(self):
        """Children passed to the constructor are attached."""
        child = Container()
        parent = Container(children=[child])
        assert parent.children[0] is child
        assert child.parent is parent

    @pytest.mark.unit
    def test_reparenting_rejected(self):
        """A node belongs to one parent only."""
        child = Container()
        owner = Container()
        owner.add_child(child)
        with pytest.raises(ConfigurationError, match="already belongs"):
            Container().add_child(child)

    @pytest.mark.unit
    def test_double_attach_rejected(self):
        """The same node cannot be attached twice."""
        parent, child = Container(), Container()
        parent.add_child(child)
        with pytest.raises(ConfigurationError, match="already a child"):
            parent.add_child(child)

    @pytest.mark.unit
    def test_self_attach_rejected(self):
        """A node cannot become its own child."""
        node = Container()
        with pytest.raises(ConfigurationError, match="beneath itself") as exc:
            node.add_child(node)
        assert exc.value.node_id == node.id
        assert node.children == []
        assert node.parent is None

    @pytest.mark.unit
    def test_ancestor_attach_rejected(self):
        """Attaching an ancestor would close a cycle."""
        top, middle, bottom = Container(), Container(), Container()
        top.add_child(middle)
        middle.add_child(bottom)

        with pytest.raises(ConfigurationError, match="beneath itself"):
            middle.add_child(top)
        with pytest.raises(ConfigurationError, match="beneath itself"):
            bottom.add_child(top)

        assert top.parent is None
        assert [node.id for node in walk(top)] == [top.id, middle.id, bottom.id]

    @pytest.mark.unit
    def test_parent_reference_is_weak(self):
        """A child does not keep its parent alive."""
        child = Container()
        Container().add_child(child)
        gc.collect()
        assert child.parent is None

    @pytest.mark.unit
    def test_walk_order(self):
        """walk yields nodes depth-first in paint order."""
        leaf = Container(id="leaf")
        mid = Container(id="mid", children=[leaf])
        root = Container(id="root", children=[mid, Container(id="last")])
        assert [n.id for n in walk(root)] == ["root", "mid", "leaf", "last"]


class TestIdentity:
    """Tests for entity semantics."""

    @pytest.mark.unit
    def test_equal_config_is_not_equal_node(self):
        """Two identically configured nodes are distinct."""
        a = Container(id="same")
        b = Container(id="same")
        assert a != b
        assert a == a
        assert len({a, b}) == 2

    @pytest.mark.unit
    def test_measurable_protocol(self):
        """Every variant is measurable; arbitrary objects are not."""
        variants = (
            Container(),
            Image(source="a.png"),
            Text(content="t"),
            FlexContainer(),
        )
        for node in variants:
            assert isinstance(node, Measurable)
        assert not isinstance(object(), Measurable)

    @pytest.mark.unit
    def test_requested_size(self):
        """Requested size mirrors the declared size."""
        node = Container(width=0.3, height=0.6)
        assert node.requested_width == 0.3
        assert node.requested_height == 0.6

    @pytest.mark.unit
    def test_base_class_needs_kind(self):
        """The base model must be given an explicit kind."""
        assert LayoutNode(kind="container").kind == "container"


class TestLayoutCache:
    """Tests for the flex container cache accessors."""

    @pytest.mark.unit
    def test_slot_before_distribution(self):
        """Looking up a slot before any pass fails."""
        child = Container()
        flex = FlexContainer(children=[child])
        with pytest.raises(LayoutNotComputedError, match="distribute"):
            flex.slot_for(child)

    @pytest.mark.unit
    def test_replace_layout(self):
        """Replacing the layout exposes the new slots read-only."""
        child = Container()
        flex = FlexContainer(children=[child])
        flex.replace_layout({child: Rect(0, 0, 10, 10)})
        assert flex.is_distributed
        assert flex.slot_for(child) == Rect(0, 0, 10, 10)
        with pytest.raises(TypeError):
            flex.layout_cache[child] = Rect(1, 1, 1, 1)

    @pytest.mark.unit
    def test_unknown_child_after_distribution(self):
        """A child missing from the cache is reported with its id."""
        flex = FlexContainer()
        flex.replace_layout({})
        stranger = Container(id="stranger")
        with pytest.raises(LayoutNotComputedError) as excinfo:
            flex.slot_for(stranger)
        assert excinfo.value.node_id == "stranger"
