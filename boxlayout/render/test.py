"""Tests for the paint traversal."""

import pytest

from boxlayout.node import Container, FlexContainer, Image, LayoutNode, Text
from boxlayout.render import (
    Canvas,
    ImageOptions,
    TextStyle,
    draw,
    layout,
    text_origin,
    text_style,
)
from boxlayout.schema import ImageFit, Rect, TextAlign, VerticalAlign

from .conftest import RecordingCanvas


def _absolute(**kwargs) -> Container:
    return Container(measurement_mode="absolute", **kwargs)


class TestCanvasProtocol:
    """The test double satisfies the protocol structurally."""

    @pytest.mark.unit
    def test_recording_canvas_is_a_canvas(self, canvas):
        """A RecordingCanvas can be passed where a Canvas is expected."""
        surface: Canvas = canvas
        assert surface.page_content_rect() == Rect(0, 0, 612, 792)


class TestPaintOrder:
    """Tests for the per-node paint order."""

    @pytest.mark.unit
    def test_simple_box_border(self, canvas):
        """A box with a border strokes its rectangle."""
        box = _absolute(x=10, y=20, width=100, height=200, border_width=2)
        draw(canvas, box)
        assert canvas.calls == [("border", (Rect(10, 20, 100, 200), 2, "black"))]

    @pytest.mark.unit
    def test_zero_border_not_drawn(self, canvas):
        """border_width 0 suppresses the border."""
        draw(canvas, _absolute(width=100, height=100, border_width=0))
        assert canvas.calls == []

    @pytest.mark.unit
    def test_image_under_children_then_border(self, canvas):
        """Image content paints first, the node's border last."""
        image = Image(
            measurement_mode="absolute",
            width=200,
            height=100,
            source="static/tools1.jpg",
            fit="cover",
            vertical_align="bottom",
        )
        image.add_child(Container(border_width=1, border_color="red"))
        draw(canvas, image)

        assert canvas.kinds() == ["image", "border", "border"]
        source, rect, options = canvas.calls[0][1]
        assert source == "static/tools1.jpg"
        assert rect == Rect(0, 0, 200, 100)
        assert options == ImageOptions(
            fit=ImageFit.COVER, vertical_align=VerticalAlign.BOTTOM
        )
        assert canvas.calls[1][1][2] == "red"
        assert canvas.calls[2][1][2] == "black"

    @pytest.mark.unit
    def test_text_above_border_and_children(self, canvas):
        """Text paints after its own border and its descendants."""
        text = Text(
            measurement_mode="absolute",
            width=200,
            height=100,
            content="Caption",
        )
        text.add_child(Image(source="bg.png", border_width=0))
        draw(canvas, text)
        assert canvas.kinds() == ["image", "border", "text"]

    @pytest.mark.unit
    def test_children_in_order(self, canvas):
        """Children paint in insertion order."""
        root = _absolute(width=100, height=100, border_width=0)
        for color in ("red", "green", "blue"):
            root.add_child(Container(border_color=color))
        draw(canvas, root)
        assert [call[1][2] for call in canvas.calls] == ["red", "green", "blue"]

    @pytest.mark.unit
    def test_bare_node_paints_border_only(self, canvas):
        """A base node tagged as text has no content to paint."""
        node = LayoutNode(
            kind="text", measurement_mode="absolute", width=50, height=20
        )
        draw(canvas, node)
        assert canvas.kinds() == ["border"]


class TestTextPlacement:
    """Tests for vertical text anchoring."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("vertical_align", "expected_y"),
        [
            ("top", 110),
            ("middle", 140),
            ("bottom", 170),
        ],
    )
    def test_anchor(self, vertical_align, expected_y):
        """The block shifts up by 0, half or all of its height."""
        node = Text(content="x", padding=10, vertical_align=vertical_align)
        rect = Rect(50, 100, 300, 100)
        assert text_origin(node, rect, block_height=20) == (60, expected_y)

    @pytest.mark.unit
    def test_draw_uses_measured_height(self, canvas):
        """The traversal measures at the padded width before drawing."""
        text = Text(
            measurement_mode="absolute",
            x=0,
            y=0,
            width=200,
            height=100,
            padding=5,
            content="a" * 50,
            vertical_align="bottom",
            border_width=0,
        )
        draw(canvas, text)
        assert canvas.calls[0] == ("measure", ("a" * 50, 190))
        name, (content, x, y, width, style) = canvas.calls[1]
        assert name == "text"
        # two lines of 20px, anchored to the bottom padding edge
        assert (x, y, width) == (5, 55, 190)
        assert style == TextStyle(font_size=12.0, color="black", align=TextAlign.CENTER)

    @pytest.mark.unit
    def test_text_style(self):
        """Style mirrors the node's text settings."""
        node = Text(content="x", font_size=9, color="gray", align="left")
        assert text_style(node) == TextStyle(
            font_size=9, color="gray", align=TextAlign.LEFT
        )


class TestLayout:
    """Tests for the layout entry point."""

    @pytest.mark.unit
    def test_layout_uses_page_and_distributes(self):
        """layout anchors on the page and distributes flex containers."""
        canvas = RecordingCanvas(page=Rect(36, 36, 540, 720))
        root = FlexContainer(justify_content="center", border_width=0)
        cell = Text(
            content="Hi",
            width=0.5,
            height=0.25,
            vertical_align="top",
            border_width=0,
        )
        root.add_child(cell)

        layout(canvas, root)

        assert canvas.kinds() == ["text"]
        _, (_, x, y, width, _) = canvas.calls[-1]
        assert (x, y, width) == (171, 36, 270)

    @pytest.mark.unit
    def test_grid_of_aligned_text(self, canvas):
        """A 3x3 grid of text boxes paints nine borders and nine texts."""
        page = _absolute(width=612, height=792, padding=10, border_width=1)
        grid = Container(x=0.5, width=0.5, height=0.5, border_width=0)
        for i, align in enumerate(("left", "center", "right")):
            for j, vertical in enumerate(("top", "center", "bottom")):
                grid.add_child(
                    Text(
                        content=f"Hello, World {align} {vertical}!",
                        x=i / 3,
                        y=j / 3,
                        width=1 / 3,
                        height=1 / 3,
                        align=align,
                        vertical_align=vertical,
                    )
                )
        page.add_child(grid)

        layout(canvas, page)

        kinds = canvas.kinds()
        assert kinds.count("border") == 10
        assert kinds.count("text") == 9
        assert kinds[-1] == "border"
