"""Paint traversal over a canvas collaborator.

The canvas (a PDF document, a raster surface, a test double) owns pixels,
images and text shaping. This module only decides what to paint, where, and
in which order:

    image content -> children (in order) -> border -> text

so text always lands above its own border and above every descendant, and
image content lands below everything else in the same node.
"""

from dataclasses import dataclass
from typing import Protocol

from boxlayout.core.log import get_logger
from boxlayout.engine import resolve_and_distribute
from boxlayout.geometry import resolve
from boxlayout.node import Image, LayoutNode, Text
from boxlayout.schema import (
    HorizontalAlign,
    ImageFit,
    Rect,
    TextAlign,
    VerticalAlign,
)

logger = get_logger("boxlayout.render")


@dataclass(frozen=True)
class TextStyle:
    """Text styling handed to the canvas.

    Attributes:
        font_size: Font size in points.
        color: Fill color.
        align: Horizontal alignment inside the block.
    """

    font_size: float
    color: str
    align: TextAlign = TextAlign.CENTER


@dataclass(frozen=True)
class ImageOptions:
    """Image placement options handed to the canvas.

    Attributes:
        fit: Scaling mode into the rectangle.
        align: Optional horizontal placement hint.
        vertical_align: Optional vertical placement hint.
    """

    fit: ImageFit = ImageFit.CONTAIN
    align: HorizontalAlign | None = None
    vertical_align: VerticalAlign | None = None


class Canvas(Protocol):
    """Drawing surface used by the paint traversal.

    `draw_text` anchors the text block at its top-left corner; the traversal
    compensates for vertical alignment before calling it.
    """

    def page_content_rect(self) -> Rect:
        """Get the margin-adjusted drawable rectangle of the current page."""
        ...

    def measure_text_height(
        self, text: str, width: float, style: TextStyle
    ) -> float:
        """Get the height of `text` wrapped at `width`."""
        ...

    def draw_text(
        self, text: str, x: float, y: float, width: float, style: TextStyle
    ) -> None:
        """Draw wrapped text with its top-left corner at (x, y)."""
        ...

    def draw_image(self, source: str, rect: Rect, options: ImageOptions) -> None:
        """Draw an image into a rectangle."""
        ...

    def draw_border(self, rect: Rect, width: float, color: str) -> None:
        """Stroke a rectangle outline."""
        ...


def text_style(node: Text) -> TextStyle:
    """Build the canvas style for a text node."""
    return TextStyle(
        font_size=node.font_size,
        color=node.color,
        align=TextAlign(node.align),
    )


def text_origin(node: Text, rect: Rect, block_height: float) -> tuple[float, float]:
    """Get the top-left corner at which to draw a text block.

    The vertical anchor is the top padding edge, the middle of the box or
    the bottom padding edge; the block is then shifted up by 0, half or all
    of its measured height.

    Args:
        node: Text node being painted.
        rect: Resolved rectangle of the node.
        block_height: Measured height of the wrapped text.

    Returns:
        (x, y) for a top-left anchored draw.
    """
    x = rect.x + node.padding
    match VerticalAlign(node.vertical_align):
        case VerticalAlign.TOP:
            y = rect.y + node.padding
        case VerticalAlign.BOTTOM:
            y = rect.y + rect.height - node.padding - block_height
        case _:
            y = rect.y + rect.height / 2 - block_height / 2
    return x, y


def draw(canvas: Canvas, node: LayoutNode, page_rect: Rect | None = None) -> None:
    """Paint a node and its subtree.

    Flex containers in the subtree must have been distributed first (see
    `resolve_and_distribute`).

    Args:
        canvas: Drawing surface.
        node: Node to paint.
        page_rect: Page content rectangle anchoring a proportional root.
    """
    rect = resolve(node, page_rect)

    if isinstance(node, Image):
        _paint_image(canvas, node, rect)

    for child in node.children:
        draw(canvas, child, page_rect)

    if node.border_width > 0:
        canvas.draw_border(rect, node.border_width, node.border_color)

    if isinstance(node, Text):
        _paint_text(canvas, node, rect)


def layout(canvas: Canvas, root: LayoutNode) -> None:
    """Lay out a tree on the canvas's current page and paint it."""
    page_rect = canvas.page_content_rect()
    resolve_and_distribute(root, page_rect)
    draw(canvas, root, page_rect)
    logger.debug(f"Painted tree '{root.id}' on page {page_rect}")


def _paint_image(canvas: Canvas, node: Image, rect: Rect) -> None:
    options = ImageOptions(
        fit=ImageFit(node.fit),
        align=HorizontalAlign(node.align) if node.align else None,
        vertical_align=VerticalAlign(node.vertical_align)
        if node.vertical_align
        else None,
    )
    canvas.draw_image(node.source, rect, options)


def _paint_text(canvas: Canvas, node: Text, rect: Rect) -> None:
    style = text_style(node)
    width = rect.width - 2 * node.padding
    block_height = canvas.measure_text_height(node.content, width, style)
    x, y = text_origin(node, rect, block_height)
    canvas.draw_text(node.content, x, y, width, style)


__all__ = [
    "Canvas",
    "ImageOptions",
    "TextStyle",
    "draw",
    "layout",
    "text_origin",
    "text_style",
]
