"""Geometry resolver: turns a node's declared box model into page pixels.

Three paths exist:

- absolute nodes use their literal pixels, inset by margin;
- proportional children of a flex container use the slot from the
  container's last distribution pass, inset by margin;
- other proportional nodes are fractions of their parent's rectangle (or
  of the page content rectangle for a root), offset and shrunk by the
  parent's padding. Margin is not applied on this path.

Every path carries the node's own padding forward so that its proportional
children can consume it. The padding only reaches one level down.
"""

from typing import NamedTuple

from boxlayout.core.errors import MissingAnchorError
from boxlayout.node import FlexContainer, LayoutNode
from boxlayout.schema import MeasurementMode, Rect


class ResolvedBox(NamedTuple):
    """A resolved rectangle plus the padding its proportional children use."""

    rect: Rect
    padding: float


def resolve(node: LayoutNode, page_rect: Rect | None = None) -> Rect:
    """Resolve a node to its absolute rectangle.

    Args:
        node: Node to resolve.
        page_rect: Page content rectangle anchoring a proportional root.

    Returns:
        Rectangle in page pixels. Sizes may be negative.

    Raises:
        MissingAnchorError: If a proportional node in the parent chain has
            neither a parent nor a page rectangle.
        LayoutNotComputedError: If a proportional flex child is resolved
            before its container was distributed.

    Example:
        >>> root = Container(measurement_mode="absolute", width=800, height=600)
        >>> child = Container(x=0.1, y=0.1, width=0.8, height=0.8)
        >>> root.add_child(child)
        >>> resolve(child)
        Rect(x=80.0, y=60.0, width=640.0, height=480.0)
    """
    return resolve_box(node, page_rect).rect


def resolve_box(node: LayoutNode, page_rect: Rect | None = None) -> ResolvedBox:
    """Resolve a node, keeping its padding as metadata."""
    if node.measurement_mode == MeasurementMode.ABSOLUTE:
        rect = Rect(node.x, node.y, node.width, node.height).inset(node.margin)
        return ResolvedBox(rect, node.padding)

    parent = node.parent
    if parent is None and page_rect is None:
        raise MissingAnchorError(
            f"Proportional node '{node.id}' has no parent and no page rectangle",
            node_id=node.id,
        )

    if isinstance(parent, FlexContainer):
        slot = parent.slot_for(node)
        return ResolvedBox(slot.inset(node.margin), node.padding)

    if parent is None:
        base = ResolvedBox(page_rect, 0.0)
    else:
        base = resolve_box(parent, page_rect)

    rect = Rect(
        x=base.rect.x + base.rect.width * node.x + base.padding,
        y=base.rect.y + base.rect.height * node.y + base.padding,
        width=base.rect.width * node.width - 2 * base.padding,
        height=base.rect.height * node.height - 2 * base.padding,
    )
    return ResolvedBox(rect, node.padding)


__all__ = ["ResolvedBox", "resolve", "resolve_box"]
