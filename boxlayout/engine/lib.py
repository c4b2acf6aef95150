"""Layout pass over a whole node tree.

A pass walks the tree depth-first and distributes every flex container
before visiting its children, since proportional children read their slot
from the parent's cache and nested flex containers resolve through it.
"""

from boxlayout.core.log import get_logger
from boxlayout.flex import distribute
from boxlayout.geometry import resolve
from boxlayout.node import FlexContainer, LayoutNode, walk
from boxlayout.schema import Rect

logger = get_logger("boxlayout.engine")


def resolve_and_distribute(
    root: LayoutNode, page_rect: Rect | None = None
) -> None:
    """Run every flex distribution pass in the tree, parents first.

    Args:
        root: Root of the tree.
        page_rect: Page content rectangle anchoring a proportional root.

    Raises:
        MissingAnchorError: If a flex container cannot be anchored.
    """
    distributed = 0
    for node in walk(root):
        if isinstance(node, FlexContainer):
            distribute(node, page_rect)
            distributed += 1
    logger.debug(
        f"Layout pass from '{root.id}' distributed {distributed} containers"
    )


def compute_layout(
    root: LayoutNode, page_rect: Rect | None = None
) -> dict[LayoutNode, Rect]:
    """Run a layout pass and resolve every node.

    Args:
        root: Root of the tree.
        page_rect: Page content rectangle anchoring a proportional root.

    Returns:
        Mapping from node to its rectangle, in paint order.
    """
    resolve_and_distribute(root, page_rect)
    return {node: resolve(node, page_rect) for node in walk(root)}


__all__ = ["compute_layout", "resolve_and_distribute"]
