"""Layout validation and static analysis.

This module provides validation functions for layout trees, detecting
structural issues before a layout pass runs.
"""

from dataclasses import dataclass

from boxlayout.node import LayoutNode
from boxlayout.schema import MeasurementMode, Rect


@dataclass
class ValidationError:
    """Represents a validation error in a layout tree.

    Attributes:
        node_id: ID of the node with the error.
        message: Human-readable error description.
        error_type: Category of the error.
    """

    node_id: str
    message: str
    error_type: str


def validate_layout(
    node: LayoutNode, page_rect: Rect | None = None
) -> list[ValidationError]:
    """Validate a layout tree for structural issues.

    Performs the following checks:
        - Unique ID enforcement (no duplicate IDs)
        - Cycle detection (no node is ancestor of itself)
        - Parent references point at the owning node
        - A proportional root has a page rectangle to anchor to

    Args:
        node: The root node to validate.
        page_rect: Page content rectangle the tree will be laid out on.

    Returns:
        list[ValidationError]: List of validation errors (empty if valid).

    Example:
        >>> errors = validate_layout(root_node, page_rect)
        >>> if errors:
        ...     for e in errors:
        ...         print(f"{e.node_id}: {e.message}")
    """
    errors: list[ValidationError] = []

    # Cycles first: the other checks recurse and would not terminate
    errors.extend(_detect_cycles(node))
    if errors:
        return errors

    id_counts: dict[str, int] = {}
    _collect_ids(node, id_counts)

    for node_id, count in id_counts.items():
        if count > 1:
            errors.append(
                ValidationError(
                    node_id=node_id,
                    message=f"Duplicate ID '{node_id}' appears {count} times",
                    error_type="duplicate_id",
                )
            )

    errors.extend(_check_parent_links(node))

    if (
        node.parent is None
        and page_rect is None
        and node.measurement_mode == MeasurementMode.PROPORTIONAL
    ):
        errors.append(
            ValidationError(
                node_id=node.id,
                message=(
                    f"Proportional root '{node.id}' needs a page rectangle "
                    "to anchor to"
                ),
                error_type="missing_anchor",
            )
        )

    return errors


def is_valid(node: LayoutNode, page_rect: Rect | None = None) -> bool:
    """Check if a layout tree is valid.

    Convenience function that returns True if no validation errors exist.

    Args:
        node: The root node to validate.
        page_rect: Page content rectangle the tree will be laid out on.

    Returns:
        bool: True if the tree is valid, False otherwise.
    """
    return not validate_layout(node, page_rect)


def _collect_ids(node: LayoutNode, id_counts: dict[str, int]) -> None:
    """Recursively collect all node IDs and count occurrences.

    Args:
        node: Current node to process.
        id_counts: Accumulator dictionary mapping ID to count.
    """
    id_counts[node.id] = id_counts.get(node.id, 0) + 1
    for child in node.children:
        _collect_ids(child, id_counts)


def _check_parent_links(node: LayoutNode) -> list[ValidationError]:
    """Check that every child's parent reference points at its owner.

    Lists mutated directly (bypassing `add_child`) leave children with a
    missing or stale parent, which breaks proportional resolution.
    """
    errors: list[ValidationError] = []

    def _check(n: LayoutNode) -> None:
        for child in n.children:
            if child.parent is not n:
                errors.append(
                    ValidationError(
                        node_id=child.id,
                        message=(
                            f"Node '{child.id}' is listed under '{n.id}' "
                            "but its parent reference points elsewhere"
                        ),
                        error_type="parent_mismatch",
                    )
                )
            _check(child)

    _check(node)
    return errors


def _detect_cycles(node: LayoutNode) -> list[ValidationError]:
    """Detect cycles in the tree structure.

    Args:
        node: The root node to check.

    Returns:
        list[ValidationError]: Cycle errors found.
    """
    errors: list[ValidationError] = []
    visited: set[int] = set()

    def _check(n: LayoutNode, path: set[int]) -> None:
        obj_id = id(n)
        if obj_id in path:
            errors.append(
                ValidationError(
                    node_id=n.id,
                    message=f"Cycle detected: node '{n.id}' is its own ancestor",
                    error_type="cycle",
                )
            )
            return
        if obj_id in visited:
            return
        visited.add(obj_id)
        path.add(obj_id)
        for child in n.children:
            _check(child, path)
        path.remove(obj_id)

    _check(node, set())
    return errors


__all__ = ["ValidationError", "is_valid", "validate_layout"]
