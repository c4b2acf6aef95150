"""Flex distributor: places the children of a flex container.

A distribution pass has two phases:

1. Measure: each child asks for a main-axis and cross-axis size, either in
   literal pixels (absolute) or as fractions of the container's content
   rectangle (proportional).
2. Position: the leftover main-axis space is spread according to
   `justify_content`, and each child is placed on the cross axis according
   to `align_items`.

The resulting slots replace the container's layout cache wholesale. A pass
never fails because of overflow; it returns whatever geometry the arithmetic
yields, negative or overlapping.
"""

from dataclasses import dataclass

from boxlayout.core.log import get_logger
from boxlayout.geometry import resolve
from boxlayout.node import FlexContainer, Measurable
from boxlayout.schema import (
    AlignItems,
    FlexDirection,
    JustifyContent,
    MeasurementMode,
    Rect,
)

logger = get_logger("boxlayout.flex")


@dataclass(frozen=True)
class ChildMeasure:
    """Requested size of one child along both axes."""

    main: float
    cross: float


def measure_child(
    child: object, content: Rect, direction: FlexDirection
) -> ChildMeasure:
    """Measure one child against the container's content rectangle.

    Children that are not `Measurable` take no space.
    """
    if not isinstance(child, Measurable):
        return ChildMeasure(0.0, 0.0)

    if child.measurement_mode == MeasurementMode.PROPORTIONAL:
        width = content.width * child.requested_width
        height = content.height * child.requested_height
    else:
        width = child.requested_width
        height = child.requested_height

    if direction == FlexDirection.ROW:
        return ChildMeasure(main=width, cross=height)
    return ChildMeasure(main=height, cross=width)


def justify_offsets(
    justify: JustifyContent, remaining: float, count: int
) -> tuple[float, float]:
    """Get the leading offset and the extra spacing between children.

    Args:
        justify: Main-axis distribution mode.
        remaining: Free main-axis space (may be negative).
        count: Number of children (at least 1).

    Returns:
        (start, between) tuple.
    """
    match justify:
        case JustifyContent.FLEX_START:
            return 0.0, 0.0
        case JustifyContent.FLEX_END:
            return remaining, 0.0
        case JustifyContent.CENTER:
            return remaining / 2, 0.0
        case JustifyContent.SPACE_BETWEEN:
            return 0.0, (remaining / (count - 1) if count > 1 else 0.0)
        case JustifyContent.SPACE_AROUND:
            return remaining / (count * 2), remaining / count
        case JustifyContent.SPACE_EVENLY:
            return remaining / (count + 1), remaining / (count + 1)
        case _:
            raise ValueError(f"Unknown justify-content: {justify!r}")


def cross_placement(
    align: AlignItems, own: float, available: float
) -> tuple[float, float]:
    """Get a child's cross-axis offset and final cross size.

    Args:
        align: Cross-axis alignment mode.
        own: Child's requested cross size.
        available: Container's cross-axis content size.

    Returns:
        (position, size) tuple.
    """
    match align:
        case AlignItems.FLEX_START:
            return 0.0, own
        case AlignItems.FLEX_END:
            return available - own, own
        case AlignItems.CENTER:
            return (available - own) / 2, own
        case AlignItems.STRETCH:
            return 0.0, available
        case _:
            raise ValueError(f"Unknown align-items: {align!r}")


def distribute(container: FlexContainer, page_rect: Rect | None = None) -> None:
    """Run one distribution pass and replace the container's layout cache.

    Args:
        container: Flex container to lay out.
        page_rect: Page content rectangle, needed when the container (or
            one of its ancestors) is a proportional root.

    Raises:
        MissingAnchorError: If the container itself cannot be resolved.
        LayoutNotComputedError: If the container is a proportional child of
            a flex container that was not distributed yet.
    """
    bounds = resolve(container, page_rect)
    content = bounds.inset(container.padding)
    direction = FlexDirection(container.direction)
    is_row = direction == FlexDirection.ROW

    children = list(container.children)
    slots: dict[object, Rect] = {}
    if not children:
        container.replace_layout(slots)
        return

    main_size = content.width if is_row else content.height
    cross_size = content.height if is_row else content.width

    measures = [measure_child(child, content, direction) for child in children]
    total_gap = container.gap * (len(children) - 1)
    remaining = main_size - sum(m.main for m in measures) - total_gap
    if remaining < 0:
        logger.warning(
            f"Flex container '{container.id}' overflows its main axis "
            f"by {-remaining:g}px"
        )

    cursor, between = justify_offsets(
        JustifyContent(container.justify_content), remaining, len(children)
    )
    align = AlignItems(container.align_items)
    last = len(children) - 1

    for index, (child, measure) in enumerate(zip(children, measures)):
        cross_pos, cross = cross_placement(align, measure.cross, cross_size)
        if is_row:
            slot = Rect(
                x=content.x + cursor,
                y=content.y + cross_pos,
                width=measure.main,
                height=cross,
            )
        else:
            slot = Rect(
                x=content.x + cross_pos,
                y=content.y + cursor,
                width=cross,
                height=measure.main,
            )
        slots[child] = slot
        cursor += measure.main + (container.gap if index < last else 0) + between

    container.replace_layout(slots)
    logger.debug(
        f"Distributed {len(slots)} children of '{container.id}' "
        f"({direction.value}, remaining={remaining:g})"
    )


__all__ = [
    "ChildMeasure",
    "cross_placement",
    "distribute",
    "justify_offsets",
    "measure_child",
]
