"""Flex distributor for flex containers."""

from .lib import (
    ChildMeasure,
    cross_placement,
    distribute,
    justify_offsets,
    measure_child,
)

__all__ = [
    "ChildMeasure",
    "cross_placement",
    "distribute",
    "justify_offsets",
    "measure_child",
]
