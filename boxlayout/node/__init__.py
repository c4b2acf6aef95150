"""Layout node model.

Example usage:
    >>> from boxlayout.node import Container, Text
    >>> page = Container(width="100%", height="100%", padding=10)
    >>> page.add_child(Text(content="Hello", width=0.5, height=0.25))
"""

from .lib import (
    Container,
    FlexContainer,
    Image,
    LayoutNode,
    Measurable,
    Text,
    walk,
)

__all__ = [
    "LayoutNode",
    "Container",
    "Image",
    "Text",
    "FlexContainer",
    "Measurable",
    "walk",
]
