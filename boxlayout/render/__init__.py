"""Render module: paint traversal over a canvas collaborator.

Provides the `Canvas` protocol a drawing backend implements, the paint
traversal `draw`, and the `layout` entry point that runs a layout pass on
the canvas's page before painting.
"""

from .lib import (
    Canvas,
    ImageOptions,
    TextStyle,
    draw,
    layout,
    text_origin,
    text_style,
)

__all__ = [
    "Canvas",
    "ImageOptions",
    "TextStyle",
    "draw",
    "layout",
    "text_origin",
    "text_style",
]
