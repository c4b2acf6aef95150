"""Render module test fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from boxlayout.schema import Rect


class RecordingCanvas:
    """Canvas double that records every call in order.

    Text blocks measure `line_height` per started `chars_per_line` chunk of
    characters, which is enough to exercise vertical anchoring.
    """

    def __init__(
        self,
        page: Rect = Rect(0, 0, 612, 792),
        line_height: float = 20.0,
        chars_per_line: int = 40,
    ):
        self.page = page
        self.line_height = line_height
        self.chars_per_line = chars_per_line
        self.calls: list[tuple[str, Any]] = []

    def page_content_rect(self) -> Rect:
        return self.page

    def measure_text_height(self, text, width, style) -> float:
        self.calls.append(("measure", (text, width)))
        lines = max(1, -(-len(text) // self.chars_per_line))
        return lines * self.line_height

    def draw_text(self, text, x, y, width, style) -> None:
        self.calls.append(("text", (text, x, y, width, style)))

    def draw_image(self, source, rect, options) -> None:
        self.calls.append(("image", (source, rect, options)))

    def draw_border(self, rect, width, color) -> None:
        self.calls.append(("border", (rect, width, color)))

    def kinds(self) -> list[str]:
        """Names of recorded calls, measurement excluded."""
        return [name for name, _ in self.calls if name != "measure"]


@pytest.fixture
def canvas() -> RecordingCanvas:
    """Recording canvas on a US Letter page without margins.

    Returns:
        A fresh RecordingCanvas.
    """
    return RecordingCanvas()
