"""Pytest fixtures specific to unit tests.

Unit tests should be fast and isolated; everything here is pure data.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from readorder.types import BBox, ContentElement, LayoutBox


@pytest.fixture
def make_box() -> Callable[..., LayoutBox]:
    """Factory for LayoutBox from xyxy coordinates."""

    def _make(x0: float, y0: float, x1: float, y1: float, category: str = "text", index: int = 0) -> LayoutBox:
        return LayoutBox(bbox=BBox(x0, y0, x1, y1), category=category, index=index)

    return _make


@pytest.fixture
def make_element() -> Callable[..., ContentElement]:
    """Factory for ContentElement from xyxy coordinates."""

    def _make(
        x0: float,
        y0: float,
        x1: float,
        y1: float,
        element_type: str = "text",
        text: str = "",
        index: int = 0,
    ) -> ContentElement:
        return ContentElement(
            type=element_type,
            box=LayoutBox(bbox=BBox(x0, y0, x1, y1), category=element_type, index=index),
            text=text,
        )

    return _make
