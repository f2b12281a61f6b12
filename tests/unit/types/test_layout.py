"""Tests for layout categories, LayoutBox and PageExtent."""

from __future__ import annotations

import pytest

from readorder.types import BBox, LayoutBox, LayoutCategory, LayoutCategoryMapper, PageExtent


class TestLayoutCategoryMapper:
    """Tests for LayoutCategoryMapper."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, LayoutCategory.TEXT),
            (1, LayoutCategory.TITLE),
            (10, LayoutCategory.EQUATION),
            (19, LayoutCategory.SEPARATOR),
            (99, LayoutCategory.UNKNOWN),
            ("Plain Text", LayoutCategory.TEXT),
            ("doc_title", LayoutCategory.TITLE),
            ("table", LayoutCategory.TABLE),
            ("  FIGURE ", LayoutCategory.FIGURE),
            ("formula", LayoutCategory.EQUATION),
            ("sticker", LayoutCategory.UNKNOWN),
            (True, LayoutCategory.UNKNOWN),
            (None, LayoutCategory.UNKNOWN),
            (1.0, LayoutCategory.UNKNOWN),
        ],
    )
    def test_normalize(self, value, expected):
        """Test mapping of class ids and labels."""
        assert LayoutCategoryMapper.normalize(value) == expected

    def test_text_like(self):
        """Test text-like membership."""
        assert LayoutCategoryMapper.is_text_like(LayoutCategory.TITLE)
        assert not LayoutCategoryMapper.is_text_like(LayoutCategory.TABLE)

    def test_supported(self):
        """Test that equations have no recognizer."""
        assert not LayoutCategoryMapper.is_supported(LayoutCategory.INTERLINE_EQUATION)
        assert LayoutCategoryMapper.is_supported(LayoutCategory.TEXT)


class TestLayoutBox:
    """Tests for LayoutBox."""

    def test_geometry_delegates_to_bbox(self):
        """Test width, height and center."""
        box = LayoutBox(bbox=BBox(10, 20, 50, 40))

        assert box.width == 40
        assert box.height == 20
        assert box.center == (30.0, 30.0)

    def test_translate_keeps_identity(self):
        """Test that translation keeps category, confidence and index."""
        box = LayoutBox(bbox=BBox(0, 0, 10, 10), category="title", confidence=0.8, index=3)
        moved = box.translate(5, 5)

        assert moved.bbox == BBox(5, 5, 15, 15)
        assert (moved.category, moved.confidence, moved.index) == ("title", 0.8, 3)

    def test_to_dict(self):
        """Test conversion to dictionary."""
        box = LayoutBox(bbox=BBox(0, 0, 10, 10), category="table", confidence=0.5, index=2)
        assert box.to_dict() == {"index": 2, "category": "table", "bbox": [0, 0, 10, 10], "confidence": 0.5}


class TestPageExtent:
    """Tests for PageExtent."""

    def test_valid(self):
        """Test a valid extent."""
        assert PageExtent(1240, 1754).to_dict() == {"width": 1240, "height": 1754}

    @pytest.mark.parametrize(("width", "height"), [(0, 100), (100, 0), (-5, 100)])
    def test_non_positive(self, width, height):
        """Test that non-positive extents are rejected."""
        with pytest.raises(ValueError, match="must be positive"):
            PageExtent(width, height)
