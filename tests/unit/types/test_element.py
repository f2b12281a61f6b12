"""Tests for ContentElement, PageInput, PageResult and Document."""

from __future__ import annotations

import pytest

from readorder.types import (
    BBox,
    ContentElement,
    Document,
    ElementType,
    LayoutBox,
    PageExtent,
    PageInput,
    PageResult,
    RegionPayload,
    element_type_for,
)


class TestElementTypeFor:
    """Tests for element_type_for."""

    @pytest.mark.parametrize(
        ("category", "expected"),
        [
            ("text", ElementType.TEXT),
            ("figure_caption", ElementType.TEXT),
            ("title", ElementType.TITLE),
            ("figure", ElementType.IMAGE),
            ("interline_equation", ElementType.EQUATION),
            ("separator", ElementType.UNKNOWN),
            ("unknown", ElementType.UNKNOWN),
        ],
    )
    def test_mapping(self, category, expected):
        """Test category to element type mapping."""
        assert element_type_for(category) == expected


class TestContentElement:
    """Tests for ContentElement serialization."""

    def test_to_dict_omits_empty_payloads(self):
        """Test that empty payload fields are left out."""
        element = ContentElement(type="text", box=LayoutBox(BBox(0, 0, 10, 10)), text="Hi", reading_order=0)
        result = element.to_dict()

        assert result["reading_order"] == 0
        assert result["text"] == "Hi"
        assert "html" not in result
        assert "image_path" not in result
        assert "skipped" not in result

    def test_round_trip(self):
        """Test that from_dict restores to_dict output."""
        element = ContentElement(
            type="table",
            box=LayoutBox(BBox(0, 0, 10, 10), category="table", confidence=0.9, index=4),
            html="<table></table>",
            page_index=2,
            reading_order=5,
            confidence=0.9,
            skipped=True,
        )
        restored = ContentElement.from_dict(element.to_dict(), index=4)

        assert restored == element

    def test_from_dict_requires_bbox(self):
        """Test that a bbox is required."""
        with pytest.raises(ValueError, match="bbox"):
            ContentElement.from_dict({"type": "text"})

    def test_normalized_bbox(self):
        """Test normalized bbox relative to the page."""
        element = ContentElement(type="text", box=LayoutBox(BBox(100, 50, 300, 200)))
        assert element.normalized_bbox(PageExtent(1000, 500)) == [100, 100, 300, 400]


class TestPageInput:
    """Tests for PageInput payload alignment."""

    def test_default_payloads(self):
        """Test that missing payloads are filled with empty ones."""
        page = PageInput(0, PageExtent(10, 10), boxes=[LayoutBox(BBox(0, 0, 1, 1)), LayoutBox(BBox(2, 2, 3, 3))])
        assert page.payloads == [RegionPayload(), RegionPayload()]

    def test_payload_mismatch(self):
        """Test that payload count must match box count."""
        with pytest.raises(ValueError, match="1 boxes but 2 payloads"):
            PageInput(0, PageExtent(10, 10), boxes=[LayoutBox(BBox(0, 0, 1, 1))], payloads=[RegionPayload()] * 2)


class TestPageResultAndDocument:
    """Tests for PageResult and Document."""

    def test_page_round_trip(self):
        """Test PageResult to_dict/from_dict."""
        element = ContentElement(type="text", box=LayoutBox(BBox(0, 0, 10, 10)), text="a", reading_order=0, confidence=1.0)
        page = PageResult(page_index=1, extent=PageExtent(100, 200), elements=[element], ordered_by="xycut-plus")

        restored = PageResult.from_dict(page.to_dict())

        assert restored.page_index == 1
        assert restored.extent == PageExtent(100, 200)
        assert restored.elements == [element]
        assert restored.ordered_by == "xycut-plus"

    def test_document_counts(self):
        """Test processed page and skipped element counts."""
        skipped = ContentElement(type="equation", box=LayoutBox(BBox(0, 0, 1, 1)), skipped=True)
        kept = ContentElement(type="text", box=LayoutBox(BBox(0, 0, 1, 1)))
        doc = Document(
            name="doc",
            pages=[PageResult(0, PageExtent(10, 10), [skipped, kept]), PageResult(1, PageExtent(10, 10), [skipped])],
            processed_at="2026-01-01T00:00:00+00:00",
        )

        assert doc.processed_pages == 2
        assert doc.skipped_elements == 2

        data = doc.to_dict()
        assert data["processed_pages"] == 2
        assert data["processed_at"] == "2026-01-01T00:00:00+00:00"
        assert "ordered_by" not in data
        assert Document.from_dict(data).pages[1].elements[0].skipped is True
