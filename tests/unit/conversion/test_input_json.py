"""Tests for loading detector output JSON."""

from __future__ import annotations

import json

import pytest

from readorder.conversion.input import load_pages_from_json, parse_document, parse_page
from readorder.exceptions import FileFormatError, FileLoadError
from readorder.types import BBox, LayoutCategory, PageExtent


class TestParsePage:
    """Tests for parse_page."""

    def test_basic_page(self, two_column_page_dict):
        """Test parsing a full page."""
        page = parse_page(two_column_page_dict)

        assert page.page_index == 0
        assert page.extent == PageExtent(1000, 1000)
        assert len(page.boxes) == 6
        assert len(page.payloads) == 6
        assert [b.index for b in page.boxes] == list(range(6))

    def test_categories_normalized(self, two_column_page_dict):
        """Test that labels and class ids map to categories."""
        page = parse_page(two_column_page_dict)

        assert page.boxes[2].category == LayoutCategory.TITLE
        assert page.boxes[5].category == LayoutCategory.EQUATION

    def test_payloads(self, two_column_page_dict):
        """Test that recognizer payloads are carried per box."""
        page = parse_page(two_column_page_dict)

        assert page.payloads[0].text == "Right bottom"
        assert page.payloads[4].html == "<table></table>"
        assert page.payloads[5].text == ""

    def test_xywh_box(self):
        """Test boxes given in xywh form."""
        page = parse_page({"width": 100, "height": 100, "boxes": [{"xywh": [10, 20, 30, 40]}]})
        assert page.boxes[0].bbox == BBox(10.0, 20.0, 40.0, 60.0)

    def test_defaults(self):
        """Test defaults for category, confidence and page index."""
        page = parse_page({"width": 100, "height": 100, "boxes": [{"bbox": [0, 0, 10, 10]}]}, position=3)

        assert page.page_index == 3
        assert page.boxes[0].category == LayoutCategory.TEXT
        assert page.boxes[0].confidence == 1.0
        assert page.payloads[0].skipped is False

    def test_unknown_label(self):
        """Test that unrecognized labels become unknown."""
        page = parse_page({"width": 100, "height": 100, "boxes": [{"bbox": [0, 0, 10, 10], "category": "sticker"}]})
        assert page.boxes[0].category == LayoutCategory.UNKNOWN

    def test_no_boxes(self):
        """Test a page without a boxes key."""
        assert parse_page({"width": 100, "height": 100}).boxes == []

    @pytest.mark.parametrize(
        ("data", "message"),
        [
            ({"height": 100, "boxes": []}, "missing 'width'"),
            ({"width": 0, "height": 100}, "must be positive"),
            ({"width": "wide", "height": 100}, "page 0"),
            ({"width": 100, "height": 100, "boxes": {}}, "must be a list"),
            ({"width": 100, "height": 100, "boxes": [{"category": "text"}]}, "missing 'bbox' or 'xywh'"),
            ({"width": 100, "height": 100, "boxes": [{"bbox": [0, 0, 10]}]}, "Expected 4 coordinates"),
            ({"width": 100, "height": 100, "boxes": ["box"]}, "expected an object"),
            ({"width": 100, "height": 100, "boxes": [{"bbox": [float("nan"), 0, 10, 10]}]}, "must be finite"),
            ({"width": 100, "height": 100, "boxes": [{"xywh": [0, 0, float("inf"), 10]}]}, "must be finite"),
            ([1, 2, 3], "expected an object"),
        ],
    )
    def test_malformed(self, data, message):
        """Test that malformed pages raise FileFormatError."""
        with pytest.raises(FileFormatError, match=message):
            parse_page(data)


class TestParseDocument:
    """Tests for parse_document."""

    def test_document(self, two_column_page_dict):
        """Test the document layout with a name."""
        name, pages = parse_document({"name": "paper", "pages": [two_column_page_dict, two_column_page_dict]})

        assert name == "paper"
        assert len(pages) == 2

    def test_page_index_defaults_to_position(self):
        """Test that pages without page_index are numbered by position."""
        _, pages = parse_document({"pages": [{"width": 10, "height": 10}, {"width": 10, "height": 10}]})
        assert [p.page_index for p in pages] == [0, 1]

    def test_single_page(self, two_column_page_dict):
        """Test a bare page object."""
        name, pages = parse_document(two_column_page_dict, default_name="scan")

        assert name == "scan"
        assert len(pages) == 1

    def test_pages_not_list(self):
        """Test that a non-list pages field is rejected."""
        with pytest.raises(FileFormatError, match="'pages' must be a list"):
            parse_document({"pages": "all"})


class TestLoadPagesFromJson:
    """Tests for load_pages_from_json."""

    def test_load(self, two_column_json):
        """Test loading a document file."""
        name, pages = load_pages_from_json(two_column_json)

        assert name == "paper"
        assert pages[0].extent == PageExtent(1000, 1000)

    def test_name_defaults_to_stem(self, tmp_path, two_column_page_dict):
        """Test that a single-page file is named after the file."""
        path = tmp_path / "scan_01.json"
        path.write_text(json.dumps(two_column_page_dict), encoding="utf-8")

        name, _ = load_pages_from_json(path)
        assert name == "scan_01"

    def test_invalid_json(self, tmp_path):
        """Test that broken JSON raises FileFormatError."""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(FileFormatError, match="Invalid JSON"):
            load_pages_from_json(path)

    def test_nan_in_file(self, tmp_path):
        """Test that NaN literals, which the json module accepts, are rejected."""
        path = tmp_path / "nan.json"
        path.write_text('{"width": 100, "height": 100, "boxes": [{"bbox": [NaN, 0, 10, 10]}]}', encoding="utf-8")

        with pytest.raises(FileFormatError, match="box 0: coordinates must be finite"):
            load_pages_from_json(path)

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises FileLoadError."""
        with pytest.raises(FileLoadError, match="Cannot read"):
            load_pages_from_json(tmp_path / "missing.json")
