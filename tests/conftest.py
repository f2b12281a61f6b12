"""Pytest configuration and shared fixtures for readorder tests.

This module provides:
- Common fixtures for all tests (page extents, sample pages, elements)
- Test configuration and path setup
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import pytest

# Ensure project root is importable when running tests via python -m pytest
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from readorder.types import BBox, ContentElement, LayoutBox, PageExtent  # noqa: E402


# ==================== Sample Data Fixtures ====================


@pytest.fixture
def page_extent() -> PageExtent:
    """Square 1000x1000 page used by most geometry tests."""
    return PageExtent(width=1000, height=1000)


@pytest.fixture
def two_column_page_dict() -> dict[str, Any]:
    """Detector output for a page with a title, two columns and a footer.

    Boxes are listed out of reading order on purpose.
    """
    return {
        "page_index": 0,
        "width": 1000,
        "height": 1000,
        "boxes": [
            {"bbox": [550, 420, 950, 600], "category": "text", "text": "Right bottom"},
            {"bbox": [50, 120, 450, 300], "category": "text", "text": "Left top"},
            {"bbox": [50, 20, 950, 60], "category": "title", "text": "Title"},
            {"bbox": [50, 900, 950, 950], "category": "footer", "text": "Page 1"},
            {"bbox": [550, 120, 950, 400], "category": "table", "html": "<table></table>"},
            {"bbox": [50, 320, 450, 600], "category": 10},
        ],
    }


@pytest.fixture
def two_column_json(tmp_path: Path, two_column_page_dict: dict[str, Any]) -> Path:
    """Write the two-column page as a document JSON file."""
    path = tmp_path / "paper.json"
    path.write_text(json.dumps({"name": "paper", "pages": [two_column_page_dict]}), encoding="utf-8")
    return path


@pytest.fixture
def sample_elements() -> list[ContentElement]:
    """Three stacked text-like elements, given bottom-up."""
    return [
        ContentElement(type="text", box=LayoutBox(BBox(100, 400, 900, 500), index=0), text="Third"),
        ContentElement(type="text", box=LayoutBox(BBox(100, 200, 900, 300), index=1), text="Second"),
        ContentElement(type="title", box=LayoutBox(BBox(100, 50, 900, 100), category="title", index=2), text="First"),
    ]


# ==================== Directory Fixtures ====================


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Create an output directory for testing."""
    output = tmp_path / "output"
    output.mkdir()
    return output


# ==================== Helper Functions ====================


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "slow: Slow tests (skip with -m 'not slow')")
