"""Layout category definitions and the LayoutBox / PageExtent dataclasses.

This module provides:
- LayoutCategory: Standardized layout category constants
- LayoutCategoryMapper: Maps model class ids and labels to categories
- LayoutBox: One detected region on a page
- PageExtent: Page size in pixel units
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .bbox import BBox


class LayoutCategory:
    """Standardized layout categories based on PP-DocLayout.

    Category never influences reading order geometry; it only decides how a
    region is turned into a content element and rendered.
    """

    # Content
    TEXT = "text"
    TITLE = "title"
    ABSTRACT = "abstract"
    CONTENT = "content"
    LIST = "list"
    CODE = "code"
    REFERENCE = "reference"
    INDEX = "index"
    TOC = "toc"  # Table of contents

    # Figures
    FIGURE = "figure"
    FIGURE_CAPTION = "figure_caption"
    STAMP = "stamp"

    # Tables
    TABLE = "table"
    TABLE_CAPTION = "table_caption"
    TABLE_FOOTNOTE = "table_footnote"

    # Equations
    EQUATION = "equation"
    INTERLINE_EQUATION = "interline_equation"

    # Page Elements
    HEADER = "header"
    FOOTER = "footer"
    SEPARATOR = "separator"

    UNKNOWN = "unknown"


class LayoutCategoryMapper:
    """Maps detector class ids and labels to LayoutCategory values."""

    # PP-DocLayout-plus class id order
    CLASS_ID_MAP: dict[int, str] = {
        0: LayoutCategory.TEXT,
        1: LayoutCategory.TITLE,
        2: LayoutCategory.FIGURE,
        3: LayoutCategory.FIGURE_CAPTION,
        4: LayoutCategory.TABLE,
        5: LayoutCategory.TABLE_CAPTION,
        6: LayoutCategory.TABLE_FOOTNOTE,
        7: LayoutCategory.HEADER,
        8: LayoutCategory.FOOTER,
        9: LayoutCategory.REFERENCE,
        10: LayoutCategory.EQUATION,
        11: LayoutCategory.INTERLINE_EQUATION,
        12: LayoutCategory.STAMP,
        13: LayoutCategory.CODE,
        14: LayoutCategory.TOC,
        15: LayoutCategory.ABSTRACT,
        16: LayoutCategory.CONTENT,
        17: LayoutCategory.LIST,
        18: LayoutCategory.INDEX,
        19: LayoutCategory.SEPARATOR,
    }

    # Label aliases seen in other detectors' outputs
    LABEL_ALIASES: dict[str, str] = {
        "plain text": LayoutCategory.TEXT,
        "paragraph_title": LayoutCategory.TITLE,
        "doc_title": LayoutCategory.TITLE,
        "image": LayoutCategory.FIGURE,
        "chart": LayoutCategory.FIGURE,
        "figure_title": LayoutCategory.FIGURE_CAPTION,
        "table_title": LayoutCategory.TABLE_CAPTION,
        "formula": LayoutCategory.EQUATION,
        "isolate_formula": LayoutCategory.INTERLINE_EQUATION,
        "list_item": LayoutCategory.LIST,
        "page_header": LayoutCategory.HEADER,
        "page_footer": LayoutCategory.FOOTER,
    }

    TEXT_LIKE: frozenset[str] = frozenset(
        {
            LayoutCategory.TEXT,
            LayoutCategory.TITLE,
            LayoutCategory.CONTENT,
            LayoutCategory.LIST,
            LayoutCategory.CODE,
            LayoutCategory.ABSTRACT,
            LayoutCategory.REFERENCE,
            LayoutCategory.INDEX,
            LayoutCategory.HEADER,
            LayoutCategory.FOOTER,
        }
    )

    # No recognizer exists for these; they become skipped placeholders
    UNSUPPORTED: frozenset[str] = frozenset({LayoutCategory.EQUATION, LayoutCategory.INTERLINE_EQUATION})

    _KNOWN: frozenset[str] = frozenset(CLASS_ID_MAP.values())

    @classmethod
    def from_class_id(cls, class_id: int) -> str:
        """Map a model class id to a category ('unknown' when out of range)."""
        return cls.CLASS_ID_MAP.get(class_id, LayoutCategory.UNKNOWN)

    @classmethod
    def from_label(cls, label: str) -> str:
        """Map a free-form label to a category ('unknown' when unrecognized).

        Example:
            >>> LayoutCategoryMapper.from_label("Plain Text")
            'text'
        """
        key = label.strip().lower()
        if key in cls._KNOWN:
            return key
        return cls.LABEL_ALIASES.get(key, LayoutCategory.UNKNOWN)

    @classmethod
    def normalize(cls, value: Any) -> str:
        """Map either an int class id or a string label to a category."""
        if isinstance(value, bool):
            return LayoutCategory.UNKNOWN
        if isinstance(value, int):
            return cls.from_class_id(value)
        if isinstance(value, str):
            return cls.from_label(value)
        return LayoutCategory.UNKNOWN

    @classmethod
    def is_text_like(cls, category: str) -> bool:
        return category in cls.TEXT_LIKE

    @classmethod
    def is_supported(cls, category: str) -> bool:
        return category not in cls.UNSUPPORTED


@dataclass(frozen=True)
class LayoutBox:
    """Single detected region on a page.

    Core fields:
    - bbox: Region geometry in page pixel coordinates
    - category: LayoutCategory value (irrelevant to geometry)
    - confidence: Detection confidence (0.0 to 1.0)
    - index: Position in the detector's output (stable identity)
    """

    bbox: BBox
    category: str = LayoutCategory.TEXT
    confidence: float = 1.0
    index: int = 0

    @property
    def width(self) -> float:
        return self.bbox.width

    @property
    def height(self) -> float:
        return self.bbox.height

    @property
    def center(self) -> tuple[float, float]:
        return self.bbox.center

    def translate(self, dx: float, dy: float) -> LayoutBox:
        """Return a copy with the bbox shifted by (dx, dy)."""
        return LayoutBox(
            bbox=self.bbox.translate(dx, dy),
            category=self.category,
            confidence=self.confidence,
            index=self.index,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict (bbox as xyxy)."""
        return {
            "index": self.index,
            "category": self.category,
            "bbox": self.bbox.to_list(),
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class PageExtent:
    """Page size in the same units as the boxes (positive integers)."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Page extent must be positive, got {self.width}x{self.height}")

    def to_dict(self) -> dict[str, int]:
        return {"width": self.width, "height": self.height}
