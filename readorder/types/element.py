"""Content element definitions.

This module provides:
- ElementType: Output element type constants
- ContentElement: One element of the final page output
- element_type_for: LayoutCategory → ElementType mapping
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .bbox import BBox
from .layout import LayoutBox, LayoutCategory

if TYPE_CHECKING:
    from .layout import PageExtent


class ElementType:
    """Element types emitted in Markdown and the JSON content list."""

    TEXT = "text"
    TITLE = "title"
    IMAGE = "image"
    TABLE = "table"
    EQUATION = "equation"
    CODE = "code"
    LIST = "list"
    HEADER = "header"
    FOOTER = "footer"
    REFERENCE = "reference"
    UNKNOWN = "unknown"


_CATEGORY_TO_ELEMENT: dict[str, str] = {
    LayoutCategory.TEXT: ElementType.TEXT,
    LayoutCategory.CONTENT: ElementType.TEXT,
    LayoutCategory.ABSTRACT: ElementType.TEXT,
    LayoutCategory.INDEX: ElementType.TEXT,
    LayoutCategory.TOC: ElementType.TEXT,
    LayoutCategory.FIGURE_CAPTION: ElementType.TEXT,
    LayoutCategory.TABLE_CAPTION: ElementType.TEXT,
    LayoutCategory.TABLE_FOOTNOTE: ElementType.TEXT,
    LayoutCategory.TITLE: ElementType.TITLE,
    LayoutCategory.LIST: ElementType.LIST,
    LayoutCategory.CODE: ElementType.CODE,
    LayoutCategory.REFERENCE: ElementType.REFERENCE,
    LayoutCategory.HEADER: ElementType.HEADER,
    LayoutCategory.FOOTER: ElementType.FOOTER,
    LayoutCategory.FIGURE: ElementType.IMAGE,
    LayoutCategory.STAMP: ElementType.IMAGE,
    LayoutCategory.TABLE: ElementType.TABLE,
    LayoutCategory.EQUATION: ElementType.EQUATION,
    LayoutCategory.INTERLINE_EQUATION: ElementType.EQUATION,
}


def element_type_for(category: str) -> str:
    """Map a layout category to the element type used for output.

    Example:
        >>> element_type_for("interline_equation")
        'equation'
        >>> element_type_for("separator")
        'unknown'
    """
    return _CATEGORY_TO_ELEMENT.get(category, ElementType.UNKNOWN)


@dataclass
class ContentElement:
    """Single content element in the final output.

    Core fields:
    - type: ElementType value
    - box: Originating LayoutBox (geometry used for ordering)

    Payload fields (filled by upstream recognizers, passed through here):
    - text: Recognized text or LaTeX
    - image_path: Path to the extracted figure image
    - html: Table HTML

    Fields added by the pipeline:
    - page_index: 0-based page number
    - reading_order: Rank assigned by the sorter
    - confidence: Detection confidence carried over from the box
    - skipped: True when no recognizer could handle this element
    """

    type: str
    box: LayoutBox
    text: str = ""
    image_path: str = ""
    html: str = ""
    page_index: int = 0
    reading_order: int | None = None
    confidence: float = 0.0
    skipped: bool = False

    @property
    def bbox(self) -> BBox:
        return self.box.bbox

    def normalized_bbox(self, extent: PageExtent) -> list[int]:
        """Bbox on the 0-1000 grid relative to the page."""
        return self.box.bbox.normalized(extent.width, extent.height)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict.

        Field order:
            reading_order → type → bbox → category → confidence → text → html
            → image_path → page_index → skipped
        Empty payload fields are omitted.

        Example:
            >>> element = ContentElement(type="text", box=LayoutBox(BBox(0, 0, 10, 10)), text="Hi", reading_order=0)
            >>> element.to_dict()["text"]
            'Hi'
        """
        result: dict[str, Any] = {}

        if self.reading_order is not None:
            result["reading_order"] = self.reading_order

        result["type"] = self.type
        result["bbox"] = self.box.bbox.to_list()
        result["category"] = self.box.category
        result["confidence"] = self.confidence

        if self.text:
            result["text"] = self.text
        if self.html:
            result["html"] = self.html
        if self.image_path:
            result["image_path"] = self.image_path

        result["page_index"] = self.page_index

        if self.skipped:
            result["skipped"] = True

        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any], index: int = 0) -> ContentElement:
        """Create ContentElement from dict.

        Args:
            data: Dictionary with element data (must have "bbox")
            index: Box index used when the dict carries none

        Returns:
            ContentElement object
        """
        if "bbox" not in data:
            raise ValueError("Element dict must have 'bbox' field")

        box = LayoutBox(
            bbox=BBox.from_list(data["bbox"], coord_format="xyxy"),
            category=data.get("category", LayoutCategory.UNKNOWN),
            confidence=float(data.get("confidence", 0.0)),
            index=int(data.get("index", index)),
        )
        return cls(
            type=data.get("type", ElementType.UNKNOWN),
            box=box,
            text=data.get("text", ""),
            image_path=data.get("image_path", ""),
            html=data.get("html", ""),
            page_index=int(data.get("page_index", 0)),
            reading_order=data.get("reading_order"),
            confidence=box.confidence,
            skipped=bool(data.get("skipped", False)),
        )
