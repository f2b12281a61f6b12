"""Page-level dataclasses: PageResult (ordering output) and PageInput (detector input)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .element import ContentElement
from .layout import LayoutBox, PageExtent


@dataclass
class PageResult:
    """Single page result.

    Core fields:
    - page_index: Page number (0-indexed)
    - extent: Page size in pixels
    - elements: ContentElements in reading order

    Optional metadata fields:
    - ordered_by: Name of the sorter that produced the order
    - processing_time_ms: Time spent ordering the page
    """

    page_index: int
    extent: PageExtent
    elements: list[ContentElement] = field(default_factory=list)

    ordered_by: str | None = None
    processing_time_ms: float = 0.0

    @property
    def skipped_count(self) -> int:
        return sum(1 for e in self.elements if e.skipped)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict.

        Example:
            >>> page = PageResult(page_index=0, extent=PageExtent(100, 100))
            >>> page.to_dict()
            {'page_index': 0, 'width': 100, 'height': 100, 'elements': []}
        """
        result: dict[str, Any] = {
            "page_index": self.page_index,
            "width": self.extent.width,
            "height": self.extent.height,
            "elements": [e.to_dict() for e in self.elements],
        }
        if self.ordered_by is not None:
            result["ordered_by"] = self.ordered_by
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PageResult:
        """Create PageResult from dict."""
        return cls(
            page_index=data["page_index"],
            extent=PageExtent(width=int(data["width"]), height=int(data["height"])),
            elements=[ContentElement.from_dict(e, index=i) for i, e in enumerate(data.get("elements", []))],
            ordered_by=data.get("ordered_by"),
        )


@dataclass
class RegionPayload:
    """Recognizer output attached to one layout box.

    - text: Recognized text (or LaTeX for equations)
    - html: Table HTML
    - image_path: Extracted figure image
    - skipped: The recognizer declined this region (e.g. wireless table)
    """

    text: str = ""
    html: str = ""
    image_path: str = ""
    skipped: bool = False


@dataclass
class PageInput:
    """One page as handed over by the upstream detectors.

    ``payloads[i]`` belongs to ``boxes[i]``; a missing payload list means
    every box arrives without recognizer output.
    """

    page_index: int
    extent: PageExtent
    boxes: list[LayoutBox] = field(default_factory=list)
    payloads: list[RegionPayload] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.payloads:
            self.payloads = [RegionPayload() for _ in self.boxes]
        if len(self.payloads) != len(self.boxes):
            raise ValueError(f"Page {self.page_index}: {len(self.boxes)} boxes but {len(self.payloads)} payloads")
