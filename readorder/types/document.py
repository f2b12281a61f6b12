"""Document dataclass - multi-page ordering result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .page import PageResult


@dataclass
class Document:
    """Multi-page document result.

    Core fields:
    - name: Document name (input file stem)
    - pages: PageResult objects in page order

    Optional metadata fields:
    - ordered_by: Sorter name
    - processed_at: ISO timestamp
    """

    name: str
    pages: list[PageResult]

    ordered_by: str | None = None
    processed_at: str | None = None

    @property
    def processed_pages(self) -> int:
        return len(self.pages)

    @property
    def skipped_elements(self) -> int:
        return sum(p.skipped_count for p in self.pages)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        result: dict[str, Any] = {
            "name": self.name,
            "processed_pages": self.processed_pages,
            "skipped_elements": self.skipped_elements,
            "pages": [p.to_dict() for p in self.pages],
        }

        if self.ordered_by is not None:
            result["ordered_by"] = self.ordered_by
        if self.processed_at is not None:
            result["processed_at"] = self.processed_at

        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Document:
        """Create Document from dict."""
        return cls(
            name=data["name"],
            pages=[PageResult.from_dict(p) for p in data.get("pages", [])],
            ordered_by=data.get("ordered_by"),
            processed_at=data.get("processed_at"),
        )
