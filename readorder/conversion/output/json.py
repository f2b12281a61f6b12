"""JSON output conversion utilities.

Content list format (one entry per element, reading order):
    {
        "type": "text" | "title" | "table" | "image" | "equation" | ...,
        "text": "...",              # text-like and equation elements
        "text_level": 1,            # titles only
        "table_body": "<table>",    # tables
        "img_path": "page0_fig0.png",  # images
        "bbox": [x0, y0, x1, y1],   # 0-1000 grid relative to the page
        "page_idx": 0,
        "reading_order": 0,
        "skipped": true             # only when no recognizer handled it
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from readorder.exceptions import FileSaveError
from readorder.types import ContentElement, Document, ElementType, PageExtent, PageResult

logger = logging.getLogger(__name__)

__all__ = [
    "element_to_content_entry",
    "page_to_content_list",
    "document_to_content_list",
    "save_content_list",
    "save_document_to_json",
]


def element_to_content_entry(element: ContentElement, extent: PageExtent) -> dict[str, Any]:
    """Convert one element to a content-list entry.

    Example:
        >>> element = ContentElement(type="title", box=LayoutBox(BBox(100, 50, 300, 100)), text="Intro", reading_order=0)
        >>> element_to_content_entry(element, PageExtent(1000, 1000))
        {'type': 'title', 'text': 'Intro', 'text_level': 1, 'bbox': [100, 50, 300, 100], 'page_idx': 0, 'reading_order': 0}
    """
    entry: dict[str, Any] = {"type": element.type}

    if element.type == ElementType.TABLE:
        entry["table_body"] = element.html
    elif element.type == ElementType.IMAGE:
        entry["img_path"] = element.image_path
    else:
        entry["text"] = element.text
        if element.type == ElementType.TITLE:
            entry["text_level"] = 1

    entry["bbox"] = element.normalized_bbox(extent)
    entry["page_idx"] = element.page_index

    if element.reading_order is not None:
        entry["reading_order"] = element.reading_order
    if element.skipped:
        entry["skipped"] = True

    return entry


def page_to_content_list(page: PageResult) -> list[dict[str, Any]]:
    return [element_to_content_entry(e, page.extent) for e in page.elements]


def document_to_content_list(doc: Document) -> list[dict[str, Any]]:
    """Flatten every page's elements into one content list."""
    entries: list[dict[str, Any]] = []
    for page in doc.pages:
        entries.extend(page_to_content_list(page))
    return entries


def _dump_json(data: Any, output_path: Path, indent: int) -> None:
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=indent, ensure_ascii=False)
    except OSError as e:
        raise FileSaveError(f"Cannot write JSON to {output_path}: {e}") from e


def save_content_list(entries: list[dict[str, Any]], output_path: Path, indent: int = 2) -> None:
    """Save a content list to JSON file.

    Args:
        entries: Content-list entries
        output_path: Output JSON file path
        indent: JSON indentation level (default: 2)

    Raises:
        FileSaveError: If file cannot be written
    """
    _dump_json(entries, output_path, indent)
    logger.info("Saved %d content entries to JSON: %s", len(entries), output_path)


def save_document_to_json(doc: Document, output_path: Path, indent: int = 2) -> None:
    """Save the full Document (pages, elements, pixel bboxes) to JSON.

    Raises:
        FileSaveError: If file cannot be written
    """
    _dump_json(doc.to_dict(), output_path, indent)
    logger.info("Saved document result to JSON: %s", output_path)
