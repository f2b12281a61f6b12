"""Load detector output (page boxes and payloads) from JSON.

Accepted layouts:
    {"name": "doc", "pages": [page, ...]}   # document
    page                                      # single page

Page:
    {"page_index": 0, "width": 1240, "height": 1754, "boxes": [box, ...]}

Box:
    {"bbox": [x0, y0, x1, y1]} or {"xywh": [x, y, w, h]}
    plus optional "category" (label or class id), "confidence",
    "text", "html", "image_path", "skipped"
"""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any

from readorder.exceptions import FileFormatError, FileLoadError
from readorder.types import BBox, LayoutBox, LayoutCategoryMapper, PageExtent, PageInput, RegionPayload

logger = logging.getLogger(__name__)

__all__ = ["load_pages_from_json", "parse_document", "parse_page"]


def _parse_box(data: Any, index: int) -> tuple[LayoutBox, RegionPayload]:
    if not isinstance(data, dict):
        raise FileFormatError(f"box {index}: expected an object, got {type(data).__name__}")

    try:
        if "bbox" in data:
            bbox = BBox.from_list(data["bbox"], coord_format="xyxy")
        elif "xywh" in data:
            bbox = BBox.from_list(data["xywh"], coord_format="xywh")
        else:
            raise FileFormatError(f"box {index}: missing 'bbox' or 'xywh'")
        confidence = float(data.get("confidence", 1.0))
    except (TypeError, ValueError) as e:
        raise FileFormatError(f"box {index}: {e}") from e

    if not all(math.isfinite(v) for v in bbox.to_xyxy()):
        raise FileFormatError(f"box {index}: coordinates must be finite, got {bbox.to_list()}")

    box = LayoutBox(
        bbox=bbox,
        category=LayoutCategoryMapper.normalize(data.get("category", "text")),
        confidence=confidence,
        index=index,
    )
    payload = RegionPayload(
        text=str(data.get("text") or ""),
        html=str(data.get("html") or ""),
        image_path=str(data.get("image_path") or ""),
        skipped=bool(data.get("skipped", False)),
    )
    return box, payload


def parse_page(data: Any, position: int = 0) -> PageInput:
    """Build a PageInput from its JSON object.

    Raises:
        FileFormatError: If dimensions or boxes are missing or malformed
    """
    if not isinstance(data, dict):
        raise FileFormatError(f"page {position}: expected an object, got {type(data).__name__}")

    try:
        page_index = int(data.get("page_index", position))
        extent = PageExtent(width=int(data["width"]), height=int(data["height"]))
    except KeyError as e:
        raise FileFormatError(f"page {position}: missing {e}") from e
    except (TypeError, ValueError) as e:
        raise FileFormatError(f"page {position}: {e}") from e

    raw_boxes = data.get("boxes", [])
    if not isinstance(raw_boxes, list):
        raise FileFormatError(f"page {position}: 'boxes' must be a list")

    boxes: list[LayoutBox] = []
    payloads: list[RegionPayload] = []
    for index, raw in enumerate(raw_boxes):
        try:
            box, payload = _parse_box(raw, index)
        except FileFormatError as e:
            raise FileFormatError(f"page {position}, {e}") from e
        boxes.append(box)
        payloads.append(payload)

    return PageInput(page_index=page_index, extent=extent, boxes=boxes, payloads=payloads)


def parse_document(data: Any, default_name: str = "document") -> tuple[str, list[PageInput]]:
    """Parse a document or single-page object.

    Returns:
        (document name, pages)
    """
    if isinstance(data, dict) and "pages" in data:
        raw_pages = data["pages"]
        if not isinstance(raw_pages, list):
            raise FileFormatError("'pages' must be a list")
        name = str(data.get("name") or default_name)
        return name, [parse_page(page, i) for i, page in enumerate(raw_pages)]

    return default_name, [parse_page(data, 0)]


def load_pages_from_json(json_path: Path) -> tuple[str, list[PageInput]]:
    """Load pages from a detector-output JSON file.

    Args:
        json_path: Input JSON file path

    Returns:
        (document name, pages). The name defaults to the file stem.

    Raises:
        FileLoadError: If the file cannot be read
        FileFormatError: If the file is not valid JSON or misses required fields

    Example:
        >>> name, pages = load_pages_from_json(Path("paper.json"))
        >>> pages[0].extent
        PageExtent(width=1240, height=1754)
    """
    try:
        with open(json_path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise FileFormatError(f"Invalid JSON in {json_path}: {e}") from e
    except OSError as e:
        raise FileLoadError(f"Cannot read {json_path}: {e}") from e

    name, pages = parse_document(data, default_name=json_path.stem)

    logger.info("Loaded %d pages (%d boxes) from JSON: %s", len(pages), sum(len(p.boxes) for p in pages), json_path)
    return name, pages
