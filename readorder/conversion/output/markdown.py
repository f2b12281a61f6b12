"""Markdown output conversion utilities.

Elements are rendered by element type, in reading order:
- title → "# text", list → "- text", code → fenced block
- table → its HTML (placeholder comment when missing)
- image → ![](image_path)
- equation → $$ block, or the placeholder text when skipped
- header / footer → omitted
"""

from __future__ import annotations

import logging
from pathlib import Path

from readorder.exceptions import FileSaveError
from readorder.types import ContentElement, Document, ElementType, PageResult

logger = logging.getLogger(__name__)

__all__ = [
    "element_to_markdown",
    "elements_to_markdown",
    "page_to_markdown",
    "document_to_markdown",
    "save_markdown",
]

TABLE_PLACEHOLDER = "<!-- Table not recognized -->"

_LIST_MARKERS = ("-", "*", "1.", "2.", "3.", "4.", "5.", "6.", "7.", "8.", "9.")


# ==================== Core: Object → Markdown ====================


def element_to_markdown(element: ContentElement) -> str:  # noqa: PLR0911
    """Convert a ContentElement to Markdown using its element type.

    Example:
        >>> element = ContentElement(type="title", box=LayoutBox(BBox(0, 0, 100, 20)), text="Introduction")
        >>> element_to_markdown(element)
        '# Introduction'
    """
    element_type = element.type
    text = (element.text or "").strip()

    if element_type in (ElementType.HEADER, ElementType.FOOTER):
        return ""

    if element_type == ElementType.TABLE:
        return element.html.strip() or TABLE_PLACEHOLDER

    if element_type == ElementType.IMAGE:
        if element.image_path:
            return f"![]({element.image_path})"
        return text

    if not text:
        return ""

    if element.skipped:
        return text

    if element_type == ElementType.TITLE:
        return f"# {text}"

    if element_type == ElementType.LIST:
        if text.startswith(_LIST_MARKERS):
            return text
        return f"- {text}"

    if element_type == ElementType.CODE:
        if text.startswith("```") and text.endswith("```"):
            return text
        return f"```\n{text}\n```"

    if element_type == ElementType.EQUATION:
        if text.startswith("$"):
            return text
        return f"$$\n{text}\n$$"

    return text


def elements_to_markdown(elements: list[ContentElement]) -> str:
    """Convert elements to Markdown blocks separated by blank lines.

    Elements with a reading_order are emitted by rank; unranked ones follow
    in their given order.
    """
    ranked = sorted((e for e in elements if e.reading_order is not None), key=lambda e: e.reading_order or 0)
    unranked = [e for e in elements if e.reading_order is None]

    blocks = [element_to_markdown(e) for e in ranked + unranked]
    return "\n\n".join(b for b in blocks if b)


def page_to_markdown(page: PageResult) -> str:
    return elements_to_markdown(page.elements)


def document_to_markdown(doc: Document) -> str:
    """Convert a Document to Markdown, pages joined by blank lines.

    Example:
        >>> md = document_to_markdown(doc)
        >>> md.startswith("# Chapter 1")
        True
    """
    pages = [page_to_markdown(page) for page in doc.pages]
    return "\n\n".join(p for p in pages if p)


# ==================== File I/O ====================


def save_markdown(markdown: str, output_path: Path) -> None:
    """Save Markdown text to a UTF-8 file, creating parent directories.

    Raises:
        FileSaveError: If the file cannot be written
    """
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(markdown + "\n" if markdown else "", encoding="utf-8")
    except OSError as e:
        raise FileSaveError(f"Cannot write Markdown to {output_path}: {e}") from e

    logger.info("Saved Markdown: %s", output_path)
