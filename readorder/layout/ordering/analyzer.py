"""Reading order analyzer for composing page text from elements."""

from __future__ import annotations

from collections.abc import Sequence

from readorder.types import ContentElement, ElementType

__all__ = ["ReadingOrderAnalyzer"]


class ReadingOrderAnalyzer:
    """Composes plain text from content elements in reading order."""

    TEXT_LIKE_TYPES = frozenset({ElementType.TEXT, ElementType.TITLE, ElementType.LIST, ElementType.REFERENCE})

    def compose_page_text(self, elements: Sequence[ContentElement]) -> str:
        """Compose page-level raw text from elements in reading order.

        Reading order: Uses reading_order if set, otherwise top-to-bottom (y),
        then left-to-right (x). Includes text-like, non-skipped elements only
        and preserves internal newlines within each element's text.

        Args:
            elements: ContentElements with text content

        Returns:
            Text of all text-like elements, separated by blank lines
        """
        if not elements:
            return ""

        text_elements = [e for e in elements if e.type in self.TEXT_LIKE_TYPES and e.text and not e.skipped]
        if not text_elements:
            return ""

        def sort_key(element: ContentElement) -> tuple[float, float, float]:
            rank = float(element.reading_order) if element.reading_order is not None else float("inf")
            return (rank, element.bbox.y0, element.bbox.x0)

        texts = []
        for element in sorted(text_elements, key=sort_key):
            text = element.text.strip()
            if text:
                texts.append(text)

        return "\n\n".join(texts)
