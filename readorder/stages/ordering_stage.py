"""Ordering Stage: Reading order analysis."""

from __future__ import annotations

from typing import Any

from readorder.exceptions import OrderingError
from readorder.types import ContentElement, Sorter

from .base import BaseStage


class OrderingStage(BaseStage[list[ContentElement], list[ContentElement]]):
    """Stage 2: ElementOrdering - Reading order analysis.

    Sorts assembled elements with the configured sorter and checks that the
    result is a reading order of exactly the input elements.
    """

    name = "ordering"

    def __init__(self, sorter: Sorter):
        self.sorter = sorter

    def _process_impl(self, input_data: list[ContentElement], **context: Any) -> list[ContentElement]:
        """Sort elements by reading order.

        Args:
            input_data: Elements of one page
            **context: Must include 'extent' (PageExtent)

        Returns:
            Elements in reading order with reading_order set
        """
        extent = context.get("extent")
        if extent is None:
            raise ValueError("OrderingStage requires 'extent' in context")

        remaining_context = {k: v for k, v in context.items() if k != "extent"}
        sorted_elements = self.sorter.sort(input_data, extent, **remaining_context)

        if sorted(map(id, sorted_elements)) != sorted(map(id, input_data)):
            raise OrderingError(
                f"Sorter '{self.sorter.name}' returned {len(sorted_elements)} elements for {len(input_data)} inputs"
            )
        return sorted_elements
