"""Sorter implementations.

- XYCutPlusSorter: XY-Cut++ projection sort (default)
- PositionSorter: plain top-to-bottom, left-to-right baseline

Both follow the Sorter protocol: every input element comes back exactly
once, with reading_order set to its rank.
"""

from __future__ import annotations

import logging
from typing import Any

from readorder.constants import DEFAULT_MIN_GAP_RATIO, DEFAULT_MIN_VALUE_RATIO
from readorder.types import ContentElement, PageExtent

from .xycut import Direction, XYCutConfig, xycut_plus_sort

logger = logging.getLogger(__name__)

__all__ = ["XYCutPlusSorter", "PositionSorter"]


def _assign_ranks(elements: list[ContentElement]) -> list[ContentElement]:
    for rank, element in enumerate(elements):
        element.reading_order = rank
    return elements


class XYCutPlusSorter:
    """Sorter using the XY-Cut++ algorithm.

    Splits the page into columns and rows at projection valleys and orders
    residual clusters line by line. Needs no model and no page image.
    """

    name = "xycut-plus"

    def __init__(
        self,
        direction: Direction | str = Direction.AUTO,
        min_gap_ratio: float = DEFAULT_MIN_GAP_RATIO,
        min_value_ratio: float = DEFAULT_MIN_VALUE_RATIO,
    ) -> None:
        """Initialize XY-Cut++ sorter.

        Args:
            direction: "auto", "horizontal" or "vertical"
            min_gap_ratio: Fraction of the page dimension a valley must span to split
            min_value_ratio: Projection values at or below this count as empty

        Raises:
            ValueError: If direction is not a known Direction value
        """
        self.config = XYCutConfig(
            direction=Direction(direction),
            min_gap_ratio=min_gap_ratio,
            min_value_ratio=min_value_ratio,
        )
        logger.debug("XY-Cut++ sorter initialized: %s", self.config)

    def sort(self, elements: list[ContentElement], extent: PageExtent, **kwargs: Any) -> list[ContentElement]:
        """Sort elements using XY-Cut++.

        Args:
            elements: Page elements with geometry
            extent: Page size in pixels
            **kwargs: Additional context (unused)

        Returns:
            Sorted elements with reading_order set

        Example:
            >>> sorter = XYCutPlusSorter()
            >>> ordered = sorter.sort(elements, PageExtent(1000, 1400))
            >>> ordered[0].reading_order
            0
        """
        if not elements:
            return elements

        order = xycut_plus_sort(
            [e.box for e in elements],
            extent.width,
            extent.height,
            self.config,
        )
        sorted_elements = [elements[i] for i in order]

        logger.debug("Sorted %d elements using XY-Cut++", len(sorted_elements))

        return _assign_ranks(sorted_elements)


class PositionSorter:
    """Sort by top edge, then left edge.

    Ignores columns entirely; useful as a baseline and for single-column pages.
    """

    name = "position"

    def sort(self, elements: list[ContentElement], extent: PageExtent, **kwargs: Any) -> list[ContentElement]:
        """Sort elements by (y0, x0), input position breaking ties."""
        if not elements:
            return elements

        order = sorted(range(len(elements)), key=lambda i: (elements[i].bbox.y0, elements[i].bbox.x0, i))
        return _assign_ranks([elements[i] for i in order])
