"""Component interface definitions for the reading-order pipeline.

This module defines Protocol interfaces for pipeline components:
- Sorter: Reading order analysis interface
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .element import ContentElement
    from .layout import PageExtent


@runtime_checkable
class Sorter(Protocol):
    """Reading order sorting interface.

    All sorters must return every input element exactly once, with the
    reading_order field set to its rank.

    Attributes:
        name: Sorter identifier (e.g., "xycut-plus", "position")

    Example:
        >>> sorter = XYCutPlusSorter()
        >>> sorter.name
        'xycut-plus'
        >>> sorted_elements = sorter.sort(elements, PageExtent(1000, 1400))
    """

    name: str

    def sort(self, elements: list[ContentElement], extent: PageExtent, **kwargs: Any) -> list[ContentElement]:
        """Sort elements by reading order.

        Args:
            elements: Page elements with geometry
            extent: Page size in the same units as the element boxes
            **kwargs: Additional context (unused by built-in sorters)

        Returns:
            Sorted elements with reading_order set
        """
        ...
