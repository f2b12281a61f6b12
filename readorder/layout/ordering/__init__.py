"""Reading order analysis module.

- xycut.py: XY-Cut++ core (projection, profile split, recursive cut)
- sorters.py: Sorter implementations (XY-Cut++, position baseline)
- registry.py: Name-based sorter lookup
"""

from __future__ import annotations

from typing import Any

from readorder.types import Sorter

from .analyzer import ReadingOrderAnalyzer
from .registry import SorterRegistry, sorter_registry
from .sorters import PositionSorter, XYCutPlusSorter
from .xycut import (
    Direction,
    XYCutConfig,
    detect_direction,
    projection_by_bboxes,
    split_projection_profile,
    xycut_plus_sort,
)

__all__ = [
    # Core
    "Direction",
    "XYCutConfig",
    "detect_direction",
    "projection_by_bboxes",
    "split_projection_profile",
    "xycut_plus_sort",
    # Classes
    "ReadingOrderAnalyzer",
    "XYCutPlusSorter",
    "PositionSorter",
    # Registry
    "SorterRegistry",
    "sorter_registry",
    # Functions
    "create_sorter",
    "list_available_sorters",
]


def create_sorter(name: str, **kwargs: Any) -> Sorter:
    """Create a sorter instance.

    Args:
        name: Sorter name
        **kwargs: Arguments for sorter

    Returns:
        Sorter instance
    """
    return sorter_registry.create(name, **kwargs)


def list_available_sorters() -> list[str]:
    """List available sorter names."""
    return sorter_registry.list_available()
