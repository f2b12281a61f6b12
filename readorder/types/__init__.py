"""Unified type definitions for the reading-order pipeline.

This module provides:
- BBox: Float bounding box (internal: xyxy, JSON: xyxy list)
- LayoutBox, LayoutCategory, LayoutCategoryMapper, PageExtent: Layout inputs
- ContentElement, ElementType: Output elements
- PageInput, RegionPayload: Per-page input from upstream detectors
- PageResult, Document: Page and document results
- Sorter: Component interface
"""

from .bbox import BBox
from .document import Document
from .element import ContentElement, ElementType, element_type_for
from .interfaces import Sorter
from .layout import LayoutBox, LayoutCategory, LayoutCategoryMapper, PageExtent
from .page import PageInput, PageResult, RegionPayload

__all__ = [
    # Layout inputs
    "BBox",
    "LayoutBox",
    "LayoutCategory",
    "LayoutCategoryMapper",
    "PageExtent",
    # Output elements
    "ContentElement",
    "ElementType",
    "element_type_for",
    # Results
    "PageInput",
    "PageResult",
    "RegionPayload",
    "Document",
    # Component interfaces
    "Sorter",
]
