"""Assembly Stage: Turn layout boxes and recognizer payloads into content elements."""

from __future__ import annotations

import logging
from typing import Any

from readorder.constants import FORMULA_PLACEHOLDER, UNSUPPORTED_PLACEHOLDER
from readorder.types import (
    ContentElement,
    ElementType,
    LayoutBox,
    LayoutCategory,
    LayoutCategoryMapper,
    PageInput,
    RegionPayload,
    element_type_for,
)

from .base import BaseStage

logger = logging.getLogger(__name__)


class AssemblyStage(BaseStage[PageInput, list[ContentElement]]):
    """Stage 1: ContentAssembly - Build one ContentElement per kept box.

    Rules:
    - Separators carry no content and are dropped
    - Equations without recognized text become skipped placeholders
    - Unknown categories become skipped placeholders
    - Tables keep their HTML; a skipped table keeps its place in the page
    """

    name = "assembly"

    def _process_impl(self, input_data: PageInput, **context: Any) -> list[ContentElement]:
        elements: list[ContentElement] = []

        for box, payload in zip(input_data.boxes, input_data.payloads, strict=True):
            if box.category == LayoutCategory.SEPARATOR:
                continue
            elements.append(self._build_element(box, payload, input_data.page_index))

        logger.debug(
            "Page %d: assembled %d elements from %d boxes",
            input_data.page_index,
            len(elements),
            len(input_data.boxes),
        )
        return elements

    @staticmethod
    def _build_element(box: LayoutBox, payload: RegionPayload, page_index: int) -> ContentElement:
        category = box.category
        element = ContentElement(
            type=element_type_for(category),
            box=box,
            text=payload.text,
            html=payload.html,
            image_path=payload.image_path,
            page_index=page_index,
            confidence=box.confidence,
            skipped=payload.skipped,
        )

        if not LayoutCategoryMapper.is_supported(category) and not payload.text:
            element.skipped = True
            element.text = FORMULA_PLACEHOLDER
            logger.debug("Skipping unsupported element: %s at (%.1f, %.1f)", category, box.bbox.x0, box.bbox.y0)
        elif element.type == ElementType.UNKNOWN:
            element.skipped = True
            element.text = payload.text or UNSUPPORTED_PLACEHOLDER
            logger.debug("Skipping unknown element at (%.1f, %.1f)", box.bbox.x0, box.bbox.y0)
        elif element.type == ElementType.TABLE and element.skipped:
            logger.warning("Skipping unrecognized table at (%.1f, %.1f)", box.bbox.x0, box.bbox.y0)

        return element
