"""Reading-order pipeline for detected document layouts."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any

from .config import OrderingConfig
from .conversion.input import parse_page
from .conversion.output import (
    document_to_content_list,
    document_to_markdown,
    save_content_list,
    save_document_to_json,
    save_markdown,
    save_text,
)
from .layout.ordering import ReadingOrderAnalyzer, create_sorter
from .misc import tz_now
from .stages import AssemblyStage, OrderingStage
from .types import Document, PageInput, PageResult, Sorter

logger = logging.getLogger(__name__)

__all__ = ["ReadingOrderPipeline", "OrderingConfig"]


class ReadingOrderPipeline:
    """Reading-order pipeline over already-detected page layouts.

    This pipeline orchestrates three stages per document:
    1. Assembly: Build content elements from layout boxes and recognizer payloads
    2. Ordering: Sort elements with the configured sorter (XY-Cut++ by default)
    3. Output: Render Markdown and the JSON content list

    Example:
        >>> from readorder import ReadingOrderPipeline
        >>> from readorder.config import OrderingConfig
        >>>
        >>> pipeline = ReadingOrderPipeline(OrderingConfig(direction="horizontal"))
        >>> document = pipeline.process_document(pages, name="paper")
        >>> pipeline.save_outputs(document)
    """

    def __init__(self, config: OrderingConfig | None = None, sorter: Sorter | None = None):
        """Initialize the pipeline.

        Args:
            config: Ordering configuration. If None, uses default configuration.
            sorter: Prebuilt sorter; overrides config.sorter when given

        Raises:
            InvalidConfigError: If the configuration is invalid
        """
        self.config = config if config is not None else OrderingConfig()
        self.config.validate()

        self.sorter: Sorter = sorter or create_sorter(self.config.sorter, **self.config.sorter_kwargs())

        self.assembly_stage = AssemblyStage()
        self.ordering_stage = OrderingStage(self.sorter)
        self.analyzer = ReadingOrderAnalyzer()

        logger.info("Pipeline initialized: sorter=%s, renderer=%s", self.sorter_name, self.config.renderer)

    @property
    def sorter_name(self) -> str:
        return self.sorter.name

    def process_page(self, page_input: PageInput | dict[str, Any]) -> PageResult:
        """Assemble and order one page.

        Args:
            page_input: PageInput, or its JSON object form

        Returns:
            PageResult with elements in reading order

        Raises:
            StageError: If assembly or ordering fails
        """
        if isinstance(page_input, dict):
            page_input = parse_page(page_input)

        start_time = time.perf_counter()

        elements = self.assembly_stage.process(page_input, page_index=page_input.page_index)
        ordered = self.ordering_stage.process(elements, extent=page_input.extent)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.debug("Page %d: ordered %d elements in %.2fms", page_input.page_index, len(ordered), elapsed_ms)

        return PageResult(
            page_index=page_input.page_index,
            extent=page_input.extent,
            elements=ordered,
            ordered_by=self.sorter_name,
            processing_time_ms=elapsed_ms,
        )

    def process_document(self, pages: list[PageInput], name: str = "document") -> Document:
        """Process every page of a document in page order."""
        logger.info("Processing document '%s': %d pages", name, len(pages))

        results = [self.process_page(page) for page in pages]
        document = Document(
            name=name,
            pages=results,
            ordered_by=self.sorter_name,
            processed_at=tz_now().isoformat(),
        )

        logger.info(
            "Document processing complete: %d pages, %d skipped elements",
            document.processed_pages,
            document.skipped_elements,
        )
        return document

    def render_markdown(self, document: Document) -> str:
        return document_to_markdown(document)

    def render_text(self, document: Document) -> str:
        """Plain text of the text-like elements, pages separated by blank lines."""
        pages = [self.analyzer.compose_page_text(page.elements) for page in document.pages]
        return "\n\n".join(p for p in pages if p)

    def render_content_list(self, document: Document) -> list[dict[str, Any]]:
        return document_to_content_list(document)

    def save_outputs(self, document: Document, output_dir: Path | None = None) -> list[Path]:
        """Write the rendered document and ``<name>_content.json``.

        The markdown renderer adds ``<name>.md``, the text renderer
        ``<name>.txt``; ``save_document`` adds ``<name>_document.json``.

        Returns:
            Paths written, the rendered document first

        Raises:
            FileSaveError: If an output file cannot be written
        """
        output_dir = output_dir or self.config.output_dir
        written: list[Path] = []

        if self.config.renderer == "markdown":
            md_path = output_dir / f"{document.name}.md"
            save_markdown(self.render_markdown(document), md_path)
            written.append(md_path)
        elif self.config.renderer == "text":
            txt_path = output_dir / f"{document.name}.txt"
            save_text(self.render_text(document), txt_path)
            written.append(txt_path)

        json_path = output_dir / f"{document.name}_content.json"
        save_content_list(self.render_content_list(document), json_path)
        written.append(json_path)

        if self.config.save_document:
            document_path = output_dir / f"{document.name}_document.json"
            save_document_to_json(document, document_path)
            written.append(document_path)

        return written
