"""Output rendering: Markdown, plain text and JSON content list."""

from __future__ import annotations

from .json import (
    document_to_content_list,
    element_to_content_entry,
    page_to_content_list,
    save_content_list,
    save_document_to_json,
)
from .markdown import document_to_markdown, element_to_markdown, page_to_markdown, save_markdown
from .plaintext import save_text

__all__ = [
    "document_to_content_list",
    "element_to_content_entry",
    "page_to_content_list",
    "save_content_list",
    "save_document_to_json",
    "document_to_markdown",
    "element_to_markdown",
    "page_to_markdown",
    "save_markdown",
    "save_text",
]
