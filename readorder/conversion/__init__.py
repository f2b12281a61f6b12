"""Conversion between detector JSON, pipeline types and output formats."""

from __future__ import annotations

from .input import load_pages_from_json
from .output import document_to_content_list, document_to_markdown, save_content_list, save_markdown

__all__ = [
    "load_pages_from_json",
    "document_to_content_list",
    "document_to_markdown",
    "save_content_list",
    "save_markdown",
]
