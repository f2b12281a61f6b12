"""Input loading: detector output JSON."""

from __future__ import annotations

from .json import load_pages_from_json, parse_document, parse_page

__all__ = ["load_pages_from_json", "parse_document", "parse_page"]
