"""Layout processing modules for document analysis."""

from __future__ import annotations

from .ordering import ReadingOrderAnalyzer, create_sorter

__all__ = ["ReadingOrderAnalyzer", "create_sorter"]
