"""Plaintext output.

The text itself is composed by ReadingOrderAnalyzer; this module only
writes it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from readorder.exceptions import FileSaveError

logger = logging.getLogger(__name__)

__all__ = ["save_text"]


def save_text(text: str, output_path: Path) -> None:
    """Save plain text to a UTF-8 file, creating parent directories.

    Raises:
        FileSaveError: If the file cannot be written
    """
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text + "\n" if text else "", encoding="utf-8")
    except OSError as e:
        raise FileSaveError(f"Cannot write text to {output_path}: {e}") from e

    logger.info("Saved plain text: %s", output_path)
