"""Shared constants for the reading-order pipeline."""

# =============================================================================
# XY-Cut++ Defaults
# =============================================================================
DEFAULT_MIN_GAP_RATIO = 0.05
"""Fraction of the page dimension a projection valley must span to split."""

DEFAULT_MIN_VALUE_RATIO = 0.0
"""Projection values at or below this count as empty."""

WIDE_ASPECT_RATIO = 1.5
"""A box is 'wide' when width >= height * WIDE_ASPECT_RATIO."""

HORIZONTAL_MAJORITY = 0.5
"""Share of wide boxes at which the page reads horizontally."""

SAME_LINE_RATIO = 0.5
"""Leaf boxes share a line when centers differ by less than this times the smaller extent."""

# =============================================================================
# Output
# =============================================================================
NORMALIZED_BBOX_SCALE = 1000
"""Grid size for normalized bboxes in the JSON content list."""

DEFAULT_SORTER = "xycut-plus"
"""Sorter used when none is configured."""

DEFAULT_OUTPUT_DIR = "output"
"""Default output directory for the CLI."""

# =============================================================================
# Placeholders
# =============================================================================
FORMULA_PLACEHOLDER = "[Formula: formula recognition is not supported]"
"""Text emitted for equation regions that were not recognized."""

UNSUPPORTED_PLACEHOLDER = "[Unsupported element type]"
"""Text emitted for regions no recognizer handled."""
