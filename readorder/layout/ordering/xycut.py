"""XY-Cut++ reading order algorithm.

XY-Cut++ Algorithm:
- Resolve reading direction once per page (explicit or aspect-ratio vote)
- Project boxes onto an axis, split the profile at wide enough valleys
- Partition boxes by center into segments and recurse
- Horizontal pages cut columns (X) before rows (Y); vertical pages the reverse
- Unsplittable clusters fall back to a line-aware positional comparator

Pure geometry: no model, no image, no I/O. The result is always a
permutation of the input positions.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key

import numpy as np

from readorder.constants import (
    DEFAULT_MIN_GAP_RATIO,
    DEFAULT_MIN_VALUE_RATIO,
    HORIZONTAL_MAJORITY,
    SAME_LINE_RATIO,
    WIDE_ASPECT_RATIO,
)
from readorder.types import LayoutBox

logger = logging.getLogger(__name__)

__all__ = [
    "AXIS_X",
    "AXIS_Y",
    "Direction",
    "XYCutConfig",
    "detect_direction",
    "projection_by_bboxes",
    "split_projection_profile",
    "xycut_plus_sort",
]

AXIS_X = 0
AXIS_Y = 1


class Direction(str, Enum):
    """Page reading direction."""

    HORIZONTAL = "horizontal"  # left to right, top to bottom
    VERTICAL = "vertical"  # top to bottom, right to left
    AUTO = "auto"


@dataclass(frozen=True)
class XYCutConfig:
    """Tunable parameters of the XY-Cut++ sort.

    Attributes:
        direction: Reading direction, AUTO resolves it from box shapes
        min_gap_ratio: Fraction of the page dimension a valley must span to split
        min_value_ratio: Projection values at or below this count as empty
    """

    direction: Direction = Direction.AUTO
    min_gap_ratio: float = DEFAULT_MIN_GAP_RATIO
    min_value_ratio: float = DEFAULT_MIN_VALUE_RATIO


def detect_direction(boxes: Sequence[LayoutBox]) -> Direction:
    """Guess reading direction by majority vote on box aspect ratios.

    Boxes with no positive width or height do not vote.

    Example:
        >>> detect_direction([LayoutBox(BBox(0, 0, 300, 40))])
        <Direction.HORIZONTAL: 'horizontal'>
    """
    wide = 0
    considered = 0
    for box in boxes:
        if box.bbox.is_degenerate:
            continue
        considered += 1
        if box.width >= box.height * WIDE_ASPECT_RATIO:
            wide += 1

    if considered == 0:
        return Direction.HORIZONTAL

    return Direction.HORIZONTAL if wide / considered >= HORIZONTAL_MAJORITY else Direction.VERTICAL


def projection_by_bboxes(boxes: Sequence[LayoutBox], axis: int, length: int) -> np.ndarray:
    """Get coverage histogram along specified axis.

    Args:
        boxes: Boxes to project
        axis: AXIS_X (uses x0..x1) or AXIS_Y (uses y0..y1)
        length: Histogram size (page width for X, page height for Y)

    Returns:
        1D int array; entry i counts the boxes covering pixel i
    """
    assert axis in (AXIS_X, AXIS_Y), "axis must be 0 (X) or 1 (Y)"

    result = np.zeros(max(0, length), dtype=int)

    for box in boxes:
        if axis == AXIS_X:
            start, end = box.bbox.x0, box.bbox.x1
        else:
            start, end = box.bbox.y0, box.bbox.y1
        start_idx = max(0, int(start))
        end_idx = min(length, int(end))
        if start_idx < end_idx:
            result[start_idx:end_idx] += 1

    return result


def split_projection_profile(values: np.ndarray, min_value: float, min_gap: int) -> list[tuple[int, int]]:
    """Split projection profile into occupied segments.

    Args:
        values: 1D projection histogram
        min_value: Pixels with value > min_value are occupied
        min_gap: Unoccupied run length that separates two segments (at least 1)

    Returns:
        Half-open (start, end) segments, left to right. A segment still open
        at the end of the histogram runs to len(values).

    Example:
        >>> split_projection_profile(np.array([1, 1, 0, 0, 0, 1]), 0, 2)
        [(0, 2), (5, 6)]
    """
    min_gap = max(1, min_gap)
    length = len(values)

    occupied = np.flatnonzero(np.asarray(values) > min_value)
    if len(occupied) == 0:
        return []

    # Gap between consecutive occupied pixels is diff - 1 pixels wide
    breaks = np.flatnonzero(np.diff(occupied) - 1 >= min_gap)

    starts = [int(occupied[0])] + [int(occupied[k + 1]) for k in breaks]
    ends = [int(occupied[k]) + 1 for k in breaks]

    last = int(occupied[-1])
    ends.append(last + 1 if length - 1 - last >= min_gap else length)

    return list(zip(starts, ends, strict=True))


# ==================== Leaf comparators ====================


def _compare(a: float, b: float) -> int:
    return (a > b) - (a < b)


def _horizontal_leaf_order(boxes: Sequence[LayoutBox]) -> Callable[[int, int], int]:
    """Same line: left to right. Otherwise top to bottom."""

    def compare(i: int, j: int) -> int:
        (cx_a, cy_a), (cx_b, cy_b) = boxes[i].center, boxes[j].center
        threshold = min(boxes[i].height, boxes[j].height) * SAME_LINE_RATIO
        if abs(cy_a - cy_b) < threshold:
            order = _compare(cx_a, cx_b) or _compare(cy_a, cy_b)
        else:
            order = _compare(cy_a, cy_b) or _compare(cx_a, cx_b)
        return order or _compare(i, j)

    return compare


def _vertical_leaf_order(boxes: Sequence[LayoutBox]) -> Callable[[int, int], int]:
    """Same column: top to bottom. Otherwise right to left.

    The same-column threshold is measured on box width.
    """

    def compare(i: int, j: int) -> int:
        (cx_a, cy_a), (cx_b, cy_b) = boxes[i].center, boxes[j].center
        threshold = min(boxes[i].width, boxes[j].width) * SAME_LINE_RATIO
        if abs(cx_a - cx_b) < threshold:
            order = _compare(cy_a, cy_b) or _compare(cx_b, cx_a)
        else:
            order = _compare(cx_b, cx_a) or _compare(cy_a, cy_b)
        return order or _compare(i, j)

    return compare


# ==================== Recursive cut ====================


@dataclass(frozen=True)
class _CutPlan:
    """Axis order and leaf comparator for one reading direction."""

    axes: tuple[int, int]
    leaf_order: Callable[[Sequence[LayoutBox]], Callable[[int, int], int]]


_PLANS: dict[Direction, _CutPlan] = {
    Direction.HORIZONTAL: _CutPlan(axes=(AXIS_X, AXIS_Y), leaf_order=_horizontal_leaf_order),
    Direction.VERTICAL: _CutPlan(axes=(AXIS_Y, AXIS_X), leaf_order=_vertical_leaf_order),
}


def _partition(
    boxes: Sequence[LayoutBox],
    indices: list[int],
    axis: int,
    segments: list[tuple[int, int]],
) -> list[list[int]]:
    """Group indices by the segment holding each box center.

    A center outside every segment joins the nearest one (earlier on a tie).
    Empty groups are dropped.
    """
    starts = np.array([s for s, _ in segments], dtype=float)
    ends = np.array([e for _, e in segments], dtype=float)

    groups: list[list[int]] = [[] for _ in segments]
    for i in indices:
        center = boxes[i].center[axis]
        distance = np.maximum(starts - center, 0.0) + np.maximum(center - ends, 0.0)
        inside = (starts <= center) & (center < ends)
        if inside.any():
            groups[int(np.argmax(inside))].append(i)
        else:
            groups[int(np.argmin(distance))].append(i)

    return [g for g in groups if g]


def _split(
    boxes: Sequence[LayoutBox],
    indices: list[int],
    axis: int,
    length: int,
    min_value: float,
    min_gap: int,
) -> list[list[int]] | None:
    """Split indices along one axis, or None when the axis cannot split them."""
    projection = projection_by_bboxes([boxes[i] for i in indices], axis, length)
    segments = split_projection_profile(projection, min_value, min_gap)
    if len(segments) < 2:
        return None

    groups = _partition(boxes, indices, axis, segments)
    if len(groups) < 2:
        return None
    return groups


def _cut(
    boxes: Sequence[LayoutBox],
    page_width: int,
    page_height: int,
    config: XYCutConfig,
    plan: _CutPlan,
) -> list[int]:
    """Run the recursive cut over all boxes and return the visiting order.

    Pending groups live on an explicit stack (pushed in reverse so they pop
    in reading order), so dense pages cannot hit the interpreter's recursion
    limit.
    """
    lengths = {AXIS_X: page_width, AXIS_Y: page_height}
    min_gaps = {axis: max(1, int(size * config.min_gap_ratio)) for axis, size in lengths.items()}
    min_value = config.min_value_ratio
    leaf_key = cmp_to_key(plan.leaf_order(boxes))

    result: list[int] = []
    pending: list[list[int]] = [list(range(len(boxes)))]

    while pending:
        indices = pending.pop()
        if len(indices) <= 1:
            result.extend(indices)
            continue

        groups = None
        for axis in plan.axes:
            groups = _split(boxes, indices, axis, lengths[axis], min_value, min_gaps[axis])
            if groups is not None:
                break

        if groups is None:
            result.extend(sorted(indices, key=leaf_key))
        else:
            pending.extend(reversed(groups))

    return result


def xycut_plus_sort(
    boxes: Sequence[LayoutBox],
    page_width: int,
    page_height: int,
    config: XYCutConfig | None = None,
) -> list[int]:
    """Sort boxes into reading order with XY-Cut++.

    Args:
        boxes: Page boxes in page pixel coordinates
        page_width: Page width (X histogram domain)
        page_height: Page height (Y histogram domain)
        config: Direction and thresholds (defaults when None)

    Returns:
        Positions into ``boxes`` in reading order (a permutation of 0..N-1)

    Example:
        >>> left = LayoutBox(BBox(0, 0, 100, 500))
        >>> right = LayoutBox(BBox(600, 0, 700, 500))
        >>> xycut_plus_sort([right, left], 1000, 1000)
        [1, 0]
    """
    if not boxes:
        return []

    config = config or XYCutConfig()

    direction = Direction(config.direction)
    if direction == Direction.AUTO:
        direction = detect_direction(boxes)

    logger.debug(
        "XY-Cut sorting %d boxes on %dx%d page (direction=%s)",
        len(boxes),
        page_width,
        page_height,
        direction.value,
    )

    return _cut(boxes, page_width, page_height, config, _PLANS[direction])
