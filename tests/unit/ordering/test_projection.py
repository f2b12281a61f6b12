"""Tests for projection histograms and profile splitting."""

from __future__ import annotations

import numpy as np
import pytest

from readorder.layout.ordering.xycut import (
    AXIS_X,
    AXIS_Y,
    projection_by_bboxes,
    split_projection_profile,
)
from readorder.types import BBox, LayoutBox


def _box(x0: float, y0: float, x1: float, y1: float) -> LayoutBox:
    return LayoutBox(bbox=BBox(x0, y0, x1, y1))


class TestProjectionByBboxes:
    """Tests for projection_by_bboxes."""

    def test_single_box_x(self):
        """Test that a box covers [x0, x1) on the X axis."""
        result = projection_by_bboxes([_box(2, 0, 5, 1)], AXIS_X, 8)
        np.testing.assert_array_equal(result, [0, 0, 1, 1, 1, 0, 0, 0])

    def test_single_box_y(self):
        """Test that the Y axis uses y0..y1."""
        result = projection_by_bboxes([_box(0, 2, 1, 4)], AXIS_Y, 5)
        np.testing.assert_array_equal(result, [0, 0, 1, 1, 0])

    def test_overlap_counts_coverage(self):
        """Test that overlapping boxes add one each per pixel."""
        result = projection_by_bboxes([_box(0, 0, 4, 1), _box(2, 0, 6, 1)], AXIS_X, 6)
        np.testing.assert_array_equal(result, [1, 1, 2, 2, 1, 1])

    def test_clipped_to_length(self):
        """Test that spans outside [0, length) are dropped silently."""
        result = projection_by_bboxes([_box(-3, 0, 3, 1), _box(5, 0, 20, 1)], AXIS_X, 8)
        np.testing.assert_array_equal(result, [1, 1, 1, 0, 0, 1, 1, 1])

    def test_fractional_coordinates_truncate(self):
        """Test that coordinates are truncated to whole pixels."""
        result = projection_by_bboxes([_box(1.7, 0, 3.9, 1)], AXIS_X, 5)
        np.testing.assert_array_equal(result, [0, 1, 1, 0, 0])

    def test_box_off_page(self):
        """Test that a box entirely past the end contributes nothing."""
        result = projection_by_bboxes([_box(10, 0, 12, 1)], AXIS_X, 5)
        np.testing.assert_array_equal(result, [0, 0, 0, 0, 0])

    def test_no_boxes(self):
        """Test an empty box list."""
        result = projection_by_bboxes([], AXIS_Y, 4)
        assert result.shape == (4,)
        assert not result.any()

    def test_invalid_axis(self):
        """Test that only axis 0 and 1 are accepted."""
        with pytest.raises(AssertionError):
            projection_by_bboxes([_box(0, 0, 1, 1)], 2, 4)


class TestSplitProjectionProfile:
    """Tests for split_projection_profile."""

    def test_all_zero(self):
        """Test that an empty profile has no segments."""
        assert split_projection_profile(np.zeros(10, dtype=int), 0, 1) == []

    def test_empty_array(self):
        """Test a zero-length profile."""
        assert split_projection_profile(np.zeros(0, dtype=int), 0, 1) == []

    def test_wide_gap_splits(self):
        """Test that a gap of at least min_gap closes the segment where content ended."""
        assert split_projection_profile(np.array([1, 1, 0, 0, 0, 1]), 0, 2) == [(0, 2), (5, 6)]

    def test_short_gap_does_not_split(self):
        """Test that a gap shorter than min_gap stays inside the segment."""
        assert split_projection_profile(np.array([1, 0, 1]), 0, 2) == [(0, 3)]

    def test_leading_zeros(self):
        """Test that segments start at the first occupied pixel."""
        assert split_projection_profile(np.array([0, 0, 1, 1, 0, 0, 1]), 0, 2) == [(2, 4), (6, 7)]

    def test_short_trailing_gap_kept(self):
        """Test that a trailing gap shorter than min_gap runs to the end."""
        assert split_projection_profile(np.array([1, 1, 0]), 0, 2) == [(0, 3)]

    def test_long_trailing_gap_excluded(self):
        """Test that a trailing gap of min_gap closes the last segment early."""
        assert split_projection_profile(np.array([1, 1, 0]), 0, 1) == [(0, 2)]

    def test_min_value_threshold(self):
        """Test that values equal to min_value count as empty."""
        assert split_projection_profile(np.array([1, 2, 2, 1]), 1, 1) == [(1, 3)]

    def test_zero_min_gap_behaves_as_one(self):
        """Test that min_gap below 1 still requires a one-pixel gap."""
        values = np.array([1, 0, 1])
        assert split_projection_profile(values, 0, 0) == split_projection_profile(values, 0, 1)
        assert split_projection_profile(values, 0, 0) == [(0, 1), (2, 3)]

    def test_returns_plain_ints(self):
        """Test that segment bounds are Python ints."""
        segments = split_projection_profile(np.array([0, 3, 3, 0]), 0, 1)
        assert all(type(v) is int for segment in segments for v in segment)

    def test_gap_threshold_monotonic(self):
        """Test that raising min_gap never increases the segment count."""
        values = np.array([1] * 10 + [0] * 3 + [1] * 5 + [0] * 8 + [1] * 4 + [0] * 20 + [1] * 2)
        counts = [len(split_projection_profile(values, 0, gap)) for gap in range(1, 30)]
        assert counts == sorted(counts, reverse=True)
        assert counts[0] == 4
        assert counts[-1] == 1
