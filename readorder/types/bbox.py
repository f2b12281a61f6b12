"""BBox class for bounding box operations.

Internal format: (x0, y0, x1, y1) - xyxy corners, float pixel coordinates
JSON output: [x0, y0, x1, y1] - xyxy list (xywh available via to_xywh_list)
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from readorder.constants import NORMALIZED_BBOX_SCALE


@dataclass(frozen=True)
class BBox:
    """Pixel-space bounding box with float coordinates.

    Internal format: (x0, y0, x1, y1) - Top-left and bottom-right corners (xyxy)
    Origin: Top-left corner of the page (0, 0)
    Coordinates: Page pixel values, kept as floats (detectors emit sub-pixel boxes)

    Boxes are not validated: x1 < x0 or y1 < y0 yields a negative width or
    height, which the ordering code treats as degenerate.
    """

    x0: float
    y0: float
    x1: float
    y1: float

    # ==================== FROM Conversions (Format → BBox) ====================

    @classmethod
    def from_xyxy(cls, x0: float, y0: float, x1: float, y1: float) -> BBox:
        """Create from (x0, y0, x1, y1) corners.

        Example:
            >>> BBox.from_xyxy(100, 50, 300, 200)
            BBox(x0=100.0, y0=50.0, x1=300.0, y1=200.0)
        """
        return cls(x0=float(x0), y0=float(y0), x1=float(x1), y1=float(y1))

    @classmethod
    def from_xywh(cls, x: float, y: float, w: float, h: float) -> BBox:
        """Create from (x, y, width, height) format.

        Example:
            >>> BBox.from_xywh(100, 50, 200, 150).to_xyxy()
            (100.0, 50.0, 300.0, 200.0)
        """
        return cls(x0=float(x), y0=float(y), x1=float(x + w), y1=float(y + h))

    @classmethod
    def from_list(cls, coords: Sequence[float], coord_format: str = "xyxy") -> BBox:
        """Create from coordinate list.

        Args:
            coords: Coordinate list (at least 4 elements)
            coord_format: "xyxy" or "xywh"

        Returns:
            BBox object

        Raises:
            ValueError: If coord_format is unknown or fewer than 4 coordinates are given
        """
        if len(coords) < 4:  # noqa: PLR2004
            raise ValueError(f"Expected 4 coordinates, got {len(coords)}")
        if coord_format == "xyxy":
            return cls.from_xyxy(*coords[:4])
        elif coord_format == "xywh":
            return cls.from_xywh(*coords[:4])
        else:
            raise ValueError(f"Unknown bbox coord_format: {coord_format}. Use 'xyxy' or 'xywh'.")

    # ==================== TO Conversions (BBox → Format) ====================

    def to_xyxy(self) -> tuple[float, float, float, float]:
        """Convert to (x0, y0, x1, y1) tuple."""
        return (self.x0, self.y0, self.x1, self.y1)

    def to_list(self) -> list[float]:
        """Convert to [x0, y0, x1, y1] list."""
        return [self.x0, self.y0, self.x1, self.y1]

    def to_xywh_list(self) -> list[float]:
        """Convert to [x, y, w, h] list (for JSON serialization).

        Example:
            >>> BBox(100, 50, 300, 200).to_xywh_list()
            [100, 50, 200, 150]
        """
        return [self.x0, self.y0, self.x1 - self.x0, self.y1 - self.y0]

    def normalized(self, page_width: float, page_height: float, scale: int = NORMALIZED_BBOX_SCALE) -> list[int]:
        """Project onto a scale x scale grid relative to the page.

        Values are truncated toward zero, matching the content-list format.

        Example:
            >>> BBox(100, 50, 300, 200).normalized(1000, 500)
            [100, 100, 300, 400]
        """
        return [
            int(self.x0 / page_width * scale),
            int(self.y0 / page_height * scale),
            int(self.x1 / page_width * scale),
            int(self.y1 / page_height * scale),
        ]

    # ==================== Properties ====================

    @property
    def center(self) -> tuple[float, float]:
        """Get center point (cx, cy).

        Example:
            >>> BBox(100, 50, 300, 200).center
            (200.0, 125.0)
        """
        return ((self.x0 + self.x1) / 2, (self.y0 + self.y1) / 2)

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    @property
    def area(self) -> float:
        """Get bbox area (0 for degenerate boxes)."""
        return max(0.0, self.width) * max(0.0, self.height)

    @property
    def is_degenerate(self) -> bool:
        """True when the box has no positive width or height."""
        return self.width <= 0 or self.height <= 0

    # ==================== Geometric Operations ====================

    def translate(self, dx: float, dy: float) -> BBox:
        """Return a copy shifted by (dx, dy).

        Example:
            >>> BBox(0, 0, 10, 10).translate(5, 2)
            BBox(x0=5, y0=2, x1=15, y1=12)
        """
        return BBox(x0=self.x0 + dx, y0=self.y0 + dy, x1=self.x1 + dx, y1=self.y1 + dy)
