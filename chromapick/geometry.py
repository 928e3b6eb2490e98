"""Rectangle and circle helpers used to place picker indicators."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from boundednumbers import clamp as clamp_scalar


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by two corners, ``x0 <= x1`` and ``y0 <= y1``."""
    x0: float
    y0: float
    x1: float
    y1: float

    @classmethod
    def from_size(cls, width: float, height: float, x: float = 0.0, y: float = 0.0) -> Rect:
        return cls(x, y, x + width, y + height)

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    @property
    def bounding_box(self) -> Tuple[float, float, float, float]:
        return self.x0, self.y0, self.x1, self.y1

    def contains(self, other: Rect | Circle) -> bool:
        """True if ``other`` lies fully inside this rectangle (edges included)."""
        x0, y0, x1, y1 = other.bounding_box
        return self.x0 <= x0 and self.y0 <= y0 and x1 <= self.x1 and y1 <= self.y1

    def translate(self, dx: float, dy: float) -> Rect:
        return Rect(self.x0 + dx, self.y0 + dy, self.x1 + dx, self.y1 + dy)

    def shrink(self, kx: float, ky: float | None = None) -> Rect:
        """
        Inset every side symmetrically.

        Args:
            kx: Horizontal inset applied to both the left and right side
            ky: Vertical inset applied to top and bottom, defaults to ``kx``
        """
        ky = kx if ky is None else ky
        return Rect(self.x0 + kx, self.y0 + ky, self.x1 - kx, self.y1 - ky)

    def clamp(self, bounds: Rect) -> Rect:
        """Move this rectangle inside ``bounds`` without changing its size."""
        w, h = self.width, self.height
        x0 = min(max(self.x0, bounds.x0), bounds.x1 - w)
        y0 = min(max(self.y0, bounds.y0), bounds.y1 - h)
        return Rect(x0, y0, x0 + w, y0 + h)


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    radius: float

    @property
    def bounding_box(self) -> Tuple[float, float, float, float]:
        r = self.radius
        return self.cx - r, self.cy - r, self.cx + r, self.cy + r

    def translate(self, dx: float, dy: float) -> Circle:
        return Circle(self.cx + dx, self.cy + dy, self.radius)

    def shrink(self, k: float) -> Circle:
        return Circle(self.cx, self.cy, self.radius - k)

    def clamp(self, bounds: Rect) -> Circle:
        """Move the center so the whole disc lies inside ``bounds``; the radius is kept."""
        r = self.radius
        cx = clamp_scalar(self.cx, bounds.x0 + r, bounds.x1 - r)
        cy = clamp_scalar(self.cy, bounds.y0 + r, bounds.y1 - r)
        return Circle(cx, cy, r)
