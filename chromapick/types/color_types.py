from __future__ import annotations
from enum import Enum
from typing import Literal, Tuple

UnitTriple = Tuple[float, float, float]
Pixel = Tuple[int, int, int, int]
ColorSpace = Literal["rgb", "hsv", "hsl"]


class PolarModel(str, Enum):
    """Polar color model that is authoritative inside a :class:`Color`."""
    HSV = "hsv"
    HSL = "hsl"

    @property
    def third_component(self) -> str:
        """Name of the value-or-lightness component for this model."""
        return "value" if self is PolarModel.HSV else "lightness"
