from __future__ import annotations

from numpy import ndarray as NDArray

from ..colors import Color
from .base import SliderSurface
from .raster import polar_to_rgba8


class HuePicker(SliderSurface):
    """Vertical hue slider: y maps to hue ``y / height``, x is ignored."""

    def apply(self, u: float, v: float, color: Color) -> None:
        color.set_hue(v)

    def gradient(self, color: Color, xx: NDArray, yy: NDArray) -> NDArray:
        _, s, t = color.polar
        return polar_to_rgba8(color.model, yy, s, t, 1.0, xx.shape)

    def position(self, color: Color) -> float:
        return color.hue
