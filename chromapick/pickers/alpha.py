from __future__ import annotations

from numpy import ndarray as NDArray

from ..colors import Color
from .base import SliderSurface
from .raster import polar_to_rgba8


class AlphaPicker(SliderSurface):
    """Vertical alpha slider: opaque at the top, ``alpha = 1 - y / height``."""

    def apply(self, u: float, v: float, color: Color) -> None:
        color.set_alpha(1.0 - v)

    def gradient(self, color: Color, xx: NDArray, yy: NDArray) -> NDArray:
        h, s, t = color.polar
        return polar_to_rgba8(color.model, h, s, t, 1.0 - yy, xx.shape)

    def position(self, color: Color) -> float:
        return 1.0 - color.alpha
