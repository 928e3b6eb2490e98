from __future__ import annotations

from typing import Optional

from numpy import ndarray as NDArray

from ..colors import Color
from ..config import IndicatorStyle
from ..geometry import Circle
from ..types.color_types import PolarModel
from .base import Cursor, PickerSurface
from .raster import polar_to_rgba8


class SaturationPlanePicker(PickerSurface):
    """
    Two-dimensional saturation plane at the color's hue.

    x maps to saturation ``x / width``. y maps to value ``1 - y / height``
    for the HSV variant, or to lightness ``y / height`` for the HSL variant.
    The color being edited must use the same polar model as the plane.
    """
    hover_cursor = Cursor.CROSSHAIR

    def __init__(self, model: PolarModel | str = PolarModel.HSV, style: Optional[IndicatorStyle] = None):
        super().__init__(style)
        self.model = PolarModel(model)

    def __repr__(self) -> str:
        return f"SaturationPlanePicker(model={self.model.value}, size={self.size}, state={self.state.value})"

    def _third_from_v(self, v):
        return 1.0 - v if self.model is PolarModel.HSV else v

    def apply(self, u: float, v: float, color: Color) -> None:
        if color.model is not self.model:
            raise ValueError(
                f"{self.model.value.upper()} plane cannot edit a {color.model.value.upper()} color"
            )
        color.set_saturation(u)
        color.set_third(self._third_from_v(v))

    def gradient(self, color: Color, xx: NDArray, yy: NDArray) -> NDArray:
        return polar_to_rgba8(self.model, color.hue, xx, self._third_from_v(yy), 1.0, xx.shape)

    @property
    def shadow_offset(self) -> float:
        return self.style.circle_shadow_offset

    def indicator(self, color: Color) -> Circle:
        _, s, t = color.hsv if self.model is PolarModel.HSV else color.hsl
        w, h = self.pixel_size
        style = self.style
        half_stroke = style.stroke_width / 2
        inner = self.bounds.shrink(style.inset).shrink(half_stroke)
        # the third component maps back through the same flip as the pointer
        circle = Circle(s * w, self._third_from_v(t) * h, style.circle_radius).shrink(half_stroke)
        fit = max(min(inner.width, inner.height) / 2, 0.0)
        if circle.radius > fit:
            circle = circle.shrink(circle.radius - fit)
        return circle.clamp(inner)
