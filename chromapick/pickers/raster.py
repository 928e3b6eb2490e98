"""
Raster helpers shared by the picker surfaces: sample grids, RGBA8 buffers,
indicator strokes and the checkerboard drawn behind translucent colors.
"""
from __future__ import annotations

from typing import Tuple

import numpy as np
from numpy import ndarray as NDArray
from PIL import Image, ImageDraw

from ..config import CheckerStyle, IndicatorStyle
from ..conversions import np_quantize_u8, np_hsv_to_unit_rgb, np_hsl_to_unit_rgb
from ..geometry import Circle, Rect
from ..types.color_types import PolarModel
from ..types.format_type import MAX_U8

NP_POLAR_TO_RGB = {
    PolarModel.HSV: np_hsv_to_unit_rgb,
    PolarModel.HSL: np_hsl_to_unit_rgb,
}


def sample_grid(width: int, height: int) -> Tuple[NDArray, NDArray]:
    """
    Normalized pixel coordinates ``x / width`` and ``y / height``.

    Returns:
        (xx, yy) float arrays of shape (height, width)
    """
    x_norm = np.arange(width, dtype=float) / width if width else np.zeros(0)
    y_norm = np.arange(height, dtype=float) / height if height else np.zeros(0)
    return np.meshgrid(x_norm, y_norm)


def polar_to_rgba8(model: PolarModel, h, s, t, alpha, shape: Tuple[int, int]) -> NDArray:
    """
    Quantize a polar gradient to an (H, W, 4) uint8 array.

    Components may be scalars or arrays broadcastable to ``shape``.
    """
    h, s, t, alpha = (np.broadcast_to(np.asarray(c, dtype=float), shape) for c in (h, s, t, alpha))
    rgb = NP_POLAR_TO_RGB[PolarModel(model)](h, s, t)
    return np_quantize_u8(np.concatenate([rgb, alpha[..., None]], axis=-1))


def to_image(rgba: NDArray) -> Image.Image:
    return Image.fromarray(np.ascontiguousarray(rgba, dtype=np.uint8))


def stroke_extent(shape: Rect | Circle, stroke_width: float) -> Rect:
    """Outer bounds of ``shape`` once stroked with a line of ``stroke_width``."""
    x0, y0, x1, y1 = shape.bounding_box
    half = stroke_width / 2
    return Rect(x0 - half, y0 - half, x1 + half, y1 + half)


def _stroke(draw: ImageDraw.ImageDraw, shape: Rect | Circle, width: float, fill) -> None:
    # PIL strokes inward from the box, so pass the outer extent
    extent = stroke_extent(shape, width)
    line = max(1, int(round(width)))
    if isinstance(shape, Circle):
        draw.ellipse(extent.bounding_box, outline=fill, width=line)
    else:
        draw.rounded_rectangle(extent.bounding_box, radius=width / 2, outline=fill, width=line)


def draw_indicator(image: Image.Image, shape: Rect | Circle, style: IndicatorStyle, shadow_offset: float) -> Image.Image:
    """
    Stroke ``shape`` in the indicator color over a soft black shadow shifted down.

    Returns:
        New RGBA image; ``image`` is left untouched
    """
    shadow_layer = Image.new("RGBA", image.size, (0, 0, 0, 0))
    shadow_fill = (0, 0, 0, int(round(style.shadow_alpha * MAX_U8)))
    _stroke(ImageDraw.Draw(shadow_layer), shape.translate(0.0, shadow_offset), style.stroke_width, shadow_fill)
    composed = Image.alpha_composite(image, shadow_layer)

    stroke_layer = Image.new("RGBA", image.size, (0, 0, 0, 0))
    _stroke(ImageDraw.Draw(stroke_layer), shape, style.stroke_width, tuple(style.stroke_rgba))
    return Image.alpha_composite(composed, stroke_layer)


def draw_outline(image: Image.Image, style: IndicatorStyle) -> Image.Image:
    """Faint rounded border around the whole surface."""
    if style.outline_width <= 0:
        return image
    layer = Image.new("RGBA", image.size, (0, 0, 0, 0))
    fill = (0, 0, 0, int(round(style.outline_alpha * MAX_U8)))
    w, h = image.size
    ImageDraw.Draw(layer).rounded_rectangle(
        (0, 0, w - 1, h - 1), radius=1, outline=fill, width=style.outline_width
    )
    return Image.alpha_composite(image, layer)


def checkerboard(width: int, height: int, style: CheckerStyle) -> NDArray:
    """(H, W, 4) uint8 checkerboard starting with the light tile at the origin."""
    yy, xx = np.indices((height, width))
    dark = ((xx // style.cell_size) + (yy // style.cell_size)) % 2 == 1
    board = np.empty((height, width, 4), dtype=np.uint8)
    board[...] = np.asarray(style.light, dtype=np.uint8)
    board[dark] = np.asarray(style.dark, dtype=np.uint8)
    return board


def composite_over(rgba: Tuple[int, int, int, int], background: NDArray) -> NDArray:
    """Source-over composite of a single RGBA8 color onto an opaque background."""
    fg = np.asarray(rgba, dtype=float) / MAX_U8
    bg = background.astype(float) / MAX_U8
    alpha = fg[3]
    out_rgb = fg[:3] * alpha + bg[..., :3] * (1.0 - alpha)
    out_a = alpha + bg[..., 3] * (1.0 - alpha)
    return np_quantize_u8(np.concatenate([out_rgb, out_a[..., None]], axis=-1))
