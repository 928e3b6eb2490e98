from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar, Optional, Tuple

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import clamp
from PIL import Image

from ..colors import Color
from ..config import IndicatorStyle
from ..geometry import Circle, Rect
from .raster import draw_indicator, draw_outline, sample_grid, stroke_extent, to_image

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


class PointerState(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class Cursor(str, Enum):
    CROSSHAIR = "crosshair"
    OPEN_HAND = "open_hand"


class PickerSurface(ABC):
    """
    A rectangular surface that maps pointer positions onto color components
    and renders the matching gradient with a position indicator.

    Surfaces keep no color of their own: every call receives the shared
    ``Color`` to read or mutate. Between a pointer down and the next pointer
    up the surface is DRAGGING and pointer moves keep mutating the color.
    """
    hover_cursor: ClassVar[Cursor] = Cursor.OPEN_HAND

    def __init__(self, style: Optional[IndicatorStyle] = None):
        self.style = style if style is not None else IndicatorStyle()
        self._width = 0.0
        self._height = 0.0
        self.state = PointerState.IDLE
        self.cursor: Optional[Cursor] = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, state={self.state.value})"

    # ------------------ EXTENT ------------------
    def resize(self, width: float, height: float) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Surface extent must be non-negative, got {width}x{height}")
        self._width = float(width)
        self._height = float(height)
        logger.debug("%s resized to %sx%s", type(self).__name__, width, height)

    @property
    def size(self) -> Tuple[float, float]:
        return self._width, self._height

    @property
    def pixel_size(self) -> Tuple[int, int]:
        """Integer buffer dimensions, the extent floored."""
        return math.floor(self._width), math.floor(self._height)

    @property
    def bounds(self) -> Rect:
        w, h = self.pixel_size
        return Rect.from_size(w, h)

    @property
    def is_dragging(self) -> bool:
        return self.state is PointerState.DRAGGING

    def normalize(self, pos: Point) -> Tuple[float, float]:
        """
        Clamp ``pos`` into the extent and divide by it.

        Raises:
            RuntimeError: If no positive extent has been recorded yet
        """
        if self._width <= 0 or self._height <= 0:
            raise RuntimeError(
                f"{type(self).__name__} has no extent yet; call resize() before sending pointer events"
            )
        x, y = pos
        return clamp(x, 0.0, self._width) / self._width, clamp(y, 0.0, self._height) / self._height

    # ------------------ POINTER STATE MACHINE ------------------
    @abstractmethod
    def apply(self, u: float, v: float, color: Color) -> None:
        """Write the normalized position ``(u, v)`` into ``color``."""

    def on_pointer_down(self, pos: Point, color: Color) -> bool:
        u, v = self.normalize(pos)
        self.apply(u, v, color)
        if self.state is PointerState.IDLE:
            logger.debug("%s: idle -> dragging", type(self).__name__)
        self.state = PointerState.DRAGGING
        return True

    def on_pointer_move(self, pos: Point, color: Color) -> bool:
        self.cursor = self.hover_cursor
        if self.state is not PointerState.DRAGGING:
            return False
        self.apply(*self.normalize(pos), color)
        return True

    def on_pointer_up(self, pos: Point, color: Color) -> bool:
        if self.state is PointerState.DRAGGING:
            logger.debug("%s: dragging -> idle", type(self).__name__)
        self.state = PointerState.IDLE
        return False

    # ------------------ RENDERING ------------------
    @abstractmethod
    def gradient(self, color: Color, xx: NDArray, yy: NDArray) -> NDArray:
        """(H, W, 4) uint8 gradient sampled at normalized coordinates ``xx``, ``yy``."""

    @abstractmethod
    def indicator(self, color: Color) -> Rect | Circle:
        """Stroke centerline of the position indicator, clamped inside the surface."""

    @property
    @abstractmethod
    def shadow_offset(self) -> float:
        ...

    def indicator_extent(self, color: Color) -> Rect:
        """Outer pixel bounds of the stroked indicator."""
        return stroke_extent(self.indicator(color), self.style.stroke_width)

    def render_gradient(self, color: Color) -> NDArray:
        w, h = self.pixel_size
        if w == 0 or h == 0:
            return np.zeros((h, w, 4), dtype=np.uint8)
        xx, yy = sample_grid(w, h)
        return self.gradient(color, xx, yy)

    def render_image(self, color: Color) -> Image.Image:
        """
        Gradient, outline and indicator as a PIL RGBA image.

        Raises:
            RuntimeError: If the surface has no pixel extent
        """
        w, h = self.pixel_size
        if w == 0 or h == 0:
            raise RuntimeError(f"{type(self).__name__} has no pixel extent to render")
        image = draw_outline(to_image(self.render_gradient(color)), self.style)
        return draw_indicator(image, self.indicator(color), self.style, self.shadow_offset)

    def render(self, color: Color) -> bytes:
        """Tightly packed RGBA8 rows, top to bottom: ``width * height * 4`` bytes."""
        w, h = self.pixel_size
        if w == 0 or h == 0:
            return b""
        return self.render_image(color).tobytes()


class SliderSurface(PickerSurface):
    """A vertical slider whose indicator is a horizontal bar."""
    hover_cursor = Cursor.OPEN_HAND

    @property
    def shadow_offset(self) -> float:
        return self.style.bar_shadow_offset

    @abstractmethod
    def position(self, color: Color) -> float:
        """Normalized vertical position of the bar for ``color``."""

    def indicator(self, color: Color) -> Rect:
        w, h = self.pixel_size
        style = self.style
        y = self.position(color) * h
        half_stroke = style.stroke_width / 2
        return (
            Rect(0.0, y, w, y + style.bar_height)
            .translate(0.0, -style.bar_height / 2)
            .shrink(style.inset, 0.0)
            .shrink(half_stroke, half_stroke)
            .clamp(self.bounds.shrink(half_stroke))
        )
