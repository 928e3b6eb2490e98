"""Headless picker state: one shared color, three surfaces and pointer capture."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from numpy import ndarray as NDArray

from .colors import Color
from .config import PickerConfig
from .geometry import Rect
from .pickers import AlphaPicker, HuePicker, PickerSurface, SaturationPlanePicker
from .pickers.base import Point
from .pickers.raster import checkerboard, composite_over
from .types.format_type import OutputFormat

logger = logging.getLogger(__name__)

SURFACE_NAMES = ("plane", "hue", "alpha")


@dataclass(frozen=True)
class SessionLayout:
    """Placement of each surface and swatch within the picker window."""
    plane: Rect
    hue: Rect
    alpha: Rect
    current_swatch: Rect
    initial_swatch: Rect

    @property
    def size(self) -> Tuple[float, float]:
        boxes = (self.plane, self.hue, self.alpha, self.current_swatch, self.initial_swatch)
        return max(b.x1 for b in boxes), max(b.y1 for b in boxes)


class PickerSession:
    """
    The picker's application state without any window.

    ``initial_color`` is a frozen copy of the color the session started with;
    ``current_color`` is the color the surfaces edit. Pointer events are
    routed the way a toolkit routes captured mouse input: after a pointer
    down on one surface, moves and the release go to that surface until the
    release.

    Args:
        color: Starting color, parsed from ``config.default_color`` when None
        config: Sizing, model and styling, defaults to ``PickerConfig()``
    """

    def __init__(self, color: Optional[Color] = None, *, config: Optional[PickerConfig] = None):
        self.config = config if config is not None else PickerConfig()
        if color is None:
            color = Color.parse(self.config.default_color, self.config.model)
        elif color.model is not self.config.model:
            color = color.with_model(self.config.model)
        self._initial = color.copy()
        self.current_color = color.copy()

        style = self.config.indicator
        self.surfaces: Dict[str, PickerSurface] = {
            "plane": SaturationPlanePicker(self.config.model, style),
            "hue": HuePicker(style),
            "alpha": AlphaPicker(style),
        }
        self.captured: Optional[str] = None
        self.layout()

    def __repr__(self) -> str:
        return (
            f"PickerSession(initial={self._initial.to_hex_string()}, "
            f"current={self.current_color.to_hex_string()}, captured={self.captured})"
        )

    @property
    def initial_color(self) -> Color:
        """A copy of the starting color; the stored one never changes."""
        return self._initial.copy()

    def surface(self, name: str) -> PickerSurface:
        try:
            return self.surfaces[name]
        except KeyError:
            raise ValueError(f"Unknown surface {name!r}, expected one of {SURFACE_NAMES}") from None

    def layout(self) -> SessionLayout:
        """
        Size every surface from the config and return where each one sits.

        The plane is a square at the top left, followed to the right by the
        hue and alpha sliders at the plane's height. The current swatch spans
        the row below, the initial swatch the row under that.
        """
        cfg = self.config
        pad = cfg.padding
        side = cfg.plane_size

        plane = Rect.from_size(side, side, pad, pad)
        hue = Rect.from_size(cfg.slider_width, side, plane.x1 + pad, pad)
        alpha = Rect.from_size(cfg.slider_width, side, hue.x1 + pad, pad)
        row_width = alpha.x1 - pad
        current = Rect.from_size(row_width, cfg.current_swatch_height, pad, plane.y1 + pad)
        initial = Rect.from_size(row_width, cfg.initial_swatch_height, pad, current.y1)

        for name, rect in (("plane", plane), ("hue", hue), ("alpha", alpha)):
            self.surfaces[name].resize(rect.width, rect.height)
        return SessionLayout(plane, hue, alpha, current, initial)

    # ------------------ POINTER ROUTING ------------------
    def pointer_down(self, name: str, pos: Point) -> bool:
        """Capture ``name`` and let it mutate the current color."""
        surface = self.surface(name)
        if self.captured is not None and self.captured != name:
            self.surfaces[self.captured].on_pointer_up(pos, self.current_color)
            self.captured = None
        changed = surface.on_pointer_down(pos, self.current_color)
        self.captured = name
        return changed

    def pointer_move(self, pos: Point, name: Optional[str] = None) -> bool:
        """
        Forward a move to the captured surface.

        Without a capture the move only updates the cursor hint of the
        hovered surface ``name``, if given, and never changes the color.
        """
        if self.captured is not None:
            return self.surfaces[self.captured].on_pointer_move(pos, self.current_color)
        if name is not None:
            self.surface(name).on_pointer_move(pos, self.current_color)
        return False

    def pointer_up(self, pos: Point) -> bool:
        if self.captured is None:
            return False
        self.surfaces[self.captured].on_pointer_up(pos, self.current_color)
        self.captured = None
        return False

    # ------------------ STATE ------------------
    def reset(self) -> None:
        """Restore the current color from the initial color."""
        logger.debug("Resetting %s to %s", self.current_color.to_hex_string(), self._initial.to_hex_string())
        self.current_color = self._initial.copy()

    def output(self, fmt: Optional[OutputFormat | str] = None) -> str:
        """The current color rendered in ``fmt`` (the configured format by default)."""
        return self.current_color.format(fmt if fmt is not None else self.config.output_format)

    def render(self, name: str) -> bytes:
        return self.surface(name).render(self.current_color)

    def swatch(self, width: int, height: int, which: str = "current") -> NDArray:
        """
        (H, W, 4) uint8 swatch of the current or initial color over a checkerboard.

        Raises:
            ValueError: If ``which`` is neither "current" nor "initial"
        """
        if which == "current":
            color = self.current_color
        elif which == "initial":
            color = self._initial
        else:
            raise ValueError(f"which must be 'current' or 'initial', got {which!r}")
        background = checkerboard(width, height, self.config.checker)
        return composite_over(color.to_pixel(), background)
