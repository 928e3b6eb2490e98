"""Default values and configuration dataclasses for picker surfaces and sessions."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from .types.color_types import PolarModel
from .types.format_type import OutputFormat

# Indicator geometry (pixels)
DEFAULT_CIRCLE_RADIUS = 4.5
DEFAULT_BAR_HEIGHT = 5.0
DEFAULT_STROKE_WIDTH = 2.0
DEFAULT_INSET = 1.0
DEFAULT_CIRCLE_SHADOW_OFFSET = 1.0
DEFAULT_BAR_SHADOW_OFFSET = 0.5
DEFAULT_SHADOW_ALPHA = 0.2
DEFAULT_STROKE_RGBA = (255, 255, 255, 255)

# Surface outline
DEFAULT_OUTLINE_WIDTH = 1
DEFAULT_OUTLINE_ALPHA = 0.2

# Checkerboard behind translucent colors
DEFAULT_CHECKER_CELL = 8
DEFAULT_CHECKER_LIGHT = (255, 255, 255, 255)
DEFAULT_CHECKER_DARK = (230, 230, 230, 255)  # 0.9 grey

# Session layout
DEFAULT_COLOR_TEXT = "#123456"
DEFAULT_PADDING = 10
DEFAULT_PLANE_SIZE = 256
DEFAULT_SLIDER_WIDTH = 25
DEFAULT_CURRENT_SWATCH_HEIGHT = 50
DEFAULT_INITIAL_SWATCH_HEIGHT = 30

RGBA8 = Tuple[int, int, int, int]


@dataclass(frozen=True)
class IndicatorStyle:
    circle_radius: float = DEFAULT_CIRCLE_RADIUS
    bar_height: float = DEFAULT_BAR_HEIGHT
    stroke_width: float = DEFAULT_STROKE_WIDTH
    inset: float = DEFAULT_INSET
    circle_shadow_offset: float = DEFAULT_CIRCLE_SHADOW_OFFSET
    bar_shadow_offset: float = DEFAULT_BAR_SHADOW_OFFSET
    shadow_alpha: float = DEFAULT_SHADOW_ALPHA
    stroke_rgba: RGBA8 = DEFAULT_STROKE_RGBA
    outline_width: int = DEFAULT_OUTLINE_WIDTH
    outline_alpha: float = DEFAULT_OUTLINE_ALPHA

    def __post_init__(self):
        if self.stroke_width <= 0:
            raise ValueError(f"stroke_width must be positive, got {self.stroke_width}")
        if not 0.0 <= self.shadow_alpha <= 1.0:
            raise ValueError(f"shadow_alpha must be within [0, 1], got {self.shadow_alpha}")


@dataclass(frozen=True)
class CheckerStyle:
    cell_size: int = DEFAULT_CHECKER_CELL
    light: RGBA8 = DEFAULT_CHECKER_LIGHT
    dark: RGBA8 = DEFAULT_CHECKER_DARK

    def __post_init__(self):
        if self.cell_size < 1:
            raise ValueError(f"cell_size must be at least 1, got {self.cell_size}")


@dataclass(frozen=True)
class PickerConfig:
    """
    Everything a PickerSession needs besides the color itself.

    Attributes:
        default_color: Color text used when a session is created without a color
        model: Polar model the plane surface edits (HSV: value, HSL: lightness)
        output_format: Format used by ``PickerSession.output()`` when none is given
        padding: Gap between surfaces in ``PickerSession.layout()``
        plane_size: Side of the square plane surface
        slider_width: Width of the hue and alpha sliders
        current_swatch_height: Height of the current color swatch
        initial_swatch_height: Height of the initial color swatch
    """
    default_color: str = DEFAULT_COLOR_TEXT
    model: PolarModel = PolarModel.HSV
    output_format: OutputFormat = OutputFormat.HEX
    padding: int = DEFAULT_PADDING
    plane_size: int = DEFAULT_PLANE_SIZE
    slider_width: int = DEFAULT_SLIDER_WIDTH
    current_swatch_height: int = DEFAULT_CURRENT_SWATCH_HEIGHT
    initial_swatch_height: int = DEFAULT_INITIAL_SWATCH_HEIGHT
    indicator: IndicatorStyle = field(default_factory=IndicatorStyle)
    checker: CheckerStyle = field(default_factory=CheckerStyle)

    def __post_init__(self):
        object.__setattr__(self, "model", PolarModel(self.model))
        object.__setattr__(self, "output_format", OutputFormat(self.output_format))
        for name in ("plane_size", "slider_width", "current_swatch_height", "initial_swatch_height"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be at least 1, got {getattr(self, name)}")
        if self.padding < 0:
            raise ValueError(f"padding must be non-negative, got {self.padding}")
