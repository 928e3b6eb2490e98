"""Chromapick: color model engine and pointer-driven color picker surfaces."""

__version__ = "0.1.0"

from .types.color_types import PolarModel
from .types.format_type import OutputFormat
from .errors import ColorParseError
from .colors import Color, parse
from .conversions import (
    hsv_to_unit_rgb,
    hsl_to_unit_rgb,
    unit_rgb_to_hsv,
    unit_rgb_to_hsl,
    hsv_to_hsl,
    hsl_to_hsv,
    convert,
    np_convert,
)
from .geometry import Rect, Circle
from .pickers import (
    Cursor,
    PointerState,
    PickerSurface,
    SaturationPlanePicker,
    HuePicker,
    AlphaPicker,
)
from .config import PickerConfig, IndicatorStyle, CheckerStyle
from .session import PickerSession, SessionLayout

__all__ = [
    "__version__",
    # Color
    "Color",
    "PolarModel",
    "OutputFormat",
    "parse",
    "ColorParseError",
    # Conversions
    "hsv_to_unit_rgb",
    "hsl_to_unit_rgb",
    "unit_rgb_to_hsv",
    "unit_rgb_to_hsl",
    "hsv_to_hsl",
    "hsl_to_hsv",
    "convert",
    "np_convert",
    # Geometry
    "Rect",
    "Circle",
    # Surfaces
    "Cursor",
    "PointerState",
    "PickerSurface",
    "SaturationPlanePicker",
    "HuePicker",
    "AlphaPicker",
    # Session
    "PickerConfig",
    "IndicatorStyle",
    "CheckerStyle",
    "PickerSession",
    "SessionLayout",
]
