# No dependencies
from enum import Enum


class OutputFormat(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    HSV = "hsv"
    VEC = "vec"


# Function name on Color used to render each format
format_renderers = {
    OutputFormat.HEX: "to_hex_string",
    OutputFormat.RGB: "to_rgb_string",
    OutputFormat.HSL: "to_hsl_string",
    OutputFormat.HSV: "to_hsv_string",
    OutputFormat.VEC: "to_vec_string",
}

HUE_360 = 360
PERCENT = 100
MAX_U8 = 255
