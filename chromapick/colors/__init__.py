"""
Chromapick Color
================

A single mutable ``Color`` value holding unit RGB, one authoritative polar
triple (HSV or HSL) and alpha. Setters change one polar component and
recompute RGB from the full polar triple, so the two never drift apart.

Usage
-----
>>> from chromapick.colors import Color, parse
>>> from chromapick.types.color_types import PolarModel
>>>
>>> color = Color.from_hsv(30 / 360, 1.0, 1.0)
>>> color.rgb
(1.0, 0.5, 0.0)
>>> color.to_pixel()
(255, 128, 0, 255)
>>> color.to_hex_string()
'#ff8000'
>>>
>>> color.set_alpha(0.5)
>>> color.to_hex_string()
'#ff800080'
>>>
>>> hsl = parse("hsl(120deg 100% 25%)", PolarModel.HSL)
>>> hsl.set_lightness(0.5)
>>> hsl.to_rgb_string()
'rgb(0, 255, 0)'

Output Formats
--------------
    to_hex_string()  -> "#rrggbb" / "#rrggbbaa"
    to_rgb_string()  -> "rgb(r, g, b)" / "rgba(r, g, b, a%)"
    to_hsl_string()  -> "hsl(hdeg, s%, l%)" / "hsla(..., a%)"
    to_hsv_string()  -> "hsv(hdeg, s%, v%)" / "hsva(..., a%)"
    to_vec_string()  -> "vec3(r, g, b)" / "vec4(r, g, b, a)"
    format(OutputFormat.X)

Alpha is omitted from every format when it equals 1.0 within tolerance.
"""

from .color_base import Color
from .color import parse, format_color


__all__ = ['Color', 'parse', 'format_color']
