"""
Chromapick Color Space Conversions
==================================

Scalar and vectorized (numpy) conversions between RGB, HSV and HSL. Every
component is a unit float; hue is a turn in [0, 1) rather than degrees.

Conversion Functions
--------------------

RGB → HSV:
    unit_rgb_to_hsv(r, g, b)
    np_unit_rgb_to_hsv(r, g, b)

RGB → HSL:
    unit_rgb_to_hsl(r, g, b)
    np_unit_rgb_to_hsl(r, g, b)

HSV → RGB:
    hsv_to_unit_rgb(h, s, v)
        Sector boundaries are inclusive on the upper side (h6 <= 1.0, ...)
    np_hsv_to_unit_rgb(h, s, v)

HSL → RGB:
    hsl_to_unit_rgb(h, s, l)
    np_hsl_to_unit_rgb(h, s, l)

HSV ↔ HSL:
    hsv_to_hsl(h, s, v), hsl_to_hsv(h, s, l)
    np_hsv_to_hsl(h, s, v), np_hsl_to_hsv(h, s, l)

High-Level API
--------------
    convert(color, from_space, to_space)
    np_convert(color, from_space, to_space)

Numbers
-------
    EPSILON, feq(x, y)
        Float equality used for every comparison against extremes
    quantize_u8(x), np_quantize_u8(x)
        Round-half-up quantization to 8-bit channels

Examples
--------
>>> from chromapick.conversions import hsv_to_unit_rgb, unit_rgb_to_hsv
>>> hsv_to_unit_rgb(30 / 360, 1.0, 1.0)
(1.0, 0.5, 0.0)
>>> unit_rgb_to_hsv(1.0, 0.5, 0.0)
(0.08333333333333333, 1.0, 1.0)
"""

# RGB → HSV conversions
from .to_hsv import (
    unit_rgb_to_hsv,
    np_unit_rgb_to_hsv,
    hue_from_unit_rgb,
)

# RGB → HSL conversions
from .to_hsl import (
    unit_rgb_to_hsl,
    np_unit_rgb_to_hsl,
)

# HSV / HSL → RGB conversions
from .to_rgb import (
    hsv_to_unit_rgb,
    np_hsv_to_unit_rgb,
    hsl_to_unit_rgb,
    np_hsl_to_unit_rgb,
    hue_to_rgb,
)

# HSV ↔ HSL conversions
from .to_hsv import hsl_to_hsv, np_hsl_to_hsv
from .to_hsl import hsv_to_hsl, np_hsv_to_hsl

# High-level API
from .wrapper import convert, np_convert

from .numbers import EPSILON, feq, np_feq, quantize_u8, np_quantize_u8, wrap_hue

__all__ = [
    # RGB → HSV
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',
    'hue_from_unit_rgb',

    # RGB → HSL
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',

    # HSV / HSL → RGB
    'hsv_to_unit_rgb',
    'np_hsv_to_unit_rgb',
    'hsl_to_unit_rgb',
    'np_hsl_to_unit_rgb',
    'hue_to_rgb',

    # HSV ↔ HSL
    'hsv_to_hsl',
    'hsl_to_hsv',
    'np_hsv_to_hsl',
    'np_hsl_to_hsv',

    # High-level API
    'convert',
    'np_convert',

    # Numbers
    'EPSILON',
    'feq',
    'np_feq',
    'quantize_u8',
    'np_quantize_u8',
    'wrap_hue',
]
