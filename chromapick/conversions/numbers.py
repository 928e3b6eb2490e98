import math
import sys

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import clamp
from boundednumbers.functions import cyclic_wrap_float

from ..types.format_type import MAX_U8

# Tolerance used for every equality test against extremes and between channels.
EPSILON: float = sys.float_info.epsilon


def feq(x: float, y: float) -> bool:
    """Float equality within :data:`EPSILON`."""
    return abs(x - y) <= EPSILON


def np_feq(x: NDArray, y) -> NDArray:
    """Vectorized :func:`feq`."""
    return np.abs(np.asarray(x, dtype=float) - y) <= EPSILON


def wrap_hue(h: float) -> float:
    """
    Wrap a hue turn into ``[0, 1]``.

    Values already inside the closed interval are returned untouched so that a
    hue of exactly 1.0 (bottom of the hue slider) keeps its meaning.
    """
    if 0.0 <= h <= 1.0:
        return h
    return cyclic_wrap_float(h, 0.0, 1.0)


def np_wrap_hue(h: NDArray) -> NDArray:
    """Vectorized :func:`wrap_hue`."""
    h = np.asarray(h, dtype=float)
    return np.where((h >= 0.0) & (h <= 1.0), h, np.mod(h, 1.0))


def quantize_u8(x: float) -> int:
    """
    Quantize a unit float to an 8-bit channel.

    Rounds half up (``0.5 * 255 = 127.5`` becomes 128) and clamps to [0, 255].
    """
    return int(clamp(math.floor(x * MAX_U8 + 0.5), 0, MAX_U8))


def np_quantize_u8(x: NDArray) -> NDArray:
    """Vectorized :func:`quantize_u8`, returns ``uint8``."""
    scaled = np.floor(np.asarray(x, dtype=float) * MAX_U8 + 0.5)
    return np.clip(scaled, 0, MAX_U8).astype(np.uint8)
