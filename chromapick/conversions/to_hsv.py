import numpy as np
from numpy import ndarray as NDArray

from .numbers import feq, np_feq


def hue_from_unit_rgb(r: float, g: float, b: float, maximum: float, chroma: float) -> float:
    """
    Hue turn of an RGB triple given its precomputed maximum and chroma.

    The dominant channel is picked with tolerance equality so rounding noise
    never selects the wrong branch.
    """
    if feq(chroma, 0.0):
        return 0.0
    if feq(maximum, r):
        h = ((g - b) / chroma) % 6.0
    elif feq(maximum, g):
        h = (b - r) / chroma + 2.0
    else:
        h = (r - g) / chroma + 4.0
    return h / 6.0


def np_hue_from_unit_rgb(r: NDArray, g: NDArray, b: NDArray, maximum: NDArray, chroma: NDArray) -> NDArray:
    """Vectorized :func:`hue_from_unit_rgb`."""
    achromatic = np_feq(chroma, 0.0)
    safe_chroma = np.where(achromatic, 1.0, chroma)

    h = np.select(
        [np_feq(maximum, r), np_feq(maximum, g)],
        [np.mod((g - b) / safe_chroma, 6.0), (b - r) / safe_chroma + 2.0],
        default=(r - g) / safe_chroma + 4.0,
    )
    return np.where(achromatic, 0.0, h / 6.0)

## RGB to HSV conversions

# https://en.wikipedia.org/wiki/HSL_and_HSV#From_RGB
def unit_rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert unit RGB to HSV.

    Args:
        r, g, b: channels in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue turn [0, 1), saturation, value)
    """
    v = max(r, g, b)
    c = v - min(r, g, b)
    h = hue_from_unit_rgb(r, g, b, v, c)
    s = 0.0 if feq(v, 0.0) else c / v
    return h, s, v


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert unit RGB to HSV.

    Args:
        r, g, b: array-like or scalar, [0, 1]

    Returns:
        hsv: array of shape (..., 3): (hue turn, saturation, value)
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    v = np.maximum.reduce([r, g, b])
    c = v - np.minimum.reduce([r, g, b])
    h = np_hue_from_unit_rgb(r, g, b, v, c)

    black = np_feq(v, 0.0)
    s = np.where(black, 0.0, c / np.where(black, 1.0, v))
    return np.stack([h, s, v], axis=-1)

## HSL to HSV conversions

# https://en.wikipedia.org/wiki/HSL_and_HSV#HSL_to_HSV
def hsl_to_hsv(h: float, s: float, l: float) -> tuple[float, float, float]:
    v = l + s * min(l, 1.0 - l)
    s_v = 0.0 if feq(v, 0.0) else 2.0 * (1.0 - l / v)
    return h, s_v, v


def np_hsl_to_hsv(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)

    v = l + s * np.minimum(l, 1.0 - l)
    black = np_feq(v, 0.0)
    s_v = np.where(black, 0.0, 2.0 * (1.0 - l / np.where(black, 1.0, v)))
    return np.stack([h, np.broadcast_to(s_v, out_shape), np.broadcast_to(v, out_shape)], axis=-1)
