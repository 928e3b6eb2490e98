import numpy as np
from numpy import ndarray as NDArray

from .numbers import feq, np_feq
from .to_hsv import hue_from_unit_rgb, np_hue_from_unit_rgb

## RGB to HSL conversions

def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert unit RGB to HSL.

    Achromatic colors (max ≈ min) short-circuit to hue 0 and saturation 0.
    Saturation divides by ``2 - max - min`` above half lightness and by
    ``max + min`` below it, so it never blows up near black or white.

    Args:
        r, g, b: channels in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue turn [0, 1), saturation, lightness)
    """
    mx = max(r, g, b)
    mn = min(r, g, b)
    l = (mx + mn) / 2.0

    if feq(mx, mn):
        return 0.0, 0.0, l

    d = mx - mn
    s = d / (2.0 - mx - mn) if l > 0.5 else d / (mx + mn)
    h = hue_from_unit_rgb(r, g, b, mx, d)
    return h, s, l


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert unit RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0, 1]

    Returns:
        hsl: array of shape (..., 3): (hue turn, saturation, lightness)
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    mx = np.maximum.reduce([r, g, b])
    mn = np.minimum.reduce([r, g, b])
    l = (mx + mn) / 2.0
    d = mx - mn

    achromatic = np_feq(mx, mn)
    upper = np.where(achromatic, 1.0, 2.0 - mx - mn)
    lower = np.where(achromatic, 1.0, mx + mn)
    s = np.where(l > 0.5, d / upper, d / lower)
    s = np.where(achromatic, 0.0, s)
    h = np_hue_from_unit_rgb(r, g, b, mx, d)
    return np.stack([h, s, l], axis=-1)

## HSV to HSL conversions

# https://en.wikipedia.org/wiki/HSL_and_HSV#Interconversion
def hsv_to_hsl(h: float, s: float, v: float) -> tuple[float, float, float]:
    l = v * (1.0 - s / 2.0)
    if feq(l, 0.0) or feq(l, 1.0):
        s_l = 0.0
    else:
        s_l = (v - l) / min(l, 1.0 - l)
    return h, s_l, l


def np_hsv_to_hsl(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)

    l = v * (1.0 - s / 2.0)
    poles = np_feq(l, 0.0) | np_feq(l, 1.0)
    denominator = np.where(poles, 1.0, np.minimum(l, 1.0 - l))
    s_l = np.where(poles, 0.0, (v - l) / denominator)
    return np.stack([h, np.broadcast_to(s_l, out_shape), np.broadcast_to(l, out_shape)], axis=-1)
