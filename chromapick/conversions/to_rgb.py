import numpy as np
from numpy import ndarray as NDArray

from .numbers import feq, np_feq, wrap_hue, np_wrap_hue

ONE_THIRD = 1.0 / 3.0
ONE_SIXTH = 1.0 / 6.0
TWO_THIRDS = 2.0 / 3.0

## HSV to RGB conversions

# https://en.wikipedia.org/wiki/HSL_and_HSV#HSV_to_RGB
def hsv_to_unit_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to unit RGB.

    Sector boundaries are inclusive on the upper side: a scaled hue of exactly
    1.0 belongs to the red-yellow sector, 2.0 to yellow-green, and so on.

    Args:
        h: Hue as a turn in [0, 1)
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = wrap_hue(h)
    c = v * s
    h6 = h * 6.0
    x = c * (1.0 - abs(h6 % 2.0 - 1.0))

    if h6 <= 1.0:
        r, g, b = c, x, 0.0
    elif h6 <= 2.0:
        r, g, b = x, c, 0.0
    elif h6 <= 3.0:
        r, g, b = 0.0, c, x
    elif h6 <= 4.0:
        r, g, b = 0.0, x, c
    elif h6 <= 5.0:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    m = v - c
    return r + m, g + m, b + m


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV to unit RGB with the same sector tie-break as
    :func:`hsv_to_unit_rgb`.

    Args:
        h: array-like or scalar, hue turn [0, 1)
        s: array-like or scalar, saturation [0, 1]
        v: array-like or scalar, value [0, 1]

    Returns:
        rgb: array of shape (..., 3)
    """
    h = np_wrap_hue(h)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    c = v * s
    h6 = h * 6.0
    x = c * (1.0 - np.abs(np.mod(h6, 2.0) - 1.0))
    zero = np.zeros(out_shape)

    conditions = [h6 <= 1.0, h6 <= 2.0, h6 <= 3.0, h6 <= 4.0, h6 <= 5.0]
    r = np.select(conditions, [c, x, zero, zero, x], default=c)
    g = np.select(conditions, [x, c, c, x, zero], default=zero)
    b = np.select(conditions, [zero, zero, x, c, c], default=x)

    m = v - c
    return np.stack([r + m, g + m, b + m], axis=-1)

## HSL to RGB conversions

def hue_to_rgb(p: float, q: float, t: float) -> float:
    """One channel of the two-piecewise HSL formulation."""
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0
    if t < ONE_SIXTH:
        return p + (q - p) * 6.0 * t
    if t < 0.5:
        return q
    if t < TWO_THIRDS:
        return p + (q - p) * (TWO_THIRDS - t) * 6.0
    return p


def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to unit RGB.

    Args:
        h: Hue as a turn in [0, 1)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    if feq(s, 0.0):
        return l, l, l

    h = wrap_hue(h)
    q = l * (1.0 + s) if l < 0.5 else l + s - l * s
    p = 2.0 * l - q
    return (
        hue_to_rgb(p, q, h + ONE_THIRD),
        hue_to_rgb(p, q, h),
        hue_to_rgb(p, q, h - ONE_THIRD),
    )


def np_hue_to_rgb(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    """Vectorized :func:`hue_to_rgb`."""
    t = np.where(t < 0.0, t + 1.0, t)
    t = np.where(t > 1.0, t - 1.0, t)
    return np.select(
        [t < ONE_SIXTH, t < 0.5, t < TWO_THIRDS],
        [p + (q - p) * 6.0 * t, q, p + (q - p) * (TWO_THIRDS - t) * 6.0],
        default=p,
    )


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to unit RGB.

    Args:
        h: array-like or scalar, hue turn [0, 1)
        s: array-like or scalar, saturation [0, 1]
        l: array-like or scalar, lightness [0, 1]

    Returns:
        rgb: array of shape (..., 3)
    """
    h = np_wrap_hue(h)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    q = np.where(l < 0.5, l * (1.0 + s), l + s - l * s)
    p = 2.0 * l - q

    r = np_hue_to_rgb(p, q, h + ONE_THIRD)
    g = np_hue_to_rgb(p, q, h)
    b = np_hue_to_rgb(p, q, h - ONE_THIRD)

    achromatic = np_feq(s, 0.0)
    rgb = np.stack([r, g, b], axis=-1)
    return np.where(achromatic[..., np.newaxis], l[..., np.newaxis], rgb)
