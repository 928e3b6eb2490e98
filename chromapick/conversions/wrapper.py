import numpy as np
from typing import Callable, Tuple

from .to_rgb import hsv_to_unit_rgb, hsl_to_unit_rgb, np_hsv_to_unit_rgb, np_hsl_to_unit_rgb
from .to_hsv import unit_rgb_to_hsv, hsl_to_hsv, np_unit_rgb_to_hsv, np_hsl_to_hsv
from .to_hsl import unit_rgb_to_hsl, hsv_to_hsl, np_unit_rgb_to_hsl, np_hsv_to_hsl

from ..types.color_types import ColorSpace, UnitTriple

ScalarConversion = Callable[[float, float, float], UnitTriple]
ArrayConversion = Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]

CONVERT_SCALAR: dict[tuple[str, str], ScalarConversion] = {
    ("rgb", "hsv"): unit_rgb_to_hsv,
    ("hsv", "rgb"): hsv_to_unit_rgb,
    ("rgb", "hsl"): unit_rgb_to_hsl,
    ("hsl", "rgb"): hsl_to_unit_rgb,
    ("hsv", "hsl"): hsv_to_hsl,
    ("hsl", "hsv"): hsl_to_hsv,
}

CONVERT_NUMPY: dict[tuple[str, str], ArrayConversion] = {
    ("rgb", "hsv"): np_unit_rgb_to_hsv,
    ("hsv", "rgb"): np_hsv_to_unit_rgb,
    ("rgb", "hsl"): np_unit_rgb_to_hsl,
    ("hsl", "rgb"): np_hsl_to_unit_rgb,
    ("hsv", "hsl"): np_hsv_to_hsl,
    ("hsl", "hsv"): np_hsl_to_hsv,
}


def _normalize_spaces(from_space: str, to_space: str) -> Tuple[str, str]:
    from_space = from_space.lower()
    to_space = to_space.lower()
    for space in (from_space, to_space):
        if space not in ("rgb", "hsv", "hsl"):
            raise ValueError(f"Unknown space: {space}")
    return from_space, to_space


def convert(color: UnitTriple, from_space: ColorSpace, to_space: ColorSpace) -> UnitTriple:
    """
    Convert a single unit-float triple between color spaces.

    Args:
        color: (c0, c1, c2) in ``from_space``; hue components are turns
        from_space: Source color space ('rgb', 'hsv', 'hsl')
        to_space: Target color space

    Returns:
        Triple in ``to_space``
    """
    from_space, to_space = _normalize_spaces(from_space, to_space)
    c0, c1, c2 = (float(c) for c in color)
    if from_space == to_space:
        return c0, c1, c2
    return CONVERT_SCALAR[(from_space, to_space)](c0, c1, c2)


def np_convert(color: np.ndarray, from_space: ColorSpace, to_space: ColorSpace) -> np.ndarray:
    """
    Vectorized :func:`convert` over an array of shape (..., 3).
    """
    from_space, to_space = _normalize_spaces(from_space, to_space)
    arr = np.asarray(color, dtype=float)
    if arr.shape[-1] != 3:
        raise ValueError(f"Expected last dimension to be 3, got shape {arr.shape}")
    if from_space == to_space:
        return arr.copy()
    return CONVERT_NUMPY[(from_space, to_space)](arr[..., 0], arr[..., 1], arr[..., 2])
