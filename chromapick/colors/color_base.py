from __future__ import annotations
import math
from typing import Callable, ClassVar, Tuple

from ..conversions import (
    hsv_to_unit_rgb, hsl_to_unit_rgb,
    unit_rgb_to_hsv, unit_rgb_to_hsl,
    hsv_to_hsl, hsl_to_hsv,
    quantize_u8,
)
from ..parsing import parse_color_text
from ..types.color_types import PolarModel, Pixel, UnitTriple
from ..types.format_type import OutputFormat, MAX_U8

_POLAR_TO_RGB: dict[PolarModel, Callable[[float, float, float], UnitTriple]] = {
    PolarModel.HSV: hsv_to_unit_rgb,
    PolarModel.HSL: hsl_to_unit_rgb,
}

_RGB_TO_POLAR: dict[PolarModel, Callable[[float, float, float], UnitTriple]] = {
    PolarModel.HSV: unit_rgb_to_hsv,
    PolarModel.HSL: unit_rgb_to_hsl,
}

_POLAR_TO_POLAR: dict[tuple[PolarModel, PolarModel], Callable[[float, float, float], UnitTriple]] = {
    (PolarModel.HSV, PolarModel.HSL): hsv_to_hsl,
    (PolarModel.HSL, PolarModel.HSV): hsl_to_hsv,
}

HUE, SATURATION, THIRD = 0, 1, 2


class Color:
    """
    A color held simultaneously in unit RGB and one polar model, plus alpha.

    The polar model (HSV or HSL) is authoritative: setters change one polar
    component and recompute the whole RGB triple from the full polar triple,
    so both representations always agree. Inputs are never clamped.
    """
    __slots__ = ('_rgb', '_polar', '_alpha', '_model')

    # tolerance for __eq__, looser than conversions.EPSILON to absorb round trips
    compare_tolerance: ClassVar[float] = 1e-9

    # renderers attached in color.py
    to_hex_string: Callable[[Color], str]
    to_rgb_string: Callable[[Color], str]
    to_hsl_string: Callable[[Color], str]
    to_hsv_string: Callable[[Color], str]
    to_vec_string: Callable[[Color], str]
    format: Callable[[Color, OutputFormat | str], str]

    def __init__(
        self,
        polar: UnitTriple,
        alpha: float = 1.0,
        model: PolarModel | str = PolarModel.HSV,
    ) -> None:
        model = PolarModel(model)
        h, s, t = (float(c) for c in polar)
        self._model = model
        self._polar = (h, s, t)
        self._rgb = _POLAR_TO_RGB[model](h, s, t)
        self._alpha = float(alpha)

    @classmethod
    def _from_parts(cls, rgb: UnitTriple, polar: UnitTriple, alpha: float, model: PolarModel) -> Color:
        color = cls.__new__(cls)
        color._model = model
        color._rgb = tuple(float(c) for c in rgb)
        color._polar = tuple(float(c) for c in polar)
        color._alpha = float(alpha)
        return color

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_hsv(cls, h: float, s: float, v: float, a: float = 1.0) -> Color:
        return cls((h, s, v), a, PolarModel.HSV)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, a: float = 1.0) -> Color:
        return cls((h, s, l), a, PolarModel.HSL)

    @classmethod
    def from_polar(cls, model: PolarModel | str, h: float, s: float, third: float, a: float = 1.0) -> Color:
        """Build from the polar triple of ``model`` (value for HSV, lightness for HSL)."""
        return cls((h, s, third), a, model)

    @classmethod
    def from_rgb(
        cls,
        r: float,
        g: float,
        b: float,
        a: float = 1.0,
        model: PolarModel | str = PolarModel.HSV,
    ) -> Color:
        """
        Build from unit RGB. The RGB triple is stored as given and the polar
        triple is derived from it.
        """
        model = PolarModel(model)
        rgb = (float(r), float(g), float(b))
        return cls._from_parts(rgb, _RGB_TO_POLAR[model](*rgb), a, model)

    @classmethod
    def from_pixel(cls, pixel: Pixel, model: PolarModel | str = PolarModel.HSV) -> Color:
        """Build from 8-bit (r, g, b, a) channels."""
        r, g, b, a = (c / MAX_U8 for c in pixel)
        return cls.from_rgb(r, g, b, a, model)

    @classmethod
    def parse(cls, text: str, model: PolarModel | str = PolarModel.HSV) -> Color:
        """
        Parse CSS-style color text.

        Args:
            text: Hex, rgb()/rgba(), hsl()/hsla(), hsv()/hsva(), hwb() or a
                  named color
            model: Polar model of the returned color

        Raises:
            ColorParseError: If the text matches no supported syntax
        """
        model = PolarModel(model)
        parsed = parse_color_text(text)
        if parsed.space == "rgb":
            return cls.from_rgb(*parsed.components, parsed.alpha, model)
        return cls(parsed.components, parsed.alpha, parsed.space).with_model(model)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def model(self) -> PolarModel:
        return self._model

    @property
    def rgb(self) -> UnitTriple:
        return self._rgb

    @property
    def rgba(self) -> Tuple[float, float, float, float]:
        return (*self._rgb, self._alpha)

    @property
    def red(self) -> float:
        return self._rgb[0]

    @property
    def green(self) -> float:
        return self._rgb[1]

    @property
    def blue(self) -> float:
        return self._rgb[2]

    @property
    def polar(self) -> UnitTriple:
        """The authoritative polar triple (hue, saturation, value-or-lightness)."""
        return self._polar

    @property
    def hue(self) -> float:
        return self._polar[HUE]

    @property
    def saturation(self) -> float:
        """Saturation of the authoritative model."""
        return self._polar[SATURATION]

    @property
    def third(self) -> float:
        """Value for HSV colors, lightness for HSL colors."""
        return self._polar[THIRD]

    @property
    def hsv(self) -> UnitTriple:
        if self._model is PolarModel.HSV:
            return self._polar
        return hsl_to_hsv(*self._polar)

    @property
    def hsl(self) -> UnitTriple:
        if self._model is PolarModel.HSL:
            return self._polar
        return hsv_to_hsl(*self._polar)

    @property
    def value(self) -> float:
        return self.hsv[THIRD]

    @property
    def lightness(self) -> float:
        return self.hsl[THIRD]

    @property
    def alpha(self) -> float:
        return self._alpha

    # ------------------ MUTATORS ------------------
    def _set_polar(self, index: int, x: float) -> None:
        polar = list(self._polar)
        polar[index] = float(x)
        self._polar = (polar[0], polar[1], polar[2])
        self._rgb = _POLAR_TO_RGB[self._model](*self._polar)

    def _require_model(self, model: PolarModel) -> None:
        if self._model is not model:
            raise ValueError(
                f"Cannot set {model.third_component} on a {self._model.value.upper()} color; "
                f"use with_model(PolarModel.{model.name}) first"
            )

    def set_hue(self, h: float) -> None:
        self._set_polar(HUE, h)

    def set_saturation(self, s: float) -> None:
        self._set_polar(SATURATION, s)

    def set_value(self, v: float) -> None:
        self._require_model(PolarModel.HSV)
        self._set_polar(THIRD, v)

    def set_lightness(self, l: float) -> None:
        self._require_model(PolarModel.HSL)
        self._set_polar(THIRD, l)

    def set_third(self, x: float) -> None:
        """Set value (HSV) or lightness (HSL), whichever the model holds."""
        self._set_polar(THIRD, x)

    def set_alpha(self, a: float) -> None:
        self._alpha = float(a)

    # ------------------ DERIVED COPIES ------------------
    def copy(self) -> Color:
        return self._from_parts(self._rgb, self._polar, self._alpha, self._model)

    __copy__ = copy

    def __deepcopy__(self, memo) -> Color:
        return self.copy()

    def with_model(self, model: PolarModel | str) -> Color:
        """
        Return a copy whose authoritative polar model is ``model``.

        The hue is carried over unchanged and the RGB triple is kept as is.
        """
        model = PolarModel(model)
        if model is self._model:
            return self.copy()
        polar = _POLAR_TO_POLAR[(self._model, model)](*self._polar)
        return self._from_parts(self._rgb, polar, self._alpha, model)

    def to_pixel(self) -> Pixel:
        """8-bit (r, g, b, a), each ``round-half-up(x * 255)`` clamped to [0, 255]."""
        r, g, b = self._rgb
        return quantize_u8(r), quantize_u8(g), quantize_u8(b), quantize_u8(self._alpha)

    # ------------------ DUNDERS ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        if self._model is not other._model:
            return False
        mine = (*self._rgb, *self._polar, self._alpha)
        theirs = (*other._rgb, *other._polar, other._alpha)
        return all(
            math.isclose(a, b, rel_tol=0.0, abs_tol=self.compare_tolerance)
            for a, b in zip(mine, theirs)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        h, s, t = self._polar
        third = "v" if self._model is PolarModel.HSV else "l"
        return (
            f"Color({self._model.value}: h={h:.4f}, s={s:.4f}, {third}={t:.4f}, "
            f"a={self._alpha:.4f}; rgb=({self.red:.4f}, {self.green:.4f}, {self.blue:.4f}))"
        )
