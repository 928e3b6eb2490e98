from __future__ import annotations

from .color_base import Color
from ..conversions import feq
from ..types.color_types import PolarModel
from ..types.format_type import OutputFormat, format_renderers, HUE_360, PERCENT, MAX_U8


def _is_opaque(color: Color) -> bool:
    return feq(color.alpha, 1.0)


def _alpha_percent(color: Color) -> str:
    return f"{color.alpha * PERCENT:.0f}%"


def to_hex_string(self: Color) -> str:
    """
    ``#rrggbb``, or ``#rrggbbaa`` when the color is not fully opaque.

    Opacity is judged on the float alpha, not on the quantized byte, so an
    alpha just short of 1 still renders eight digits ending in ``ff``.
    """
    r, g, b, a = self.to_pixel()
    if _is_opaque(self):
        return f"#{r:02x}{g:02x}{b:02x}"
    return f"#{r:02x}{g:02x}{b:02x}{a:02x}"


def to_rgb_string(self: Color) -> str:
    """``rgb(r, g, b)`` with 8-bit channels, ``rgba(r, g, b, a%)`` when translucent."""
    r, g, b, a = self.to_pixel()
    if _is_opaque(self):
        return f"rgb({r}, {g}, {b})"
    return f"rgba({r}, {g}, {b}, {a / MAX_U8 * PERCENT:.0f}%)"


def _polar_string(name: str, color: Color, triple) -> str:
    h, s, t = triple
    body = f"{h * HUE_360:.0f}deg, {s * PERCENT:.0f}%, {t * PERCENT:.0f}%"
    if _is_opaque(color):
        return f"{name}({body})"
    return f"{name}a({body}, {_alpha_percent(color)})"


def to_hsl_string(self: Color) -> str:
    return _polar_string("hsl", self, self.hsl)


def to_hsv_string(self: Color) -> str:
    return _polar_string("hsv", self, self.hsv)


def to_vec_string(self: Color) -> str:
    """Shader-style literal of the unit RGB(A) components."""
    r, g, b = self.rgb
    if _is_opaque(self):
        return f"vec3({r:.2f}, {g:.2f}, {b:.2f})"
    return f"vec4({r:.2f}, {g:.2f}, {b:.2f}, {self.alpha:.2f})"


def format_color(self: Color, fmt: OutputFormat | str) -> str:
    """
    Render this color in one of the output formats.

    Args:
        fmt: An OutputFormat or its string value ("hex", "rgb", "hsl", "hsv", "vec")

    Raises:
        ValueError: If the format is unknown
    """
    renderer = format_renderers[OutputFormat(fmt)]
    return getattr(self, renderer)()


Color.to_hex_string = to_hex_string
Color.to_rgb_string = to_rgb_string
Color.to_hsl_string = to_hsl_string
Color.to_hsv_string = to_hsv_string
Color.to_vec_string = to_vec_string
Color.format = format_color


def parse(text: str, model: PolarModel | str = PolarModel.HSV) -> Color:
    """Module-level alias of :meth:`Color.parse`."""
    return Color.parse(text, model)
