"""CSS-style color text parsing.

Functional notations (``rgb()``, ``rgba()``, ``hsl()``, ``hsla()``, ``hsv()``,
``hsva()``, ``hwb()``) are parsed here with both the legacy comma syntax and
the CSS Color 4 space syntax (``rgb(255 0 0 / 50%)``). Hex notations and named
colors are delegated to :func:`PIL.ImageColor.getrgb`.
"""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import List, Tuple

from boundednumbers import clamp01
from boundednumbers.functions import cyclic_wrap_float
from PIL import ImageColor

from ..errors import ColorParseError
from ..types.color_types import ColorSpace
from ..types.format_type import HUE_360, PERCENT, MAX_U8

logger = logging.getLogger(__name__)

_FUNCTION_RE = re.compile(r"^(?P<name>[a-z]+)\s*\((?P<args>[^()]*)\)$")
_NUMBER_RE = re.compile(
    r"^(?P<number>[+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)(?P<unit>%|deg|rad|grad|turn)?$"
)

_HUE_UNITS_PER_TURN = {
    None: HUE_360,
    "deg": HUE_360,
    "rad": 2 * math.pi,
    "grad": 400,
    "turn": 1,
}

_FUNCTION_SPACES = {
    "rgb": "rgb",
    "rgba": "rgb",
    "hsl": "hsl",
    "hsla": "hsl",
    "hsv": "hsv",
    "hsva": "hsv",
    "hsb": "hsv",
    "hsba": "hsv",
    "hwb": "hwb",
}


@dataclass(frozen=True)
class ParsedColor:
    """Unit-float components read from color text, before building a Color."""
    space: ColorSpace
    components: Tuple[float, float, float]
    alpha: float


def _split_arguments(args: str) -> Tuple[List[str], str | None]:
    """Split the inside of a functional notation into channel tokens and alpha."""
    alpha_token = None
    if "/" in args:
        args, _, alpha_token = args.partition("/")
        alpha_token = alpha_token.strip()
        if not alpha_token or "/" in alpha_token:
            raise ValueError("malformed '/ alpha' separator")

    if "," in args:
        tokens = [t.strip() for t in args.split(",")]
        if any(not t for t in tokens):
            raise ValueError("empty argument between commas")
    else:
        tokens = args.split()

    if alpha_token is not None:
        if len(tokens) != 3:
            raise ValueError(f"expected 3 channels before '/', got {len(tokens)}")
        return tokens, alpha_token
    if len(tokens) == 4:
        return tokens[:3], tokens[3]
    if len(tokens) != 3:
        raise ValueError(f"expected 3 or 4 arguments, got {len(tokens)}")
    return tokens, None


def _number(token: str) -> Tuple[float, str | None]:
    match = _NUMBER_RE.match(token)
    if match is None:
        raise ValueError(f"invalid number {token!r}")
    return float(match.group("number")), match.group("unit")


def _rgb_channel(token: str) -> float:
    value, unit = _number(token)
    if unit == "%":
        return clamp01(value / PERCENT)
    if unit is not None:
        raise ValueError(f"unexpected unit in RGB channel {token!r}")
    return clamp01(value / MAX_U8)


def _percentage(token: str) -> float:
    # CSS Color 4 allows bare numbers on the 0-100 scale here
    value, unit = _number(token)
    if unit not in (None, "%"):
        raise ValueError(f"unexpected unit in percentage {token!r}")
    return clamp01(value / PERCENT)


def _hue(token: str) -> float:
    value, unit = _number(token)
    if unit == "%":
        raise ValueError(f"hue cannot be a percentage: {token!r}")
    return cyclic_wrap_float(value / _HUE_UNITS_PER_TURN[unit], 0.0, 1.0)


def _alpha(token: str | None) -> float:
    if token is None:
        return 1.0
    value, unit = _number(token)
    if unit == "%":
        return clamp01(value / PERCENT)
    if unit is not None:
        raise ValueError(f"unexpected unit in alpha {token!r}")
    return clamp01(value)


def _hwb_to_hsv(h: float, w: float, b: float) -> Tuple[float, float, float]:
    # https://www.w3.org/TR/css-color-4/#hwb-to-rgb
    if w + b >= 1.0:
        return h, 0.0, w / (w + b)
    v = 1.0 - b
    return h, 1.0 - w / v, v


def _parse_function(name: str, args: str) -> ParsedColor:
    space = _FUNCTION_SPACES.get(name)
    if space is None:
        raise ValueError(f"unsupported color function {name!r}")

    tokens, alpha_token = _split_arguments(args)
    alpha = _alpha(alpha_token)

    if space == "rgb":
        r, g, b = (_rgb_channel(t) for t in tokens)
        return ParsedColor("rgb", (r, g, b), alpha)

    h = _hue(tokens[0])
    c1 = _percentage(tokens[1])
    c2 = _percentage(tokens[2])
    if space == "hwb":
        return ParsedColor("hsv", _hwb_to_hsv(h, c1, c2), alpha)
    return ParsedColor(space, (h, c1, c2), alpha)  # type: ignore[arg-type]


def _parse_pillow(text: str) -> ParsedColor:
    rgb = ImageColor.getrgb(text)
    channels = [c / MAX_U8 for c in rgb]
    alpha = channels[3] if len(channels) == 4 else 1.0
    return ParsedColor("rgb", (channels[0], channels[1], channels[2]), alpha)


def parse_color_text(text: str) -> ParsedColor:
    """
    Parse CSS-style color text into unit-float components.

    Supported forms:
        - hex: ``#RGB``, ``#RGBA``, ``#RRGGBB``, ``#RRGGBBAA``
        - ``rgb()``/``rgba()`` with numbers (0-255) or percentages
        - ``hsl()``/``hsla()``, ``hsv()``/``hsva()`` (also ``hsb``), ``hwb()``
          with hue in deg (default), rad, grad or turn
        - comma or space separated arguments, alpha as 4th argument or after ``/``
        - CSS named colors and ``transparent``

    Args:
        text: Color text

    Returns:
        ParsedColor with components in the parsed space

    Raises:
        ColorParseError: If the text matches no supported syntax
    """
    if not isinstance(text, str):
        raise ColorParseError(repr(text), f"expected str, got {type(text).__name__}")

    normalized = text.strip().lower()
    try:
        if not normalized:
            raise ValueError("empty color text")
        if normalized == "transparent":
            return ParsedColor("rgb", (0.0, 0.0, 0.0), 0.0)
        match = _FUNCTION_RE.match(normalized)
        if match is not None:
            return _parse_function(match.group("name"), match.group("args"))
        return _parse_pillow(normalized)
    except ValueError as e:
        logger.debug("Rejected color text %r: %s", text, e)
        raise ColorParseError(text, str(e)) from e
