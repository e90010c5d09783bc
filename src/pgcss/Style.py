"""
Resolution of single CSS values.

Lengths and colors are resolved here, the rule parsing is in `style.Parser`
and the transforms are in `style.transform`.
Nothing in here ever raises on bad input. Invalid values fall back to 0 or to white.
"""
from __future__ import annotations

from pygame.colordict import THECOLORS

from .config import (abs_length_units, align_keywords, justify_keywords,
                     named_colors, position_keywords, text_style_keywords)
from .types import (Align, Color, Coordinate, Float4Tuple, Justify,
                    PositionMode, TextStyle)
from .utils import debug_once, extract_integers, in_bounds, to_float, tokenize

######################### Lengths ##################################

# longest first so that "rem" is not mistaken for "em"
_units = sorted(abs_length_units, key=len, reverse=True)


def absolute_length(value: str) -> float:
    """
    Strips a known unit and returns the number.
    Every known unit is treated as px.

    "12px" -> 12.0, "1.5em" -> 1.5
    """
    value = value.strip()
    lower = value.lower()
    for unit in _units:
        if lower.endswith(unit):
            value = value[: -len(unit)]
            break
    return to_float(value)


def length(value: str, reference: float, viewport: Coordinate = (0, 0)) -> float:
    """
    Resolves a length into pixels.
    `reference` is what percentages refer to (usually a dimension of the containing block)
    and `viewport` is used for viewport units.

    See: https://developer.mozilla.org/en-US/docs/Web/CSS/length
    """
    value = value.strip()
    if not value or value == "auto":
        return 0
    w, h = viewport
    lower = value.lower()
    match lower[-4:], lower[-2:]:
        case _, _ if value.endswith("%"):
            return reference * to_float(value[:-1]) / 100
        case "vmin", _:
            return min(w, h) * to_float(value[:-4]) / 100
        case "vmax", _:
            return max(w, h) * to_float(value[:-4]) / 100
        case _, "vw":
            return w * to_float(value[:-2]) / 100
        case _, "vh":
            return h * to_float(value[:-2]) / 100
    return absolute_length(value)


def four_sides(
    value: str, reference: float, viewport: Coordinate = (0, 0)
) -> Float4Tuple:
    """
    Expands a CSS shorthand into top, right, bottom and left

    "10px"               -> (10, 10, 10, 10)
    "10px 20px"          -> (10, 20, 10, 20)
    "10px 20px 5px"      -> (10, 20,  5, 20)
    "10px 20px 5px 15px" -> (10, 20,  5, 15)
    """
    sides = [length(x, reference, viewport) for x in tokenize(value)]
    match sides:
        case []:
            return (0, 0, 0, 0)
        case [x]:
            return (x, x, x, x)
        case [v, h]:
            return (v, h, v, h)
        case [t, h, b]:
            return (t, h, b, h)
        case [t, r, b, l, *_]:
            return (t, r, b, l)
    raise AssertionError  # mypy doesn't recognise this as unreachable


######################### Colors ##################################
_white = (255, 255, 255, 255)


def _clamp8(x: int) -> int:
    return int(in_bounds(x, 0, 255))


def _hex_color(hex: str) -> Color:
    # "#rgb" -> "#rrggbb" and "#rgba" -> "#rrggbbaa"
    if len(hex) in (3, 4):
        hex = "".join(c * 2 for c in hex)
    if len(hex) == 6:
        hex += "ff"
    if len(hex) == 8:
        try:
            return Color(*bytes.fromhex(hex))
        except ValueError:
            pass
    debug_once(f"CSS: Invalid hex color (#{hex})")
    return Color(*_white)


def _rgb_color(value: str) -> Color:
    nums = [*map(_clamp8, extract_integers(value))]
    r, g, b, a = nums[:4] + [0, 0, 0, 255][len(nums) :]
    return Color(r, g, b, a)


def _named_color(name: str) -> Color:
    if (rgba := named_colors.get(name)) is not None:
        return Color(*rgba)
    if (rgba := THECOLORS.get(name)) is not None:
        return Color(*rgba)
    debug_once(f"CSS: Unknown color ({name})")
    return Color(*_white)


def color(value: str) -> Color:
    """
    Parses "#rgb", "#rgba", "#rrggbb", "#rrggbbaa", "rgb(r,g,b)", "rgba(r,g,b,a)" and named colors.
    Every channel is an integer in [0, 255]. Unparsable colors are white.
    """
    value = value.strip()
    if value.startswith("#"):
        return _hex_color(value[1:])
    lower = value.lower()
    if lower.startswith("rgb"):  # also rgba
        return _rgb_color(value)
    return _named_color(lower)


######################### Keywords ##################################
def justify(value: str) -> Justify:
    return justify_keywords.get(value.strip().lower(), Justify.Start)


def align(value: str) -> Align:
    return align_keywords.get(value.strip().lower(), Align.Start)


def position_mode(value: str) -> PositionMode:
    return position_keywords.get(value.strip().lower(), PositionMode.Default)


def text_style(value: str) -> TextStyle:
    """
    "bold underline" -> TextStyle.Bold | TextStyle.Underlined
    """
    style = TextStyle.Regular
    for keyword, flag in text_style_keywords.items():
        if keyword in value.lower():
            style |= flag
    return style


def opacity(value: str) -> int:
    """
    Values up to 1 are fractions, bigger values are already in [0, 255]
    """
    alpha = to_float(value)
    if alpha <= 1:
        alpha *= 255
    return _clamp8(int(alpha))
