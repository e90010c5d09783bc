from .config import set_config
from .main import CSS, init, style
from .Element import (CircleElement, PolygonElement, RectElement, Styleable,
                      TextElement, wrap)
from .Media import ImageElement
from .Style import color as parse_color
from .types import Color, InitError, TextStyle, Vector2

__all__ = [
    # styling
    "CSS",
    "init",
    "style",
    "set_config",
    "parse_color",
    # elements
    "Styleable",
    "RectElement",
    "CircleElement",
    "PolygonElement",
    "TextElement",
    "ImageElement",
    "wrap",
    # types
    "Color",
    "Vector2",
    "TextStyle",
    "InitError",
]
