""" Any global settings and constant tables are stored here"""
import logging
from typing import Any

from frozendict import frozendict

from .types import Align, Justify, PositionMode, TextStyle

# fmt: off
g: dict[str, Any] = {
    # User settable
    "default_font": None,           # None (pygames default font) or a path to a font file
    "default_font_size": 30,        # int, character size of new TextElements
    "circle_point_count": 30,       # int, points used to draw a CircleElement
    "log_level": logging.WARNING,   # int
}
# fmt: on

logger = logging.getLogger("pgcss")


def set_config(**kwargs):
    """
    Update the settings in `g`. Unknown keys and None values are ignored
    """
    g.update({k: v for k, v in kwargs.items() if k in g and v is not None})
    logger.setLevel(g["log_level"])


logger.setLevel(g["log_level"])

################################ constant data ########################

# Property names are looked up without hyphens, so that
# "backgroundColor", "background-color" and "BackgroundColor" all match
property_aliases = frozendict(
    {
        # background / color
        "backgroundcolor": "background-color",
        "backgroundcolour": "background-color",
        "fillcolor": "fill-color",
        "bordercolor": "border-color",
        "bordercolour": "border-color",
        "outlinecolor": "outline-color",
        "outlinecolour": "outline-color",
        "borderwidth": "border-width",
        "outlinethickness": "border-width",
        "borderradius": "border-radius",
        # font / text
        "fontsize": "font-size",
        "fontfamily": "font-family",
        "fontstyle": "font-style",
        "textdecoration": "text-decoration",
        "letterspacing": "letter-spacing",
        "linespacing": "line-spacing",
        # layout
        "marginleft": "margin-left",
        "margintop": "margin-top",
        "marginright": "margin-right",
        "marginbottom": "margin-bottom",
        "paddingleft": "padding-left",
        "paddingtop": "padding-top",
        "paddingright": "padding-right",
        "paddingbottom": "padding-bottom",
        "minwidth": "min-width",
        "maxwidth": "max-width",
        "minheight": "min-height",
        "maxheight": "max-height",
        # flex
        "flexdirection": "flex-direction",
        "justifycontent": "justify-content",
        "alignitems": "align-items",
        "rowgap": "row-gap",
        "columngap": "column-gap",
        # transform
        "scalex": "scale-x",
        "scaley": "scale-y",
        # misc
        "backgroundimage": "background-image",
        "pointcount": "point-count",
    }
)

# every unit is pixel equivalent, there are no font metrics
abs_length_units = frozendict({"px": 1, "em": 1, "rem": 1, "pt": 1, "dp": 1})

named_colors = frozendict(
    {
        # CSS standard
        "transparent": (0, 0, 0, 0),
        "black": (0, 0, 0),
        "white": (255, 255, 255),
        "red": (255, 0, 0),
        "green": (0, 255, 0),
        "blue": (0, 0, 255),
        "yellow": (255, 255, 0),
        "magenta": (255, 0, 255),
        "cyan": (0, 255, 255),
        # Extended
        "gray": (128, 128, 128),
        "grey": (128, 128, 128),
        "darkgray": (64, 64, 64),
        "lightgray": (211, 211, 211),
        "orange": (255, 165, 0),
        "darkorange": (255, 140, 0),
        "pink": (255, 192, 203),
        "hotpink": (255, 105, 180),
        "purple": (128, 0, 128),
        "violet": (238, 130, 238),
        "indigo": (75, 0, 130),
        "brown": (165, 42, 42),
        "lime": (50, 205, 50),
        "navy": (0, 0, 128),
        "teal": (0, 128, 128),
        "silver": (192, 192, 192),
        "gold": (255, 215, 0),
        "coral": (255, 127, 80),
        "salmon": (250, 128, 114),
        "crimson": (220, 20, 60),
        "turquoise": (64, 224, 208),
        "skyblue": (135, 206, 235),
        "steelblue": (70, 130, 180),
        "chocolate": (210, 105, 30),
        "tomato": (255, 99, 71),
        "orchid": (218, 112, 214),
        "plum": (221, 160, 221),
        "khaki": (240, 230, 140),
        "beige": (245, 245, 220),
        "ivory": (255, 255, 240),
        "lavender": (230, 230, 250),
        "linen": (250, 240, 230),
        "mintcream": (245, 255, 250),
        "snow": (255, 250, 250),
        "wheat": (245, 222, 179),
    }
)

justify_keywords = frozendict(
    {
        "flex-end": Justify.End,
        "end": Justify.End,
        "center": Justify.Center,
        "space-between": Justify.SpaceBetween,
        "space-around": Justify.SpaceAround,
        "space-evenly": Justify.SpaceEvenly,
    }
)

align_keywords = frozendict(
    {
        "flex-end": Align.End,
        "end": Align.End,
        "center": Align.Center,
        "stretch": Align.Stretch,
    }
)

position_keywords = frozendict(
    {
        "absolute": PositionMode.Absolute,
        "relative": PositionMode.Relative,
        "center": PositionMode.Center,
    }
)

# substrings that turn on a text style flag
text_style_keywords = frozendict(
    {
        "bold": TextStyle.Bold,
        "italic": TextStyle.Italic,
        "underline": TextStyle.Underlined,
        "strike": TextStyle.StrikeThrough,
        "line-through": TextStyle.StrikeThrough,
    }
)

flex_displays = frozenset({"flex", "grid"})
column_directions = frozenset({"column", "column-reverse"})
