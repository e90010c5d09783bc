"""
Applies Declarations to a StyleContext in two passes.

Pass 1 - intrinsic properties (size, color, text, transform, box model, flex and position mode).
These only need the declaration itself and the containing block.

Pass 2 - positional properties (left, right, top, bottom and position: center).
These need the final size of the element, which is only known after pass 1.

After both passes the deferred functions of the context (percentage translations) are flushed.

To add a new property write a handler and add it to `intrinsic_props` or `positional_props`
"""
from typing import Callable, Iterable

from . import Style
from .config import column_directions, flex_displays
from .style.itemgetters import mrg_setter, pad_setter, side_keys
from .style.transform import apply_transform, scale, scale_x, scale_y
from .types import Declaration, PositionMode, StyleContext, Vector2
from .utils import debug_once, not_neg, to_float, tokenize

Handler = Callable[[StyleContext, str], None]


# Helpers
def _horizontal(ctx: StyleContext, value: str) -> float:
    return Style.length(value, ctx.parent_size.x, ctx.viewport)


def _vertical(ctx: StyleContext, value: str) -> float:
    return Style.length(value, ctx.parent_size.y, ctx.viewport)


def _smaller(ctx: StyleContext, value: str) -> float:
    """Resolves against the smaller dimension of the containing block"""
    return Style.length(value, min(ctx.parent_size), ctx.viewport)


_axis_resolvers = (_horizontal, _vertical)

############################## Pass 1 ##############################

# Sizing
def _set_axis(axis: int) -> Handler:
    def inner(ctx: StyleContext, value: str):
        size = ctx.element.size
        size[axis] = _axis_resolvers[axis](ctx, value)
        ctx.element.size = size

    return inner


def _clamp_axis(axis: int, minimum: bool) -> Handler:
    """
    min-* and max-* only change the size if it violates the bound
    """

    def inner(ctx: StyleContext, value: str):
        bound = _axis_resolvers[axis](ctx, value)
        size = ctx.element.size
        if (size[axis] < bound) if minimum else (size[axis] > bound):
            size[axis] = bound
            ctx.element.size = size

    return inner


def size(ctx: StyleContext, value: str):
    match tokenize(value):
        case []:
            return
        case [diameter]:
            d = _smaller(ctx, diameter)
            ctx.element.size = (d, d)
        case [w, h, *_]:
            ctx.element.size = (_horizontal(ctx, w), _vertical(ctx, h))


def radius(ctx: StyleContext, value: str):
    r = _smaller(ctx, value)
    ctx.element.size = (2 * r, 2 * r)


# Colors
def fill_color(ctx: StyleContext, value: str):
    ctx.element.fill_color = Style.color(value)


def color(ctx: StyleContext, value: str):
    """
    Text is filled with its color, shapes get an outline
    """
    if ctx.element.is_text:
        ctx.element.fill_color = Style.color(value)
    else:
        ctx.element.outline_color = Style.color(value)


def outline_color(ctx: StyleContext, value: str):
    ctx.element.outline_color = Style.color(value)


def outline_thickness(ctx: StyleContext, value: str):
    ctx.element.outline_thickness = Style.absolute_length(value)


def opacity(ctx: StyleContext, value: str):
    fill = ctx.element.fill_color
    fill.a = Style.opacity(value)
    ctx.element.fill_color = fill


# Text
def font_size(ctx: StyleContext, value: str):
    ctx.element.set_character_size(int(not_neg(_vertical(ctx, value))))


def letter_spacing(ctx: StyleContext, value: str):
    ctx.element.set_letter_spacing(to_float(value))


def line_spacing(ctx: StyleContext, value: str):
    ctx.element.set_line_spacing(to_float(value))


def text_style(ctx: StyleContext, value: str):
    ctx.element.set_text_style(Style.text_style(value))


# Transform
def rotation(ctx: StyleContext, value: str):
    ctx.element.rotation = to_float(value)


def origin(ctx: StyleContext, value: str):
    """
    Percentages refer to the size of the element itself
    """
    match tokenize(value):
        case [x, y, *_]:
            w, h = ctx.element.size
            ctx.element.origin = (
                Style.length(x, w, ctx.viewport),
                Style.length(y, h, ctx.viewport),
            )


# Box model
def padding(ctx: StyleContext, value: str):
    sides = Style.four_sides(value, ctx.parent_size.x, ctx.viewport)
    pad_setter(ctx.box, tuple(map(not_neg, sides)))


def margin(ctx: StyleContext, value: str):
    mrg_setter(ctx.box, Style.four_sides(value, ctx.parent_size.x, ctx.viewport))


def _side(key: str) -> Handler:
    attr, is_vertical = side_keys[key]
    # negative margins are fine, negative paddings are not
    clamp = not_neg if attr.startswith("padding") else float

    def inner(ctx: StyleContext, value: str):
        setattr(ctx.box, attr, clamp(_axis_resolvers[is_vertical](ctx, value)))

    return inner


# Flex
def display(ctx: StyleContext, value: str):
    ctx.flex.enabled = value.lower() in flex_displays


def flex_direction(ctx: StyleContext, value: str):
    ctx.flex.column = value.lower() in column_directions


def gap(ctx: StyleContext, value: str):
    ctx.flex.gap = _horizontal(ctx, value)


def justify_content(ctx: StyleContext, value: str):
    ctx.flex.justify = Style.justify(value)


def align_items(ctx: StyleContext, value: str):
    ctx.flex.align = Style.align(value)


# Position
def position_mode(ctx: StyleContext, value: str):
    ctx.position_mode = Style.position_mode(value)


intrinsic_props: dict[str, Handler] = {
    # sizing
    "width": _set_axis(0),
    "height": _set_axis(1),
    "size": size,
    "min-width": _clamp_axis(0, minimum=True),
    "max-width": _clamp_axis(0, minimum=False),
    "min-height": _clamp_axis(1, minimum=True),
    "max-height": _clamp_axis(1, minimum=False),
    "radius": radius,
    # colors
    **dict.fromkeys(("background-color", "fill", "fill-color", "tint"), fill_color),
    "color": color,
    **dict.fromkeys(("border-color", "outline-color"), outline_color),
    "border-width": outline_thickness,
    "opacity": opacity,
    # text
    "font-size": font_size,
    "letter-spacing": letter_spacing,
    "line-spacing": line_spacing,
    **dict.fromkeys(("font-style", "text-decoration"), text_style),
    # transform
    "transform": apply_transform,
    "rotation": rotation,
    "scale": scale,
    "scale-x": scale_x,
    "scale-y": scale_y,
    "origin": origin,
    # box model
    "padding": padding,
    "margin": margin,
    **{key: _side(key) for key in side_keys},
    # flex
    "display": display,
    "flex-direction": flex_direction,
    **dict.fromkeys(("gap", "row-gap", "column-gap"), gap),
    "justify-content": justify_content,
    "align-items": align_items,
    # position
    "position": position_mode,
}

############################## Pass 2 ##############################


def reference_frame(ctx: StyleContext) -> tuple[Vector2, Vector2]:
    """
    The origin and size offsets are measured in.
    Absolute elements are placed in the viewport, everything else in the containing block
    """
    if ctx.position_mode is PositionMode.Absolute:
        return Vector2(0, 0), Vector2(ctx.viewport)
    return Vector2(ctx.parent_pos), Vector2(ctx.parent_size)


def left(ctx: StyleContext, value: str):
    ref_pos, ref_size = reference_frame(ctx)
    el = ctx.element
    x = Style.length(value, ref_size.x, ctx.viewport)
    el.position = (ref_pos.x + x + ctx.box.margin_left, el.position.y)


def right(ctx: StyleContext, value: str):
    ref_pos, ref_size = reference_frame(ctx)
    el = ctx.element
    x = Style.length(value, ref_size.x, ctx.viewport)
    el.position = (
        ref_pos.x + ref_size.x - x - el.size.x - ctx.box.margin_right,
        el.position.y,
    )


def top(ctx: StyleContext, value: str):
    ref_pos, ref_size = reference_frame(ctx)
    el = ctx.element
    y = Style.length(value, ref_size.y, ctx.viewport)
    el.position = (el.position.x, ref_pos.y + y + ctx.box.margin_top)


def bottom(ctx: StyleContext, value: str):
    ref_pos, ref_size = reference_frame(ctx)
    el = ctx.element
    y = Style.length(value, ref_size.y, ctx.viewport)
    el.position = (
        el.position.x,
        ref_pos.y + ref_size.y - y - el.size.y - ctx.box.margin_bottom,
    )


def center(ctx: StyleContext, value: str):
    if Style.position_mode(value) is not PositionMode.Center:
        return
    ref_pos, ref_size = reference_frame(ctx)
    el = ctx.element
    el.position = ref_pos + (ref_size - el.size) * 0.5


positional_props: dict[str, Handler] = {
    **dict.fromkeys(("left", "x"), left),
    "right": right,
    **dict.fromkeys(("top", "y"), top),
    "bottom": bottom,
    "position": center,
}

known_props = intrinsic_props.keys() | positional_props.keys()

####################################################################


def apply(ctx: StyleContext, declarations: Iterable[Declaration]):
    """
    Runs both passes over the declarations and flushes the deferred functions.
    Unknown properties are ignored.
    """
    declarations = [*declarations]
    for decl in declarations:
        if decl.property not in known_props:
            debug_once(f"CSS: Unknown property ({decl.property}: {decl.value})")
    for decl in declarations:
        if (handler := intrinsic_props.get(decl.property)) is not None:
            handler(ctx, decl.value)
    for decl in declarations:
        if (handler := positional_props.get(decl.property)) is not None:
            handler(ctx, decl.value)
    ctx.flush()
