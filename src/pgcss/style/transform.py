"""
The CSS transform property

Supports
translateX(px | %), translateY(px | %), translate(x, y), rotate(deg), scale(sx [, sy]), scaleX(sx) and scaleY(sy)

Percentage translateX/Y are deferred until the element has its final size.
Percentages in translate(x, y) use the size the element has right now.
"""
from typing import Callable

from pgcss.Style import absolute_length
from pgcss.types import StyleContext, Vector2
from pgcss.utils import debug_once, split_funcs, to_float, tokenize

TransformFunc = Callable[[StyleContext, str], None]


def _percentage(value: str) -> float | None:
    value = value.strip()
    return to_float(value[:-1]) if value.endswith("%") else None


def _offset(value: str, extent: float) -> float:
    if (perc := _percentage(value)) is not None:
        return extent * perc / 100
    return absolute_length(value)


def _translate_axis(axis: int) -> TransformFunc:
    key = ("translate-x", "translate-y")[axis]

    def inner(ctx: StyleContext, arg: str):
        el = ctx.element
        delta = [0.0, 0.0]
        if (perc := _percentage(arg)) is None:
            delta[axis] = absolute_length(arg)
            el.move(delta)
            return

        def deferred():
            final = [0.0, 0.0]
            final[axis] = el.size[axis] * perc / 100
            el.move(final)

        ctx.defer(key, deferred)

    return inner


def translate(ctx: StyleContext, arg: str):
    el = ctx.element
    match tokenize(arg):
        case []:
            return
        case [x]:
            el.move((_offset(x, el.size.x), 0))
        case [x, y, *_]:
            size = el.size
            el.move((_offset(x, size.x), _offset(y, size.y)))


def rotate(ctx: StyleContext, arg: str):
    ctx.element.rotation = to_float(arg)


def scale(ctx: StyleContext, arg: str):
    match tokenize(arg):
        case []:
            return
        case [sx]:
            ctx.element.scale = Vector2(to_float(sx), to_float(sx))
        case [sx, sy, *_]:
            ctx.element.scale = Vector2(to_float(sx), to_float(sy))


def scale_x(ctx: StyleContext, arg: str):
    el = ctx.element
    el.scale = Vector2(to_float(arg), el.scale.y)


def scale_y(ctx: StyleContext, arg: str):
    el = ctx.element
    el.scale = Vector2(el.scale.x, to_float(arg))


transform_funcs: dict[str, TransformFunc] = {
    "translatex": _translate_axis(0),
    "translatey": _translate_axis(1),
    "translate": translate,
    "rotate": rotate,
    "scale": scale,
    "scalex": scale_x,
    "scaley": scale_y,
}


def apply_transform(ctx: StyleContext, value: str):
    """
    Applies every transform function in `value` from left to right
    """
    for name, arg in split_funcs(value):
        if (func := transform_funcs.get(name)) is None:
            debug_once(f"CSS: Unknown transform function ({name})")
            continue
        func(ctx, arg)
