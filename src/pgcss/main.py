"""
The entry point: style elements with a list of CSS-like rules

```python
css = CSS((1280, 720))
card = RectElement()
css.style(card, ["width: 90%", "height: 90%", "background-color: #1e1e2e", "position: center"])
```
"""
from __future__ import annotations

from typing import Iterable, Sequence

import pygame as pg

from . import Dispatcher, Style
from .config import logger
from .Context import build_context
from .Element import Styleable, wrap
from .element.layout import apply_layout
from .style.Parser import parse_rules
from .types import Coordinate, InitError, Vector2


class CSS:
    """
    A CSS instance is bound to a viewport.
    The viewport is the containing block of every element without a parent
    and the reference of the viewport units (vw, vh, vmin, vmax).
    """

    viewport: Vector2

    def __init__(self, viewport: Coordinate):
        w, h = viewport
        if not (w > 0 and h > 0):
            raise InitError(f"The viewport needs a positive width and height, got {tuple(viewport)}")
        self.viewport = Vector2(w, h)

    @classmethod
    def from_surface(cls, surface: pg.Surface) -> CSS:
        """
        Binds to the size of a surface (usually the display surface)
        """
        return cls(surface.get_size())

    def __repr__(self):
        return f"CSS(viewport={tuple(self.viewport)})"

    def style(
        self,
        element: Styleable,
        rules: Iterable[str],
        parent: Styleable | None = None,
        children: Sequence[Styleable] | None = None,
    ) -> None:
        """
        Applies the rules to the element.
        Percentages refer to the parent (or the viewport if there is no parent).
        If children are given they are layouted inside the element afterwards.
        """
        ctx = build_context(element, parent, self.viewport)
        Dispatcher.apply(ctx, parse_rules(rules))
        if children:
            apply_layout(ctx, children)

    parse_color = staticmethod(Style.color)
    wrap = staticmethod(wrap)


_css: CSS | None = None


def init(viewport: Coordinate | pg.Surface) -> CSS:
    """
    Binds the viewport for the module level `style` function.
    Returns the bound CSS instance
    """
    global _css
    if isinstance(viewport, pg.Surface):
        _css = CSS.from_surface(viewport)
    else:
        _css = CSS(viewport)
    logger.info(f"Initialized {_css!r}")
    return _css


def style(
    element: Styleable,
    rules: Iterable[str],
    parent: Styleable | None = None,
    children: Sequence[Styleable] | None = None,
) -> None:
    """
    Like `CSS.style` with the viewport from `init`
    """
    if _css is None:
        raise InitError("pgcss.init(viewport) must be called before pgcss.style()")
    _css.style(element, rules, parent, children)
