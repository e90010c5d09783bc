"""
This is layout utilities for Elements

Children of a styled element are positioned in one of two ways.

If the element has display: flex, the children are distributed along one main axis
(a row or a column) inside the content box of the element.
There is no wrapping and no growing or shrinking of the children. Items that don't fit just overflow.

Otherwise the children are treated as already layouted in local coordinates
and are just moved into the content box of the element.
"""

from __future__ import annotations

from typing import Sequence

from pgcss.Element import Styleable
from pgcss.types import Align, StyleContext, Vector2

from .flex_align import align_by, justify_by


def apply_layout(ctx: StyleContext, children: Sequence[Styleable]):
    """
    Positions the children with the finished context of their parent
    """
    if not children:
        return
    if ctx.flex.enabled:
        flex_layout(ctx, children)
    else:
        offset_layout(ctx, children)


def offset_layout(ctx: StyleContext, children: Sequence[Styleable]):
    origin = ctx.element.position + ctx.box.padding_offset
    for child in children:
        child.move(origin)


def flex_layout(ctx: StyleContext, children: Sequence[Styleable]):
    flex = ctx.flex
    main, cross = (1, 0) if flex.column else (0, 1)

    content_pos = ctx.element.position + ctx.box.padding_offset
    content_size = ctx.box.inner_size(ctx.element.size)

    n = len(children)
    total = sum(child.size[main] for child in children)
    remaining = content_size[main] - total - flex.gap * max(0, n - 1)
    offset, between = justify_by(flex.justify, remaining, n)

    cursor = content_pos[main] + offset
    for child in children:
        if flex.align is Align.Stretch:
            stretched = child.size
            stretched[cross] = content_size[cross]
            child.size = stretched
        # stretching can change the main extent too (text reflows)
        size = child.size
        pos = Vector2(0, 0)
        pos[main] = cursor
        pos[cross] = align_by(
            flex.align, content_pos[cross], content_size[cross], size[cross]
        )
        child.position = pos
        cursor += size[main] + flex.gap + between
