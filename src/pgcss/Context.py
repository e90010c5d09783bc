"""
Builds the StyleContext for a single styling call
"""
from .Element import Styleable
from .types import Coordinate, StyleContext, Vector2


def build_context(
    element: Styleable, parent: Styleable | None, viewport: Coordinate
) -> StyleContext:
    """
    The containing block is the parent if there is one, otherwise it is the viewport
    (just like an element whose nearest positioned ancestor is the <body>)
    """
    viewport = Vector2(viewport)
    if parent is not None:
        parent_size, parent_pos = parent.size, parent.position
    else:
        parent_size, parent_pos = Vector2(viewport), Vector2(0, 0)
    return StyleContext(element, parent_size, parent_pos, viewport)
