"""
Flex alignment

Main axis (justify-content):
start, end, center, space-between, space-around, space-evenly

Cross axis (align-items):
start, end, center, stretch
"""

from typing import Protocol

from pgcss.types import Align, Justify


class JustifyPolicy(Protocol):
    def __call__(self, remaining: float, n: int) -> tuple[float, float]:
        """
        Takes the free space on the main axis and the number of items.
        Returns the leading offset and the extra spacing between two items
        """


def start(remaining, n):
    return 0, 0


def end(remaining, n):
    return remaining, 0


def center(remaining, n):
    return remaining / 2, 0


def space_between(remaining, n):
    return 0, remaining / (n - 1) if n > 1 else 0


def space_around(remaining, n):
    between = remaining / n if n > 0 else 0
    return between / 2, between


def space_evenly(remaining, n):
    between = remaining / (n + 1)
    return between, between


justify_policies: dict[Justify, JustifyPolicy] = {
    Justify.Start: start,
    Justify.End: end,
    Justify.Center: center,
    Justify.SpaceBetween: space_between,
    Justify.SpaceAround: space_around,
    Justify.SpaceEvenly: space_evenly,
}


def justify_by(justify: Justify, remaining: float, n: int) -> tuple[float, float]:
    return justify_policies[justify](remaining, n)


def align_by(align: Align, cross_start: float, available: float, extent: float) -> float:
    """
    The cross axis position of an item with the cross `extent`.
    Stretched items already have the full extent, so they start at the near edge
    """
    if align is Align.End:
        return cross_start + available - extent
    elif align is Align.Center:
        return cross_start + (available - extent) / 2
    return cross_start
