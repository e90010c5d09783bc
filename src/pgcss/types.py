"""
A single source of thruth for types that are used in the other modules.
Instead of importing Vectors or Colors from pygame, import them from here.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum as _Enum
from enum import IntFlag, auto
from typing import TYPE_CHECKING, Callable, Generator, Union

import pygame as pg
from pygame.math import Vector2 as _Vector2

if TYPE_CHECKING:
    from pgcss.Element import Styleable


class BugError(AssertionError):
    """A type of error that should never occur. If it occurs, something needs to be fixed. Please report any BugErrors found."""


class InitError(RuntimeError):
    """Raised when styling is attempted without a bound viewport"""


# Aliases
##########################################################################

# a size, vector, or position
Coordinate = Union[tuple[float, float], "Vector2"]
Float4Tuple = tuple[float, float, float, float]
Deferred = Callable[[], None]


############################ Some Classes ##############################
class Enum(_Enum):
    def __repr__(self):
        return f"{self.__class__.__name__}.{self.name}"


class Vector2(_Vector2):
    def __iter__(self) -> Generator[float, None, None]:
        yield self.x
        yield self.y

    def __add__(self, other: Coordinate | _Vector2) -> "Vector2":
        other: Vector2 = Vector2(other)
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Coordinate | _Vector2) -> "Vector2":
        other: Vector2 = Vector2(other)
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: float) -> "Vector2":  # type: ignore [override]
        return Vector2(self.x * other, self.y * other)


class Color(pg.Color):
    def __hash__(self):
        return hash(int(self))

    def __repr__(self):
        return f"Color{super().__repr__()}"


@dataclass(frozen=True)
class FloatRect:
    """
    Pygame Rects only hold integers, bounds need floats
    """

    left: float
    top: float
    width: float
    height: float

    @property
    def position(self):
        return Vector2(self.left, self.top)

    @property
    def size(self):
        return Vector2(self.width, self.height)

    @staticmethod
    def from_points(points: list[Coordinate]) -> FloatRect:
        if not points:
            return FloatRect(0, 0, 0, 0)
        xs = [x for x, _ in points]
        ys = [y for _, y in points]
        return FloatRect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))


class TextStyle(IntFlag):
    Regular = 0
    Bold = 1
    Italic = 2
    Underlined = 4
    StrikeThrough = 8


################################# Styling ###############################


@dataclass(frozen=True)
class Declaration:
    """
    A single normalised rule

    "backgroundColor: #1e1e2e" -> Declaration("background-color", "#1e1e2e")
    """

    property: str
    value: str


@dataclass
class BoxModel:
    padding_top: float = 0
    padding_right: float = 0
    padding_bottom: float = 0
    padding_left: float = 0
    margin_top: float = 0
    margin_right: float = 0
    margin_bottom: float = 0
    margin_left: float = 0

    @property
    def padding_offset(self):
        return Vector2(self.padding_left, self.padding_top)

    def inner_size(self, outer: Coordinate):
        """
        The size that is left of `outer` after the padding is taken away
        """
        w, h = outer
        return Vector2(
            w - self.padding_left - self.padding_right,
            h - self.padding_top - self.padding_bottom,
        )


class Justify(Enum):
    Start = auto()
    End = auto()
    Center = auto()
    SpaceBetween = auto()
    SpaceAround = auto()
    SpaceEvenly = auto()


class Align(Enum):
    Start = auto()
    End = auto()
    Center = auto()
    Stretch = auto()


@dataclass
class FlexLayout:
    enabled: bool = False
    column: bool = False
    gap: float = 0
    justify: Justify = Justify.Start
    align: Align = Align.Start


class PositionMode(Enum):
    Default = auto()  # flow: positioned by the parents layout or explicit offsets
    Relative = auto()  # offsets from the parents origin
    Absolute = auto()  # offsets from the viewports origin
    Center = auto()  # centered in the containing block


@dataclass
class StyleContext:
    """
    Everything a single styling call works on.
    A context is built, resolved and thrown away again, it is never reused.
    """

    element: Styleable
    parent_size: Vector2
    parent_pos: Vector2
    viewport: Vector2
    box: BoxModel = field(default_factory=BoxModel)
    flex: FlexLayout = field(default_factory=FlexLayout)
    position_mode: PositionMode = PositionMode.Default
    deferred: dict[str, Deferred] = field(default_factory=dict)
    flushed: bool = False

    def defer(self, key: str, func: Deferred):
        """
        Postpone `func` until the element has its final size.
        Only the last function deferred under a key survives.
        """
        assert not self.flushed, BugError("Deferring on an already flushed context")
        self.deferred[key] = func

    def flush(self):
        """
        Runs all deferred functions exactly once
        """
        assert not self.flushed, BugError("A StyleContext can only be flushed once")
        self.flushed = True
        funcs = [*self.deferred.values()]
        self.deferred.clear()
        for func in funcs:
            func()
