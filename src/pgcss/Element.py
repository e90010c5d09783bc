"""
Styleable elements.

Every kind of visual element (rectangles, circles, polygons, text and images)
exposes the same capabilities. The styling code only ever talks to a `Styleable`
and never asks for the concrete kind, except through `is_text` and `is_sprite`.
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from functools import singledispatch

import pygame as pg

from .config import g
from .types import Color, Coordinate, FloatRect, TextStyle, Vector2
from .utils import make_default, not_neg
from .utils.pg import blit_transformed, new_surf, text_surf

_white = (255, 255, 255)


class Styleable(ABC):
    """
    The capability set every styleable element has.

    Positions, origins and scales are Vector2s, rotations are in degrees (clock-wise).
    The text only setters do nothing by default.
    """

    type_name = "Styleable"

    def __init__(self, position: Coordinate = (0, 0)):
        self._position = Vector2(position)
        self._origin = Vector2(0, 0)
        self._scale = Vector2(1, 1)
        self._rotation = 0.0
        self._fill_color = Color(*_white)
        self._outline_color = Color(*_white)
        self._outline_thickness = 0.0

    def __repr__(self):
        return f"{self.type_name}(pos={tuple(self.position)}, size={tuple(self.size)})"

    ################### Geometry ###################
    @property
    def position(self) -> Vector2:
        return Vector2(self._position)

    @position.setter
    def position(self, pos: Coordinate):
        self._position = Vector2(pos)

    def move(self, delta: Coordinate):
        self.position = self._position + delta

    @property
    def origin(self) -> Vector2:
        return Vector2(self._origin)

    @origin.setter
    def origin(self, origin: Coordinate):
        self._origin = Vector2(origin)

    @property
    def scale(self) -> Vector2:
        return Vector2(self._scale)

    @scale.setter
    def scale(self, scale: Coordinate):
        self._scale = Vector2(scale)

    @property
    def rotation(self) -> float:
        return self._rotation

    @rotation.setter
    def rotation(self, degrees: float):
        self._rotation = float(degrees) % 360

    @property
    @abstractmethod
    def size(self) -> Vector2:
        """
        The visual size of the element
        """

    @size.setter
    def size(self, size: Coordinate):
        """
        Elements without an intrinsic size ignore this
        """

    @property
    def bounds(self) -> FloatRect:
        """
        The local bounds (before any transformation)
        """
        return FloatRect(0, 0, *self.size)

    ################### Colors ###################
    @property
    def fill_color(self) -> Color:
        return Color(self._fill_color)

    @fill_color.setter
    def fill_color(self, color: Color):
        self._fill_color = Color(color)

    @property
    def outline_color(self) -> Color:
        return Color(self._outline_color)

    @outline_color.setter
    def outline_color(self, color: Color):
        self._outline_color = Color(color)

    @property
    def outline_thickness(self) -> float:
        return self._outline_thickness

    @outline_thickness.setter
    def outline_thickness(self, thickness: float):
        self._outline_thickness = float(thickness)

    ################### Text only ###################
    def set_character_size(self, size: int):
        pass

    def set_letter_spacing(self, factor: float):
        pass

    def set_line_spacing(self, factor: float):
        pass

    def set_text_style(self, style: TextStyle):
        pass

    @property
    def is_text(self) -> bool:
        return False

    @property
    def is_sprite(self) -> bool:
        return False

    ################### Drawing ###################
    @abstractmethod
    def local_surface(self) -> tuple[pg.Surface, Vector2]:
        """
        Renders the untransformed element.
        Returns the surface and the local coordinate of its top left corner
        """

    def draw(self, surf: pg.Surface):
        local, offset = self.local_surface()
        return blit_transformed(
            surf,
            local,
            self._position,
            self._origin - offset,
            self._scale,
            self._rotation,
        )


class Shape(Styleable):
    """
    Shapes are filled and have an outline that is drawn outside of the shape
    """

    type_name = "Shape"

    @property
    def _margin(self):
        return not_neg(self._outline_thickness)

    def local_surface(self):
        m = self._margin
        w, h = self.bounds.size
        surf = new_surf((w + 2 * m, h + 2 * m))
        self.draw_shape(surf, Vector2(m, m))
        return surf, self.bounds.position - (m, m)

    @abstractmethod
    def draw_shape(self, surf: pg.Surface, offset: Vector2):
        ...


class RectElement(Shape):
    type_name = "RectangleShape"

    def __init__(self, size: Coordinate = (0, 0), position: Coordinate = (0, 0)):
        super().__init__(position)
        self._size = Vector2(size)

    @property
    def size(self):
        return Vector2(self._size)

    @size.setter
    def size(self, size: Coordinate):
        self._size = Vector2(size)

    def draw_shape(self, surf, offset):
        m = self._margin
        w, h = self._size
        if m:
            outer = pg.Rect(0, 0, *surf.get_size())
            pg.draw.rect(surf, self._outline_color, outer, math.ceil(m))
        pg.draw.rect(surf, self._fill_color, (*offset, math.ceil(w), math.ceil(h)))


class CircleElement(Shape):
    """
    A circle is sized by its diameter. Setting a size uses the smaller dimension.
    """

    type_name = "CircleShape"

    def __init__(
        self,
        radius: float = 0,
        position: Coordinate = (0, 0),
        point_count: int | None = None,
    ):
        super().__init__(position)
        self.radius = float(radius)
        self.point_count: int = make_default(point_count, g["circle_point_count"])

    @property
    def size(self):
        return Vector2(self.radius * 2, self.radius * 2)

    @size.setter
    def size(self, size: Coordinate):
        self.radius = not_neg(min(size)) / 2

    def points(self, radius: float, center: Coordinate):
        cx, cy = center
        n = max(3, self.point_count)
        return [
            (
                cx + radius * math.cos(2 * math.pi * i / n - math.pi / 2),
                cy + radius * math.sin(2 * math.pi * i / n - math.pi / 2),
            )
            for i in range(n)
        ]

    def draw_shape(self, surf, offset):
        if not self.radius:
            return
        m = self._margin
        center = offset + (self.radius, self.radius)
        if m:
            pg.draw.polygon(surf, self._outline_color, self.points(self.radius + m, center))
        pg.draw.polygon(surf, self._fill_color, self.points(self.radius, center))


class PolygonElement(Shape):
    """
    A convex polygon. It has no intrinsic size, so it is resized by scaling
    """

    type_name = "ConvexShape"

    def __init__(self, points: list[Coordinate], position: Coordinate = (0, 0)):
        super().__init__(position)
        self.points = [Vector2(p) for p in points]

    @property
    def bounds(self):
        return FloatRect.from_points(self.points)

    @property
    def size(self):
        w, h = self.bounds.size
        return Vector2(w * self._scale.x, h * self._scale.y)

    @size.setter
    def size(self, size: Coordinate):
        w, h = self.bounds.size
        if w > 0 and h > 0:
            tw, th = size
            self._scale = Vector2(tw / w, th / h)

    def draw_shape(self, surf, offset):
        if len(self.points) < 3:
            return
        shift = offset - self.bounds.position
        points = [p + shift for p in self.points]
        if m := self._margin:
            pg.draw.polygon(surf, self._outline_color, points, math.ceil(2 * m))
        pg.draw.polygon(surf, self._fill_color, points)


class TextElement(Styleable):
    """
    A single bounding box of text. Lines are separated by newlines.

    The size can't be set, the character size is the proxy for it.
    """

    type_name = "Text"

    def __init__(
        self,
        text: str = "",
        character_size: int | None = None,
        font: str | None = None,
        position: Coordinate = (0, 0),
    ):
        super().__init__(position)
        if not pg.font.get_init():
            pg.font.init()
        self.text = text
        self.font_name: str | None = make_default(font, g["default_font"])
        self.character_size: int = make_default(character_size, g["default_font_size"])
        self.letter_spacing = 1.0
        self.line_spacing = 1.0
        self.text_style = TextStyle.Regular
        self._font: pg.font.Font | None = None

    @property
    def font(self) -> pg.font.Font:
        if self._font is None:
            font = pg.font.Font(self.font_name, max(1, self.character_size))
            font.bold = bool(self.text_style & TextStyle.Bold)
            font.italic = bool(self.text_style & TextStyle.Italic)
            font.underline = bool(self.text_style & TextStyle.Underlined)
            font.strikethrough = bool(self.text_style & TextStyle.StrikeThrough)
            self._font = font
        return self._font

    def set_character_size(self, size: int):
        self.character_size = int(not_neg(size))
        self._font = None

    def set_letter_spacing(self, factor: float):
        self.letter_spacing = factor

    def set_line_spacing(self, factor: float):
        self.line_spacing = factor

    def set_text_style(self, style: TextStyle):
        self.text_style = style
        self._font = None

    @property
    def is_text(self):
        return True

    @property
    def lines(self):
        return self.text.split("\n")

    @property
    def _extra_spacing(self):
        # the space between two letters grows with the letter spacing factor
        return (self.letter_spacing - 1) * self.font.size(" ")[0] / 3

    def _line_width(self, line: str):
        return self.font.size(line)[0] + self._extra_spacing * not_neg(len(line) - 1)

    @property
    def _line_advance(self):
        return self.font.get_linesize() * self.line_spacing

    @property
    def size(self):
        if not self.text:
            return Vector2(0, 0)
        lines = self.lines
        return Vector2(
            max(map(self._line_width, lines)),
            self._line_advance * (len(lines) - 1) + self.font.get_height(),
        )

    @size.setter
    def size(self, size: Coordinate):
        pass

    def _draw_line(self, surf: pg.Surface, line: str, pos: Vector2, color: Color):
        if self.letter_spacing == 1:
            surf.blit(text_surf(line, self.font, color), pos)
            return
        x = pos.x
        for char in line:
            surf.blit(text_surf(char, self.font, color), (x, pos.y))
            x += self.font.size(char)[0] + self._extra_spacing

    def local_surface(self):
        m = not_neg(self._outline_thickness)
        w, h = self.size
        surf = new_surf((w + 2 * m, h + 2 * m))
        if not self.text:
            return surf, Vector2(-m, -m)
        offsets = [(dx, dy) for dx in (-m, 0, m) for dy in (-m, 0, m) if dx or dy] if m else []
        for i, line in enumerate(self.lines):
            pos = Vector2(m, m + i * self._line_advance)
            for offset in offsets:
                self._draw_line(surf, line, pos + offset, self._outline_color)
            self._draw_line(surf, line, pos, self._fill_color)
        return surf, Vector2(-m, -m)


@singledispatch
def wrap(obj) -> Styleable:
    """
    Get a Styleable for obj
    """
    raise TypeError(f"Can't style an object of type {type(obj).__name__!r}")


@wrap.register
def _(obj: Styleable):
    return obj


@wrap.register
def _(obj: pg.Rect):
    return RectElement(obj.size, obj.topleft)


@wrap.register
def _(obj: str):
    return TextElement(obj)
