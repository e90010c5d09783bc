import math

import pygame as pg

# fmt: off
from pgcss.types import Color, Coordinate, Vector2

# fmt: on

############################# Pygame related #############################


def new_surf(size: Coordinate) -> pg.Surface:
    """
    A fully transparent surface that is at least 0x0 big
    """
    w, h = size
    return pg.Surface((max(0, math.ceil(w)), max(0, math.ceil(h))), pg.SRCALPHA)


def text_surf(text: str, font: pg.font.Font, color: Color):
    """
    Renders text and handles transparent colors
    """
    color = Color(color)
    surf = font.render(text, True, color)
    if color.a != 255:
        surf.set_alpha(color.a)
    return surf


def tinted(surf: pg.Surface, color: Color) -> pg.Surface:
    """
    Multiplies every pixel of a copy of surf with color
    """
    if tuple(color) == (255, 255, 255, 255):
        return surf
    surf = surf.copy()
    surf.fill(color, special_flags=pg.BLEND_RGBA_MULT)
    return surf


def blit_transformed(
    dest: pg.Surface,
    surf: pg.Surface,
    position: Coordinate,
    pivot: Coordinate,
    scale: Coordinate = (1, 1),
    rotation: float = 0,
):
    """
    Blits `surf` onto `dest` so that the `pivot` of surf lands on `position`.
    The surface is scaled first and then rotated clock-wise (in degrees) around the pivot.
    """
    sx, sy = scale
    px, py = pivot
    if (sx, sy) != (1, 1):
        w, h = surf.get_size()
        size = round(abs(w * sx)), round(abs(h * sy))
        surf = pg.transform.flip(pg.transform.scale(surf, size), sx < 0, sy < 0)
        px, py = px * abs(sx), py * abs(sy)
        if sx < 0:
            px = size[0] - px
        if sy < 0:
            py = size[1] - py
    if rotation % 360:
        offset = Vector2(px, py) - Vector2(surf.get_size()) * 0.5
        surf = pg.transform.rotate(surf, -rotation)
        center = Vector2(position) - offset.rotate(rotation)
        rect = surf.get_rect(center=(round(center.x), round(center.y)))
    else:
        x, y = position
        rect = surf.get_rect(topleft=(round(x - px), round(y - py)))
    dest.blit(surf, rect)
    return rect
