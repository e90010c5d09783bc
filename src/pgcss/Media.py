"""
Image elements (sprites)
"""

from weakref import WeakValueDictionary

import pygame as pg

from .config import logger
from .Element import Styleable, wrap
from .types import Color, Coordinate, FloatRect, Vector2
from .utils.pg import tinted

surf_cache = WeakValueDictionary[str, pg.Surface]()


def load_surf(path: str) -> pg.Surface:
    """
    Loads a surf. To save RAM surfs are cached in a surf_cache
    """
    if (surf := surf_cache.get(path)) is None:
        surf_cache[path] = surf = pg.image.load(path)
        logger.debug(f"Loaded Image: {path!r}")
    return surf


class ImageElement(Styleable):
    """
    An image is resized by scaling it.
    Its fill color is a tint that is multiplied with every pixel, it has no outline.
    """

    type_name = "Sprite"

    def __init__(self, surf: pg.Surface, position: Coordinate = (0, 0)):
        super().__init__(position)
        self.surf = surf

    @classmethod
    def from_file(cls, path: str, position: Coordinate = (0, 0)):
        return cls(load_surf(path), position)

    @property
    def is_sprite(self):
        return True

    @property
    def size(self):
        w, h = self.surf.get_size()
        return Vector2(w * self._scale.x, h * self._scale.y)

    @size.setter
    def size(self, size: Coordinate):
        w, h = self.surf.get_size()
        if w > 0 and h > 0:
            tw, th = size
            self._scale = Vector2(tw / w, th / h)

    @property
    def bounds(self):
        return FloatRect(0, 0, *self.surf.get_size())

    @property
    def outline_color(self):
        return Color(0, 0, 0, 0)

    @outline_color.setter
    def outline_color(self, color: Color):
        pass

    @property
    def outline_thickness(self):
        return 0.0

    @outline_thickness.setter
    def outline_thickness(self, thickness: float):
        pass

    def local_surface(self):
        return tinted(self.surf, self._fill_color), Vector2(0, 0)


@wrap.register
def _(obj: pg.Surface):
    return ImageElement(obj)
