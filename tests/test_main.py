import sys

import pygame as pg
import pytest

import pgcss
from pgcss import CSS, InitError, RectElement, TextElement
from pgcss.config import g


@pytest.fixture
def uninitialized(monkeypatch):
    monkeypatch.setattr(sys.modules["pgcss.main"], "_css", None)


def test_viewport_must_be_positive():
    with pytest.raises(InitError):
        CSS((0, 720))
    with pytest.raises(InitError):
        CSS((1280, -1))


def test_from_surface():
    css = CSS.from_surface(pg.Surface((640, 480)))
    assert css.viewport == (640, 480)
    assert repr(css) == "CSS(viewport=(640.0, 480.0))"


def test_style_without_init(uninitialized):
    with pytest.raises(InitError):
        pgcss.style(RectElement(), ["width: 10px"])


def test_init_and_style(uninitialized):
    css = pgcss.init((800, 600))
    assert isinstance(css, CSS)
    el = RectElement()
    pgcss.style(el, ["width: 50%", "height: 10vh"])
    assert el.size == (400, 60)

    pgcss.init(pg.Surface((100, 100)))
    pgcss.style(el, ["width: 50%"])
    assert el.size.x == 50


def test_style_with_parent_and_children(css):
    parent = RectElement((200, 100), (50, 50))
    child = RectElement()
    grandchild = RectElement((10, 10))
    css.style(child, ["width: 50%", "height: 50%", "left: 10%", "padding: 5px"],
              parent=parent, children=[grandchild])
    assert child.size == (100, 50)
    assert child.position == (70, 0)
    assert grandchild.position == (75, 5)


def test_style_returns_none(css):
    assert css.style(RectElement(), []) is None


def test_passthroughs(css):
    assert tuple(css.parse_color("#ff0000")) == (255, 0, 0, 255)
    assert tuple(pgcss.parse_color("blue")) == (0, 0, 255, 255)
    assert isinstance(css.wrap(pg.Rect(0, 0, 1, 1)), RectElement)


def test_set_config(monkeypatch):
    monkeypatch.setitem(g, "default_font_size", 30)
    pgcss.set_config(default_font_size=12, unknown=1, default_font=None)
    assert g["default_font_size"] == 12
    assert "unknown" not in g
    assert g["default_font"] is None
    assert TextElement("x").character_size == 12
