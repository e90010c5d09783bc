import pytest

from pgcss import Style
from pgcss.types import Align, Justify, PositionMode, TextStyle

viewport = (1280, 720)


def test_length():
    assert Style.length("50%", 200) == 100
    assert Style.length("12px", 0) == 12
    assert Style.length("12", 0) == 12
    assert Style.length("-10px", 0) == -10
    assert Style.length("1.5em", 0) == 1.5
    assert Style.length("2rem", 0) == 2
    assert Style.length("3pt", 0) == 3


def test_viewport_units():
    assert Style.length("10vw", 0, viewport) == 128
    assert Style.length("10vh", 0, viewport) == 72
    assert Style.length("10vmin", 0, viewport) == 72
    assert Style.length("10vmax", 0, viewport) == 128
    assert Style.length("10VW", 0, viewport) == 128


def test_length_fallbacks():
    assert Style.length("auto", 100) == 0
    assert Style.length("", 100) == 0
    assert Style.length("abc", 100) == 0
    # percentages refer to the reference, even if the viewport is given
    assert Style.length("10%", 50, viewport) == 5


def test_four_sides():
    assert Style.four_sides("10px", 0) == (10, 10, 10, 10)
    assert Style.four_sides("10px 20px", 0) == (10, 20, 10, 20)
    assert Style.four_sides("10px 20px 5px", 0) == (10, 20, 5, 20)
    assert Style.four_sides("10px 20px 5px 15px", 0) == (10, 20, 5, 15)
    assert Style.four_sides("10% 5px", 200) == (20, 5, 20, 5)
    assert Style.four_sides("", 0) == (0, 0, 0, 0)


def test_hex_colors():
    assert tuple(Style.color("#fff")) == (255, 255, 255, 255)
    assert tuple(Style.color("#f008")) == (255, 0, 0, 136)
    assert tuple(Style.color("#1e1e2e")) == (30, 30, 46, 255)
    assert tuple(Style.color("#ff000080")) == (255, 0, 0, 128)
    # invalid hex colors are white
    assert tuple(Style.color("#12345")) == (255, 255, 255, 255)
    assert tuple(Style.color("#zzzzzz")) == (255, 255, 255, 255)


def test_rgb_colors():
    assert tuple(Style.color("rgb(255, 128, 0)")) == (255, 128, 0, 255)
    assert tuple(Style.color("rgba(10,20,30,40)")) == (10, 20, 30, 40)
    assert tuple(Style.color("RGB(300, 0, 0)")) == (255, 0, 0, 255)
    assert tuple(Style.color("rgb(1)")) == (1, 0, 0, 255)


def test_named_colors():
    assert tuple(Style.color("red")) == (255, 0, 0, 255)
    assert tuple(Style.color(" Red ")) == (255, 0, 0, 255)
    assert tuple(Style.color("transparent")) == (0, 0, 0, 0)
    # not in the own table, but pygame knows it
    assert tuple(Style.color("aquamarine")) == (127, 255, 212, 255)
    assert tuple(Style.color("notacolor")) == (255, 255, 255, 255)


def test_keywords():
    assert Style.justify("space-between") is Justify.SpaceBetween
    assert Style.justify("Flex-End") is Justify.End
    assert Style.justify("flex-start") is Justify.Start
    assert Style.justify("nonsense") is Justify.Start
    assert Style.align("stretch") is Align.Stretch
    assert Style.align("center") is Align.Center
    assert Style.align("baseline") is Align.Start
    assert Style.position_mode("absolute") is PositionMode.Absolute
    assert Style.position_mode("CENTER") is PositionMode.Center
    assert Style.position_mode("static") is PositionMode.Default


def test_text_style():
    assert Style.text_style("bold underline") == TextStyle.Bold | TextStyle.Underlined
    assert Style.text_style("Italic") == TextStyle.Italic
    assert Style.text_style("line-through") == TextStyle.StrikeThrough
    assert Style.text_style("normal") == TextStyle.Regular


@pytest.mark.parametrize(
    "value, alpha",
    [("0.5", 127), ("1", 255), ("0", 0), ("128", 128), ("300", 255), ("-1", 0)],
)
def test_opacity(value, alpha):
    assert Style.opacity(value) == alpha
