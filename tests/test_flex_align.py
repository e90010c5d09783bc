from pgcss.element.layout.flex_align import (align_by, center, end, justify_by,
                                             space_around, space_between,
                                             space_evenly, start)
from pgcss.types import Align, Justify


def test_start():
    assert start(30, 3) == (0, 0)


def test_end():
    assert end(30, 3) == (30, 0)


def test_center():
    assert center(30, 3) == (15, 0)


def test_space_between():
    assert space_between(30, 3) == (0, 15)
    assert space_between(30, 1) == (0, 0)


def test_space_around():
    assert space_around(30, 3) == (5, 10)


def test_space_evenly():
    assert space_evenly(30, 2) == (10, 10)


def test_justify_by():
    assert justify_by(Justify.SpaceBetween, 30, 3) == (0, 15)
    assert justify_by(Justify.Start, -10, 3) == (0, 0)


def test_align_by():
    assert align_by(Align.Start, 10, 100, 20) == 10
    assert align_by(Align.End, 10, 100, 20) == 90
    assert align_by(Align.Center, 10, 100, 20) == 50
    assert align_by(Align.Stretch, 10, 100, 100) == 10
