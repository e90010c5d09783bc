import pytest

from pgcss import RectElement


def make_children(n=3, size=(50, 20)):
    return [RectElement(size) for _ in range(n)]


def layout(css, rules, children, size=(300, 100), position=(0, 0)):
    parent = RectElement(size, position)
    css.style(parent, rules, children=children)
    return parent


def xs(children):
    return [c.position.x for c in children]


def ys(children):
    return [c.position.y for c in children]


@pytest.mark.parametrize(
    "justify, expected",
    [
        ("flex-start", [0, 50, 100]),
        ("flex-end", [150, 200, 250]),
        ("center", [75, 125, 175]),
        ("space-between", [0, 125, 250]),
        ("space-around", [25, 125, 225]),
        ("space-evenly", [37.5, 125, 212.5]),
    ],
)
def test_justify_content(css, justify, expected):
    children = make_children()
    layout(css, ["display: flex", f"justify-content: {justify}"], children)
    assert xs(children) == pytest.approx(expected)
    assert ys(children) == [0, 0, 0]


def test_space_between_touches_both_edges(css):
    children = make_children(4, (30, 10))
    parent = layout(
        css, ["display: flex", "justify-content: space-between", "padding: 10px"], children
    )
    first, last = children[0], children[-1]
    assert first.position.x == 10
    assert last.position.x + last.size.x == pytest.approx(parent.size.x - 10)


@pytest.mark.parametrize(
    "align, expected",
    [("flex-start", 0), ("flex-end", 80), ("center", 40), ("stretch", 0)],
)
def test_align_items(css, align, expected):
    children = make_children()
    layout(css, ["display: flex", f"align-items: {align}"], children)
    assert ys(children) == [expected] * 3


def test_stretch(css):
    children = make_children()
    layout(css, ["display: flex", "align-items: stretch", "padding: 10px"], children)
    assert all(c.size == (50, 80) for c in children)


def test_column(css):
    children = make_children()
    layout(
        css,
        ["display: flex", "flex-direction: column", "align-items: center"],
        children,
    )
    assert ys(children) == [0, 20, 40]
    assert xs(children) == [125] * 3


def test_gap_and_padding(css):
    children = make_children()
    layout(css, ["display: flex", "padding: 10px", "gap: 5px"], children)
    assert xs(children) == [10, 65, 120]
    assert ys(children) == [10] * 3


def test_overflow(css):
    children = make_children(size=(150, 20))
    layout(css, ["display: flex"], children)
    assert xs(children) == [0, 150, 300]


def test_positioned_parent(css):
    children = make_children()
    parent = layout(
        css,
        ["width: 300px", "height: 100px", "position: center", "display: flex"],
        children,
        size=(0, 0),
    )
    assert parent.position == (490, 310)
    assert xs(children) == [490, 540, 590]
    assert ys(children) == [310] * 3


def test_offset_layout(css):
    """Without flex the children are only moved into the content box"""
    child = RectElement((10, 10), (5, 5))
    layout(css, ["padding: 10px"], [child], position=(100, 50))
    assert child.position == (115, 65)
    assert child.size == (10, 10)


def test_no_children(css):
    parent = layout(css, ["display: flex"], [])
    assert parent.size == (300, 100)
