"""
A centered card with a button and a floating action button in the corner
"""

import pygame as pg

import pgcss
from pgcss import CircleElement, RectElement, TextElement

pg.init()
screen = pg.display.set_mode((1280, 720))
pg.display.set_caption("pgcss - card")
clock = pg.time.Clock()

css = pgcss.init(screen)

card = RectElement()
css.style(
    card,
    [
        "width: 90%",
        "height: 90%",
        "background-color: #1e1e2e",
        "border-color: #89b4fa",
        "border-width: 2px",
        "position: center",
    ],
)

title = TextElement("Hello pgcss")
css.style(title, ["color: #cdd6f4", "font-size: 48px", "font-style: bold"])

btn = RectElement()
css.style(btn, ["width: 20%", "height: 48px", "background-color: #ffffff"], parent=card)

# the card layouts its children
css.style(
    card,
    [
        "padding: 32px 24px",
        "display: flex",
        "flex-direction: column",
        "justify-content: center",
        "align-items: center",
        "gap: 24px",
    ],
    children=[title, btn],
)

fab = CircleElement()
css.style(
    fab,
    [
        "size: 52px",
        "background-color: #a6e3a1",
        "border-color: #40a02b",
        "border-width: 2px",
        "position: absolute",
        "right: 24px",
        "bottom: 24px",
    ],
)

running = True
while running:
    for event in pg.event.get():
        if event.type == pg.QUIT:
            running = False
    screen.fill((17, 17, 27))
    for element in (card, title, btn, fab):
        element.draw(screen)
    pg.display.flip()
    clock.tick(60)

pg.quit()
