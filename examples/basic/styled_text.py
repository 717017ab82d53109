"""Alignment, colors and inline style for a rich-text consumer."""

from htmldsl import Align, html
from htmldsl.dsl import div, font, p, span

RED = 0xFFFF0000


@html
def doc(root):
    container = div(root, Align.CENTER)
    p(container, "Centered paragraph")
    font(container, face="monospace", color=RED, text="Red monospace")
    p(root, "Struck through").style.strikethrough().color(0x1DA1F2)
    span(root, block=lambda el: el.style("background-color", "#FFFF00"))


print(doc.render(pretty_print=True))
