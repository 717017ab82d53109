"""Escaped text by default, raw markup on request."""

from htmldsl import html
from htmldsl.dsl import div, p

user_input = "1 < 2 & \"quotes\""
trusted = "<b>already</b> <i>formatted</i>"


def raw_section(el):
    # Everything below an unsafe container is emitted raw
    p(el, "<u>inherited</u>")


@html
def doc(root):
    p(root, user_input)
    p(root).unsafe_text(trusted)
    div(root).unsafe_text(raw_section)


print(doc.render(pretty_print=True))
