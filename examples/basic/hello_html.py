"""Build and render an HTML tree in a few lines."""

from htmldsl import html
from htmldsl.dsl import a, br, h3, li, p, strong, ul


@html
def doc(root):
    h3(root, "Android Versions")
    br(root)
    p(root, block=lambda el: strong(el, "The version history:"))
    items = ul(root)
    for name in ("Cupcake", "Donut", "Eclair"):
        li(items, name)
    a(root, "https://www.android.com/", text="android.com")


print(doc.render())
print()
print(doc.render(pretty_print=True))
