"""Cache a built tree on disk: JSON round-trip."""

from htmldsl import html
from htmldsl.dsl import h1, li, ul
from htmldsl.serialization import from_json, to_json


@html
def doc(root):
    h1(root, "Cached document")
    items = ul(root)
    li(items, "Restored with parent links")
    li(items, "Renders identically")


json_str = to_json(doc, indent=2)
restored = from_json(json_str)

print("Same HTML:", doc.render() == restored.render())
print("JSON length:", len(json_str), "chars")
