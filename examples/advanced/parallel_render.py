"""Render 1000 independent trees in parallel with per-thread config."""

from concurrent.futures import ThreadPoolExecutor

from htmldsl import RenderConfig, html, render_config_context
from htmldsl.dsl import li, p, ul


def build(i):
    def init(root):
        p(root, f"Document {i}")
        items = ul(root)
        li(items, f"item {i}")

    return html(init)


def render_pretty(doc):
    with render_config_context(RenderConfig(pretty_print=True, indent="\t")):
        return doc.render()


docs = [build(i) for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(render_pretty, docs))

print(f"Rendered {len(results)} documents in parallel")
print(results[-1])
