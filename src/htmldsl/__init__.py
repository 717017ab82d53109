"""
htmldsl: build HTML for rich-text widgets in Python

Construct a tree of the small tag set a rich-text interpreter understands
(bold, italic, colored, sized and linked runs, paragraphs, lists, images)
and serialize it to a string with correct escaping and optional pretty
printing. Zero runtime dependencies.

Quick Start:
    >>> from htmldsl import html
    >>> from htmldsl.dsl import a, div, p
    >>> doc = html(lambda root: a(root, href="https://google.com", text="Google"))
    >>> doc.render()
    '<a href="https://google.com">Google</a>'

    >>> @html
    ... def page(root):
    ...     div(root, block=lambda d: p(d, "This paragraph is inside a div."))
    >>> str(page)
    '<div><p>This paragraph is inside a div.</p></div>'

Pretty printing:
    >>> page.render(pretty_print=True)
    '<div>\\n  <p>This paragraph is inside a div.</p>\\n</div>'

Installation:
    pip install htmldsl
"""

from htmldsl.attributes import Align, Attribute, Attributes, Direction, Style, Target
from htmldsl.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from htmldsl.document import HTML
from htmldsl.dsl import html
from htmldsl.element import HtmlElement, InlineTextElement, Node, TextElement
from htmldsl.elements import (
    A,
    B,
    Big,
    BlockQuote,
    Br,
    Cite,
    Del,
    Dfn,
    Div,
    Em,
    Font,
    H1,
    H2,
    H3,
    H4,
    H5,
    H6,
    Heading,
    I,
    Img,
    Li,
    P,
    S,
    Small,
    Span,
    Strike,
    Strong,
    Sub,
    Sup,
    Tt,
    U,
    Ul,
)
from htmldsl.errors import HtmlDslError, MissingAttributeError, SerializationError
from htmldsl.renderer import HtmlRenderer
from htmldsl.serialization import from_dict, from_json, to_dict, to_json
from htmldsl.tags import escape_text

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "html",
    "HTML",
    "escape_text",
    # Element model
    "Node",
    "HtmlElement",
    "TextElement",
    "InlineTextElement",
    # Elements
    "A",
    "B",
    "Big",
    "BlockQuote",
    "Br",
    "Cite",
    "Del",
    "Dfn",
    "Div",
    "Em",
    "Font",
    "H1",
    "H2",
    "H3",
    "H4",
    "H5",
    "H6",
    "Heading",
    "I",
    "Img",
    "Li",
    "P",
    "S",
    "Small",
    "Span",
    "Strike",
    "Strong",
    "Sub",
    "Sup",
    "Tt",
    "U",
    "Ul",
    # Attributes
    "Attribute",
    "Attributes",
    "Style",
    "Align",
    "Direction",
    "Target",
    # Renderer
    "HtmlRenderer",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Errors
    "HtmlDslError",
    "MissingAttributeError",
    "SerializationError",
]
