"""Concrete HTML elements understood by the rich-text consumer.

Each class fixes a tag name and declares its attribute surface. How the
consumer displays each tag:

    a[href,target]          hyperlink
    b, strong               bold
    i, em, dfn, cite        italic
    u                       underline
    del, strike, s          strikethrough
    sub, sup                baseline shift
    big, small              relative size (1.25x / 0.8x)
    font[face,color]        typeface / foreground color
    h1 .. h6                bold + relative size, paragraph break
    p, div, blockquote      paragraph, optional alignment
    ul, li                  bulleted list item
    img[src]                image resolved by the consumer from ``src``
    br                      line break

"""

from __future__ import annotations

from htmldsl.attributes import Align, Target
from htmldsl.element import (
    HtmlElement,
    HtmlText,
    InlineTextElement,
    TextElement,
    attribute_property,
)
from htmldsl.utils.colors import hex_color


def _color_value(color: str | int) -> str:
    if isinstance(color, int):
        return hex_color(color)
    return color


# =============================================================================
# Links and inline formatting
# =============================================================================


class A(InlineTextElement):
    """Hyperlink. ``href`` is required when read."""

    TAG = "a"

    href = attribute_property("href", required=True, doc="URL the link goes to.")
    target = attribute_property("target", doc="Where to open the linked document.")

    def __init__(
        self,
        href: str | None = None,
        target: Target | str | None = None,
        text: HtmlText = "",
    ) -> None:
        super().__init__(text=text)
        self.attr("href", href)
        self.attr("target", target)


class B(InlineTextElement):
    TAG = "b"

    def __init__(self, text: HtmlText = "") -> None:
        super().__init__(text=text)


class Big(InlineTextElement):
    TAG = "big"

    def __init__(self, text: HtmlText = "") -> None:
        super().__init__(text=text)


class Cite(InlineTextElement):
    TAG = "cite"

    def __init__(self, text: HtmlText = "") -> None:
        super().__init__(text=text)


class Dfn(InlineTextElement):
    TAG = "dfn"

    def __init__(self, text: HtmlText = "") -> None:
        super().__init__(text=text)


class Em(InlineTextElement):
    TAG = "em"

    def __init__(self, text: HtmlText = "") -> None:
        super().__init__(text=text)


class I(InlineTextElement):  # noqa: E742
    TAG = "i"

    def __init__(self, text: HtmlText = "") -> None:
        super().__init__(text=text)


class S(InlineTextElement):
    TAG = "s"

    def __init__(self, text: HtmlText = "") -> None:
        super().__init__(text=text)


class Small(InlineTextElement):
    TAG = "small"

    def __init__(self, text: HtmlText = "") -> None:
        super().__init__(text=text)


class Strong(InlineTextElement):
    TAG = "strong"

    def __init__(self, text: HtmlText = "") -> None:
        super().__init__(text=text)


class Sub(InlineTextElement):
    TAG = "sub"

    def __init__(self, text: HtmlText = "") -> None:
        super().__init__(text=text)


class Sup(InlineTextElement):
    TAG = "sup"

    def __init__(self, text: HtmlText = "") -> None:
        super().__init__(text=text)


class Tt(InlineTextElement):
    """Monospace text."""

    TAG = "tt"

    def __init__(self, text: HtmlText = "") -> None:
        super().__init__(text=text)


class U(InlineTextElement):
    TAG = "u"

    def __init__(self, text: HtmlText = "") -> None:
        super().__init__(text=text)


class Br(InlineTextElement):
    """Line break. Void: never closed, even if text or children are added."""

    TAG = "br"

    def __init__(self) -> None:
        super().__init__()


class Span(HtmlElement):
    TAG = "span"

    def __init__(self) -> None:
        super().__init__()


# =============================================================================
# Block elements
# =============================================================================


class BlockQuote(TextElement):
    TAG = "blockquote"

    def __init__(self, text: HtmlText = "") -> None:
        super().__init__(text=text)


class Del(TextElement):
    TAG = "del"

    def __init__(self, text: HtmlText = "") -> None:
        super().__init__(text=text)


class Strike(TextElement):
    TAG = "strike"

    def __init__(self, text: HtmlText = "") -> None:
        super().__init__(text=text)


class Div(TextElement):
    TAG = "div"

    align = attribute_property("align", doc='"center", "left", "right" or None.')

    def __init__(self, align: Align | str | None = None, text: HtmlText = "") -> None:
        super().__init__(text=text)
        self.attr("align", align)


class Font(TextElement):
    """Typeface and foreground color for the enclosed text.

    ``color`` accepts a color name, a hex code, or a packed integer color
    which is stored as ``#RRGGBB``.
    """

    TAG = "font"

    face = attribute_property("face", doc='Font family, e.g. "monospace" or "serif".')
    color = attribute_property("color", convert=_color_value, doc="Hex code or color name.")

    def __init__(
        self,
        face: str | None = None,
        color: str | int | None = None,
        text: HtmlText = "",
    ) -> None:
        super().__init__(text=text)
        self.face = face
        self.color = color


class P(TextElement):
    TAG = "p"

    def __init__(self, text: HtmlText = "") -> None:
        super().__init__(text=text)


class Li(TextElement):
    TAG = "li"

    def __init__(self, text: HtmlText = "") -> None:
        super().__init__(text=text)


class Ul(HtmlElement):
    """Bulleted list. Items passed to the constructor are attached in order."""

    TAG = "ul"

    def __init__(self, *items: Li) -> None:
        super().__init__()
        for item in items:
            self.attach(item)


class Img(HtmlElement):
    """Image. The consumer resolves ``src`` through its image callback."""

    TAG = "img"

    src = attribute_property("src", doc="Image source passed to the consumer.")

    def __init__(self, src: str | None = None) -> None:
        super().__init__()
        self.src = src


# =============================================================================
# Headings
# =============================================================================


class Heading(TextElement):
    """Base for h1 .. h6."""

    LEVEL = 0

    def __init__(self, text: HtmlText = "") -> None:
        super().__init__(f"h{self.LEVEL}", text=text)

    @property
    def level(self) -> int:
        return self.LEVEL


class H1(Heading):
    LEVEL = 1


class H2(Heading):
    LEVEL = 2


class H3(Heading):
    LEVEL = 3


class H4(Heading):
    LEVEL = 4


class H5(Heading):
    LEVEL = 5


class H6(Heading):
    LEVEL = 6


# Registry of element type names to classes for deserialization
ELEMENT_TYPES: dict[str, type[HtmlElement]] = {
    cls.__name__: cls
    for cls in (
        A, B, Big, BlockQuote, Br, Cite, Del, Dfn, Div, Em, Font,
        H1, H2, H3, H4, H5, H6, I, Img, Li, P, S, Small, Span,
        Strike, Strong, Sub, Sup, Tt, U, Ul,
    )
}


__all__ = [
    "ELEMENT_TYPES",
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
]
