"""Builder functions for constructing HTML trees.

Every builder takes the parent it attaches to as its first argument and
returns the new element, so attachment order is explicit:

    >>> from htmldsl.dsl import html, h3, br, p, strong, ul, li
    >>> @html
    ... def doc(root):
    ...     h3(root, "Android Versions")
    ...     br(root)
    ...     p(root, block=lambda el: strong(el, "The version history:"))
    ...     items = ul(root)
    ...     li(items, "Cupcake")
    ...     li(items, "Donut")
    >>> print(doc.render(pretty_print=True))
    <h3>Android Versions</h3>
    <br>
    <p><strong>The version history:</strong></p>
    <ul>
      <li>Cupcake</li>
      <li>Donut</li>
    </ul>

Each builder (1) constructs the element with its convenience attributes,
(2) calls ``block`` with the element if one is given, (3) attaches the
element to ``parent``. Attaching to an element sets the child's parent;
attaching to the document root does not.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeAlias, TypeVar

from htmldsl.attributes import Align, Target
from htmldsl.document import HTML
from htmldsl.element import HtmlElement, HtmlText, Node
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

E = TypeVar("E", bound=HtmlElement)
Block: TypeAlias = "Callable[[E], Any] | None"


def html(init: Callable[[HTML], Any] | None = None) -> HTML:
    """Start a tree.

    Args:
        init: Block called with the document root to add elements

    Returns:
        The populated document. Works as a decorator, binding the
        decorated name to the document.
    """
    return HTML.create(init)


def build(parent: Node, element: E, block: Block[E] = None) -> E:
    """Configure ``element`` with ``block``, then attach it to ``parent``."""
    if block is not None:
        block(element)
    parent.attach(element)
    return element


# region a


def a(
    parent: Node,
    href: str | None = None,
    target: Target | str | None = None,
    text: HtmlText = "",
    block: Block[A] = None,
) -> A:
    return build(parent, A(href, target, text), block)


# endregion

# region b


def b(parent: Node, text: HtmlText = "", block: Block[B] = None) -> B:
    return build(parent, B(text), block)


def big(parent: Node, text: HtmlText = "", block: Block[Big] = None) -> Big:
    return build(parent, Big(text), block)


def blockquote(parent: Node, text: HtmlText = "", block: Block[BlockQuote] = None) -> BlockQuote:
    return build(parent, BlockQuote(text), block)


def br(parent: Node, block: Block[Br] = None) -> Br:
    return build(parent, Br(), block)


# endregion

# region c


def cite(parent: Node, text: HtmlText = "", block: Block[Cite] = None) -> Cite:
    return build(parent, Cite(text), block)


# endregion

# region d


def del_(parent: Node, text: HtmlText = "", block: Block[Del] = None) -> Del:
    """Build a ``<del>`` element (``del`` is a Python keyword)."""
    return build(parent, Del(text), block)


def dfn(parent: Node, text: HtmlText = "", block: Block[Dfn] = None) -> Dfn:
    return build(parent, Dfn(text), block)


def div(parent: Node, align: Align | str | None = None, block: Block[Div] = None) -> Div:
    return build(parent, Div(align), block)


# endregion

# region e


def em(parent: Node, text: HtmlText = "", block: Block[Em] = None) -> Em:
    return build(parent, Em(text), block)


# endregion

# region f


def font(
    parent: Node,
    face: str | None = None,
    color: str | int | None = None,
    text: HtmlText = "",
    block: Block[Font] = None,
) -> Font:
    return build(parent, Font(face, color, text), block)


# endregion

# region h


def h1(parent: Node, text: HtmlText = "", block: Block[H1] = None) -> H1:
    return build(parent, H1(text), block)


def h2(parent: Node, text: HtmlText = "", block: Block[H2] = None) -> H2:
    return build(parent, H2(text), block)


def h3(parent: Node, text: HtmlText = "", block: Block[H3] = None) -> H3:
    return build(parent, H3(text), block)


def h4(parent: Node, text: HtmlText = "", block: Block[H4] = None) -> H4:
    return build(parent, H4(text), block)


def h5(parent: Node, text: HtmlText = "", block: Block[H5] = None) -> H5:
    return build(parent, H5(text), block)


def h6(parent: Node, text: HtmlText = "", block: Block[H6] = None) -> H6:
    return build(parent, H6(text), block)


# endregion

# region i


def i(parent: Node, text: HtmlText = "", block: Block[I] = None) -> I:
    return build(parent, I(text), block)


def img(parent: Node, src: str | None = None, block: Block[Img] = None) -> Img:
    return build(parent, Img(src), block)


# endregion

# region l


def li(parent: Node, text: HtmlText = "", block: Block[Li] = None) -> Li:
    return build(parent, Li(text), block)


# endregion

# region p


def p(parent: Node, text: HtmlText = "", block: Block[P] = None) -> P:
    return build(parent, P(text), block)


# endregion

# region s


def s(parent: Node, text: HtmlText = "", block: Block[S] = None) -> S:
    return build(parent, S(text), block)


def small(parent: Node, text: HtmlText = "", block: Block[Small] = None) -> Small:
    return build(parent, Small(text), block)


def span(parent: Node, block: Block[Span] = None) -> Span:
    return build(parent, Span(), block)


def strike(parent: Node, text: HtmlText = "", block: Block[Strike] = None) -> Strike:
    return build(parent, Strike(text), block)


def strong(parent: Node, text: HtmlText = "", block: Block[Strong] = None) -> Strong:
    return build(parent, Strong(text), block)


def sub(parent: Node, text: HtmlText = "", block: Block[Sub] = None) -> Sub:
    return build(parent, Sub(text), block)


def sup(parent: Node, text: HtmlText = "", block: Block[Sup] = None) -> Sup:
    return build(parent, Sup(text), block)


# endregion

# region t


def tt(parent: Node, text: HtmlText = "", block: Block[Tt] = None) -> Tt:
    return build(parent, Tt(text), block)


# endregion

# region u


def u(parent: Node, text: HtmlText = "", block: Block[U] = None) -> U:
    return build(parent, U(text), block)


def ul(parent: Node, *items: Li, block: Block[Ul] = None) -> Ul:
    """Build a list; ``items`` are attached before ``block`` runs."""
    return build(parent, Ul(*items), block)


# endregion


__all__ = [
    "a",
    "b",
    "big",
    "blockquote",
    "br",
    "build",
    "cite",
    "del_",
    "dfn",
    "div",
    "em",
    "font",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "html",
    "i",
    "img",
    "li",
    "p",
    "s",
    "small",
    "span",
    "strike",
    "strong",
    "sub",
    "sup",
    "tt",
    "u",
    "ul",
]
