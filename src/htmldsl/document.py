"""Document root for htmldsl trees.

HTML holds the top-level elements of a tree. It is never rendered as a tag
and never becomes anyone's parent: elements attached to it keep
``parent is None``, so nothing is inherited from the root.

Example:
    >>> from htmldsl.dsl import html, a, div, p
    >>> doc = html(lambda root: a(root, href="https://google.com", text="Google"))
    >>> doc.render()
    '<a href="https://google.com">Google</a>'

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from htmldsl.config import get_render_config
from htmldsl.element import HtmlElement
from htmldsl.renderer import HtmlRenderer


class HTML:
    """Root container for building HTML for a rich-text consumer."""

    __slots__ = ("_elements",)

    def __init__(self) -> None:
        self._elements: list[HtmlElement] = []

    @classmethod
    def create(cls, init: Callable[[HTML], Any] | None = None) -> HTML:
        """Create a document and run ``init`` with it to add elements.

        Args:
            init: Block called with the new document

        Returns:
            The populated document
        """
        doc = cls()
        if init is not None:
            init(doc)
        return doc

    @property
    def children(self) -> tuple[HtmlElement, ...]:
        return tuple(self._elements)

    @property
    def parent(self) -> None:
        return None

    def add(self, child: HtmlElement) -> bool:
        self._elements.append(child)
        return True

    def remove(self, child: HtmlElement) -> bool:
        """Remove a top-level element by identity."""
        for index, existing in enumerate(self._elements):
            if existing is child:
                del self._elements[index]
                return True
        return False

    def attach(self, child: HtmlElement) -> HtmlElement:
        """Append a top-level element. The element's parent stays None."""
        self.add(child)
        return child

    def render(self, pretty_print: bool | None = None) -> str:
        """Render the document as HTML.

        Args:
            pretty_print: Indent and add line breaks. None uses the active
                RenderConfig's ``pretty_print``.

        Returns:
            The HTML source with trailing whitespace removed
        """
        if pretty_print is None:
            pretty_print = get_render_config().pretty_print
        return HtmlRenderer(self._elements, pretty=pretty_print).render().rstrip()

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[HtmlElement]:
        return iter(tuple(self._elements))

    def __str__(self) -> str:
        return self.render(False)

    def __repr__(self) -> str:
        return f"HTML(children={len(self._elements)})"


__all__ = ["HTML"]
