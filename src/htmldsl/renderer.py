"""HTML renderer using StringBuilder pattern.

Serializes element trees depth-first: opening tag and attributes on entry,
then text content, then children, then the closing tag on exit. The walk
uses an explicit stack, so arbitrarily deep trees render.

Pretty Printing:
Block elements start on their own line, indented by one unit per nesting
level, and are followed by a line break. Inline elements are written where
they fall. A closing tag is indented onto its own line only when the last
thing written was a nested block rather than text.

Thread Safety:
All per-render state is encapsulated in RenderContext, created fresh for each
render() call. An HtmlRenderer can be shared between threads and rendering
never mutates the tree.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TypeAlias

from htmldsl.config import get_render_config
from htmldsl.element import HtmlElement, TextElement
from htmldsl.stringbuilder import StringBuilder
from htmldsl.tags import escape_text

logger = logging.getLogger(__name__)


class _Phase(Enum):
    ENTER = auto()  # open tag, write text, schedule content
    TEXT_DONE = auto()  # element text finished rendering
    EXIT = auto()  # close tag


_Frame: TypeAlias = tuple[HtmlElement, _Phase]


@dataclass(slots=True)
class RenderContext:
    """Per-render mutable state.

    Attributes:
        sb: Output buffer
        level: Current nesting depth
        at_line_start: Nothing has been written on the current line yet

    """

    sb: StringBuilder = field(default_factory=StringBuilder)
    level: int = 0
    at_line_start: bool = True


class HtmlRenderer:
    """Render elements to HTML.

    Usage:
        >>> renderer = HtmlRenderer([P("Hello")])
        >>> renderer.render()
        '<p>Hello</p>'

        >>> HtmlRenderer(doc.children, pretty=True).render()

    """

    __slots__ = ("_elements", "_pretty", "_indent")

    def __init__(
        self,
        elements: Iterable[HtmlElement],
        *,
        pretty: bool = False,
        indent: str | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            elements: Root elements, rendered in order
            pretty: Indent block elements and put each on its own line
            indent: Indentation unit per level (defaults to the active
                RenderConfig's indent)
        """
        self._elements = tuple(elements)
        self._pretty = pretty
        self._indent = indent if indent is not None else get_render_config().indent

    @property
    def pretty(self) -> bool:
        return self._pretty

    def render(self) -> str:
        """Render all root elements to an HTML string."""
        logger.debug("Rendering %d element(s), pretty=%s", len(self._elements), self._pretty)
        ctx = RenderContext()
        for element in self._elements:
            self._walk([(element, _Phase.ENTER)], ctx)
        return ctx.sb.build()

    def render_inner(self, element: HtmlElement) -> str:
        """Render the content of ``element`` without its own tags."""
        ctx = RenderContext()
        stack: list[_Frame] = []
        self._push_content(element, stack, ctx)
        self._walk(stack, ctx)
        return ctx.sb.build()

    # =========================================================================
    # Tree walk
    # =========================================================================

    def _walk(self, stack: list[_Frame], ctx: RenderContext) -> None:
        # Explicit stack: tree depth is not limited by the interpreter's
        # recursion limit
        while stack:
            element, phase = stack.pop()
            match phase:
                case _Phase.ENTER:
                    self._render_start(element, ctx)
                    stack.append((element, _Phase.EXIT))
                    self._push_content(element, stack, ctx)
                case _Phase.TEXT_DONE:
                    ctx.at_line_start = False
                case _Phase.EXIT:
                    self._render_end(element, ctx)

    def _render_start(self, element: HtmlElement, ctx: RenderContext) -> None:
        if self._pretty and not element.inline:
            self._write_indent(ctx)
        ctx.level += 1
        ctx.sb.open_tag(element.tag_name, element.attributes.render())

    def _push_content(
        self, element: HtmlElement, stack: list[_Frame], ctx: RenderContext
    ) -> None:
        """Write the text of ``element`` and schedule its children.

        Frames are pushed in reverse: an element used as text is rendered
        first, then the line-start flag is cleared, then the children follow.
        """
        for child in reversed(element.children):
            stack.append((child, _Phase.ENTER))
        if not isinstance(element, TextElement):
            return
        text = element.text
        match text:
            case HtmlElement():
                stack.append((element, _Phase.TEXT_DONE))
                stack.append((text, _Phase.ENTER))
                return
            case str():
                if text:
                    ctx.sb.append(text if element.unsafe else escape_text(text))
            case None:
                pass
            case _:
                ctx.sb.append(str(text))
        ctx.at_line_start = False

    def _render_end(self, element: HtmlElement, ctx: RenderContext) -> None:
        ctx.level -= 1
        if ctx.at_line_start:
            self._write_indent(ctx)
        if not element.void:
            ctx.sb.close_tag(element.tag_name)
        if not element.inline and self._pretty and not ctx.at_line_start:
            ctx.sb.newline()
            ctx.at_line_start = True

    def _write_indent(self, ctx: RenderContext) -> None:
        if not self._pretty:
            return
        if not ctx.at_line_start:
            ctx.sb.newline()
        ctx.sb.indent(self._indent, ctx.level)
        ctx.at_line_start = False


__all__ = [
    "HtmlRenderer",
    "RenderContext",
]
