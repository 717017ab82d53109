"""Element tree model for htmldsl.

Element Hierarchy:
HtmlElement (any tag, attributes + children)
└── TextElement (adds a text slot and the unsafe flag)
    └── InlineTextElement (text elements of inline tags)

Ownership:
A parent owns its children (strong references). The ``parent`` link is a
weak reference, so a child never keeps its parent alive and trees contain no
reference cycles. Elements are only linked by ``attach()``; construction
never sets a parent.

Thread Safety:
Trees are mutable and not synchronized. Build a tree in one thread, then
render it as often as needed; rendering never mutates it.

"""

from __future__ import annotations

import weakref
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, Self, TypeAlias, runtime_checkable

from htmldsl.attributes import Attribute, Attributes, AttributeValue, Style
from htmldsl.errors import MissingAttributeError
from htmldsl.tags import TagSpec
from htmldsl.utils.logger import get_logger

if TYPE_CHECKING:
    from htmldsl.renderer import HtmlRenderer

logger = get_logger(__name__)

# Content of a text element: a string, a number, another element, or nothing
HtmlText: TypeAlias = Any

# Ancestor walks stop here; trees built by the DSL are a few levels deep
MAX_ANCESTOR_DEPTH = 1000


class attribute_property:
    """Expose one attribute of an element as a read/write property.

    Reading returns the value or None; a required attribute raises
    MissingAttributeError instead. Assigning None removes the attribute.

    Example:
        >>> class A(InlineTextElement):
        ...     href = attribute_property("href", required=True)
    """

    def __init__(
        self,
        name: str,
        *,
        required: bool = False,
        convert: Callable[[Any], AttributeValue] | None = None,
        doc: str | None = None,
    ) -> None:
        self.name = name
        self.required = required
        self.convert = convert
        self.__doc__ = doc

    def __get__(self, instance: HtmlElement | None, owner: type) -> Any:
        if instance is None:
            return self
        if self.required:
            return instance._required(self.name)
        return instance.attributes.get(self.name)

    def __set__(self, instance: HtmlElement, value: Any) -> None:
        if self.convert is not None and value is not None:
            value = self.convert(value)
        instance.attr(self.name, value)


@runtime_checkable
class Node(Protocol):
    """Anything elements can be attached to: an element or the document root."""

    @property
    def children(self) -> tuple[HtmlElement, ...]: ...

    @property
    def parent(self) -> HtmlElement | None: ...

    def add(self, child: HtmlElement) -> bool: ...

    def remove(self, child: HtmlElement) -> bool: ...

    def attach(self, child: HtmlElement) -> HtmlElement: ...


class HtmlElement:
    """The base class for an HTML element.

    Concrete tags set ``TAG``. Instantiating HtmlElement directly with any
    tag name is allowed; names outside the inline and void tables render as
    block elements with a closing tag.

    Attributes:
        attributes: The element's attributes

    """

    TAG: ClassVar[str] = ""

    direction = attribute_property("dir", doc="Text direction, see Direction.")

    def __init__(self, tag_name: str | None = None) -> None:
        name = tag_name or self.TAG
        if not name:
            raise TypeError(f"{type(self).__name__} requires a tag name")
        self._tag_spec = TagSpec.for_tag(name, has_text=isinstance(self, TextElement))
        self.attributes = Attributes()
        self._children: list[HtmlElement] = []
        self._parent: weakref.ref[HtmlElement] | None = None
        self._style: Style | None = None

    # =========================================================================
    # Tag descriptor
    # =========================================================================

    @property
    def tag_spec(self) -> TagSpec:
        return self._tag_spec

    @property
    def tag_name(self) -> str:
        return self._tag_spec.tag_name

    @property
    def inline(self) -> bool:
        return self._tag_spec.inline

    @property
    def void(self) -> bool:
        return self._tag_spec.void

    # =========================================================================
    # Tree structure
    # =========================================================================

    @property
    def children(self) -> tuple[HtmlElement, ...]:
        return tuple(self._children)

    @property
    def parent(self) -> HtmlElement | None:
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, value: HtmlElement | None) -> None:
        self._parent = weakref.ref(value) if value is not None else None

    def add(self, child: HtmlElement) -> bool:
        """Append a child. Does not set ``child.parent``; see attach()."""
        self._children.append(child)
        return True

    def remove(self, child: HtmlElement) -> bool:
        """Remove a child by identity.

        Returns:
            True if the child was present and removed
        """
        for index, existing in enumerate(self._children):
            if existing is child:
                del self._children[index]
                return True
        return False

    def attach(self, child: HtmlElement) -> HtmlElement:
        """Make this element the child's parent and append it."""
        child.parent = self
        self.add(child)
        return child

    def ancestors(self) -> Iterator[HtmlElement]:
        """Yield parent, grandparent, ... up to the first unattached element."""
        node = self.parent
        depth = 0
        while node is not None:
            if depth >= MAX_ANCESTOR_DEPTH:
                logger.debug("Ancestor walk from <%s> stopped at depth %d", self.tag_name, depth)
                return
            yield node
            node = node.parent
            depth += 1

    # =========================================================================
    # Attributes
    # =========================================================================

    @property
    def style(self) -> Style:
        """View over the ``style`` attribute. Call it as ``style(key, value)``."""
        if self._style is None:
            self._style = Style(self)
        return self._style

    def attr(
        self,
        key: str | Attribute | tuple[str, AttributeValue],
        value: AttributeValue = None,
    ) -> bool:
        """Set or remove an attribute.

        Accepts an Attribute, a ``(key, value)`` pair, or a key and value.
        A value of None removes the attribute; enum members are unwrapped.

        Returns:
            True if the attributes changed
        """
        if isinstance(key, Attribute):
            return self.attributes.add(key)
        if isinstance(key, tuple):
            key, value = key
        return self.attributes.set(key, value)

    def _required(self, key: str) -> str:
        value = self.attributes.get(key)
        if value is None:
            raise MissingAttributeError(self.tag_name, key)
        return value

    # =========================================================================
    # Rendering
    # =========================================================================

    def _renderer(self) -> HtmlRenderer:
        from htmldsl.renderer import HtmlRenderer

        return HtmlRenderer([self], pretty=False)

    def html(self) -> str:
        """Render this element, its attributes and content as HTML."""
        return self._renderer().render()

    @property
    def outer_html(self) -> str:
        return self.html()

    @property
    def inner_html(self) -> str:
        """Render only the content between the opening and closing tag."""
        return self._renderer().render_inner(self)

    def __str__(self) -> str:
        return self.html()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tag_name={self.tag_name!r}, children={len(self._children)})"


class TextElement(HtmlElement):
    """An element with a text slot rendered before its children.

    ``text`` may be a string (escaped unless unsafe), a number or other value
    (stringified, never escaped), another element (rendered as markup), or
    None (nothing rendered).

    ``unsafe`` is inherited: if any ancestor text element is marked unsafe,
    so is this one.

    """

    def __init__(self, tag_name: str | None = None, text: HtmlText = "") -> None:
        super().__init__(tag_name)
        self._text: HtmlText = ""
        self._unsafe = False
        self.text = text

    @property
    def text(self) -> HtmlText:
        """The content placed between the opening and closing tag."""
        return self._text

    @text.setter
    def text(self, value: HtmlText) -> None:
        self._unsafe = False
        self._text = value
        if isinstance(value, HtmlElement):
            # An element built inside this one and then assigned as its text
            # must not also render as a child
            self.remove(value)
            value.parent = self

    @property
    def unsafe(self) -> bool:
        """True if text is emitted without escaping, here or by inheritance."""
        for ancestor in self.ancestors():
            if isinstance(ancestor, TextElement) and ancestor._unsafe:
                return True
        return self._unsafe

    @unsafe.setter
    def unsafe(self, value: bool) -> None:
        self._unsafe = value

    @property
    def marked_unsafe(self) -> bool:
        """This element's own flag, ignoring ancestors."""
        return self._unsafe

    def unsafe_text(self, content: HtmlText | Callable[[Self], Any]) -> Self:
        """Set the text and render it without escaping.

        Args:
            content: The text, or a block called with this element that sets
                the text and/or attaches children. The flag is set after the
                block runs, even if it raises.

        Returns:
            self for method chaining
        """
        if callable(content) and not isinstance(content, HtmlElement):
            try:
                content(self)
            finally:
                self._unsafe = True
        else:
            self.text = content
            self._unsafe = True
        return self


class InlineTextElement(TextElement):
    """Text element whose tag renders inline (a, b, em, sup, ...)."""


__all__ = [
    "MAX_ANCESTOR_DEPTH",
    "HtmlElement",
    "HtmlText",
    "InlineTextElement",
    "Node",
    "TextElement",
    "attribute_property",
]
