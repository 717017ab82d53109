"""Element attributes and the derived ``style`` attribute.

An Attribute is an immutable name/value pair. Attributes is the ordered
collection an element owns: at most one attribute per key is present, and
setting a key that already exists removes the old pair before appending the
new one, so a replaced attribute moves to the end of the rendered list.

Style is a view over the ``style`` attribute. There is no structured style
map: the concatenated ``key:value;`` string is the source of truth, appends
never deduplicate, and reads scan the string.

Example:
    >>> attrs = Attributes()
    >>> attrs["href"] = "https://google.com"
    >>> attrs["target"] = Target.BLANK
    >>> attrs.render()
    'href="https://google.com" target="_blank"'

"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, MutableSet
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, TypeAlias

from htmldsl.utils.colors import hex_color

if TYPE_CHECKING:
    from htmldsl.element import HtmlElement

AttributeValue: TypeAlias = "str | Enum | None"


@dataclass(frozen=True, slots=True)
class Attribute:
    """HTML attribute. A name/value pair.

    Equality and hashing use both the key and the value.

    Attributes:
        key: The name of the attribute
        value: The attribute value, rendered without escaping

    """

    key: str
    value: str

    def __str__(self) -> str:
        return f'{self.key}="{self.value}"'


class Align(Enum):
    """Paragraph-level text alignment."""

    CENTER = "center"
    RIGHT = "right"
    LEFT = "left"


class Direction(Enum):
    """Text direction for the ``dir`` global attribute."""

    RTL = "rtl"
    LTR = "ltr"


class Target(Enum):
    """Where an anchor opens the linked document."""

    SELF = "_self"  # same frame (default)
    BLANK = "_blank"
    PARENT = "_parent"
    TOP = "_top"


def attribute_value(value: AttributeValue) -> str | None:
    """Unwrap enum members to their string value."""
    if isinstance(value, Enum):
        return value.value
    return value


class Attributes(MutableSet[Attribute]):
    """The attributes of an element.

    Attributes are treated as a set keyed by name: there is only ever one
    value associated with an attribute key. Names are case sensitive; use
    lower-case names.

    Membership accepts either an Attribute (matches key and value) or a str
    (matches the key only).

    """

    __slots__ = ("_attributes",)

    def __init__(self) -> None:
        self._attributes: dict[str, Attribute] = {}

    @classmethod
    def _from_iterable(cls, it: Iterable[Attribute]) -> Attributes:
        # Used by the set operators (|, &, -, ^); the last value per key wins
        attributes = cls()
        for attribute in it:
            attributes.add(attribute)
        return attributes

    def set(self, key: str, value: AttributeValue) -> bool:
        """Set an attribute, replacing any existing value for ``key``.

        Args:
            key: The attribute name
            value: The attribute value, or None to remove the attribute

        Returns:
            True if the collection changed
        """
        resolved = attribute_value(value)
        if resolved is None:
            return self.remove(key)
        return self.add(Attribute(key, resolved))

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get an attribute value by name, or ``default`` if absent."""
        attribute = self._attributes.get(key)
        return attribute.value if attribute is not None else default

    def remove(self, key: str) -> bool:  # type: ignore[override]
        """Remove an attribute by name.

        Returns:
            True if an attribute with ``key`` existed and was removed
        """
        return self._attributes.pop(key, None) is not None

    def add(self, attribute: Attribute) -> bool:  # type: ignore[override]
        """Add an attribute, replacing any attribute with the same key.

        Returns:
            False if the identical pair was already present
        """
        if self._attributes.get(attribute.key) == attribute:
            return False
        self._attributes.pop(attribute.key, None)
        self._attributes[attribute.key] = attribute
        return True

    def discard(self, attribute: Attribute) -> None:
        """Remove the pair if present; a different value for the key is kept."""
        if self._attributes.get(attribute.key) == attribute:
            del self._attributes[attribute.key]

    def clear(self) -> None:
        self._attributes.clear()

    def render(self) -> str:
        """Render as space separated ``key="value"`` pairs in insertion order."""
        return " ".join(str(attribute) for attribute in self._attributes.values())

    def __setitem__(self, key: str, value: AttributeValue) -> None:
        self.set(key, value)

    def __getitem__(self, key: str) -> str:
        return self._attributes[key].value

    def __delitem__(self, key: str) -> None:
        del self._attributes[key]

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item in self._attributes
        if isinstance(item, Attribute):
            return self._attributes.get(item.key) == item
        return False

    def __iter__(self) -> Iterator[Attribute]:
        return iter(tuple(self._attributes.values()))

    def __len__(self) -> int:
        return len(self._attributes)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Attributes({list(self._attributes.values())!r})"


class Style:
    """Create, append to and read the ``style`` attribute of an element.

    The ``style`` attribute is how the consumer receives alignment,
    background color, foreground color and strikethrough.

    Appending a key that is already present keeps the earlier fragment;
    both fragments are rendered and reads return the first one.

    Example:
        >>> style = Style(h1)
        >>> style.align(Align.CENTER).background(0xFFFF0000)
        >>> style.render()
        'align:center;background-color:#FF0000;'

    """

    STYLE = "style"
    ALIGN = "align"
    BACKGROUND_COLOR = "background-color"
    COLOR = "color"
    TEXT_DECORATION = "text-decoration"
    TEXT_ALIGN = "text-align"
    LINE_THROUGH = "line-through"

    _PATTERN = re.compile(r"(-?[_a-zA-Z]+[_a-zA-Z0-9-]*)\s*:\s*([^;]+);?")

    __slots__ = ("_element",)

    def __init__(self, element: HtmlElement) -> None:
        self._element = element

    def set(self, key: str, value: AttributeValue) -> Style:
        """Append ``key:value;`` to the style attribute.

        A None value appends nothing; earlier declarations are never removed.
        """
        resolved = attribute_value(value)
        if resolved is None:
            return self
        attributes = self._element.attributes
        current = attributes.get(self.STYLE, "")
        attributes.set(self.STYLE, f"{current}{key}:{resolved};")
        return self

    def get(self, name: str) -> str | None:
        """Get the first value declared for a CSS property, or None."""
        style = self._element.attributes.get(self.STYLE)
        if style is None:
            return None
        for match in self._PATTERN.finditer(style):
            if match.group(1) == name:
                return match.group(2)
        return None

    def align(self, align: Align) -> Style:
        return self.set(self.ALIGN, align)

    def text_align(self, align: Align) -> Style:
        return self.set(self.TEXT_ALIGN, align)

    def background(self, color: int) -> Style:
        """Set ``background-color`` from a packed integer color."""
        return self.set(self.BACKGROUND_COLOR, hex_color(color))

    def color(self, color: int) -> Style:
        """Set the foreground ``color`` from a packed integer color."""
        return self.set(self.COLOR, hex_color(color))

    def strikethrough(self) -> Style:
        return self.set(self.TEXT_DECORATION, self.LINE_THROUGH)

    def render(self) -> str:
        return self._element.attributes.get(self.STYLE, "")

    def __setitem__(self, key: str, value: AttributeValue) -> None:
        self.set(key, value)

    def __getitem__(self, name: str) -> str | None:
        return self.get(name)

    def __call__(self, key: str, value: AttributeValue) -> Style:
        return self.set(key, value)

    def __str__(self) -> str:
        return self.render()


__all__ = [
    "Align",
    "Attribute",
    "AttributeValue",
    "Attributes",
    "Direction",
    "Style",
    "Target",
    "attribute_value",
]
