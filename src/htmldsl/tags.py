"""Tag classification and text escaping.

Every element carries a small descriptor derived from its tag name. Inline
and void membership are fixed tables; tag names outside them (including
names the catalog never defines) behave as ordinary block elements with a
closing tag, so unknown tags degrade gracefully instead of failing.

Thread Safety:
All tables are immutable module-level constants. Functions are pure.

"""

from __future__ import annotations

from dataclasses import dataclass

# Rendered without a leading indent or trailing line break when pretty printing
INLINE_TAGS: frozenset[str] = frozenset(
    (
        "a", "abbr", "acronym", "b", "bdo", "big", "br", "button", "cite", "code",
        "dfn", "em", "i", "img", "input", "kbd", "label", "map", "object", "output",
        "q", "samp", "script", "select", "small", "span", "strong", "sub", "sup",
        "textarea", "time", "tt", "u", "var",
    )
)

# Never emit a closing tag
VOID_TAGS: frozenset[str] = frozenset(
    (
        "area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta",
        "param", "source", "track", "wbr",
    )
)

_ESCAPE_TABLE = str.maketrans(
    {
        "<": "&lt;",
        ">": "&gt;",
        "&": "&amp;",
        '"': "&quot;",
    }
)


def is_inline_tag(tag_name: str) -> bool:
    """Return True if the tag renders without surrounding line breaks."""
    return tag_name in INLINE_TAGS


def is_void_tag(tag_name: str) -> bool:
    """Return True if the tag never has a closing tag."""
    return tag_name in VOID_TAGS


def escape_text(s: str) -> str:
    """Escape HTML special characters in text content.

    Exactly four characters are replaced: <, >, & and ". Single quotes and
    everything else pass through untouched. The translation is a single pass
    over the string.

    Example:
        >>> escape_text('a < b & "c"')
        'a &lt; b &amp; &quot;c&quot;'
    """
    return s.translate(_ESCAPE_TABLE)


@dataclass(frozen=True, slots=True)
class TagSpec:
    """Descriptor for a concrete element type.

    Attributes:
        tag_name: The HTML tag name
        inline: Rendered without surrounding line breaks
        void: No closing tag is ever emitted
        has_text: The element carries a text slot

    """

    tag_name: str
    inline: bool
    void: bool
    has_text: bool

    @classmethod
    def for_tag(cls, tag_name: str, *, has_text: bool) -> TagSpec:
        """Build the descriptor for a tag name from the classification tables."""
        return cls(
            tag_name=tag_name,
            inline=is_inline_tag(tag_name),
            void=is_void_tag(tag_name),
            has_text=has_text,
        )


__all__ = [
    "INLINE_TAGS",
    "VOID_TAGS",
    "TagSpec",
    "escape_text",
    "is_inline_tag",
    "is_void_tag",
]
