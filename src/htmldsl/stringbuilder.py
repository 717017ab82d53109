"""StringBuilder for O(n) markup accumulation.

Fragments go into a list that is joined once in build(), so rendering a
tree costs one copy of the output instead of one per concatenation.

Besides raw appends the builder knows the handful of markup shapes the
renderer writes: opening tags with an attribute string, closing tags and
indentation runs.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Markup accumulator.

    Usage:
        >>> sb = StringBuilder()
        >>> sb.open_tag("a", 'href="https://google.com"').append("Google").close_tag("a")
        >>> sb.build()
        '<a href="https://google.com">Google</a>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append raw text. Empty strings are skipped.

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def open_tag(self, tag_name: str, attributes: str = "") -> StringBuilder:
        """Append ``<tag_name attributes>``; the space is omitted without attributes."""
        if attributes:
            self._parts.append(f"<{tag_name} {attributes}>")
        else:
            self._parts.append(f"<{tag_name}>")
        return self

    def close_tag(self, tag_name: str) -> StringBuilder:
        self._parts.append(f"</{tag_name}>")
        return self

    def newline(self) -> StringBuilder:
        self._parts.append("\n")
        return self

    def indent(self, unit: str, level: int) -> StringBuilder:
        """Append ``unit`` repeated ``level`` times."""
        return self.append(unit * level)

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def clear(self) -> StringBuilder:
        self._parts.clear()
        return self

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
