"""Color helpers.

Example:
    >>> from htmldsl.utils.colors import hex_color
    >>> hex_color(0xFF1DA1F2)
    '#1DA1F2'
"""

from __future__ import annotations


def hex_color(color: int) -> str:
    """Convert an integer color to a ``#RRGGBB`` code.

    Only the low 24 bits are used, so ARGB integers (alpha in the top byte)
    and negative packed colors both map to their RGB part.

    Args:
        color: Packed color integer

    Returns:
        Upper-case hex color code
    """
    return f"#{color & 0xFFFFFF:06X}"
