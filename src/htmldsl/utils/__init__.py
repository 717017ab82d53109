"""Utility modules for htmldsl.

Provides:
- colors: hex_color for packed integer colors
- logger: get_logger for logging
"""

from htmldsl.utils.colors import hex_color
from htmldsl.utils.logger import get_logger

__all__ = [
    "get_logger",
    "hex_color",
]
