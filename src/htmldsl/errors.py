"""Exception classes for htmldsl.

Provides standardized exceptions for error handling throughout htmldsl.
Rendering itself never raises: every tree the builders can produce has a
serialized form. Errors are limited to programmer mistakes (reading a
required attribute that was never set) and malformed serialized trees.
"""

from __future__ import annotations


class HtmlDslError(Exception):
    """Base exception for all htmldsl errors.
    
    Subclass this for specific error categories.
    """

    pass


class MissingAttributeError(HtmlDslError, LookupError):
    """A required attribute was read before it was set.
    
    Raised by element properties that declare their attribute as required,
    such as the ``href`` of an anchor.
    """

    def __init__(self, tag_name: str, attribute: str) -> None:
        """Initialize missing attribute error.
        
        Args:
            tag_name: Tag of the element the attribute was read from
            attribute: Name of the missing attribute
        """
        self.tag_name = tag_name
        self.attribute = attribute
        super().__init__(f"<{tag_name}>: required attribute '{attribute}' is not set")


class SerializationError(HtmlDslError, ValueError):
    """Error converting a serialized tree back into elements.
    
    Raised when a payload names an unknown element type or is missing
    required fields.
    """

    def __init__(self, message: str, node_type: str | None = None) -> None:
        """Initialize serialization error.
        
        Args:
            message: Description of the problem
            node_type: The ``_type`` discriminator involved (optional)
        """
        self.node_type = node_type
        prefix = f"{node_type}: " if node_type else ""
        super().__init__(f"{prefix}{message}")
