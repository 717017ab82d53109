"""JSON round-trip for htmldsl trees.

Converts element trees to/from JSON-compatible dicts. Useful for:
- Caching built trees between runs
- Debugging and inspection

This is not an HTML parser: the input is the dict form produced by
to_dict(), never markup. All JSON output is deterministic (sorted keys).

Example:
    from htmldsl.serialization import to_json, from_json

    source = to_json(doc)
    restored = from_json(source)
    assert restored.render() == doc.render()

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from typing import Any

from htmldsl.attributes import Attribute
from htmldsl.document import HTML
from htmldsl.element import HtmlElement, InlineTextElement, TextElement
from htmldsl.elements import ELEMENT_TYPES
from htmldsl.errors import SerializationError
from htmldsl.utils.logger import get_logger

logger = get_logger(__name__)

# Generic element classes, rebuilt from their tag_name
_GENERIC_TYPES: dict[str, type[HtmlElement]] = {
    "HtmlElement": HtmlElement,
    "TextElement": TextElement,
    "InlineTextElement": InlineTextElement,
}

_KNOWN_FIELDS = frozenset(("_type", "tag_name", "attributes", "children", "text", "unsafe"))


def to_dict(node: HTML | HtmlElement) -> dict[str, Any]:
    """Convert a document or element to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Text elements also carry ``text`` and their own ``unsafe`` flag.

    Args:
        node: Document root or any element.

    Returns:
        Dict with ``_type`` and the node's fields.

    """
    if isinstance(node, HTML):
        return {"_type": "HTML", "children": [to_dict(child) for child in node.children]}

    result: dict[str, Any] = {
        "_type": type(node).__name__,
        "tag_name": node.tag_name,
        "attributes": [[attribute.key, attribute.value] for attribute in node.attributes],
        "children": [to_dict(child) for child in node.children],
    }
    if isinstance(node, TextElement):
        result["text"] = _serialize_text(node.text)
        result["unsafe"] = node.marked_unsafe
    return result


def _serialize_text(value: Any) -> Any:
    if isinstance(value, HtmlElement):
        return to_dict(value)
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


def from_dict(data: dict[str, Any]) -> HTML | HtmlElement:
    """Rebuild a document or element from a dict.

    Children are linked with attach(), so parent links are restored.

    Args:
        data: Dict as produced by to_dict().

    Returns:
        HTML document or element.

    Raises:
        SerializationError: If ``_type`` is missing or unknown, or a field
            has the wrong shape (``children`` or ``attributes`` not a list,
            an attribute that is not a pair of strings).

    """
    if not isinstance(data, dict):
        raise SerializationError(f"Expected a dict, got {type(data).__name__}")
    type_name = data.get("_type")
    if type_name is None:
        raise SerializationError("Missing '_type' field in serialized node")
    if not isinstance(type_name, str):
        raise SerializationError(f"'_type' must be a string, got {type(type_name).__name__}")

    if type_name == "HTML":
        doc = HTML()
        for child in _list_field(data, "children", type_name):
            doc.attach(_element_from_dict(child))
        return doc

    unknown = set(data) - _KNOWN_FIELDS
    if unknown:
        logger.debug("Ignoring unknown fields %s on %s", sorted(unknown), type_name)

    element = _new_element(type_name, data)
    element.attributes.clear()
    for pair in _list_field(data, "attributes", type_name):
        element.attributes.add(_attribute_from_pair(pair, type_name))

    if isinstance(element, TextElement):
        text = data.get("text", "")
        element.text = _element_from_dict(text) if isinstance(text, dict) else text
        element.unsafe = bool(data.get("unsafe", False))

    for child in _list_field(data, "children", type_name):
        element.attach(_element_from_dict(child))
    return element


def _list_field(data: dict[str, Any], name: str, type_name: str) -> list[Any]:
    value = data.get(name, [])
    if not isinstance(value, list):
        raise SerializationError(
            f"Field '{name}' must be a list, got {type(value).__name__}", type_name
        )
    return value


def _attribute_from_pair(pair: Any, type_name: str) -> Attribute:
    if not (
        isinstance(pair, list)
        and len(pair) == 2
        and isinstance(pair[0], str)
        and isinstance(pair[1], str)
    ):
        raise SerializationError(
            f"Malformed attribute {pair!r}, expected [name, value] strings", type_name
        )
    return Attribute(pair[0], pair[1])


def _element_from_dict(data: Any) -> HtmlElement:
    node = from_dict(data)
    if isinstance(node, HTML):
        raise SerializationError("A document cannot be nested inside another node", "HTML")
    return node


def _new_element(type_name: str, data: dict[str, Any]) -> HtmlElement:
    element_cls = ELEMENT_TYPES.get(type_name)
    if element_cls is not None:
        return element_cls()

    generic_cls = _GENERIC_TYPES.get(type_name)
    if generic_cls is None:
        raise SerializationError("Unknown element type", type_name)
    tag_name = data.get("tag_name")
    if not tag_name:
        raise SerializationError("Missing 'tag_name' field", type_name)
    return generic_cls(tag_name)


def to_json(node: HTML | HtmlElement, *, indent: int | None = None) -> str:
    """Serialize a document or element to a JSON string.

    Output is deterministic (sorted keys).

    Args:
        node: Document or element to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(node), sort_keys=True, indent=indent)


def from_json(data: str) -> HTML | HtmlElement:
    """Deserialize a document or element from a JSON string.

    Raises:
        SerializationError: If the JSON is invalid or doesn't describe a tree.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e.msg}") from e
    return from_dict(raw)


__all__ = [
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
]
