"""Render defaults held in a ContextVar.

HTML.render() without an explicit flag, and HtmlRenderer without an explicit
indent, read their defaults from the active RenderConfig. Each thread (and
each asyncio task) sees its own value, so one caller switching to pretty
output never changes what another caller renders.

Usage:
    from htmldsl.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(pretty_print=True)):
        source = doc.render()  # indented, one block per line

    set_render_config(RenderConfig(pretty_print=True, indent="\\t"))
    try:
        source = doc.render()
    finally:
        reset_render_config()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Defaults for rendering.

    Attributes:
        pretty_print: Used by HTML.render() when no flag is passed
        indent: Written once per nesting level when pretty printing

    """

    pretty_print: bool = False
    indent: str = "  "

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "RenderConfig":
        """Build a config from a plain mapping, e.g. a loaded settings file.

        Keys that are not RenderConfig fields are dropped. An integer
        ``indent`` is read as a number of spaces.

        Example:
            >>> RenderConfig.from_dict({"pretty_print": True, "indent": 4, "theme": "x"})
            RenderConfig(pretty_print=True, indent='    ')

        """
        names = {f.name for f in fields(cls)}
        values = {k: v for k, v in config_dict.items() if k in names}
        indent = values.get("indent")
        if isinstance(indent, int) and not isinstance(indent, bool):
            values["indent"] = " " * indent
        return cls(**values)


# Shared default instance
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "htmldsl_render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Return the RenderConfig active in the current context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Make ``config`` active for the current context."""
    _render_config.set(config)


def reset_render_config() -> None:
    """Restore the default RenderConfig for the current context."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Activate ``config`` for the duration of a ``with`` block.

    Whatever was active before is restored on exit, also when the block
    raises.

    Example:
        >>> with render_config_context(RenderConfig(pretty_print=True)):
        ...     source = doc.render()

    """
    token = _render_config.set(config)
    try:
        yield
    finally:
        _render_config.reset(token)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
