"""Logger namespace for htmldsl.

Every module logs under the ``htmldsl`` logger. The package root carries a
NullHandler and nothing else: applications decide where records go.

htmldsl only logs at DEBUG level (render entry points, capped ancestor
walks, ignored serialization fields). Enable it with:

    >>> import logging
    >>> logging.getLogger("htmldsl").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging

LOGGER_NAME = "htmldsl"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the htmldsl namespace.

    Module names already under the package (``htmldsl.element``) are used
    as is; anything else becomes a child, so ``get_logger("demo")`` is
    ``htmldsl.demo``.
    """
    if name != LOGGER_NAME and not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
