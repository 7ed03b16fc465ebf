"""Logger factory for Llaves.

Every module logs under the ``llaves`` namespace, so one call configures
the whole pass:

    >>> import logging
    >>> logging.getLogger("llaves").setLevel(logging.DEBUG)

At DEBUG level the orchestrator reports each pattern that fires and the
catalog reports markers whose owning token could not be found. The library
installs no handlers.
"""

from __future__ import annotations

import logging

_ROOT = "llaves"


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for name, nested under ``llaves``.

    Names already inside the namespace (``__name__`` of a llaves module) are
    used as is.

    Example:
        >>> get_logger("patterns.catalog").name
        'llaves.patterns.catalog'
        >>> get_logger("llaves.core").debug("pattern %r matched at token %d", "tables", 4)
    """
    if name != _ROOT and not name.startswith(f"{_ROOT}."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
