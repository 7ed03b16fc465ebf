"""Exception classes for Llaves.

Only configuration and pattern-definition mistakes raise. Irregular markers
or unbalanced tokens in a document are absorbed by the pass and left as
literal text.
"""

from __future__ import annotations


class LlavesError(Exception):
    """Base exception for all Llaves errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(LlavesError, ValueError):
    """Invalid option value passed to AttrsConfig or a config-driven helper."""

    pass


class MarkerPositionError(ConfigError):
    """Delimiter locator built without a usable anchor mode.

    Raised at setup time, before any document is processed.
    """

    def __init__(self, where: object) -> None:
        """Initialize with the rejected anchor value.

        Args:
            where: The value passed as the anchor mode (may be None)
        """
        self.where = where
        if not where:
            message = 'Parameter `where` not passed. Should be "start", "end" or "only".'
        else:
            message = f'Unknown marker position {where!r}. Should be "start", "end" or "only".'
        super().__init__(message)


class PatternError(LlavesError):
    """Malformed pattern definition.

    Raised when a pattern test uses a predicate of unsupported shape. This
    can never be caused by document content.
    """

    def __init__(self, pattern_name: str | None, message: str) -> None:
        """Initialize pattern error.

        Args:
            pattern_name: Name of the offending pattern, if known
            message: Description of the problem
        """
        self.pattern_name = pattern_name
        prefix = f"Pattern '{pattern_name}': " if pattern_name else ""
        super().__init__(f"{prefix}{message}")
