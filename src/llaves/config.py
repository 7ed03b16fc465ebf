"""Configuration for the curly attribute pass.

One AttrsConfig is built per pass (or per CurlyAttributes instance) and
passed by reference to every component: lexer, delimiter locator, pattern
engine and catalog. There is no process-wide mutable default.

Usage:
    >>> from llaves.config import AttrsConfig
    >>> config = AttrsConfig(left_delimiter="{{", right_delimiter="}}")
    >>> config.left_delimiter
    '{{'

    >>> # From framework options (markdown-it-attrs names are accepted too)
    >>> AttrsConfig.from_dict({"leftDelimiter": "["}).left_delimiter
    '['

Thread Safety:
    AttrsConfig is frozen. Share one instance across threads freely.

"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from llaves.errors import ConfigError

if TYPE_CHECKING:
    from llaves.tokens import Token

AllowedAttribute = str | re.Pattern[str]

# markdown-it-attrs option names -> AttrsConfig field names
_CAMEL_CASE_ALIASES = {
    "leftDelimiter": "left_delimiter",
    "rightDelimiter": "right_delimiter",
    "allowedAttributes": "allowed_attributes",
}


@dataclass(frozen=True, slots=True)
class AttrsConfig:
    """Immutable options for the curly attribute pass.

    Attributes:
        left_delimiter: Opening marker delimiter
        right_delimiter: Closing marker delimiter
        allowed_attributes: Whitelist of attribute keys, as exact strings or
            compiled patterns searched against the key. Empty means every
            key is allowed.
        ignore: Optional predicate over a token. Pattern tests anchored on a
            token for which it returns true never match.

    """

    left_delimiter: str = "{"
    right_delimiter: str = "}"
    allowed_attributes: tuple[AllowedAttribute, ...] = ()
    ignore: Callable[[Token], bool] | None = None

    def __post_init__(self) -> None:
        for name in ("left_delimiter", "right_delimiter"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ConfigError(f"{name} must be a non-empty string, got {value!r}")

        allowed = self.allowed_attributes
        if allowed is None:
            allowed = ()
        elif isinstance(allowed, (str, re.Pattern)):
            allowed = (allowed,)
        allowed = tuple(allowed)
        for entry in allowed:
            if not isinstance(entry, (str, re.Pattern)):
                raise ConfigError(
                    f"allowed_attributes entries must be str or re.Pattern, got {entry!r}"
                )
        # Frozen dataclass: normalise lists to tuples in place
        object.__setattr__(self, "allowed_attributes", allowed)

        if self.ignore is not None and not callable(self.ignore):
            raise ConfigError(f"ignore must be callable, got {self.ignore!r}")

    @property
    def min_marker_length(self) -> int:
        """Shortest bracketed span that can hold a marker (one content char)."""
        return len(self.left_delimiter) + 1 + len(self.right_delimiter)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> AttrsConfig:
        """Create AttrsConfig from a dictionary.

        Accepts both the field names and the camelCase names used by
        markdown-it-attrs. Unknown keys are silently ignored.

        Args:
            config_dict: Mapping of option names to values

        Returns:
            New AttrsConfig instance

        Example:
            >>> config = AttrsConfig.from_dict({
            ...     "rightDelimiter": "]",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.right_delimiter
            ']'

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered: dict[str, Any] = {}
        for key, value in config_dict.items():
            key = _CAMEL_CASE_ALIASES.get(key, key)
            if key in valid_fields:
                filtered[key] = value
        return cls(**filtered)

    def is_allowed(self, key: str) -> bool:
        """Check a parsed attribute key against the whitelist."""
        return is_allowed_attribute(key, self.allowed_attributes)


def is_allowed_attribute(key: str, allowed: Iterable[AllowedAttribute]) -> bool:
    """Return True if key matches any whitelist entry.

    An empty whitelist allows everything.
    """
    allowed = tuple(allowed)
    if not allowed:
        return True
    for entry in allowed:
        if isinstance(entry, re.Pattern):
            if entry.search(key):
                return True
        elif key == entry:
            return True
    return False


# Module-level default config (reused, never recreated)
DEFAULT_CONFIG: AttrsConfig = AttrsConfig()


__all__ = [
    "AllowedAttribute",
    "AttrsConfig",
    "DEFAULT_CONFIG",
    "is_allowed_attribute",
]
