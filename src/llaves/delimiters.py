"""Delimiter locator: where, if anywhere, does a marker sit in a fragment.

``has_marker_at`` builds a reusable predicate for one anchor mode:

- ``start``: the marker begins at offset 0
- ``end``: the marker's right delimiter is the fragment's final characters
- ``only``: the fragment is exactly one marker

Every mode re-validates the candidate span against the minimum marker
length (one content character, two when the first one is a ``.`` or ``#``
shorthand).

Example:
    >>> from llaves.config import AttrsConfig
    >>> ends_with_marker = has_marker_at("end", AttrsConfig())
    >>> ends_with_marker("header {.style-me}")
    True
    >>> ends_with_marker("{}")
    False

"""

from __future__ import annotations

import re
from collections.abc import Callable
from enum import Enum
from functools import lru_cache

from llaves.config import DEFAULT_CONFIG, AttrsConfig
from llaves.errors import MarkerPositionError


class MarkerPosition(Enum):
    """Anchor modes understood by has_marker_at."""

    START = "start"
    END = "end"
    ONLY = "only"


def _coerce_position(where: MarkerPosition | str | None) -> MarkerPosition:
    if isinstance(where, MarkerPosition):
        return where
    if not where:
        raise MarkerPositionError(where)
    try:
        return MarkerPosition(where)
    except ValueError:
        raise MarkerPositionError(where) from None


def is_valid_marker_span(span: str, config: AttrsConfig) -> bool:
    """Check a full ``{...}`` span against the minimum length rule."""
    min_length = config.min_marker_length
    first = span[len(config.left_delimiter) : len(config.left_delimiter) + 1]
    if first in (".", "#"):
        return len(span) >= min_length + 1
    return len(span) >= min_length


def has_marker_at(
    where: MarkerPosition | str | None,
    config: AttrsConfig | None = None,
) -> Callable[[str], bool]:
    """Build a predicate testing for a marker at the given anchor.

    Args:
        where: Anchor mode ("start", "end" or "only")
        config: Delimiters to look for

    Returns:
        Predicate over a text fragment

    Raises:
        MarkerPositionError: If where is missing or not a known mode
    """
    position = _coerce_position(where)
    if config is None:
        config = DEFAULT_CONFIG
    left = config.left_delimiter
    right = config.right_delimiter
    min_length = config.min_marker_length
    # Earliest offset of the right delimiter relative to the left one
    right_min_shift = min_length - len(right)

    def predicate(text: str) -> bool:
        if not text or not isinstance(text, str) or len(text) < min_length:
            return False

        if position is MarkerPosition.START:
            if not text.startswith(left):
                return False
            start = 0
            end = text.find(right, right_min_shift)
            if end == -1:
                return False
            after = end + len(right)
            next_char = text[after : after + 1]
            # {a}} is not a marker followed by "}"
            if next_char and next_char in right:
                return False

        elif position is MarkerPosition.END:
            start = text.rfind(left)
            if start == -1:
                return False
            end = text.find(right, start + right_min_shift)
            if end != len(text) - len(right):
                return False

        else:
            if not (text.startswith(left) and text.endswith(right)):
                return False
            start = 0
            end = len(text) - len(right)
            # A second marker inside the fragment means it is not "only" one
            if text.find(right, len(left)) != end:
                return False

        return is_valid_marker_span(text[start : end + len(right)], config)

    return predicate


@lru_cache(maxsize=32)
def _trailing_marker_re(left: str, right: str) -> re.Pattern[str]:
    start = re.escape(left)
    end = re.escape(right)
    return re.compile(rf"[ \n]?{start}[^{start}{end}]+{end}\Z")


def remove_marker(text: str, config: AttrsConfig | None = None) -> str:
    """Strip a trailing marker, plus one space or newline before it.

    Text without a trailing marker is returned unchanged.
    """
    if config is None:
        config = DEFAULT_CONFIG
    match = _trailing_marker_re(config.left_delimiter, config.right_delimiter).search(text)
    return text[: match.start()] if match else text


def strip_marker_tail(content: str, config: AttrsConfig) -> str:
    """Cut content at its last left delimiter and drop one trailing space."""
    trimmed = content[: content.rfind(config.left_delimiter)]
    return trimmed[:-1] if trimmed.endswith(" ") else trimmed


__all__ = [
    "MarkerPosition",
    "has_marker_at",
    "is_valid_marker_span",
    "remove_marker",
    "strip_marker_tail",
]
