"""Marker lexer: turns ``{.class #id key=val}`` into ordered attribute pairs.

The scan is a single left-to-right pass over the fragment with no
backtracking. Malformed markers never raise: an unterminated marker simply
stops accumulating at the end of the string.

Example:
    >>> from llaves.config import AttrsConfig
    >>> parse_marker("{.a #b key=val}", 0, AttrsConfig())
    [('class', 'a'), ('id', 'b'), ('key', 'val')]

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from llaves.config import DEFAULT_CONFIG

if TYPE_CHECKING:
    from llaves.config import AttrsConfig

PAIR_SEPARATOR = " "
KEY_SEPARATOR = "="
CLASS_CHAR = "."
ID_CHAR = "#"
QUOTE_CHAR = '"'

# Characters never accepted inside an attribute key
_DISALLOWED_KEY_CHARS = frozenset("\t\n\f />\"'=")


def parse_marker(
    text: str,
    start: int,
    config: AttrsConfig | None = None,
) -> list[tuple[str, str]]:
    """Parse the marker whose left delimiter begins at ``start``.

    Args:
        text: Fragment holding the marker
        start: Index of the left delimiter within text
        config: Delimiters and attribute whitelist

    Returns:
        Ordered (key, value) pairs, filtered by ``allowed_attributes``.

    Rules, in priority order for each character:
        - the right delimiter ends the scan, flushing a pending key
        - ``=`` while reading a key switches to the value
        - a leading ``.`` starts a class (``..`` starts a css-module)
        - a leading ``#`` starts an id
        - ``"`` opens a quoted value when the value is empty, closes it
          when inside quotes; never copied
        - a space outside quotes flushes the pair
        - disallowed key characters are dropped
        - anything else extends the key or the value
    """
    if config is None:
        config = DEFAULT_CONFIG
    right = config.right_delimiter
    right_len = len(right)

    attrs: list[tuple[str, str]] = []
    key = ""
    value = ""
    parsing_key = True
    inside_quotes = False

    i = start + len(config.left_delimiter)
    length = len(text)
    while i < length:
        if text.startswith(right, i):
            if key:
                attrs.append((key, value))
            break

        char = text[i]
        i += 1

        if char == KEY_SEPARATOR and parsing_key:
            parsing_key = False
            continue

        if char == CLASS_CHAR and not key:
            if i < length and text[i] == CLASS_CHAR:
                key = "css-module"
                i += 1
            else:
                key = "class"
            parsing_key = False
            continue

        if char == ID_CHAR and not key:
            key = "id"
            parsing_key = False
            continue

        if char == QUOTE_CHAR and not value:
            inside_quotes = True
            continue

        if char == QUOTE_CHAR and inside_quotes:
            inside_quotes = False
            continue

        if char == PAIR_SEPARATOR and not inside_quotes:
            if not key:
                continue
            attrs.append((key, value))
            key = ""
            value = ""
            parsing_key = True
            continue

        if parsing_key:
            if char not in _DISALLOWED_KEY_CHARS:
                key += char
            continue

        value += char

    return filter_allowed(attrs, config)


def filter_allowed(pairs: list[tuple[str, str]], config: AttrsConfig) -> list[tuple[str, str]]:
    """Keep only pairs whose key passes the whitelist (empty = keep all)."""
    if not config.allowed_attributes:
        return pairs
    return [pair for pair in pairs if config.is_allowed(pair[0])]
