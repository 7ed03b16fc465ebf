"""Token navigation utilities for the curly attribute pass.

Resolves which token a marker belongs to. A marker sits physically next to
one token but often applies to another: the opening tag of the span it
follows, or the opening tag of the outermost block it ends.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from llaves.tokens import Nesting

if TYPE_CHECKING:
    from collections.abc import Sequence

    from llaves.tokens import Token

LIST_OPEN_TYPES = frozenset({"bullet_list_open", "ordered_list_open"})


def matching_opening_token(tokens: Sequence[Token], i: int) -> Token | None:
    """Find the opening mate of the token at index i.

    Returns:
        - None for a softbreak (it owns nothing)
        - the token itself when it is self-closing
        - the nearest earlier ``X_open`` at the same level for an ``X_close``
        - None when no such token exists
    """
    if i < 0 or i >= len(tokens):
        return None
    token = tokens[i]
    if token.type == "softbreak":
        return None
    if token.nesting == Nesting.SELF_CLOSING:
        return token

    level = token.level
    open_type = token.type.replace("_close", "_open")
    for idx in range(i, -1, -1):
        candidate = tokens[idx]
        if candidate.type == open_type and candidate.level == level:
            return candidate
    return None


def block_owner(tokens: Sequence[Token], i: int) -> Token | None:
    """Find the block a marker at the end of ``tokens[i]`` applies to.

    Starts at the token after i, skips forward over the run of closing
    tokens that follows, and resolves the opening mate of the last one.
    For ``> quote {.c}`` the run is paragraph_close, blockquote_close, so
    the blockquote gets the attributes.
    """
    idx = i + 1
    while idx + 1 < len(tokens) and tokens[idx + 1].nesting == Nesting.CLOSING:
        idx += 1
    return matching_opening_token(tokens, idx)


def enclosing_list_open(tokens: Sequence[Token], item_index: int) -> Token | None:
    """Walk back from a list item to the list token that opened it.

    Args:
        tokens: Block token stream
        item_index: Index of a ``list_item_open`` token

    Returns:
        The nearest earlier bullet/ordered list opener, or None.
    """
    idx = item_index
    while idx - 1 >= 0 and tokens[idx - 1].type not in LIST_OPEN_TYPES:
        idx -= 1
    if idx - 1 < 0:
        return None
    return tokens[idx - 1]
