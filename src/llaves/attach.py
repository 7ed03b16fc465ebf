"""Attach parsed attribute pairs to a token."""

from __future__ import annotations

from typing import Protocol, TypeVar

# Keys whose values accumulate into one space-joined entry
JOINED_KEYS = frozenset({"class", "css-module"})


class AttrTarget(Protocol):
    """Anything with markdown-it's attribute mutation calls.

    Satisfied by ``llaves.tokens.Token`` and ``markdown_it.token.Token``.
    """

    def attrPush(self, attrData: tuple[str, str]) -> None: ...  # noqa: N802, N803

    def attrJoin(self, key: str, value: str) -> None: ...  # noqa: N802


T = TypeVar("T", bound=AttrTarget)


def add_attrs(pairs: list[tuple[str, str]], token: T) -> T:
    """Append pairs to token's attributes.

    ``class`` and ``css-module`` are merged into the existing entry; every
    other key is pushed as a new entry, even when it repeats.

    Returns:
        The same token, for chaining
    """
    for key, value in pairs:
        if key in JOINED_KEYS:
            token.attrJoin(key, value)
        else:
            token.attrPush((key, value))
    return token
