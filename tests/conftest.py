"""Shared fixtures for Llaves tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from markdown_it import MarkdownIt

from llaves.plugins.markdown_it import attrs_plugin
from llaves.tokens import Token


@pytest.fixture
def md() -> MarkdownIt:
    """CommonMark parser with the curly attribute pass enabled."""
    return MarkdownIt().use(attrs_plugin)


@pytest.fixture
def md_table() -> MarkdownIt:
    """CommonMark + GFM tables with the curly attribute pass enabled."""
    return MarkdownIt("commonmark").enable("table").use(attrs_plugin)


@pytest.fixture
def paragraph() -> Callable[..., list[Token]]:
    """Build a paragraph_open / inline / paragraph_close triple.

    Children default to a single text token holding the content.
    """

    def build(content: str, children: list[Token] | None = None, level: int = 0) -> list[Token]:
        if children is None:
            children = [Token("text", content=content)]
        return [
            Token("paragraph_open", "p", 1, level=level, block=True),
            Token("inline", level=level + 1, content=content, block=True, children=children),
            Token("paragraph_close", "p", -1, level=level, block=True),
        ]

    return build
