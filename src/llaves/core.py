"""Orchestrator for the curly attribute pass.

Walks the token stream once by ascending index. At each index every pattern
of the catalog is tested in order; a pattern that matches runs its
transform, and patterns flagged ``retry`` are tested again at the same
index before the catalog moves on.

Transforms splice tokens in and out of the stream, so the loop re-reads the
stream length on every step instead of caching it.

Usage:
    >>> from llaves import CurlyAttributes, Token
    >>> pass_ = CurlyAttributes()
    >>> tokens = [
    ...     Token("paragraph_open", "p", 1, block=True),
    ...     Token("inline", level=1, content="text {.a}", block=True,
    ...           children=[Token("text", content="text {.a}")]),
    ...     Token("paragraph_close", "p", -1, block=True),
    ... ]
    >>> pass_(tokens)[0].attrs
    [('class', 'a')]

Thread Safety:
    The pass keeps no state between calls; each call owns the token list it
    is given. One CurlyAttributes instance may serve many threads.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from llaves.config import DEFAULT_CONFIG, AttrsConfig
from llaves.patterns.catalog import build_patterns
from llaves.patterns.engine import match_pattern
from llaves.utils.logger import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from llaves.patterns.engine import Pattern
    from llaves.tokens import Token

logger = get_logger(__name__)


def apply_attributes(
    tokens: list[Token],
    config: AttrsConfig | None = None,
    patterns: Sequence[Pattern] | None = None,
) -> list[Token]:
    """Run the pass over a fully tokenized stream, mutating it in place.

    Args:
        tokens: Block token stream with inline children materialized
        config: Options (defaults to ``{`` / ``}`` delimiters, no whitelist)
        patterns: Precompiled catalog; built from config when omitted

    Returns:
        The same list, for chaining
    """
    if config is None:
        config = DEFAULT_CONFIG
    if patterns is None:
        patterns = build_patterns(config)

    i = 0
    while i < len(tokens):
        p = 0
        while p < len(patterns):
            pattern = patterns[p]
            result = match_pattern(tokens, i, pattern, config)
            if result.matched:
                logger.debug("pattern %r matched at token %d", pattern.name, i)
                pattern.transform(tokens, i, result.child_index)
                if pattern.retry:
                    continue
            p += 1
        i += 1
    return tokens


class CurlyAttributes:
    """Reusable curly attribute pass bound to one configuration.

    The catalog is compiled once in ``__init__`` and reused for every
    document.

    Usage:
        >>> pass_ = CurlyAttributes(AttrsConfig(left_delimiter="[", right_delimiter="]"))
        >>> pass_.config.left_delimiter
        '['

    """

    __slots__ = ("_config", "_patterns")

    def __init__(self, config: AttrsConfig | None = None) -> None:
        self._config = config if config is not None else DEFAULT_CONFIG
        self._patterns = build_patterns(self._config)

    @property
    def config(self) -> AttrsConfig:
        return self._config

    @property
    def patterns(self) -> tuple[Pattern, ...]:
        return self._patterns

    def __call__(self, tokens: list[Token]) -> list[Token]:
        """Apply the pass to tokens in place and return them."""
        return apply_attributes(tokens, self._config, self._patterns)
