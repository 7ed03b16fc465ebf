"""markdown-it-py integration.

Registers the curly attribute pass as a core rule that runs right after
inline tokenization, so every inline child stream is materialized before
the first marker scan, and before rendering.

Usage:
    >>> from markdown_it import MarkdownIt
    >>> from llaves.plugins.markdown_it import attrs_plugin
    >>> md = MarkdownIt().use(attrs_plugin)
    >>> md.render("asdf *asd*{.c} khg")
    '<p>asdf <em class="c">asd</em> khg</p>\\n'

    >>> # Custom delimiters
    >>> md = MarkdownIt().use(attrs_plugin, left_delimiter="{{", right_delimiter="}}")

Note:
markdown-it-py keeps attributes in a dict, so a key repeated across markers
on one token keeps the last value (``class`` and ``css-module`` still join).

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from llaves.config import AttrsConfig
from llaves.core import CurlyAttributes

if TYPE_CHECKING:
    from markdown_it import MarkdownIt
    from markdown_it.rules_core import StateCore

RULE_NAME = "curly_attributes"


def attrs_plugin(md: MarkdownIt, config: AttrsConfig | None = None, **options: Any) -> None:
    """Enable ``{.class #id key=val}`` attributes on a MarkdownIt instance.

    Args:
        md: The MarkdownIt instance to modify
        config: Ready-made configuration; keyword options are ignored when set
        **options: AttrsConfig fields (``left_delimiter``, ``right_delimiter``,
            ``allowed_attributes``, ``ignore``) or their markdown-it-attrs
            camelCase names

    Raises:
        ConfigError: If an option value is invalid
    """
    if config is None:
        config = AttrsConfig.from_dict(options)
    curly_attrs = CurlyAttributes(config)

    def curly_attributes(state: StateCore) -> None:
        curly_attrs(state.tokens)

    md.core.ruler.after("inline", RULE_NAME, curly_attributes)
