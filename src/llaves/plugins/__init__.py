"""Host parser integrations for Llaves.

The pass itself works on any markdown-it shaped token list. These modules
register it with a concrete parser:

- markdown_it: core rule for markdown-it-py, after inline tokenization

Usage:
    >>> from markdown_it import MarkdownIt
    >>> from llaves.plugins import attrs_plugin
    >>> md = MarkdownIt().use(attrs_plugin)

"""

from llaves.plugins.markdown_it import RULE_NAME, attrs_plugin

__all__ = [
    "RULE_NAME",
    "attrs_plugin",
]
