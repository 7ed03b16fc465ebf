"""
Llaves: curly attribute post-processor for markdown-it token streams

Adds ``{.class #id key=val}`` attributes to Markdown. The pass runs after a
markdown-it style parser has produced its token stream: it finds attribute
markers next to paragraphs, headings, emphasis, links, images, inline code,
list items, lists, tables, fenced code and horizontal rules, attaches the
parsed attributes to the right opening token and removes the marker text.

Quick Start:
    >>> from markdown_it import MarkdownIt
    >>> from llaves import attrs_plugin
    >>> md = MarkdownIt().use(attrs_plugin)
    >>> print(md.render("# header {.style-me}\\nparagraph {data-toggle=modal}"))
    <h1 class="style-me">header</h1>
    <p data-toggle="modal">paragraph</p>

Working on tokens directly:
    >>> from llaves import AttrsConfig, CurlyAttributes
    >>> curly = CurlyAttributes(AttrsConfig(allowed_attributes=("id", "class")))
    >>> tokens = curly(MarkdownIt().parse("text {#x onclick=evil}"))

Installation:
    pip install llaves
"""

from llaves.attach import add_attrs
from llaves.config import DEFAULT_CONFIG, AttrsConfig
from llaves.core import CurlyAttributes, apply_attributes
from llaves.delimiters import MarkerPosition, has_marker_at, remove_marker
from llaves.errors import ConfigError, LlavesError, MarkerPositionError, PatternError
from llaves.lexer import parse_marker
from llaves.navigation import block_owner, matching_opening_token
from llaves.patterns import Pattern, build_patterns
from llaves.plugins import attrs_plugin
from llaves.tokens import Nesting, Token

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "apply_attributes",
    "CurlyAttributes",
    "attrs_plugin",
    # Configuration
    "AttrsConfig",
    "DEFAULT_CONFIG",
    # Components
    "parse_marker",
    "has_marker_at",
    "remove_marker",
    "MarkerPosition",
    "matching_opening_token",
    "block_owner",
    "add_attrs",
    "Pattern",
    "build_patterns",
    # Tokens
    "Token",
    "Nesting",
    # Errors
    "LlavesError",
    "ConfigError",
    "MarkerPositionError",
    "PatternError",
]
