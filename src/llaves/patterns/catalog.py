"""The ordered catalog of curly attribute patterns.

Each pattern pairs the token shape where a marker may appear with the
transform that parses it, attaches it to the owning token and removes the
marker text. Order matters: at every index the catalog is tried top to
bottom, so e.g. "tables" claims a ``{.c}`` paragraph after a table before
"end of block" could attach it to the paragraph itself.

Only "inline nesting 0" and "inline attributes" retry at the same index
after firing, since one text child may carry several markers in a row
(``![i](u){.x}{.y}``).
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from llaves.attach import add_attrs
from llaves.delimiters import has_marker_at, remove_marker, strip_marker_tail
from llaves.lexer import parse_marker
from llaves.navigation import block_owner, enclosing_list_open, matching_opening_token
from llaves.patterns.engine import Pattern, make_test
from llaves.tokens import Nesting
from llaves.utils.logger import get_logger

if TYPE_CHECKING:
    from llaves.config import AttrsConfig
    from llaves.tokens import Token

logger = get_logger(__name__)


def _attach(pairs: list[tuple[str, str]], owner: Token | None, pattern: str) -> None:
    if owner is None:
        logger.debug("%s: no owning token, dropping %r", pattern, pairs)
        return
    add_attrs(pairs, owner)


def build_patterns(config: AttrsConfig) -> tuple[Pattern, ...]:
    """Compile the catalog for one configuration.

    Args:
        config: Delimiters, whitelist and ignore predicate

    Returns:
        Patterns in the order the orchestrator must try them
    """
    left = config.left_delimiter
    right = config.right_delimiter
    at_start = has_marker_at("start", config)
    at_end = has_marker_at("end", config)
    only = has_marker_at("only", config)
    hr_re = re.compile(r"^ {0,3}[-*_]{3,} ?" + re.escape(left) + "[^" + re.escape(right) + "]")

    def fenced_code(tokens: list[Token], i: int, j: int | None) -> None:
        # ```python {.python}
        token = tokens[i]
        start = token.info.rfind(left)
        add_attrs(parse_marker(token.info, start, config), token)
        token.info = remove_marker(token.info, config)

    def inline_nesting_0(tokens: list[Token], i: int, j: int | None) -> None:
        # ![alt](img.png){.a} and `code`{.a}
        children = tokens[i].children
        token = children[j]
        end = token.content.find(right)
        add_attrs(parse_marker(token.content, 0, config), children[j - 1])
        rest = token.content[end + len(right) :]
        if rest:
            token.content = rest
        else:
            del children[j]

    def tables(tokens: list[Token], i: int, j: int | None) -> None:
        token = tokens[i + 2]
        pairs = parse_marker(token.content, 0, config)
        _attach(pairs, matching_opening_token(tokens, i), "tables")
        del tokens[i + 1 : i + 4]

    def inline_attributes(tokens: list[Token], i: int, j: int | None) -> None:
        # *emphasis*{.a}, [link](url){.a}
        children = tokens[i].children
        token = children[j]
        content = token.content
        pairs = parse_marker(content, 0, config)
        _attach(pairs, matching_opening_token(children, j - 1), "inline attributes")
        token.content = content[content.find(right) + len(right) :]

    def list_softbreak(tokens: list[Token], i: int, j: int | None) -> None:
        # - item\n{.a}  -> attrs on the list
        inline = tokens[i]
        pairs = parse_marker(inline.children[j].content, 0, config)
        _attach(pairs, enclosing_list_open(tokens, i - 2), "list softbreak")
        inline.children = inline.children[:-2]

    def list_double_softbreak(tokens: list[Token], i: int, j: int | None) -> None:
        # - item\n\n\n{.a}  -> attrs on the (outer) list
        token = tokens[i + 2]
        pairs = parse_marker(token.content, 0, config)
        _attach(pairs, matching_opening_token(tokens, i), "list double softbreak")
        del tokens[i + 1 : i + 4]

    def list_item_end(tokens: list[Token], i: int, j: int | None) -> None:
        # - item {.a}  -> attrs on the list item
        token = tokens[i].children[j]
        content = token.content
        add_attrs(parse_marker(content, content.rfind(left), config), tokens[i - 2])
        token.content = strip_marker_tail(content, config)

    def softbreak_then_curly(tokens: list[Token], i: int, j: int | None) -> None:
        # paragraph\n{.a}
        inline = tokens[i]
        pairs = parse_marker(inline.children[j].content, 0, config)
        _attach(pairs, block_owner(tokens, i), "softbreak then curly")
        inline.children = inline.children[:-2]

    def horizontal_rule(tokens: list[Token], i: int, j: int | None) -> None:
        # --- {.a}  is a paragraph to the block parser; turn it into an hr
        token = tokens[i]
        content = tokens[i + 1].content
        token.type = "hr"
        token.tag = "hr"
        token.nesting = Nesting.SELF_CLOSING
        token.attrs.clear()
        add_attrs(parse_marker(content, content.rfind(left), config), token)
        token.markup = content
        del tokens[i + 1 : i + 3]

    def end_of_block(tokens: list[Token], i: int, j: int | None) -> None:
        # # heading {.a}, paragraph {.a}
        token = tokens[i].children[j]
        content = token.content
        pairs = parse_marker(content, content.rfind(left), config)
        _attach(pairs, block_owner(tokens, i), "end of block")
        token.content = strip_marker_tail(content, config)

    return (
        Pattern(
            name="fenced code blocks",
            tests=(make_test(shift=0, block=True, info=at_end),),
            transform=fenced_code,
        ),
        Pattern(
            name="inline nesting 0",
            tests=(
                make_test(
                    shift=0,
                    type="inline",
                    children=[
                        make_test(shift=-1, type=lambda t: t in ("image", "code_inline")),
                        make_test(shift=0, type="text", content=at_start),
                    ],
                ),
            ),
            transform=inline_nesting_0,
            retry=True,
        ),
        Pattern(
            name="tables",
            tests=(
                make_test(shift=0, type="table_close"),
                make_test(shift=1, type="paragraph_open"),
                make_test(shift=2, type="inline", content=only),
            ),
            transform=tables,
        ),
        Pattern(
            name="inline attributes",
            tests=(
                make_test(
                    shift=0,
                    type="inline",
                    children=[
                        make_test(shift=-1, nesting=Nesting.CLOSING),
                        make_test(shift=0, type="text", content=at_start),
                    ],
                ),
            ),
            transform=inline_attributes,
            retry=True,
        ),
        Pattern(
            name="list softbreak",
            tests=(
                make_test(shift=-2, type="list_item_open"),
                make_test(
                    shift=0,
                    type="inline",
                    children=[
                        make_test(position=-2, type="softbreak"),
                        make_test(position=-1, type="text", content=only),
                    ],
                ),
            ),
            transform=list_softbreak,
        ),
        Pattern(
            name="list double softbreak",
            tests=(
                make_test(
                    shift=0,
                    type=lambda t: t in ("bullet_list_close", "ordered_list_close"),
                ),
                make_test(shift=1, type="paragraph_open"),
                make_test(
                    shift=2,
                    type="inline",
                    content=only,
                    children=lambda children: len(children) == 1,
                ),
                make_test(shift=3, type="paragraph_close"),
            ),
            transform=list_double_softbreak,
        ),
        Pattern(
            name="list item end",
            tests=(
                make_test(shift=-2, type="list_item_open"),
                make_test(
                    shift=0,
                    type="inline",
                    children=[make_test(position=-1, type="text", content=at_end)],
                ),
            ),
            transform=list_item_end,
        ),
        Pattern(
            name="softbreak then curly",
            tests=(
                make_test(
                    shift=0,
                    type="inline",
                    children=[
                        make_test(position=-2, type="softbreak"),
                        make_test(position=-1, type="text", content=only),
                    ],
                ),
            ),
            transform=softbreak_then_curly,
        ),
        Pattern(
            name="horizontal rule",
            tests=(
                make_test(shift=0, type="paragraph_open"),
                make_test(
                    shift=1,
                    type="inline",
                    children=lambda children: len(children) == 1,
                    content=lambda content: hr_re.match(content) is not None,
                ),
                make_test(shift=2, type="paragraph_close"),
            ),
            transform=horizontal_rule,
        ),
        Pattern(
            name="end of block",
            tests=(
                make_test(
                    shift=0,
                    type="inline",
                    children=[
                        make_test(
                            position=-1,
                            content=at_end,
                            type=lambda t: t != "code_inline",
                        ),
                    ],
                ),
            ),
            transform=end_of_block,
        ),
    )
