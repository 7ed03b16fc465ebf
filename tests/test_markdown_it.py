"""End-to-end tests through markdown-it-py."""

from __future__ import annotations

import re

import pytest
from markdown_it import MarkdownIt

from llaves import AttrsConfig, ConfigError
from llaves.plugins import RULE_NAME, attrs_plugin


class TestRegistration:
    """Core rule wiring."""

    def test_rule_after_inline(self, md: MarkdownIt) -> None:
        rules = md.core.ruler.get_all_rules()
        assert rules[rules.index("inline") + 1] == RULE_NAME

    def test_bad_option_fails_at_setup(self) -> None:
        with pytest.raises(ConfigError):
            MarkdownIt().use(attrs_plugin, left_delimiter="")

    def test_config_object(self) -> None:
        config = AttrsConfig(left_delimiter="[", right_delimiter="]")
        md = MarkdownIt().use(attrs_plugin, config=config)
        assert md.render("text [.a]") == '<p class="a">text</p>\n'


class TestInline:
    """Inline owners: emphasis, links, images, code."""

    def test_emphasis(self, md: MarkdownIt) -> None:
        assert md.render("asdf *asd*{.c} khg") == '<p>asdf <em class="c">asd</em> khg</p>\n'

    def test_double_curly_delimiters(self) -> None:
        md = MarkdownIt().use(attrs_plugin, left_delimiter="{{", right_delimiter="}}")
        assert md.render("asdf *asd*{{.c}} khg") == '<p>asdf <em class="c">asd</em> khg</p>\n'

    def test_link(self, md: MarkdownIt) -> None:
        assert md.render("[a](u){.c}") == '<p><a href="u" class="c">a</a></p>\n'

    def test_image_with_two_markers(self, md: MarkdownIt) -> None:
        html = md.render("![i](u.png){.x}{.y}")
        assert 'class="x y"' in html
        assert "{" not in html

    def test_code_inline(self, md: MarkdownIt) -> None:
        assert md.render("`x`{.c}") == '<p><code class="c">x</code></p>\n'


class TestBlocks:
    """Block owners."""

    def test_heading_and_paragraph(self, md: MarkdownIt) -> None:
        html = md.render("# header {.style-me}\nparagraph {data-toggle=modal}")
        assert html == '<h1 class="style-me">header</h1>\n<p data-toggle="modal">paragraph</p>\n'

    def test_heading_id(self, md: MarkdownIt) -> None:
        assert md.render("# Title {#main}") == '<h1 id="main">Title</h1>\n'

    def test_paragraph_softbreak(self, md: MarkdownIt) -> None:
        assert md.render("paragraph\n{.a}") == '<p class="a">paragraph</p>\n'

    def test_blockquote(self, md: MarkdownIt) -> None:
        assert md.render("> quote {.c}").startswith('<blockquote class="c">')

    def test_fence(self, md: MarkdownIt) -> None:
        tokens = md.parse("```python {.python}\ncode\n```")
        fence = next(t for t in tokens if t.type == "fence")
        assert fence.info == "python"
        assert fence.attrs == {"class": "python"}

    def test_table(self, md_table: MarkdownIt) -> None:
        html = md_table.render("| a | b |\n|---|---|\n| 1 | 2 |\n\n{.c}")
        assert html.startswith('<table class="c">')
        assert "<p>" not in html

    def test_horizontal_rule(self, md: MarkdownIt) -> None:
        html = md.render("--- {.a}")
        assert '<hr class="a"' in html
        assert "<p>" not in html

    def test_horizontal_rule_joins_classes(self, md: MarkdownIt) -> None:
        html = md.render("--- {.a .b #r}")
        assert '<hr class="a b" id="r"' in html


class TestLists:
    """List and list item owners."""

    def test_list_item(self, md: MarkdownIt) -> None:
        assert md.render("- item {.a}") == '<ul>\n<li class="a">item</li>\n</ul>\n'

    def test_list_softbreak(self, md: MarkdownIt) -> None:
        assert md.render("- item\n{.a}") == '<ul class="a">\n<li>item</li>\n</ul>\n'

    def test_list_double_softbreak(self, md: MarkdownIt) -> None:
        assert md.render("- item\n\n{.a}") == '<ul class="a">\n<li>item</li>\n</ul>\n'


class TestOptions:
    """Whitelist, ignore and lexer details seen in HTML."""

    def test_allowed_attributes(self) -> None:
        md = MarkdownIt().use(attrs_plugin, allowed_attributes=["id", "class"])
        assert md.render("text {#x onclick=evil .c}") == '<p id="x" class="c">text</p>\n'

    def test_allowed_attributes_camel_case_regex(self) -> None:
        md = MarkdownIt().use(attrs_plugin, allowedAttributes=[re.compile("^data-")])
        assert md.render("text {data-a=1 title=t}") == '<p data-a="1">text</p>\n'

    def test_ignore(self) -> None:
        source = "asdf *asd*{.c} khg"
        md = MarkdownIt().use(attrs_plugin, ignore=lambda token: token.type == "text")
        assert md.render(source) == MarkdownIt().render(source)

    def test_empty_marker_stays_literal(self, md: MarkdownIt) -> None:
        assert md.render("text {}") == "<p>text {}</p>\n"

    def test_css_module(self, md: MarkdownIt) -> None:
        assert md.render("text {..mod}") == '<p css-module="mod">text</p>\n'

    def test_quoted_value(self, md: MarkdownIt) -> None:
        assert md.render('text {title="a b"}') == '<p title="a b">text</p>\n'

    def test_repeated_key_last_wins_in_markdown_it(self, md: MarkdownIt) -> None:
        assert md.render("text {data-a=1 data-a=2}") == '<p data-a="2">text</p>\n'

    def test_classes_join(self, md: MarkdownIt) -> None:
        assert md.render("text {.a .b}") == '<p class="a b">text</p>\n'
