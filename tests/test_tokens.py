"""Tests for the Token model and attribute attach."""

from __future__ import annotations

from llaves.attach import add_attrs
from llaves.tokens import Nesting, Token


class TestToken:
    """Token data record."""

    def test_defaults(self) -> None:
        token = Token("text")
        assert token.nesting == Nesting.SELF_CLOSING
        assert token.children is None
        assert token.attrs == []
        assert token.info == ""

    def test_attrs_not_shared_between_instances(self) -> None:
        a, b = Token("text"), Token("text")
        a.attr_push(("x", "1"))
        assert b.attrs == []

    def test_token_is_slotted(self) -> None:
        assert hasattr(Token("text"), "__slots__")

    def test_repr_truncates_content(self) -> None:
        token = Token("text", content="x" * 40)
        assert "..." in repr(token)

    def test_nesting_values_match_markdown_it(self) -> None:
        from markdown_it.token import Token as MdToken

        assert MdToken("em_close", "em", -1).nesting == Nesting.CLOSING
        assert MdToken("image", "img", 0).nesting == Nesting.SELF_CLOSING
        assert MdToken("em_open", "em", 1).nesting == Nesting.OPENING


class TestAttrMutation:
    """attr_push / attr_join and their markdown-it spellings."""

    def test_push_keeps_duplicates(self) -> None:
        token = Token("p")
        token.attr_push(("data-x", "1"))
        token.attrPush(("data-x", "2"))
        assert token.attrs == [("data-x", "1"), ("data-x", "2")]

    def test_join_merges(self) -> None:
        token = Token("p")
        token.attr_join("class", "a")
        token.attrJoin("class", "b")
        assert token.attrs == [("class", "a b")]

    def test_join_preserves_position(self) -> None:
        token = Token("p", attrs=[("class", "a"), ("id", "x")])
        token.attr_join("class", "b")
        assert token.attrs == [("class", "a b"), ("id", "x")]


class TestAddAttrs:
    """Attaching parsed pairs."""

    def test_class_joined_not_duplicated(self) -> None:
        token = Token("p")
        add_attrs([("class", "a")], token)
        add_attrs([("class", "b")], token)
        assert token.attrs == [("class", "a b")]

    def test_css_module_joined(self) -> None:
        token = Token("p")
        add_attrs([("css-module", "x"), ("css-module", "y")], token)
        assert token.attrs == [("css-module", "x y")]

    def test_other_keys_pushed(self) -> None:
        token = Token("p")
        add_attrs([("id", "a"), ("id", "b")], token)
        assert token.attrs == [("id", "a"), ("id", "b")]

    def test_returns_token(self) -> None:
        token = Token("p")
        assert add_attrs([], token) is token

    def test_markdown_it_token(self) -> None:
        from markdown_it.token import Token as MdToken

        token = MdToken("paragraph_open", "p", 1)
        add_attrs([("class", "a"), ("id", "x"), ("class", "b")], token)
        assert token.attrs == {"class": "a b", "id": "x"}


class TestSerialization:
    """to_dict / from_dict."""

    def test_round_trip_with_children(self) -> None:
        token = Token(
            "inline",
            level=1,
            content="a *b*",
            block=True,
            children=[Token("text", content="a "), Token("em_open", "em", 1)],
            attrs=[("id", "x")],
        )
        assert Token.from_dict(token.to_dict()) == token

    def test_from_dict_defaults_and_mapping_attrs(self) -> None:
        token = Token.from_dict({"type": "paragraph_open", "nesting": 1, "attrs": {"id": "x"}})
        assert token.tag == ""
        assert token.children is None
        assert token.attrs == [("id", "x")]
