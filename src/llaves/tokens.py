"""Token model for the curly attribute pass.

A flat, depth-first ordered stream of Token objects, shaped like the tokens
markdown-it produces: block tokens at the top level, with each ``inline``
token holding its own child stream.

Field names match ``markdown_it.token.Token`` so the pass reads either kind
of token the same way. ``attrs`` differs: here it is an ordered list of
pairs and repeated keys are kept.

Thread Safety:
Tokens are mutable. A token stream belongs to a single render pass and is
never shared across documents or threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class Nesting(IntEnum):
    """Structural role of a token."""

    CLOSING = -1
    SELF_CLOSING = 0
    OPENING = 1


@dataclass(slots=True)
class Token:
    """A single token in a parsed document stream.

    Attributes:
        type: Type tag, e.g. "paragraph_open", "inline", "text", "softbreak"
        tag: HTML tag name the renderer would use ("p", "em", "")
        nesting: 1 for opening, 0 for self-closing, -1 for closing tokens
        level: Nesting depth; equal between a token and its structural mate
        content: Text payload of leaf and inline tokens
        info: Info string of fenced code blocks
        markup: Source markup characters ("*", "```", "---")
        block: True for block-level tokens
        children: Child stream of an "inline" token, None elsewhere
        attrs: Ordered (key, value) pairs, repeated keys allowed

    """

    type: str
    tag: str = ""
    nesting: int = 0
    level: int = 0
    content: str = ""
    info: str = ""
    markup: str = ""
    block: bool = False
    children: list[Token] | None = None
    attrs: list[tuple[str, str]] = field(default_factory=list)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        content = self.content
        if len(content) > 20:
            content = content[:17] + "..."
        extra = f", {content!r}" if content else ""
        return f"Token({self.type}{extra}, nesting={self.nesting}, level={self.level})"

    def attr_push(self, pair: tuple[str, str]) -> None:
        """Append a (key, value) pair, even if the key already exists."""
        key, value = pair
        self.attrs.append((key, value))

    def attr_join(self, name: str, value: str) -> None:
        """Join value onto the existing entry for name, space separated.

        Appends a new entry when name is not present yet.
        """
        for idx, (key, current) in enumerate(self.attrs):
            if key == name:
                self.attrs[idx] = (key, f"{current} {value}")
                return
        self.attrs.append((name, value))

    # markdown-it spelling, so add_attrs treats both token kinds alike
    attrPush = attr_push  # noqa: N815
    attrJoin = attr_join  # noqa: N815

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict (children included)."""
        data: dict[str, Any] = {
            "type": self.type,
            "tag": self.tag,
            "nesting": self.nesting,
            "level": self.level,
            "content": self.content,
            "info": self.info,
            "markup": self.markup,
            "block": self.block,
            "attrs": [list(pair) for pair in self.attrs],
        }
        if self.children is not None:
            data["children"] = [child.to_dict() for child in self.children]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Token:
        """Build a Token (and its children) from a dict.

        Missing keys fall back to the field defaults; ``attrs`` may be a
        list of pairs or a mapping.
        """
        attrs = data.get("attrs") or []
        if isinstance(attrs, dict):
            attrs = list(attrs.items())
        children = data.get("children")
        return cls(
            type=data["type"],
            tag=data.get("tag", ""),
            nesting=data.get("nesting", 0),
            level=data.get("level", 0),
            content=data.get("content", ""),
            info=data.get("info", ""),
            markup=data.get("markup", ""),
            block=data.get("block", False),
            children=None if children is None else [cls.from_dict(c) for c in children],
            attrs=[(str(k), str(v)) for k, v in attrs],
        )
