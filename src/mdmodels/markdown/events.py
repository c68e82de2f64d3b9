"""Structural event stream over a Markdown document.

The extractor does not look at the Markdown syntax tree directly. Instead
the tree produced by mistune is flattened into a linear stream of start,
end and text events, which is what the heading/list rules are written
against.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator

import mistune

BRACKET_PATTERN = re.compile(r"([\[\]])")


class EventKind(Enum):
    """Kind of structural event."""

    START = "start"
    END = "end"
    TEXT = "text"
    CODE = "code"
    HTML = "html"
    SOFT_BREAK = "soft_break"
    HARD_BREAK = "hard_break"
    RULE = "rule"


class Tag(Enum):
    """Container element opened by a START event and closed by an END event."""

    HEADING = "heading"
    PARAGRAPH = "paragraph"
    BLOCK_QUOTE = "block_quote"
    CODE_BLOCK = "code_block"
    LIST = "list"
    ITEM = "item"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    LINK = "link"
    IMAGE = "image"


@dataclass(frozen=True)
class Event:
    """A single structural event.

    ``level`` is set for headings, ``ordered`` for lists and ``fenced`` for
    code blocks. ``text`` holds the content of TEXT, CODE and HTML events.
    """

    kind: EventKind
    tag: Tag | None = None
    text: str = ""
    level: int = 0
    ordered: bool = False
    fenced: bool = False

    @classmethod
    def start(cls, tag: Tag, **kwargs: Any) -> Event:
        return cls(kind=EventKind.START, tag=tag, **kwargs)

    @classmethod
    def end(cls, tag: Tag, **kwargs: Any) -> Event:
        return cls(kind=EventKind.END, tag=tag, **kwargs)

    @classmethod
    def text_run(cls, text: str) -> Event:
        return cls(kind=EventKind.TEXT, text=text)

    def is_start(self, tag: Tag) -> bool:
        """Check if this event opens the given tag."""
        return self.kind == EventKind.START and self.tag == tag

    def is_end(self, tag: Tag) -> bool:
        """Check if this event closes the given tag."""
        return self.kind == EventKind.END and self.tag == tag

    @property
    def is_text(self) -> bool:
        """Check if this event is a text run."""
        return self.kind == EventKind.TEXT


def iter_events(content: str) -> Iterator[Event]:
    """Tokenize a document and yield its structural events.

    Every call parses ``content`` from scratch, so two calls never share
    iterator state.

    Args:
        content: Markdown text (without front matter).

    Yields:
        Events in document order.
    """
    markdown = mistune.create_markdown(renderer=None)
    tokens, _ = markdown.parse(content)
    yield from _block_events(tokens)


def _block_events(tokens: list[dict[str, Any]]) -> Iterator[Event]:
    for token in tokens:
        token_type = token.get("type", "")
        attrs = token.get("attrs") or {}
        children = token.get("children", [])

        if token_type == "heading":
            level = attrs.get("level", 1)
            yield Event.start(Tag.HEADING, level=level)
            yield from _inline_events(children)
            yield Event.end(Tag.HEADING, level=level)
        elif token_type == "paragraph":
            yield Event.start(Tag.PARAGRAPH)
            yield from _inline_events(children)
            yield Event.end(Tag.PARAGRAPH)
        elif token_type == "block_text":
            # Tight list items carry their text without a paragraph
            yield from _inline_events(children)
        elif token_type == "list":
            ordered = bool(attrs.get("ordered", False))
            yield Event.start(Tag.LIST, ordered=ordered)
            yield from _block_events(children)
            yield Event.end(Tag.LIST, ordered=ordered)
        elif token_type == "list_item":
            yield Event.start(Tag.ITEM)
            yield from _block_events(children)
            yield Event.end(Tag.ITEM)
        elif token_type == "block_code":
            fenced = token.get("style") == "fenced"
            raw = token.get("raw", "")
            yield Event.start(Tag.CODE_BLOCK, fenced=fenced)
            if raw:
                yield Event.text_run(raw)
            yield Event.end(Tag.CODE_BLOCK, fenced=fenced)
        elif token_type == "block_quote":
            yield Event.start(Tag.BLOCK_QUOTE)
            yield from _block_events(children)
            yield Event.end(Tag.BLOCK_QUOTE)
        elif token_type == "thematic_break":
            yield Event(kind=EventKind.RULE)
        elif token_type == "block_html":
            yield Event(kind=EventKind.HTML, text=token.get("raw", ""))
        elif token_type == "blank_line":
            continue
        elif children:
            yield from _block_events(children)


def _inline_events(tokens: list[dict[str, Any]]) -> Iterator[Event]:
    # Adjacent text tokens form a single run
    buffer: list[str] = []
    for token in tokens:
        if token.get("type") == "text":
            buffer.append(token.get("raw", ""))
            continue
        if buffer:
            yield from _text_events("".join(buffer))
            buffer = []
        yield from _inline_token_events(token)

    if buffer:
        yield from _text_events("".join(buffer))


def _inline_token_events(token: dict[str, Any]) -> Iterator[Event]:
    token_type = token.get("type", "")
    children = token.get("children", [])

    wrappers = {
        "strong": Tag.STRONG,
        "emphasis": Tag.EMPHASIS,
        "link": Tag.LINK,
        "image": Tag.IMAGE,
    }

    if token_type in wrappers:
        tag = wrappers[token_type]
        yield Event.start(tag)
        yield from _inline_events(children)
        yield Event.end(tag)
    elif token_type == "codespan":
        yield Event(kind=EventKind.CODE, text=token.get("raw", ""))
    elif token_type == "softbreak":
        yield Event(kind=EventKind.SOFT_BREAK)
    elif token_type == "linebreak":
        yield Event(kind=EventKind.HARD_BREAK)
    elif token_type == "inline_html":
        yield Event(kind=EventKind.HTML, text=token.get("raw", ""))
    elif children:
        yield from _inline_events(children)
    elif token.get("raw"):
        yield from _text_events(token["raw"])


def _text_events(text: str) -> Iterator[Event]:
    """Split a text run so that every square bracket is a run of its own.

    Brackets that do not form a link are reported as standalone runs;
    ``name[]`` becomes ``name``, ``[`` and ``]``.
    """
    for part in BRACKET_PATTERN.split(text):
        if part:
            yield Event.text_run(part)
