"""Convert HTML-like markup into styled text spans (pure, no Qt)."""
from __future__ import annotations

import html
import re
from dataclasses import dataclass, replace
from typing import Any, List, Optional, Tuple

from bs4 import BeautifulSoup
from bs4.element import Comment, Declaration, Doctype, NavigableString, ProcessingInstruction, Tag

_BOLD_TAGS = {"b", "strong"}
_ITALIC_TAGS = {"i", "em", "cite", "dfn"}
_UNDERLINE_TAGS = {"u", "ins"}
_BLOCK_TAGS = {"p", "div", "li", "blockquote", "h1", "h2", "h3", "h4", "h5", "h6"}
_SKIPPED_TAGS = {"script", "style", "head", "title"}
_IGNORED_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class TextSpan:
    text: str
    bold: bool = False
    italic: bool = False
    underline: bool = False
    href: Optional[str] = None

    def same_style(self, other: "TextSpan") -> bool:
        return (
            self.bold == other.bold
            and self.italic == other.italic
            and self.underline == other.underline
            and self.href == other.href
        )


@dataclass(frozen=True)
class RichText:
    spans: Tuple[TextSpan, ...] = ()

    @classmethod
    def plain_text(cls, text: str) -> "RichText":
        if not text:
            return cls()
        return cls((TextSpan(text),))

    @property
    def plain(self) -> str:
        return "".join(span.text for span in self.spans)

    @property
    def links(self) -> Tuple[str, ...]:
        seen: List[str] = []
        for span in self.spans:
            if span.href and span.href not in seen:
                seen.append(span.href)
        return tuple(seen)

    @property
    def is_styled(self) -> bool:
        return any(span.bold or span.italic or span.underline or span.href for span in self.spans)

    def to_html(self) -> str:
        """Render back to the small HTML subset Qt rich-text labels understand."""
        parts: List[str] = []
        for span in self.spans:
            chunk = html.escape(span.text).replace("\n", "<br>")
            if span.bold:
                chunk = f"<b>{chunk}</b>"
            if span.italic:
                chunk = f"<i>{chunk}</i>"
            if span.underline:
                chunk = f"<u>{chunk}</u>"
            if span.href:
                chunk = f'<a href="{html.escape(span.href, quote=True)}">{chunk}</a>'
            parts.append(chunk)
        return "".join(parts)

    def __str__(self) -> str:
        return self.plain


class _SpanBuilder:
    def __init__(self) -> None:
        self._spans: List[TextSpan] = []

    def _tail(self) -> str:
        return self._spans[-1].text if self._spans else ""

    def _append(self, text: str, style: TextSpan) -> None:
        if not text:
            return
        if self._spans and self._spans[-1].same_style(style):
            last = self._spans[-1]
            self._spans[-1] = replace(last, text=last.text + text)
            return
        self._spans.append(replace(style, text=text))

    def add_text(self, raw: str, style: TextSpan) -> None:
        text = _WHITESPACE.sub(" ", raw)
        tail = self._tail()
        if text.startswith(" ") and (not tail or tail.endswith((" ", "\n"))):
            text = text[1:]
        self._append(text, style)

    def line_break(self, style: TextSpan) -> None:
        self._append("\n", style)

    def block_break(self, style: TextSpan) -> None:
        if not self._spans:
            return
        tail = self._tail()
        if tail.endswith("\n\n"):
            return
        self._append("\n" if tail.endswith("\n") else "\n\n", style)

    def build(self) -> RichText:
        spans = list(self._spans)
        while spans:
            last = spans[-1]
            trimmed = last.text.rstrip()
            if trimmed:
                spans[-1] = replace(last, text=trimmed)
                break
            spans.pop()
        return RichText(tuple(spans))


def _derive_style(style: TextSpan, tag: Tag) -> TextSpan:
    name = tag.name or ""
    if name in _BOLD_TAGS:
        style = replace(style, bold=True)
    elif name in _ITALIC_TAGS:
        style = replace(style, italic=True)
    elif name in _UNDERLINE_TAGS:
        style = replace(style, underline=True)
    elif name == "a":
        href = tag.get("href")
        if isinstance(href, str) and href.strip():
            style = replace(style, href=href.strip())
    return style


def _walk(node: Tag, style: TextSpan, builder: _SpanBuilder) -> None:
    for child in node.children:
        if isinstance(child, _IGNORED_STRINGS):
            continue
        if isinstance(child, NavigableString):
            builder.add_text(str(child), style)
            continue
        if not isinstance(child, Tag):
            continue
        name = child.name or ""
        if name in _SKIPPED_TAGS:
            continue
        if name == "br":
            builder.line_break(style)
            continue
        block = name in _BLOCK_TAGS
        if block:
            builder.block_break(style)
        _walk(child, _derive_style(style, child), builder)
        if block:
            builder.block_break(style)


def from_html(markup: Any) -> RichText:
    """Parse markup into styled spans; newlines in the source become line breaks."""
    if isinstance(markup, RichText):
        return markup
    source = str(markup or "")
    if not source:
        return RichText()
    source = source.replace("\r\n", "\n").replace("\r", "\n").replace("\n", "<br>")
    soup = BeautifulSoup(source, "html.parser")
    builder = _SpanBuilder()
    _walk(soup, TextSpan(""), builder)
    return builder.build()


def strip_html(markup: Any) -> str:
    return from_html(markup).plain
