# manual/compiler/blocks.py
"""
Line-oriented compiler for the manual's markup dialect.

A single forward pass classifies every line into one of a closed set of
kinds and renders it. The pass produces:
- the rendered markup
- a flat list of headings in source order
- a section index (level 2 and deeper) with short descriptions

Malformed input is never an error: every line lands in exactly one kind and
is rendered as literally as possible.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import List, Optional, Tuple

from .config import CompileOptions
from .inline import escape_html, format_inline, strip_tags
from .slug import fallback_id, slugify
from .types import CompiledDocument, Heading, Section

logger = logging.getLogger(__name__)

_NEWLINES = re.compile(r"\r\n?")
_FENCE_OPEN = re.compile(r"^```\s*([a-zA-Z0-9_-]+)?\s*$")
_FENCE_CLOSE = re.compile(r"^```\s*$")
_HEADING = re.compile(r"^(#{1,6})\s+(.*)$")
_ORDERED_ITEM = re.compile(r"^\s*\d+\.\s+(.*)$")
_UNORDERED_ITEM = re.compile(r"^\s*[-*+]\s+(.*)$")
_BLOCKQUOTE = re.compile(r"^>\s?(.*)$")
_BLANK = re.compile(r"^\s*$")
# "*Type:* Function" style metadata lines never become short descriptions.
_TYPE_LINE = re.compile(r"^\s*\**\s*Type\s*:", re.IGNORECASE)


class LineKind(Enum):
    FENCE_OPEN = "fence_open"
    FENCE_LINE = "fence_line"
    FENCE_CLOSE = "fence_close"
    HEADING = "heading"
    ORDERED_ITEM = "ordered_item"
    UNORDERED_ITEM = "unordered_item"
    BLOCKQUOTE = "blockquote"
    BLANK = "blank"
    PARAGRAPH = "paragraph"


_LIST_TAGS = {LineKind.ORDERED_ITEM: "ol", LineKind.UNORDERED_ITEM: "ul"}


def classify_line(line: str, in_fence: bool = False) -> Tuple[LineKind, Optional[re.Match]]:
    """
    Classify a line, testing kinds in priority order.

    Inside a fence only the closing fence is recognised; everything else is
    verbatim fence content.
    """
    if in_fence:
        match = _FENCE_CLOSE.match(line)
        if match:
            return LineKind.FENCE_CLOSE, match
        return LineKind.FENCE_LINE, None

    for kind, pattern in (
        (LineKind.FENCE_OPEN, _FENCE_OPEN),
        (LineKind.HEADING, _HEADING),
        (LineKind.ORDERED_ITEM, _ORDERED_ITEM),
        (LineKind.UNORDERED_ITEM, _UNORDERED_ITEM),
        (LineKind.BLOCKQUOTE, _BLOCKQUOTE),
        (LineKind.BLANK, _BLANK),
    ):
        match = pattern.match(line)
        if match:
            return kind, match
    return LineKind.PARAGRAPH, None


def is_type_line(text: str) -> bool:
    return bool(_TYPE_LINE.match(text))


def heading_id(text: str, level: int, options: CompileOptions, index: int) -> str:
    """Anchor identifier for a heading, prefixed according to its role."""
    base = slugify(text)
    if not base:
        logger.debug(f"Heading {index} ({text!r}) has an empty slug, using positional id")
        return fallback_id(index)
    if options.category_mode and level == 2:
        return f"cat-{base}"
    if level >= options.section_heading_level:
        return f"kw-{base}"
    return base


def _ends_paragraph(line: str) -> bool:
    kind, _ = classify_line(line)
    return kind in (
        LineKind.BLANK,
        LineKind.HEADING,
        LineKind.FENCE_OPEN,
        LineKind.ORDERED_ITEM,
        LineKind.UNORDERED_ITEM,
    )


def _collect_paragraph(lines: List[str], start: int) -> Tuple[str, int]:
    """
    Gather the paragraph starting at ``start``; the first line is always taken.

    A "Type:" metadata line is a paragraph of its own, so the description
    written directly beneath it is still picked up as a separate paragraph.
    """
    end = start + 1
    if is_type_line(lines[start]):
        return lines[start], end
    while end < len(lines) and not _ends_paragraph(lines[end]) and not is_type_line(lines[end]):
        end += 1
    return "\n".join(lines[start:end]), end


def _code_block(language: str, buffered: List[str]) -> str:
    code = escape_html("\n".join(buffered))
    return (
        f'<pre class="language-{language}">'
        '<button class="copy-btn" title="Copy">Copy</button>'
        f"<code>{code}</code></pre>"
    )


def compile_document(source: str, options: Optional[CompileOptions] = None) -> CompiledDocument:
    """
    Compile manual source text into rendered markup, headings and sections.

    Args:
        source: Full source text; ``\\r\\n`` and ``\\r`` are treated as newlines
        options: Identifier rules for this pass (default: reference rules)

    Returns:
        CompiledDocument owned by the caller. Nothing is retained between calls.
    """
    options = options or CompileOptions()
    lines = _NEWLINES.sub("\n", source).split("\n")

    parts: List[str] = []
    offset = 0
    headings: List[Heading] = []
    sections: List[Section] = []
    current: Optional[Section] = None
    open_list: Optional[str] = None
    fence_language: Optional[str] = None
    fence_buffer: List[str] = []

    def emit(markup: str) -> None:
        nonlocal offset
        parts.append(markup)
        offset += len(markup)

    def close_list() -> None:
        nonlocal open_list
        if open_list:
            emit(f"</{open_list}>")
            open_list = None

    i = 0
    while i < len(lines):
        line = lines[i]
        kind, match = classify_line(line, in_fence=fence_language is not None)

        if kind is LineKind.FENCE_LINE:
            fence_buffer.append(line)
            i += 1
            continue

        if kind is LineKind.FENCE_CLOSE:
            emit(_code_block(fence_language, fence_buffer))
            fence_language = None
            fence_buffer = []
            i += 1
            continue

        if kind not in _LIST_TAGS:
            close_list()

        if kind is LineKind.FENCE_OPEN:
            fence_language = (match.group(1) or "").lower()
            i += 1
            continue

        if kind is LineKind.HEADING:
            level = len(match.group(1))
            text = match.group(2).strip()
            identifier = heading_id(text, level, options, len(headings))
            headings.append(Heading(level=level, text=text, id=identifier))
            if level >= 2:
                current = Section(
                    id=identifier,
                    title=text,
                    level=level,
                    start_offset=offset,
                )
                sections.append(current)
            emit(
                f'<h{level} id="{identifier}">{escape_html(text)}'
                f'<a class="permalink" href="#{identifier}" aria-label="Permalink">#</a>'
                f"</h{level}>"
            )
            i += 1
            continue

        if kind in _LIST_TAGS:
            tag = _LIST_TAGS[kind]
            if open_list != tag:
                close_list()
                emit(f"<{tag}>")
                open_list = tag
            emit(f"<li>{format_inline(match.group(1).strip())}</li>")
            i += 1
            continue

        if kind is LineKind.BLOCKQUOTE:
            emit(f"<blockquote>{format_inline(match.group(1))}</blockquote>")
            i += 1
            continue

        if kind is LineKind.BLANK:
            emit("\n")
            i += 1
            continue

        raw, i = _collect_paragraph(lines, i)
        raw = raw.strip()
        markup = format_inline(raw)
        emit(f"<p>{markup}</p>")
        if current is not None and not current.short_description and not is_type_line(raw):
            current.short_description = strip_tags(markup)

    close_list()
    if fence_language is not None:
        logger.debug(f"Unterminated {fence_language or 'plain'} code fence flushed at end of input")
        emit(_code_block(fence_language, fence_buffer))

    return CompiledDocument(html="".join(parts), headings=headings, sections=sections)
