"""
Keyword search over the compiled section index.

Filtering and highlighting deliberately use different rules:
- ``matches`` is conjunctive per term: every whitespace-separated term must
  occur somewhere in the title or short description, in any order.
- ``highlight_spans`` marks only contiguous occurrences of the whole query.

So an item can pass the filter while showing no highlighted span, e.g. the
query "out pri" against "PRINT" / "writes output".
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from .compiler.inline import escape_html
from .compiler.types import Category, Section


@dataclass
class ItemState:
    id: str
    visible: bool
    title_html: str
    description_html: str


@dataclass
class CategoryState:
    id: str
    hidden: bool
    open: bool


@dataclass
class FilterResult:
    query: str
    items: List[ItemState] = field(default_factory=list)
    categories: List[CategoryState] = field(default_factory=list)

    @property
    def visible_ids(self) -> List[str]:
        return [item.id for item in self.items if item.visible]


def _normalize(text: Optional[str]) -> str:
    return (text or "").lower()


def query_terms(query: str) -> List[str]:
    return _normalize(query).split()


def matches(item: Section, query: str) -> bool:
    """True when every query term is a substring of the item's title and description."""
    haystack = _normalize(f"{item.title} {item.short_description or ''}")
    return all(term in haystack for term in query_terms(query))


def highlight_spans(text: str, query: str) -> str:
    """
    Escape ``text`` and wrap each occurrence of the trimmed query in ``<mark>``.

    The query is matched case-insensitively as one contiguous phrase, never
    term by term. Occurrences do not overlap.
    """
    needle = (query or "").strip()
    if not needle:
        return escape_html(text)

    pieces: List[str] = []
    last = 0
    for found in re.finditer(re.escape(needle), text, re.IGNORECASE):
        pieces.append(escape_html(text[last:found.start()]))
        pieces.append(f"<mark>{escape_html(found.group(0))}</mark>")
        last = found.end()
    pieces.append(escape_html(text[last:]))
    return "".join(pieces)


def apply_filter(
    items: Sequence[Section],
    categories: Iterable[Category],
    query: str,
) -> FilterResult:
    """
    Compute visibility and highlighted text for every indexed item.

    Hidden items keep their plain escaped text. A category is hidden when
    a query is active and none of its keywords is visible; it is forced open
    when a query is active and at least one keyword is visible.
    """
    has_query = bool((query or "").strip())
    result = FilterResult(query=query or "")
    visible: dict[str, bool] = {}

    for item in items:
        shown = matches(item, query)
        visible[item.id] = shown
        description = item.short_description or ""
        result.items.append(
            ItemState(
                id=item.id,
                visible=shown,
                title_html=highlight_spans(item.title, query) if shown else escape_html(item.title),
                description_html=(
                    highlight_spans(description, query) if shown else escape_html(description)
                ),
            )
        )

    for category in categories:
        any_visible = any(visible.get(keyword.id, matches(keyword, query)) for keyword in category.keywords)
        result.categories.append(
            CategoryState(
                id=category.id,
                hidden=has_query and not any_visible,
                open=has_query and any_visible,
            )
        )

    return result
