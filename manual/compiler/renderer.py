# manual/compiler/renderer.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set

from .blocks import compile_document
from .config import CATEGORY_OPTIONS, REFERENCE_OPTIONS, get_manual_config
from .highlighter import build_highlighter
from .postprocessors import apply_postprocessors
from .types import Category, CompiledDocument, Section

logger = logging.getLogger(__name__)


@dataclass
class Manual:
    """Both compiled documents plus everything derived from them."""

    reference: CompiledDocument
    category: CompiledDocument
    categories: List[Category] = field(default_factory=list)
    keywords: Set[str] = field(default_factory=set)
    reference_html: str = ""
    category_html: str = ""

    @property
    def keyword_sections(self) -> List[Section]:
        """Level-2 reference sections, the alphabetical keyword list."""
        return [section for section in self.reference.sections if section.level == 2]


def group_categories(sections: Iterable[Section]) -> List[Category]:
    """
    Group a category pass into categories and their keywords.

    Each level-2 section opens a category; level-3 sections join the open
    category. Level-3 sections seen before any category are dropped.
    """
    categories: List[Category] = []
    current: Optional[Category] = None
    for section in sections:
        if section.level == 2:
            current = Category(id=section.id, title=section.title)
            categories.append(current)
        elif section.level == 3 and current is not None:
            current.keywords.append(section)
    return categories


def search_items(manual: Manual) -> List[Section]:
    """Sections from both passes that take part in search, reference first."""
    return [
        section
        for section in manual.reference.sections + manual.category.sections
        if section.level in (2, 3)
    ]


def render_manual(reference_text, category_text, context=None):
    """
    Compile the reference and category documents and post-process them.

    Args:
        reference_text: Raw reference source (keywords at level 2)
        category_text: Raw category source (categories at level 2, keywords at 3)
        context: Optional dict for processors that need additional data
    """
    context = context or {}
    config = get_manual_config()

    reference = compile_document(reference_text, REFERENCE_OPTIONS)
    category = compile_document(category_text, CATEGORY_OPTIONS)

    manual = Manual(
        reference=reference,
        category=category,
        categories=group_categories(category.sections),
    )
    manual.keywords = {section.title for section in manual.keyword_sections}

    context.setdefault(
        "highlighter",
        build_highlighter(manual.keywords, comment_markers=config["comment_markers"]),
    )
    context.setdefault("highlight_language", config["highlight_language"])

    # Post-processing: after compilation
    manual.reference_html = apply_postprocessors(reference.html, context)
    manual.category_html = apply_postprocessors(category.html, context)

    logger.info(
        f"Rendered manual: {len(reference.sections)} reference sections, "
        f"{len(manual.categories)} categories, {len(manual.keywords)} keywords"
    )
    return manual
