from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from bs4 import BeautifulSoup


@dataclass
class Heading:
    level: int
    text: str
    id: str


@dataclass
class Section:
    """
    An indexable entry opened by a heading of level 2 or deeper.

    ``start_offset`` is the position in ``CompiledDocument.html`` where the
    heading begins. Postprocessing re-serializes the markup, so the offset
    does not apply to ``Manual.reference_html``.

    ``short_description`` is filled from the first ordinary paragraph after
    the heading and never overwritten afterwards.
    """

    id: str
    title: str
    level: int
    start_offset: int
    short_description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class CompiledDocument:
    html: str
    headings: list[Heading] = field(default_factory=list)
    sections: list[Section] = field(default_factory=list)

    @property
    def tree(self) -> BeautifulSoup:
        """Parsed node tree of the rendered markup."""
        return BeautifulSoup(self.html, "html.parser")


@dataclass
class Category:
    id: str
    title: str
    keywords: list[Section] = field(default_factory=list)
