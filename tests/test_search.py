from __future__ import annotations

from manual.compiler.types import Category, Section
from manual.search import apply_filter, highlight_spans, matches, query_terms


def _section(id_: str, title: str, description: str = "", level: int = 2) -> Section:
    return Section(id=id_, title=title, level=level, start_offset=0, short_description=description)


PRINT = _section("kw-print", "PRINT", "writes output")
INPUT = _section("kw-input", "INPUT", "reads a line")
LOOP = _section("kw-for", "FOR", "counts a loop", level=3)


def test_terms_match_in_any_order() -> None:
    assert matches(PRINT, "out pri")
    assert matches(PRINT, "PRI OUT")


def test_every_term_must_match() -> None:
    assert not matches(PRINT, "print banana")


def test_empty_query_matches_everything() -> None:
    assert matches(PRINT, "")
    assert matches(PRINT, "   ")
    assert query_terms("  a   b ") == ["a", "b"]


def test_missing_description_is_tolerated() -> None:
    assert matches(_section("kw-x", "X", ""), "x")


def test_highlight_requires_contiguous_phrase() -> None:
    assert highlight_spans("writes output", "out pri") == "writes output"


def test_highlight_is_case_insensitive_and_keeps_original_case() -> None:
    assert highlight_spans("Print and PRINT", "print") == "<mark>Print</mark> and <mark>PRINT</mark>"


def test_highlight_trims_query() -> None:
    assert highlight_spans("writes output", "  out ") == "writes <mark>out</mark>put"


def test_highlight_occurrences_do_not_overlap() -> None:
    assert highlight_spans("aaaa", "aa") == "<mark>aa</mark><mark>aa</mark>"


def test_highlight_escapes_text() -> None:
    assert highlight_spans("a<b", "") == "a&lt;b"
    assert highlight_spans("a < b", "<") == "a <mark>&lt;</mark> b"


def test_highlight_treats_query_literally() -> None:
    assert highlight_spans("LEFT$(a)", "t$(") == "LEF<mark>T$(</mark>a)"


def test_apply_filter_without_query_shows_everything() -> None:
    result = apply_filter([PRINT, INPUT], [Category("cat-io", "I/O", [PRINT, INPUT])], "")

    assert result.visible_ids == ["kw-print", "kw-input"]
    assert result.items[0].title_html == "PRINT"
    assert [(c.hidden, c.open) for c in result.categories] == [(False, False)]


def test_apply_filter_hides_and_highlights() -> None:
    categories = [
        Category("cat-io", "I/O", [PRINT, INPUT]),
        Category("cat-loops", "Loops", [LOOP]),
    ]
    result = apply_filter([PRINT, INPUT, LOOP], categories, "print")

    assert result.visible_ids == ["kw-print"]
    shown = result.items[0]
    assert shown.title_html == "<mark>PRINT</mark>"
    assert shown.description_html == "writes output"
    hidden = result.items[1]
    assert hidden.title_html == "INPUT"
    assert [(c.id, c.hidden, c.open) for c in result.categories] == [
        ("cat-io", False, True),
        ("cat-loops", True, False),
    ]


def test_apply_filter_visible_without_highlight() -> None:
    result = apply_filter([PRINT], [], "out pri")

    assert result.visible_ids == ["kw-print"]
    assert "<mark>" not in result.items[0].title_html
    assert "<mark>" not in result.items[0].description_html


def test_empty_category_is_hidden_while_searching() -> None:
    result = apply_filter([PRINT], [Category("cat-empty", "Empty")], "print")
    assert result.categories[0].hidden
    assert not result.categories[0].open
