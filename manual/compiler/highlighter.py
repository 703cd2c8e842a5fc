# manual/compiler/highlighter.py
"""
Small best-effort highlighter for code samples.

The keyword vocabulary is not hard-coded: it is the set of keyword titles
taken from the compiled reference. Passes run on the cumulative output of
the previous pass, in this order:
- quoted strings (no escape handling)
- numeric literals not glued to a following word character
- line comments starting with a comment marker
- whole-word keywords, longest first

The raw input is escaped before the first pass. Keywords are matched on
text that already carries string/comment markup, so a keyword inside a
string or comment ends up nested in that span.
"""

import re
from typing import Callable, Iterable, Sequence

from .inline import escape_html

_STRING = re.compile(r"(\"[^\"]*\"|'[^']*')")
_NUMBER = re.compile(r"(^|[^\w])([+-]?(?:\d+\.?\d*|\d*\.?\d+))(?![\w@])", re.ASCII)


def _span(css_class: str, text: str) -> str:
    return f'<span class="{css_class}">{text}</span>'


def _keyword_pattern(keyword: str) -> str:
    # Word boundaries only apply at edges that are word characters, so
    # operator keywords such as "<>" still match between operands.
    pattern = re.escape(keyword)
    if re.match(r"\w", keyword):
        pattern = rf"(?<!\w){pattern}"
    if re.search(r"\w$", keyword):
        pattern = rf"{pattern}(?!\w)"
    return pattern


def build_highlighter(
    keyword_titles: Iterable[str],
    comment_markers: Sequence[str] = ("REM",),
) -> Callable[[str], str]:
    """
    Build a highlighter for the given keyword titles.

    Args:
        keyword_titles: Known keywords; multi-word titles such as "FOR EACH"
            are matched whole before any shorter keyword they contain
        comment_markers: Markers that start a comment running to end of line

    Returns:
        Function taking a code block's raw text and returning escaped,
        tagged text
    """
    # Matching happens on escaped text, so keywords are escaped the same way.
    keywords = sorted(
        {escape_html(title) for title in keyword_titles if title}, key=len, reverse=True
    )
    keyword_re = None
    if keywords:
        alternation = "|".join(_keyword_pattern(keyword) for keyword in keywords)
        # never inside the markup of a span inserted by an earlier pass
        keyword_re = re.compile(rf"({alternation})(?![^<>]*>)")

    comment_re = None
    markers = [escape_html(marker) for marker in comment_markers if marker]
    if markers:
        alternation = "|".join(re.escape(marker) for marker in markers)
        comment_re = re.compile(rf"(^|\s)((?:{alternation})\s.*)$", re.MULTILINE)

    def highlight(code: str) -> str:
        code = escape_html(code)
        code = _STRING.sub(lambda m: _span("tok-str", m.group(1)), code)
        code = _NUMBER.sub(lambda m: m.group(1) + _span("tok-num", m.group(2)), code)
        if comment_re is not None:
            code = comment_re.sub(lambda m: m.group(1) + _span("tok-cmt", m.group(2)), code)
        if keyword_re is not None:
            code = keyword_re.sub(lambda m: _span("tok-kw", m.group(1)), code)
        return code

    return highlight
