# manual/compiler/inline.py
"""
Inline formatting for single lines of manual text.

The passes run in a fixed order:
- Escape ``&``, ``<`` and ``>``
- Bold (``**text**``) before italic so the italic pattern cannot eat half of it
- Italic (``*text*``)
- Inline code (```text```), no nested backticks
- Links (``[label](target)``)

Anything that does not match a pattern is left as literal text.
"""

import re

from bs4 import BeautifulSoup

_BOLD = re.compile(r"\*\*([^*]+)\*\*")
_ITALIC = re.compile(r"\*([^*]+)\*")
_CODE = re.compile(r"`([^`]+)`")
_LINK = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")


def escape_html(text: str) -> str:
    """Escape the three characters that would otherwise be read as markup."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _link(match: re.Match) -> str:
    target = match.group(2).replace('"', "&quot;")
    return f'<a href="{target}">{match.group(1)}</a>'


def format_inline(line: str) -> str:
    line = escape_html(line)
    line = _BOLD.sub(r"<strong>\1</strong>", line)
    line = _ITALIC.sub(r"<em>\1</em>", line)
    line = _CODE.sub(r"<code>\1</code>", line)
    line = _LINK.sub(_link, line)
    return line


def strip_tags(markup: str) -> str:
    """Return the plain text of a tagged fragment, with entities decoded."""
    return BeautifulSoup(markup, "html.parser").get_text()
