"""Helpers shared by postprocessors."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag


def find_code_blocks(soup: BeautifulSoup, language: str) -> list[Tag]:
    """Return the ``<code>`` elements of fenced blocks tagged with ``language``.

    Blocks are rendered as ``<pre class="language-x">`` holding a copy button
    followed by the code element; only the code element is returned.
    """
    blocks: list[Tag] = []
    for pre in soup.find_all("pre", class_=f"language-{language}"):
        code = pre.find("code", recursive=False)
        if code is not None:
            blocks.append(code)
    return blocks
