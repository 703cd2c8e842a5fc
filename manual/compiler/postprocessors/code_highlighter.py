# manual/compiler/postprocessors/code_highlighter.py

import logging

from bs4 import BeautifulSoup

from .utils import find_code_blocks

logger = logging.getLogger(__name__)


def highlight_code_blocks(html: str, context: dict, language: str = "basil") -> str:
    """
    Run the keyword highlighter over code blocks of one language.

    Expects ``context["highlighter"]`` to hold the function built by
    ``build_highlighter``; without it the markup is returned untouched.
    Only ``<pre class="language-<language>">`` blocks are touched, and the
    copy button inside each block is left alone.
    """
    highlighter = context.get("highlighter")
    if highlighter is None or not language:
        return html

    soup = BeautifulSoup(html, "html.parser")
    count = 0
    for code in find_code_blocks(soup, language):
        tagged = highlighter(code.get_text())
        code.clear()
        code.append(BeautifulSoup(tagged, "html.parser"))
        count += 1

    logger.debug(f"Highlighted {count} {language} code block(s)")
    return str(soup)


def highlight_code_blocks_default(html: str, context: dict) -> str:
    """
    Default configuration for highlight_code_blocks.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return highlight_code_blocks(
        html,
        context,
        language=context.get("highlight_language", "basil"),
    )
