# manual/compiler/slug.py

import re

_LEADING_HASHES = re.compile(r"^#+")
# Characters removed outright rather than turned into separators.
_DROPPED = re.compile(r"[.$%`'\"()\[\]{}:;+*,!?/]")
_WHITESPACE = re.compile(r"\s+")
_UNSAFE = re.compile(r"[^a-z0-9_-]")
_DASHES = re.compile(r"-+")


def slugify(text: str) -> str:
    """
    Convert heading text into an anchor identifier.

    Directive-style headings such as ``#CGI`` lose their leading hashes, so
    they become ``cgi`` rather than ``-cgi``. Underscores survive untouched.
    An empty string is returned when nothing usable remains; callers are
    expected to substitute a positional identifier in that case.

    Example:
        >>> slugify("INPUT$ (prompt)")
        'input-prompt'
    """
    text = text.lower()
    text = _LEADING_HASHES.sub("", text)
    text = _DROPPED.sub("", text)
    text = _WHITESPACE.sub("-", text)
    text = _UNSAFE.sub("-", text)
    text = _DASHES.sub("-", text)
    return text.strip("-")


def fallback_id(index: int) -> str:
    """Positional identifier for a heading whose slug came out empty."""
    return f"h-{index}"
