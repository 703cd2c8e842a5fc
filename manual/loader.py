"""
Loading and caching of the compiled reference manual.

Sources are read from the paths configured in Django settings
(MANUAL_REFERENCE_PATH, MANUAL_CATEGORY_PATH) and the rendered Manual is
kept in Django's cache until it expires or is rebuilt explicitly.
"""

import logging
from pathlib import Path

from django.core.cache import cache

from .compiler.config import get_manual_config
from .compiler.renderer import Manual, render_manual

logger = logging.getLogger(__name__)

MANUAL_CACHE_KEY = "manual:compiled"


class ManualSourceError(Exception):
    """A manual source file is not configured or cannot be read."""


def read_source(path) -> str:
    """
    Read a manual source file as UTF-8 text.

    Raises:
        ManualSourceError: if no path is given or the file cannot be read
    """
    if not path:
        raise ManualSourceError("Manual source path is not configured")

    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read manual source {path}: {e}")
        raise ManualSourceError(f"Could not read manual source {path}: {e}") from e


def load_manual(reference_path=None, category_path=None) -> Manual:
    """Read both sources (settings paths unless overridden) and render them."""
    config = get_manual_config()
    reference_path = reference_path or config["reference_path"]
    category_path = category_path or config["category_path"]

    logger.info(f"Loading manual from {reference_path} and {category_path}")
    return render_manual(read_source(reference_path), read_source(category_path))


def get_manual(refresh: bool = False) -> Manual:
    """
    Return the compiled manual, rendering it on a cache miss.

    Args:
        refresh: Re-render even if a cached copy exists
    """
    if not refresh:
        manual = cache.get(MANUAL_CACHE_KEY)
        if manual is not None:
            return manual

    manual = load_manual()
    cache.set(MANUAL_CACHE_KEY, manual, get_manual_config()["cache_timeout"])
    return manual
