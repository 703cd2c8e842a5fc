from dataclasses import dataclass

from django.conf import settings


@dataclass(frozen=True)
class CompileOptions:
    """
    Options for a single compiler pass.

    section_heading_level: headings at this level or deeper get the ``kw-``
        identifier prefix that marks them as keyword entries.
    category_mode: level-2 headings get the ``cat-`` prefix instead.
    """

    section_heading_level: int = 2
    category_mode: bool = False


REFERENCE_OPTIONS = CompileOptions(section_heading_level=2, category_mode=False)
CATEGORY_OPTIONS = CompileOptions(section_heading_level=3, category_mode=True)


def get_manual_config():
    """
    Settings for loading and rendering the reference manual.

    Every value can be overridden in Django settings with the MANUAL_ prefix.
    """
    return {
        "reference_path": getattr(settings, "MANUAL_REFERENCE_PATH", None),
        "category_path": getattr(settings, "MANUAL_CATEGORY_PATH", None),
        "highlight_language": getattr(settings, "MANUAL_HIGHLIGHT_LANGUAGE", "basil"),
        "comment_markers": tuple(getattr(settings, "MANUAL_COMMENT_MARKERS", ("REM",))),
        "cache_timeout": getattr(settings, "MANUAL_CACHE_TIMEOUT", 3600),
        "title": getattr(settings, "MANUAL_TITLE", "Basil Language Reference"),
    }
