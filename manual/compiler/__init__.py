"""
Compiler for the reference manual's plain-text markup.
"""

from .blocks import compile_document
from .config import CATEGORY_OPTIONS, REFERENCE_OPTIONS, CompileOptions
from .highlighter import build_highlighter
from .inline import format_inline
from .renderer import Manual, group_categories, render_manual, search_items
from .slug import slugify
from .types import Category, CompiledDocument, Heading, Section

__all__ = [
    'compile_document',
    'CompileOptions',
    'REFERENCE_OPTIONS',
    'CATEGORY_OPTIONS',
    'build_highlighter',
    'format_inline',
    'Manual',
    'group_categories',
    'render_manual',
    'search_items',
    'slugify',
    'Category',
    'CompiledDocument',
    'Heading',
    'Section',
]
