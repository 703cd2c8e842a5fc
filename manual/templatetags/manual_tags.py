# manual/templatetags/manual_tags.py

from django import template
from django.utils.safestring import mark_safe

from manual.compiler.blocks import compile_document
from manual.compiler.config import REFERENCE_OPTIONS
from manual.search import highlight_spans

register = template.Library()


@register.filter(name="manual_markup")
def manual_markup_filter(value):
    return mark_safe(compile_document(value or "", REFERENCE_OPTIONS).html)


@register.filter(name="highlight_query")
def highlight_query_filter(value, query):
    """Mark occurrences of the search query in plain text"""
    return mark_safe(highlight_spans(str(value or ""), query or ""))
