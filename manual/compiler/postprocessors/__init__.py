# manual/compiler/postprocessors/__init__.py

from .code_highlighter import highlight_code_blocks_default

POSTPROCESSORS = [
    highlight_code_blocks_default,  # Keyword/string/number/comment tokens in code samples
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
