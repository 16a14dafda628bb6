# sassdoc/markdown/preprocessors/__init__.py

from .code_highlighter import code_highlighter_default

PREPROCESSORS = [
    code_highlighter_default,  # Must run before Pandoc sees the fences
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
