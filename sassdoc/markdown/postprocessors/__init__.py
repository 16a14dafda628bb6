# sassdoc/markdown/postprocessors/__init__.py

from .code_block_cleaner import code_block_cleaner_default
from .inline_unwrapper import inline_unwrapper_default
from .utils import discard_tree

POSTPROCESSORS = [
    code_block_cleaner_default,  # Drop the wrappers Pandoc adds around unfenced code
    inline_unwrapper_default,  # Strip the <p> around inline-only renders
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    discard_tree(context)
    return html
