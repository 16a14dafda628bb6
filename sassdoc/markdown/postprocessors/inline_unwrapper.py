# sassdoc/markdown/postprocessors/inline_unwrapper.py
"""
Postprocessor that strips the paragraph Pandoc wraps around inline content.

Only active when the rendering context has ``inline`` set, which is how
``render_markdown_inline`` asks for a bare fragment:

    <p>Use <code>@use</code> instead.</p>  ->  Use <code>@use</code> instead.

Output with more than one top-level block is left alone.
"""

from bs4 import NavigableString, Tag

from .utils import parse_html, serialize_html


def inline_unwrapper(html: str, context: dict) -> str:
    if not context.get("inline"):
        return html

    soup = parse_html(html, context)
    blocks = [
        child
        for child in soup.contents
        if not (isinstance(child, NavigableString) and not child.strip())
    ]
    if len(blocks) != 1 or not isinstance(blocks[0], Tag) or blocks[0].name != "p":
        return html

    blocks[0].unwrap()
    return serialize_html(soup, context).strip()


def inline_unwrapper_default(html: str, context: dict) -> str:
    """
    Default configuration for inline_unwrapper.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return inline_unwrapper(html, context)
