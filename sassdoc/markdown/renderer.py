# sassdoc/markdown/renderer.py

import logging

import pypandoc

from sassdoc.text import preserve_pre_newlines

from .config import get_pandoc_config
from .postprocessors import apply_postprocessors
from .preprocessors import apply_preprocessors

logger = logging.getLogger(__name__)


def _pandoc_to_html(text):
    config = get_pandoc_config()
    return pypandoc.convert_text(
        text,
        to="html5",
        format="markdown",
        extra_args=config["extra_args"],
        filters=config.get("filters", []),
    )


def render_markdown(text, context=None):
    """
    Render documentation Markdown to HTML.

    Fenced code is highlighted by the preprocessors, Pandoc converts the
    rest, and the postprocessors tidy up what Pandoc produced.

    Args:
        text: Markdown source
        context: Optional dict shared by the processors (``inline`` etc.)
    """
    context = {} if context is None else context
    logger.debug(f"Rendering {len(text)} characters of markdown (inline={bool(context.get('inline'))})")

    html = _pandoc_to_html(apply_preprocessors(text, context))
    return apply_postprocessors(html, context)


def render_markdown_inline(text, context=None):
    """Render a single line of markdown without the wrapping <p>."""
    context = dict(context or {})
    context["inline"] = True
    return render_markdown(text, context)


def render_markdown_fragment(text, context=None):
    """Render markdown for embedding in generated HTML.

    Newlines inside <pre> blocks are encoded so later whitespace collapsing
    can't disturb code listings.
    """
    return preserve_pre_newlines(render_markdown(text, context))
