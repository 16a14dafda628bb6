# sassdoc/markdown/preprocessors/code_highlighter.py
"""
Preprocessor that highlights fenced code blocks with Pygments.

Pandoc trims trailing blank lines from code blocks, which would throw away
the padding that lines up side-by-side examples. Instead of letting Pandoc
handle fences, each block is highlighted here and replaced with a raw
``<pre>`` block. Pandoc copies ``<pre>`` contents verbatim.

Input:
    ```scss
    .foo {
      color: blue;
    }
    ```

Output:
    <pre class="highlight scss"><code><span class="nc">.foo</span> ...</code></pre>
"""

import logging
import re

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

# The newline before the closing fence ends the last line of code, so every
# blank line above it is kept as a trailing line of the block.
_FENCED_BLOCK_RE = re.compile(
    r"^(?P<fence>`{3,}|~{3,})[ \t]*(?P<lang>[\w+#.-]*)[ \t]*\n"
    r"(?P<code>(?:.*?\n)?)^(?P=fence)[ \t]*$",
    re.MULTILINE | re.DOTALL,
)


def _get_lexer(language: str):
    if not language:
        return TextLexer(stripnl=False)
    try:
        return get_lexer_by_name(language, stripnl=False)
    except ClassNotFound:
        logger.warning(f"No Pygments lexer for '{language}', rendering as plain text")
        return TextLexer(stripnl=False)


def highlight_code(code: str, language: str) -> str:
    """Return ``<pre class="highlight {language}">`` HTML for ``code``."""
    lexer = _get_lexer(language)
    highlighted = highlight(code, lexer, HtmlFormatter(nowrap=True))
    classes = f"highlight {language}".strip()
    return f'<pre class="{classes}"><code>{highlighted}</code></pre>'


def code_highlighter(text: str, context: dict) -> str:
    def _replace(match):
        html = highlight_code(match.group("code"), match.group("lang"))
        # Blank lines around the block so Pandoc sees a raw HTML block
        return f"\n{html}\n"

    return _FENCED_BLOCK_RE.sub(_replace, text)


def code_highlighter_default(text: str, context: dict) -> str:
    """
    Default configuration for code_highlighter.

    This is the function that should be registered in PREPROCESSORS.
    """
    return code_highlighter(text, context)
