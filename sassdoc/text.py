"""
Plain-text and HTML-string helpers used around the Markdown pipeline.
"""

import re

from typogrify.filters import typogrify

_INDENT_RE = re.compile(r"^ *(?=\S)(?!<)", re.MULTILINE)
_PRESERVED_TAG_RE = re.compile(
    r"<(pre|textarea)([^>]*)>(.*?)</\1>", re.DOTALL | re.IGNORECASE
)
_NEWLINES_BEFORE_TAG_RE = re.compile(r"\n+<(/?[a-z0-9]+)")


def remove_leading_indentation(text: str) -> str:
    """
    Remove leading spaces from every non-empty line in ``text`` while
    preserving relative indentation.

    Lines that start with an HTML tag don't count towards the common
    indentation, since template engines tend to emit them flush left.
    """
    indents = _INDENT_RE.findall(text)
    if not indents:
        return text
    prefix = min(indents, key=len)
    if not prefix:
        return text
    return re.sub(rf"^{prefix}", "", text, flags=re.MULTILINE)


def preserve_pre_newlines(html: str) -> str:
    """
    Encode newlines inside ``<pre>`` and ``<textarea>`` as ``&#x000A;``.

    This keeps whitespace-sensitive content intact when the surrounding
    HTML is later reflowed.
    """

    def _preserve(match):
        tag, attrs, body = match.group(1), match.group(2), match.group(3)
        body = body.replace("\n", "&#x000A;")
        return f"<{tag}{attrs}>{body}</{tag}>"

    return _PRESERVED_TAG_RE.sub(_preserve, html)


def collapse_tag_whitespace(html: str) -> str:
    """Drop runs of newlines that precede a tag.

    Newlines between generated tags make Markdown parse the surrounding
    blocks as separate paragraphs.
    """
    return _NEWLINES_BEFORE_TAG_RE.sub(r"<\1", html)


def typogr(text: str) -> str:
    """Apply typographic refinements (smart quotes, widows, caps, amps)."""
    return typogrify(text)
