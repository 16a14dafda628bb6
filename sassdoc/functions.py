"""
API documentation blocks for built-in Sass functions.

    {% function "math.div($number1, $number2)" returns="number" %}
      Returns the result of dividing `$number1` by `$number2`.
    {% endfunction %}
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, NavigableString
from django.utils.html import escape
from django.utils.safestring import mark_safe

from .conf import get_setting
from .exceptions import UnknownTypeError
from .html import content_tag, link_to
from .markdown import render_markdown, render_markdown_fragment

logger = logging.getLogger(__name__)


def highlight_signature(signature: str) -> str:
    """
    Return the syntax-highlighted HTML for a single function signature.

    The signature is highlighted as part of a complete ``@function`` rule so
    the lexer sees valid SCSS, then everything but the signature is dropped.
    """
    html = render_markdown(f"```scss\n@function {signature}\n{{}}\n```")
    code = BeautifulSoup(html, "html.parser").select_one("pre code")
    if code is None:
        return escape(signature)

    children = list(code.children)
    start = next(
        (i for i, el in enumerate(children) if el.get_text().strip() == "@function"),
        None,
    )
    if start is None:
        logger.warning(f"Couldn't find @function in highlighted signature {signature!r}")
        return escape(signature)

    parts = []
    for el in children[start + 1:]:
        text = el.get_text()
        if not parts and not text.strip() and "\n" not in text:
            continue
        if "\n" in text:
            # The signature is a single line; stop at the end of it
            if isinstance(el, NavigableString):
                parts.append(escape(text.split("\n", 1)[0]))
            break
        parts.append(escape(el) if isinstance(el, NavigableString) else str(el))

    return "".join(parts).strip()


def return_type_link(return_type: str):
    """Link each ``|``-separated type in ``return_type`` to its documentation."""
    links = get_setting("SASSDOC_VALUE_TYPE_LINKS")
    rendered = []
    for type_name in return_type.split("|"):
        type_name = type_name.strip()
        if type_name not in links:
            raise UnknownTypeError(f"Unknown type {type_name}")
        if type_name == "null":
            rendered.append(link_to(mark_safe("<code>null</code>"), links[type_name]))
        else:
            rendered.append(link_to(type_name, links[type_name]))
    return mark_safe(" | ".join(rendered))


def function_name(signature: str) -> str:
    return signature.split("(")[0]


def render_function(*signatures: str, returns: str | None = None, body: str = ""):
    """
    Render API docs for a Sass function.

    The function's name is parsed from the first signature and used as the
    block's id. Multiple signatures are shown in sequence; any other distinct
    names get their own wrapping element so links to them still resolve.
    """
    names = [function_name(signature) for signature in signatures]
    highlighted = "\n".join(highlight_signature(signature) for signature in signatures)

    contents = [
        content_tag(
            "pre",
            content_tag("code", mark_safe(highlighted)),
            class_="signature highlight scss",
        )
    ]
    if returns:
        contents.append(content_tag("div", return_type_link(returns), class_="return-type"))
    if body.strip():
        contents.append(mark_safe(render_markdown_fragment(body)))

    html = content_tag("div", contents, class_="function", id=names[0])

    unique_names = list(dict.fromkeys(names))
    for name in unique_names[1:]:
        html = content_tag("div", html, id=name)
    return html
