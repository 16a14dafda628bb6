"""
Asides and implementation-status tables embedded in documentation pages.
"""

from django.utils.safestring import mark_safe

from .html import content_tag
from .markdown import render_markdown_fragment

IMPLEMENTATIONS = (
    ("dart", "Dart Sass"),
    ("libsass", "LibSass"),
    ("node", "Node Sass"),
    ("ruby", "Ruby Sass"),
)


def _callout(heading: str, modifier: str, markdown: str):
    return content_tag(
        "aside",
        [content_tag("h3", heading), mark_safe(render_markdown_fragment(markdown))],
        class_=f"sl-c-callout sl-c-callout--{modifier}",
    )


def heads_up(markdown: str):
    """Return HTML for a warning."""
    return _callout("Heads up!", "warning", markdown)


def fun_fact(markdown: str):
    """
    Return HTML for a fun fact that's not directly relevant to the main
    documentation.
    """
    return _callout("Fun fact:", "fun-fact", markdown)


def impl_status_row(name: str, status):
    """Render a single row for ``impl_status``."""
    if status is True:
        status_text = "✓"
    elif status is False:
        status_text = "✗"
    else:
        status_text = f"since {status}"

    return content_tag(
        "tr",
        [
            content_tag("th", name, class_="name"),
            content_tag("th", status_text, class_="status"),
        ],
        class_="supported" if status else "unsupported",
    )


def impl_status(dart=None, libsass=None, node=None, ruby=None, details=None):
    """
    Render a status dashboard for each implementation's support for a feature.

    Each implementation's value can be ``True``, meaning it fully supports
    the feature; ``False``, meaning it doesn't support it yet; or a version
    string, the version it started supporting the feature. Implementations
    left as ``None`` are omitted.

    ``details`` is optional Markdown describing implementation differences or
    the old behavior; it becomes the table's caption.
    """
    statuses = {"dart": dart, "libsass": libsass, "node": node, "ruby": ruby}
    contents = [
        impl_status_row(name, statuses[impl])
        for impl, name in IMPLEMENTATIONS
        if statuses[impl] is not None
    ]

    if details and details.strip():
        caption = content_tag("caption", mark_safe(render_markdown_fragment(details)))
        contents.insert(0, caption)

    return content_tag("table", contents, class_="impl-status")
