"""Small HTML builder shared by the template helpers."""

from django.utils.html import conditional_escape, format_html, format_html_join
from django.utils.safestring import mark_safe


def _attribute_name(key: str) -> str:
    # class_ -> class, data_unique_id -> data-unique-id
    return key.rstrip("_").replace("_", "-")


def content_tag(name: str, contents="", **attrs):
    """
    Return ``<name attrs>contents</name>`` as a safe string.

    ``contents`` may be a string or a list of strings; lists are joined with
    newlines. Strings that aren't marked safe are escaped. Attributes keep
    the order they were passed in and are omitted when ``None``.
    """
    if isinstance(contents, (list, tuple)):
        inner = "\n".join(conditional_escape(item) for item in contents)
    else:
        inner = conditional_escape(contents)

    attributes = format_html_join(
        "",
        ' {}="{}"',
        ((_attribute_name(key), value) for key, value in attrs.items() if value is not None),
    )
    return format_html("<{}{}>{}</{}>", name, attributes, mark_safe(inner), name)


def link_to(text, url: str):
    return content_tag("a", text, href=url)
