"""
Table of contents for a documentation page.

The page's Markdown is rendered and its headings are nested by level: an
``h3`` following an ``h2`` becomes that ``h2``'s child, and so on. The
result is emitted as nested ``<ul>`` lists linking to each heading's id.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TypedDict

from bs4 import BeautifulSoup
from django.utils.safestring import mark_safe
from django.utils.text import slugify

from sassdoc.html import content_tag, link_to

from .renderer import render_markdown

logger = logging.getLogger(__name__)

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")


class HeadingNode(TypedDict):
    level: int
    id: str
    title: str
    title_html: str
    children: list["HeadingNode"]


def extract_toc_from_html(html: str) -> list[HeadingNode]:
    """
    Return the headings in ``html`` as a tree.

    ``title_html`` keeps inline markup such as ``<code>``; headings without
    an id fall back to a slug of their text. Empty headings are skipped.
    """
    root: list[HeadingNode] = []
    open_nodes: list[HeadingNode] = []

    for heading in BeautifulSoup(html, "html.parser").find_all(HEADING_TAGS):
        title = heading.get_text(" ", strip=True)
        if not title:
            continue

        node: HeadingNode = {
            "level": int(heading.name[1:]),
            "id": heading.get("id") or slugify(title),
            "title": title,
            "title_html": heading.decode_contents().strip(),
            "children": [],
        }

        # Close every section at this level or deeper
        while open_nodes and open_nodes[-1]["level"] >= node["level"]:
            open_nodes.pop()
        siblings = open_nodes[-1]["children"] if open_nodes else root
        siblings.append(node)
        open_nodes.append(node)

    return root


def render_toc_html(nodes: list[HeadingNode]) -> str:
    """Render a heading tree as nested ``<ul>`` lists of in-page links."""
    if not nodes:
        return ""

    items = []
    for node in nodes:
        contents = [link_to(mark_safe(node["title_html"]), f"#{node['id']}")]
        if node["children"]:
            contents.append(render_toc_html(node["children"]))
        items.append(content_tag("li", contents))
    return content_tag("ul", items)


def table_of_contents(source_path) -> str:
    """Return the table of contents for the Markdown file at ``source_path``."""
    content = Path(source_path).read_text(encoding="utf-8")
    toc = extract_toc_from_html(render_markdown(content))
    logger.debug(f"Extracted {len(toc)} top-level headings from {source_path}")
    return render_toc_html(toc)
