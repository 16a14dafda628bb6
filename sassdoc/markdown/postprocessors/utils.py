"""
One parse tree shared by the whole postprocessor chain.

Postprocessors pass HTML strings to each other. The tree a step edited is
remembered along with the HTML it serialised to, so the next step only
parses again when it is handed something different.
"""

from __future__ import annotations

from dataclasses import dataclass

from bs4 import BeautifulSoup

_PARSED = "_parsed_html"


@dataclass
class ParsedHtml:
    html: str
    soup: BeautifulSoup

    @classmethod
    def parse(cls, html: str) -> "ParsedHtml":
        return cls(html, BeautifulSoup(html, "html.parser"))

    def matches(self, html: str) -> bool:
        return self.html == html


def parse_html(html: str, context: dict) -> BeautifulSoup:
    parsed = context.get(_PARSED)
    if parsed is None or not parsed.matches(html):
        parsed = context[_PARSED] = ParsedHtml.parse(html)
    return parsed.soup


def serialize_html(soup: BeautifulSoup, context: dict) -> str:
    """Return the edited tree as HTML and remember it for the next step."""
    parsed = context[_PARSED] = ParsedHtml(str(soup), soup)
    return parsed.html


def discard_tree(context: dict) -> None:
    context.pop(_PARSED, None)
