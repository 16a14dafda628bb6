"""
Side-by-side code examples in SCSS, the indented syntax and CSS.

Example source is a single blob of text. Syntaxes are separated by a line
containing only ``===`` and the sections within one syntax (usually one per
file) by a line containing only ``---``:

    // _reset.scss
    * {margin: 0}
    ---
    // base.scss
    @use 'reset';
    ===
    // _reset.sass
    *
      margin: 0
    ---
    // base.sass
    @use reset

A third block may hold the compiled CSS. If it's missing and ``autogen_css``
is set, it's compiled from the single source section. If ``syntax`` is
``"scss"`` or ``"sass"``, the first block is read as that syntax and the
second as the CSS output.

Each section is padded with blank lines so that it lines up with the same
section in the other syntaxes, and the bottoms of all the syntaxes line up
even when they have different numbers of sections.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Optional

import sass
from django.utils.safestring import mark_safe

from .conf import get_setting
from .exceptions import FormatError
from .html import content_tag
from .markdown import render_markdown
from .text import collapse_tag_whitespace, preserve_pre_newlines

logger = logging.getLogger(__name__)

_SYNTAX_SEPARATOR_RE = re.compile(r"^===[ \t]*$", re.MULTILINE)
_SECTION_SEPARATOR_RE = re.compile(r"^---[ \t]*$", re.MULTILINE)

# Lines of height each additional section adds beyond its content: one for
# the block's padding and one for the margin between blocks.
SECTION_MARGIN_LINES = 2

SYNTAX_NAMES = {
    "scss": "SCSS Syntax",
    "sass": "Sass Syntax",
    "css": "CSS Output",
}


def compile_stylesheet(source: str, syntax: str = "scss", style: str = "expanded") -> str:
    """Compile ``source`` to CSS. Raises ``sass.CompileError`` on bad input."""
    return sass.compile(string=source, output_style=style, indented=(syntax == "sass"))


@dataclass
class BuildContext:
    """
    State shared by every example rendered during one build.

    ``unique_id`` scopes the element ids of each example so several examples
    on one page don't collide.
    """

    unique_id: int = 0
    renderer: Callable[[str], str] = render_markdown
    compiler: Callable[..., str] = compile_stylesheet

    def next_id(self) -> int:
        self.unique_id += 1
        return self.unique_id


@dataclass
class Example:
    scss: Optional[list[str]] = None
    sass: Optional[list[str]] = None
    css: Optional[list[str]] = None

    def tracks(self) -> list[tuple[str, list[str]]]:
        """The syntaxes that are present, in display order."""
        return [
            (syntax, sections)
            for syntax, sections in (("scss", self.scss), ("sass", self.sass), ("css", self.css))
            if sections is not None
        ]


@dataclass
class Paddings:
    scss: list[int] = field(default_factory=list)
    sass: list[int] = field(default_factory=list)
    css: list[int] = field(default_factory=list)


def line_count(section: Optional[str]) -> int:
    if not section:
        return 0
    return section.count("\n") + 1


def _split_blocks(contents: str) -> list[Optional[str]]:
    blocks = _SYNTAX_SEPARATOR_RE.split(contents)
    # Trailing separators don't introduce empty syntaxes
    while blocks and not blocks[-1].strip():
        blocks.pop()
    return blocks


def split_sections(block: Optional[str]) -> Optional[list[str]]:
    if block is None:
        return None
    sections = [section.strip() for section in _SECTION_SEPARATOR_RE.split(block)]
    # A closing --- doesn't start another file
    while len(sections) > 1 and not sections[-1]:
        sections.pop()
    return sections


def parse_example(contents: str, syntax: Optional[str] = None) -> Example:
    """Split raw example text into its syntaxes and their sections."""
    blocks = _split_blocks(contents)

    if syntax in ("scss", "sass"):
        if len(blocks) > 2:
            raise FormatError(f"Expected at most one === for {syntax} example in:\n{contents}")
        source, css = (blocks + [None, None])[:2]
        example = Example(css=split_sections(css))
        setattr(example, syntax, split_sections(source))
        return example

    if syntax is not None:
        raise FormatError(f"Unknown example syntax {syntax!r}")

    if len(blocks) < 2:
        raise FormatError(f"Couldn't find === in:\n{contents}")
    if len(blocks) > 3:
        raise FormatError(f"Found more than two === in:\n{contents}")

    scss, sass_block, css = (blocks + [None])[:3]
    return Example(
        scss=split_sections(scss),
        sass=split_sections(sass_block),
        css=split_sections(css),
    )


def autogenerate_css(example: Example, syntax: Optional[str], build_context: BuildContext) -> Example:
    """Fill in ``example.css`` by compiling its only source section."""
    sections = example.scss if example.scss is not None else example.sass
    if not sections or not any(sections):
        raise FormatError("Can't auto-generate CSS without any source to compile.")
    if len(sections) > 1:
        raise FormatError("Can't auto-generate CSS from more than one SCSS file.")

    source_syntax = syntax or "scss"
    logger.debug(f"Compiling {source_syntax} example source to CSS")
    css = build_context.compiler(sections[0], syntax=source_syntax, style="expanded")
    example.css = split_sections(css) if css.strip() else None
    return example


def total_padding(sections1: Optional[list[str]], sections2: Optional[list[str]]) -> int:
    """
    Return the number of lines of height taken up by ``sections1`` and
    ``sections2`` rendered side by side.
    """
    sections1 = sections1 or []
    sections2 = sections2 or []
    total = 0
    for i in range(max(len(sections1), len(sections2))):
        lines1 = line_count(sections1[i] if i < len(sections1) else None)
        lines2 = line_count(sections2[i] if i < len(sections2) else None)
        total += max(lines1, lines2) + SECTION_MARGIN_LINES
    return total


def compute_paddings(example: Example) -> Paddings:
    """
    Calculate the lines of padding to add to the bottom of each section so
    that it lines up with the same section in the other syntaxes.
    """
    tracks = {
        "scss": example.scss or [],
        "sass": example.sass or [],
        "css": example.css or [],
    }
    paddings = Paddings()
    max_num_sections = max(len(sections) for sections in tracks.values())

    for i in range(max_num_sections):
        lines = {
            name: line_count(sections[i] if i < len(sections) else None)
            for name, sections in tracks.items()
        }
        last = {name: i == len(sections) - 1 for name, sections in tracks.items()}

        # A syntax on its last section is lined up against everything the
        # others have left, so it doesn't count towards this section's height.
        max_lines = max(0 if last[name] else lines[name] for name in tracks)

        for name, sections in tracks.items():
            if i >= len(sections):
                continue
            if last[name]:
                others = [tracks[other][i:] for other in tracks if other != name]
                padding = total_padding(*others) - lines[name] - SECTION_MARGIN_LINES
            else:
                padding = max_lines - lines[name]
            getattr(paddings, name).append(max(0, padding))

    return paddings


def _syntax_div(syntax, sections, paddings, unique_id, build_context):
    rendered = []
    for section, padding in zip(sections, paddings):
        newlines = "\n" * padding
        fenced = f"```{syntax}\n{section}{newlines}\n```"
        rendered.append(mark_safe(preserve_pre_newlines(build_context.renderer(fenced))))
    return content_tag(
        "div",
        [content_tag("h3", SYNTAX_NAMES[syntax]), *rendered],
        id=f"example-{unique_id}-{syntax}",
        class_=syntax,
    )


def render_example(
    contents: str,
    autogen_css: Optional[bool] = None,
    syntax: Optional[str] = None,
    build_context: Optional[BuildContext] = None,
) -> str:
    """Render example source text as a tabbed multi-syntax code example."""
    if autogen_css is None:
        autogen_css = get_setting("SASSDOC_AUTOGEN_CSS")
    build_context = build_context or BuildContext()

    example = parse_example(contents, syntax)
    if example.css is None and autogen_css:
        autogenerate_css(example, syntax, build_context)

    paddings = compute_paddings(example)
    unique_id = build_context.next_id()
    logger.debug(
        f"Rendering example {unique_id}: "
        + ", ".join(f"{name}={len(sections)}" for name, sections in example.tracks())
    )

    divs = [
        _syntax_div(name, sections, getattr(paddings, name), unique_id, build_context)
        for name, sections in example.tracks()
        if sections
    ]
    html = content_tag("div", divs, class_="code-example", data_unique_id=unique_id)
    return mark_safe(collapse_tag_whitespace(html))
