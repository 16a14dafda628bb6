from __future__ import annotations

import pytest
import sass
from bs4 import BeautifulSoup

from sassdoc.examples import (
    BuildContext,
    Example,
    compute_paddings,
    line_count,
    parse_example,
    render_example,
    total_padding,
)
from sassdoc.exceptions import FormatError


def fake_renderer(text: str) -> str:
    return f"<pre>{text}</pre>\n"


def fake_compiler(source, syntax="scss", style="expanded"):
    return ".a {\n  b: c;\n}\n"


def make_context(**kwargs) -> BuildContext:
    kwargs.setdefault("renderer", fake_renderer)
    kwargs.setdefault("compiler", fake_compiler)
    return BuildContext(**kwargs)


# Parsing


def test_parse_two_syntaxes_without_css() -> None:
    example = parse_example("a\nb\n===\nc\n")

    assert example.scss == ["a\nb"]
    assert example.sass == ["c"]
    assert example.css is None


def test_parse_splits_and_strips_sections() -> None:
    example = parse_example(
        "// _reset.scss\n* {margin: 0}\n---\n// base.scss\n@use 'reset';\n"
        "===\n"
        "// _reset.sass\n*\n  margin: 0\n---\n// base.sass\n@use reset\n"
        "===\n"
        "* {\n  margin: 0;\n}\n"
    )

    assert example.scss == ["// _reset.scss\n* {margin: 0}", "// base.scss\n@use 'reset';"]
    assert example.sass == ["// _reset.sass\n*\n  margin: 0", "// base.sass\n@use reset"]
    assert example.css == ["* {\n  margin: 0;\n}"]


def test_parse_without_separator_fails() -> None:
    with pytest.raises(FormatError):
        parse_example("a\nb\n")


def test_parse_with_too_many_blocks_fails() -> None:
    with pytest.raises(FormatError):
        parse_example("a\n===\nb\n===\nc\n===\nd\n")


def test_parse_ignores_trailing_separator() -> None:
    example = parse_example("a\n===\nb\n===\n")

    assert example.sass == ["b"]
    assert example.css is None


def test_parse_single_syntax_scss() -> None:
    example = parse_example("a\n===\nb\n", syntax="scss")

    assert example.scss == ["a"]
    assert example.sass is None
    assert example.css == ["b"]


def test_parse_single_syntax_sass_without_css() -> None:
    example = parse_example("a\n  b: c\n", syntax="sass")

    assert example.scss is None
    assert example.sass == ["a\n  b: c"]
    assert example.css is None


def test_parse_single_syntax_with_too_many_blocks_fails() -> None:
    with pytest.raises(FormatError):
        parse_example("a\n===\nb\n===\nc\n", syntax="scss")


def test_parse_unknown_syntax_fails() -> None:
    with pytest.raises(FormatError):
        parse_example("a\n===\nb\n", syntax="less")


# Padding


def test_line_count() -> None:
    assert line_count(None) == 0
    assert line_count("") == 0
    assert line_count("a") == 1
    assert line_count("a\n\nb") == 3


def test_total_padding_uses_the_longer_list() -> None:
    assert total_padding(["a"], ["a\nb", "c\nd\ne"]) == (2 + 2) + (3 + 2)
    assert total_padding(None, ["a"]) == 3
    assert total_padding([], None) == 0


def test_single_sections_line_up_bottoms() -> None:
    paddings = compute_paddings(Example(scss=["a\nb"], sass=["c"]))

    assert paddings.scss == [0]
    assert paddings.sass == [1]
    assert paddings.css == []


def test_equal_sections_need_no_padding() -> None:
    paddings = compute_paddings(Example(scss=["a\nb", "c"], sass=["d\ne", "f"]))

    assert paddings.scss == [0, 0]
    assert paddings.sass == [0, 0]


def test_shorter_section_is_padded_to_match() -> None:
    paddings = compute_paddings(Example(scss=["a\nb\nc", "d"], sass=["e", "f"]))

    assert paddings.scss == [0, 0]
    assert paddings.sass == [2, 0]


def test_last_section_covers_remaining_sections_of_others() -> None:
    paddings = compute_paddings(Example(scss=["a", "b\nc"], sass=["x\ny\nz"]))

    # scss: 1 + 2 + 2 lines, sass: 3 + 2 lines of padding
    assert paddings.scss == [0, 0]
    assert paddings.sass == [2]


def test_three_tracks_line_up() -> None:
    paddings = compute_paddings(Example(scss=["a\nb\nc"], sass=["a\nb"], css=["x"]))

    assert paddings.scss == [0]
    assert paddings.sass == [1]
    assert paddings.css == [2]


def test_paddings_are_never_negative() -> None:
    paddings = compute_paddings(
        Example(scss=["a\nb\nc\nd\ne"], sass=["a", "b", "c"], css=["x\ny"])
    )

    for values in (paddings.scss, paddings.sass, paddings.css):
        assert all(padding >= 0 for padding in values)
    assert len(paddings.scss) == 1
    assert len(paddings.sass) == 3
    assert len(paddings.css) == 1


# Rendering


def test_render_example_wraps_each_syntax() -> None:
    html = render_example("a\nb\n===\nc\n", autogen_css=False, build_context=make_context())

    assert html.startswith('<div class="code-example" data-unique-id="1">')
    assert '<div id="example-1-scss" class="scss"><h3>SCSS Syntax</h3>' in html
    assert '<div id="example-1-sass" class="sass"><h3>Sass Syntax</h3>' in html
    assert "example-1-css" not in html
    assert html.index("example-1-scss") < html.index("example-1-sass")


def test_render_example_appends_padding_as_blank_lines() -> None:
    html = render_example("a\nb\n===\nc\n", autogen_css=False, build_context=make_context())

    # scss needs no padding, sass needs one line
    assert "<pre>```scss&#x000A;a&#x000A;b&#x000A;```</pre>" in html
    assert "<pre>```sass&#x000A;c&#x000A;&#x000A;```</pre>" in html


def test_render_example_collapses_newlines_between_tags() -> None:
    html = render_example("a\n===\nb\n===\nc\n", build_context=make_context())

    assert "\n<" not in html
    assert "\n" not in html


def test_render_example_renders_every_section() -> None:
    html = render_example(
        "a\n---\nb\n---\nc\n===\nd\n===\ne\n", build_context=make_context()
    )

    assert html.count("```scss") == 3
    assert html.count("```sass") == 1
    assert html.count("```css") == 1


def test_render_example_ids_increase_per_call() -> None:
    build_context = make_context()
    first = render_example("a\n===\nb\n", autogen_css=False, build_context=build_context)
    second = render_example("a\n===\nb\n", autogen_css=False, build_context=build_context)

    assert build_context.unique_id == 2
    assert 'data-unique-id="2"' in second
    normalized = second.replace("example-2-", "example-1-").replace(
        'data-unique-id="2"', 'data-unique-id="1"'
    )
    assert normalized == first


def test_render_example_autogenerates_css() -> None:
    calls = []

    def compiler(source, syntax="scss", style="expanded"):
        calls.append((source, syntax, style))
        return ".a {\n  b: c;\n}\n"

    html = render_example(
        ".a {b: c}\n===\n.a\n  b: c\n", build_context=make_context(compiler=compiler)
    )

    assert calls == [(".a {b: c}", "scss", "expanded")]
    assert '<div id="example-1-css" class="css"><h3>CSS Output</h3>' in html


def test_render_example_autogenerates_css_from_sass() -> None:
    calls = []

    def compiler(source, syntax="scss", style="expanded"):
        calls.append(syntax)
        return ".a {\n  b: c;\n}\n"

    html = render_example(".a\n  b: c\n", syntax="sass", build_context=make_context(compiler=compiler))

    assert calls == ["sass"]
    assert "example-1-sass" in html
    assert "example-1-css" in html


def test_render_example_omits_empty_generated_css() -> None:
    html = render_example(
        "%placeholder {b: c}\n===\n%placeholder\n  b: c\n",
        build_context=make_context(compiler=lambda source, **kwargs: "\n"),
    )

    assert "example-1-css" not in html


def test_render_example_refuses_to_autogenerate_from_several_sections() -> None:
    with pytest.raises(FormatError, match="more than one"):
        render_example("a\n---\nb\n===\nc\n---\nd\n", autogen_css=True, build_context=make_context())


def test_render_example_refuses_to_autogenerate_without_source() -> None:
    with pytest.raises(FormatError, match="without any source"):
        render_example("", autogen_css=True, syntax="scss", build_context=make_context())


def test_parse_drops_trailing_empty_sections() -> None:
    example = parse_example("a\n---\nb\n---\n===\nc\n---\n")

    assert example.scss == ["a", "b"]
    assert example.sass == ["c"]


def test_render_example_has_no_empty_pane_for_closing_separator() -> None:
    html = render_example("a\n---\n===\nb\n", autogen_css=False, build_context=make_context())

    assert html.count("<pre>") == 2


def test_render_example_without_separator_fails() -> None:
    with pytest.raises(FormatError):
        render_example("a\nb\n", build_context=make_context())


def test_render_example_propagates_compile_errors() -> None:
    def compiler(source, **kwargs):
        raise sass.CompileError("Error: expected \"}\".")

    with pytest.raises(sass.CompileError):
        render_example(".a {\n===\n.a\n", build_context=make_context(compiler=compiler))


def test_render_example_uses_autogen_setting(settings) -> None:
    settings.SASSDOC_AUTOGEN_CSS = False
    calls = []

    def compiler(source, **kwargs):
        calls.append(source)
        return ""

    render_example("a\n===\nb\n", build_context=make_context(compiler=compiler))

    assert calls == []


def test_render_example_with_real_stack() -> None:
    html = render_example(".foo {color: blue}\n===\n.foo\n  color: blue\n")

    assert 'id="example-1-scss"' in html
    assert 'id="example-1-sass"' in html
    assert 'id="example-1-css"' in html
    assert 'class="highlight css"' in html
    css = BeautifulSoup(html, "html.parser").find(id="example-1-css")
    assert "color: blue;" in css.get_text()
    assert "\n<" not in html


def test_render_example_panes_line_up_with_real_stack() -> None:
    html = render_example("a\nb\n===\nc\n", autogen_css=False)

    soup = BeautifulSoup(html, "html.parser")
    scss = soup.find(id="example-1-scss").find("code").get_text()
    sass_code = soup.find(id="example-1-sass").find("code").get_text()
    assert scss == "a\nb\n"
    assert sass_code == "c\n\n"
    assert scss.count("\n") == sass_code.count("\n")
