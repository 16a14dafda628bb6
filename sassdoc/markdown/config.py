def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    Fenced code blocks never reach Pandoc: the ``code_highlighter``
    preprocessor replaces them with Pygments-highlighted raw HTML, which the
    ``raw_html`` extension passes through untouched.
    """
    return {
        "extra_args": [
            # Enable Pandoc markdown extensions (all in --from argument)
            "--from=markdown+autolink_bare_uris+strikeout+superscript+subscript+task_lists+smart+pipe_tables+definition_lists+footnotes+raw_html+header_attributes+auto_identifiers+implicit_header_references+fenced_code_attributes",
            # Keep source line breaks in paragraphs
            "--wrap=preserve",
        ],
        "filters": [],
    }
