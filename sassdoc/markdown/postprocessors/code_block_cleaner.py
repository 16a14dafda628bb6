# sassdoc/markdown/postprocessors/code_block_cleaner.py
"""
Postprocessor that normalizes code blocks Pandoc rendered itself.

Fenced blocks are highlighted before conversion, but indented code blocks
still go through Pandoc and come back as ``<pre><code>`` or, when Pandoc
knows the language, wrapped in ``<div class="sourceCode">``. This makes
them match the preprocessor's output:

    <div class="sourceCode"><pre class="sourceCode css"><code>...</code></pre></div>
      ->  <pre class="highlight css"><code>...</code></pre>
"""

from .utils import parse_html, serialize_html


def code_block_cleaner(html: str, context: dict) -> str:
    if "<pre" not in html:
        return html

    soup = parse_html(html, context)
    changed = False

    for wrapper in soup.find_all("div", class_="sourceCode"):
        wrapper.unwrap()
        changed = True

    for pre in soup.find_all("pre"):
        classes = pre.get("class", [])
        if isinstance(classes, str):
            classes = classes.split()
        if "highlight" in classes:
            continue
        classes = ["highlight"] + [c for c in classes if c != "sourceCode"]
        pre["class"] = classes
        changed = True

    if not changed:
        return html
    return serialize_html(soup, context)


def code_block_cleaner_default(html: str, context: dict) -> str:
    """
    Default configuration for code_block_cleaner.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return code_block_cleaner(html, context)
