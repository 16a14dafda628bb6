from .renderer import render_markdown, render_markdown_fragment, render_markdown_inline

__all__ = ("render_markdown", "render_markdown_fragment", "render_markdown_inline")
