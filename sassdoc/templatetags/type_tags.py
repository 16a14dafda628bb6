# sassdoc/templatetags/type_tags.py

from django import template
from django.utils.safestring import mark_safe

from sassdoc.markdown import render_markdown, render_markdown_inline
from sassdoc.text import remove_leading_indentation, typogr

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value):
    return mark_safe(render_markdown(value))


@register.filter(name="markdown_inline")
def markdown_inline_filter(value):
    """Render a single line of markdown without the wrapping <p>"""
    return mark_safe(render_markdown_inline(value))


@register.filter(name="typogr")
def typogr_filter(value):
    return mark_safe(typogr(value))


class TransformNode(template.Node):
    def __init__(self, nodelist, transform):
        self.nodelist = nodelist
        self.transform = transform

    def render(self, context):
        content = remove_leading_indentation(self.nodelist.render(context))
        return mark_safe(self.transform(content))


def _block_tag(name, transform):
    def do_block(parser, token):
        bits = token.split_contents()
        if len(bits) != 1:
            raise template.TemplateSyntaxError(f"'{name}' takes no arguments")
        nodelist = parser.parse((f"end{name}",))
        parser.delete_first_token()
        return TransformNode(nodelist, transform)

    register.tag(name, do_block)


# Paired versions of the filters: {% markdown %}...{% endmarkdown %}
_block_tag("markdown", render_markdown)
_block_tag("markdown_inline", render_markdown_inline)
_block_tag("typogr", typogr)
