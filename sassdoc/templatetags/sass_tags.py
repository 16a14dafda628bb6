"""
Django template tags for the Sass documentation site.

Usage in templates:
1. Load the tags: {% load sass_tags %}

2. Block helpers capture their body as plain text, strip the common
   indentation, and hand it to the helper:

    {% example autogen_css=False %}
      .foo {
        color: blue;
      }
      ===
      .foo
        color: blue
    {% endexample %}

    {% heads_up %}Markdown warning text.{% endheads_up %}
    {% fun_fact %}Markdown aside.{% endfun_fact %}
    {% impl_status dart="1.23.0" libsass=False ruby=False %}{% endimpl_status %}
    {% function "math.div($number1, $number2)" returns="number" %}Docs{% endfunction %}

3. Page helpers are simple tags:

    <title>{% page_title %}</title>
    &copy; {% copyright_years 2006 %}
    {% pages_for_group "Documentation" as pages %}
"""

from django import template
from django.template.base import token_kwargs
from django.utils.safestring import mark_safe

from sassdoc import callouts, functions, site
from sassdoc.examples import BuildContext, render_example
from sassdoc.markdown import render_markdown
from sassdoc.markdown.toc import table_of_contents as _table_of_contents
from sassdoc.text import remove_leading_indentation

register = template.Library()

BUILD_CONTEXT_KEY = "build_context"


def get_build_context(context):
    """
    Return the BuildContext for this render.

    A site build passes one in as the ``build_context`` template variable so
    ids stay unique across every page; otherwise one is kept for the
    duration of the current template render.
    """
    build_context = context.get(BUILD_CONTEXT_KEY)
    if build_context is not None:
        return build_context
    if BUILD_CONTEXT_KEY not in context.render_context:
        context.render_context[BUILD_CONTEXT_KEY] = BuildContext()
    return context.render_context[BUILD_CONTEXT_KEY]


def _parse_arguments(parser, token, allowed_kwargs=(), positional=False):
    bits = token.split_contents()
    tag_name = bits.pop(0)
    args = []
    kwargs = {}
    for bit in bits:
        kwarg = token_kwargs([bit], parser)
        if kwarg:
            key = next(iter(kwarg))
            if key not in allowed_kwargs:
                raise template.TemplateSyntaxError(
                    f"'{tag_name}' received unexpected keyword argument '{key}'"
                )
            kwargs.update(kwarg)
            continue
        if not positional:
            raise template.TemplateSyntaxError(
                f"'{tag_name}' only accepts keyword arguments, got '{bit}'"
            )
        if kwargs:
            raise template.TemplateSyntaxError(
                f"'{tag_name}' received a positional argument after a keyword argument"
            )
        args.append(parser.compile_filter(bit))
    return tag_name, args, kwargs


def _parse_body(parser, tag_name):
    nodelist = parser.parse((f"end{tag_name}",))
    parser.delete_first_token()
    return nodelist


class CaptureNode(template.Node):
    """A block tag whose body is rendered to text and passed to a helper."""

    def __init__(self, nodelist, args=None, kwargs=None):
        self.nodelist = nodelist
        self.args = args or []
        self.kwargs = kwargs or {}

    def capture(self, context):
        return remove_leading_indentation(self.nodelist.render(context))

    def resolve_arguments(self, context):
        args = [arg.resolve(context) for arg in self.args]
        kwargs = {key: value.resolve(context) for key, value in self.kwargs.items()}
        return args, kwargs


class ExampleNode(CaptureNode):
    def render(self, context):
        _, kwargs = self.resolve_arguments(context)
        return render_example(
            self.capture(context),
            autogen_css=kwargs.get("autogen_css"),
            syntax=kwargs.get("syntax"),
            build_context=get_build_context(context),
        )


class CalloutNode(CaptureNode):
    def __init__(self, nodelist, helper):
        super().__init__(nodelist)
        self.helper = helper

    def render(self, context):
        return self.helper(self.capture(context))


class ImplStatusNode(CaptureNode):
    def render(self, context):
        _, kwargs = self.resolve_arguments(context)
        return callouts.impl_status(details=self.capture(context), **kwargs)


class FunctionNode(CaptureNode):
    def render(self, context):
        signatures, kwargs = self.resolve_arguments(context)
        return functions.render_function(
            *signatures, returns=kwargs.get("returns"), body=self.capture(context)
        )


@register.tag("example")
def do_example(parser, token):
    """
    Renders a code example in SCSS and/or the indented syntax, with CSS.

    {% example [autogen_css=True|False] [syntax="scss"|"sass"] %}...{% endexample %}
    """
    tag_name, _, kwargs = _parse_arguments(
        parser, token, allowed_kwargs=("autogen_css", "syntax")
    )
    return ExampleNode(_parse_body(parser, tag_name), kwargs=kwargs)


@register.tag("heads_up")
def do_heads_up(parser, token):
    tag_name, _, _ = _parse_arguments(parser, token)
    return CalloutNode(_parse_body(parser, tag_name), callouts.heads_up)


@register.tag("fun_fact")
def do_fun_fact(parser, token):
    tag_name, _, _ = _parse_arguments(parser, token)
    return CalloutNode(_parse_body(parser, tag_name), callouts.fun_fact)


@register.tag("impl_status")
def do_impl_status(parser, token):
    """
    {% impl_status dart="1.23.0" libsass=False node=False ruby=False %}
      Optional Markdown caption.
    {% endimpl_status %}
    """
    tag_name, _, kwargs = _parse_arguments(
        parser, token, allowed_kwargs=("dart", "libsass", "node", "ruby")
    )
    return ImplStatusNode(_parse_body(parser, tag_name), kwargs=kwargs)


@register.tag("function")
def do_function(parser, token):
    """
    {% function "signature" ["signature" ...] [returns="type"] %}
      Markdown description.
    {% endfunction %}
    """
    tag_name, args, kwargs = _parse_arguments(
        parser, token, allowed_kwargs=("returns",), positional=True
    )
    if not args:
        raise template.TemplateSyntaxError(f"'{tag_name}' requires at least one signature")
    return FunctionNode(_parse_body(parser, tag_name), args=args, kwargs=kwargs)


@register.simple_tag(takes_context=True)
def page_title(context, title=None):
    return site.page_title(title or context.get("title"))


@register.simple_tag
def copyright_years(start_year):
    return site.copyright_years(start_year)


@register.simple_tag(takes_context=True)
def pages_for_group(context, group_name):
    """{% pages_for_group "Documentation" as pages %}"""
    return site.pages_for_group(group_name, context.get("sitemap") or [])


@register.simple_tag
def impl_version(impl):
    return site.impl_version(impl)


@register.simple_tag
def release_url(impl):
    return site.release_url(impl)


@register.simple_tag
def table_of_contents(source_path):
    return mark_safe(_table_of_contents(source_path))


@register.simple_tag
def return_type_link(return_type):
    return functions.return_type_link(return_type)


@register.filter(name="markdown_wrap")
def markdown_wrap(value):
    return mark_safe(render_markdown(value))
