from django import template
from django.core.exceptions import ImproperlyConfigured
from django.template.base import Node
from django.utils.safestring import mark_safe

from blocks.block import Block

register = template.Library()


def get_web_view(context):
    web_view = context.get('web_view')
    if web_view is None:
        raise ImproperlyConfigured(
            "No 'web_view' in the template context. Add "
            "'blocks.context_processors.web_view' to the template context "
            "processors or pass a WebView explicitly."
        )
    return web_view


class OutputBlockNode(Node):
    def __init__(self, nodelist, block_id, in_place):
        self.nodelist = nodelist
        self.block_id = block_id
        self.in_place = in_place

    def render(self, context):
        web_view = get_web_view(context)

        block = Block(web_view)
        if self.block_id is not None:
            block_id = self.block_id.resolve(context, ignore_failures=True)
            if block_id is not None:
                block = block.id(block_id)
        if self.in_place:
            block = block.render_in_place()

        block.begin()
        try:
            web_view.output.write(self.nodelist.render(context))
        except Exception:
            web_view.output.discard_capture()
            raise
        return block.end()


@register.tag(name='outputblock')
def do_outputblock(parser, token):
    """
    Capture the enclosed output into a named block:

        {% outputblock "sidebar" %}...{% endoutputblock %}
        {% outputblock "notice" inplace %}...{% endoutputblock %}
    """
    bits = token.split_contents()
    tag_name = bits.pop(0)

    in_place = False
    if bits and bits[-1] == 'inplace':
        in_place = True
        bits.pop()

    if len(bits) > 1:
        raise template.TemplateSyntaxError(
            "%r tag takes at most a block id and the 'inplace' flag" % tag_name
        )
    block_id = parser.compile_filter(bits[0]) if bits else None

    nodelist = parser.parse(('endoutputblock',))
    parser.delete_first_token()

    return OutputBlockNode(nodelist, block_id, in_place)


@register.simple_tag(takes_context=True)
def renderblock(context, block_id, default=''):
    """Emit the block stored under block_id, or default when there is none."""
    web_view = get_web_view(context)
    if not web_view.has_block(block_id):
        return default
    return mark_safe(web_view.get_block(block_id))


@register.simple_tag(takes_context=True)
def hasblock(context, block_id):
    return get_web_view(context).has_block(block_id)
