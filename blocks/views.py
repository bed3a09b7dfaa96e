"""Views that render a page and then wrap it in a layout."""
from django.template.loader import render_to_string
from django.utils.safestring import mark_safe
from django.views.generic import TemplateView


class LayoutTemplateMixin:
    """
    Render the view's template first, then render the layout template with the
    page output available as 'content'.

    Both renders go through the same request, so blocks the page stores with
    {% outputblock %} can be read by the layout with {% renderblock %}.
    """
    layout_template_name = 'blocks/layout.html'

    def get_layout_template_name(self):
        return self.layout_template_name

    def render_to_response(self, context, **response_kwargs):
        content = render_to_string(
            self.get_template_names(), context, request=self.request, using=self.template_engine
        )
        context['content'] = mark_safe(content)

        response_kwargs.setdefault('content_type', self.content_type)
        return self.response_class(
            request=self.request,
            template=[self.get_layout_template_name()],
            context=context,
            using=self.template_engine,
            **response_kwargs,
        )


class PageView(LayoutTemplateMixin, TemplateView):
    """Demo page whose title and sidebar are defined as blocks."""
    template_name = 'blocks/page.html'
