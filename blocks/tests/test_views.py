from django.test import RequestFactory, SimpleTestCase
from django.urls import reverse
from django.views.generic import TemplateView

from blocks.views import LayoutTemplateMixin


class InlineLayoutView(LayoutTemplateMixin, TemplateView):
    template_name = 'blocks/page.html'


class PageViewTests(SimpleTestCase):
    """Tests for rendering a page through its layout."""

    def test_layout_renders_blocks_defined_by_page(self):
        response = self.client.get(reverse('blocks_page'))

        self.assertEqual(response.status_code, 200)
        content = response.content.decode()
        self.assertIn('<title>Welcome</title>', content)
        self.assertIn('<aside><ul><li><a href="/">Home</a></li></ul></aside>', content)
        self.assertIn('Blocks defined on this page are shown by its layout.', content)
        self.assertIn('<p class="notice">Rendered in place.</p>', content)

    def test_stored_blocks_are_not_emitted_by_page(self):
        """Test that block content only appears where the layout renders it."""
        response = self.client.get(reverse('blocks_page'))
        main = response.content.decode().split('<main>', 1)[1]
        self.assertNotIn('Welcome', main)
        self.assertNotIn('<ul>', main)

    def test_uses_layout_template(self):
        response = self.client.get(reverse('blocks_page'))
        self.assertTemplateUsed(response, 'blocks/layout.html')

    def test_mixin_without_middleware(self):
        """Test that the context processor alone shares one view across both renders."""
        request = RequestFactory().get('/')
        response = InlineLayoutView.as_view()(request)
        response.render()

        self.assertIn('<title>Welcome</title>', response.content.decode())
        self.assertEqual(request.web_view.get_block('title'), 'Welcome')

    def test_layout_template_name_can_be_overridden(self):
        view = InlineLayoutView(layout_template_name='custom/layout.html')
        self.assertEqual(view.get_layout_template_name(), 'custom/layout.html')
