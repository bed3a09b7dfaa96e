"""
Middleware giving every request its own view context.
"""
import logging
from django.utils.deprecation import MiddlewareMixin

from blocks.view import WebView

logger = logging.getLogger(__name__)


class WebViewMiddleware(MiddlewareMixin):
    """
    Attaches a fresh WebView to request.web_view so that every template
    rendered for the request shares one block store and output buffer.
    """

    def process_request(self, request):
        request.web_view = WebView()
        return None

    def process_response(self, request, response):
        web_view = getattr(request, 'web_view', None)
        if web_view is not None and web_view.output.level:
            logger.warning(
                f"Request to {request.path} finished with {web_view.output.level} unclosed output capture(s)"
            )
        return response
