from blocks.view import WebView


def web_view(request):
    """Expose the request's WebView to templates as 'web_view'.

    Creates one on the request when WebViewMiddleware is not installed, so
    later renders for the same request still share it.
    """
    view = getattr(request, 'web_view', None)
    if view is None:
        view = WebView()
        request.web_view = view
    return {'web_view': view}
