import pytest

from blocks.capture import OutputBuffer
from blocks.view import WebView


@pytest.fixture
def output_buffer():
    return OutputBuffer()


@pytest.fixture
def web_view(output_buffer):
    """A view context with its own output buffer."""
    return WebView(output=output_buffer)
