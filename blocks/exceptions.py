"""Exceptions raised by the blocks app."""
from django.core.exceptions import ImproperlyConfigured


class BlocksError(Exception):
    """Base class for errors raised by the blocks app."""


class MissingIdentifier(BlocksError, ImproperlyConfigured):
    """Raised when a block reaches its end without an id."""


class CaptureError(BlocksError):
    """Raised when the output capture stack is used out of order."""


class WidgetStateError(BlocksError):
    """Raised when a widget's begin()/end() calls do not pair up."""


class BlockNotFound(BlocksError, LookupError):
    """Raised when reading a block that was never stored."""
