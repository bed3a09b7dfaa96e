"""App-level settings for blocks, read from the Django settings module."""
from django.conf import settings


def in_place_requires_id():
    """Whether blocks rendered in place still need an id to end.

    Defaults to True, which keeps the id check ahead of in-place rendering.
    """
    return getattr(settings, 'BLOCKS_IN_PLACE_REQUIRES_ID', True)
