"""
Block records all output between begin() and end() and stores it in the view.

A page defines a block:

    sidebar = Block(web_view).id('sidebar')
    sidebar.begin()
    web_view.output.write('<ul>...</ul>')
    sidebar.end()

and a layout rendered later against the same view reads it back with
web_view.get_block('sidebar'). With render_in_place() the captured output is
returned by end() instead of being stored.
"""
import logging

from blocks import conf
from blocks.exceptions import MissingIdentifier
from blocks.widget import Widget

logger = logging.getLogger(__name__)


class Block(Widget):
    """Named, capturable region of rendered output."""

    def __init__(self, web_view, capturer=None, require_id_in_place=None):
        """
        Args:
            web_view: WebView the captured block is stored in.
            capturer: Capturer to record output with. Defaults to the view's
                output buffer.
            require_id_in_place: Whether in-place rendering still needs an id.
                Defaults to the BLOCKS_IN_PLACE_REQUIRES_ID setting.
        """
        super().__init__()
        self._id = None
        self._render_in_place = False
        self._web_view = web_view
        self._capturer = capturer if capturer is not None else web_view.output
        if require_id_in_place is None:
            require_id_in_place = conf.in_place_requires_id()
        self._require_id_in_place = require_id_in_place

    @property
    def block_id(self):
        return self._id

    @property
    def renders_in_place(self):
        return self._render_in_place

    def id(self, value):
        """Return a copy of this block that stores its output under value."""
        return self._clone(_id=value)

    def render_in_place(self):
        """Return a copy of this block whose end() returns the captured output.

        Without it the captured content is stored and not displayed.
        """
        return self._clone(_render_in_place=True)

    def begin(self):
        """Start recording the block."""
        super().begin()
        self._capturer.start_capture()
        return None

    def run(self):
        """Stop recording and either store the block or return it in place.

        Returns:
            The captured output when rendering in place, otherwise ''.
        """
        if self._id is None and (self._require_id_in_place or not self._render_in_place):
            self._capturer.discard_capture()
            raise MissingIdentifier('You must assign the "id" using the "id()" setter.')

        block = self._capturer.stop_capture_and_retrieve()

        if self._render_in_place:
            return block

        if block:
            self._web_view.set_block(self._id, block)
            logger.debug(f"Stored block '{self._id}' ({len(block)} characters)")
        else:
            logger.debug(f"Block '{self._id}' captured no output, nothing stored")

        return ''
