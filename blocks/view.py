"""View context shared by every template rendered during one request."""
import logging

from blocks.capture import OutputBuffer
from blocks.exceptions import BlockNotFound

logger = logging.getLogger(__name__)


class WebView:
    """
    Holds the named blocks and the output buffer of a render pass.

    Blocks written by one template (a page) can be read back by another
    template rendered later against the same view (its layout).
    """

    def __init__(self, output=None):
        self.output = output if output is not None else OutputBuffer()
        self._blocks = {}

    def set_block(self, block_id, content):
        """Store content under block_id, replacing any earlier content."""
        if block_id in self._blocks:
            logger.debug(f"Overwriting block '{block_id}'")
        self._blocks[block_id] = content

    def get_block(self, block_id):
        """
        Return the content stored under block_id.

        Raises:
            BlockNotFound: If nothing was stored under block_id.
        """
        try:
            return self._blocks[block_id]
        except KeyError:
            raise BlockNotFound(f'Block "{block_id}" not found.') from None

    def has_block(self, block_id):
        return block_id in self._blocks

    def remove_block(self, block_id):
        self._blocks.pop(block_id, None)

    def get_blocks(self):
        return dict(self._blocks)

    def clear_blocks(self):
        self._blocks.clear()
